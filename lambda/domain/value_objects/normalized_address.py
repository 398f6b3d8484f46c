"""
Value Object para endereço normalizado (chave primária do cache)
"""
import re
from dataclasses import dataclass

from domain.constants import Geocoding
from domain.exceptions import InvalidAddressException

_NUMERIC_RE = re.compile(Geocoding.NUMERIC_PATTERN)
_ALPHANUMERIC_POSTAL_RE = re.compile(Geocoding.ALPHANUMERIC_POSTAL_PATTERN)


@dataclass(frozen=True)
class NormalizedAddress:
    """
    Endereço em minúsculas e sem espaços nas pontas

    Dois endereços que diferem apenas em caixa ou espaços externos
    resultam na mesma chave.
    """
    value: str

    @classmethod
    def from_raw(cls, raw: str) -> 'NormalizedAddress':
        """
        Normaliza endereço informado pelo usuário

        Raises:
            InvalidAddressException: Se o endereço estiver vazio
        """
        if raw is None or not str(raw).strip():
            raise InvalidAddressException(
                "Address cannot be empty",
                details={"address": raw}
            )
        return cls(value=str(raw).strip().lower())

    def __str__(self) -> str:
        return self.value


def is_numeric_postal_code(address: str) -> bool:
    """True quando o endereço (já sem espaços externos) contém apenas dígitos"""
    return bool(_NUMERIC_RE.match(address.strip()))


def looks_like_alphanumeric_postal_code(address: str) -> bool:
    """Detecta códigos postais como 'SW1A 1AA' ou 'H2X 1Y4' (não puramente numéricos)"""
    candidate = address.strip()
    return bool(_ALPHANUMERIC_POSTAL_RE.match(candidate)) and not is_numeric_postal_code(candidate)
