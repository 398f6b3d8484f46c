"""
Value Object com o resultado de uma única chamada de geocodificação
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from domain.value_objects.coordinates import Coordinates


class GeocodeStatus(str, Enum):
    """Resultado possível de uma tentativa de geocodificação"""
    FOUND = "found"
    NOT_FOUND = "not_found"  # provider respondeu 404: negativa definitiva
    UNAVAILABLE = "unavailable"  # resposta ambígua ou inutilizável


@dataclass(frozen=True)
class GeocodeAttempt:
    status: GeocodeStatus
    coordinates: Optional[Coordinates] = None
    detail: Optional[str] = None

    @classmethod
    def found(cls, coordinates: Coordinates) -> 'GeocodeAttempt':
        return cls(status=GeocodeStatus.FOUND, coordinates=coordinates)

    @classmethod
    def not_found(cls, detail: Optional[str] = None) -> 'GeocodeAttempt':
        return cls(status=GeocodeStatus.NOT_FOUND, detail=detail)

    @classmethod
    def unavailable(cls, detail: Optional[str] = None) -> 'GeocodeAttempt':
        return cls(status=GeocodeStatus.UNAVAILABLE, detail=detail)

    @property
    def is_found(self) -> bool:
        return self.status == GeocodeStatus.FOUND and self.coordinates is not None

    @property
    def is_not_found(self) -> bool:
        return self.status == GeocodeStatus.NOT_FOUND
