"""
Validators Utility
Saneamento de entrada antes de chegar ao use case
"""
import re
from typing import Optional

# Blocos executáveis são removidos com o conteúdo
_SCRIPT_BLOCK_RE = re.compile(r'<(script|style)\b[^>]*>.*?</\1\s*>', re.IGNORECASE | re.DOTALL)
_TAG_RE = re.compile(r'<[^>]*>')
_UNSAFE_CHARS_RE = re.compile(r'[<>\'"\\]')


class AddressSanitizer:
    """Remove marcação HTML e caracteres perigosos do endereço informado"""

    @staticmethod
    def sanitize(address: Optional[str]) -> Optional[str]:
        """
        Sanitiza endereço

        Args:
            address: Valor bruto do parâmetro (pode ser None)

        Returns:
            Endereço sem tags, sem <>'"\\ e sem espaços nas pontas;
            None se a entrada for None ou vazia
        """
        if address is None or not str(address).strip():
            return None

        cleaned = _SCRIPT_BLOCK_RE.sub('', str(address))
        cleaned = _TAG_RE.sub('', cleaned)
        cleaned = _UNSAFE_CHARS_RE.sub('', cleaned)
        return cleaned.strip()
