"""
Arredondamento de valores meteorológicos para exibição
"""
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional, Union

Number = Union[int, float]


def round_half_up(value: Optional[Number]) -> Optional[int]:
    """
    Arredonda para inteiro com meio para cima (72.5 -> 73, -0.5 -> -1)

    Returns:
        Inteiro arredondado ou None quando o valor está ausente
    """
    if value is None:
        return None
    return int(Decimal(str(value)).quantize(Decimal('1'), rounding=ROUND_HALF_UP))
