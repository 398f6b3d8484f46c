"""
Value Object para coordenadas geográficas
Garante imutabilidade e validação no domínio
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class Coordinates:
    """
    Value Object para coordenadas geográficas resolvidas

    Características:
    - Imutável (frozen=True)
    - Auto-validação no __post_init__
    - Produzido apenas pelo resolvedor de coordenadas
    - location_key() compõe a chave de cache (endereço + coordenadas)
    """
    latitude: float
    longitude: float
    resolved_name: str = ""

    def __post_init__(self):
        """Valida coordenadas no momento da criação"""
        if not (-90 <= self.latitude <= 90):
            raise ValueError(
                f"Latitude inválida: {self.latitude}. "
                f"Deve estar entre -90 e 90 graus."
            )
        if not (-180 <= self.longitude <= 180):
            raise ValueError(
                f"Longitude inválida: {self.longitude}. "
                f"Deve estar entre -180 e 180 graus."
            )

    def location_key(self) -> str:
        """
        Representação "lat,lon" usada como parte da chave de cache

        Example:
            >>> Coordinates(40.75, -73.99).location_key()
            '40.75,-73.99'
        """
        return f"{self.latitude},{self.longitude}"
