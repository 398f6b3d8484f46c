"""
Cache Entry Entity - Registro de clima armazenado com carimbo de criação
"""
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional, Dict, Any

from domain.value_objects.coordinates import Coordinates
from domain.value_objects.normalized_address import NormalizedAddress


@dataclass(frozen=True)
class CacheKey:
    """
    Chave do cache: endereço normalizado + coordenadas (opcional)

    location=None representa a consulta independente de coordenadas:
    qualquer entrada fresca do endereço satisfaz a leitura.
    """
    address: str
    location: Optional[str] = None

    @classmethod
    def for_address(cls, address: NormalizedAddress) -> 'CacheKey':
        return cls(address=address.value)

    @classmethod
    def for_location(cls, address: NormalizedAddress, coordinates: Coordinates) -> 'CacheKey':
        return cls(address=address.value, location=coordinates.location_key())

    @property
    def is_address_only(self) -> bool:
        return self.location is None

    def __str__(self) -> str:
        if self.location is None:
            return f"weather_cache:{self.address}"
        return f"weather_cache:{self.address}:{self.location}"


@dataclass(frozen=True)
class CacheEntry:
    """
    Entrada imutável do cache

    record guarda o WeatherRecord serializado (dict). A entrada é fresca
    enquanto now - created_at < janela de frescor.
    """
    key: CacheKey
    record: Dict[str, Any]
    created_at: datetime

    def age(self, now: datetime) -> timedelta:
        return now - self.created_at

    def is_fresh(self, now: datetime, freshness_seconds: int) -> bool:
        return self.age(now) < timedelta(seconds=freshness_seconds)
