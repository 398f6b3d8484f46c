"""
Configurações centralizadas da aplicação

Lidas do ambiente uma única vez no início do processo (get_settings é memoizado)
e imutáveis depois disso. Componentes recebem os valores por injeção no construtor.
"""
import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Mapping, Optional

from domain.constants import Cache, Geocoding

_TRUE_VALUES = ('true', '1', 'yes')


def _env_flag(env: Mapping[str, str], name: str, default: str) -> bool:
    return env.get(name, default).lower() in _TRUE_VALUES


@dataclass(frozen=True)
class Settings:
    openweather_api_key: Optional[str]
    cache_backend: str
    cache_enabled: bool
    cache_table_name: str
    cache_freshness_seconds: int
    aws_region: str
    default_country: str
    cors_origin: str

    @property
    def has_api_key(self) -> bool:
        return bool(self.openweather_api_key)

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> 'Settings':
        env = os.environ if env is None else env
        return cls(
            openweather_api_key=env.get('OPENWEATHER_API_KEY') or None,
            cache_backend=env.get('CACHE_BACKEND', Cache.BACKEND_MEMORY).lower(),
            cache_enabled=_env_flag(env, 'CACHE_ENABLED', 'true'),
            cache_table_name=env.get('CACHE_TABLE_NAME', Cache.DEFAULT_TABLE_NAME),
            cache_freshness_seconds=int(env.get('CACHE_FRESHNESS_SECONDS', str(Cache.FRESHNESS_SECONDS))),
            aws_region=env.get('AWS_REGION', 'us-east-1'),
            default_country=env.get('GEOCODING_DEFAULT_COUNTRY', Geocoding.DEFAULT_COUNTRY).upper(),
            cors_origin=env.get('CORS_ORIGIN', '*')
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Settings do processo (carregados na primeira chamada)"""
    return Settings.from_env()
