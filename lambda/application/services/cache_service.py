"""
Serviço de cache para a camada de aplicação.
Centraliza leitura/gravação de registros de clima sem expor detalhes de adapters
e garante que falhas do backend nunca interrompam a requisição.
"""
from typing import Optional

from application.ports.output.weather_cache_repository_port import IWeatherCacheRepository
from domain.entities.cache_entry import CacheEntry, CacheKey
from domain.entities.weather_record import WeatherRecord
from shared.config.logger_config import get_logger

logger = get_logger(child=True)


class CacheService:
    """Coordena operações de cache assíncronas via porta de saída."""

    def __init__(self, cache_repository: Optional[IWeatherCacheRepository]):
        self.cache_repository = cache_repository

    def _cache_available(self) -> bool:
        return bool(self.cache_repository and self.cache_repository.is_enabled())

    async def lookup(self, key: CacheKey) -> Optional[CacheEntry]:
        """
        Busca entrada fresca; qualquer erro vira cache MISS.
        """
        if not self._cache_available():
            return None

        try:
            entry = await self.cache_repository.get(key)
        except Exception as ex:
            logger.warning("Falha ao ler cache, seguindo sem cache", cache_key=str(key), error=str(ex))
            return None

        if entry is not None:
            logger.info("Cache HIT", cache_key=str(key), cached_at=entry.created_at.isoformat())
        else:
            logger.debug("Cache MISS", cache_key=str(key))
        return entry

    async def store(self, key: CacheKey, record: WeatherRecord) -> Optional[CacheEntry]:
        """
        Grava registro (write-through); erros são registrados e ignorados.
        """
        if not self._cache_available():
            return None

        try:
            entry = await self.cache_repository.put(key, record.to_dict())
        except Exception as ex:
            logger.warning("Falha ao gravar cache", cache_key=str(key), error=str(ex))
            return None

        if entry is not None:
            logger.debug("Registro de clima armazenado", cache_key=str(key))
        return entry
