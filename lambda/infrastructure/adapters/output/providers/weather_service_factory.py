"""
Weather Service Factory - montagem centralizada do use case de clima por endereço
"""
from typing import Optional

from application.ports.output.weather_cache_repository_port import IWeatherCacheRepository
from application.services.cache_service import CacheService
from application.services.coordinate_resolver import CoordinateResolver, ResolverConfig
from application.services.forecast_fetcher import ForecastFetcher
from application.use_cases.resolve_weather_use_case import ResolveWeatherUseCase
from domain.constants import Cache
from infrastructure.adapters.cache.async_dynamodb_cache import AsyncDynamoDBWeatherCache
from infrastructure.adapters.cache.in_memory_weather_cache import InMemoryWeatherCache
from infrastructure.adapters.output.providers.openweather import (
    OpenWeatherGeocodingProvider,
    OpenWeatherProvider
)
from shared.config.logger_config import get_logger
from shared.config.settings import Settings, get_settings

logger = get_logger(child=True)


class WeatherServiceFactory:
    """
    Factory que liga providers, cache e serviços de aplicação.
    Mantém lazy-loading e reuso das instâncias em execução quente da Lambda.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        self._cache: Optional[IWeatherCacheRepository] = None
        self._weather_provider: Optional[OpenWeatherProvider] = None
        self._geocoding_provider: Optional[OpenWeatherGeocodingProvider] = None
        self._use_case: Optional[ResolveWeatherUseCase] = None

    def get_cache(self) -> IWeatherCacheRepository:
        """Backend de cache conforme CACHE_BACKEND (memory | dynamodb)"""
        if self._cache is None:
            backend = self.settings.cache_backend
            if backend == Cache.BACKEND_DYNAMODB:
                self._cache = AsyncDynamoDBWeatherCache(
                    table_name=self.settings.cache_table_name,
                    region_name=self.settings.aws_region,
                    freshness_seconds=self.settings.cache_freshness_seconds,
                    enabled=self.settings.cache_enabled
                )
            else:
                if backend != Cache.BACKEND_MEMORY:
                    logger.warning("Backend de cache desconhecido, usando memória", backend=backend)
                self._cache = InMemoryWeatherCache(
                    freshness_seconds=self.settings.cache_freshness_seconds,
                    enabled=self.settings.cache_enabled
                )
            logger.info(
                "Cache configurado",
                backend=type(self._cache).__name__,
                enabled=self.settings.cache_enabled
            )
        return self._cache

    def get_weather_provider(self) -> OpenWeatherProvider:
        if self._weather_provider is None:
            self._weather_provider = OpenWeatherProvider(api_key=self.settings.openweather_api_key)
        return self._weather_provider

    def get_geocoding_provider(self) -> OpenWeatherGeocodingProvider:
        if self._geocoding_provider is None:
            self._geocoding_provider = OpenWeatherGeocodingProvider(api_key=self.settings.openweather_api_key)
        return self._geocoding_provider

    def get_resolve_weather_use_case(self) -> ResolveWeatherUseCase:
        if self._use_case is None:
            self._use_case = ResolveWeatherUseCase(
                coordinate_resolver=CoordinateResolver(
                    geocoding_provider=self.get_geocoding_provider(),
                    config=ResolverConfig(default_country=self.settings.default_country)
                ),
                forecast_fetcher=ForecastFetcher(weather_provider=self.get_weather_provider()),
                cache_service=CacheService(self.get_cache()),
                api_key=self.settings.openweather_api_key
            )
        return self._use_case


# Factory singleton global
_factory_instance: Optional[WeatherServiceFactory] = None


def get_weather_service_factory(settings: Optional[Settings] = None) -> WeatherServiceFactory:
    """Retorna singleton da factory (criada na primeira chamada)"""
    global _factory_instance

    if _factory_instance is None:
        _factory_instance = WeatherServiceFactory(settings=settings)

    return _factory_instance
