"""
Infrastructure Layer - Clean Architecture
Contém implementações concretas de cache, clientes HTTP e provedores externos
"""

from infrastructure.adapters.cache.async_dynamodb_cache import AsyncDynamoDBWeatherCache
from infrastructure.adapters.cache.in_memory_weather_cache import InMemoryWeatherCache
from infrastructure.adapters.output.http.aiohttp_session_manager import get_aiohttp_session_manager
from infrastructure.adapters.output.http.dynamodb_client_manager import get_dynamodb_client_manager
from infrastructure.adapters.output.providers import (
    OpenWeatherProvider,
    OpenWeatherGeocodingProvider,
    WeatherServiceFactory
)

__all__ = [
    'AsyncDynamoDBWeatherCache',
    'InMemoryWeatherCache',
    'get_aiohttp_session_manager',
    'get_dynamodb_client_manager',
    'OpenWeatherProvider',
    'OpenWeatherGeocodingProvider',
    'WeatherServiceFactory'
]
