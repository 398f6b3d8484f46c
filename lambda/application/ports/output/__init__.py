"""
Output Ports - Interfaces para comunicação com infraestrutura externa
Define contratos que devem ser implementados pelos adapters de saída
"""

from .geocoding_provider_port import IGeocodingProvider
from .weather_provider_port import IWeatherProvider
from .weather_cache_repository_port import IWeatherCacheRepository
