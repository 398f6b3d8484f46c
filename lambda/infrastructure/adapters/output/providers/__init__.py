"""Infrastructure Providers - Implementações de provedores de clima e geocodificação"""

from infrastructure.adapters.output.providers.openweather import (
    OpenWeatherProvider,
    OpenWeatherGeocodingProvider
)
from infrastructure.adapters.output.providers.weather_service_factory import (
    WeatherServiceFactory,
    get_weather_service_factory
)

__all__ = [
    'OpenWeatherProvider',
    'OpenWeatherGeocodingProvider',
    'WeatherServiceFactory',
    'get_weather_service_factory'
]
