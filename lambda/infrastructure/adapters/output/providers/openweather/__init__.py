"""OpenWeather Provider Package"""

from infrastructure.adapters.output.providers.openweather.openweather_provider import OpenWeatherProvider
from infrastructure.adapters.output.providers.openweather.openweather_geocoding_provider import (
    OpenWeatherGeocodingProvider
)

__all__ = ['OpenWeatherProvider', 'OpenWeatherGeocodingProvider']
