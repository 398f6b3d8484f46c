"""OpenWeather Provider - clima atual (/weather) e previsão de 5 dias em passos de 3h (/forecast)"""

import asyncio
from typing import Any, Callable, Dict, List, Optional, TypeVar

import aiohttp
from ddtrace import tracer

from application.ports.output.weather_provider_port import IWeatherProvider
from domain.constants import API
from domain.entities.forecast_sample import ForecastSample
from domain.entities.weather_record import CurrentConditions
from domain.exceptions import ApiKeyMissingException, WeatherProviderException
from domain.value_objects.coordinates import Coordinates
from infrastructure.adapters.output.http.aiohttp_session_manager import (
    AiohttpSessionManager,
    get_aiohttp_session_manager,
)
from infrastructure.adapters.output.providers.openweather.mappers import OpenWeatherDataMapper

T = TypeVar("T")


class OpenWeatherProvider(IWeatherProvider):
    """
    Provider para OpenWeather Data API 2.5

    Características:
    - Current weather (temp, feels_like, min/max, humidity, pressure, wind)
    - Previsão de 5 dias em amostras de 3 horas
    - Unidades imperiais (°F, mph)
    - 100% async com aiohttp, sem cache próprio (cache fica no use case)
    """

    def __init__(
        self,
        api_key: Optional[str],
        base_url: str = API.OPENWEATHER_BASE_URL,
        session_manager: Optional[AiohttpSessionManager] = None
    ):
        """
        Inicializa provider

        Args:
            api_key: OpenWeather API key (validada pelo use case)
            base_url: URL base da Data API
            session_manager: Gerenciador de sessão (usa singleton se None)
        """
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.session_manager = session_manager or get_aiohttp_session_manager(
            total_timeout=API.HTTP_TIMEOUT_TOTAL,
            connect_timeout=API.HTTP_TIMEOUT_CONNECT,
            sock_read_timeout=API.HTTP_TIMEOUT_READ,
            limit=API.HTTP_CONNECTION_LIMIT,
            limit_per_host=API.HTTP_CONNECTION_LIMIT_PER_HOST,
            ttl_dns_cache=API.DNS_CACHE_TTL
        )

    @property
    def provider_name(self) -> str:
        return "OpenWeather"

    @tracer.wrap(resource="openweather.get_current_conditions")
    async def get_current_conditions(self, coordinates: Coordinates) -> CurrentConditions:
        data = await self._get("weather", coordinates)
        return self._map(OpenWeatherDataMapper.map_current_conditions, data, "weather", coordinates)

    @tracer.wrap(resource="openweather.get_forecast_samples")
    async def get_forecast_samples(self, coordinates: Coordinates) -> List[ForecastSample]:
        data = await self._get("forecast", coordinates)
        return self._map(OpenWeatherDataMapper.map_forecast_samples, data, "forecast", coordinates)

    def _map(
        self,
        mapper: Callable[[Dict[str, Any]], T],
        data: Dict[str, Any],
        endpoint: str,
        coordinates: Coordinates
    ) -> T:
        """Aplica o mapper; corpo com formato inesperado vira WeatherProviderException"""
        try:
            return mapper(data)
        except (ValueError, TypeError, AttributeError, KeyError, IndexError, ArithmeticError) as ex:
            raise WeatherProviderException(
                "OpenWeather returned unexpected payload",
                details={
                    "endpoint": endpoint,
                    "location": coordinates.location_key(),
                    "provider": self.provider_name,
                    "error": str(ex)
                }
            ) from ex

    async def _get(self, endpoint: str, coordinates: Coordinates) -> Dict[str, Any]:
        """
        GET em /{endpoint} com lat/lon

        Raises:
            ApiKeyMissingException: Sem credencial configurada
            WeatherProviderException: Falha de rede, timeout, status != 200 ou corpo inválido
        """
        if not self.api_key:
            raise ApiKeyMissingException("OpenWeather API key is not configured", details={"endpoint": endpoint})

        url = f"{self.base_url}/{endpoint}"
        params = {
            'lat': coordinates.latitude,
            'lon': coordinates.longitude,
            'units': API.OPENWEATHER_UNITS,
            'appid': self.api_key
        }
        details = {"endpoint": endpoint, "location": coordinates.location_key()}

        try:
            session = await self.session_manager.get_session()
            async with session.get(url, params=params) as response:
                if response.status != 200:
                    raise WeatherProviderException(
                        "OpenWeather request failed",
                        details={**details, "status": response.status}
                    )
                data = await response.json(content_type=None)

        except (aiohttp.ClientError, asyncio.TimeoutError) as ex:
            raise WeatherProviderException(
                f"OpenWeather request failed: {str(ex)}",
                details=details
            ) from ex
        except ValueError as ex:
            raise WeatherProviderException("OpenWeather returned invalid JSON", details=details) from ex

        if not isinstance(data, dict):
            raise WeatherProviderException("OpenWeather returned unexpected payload", details=details)

        return data
