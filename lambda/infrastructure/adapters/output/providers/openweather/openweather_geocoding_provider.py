"""
OpenWeather Geocoding Provider
Geocodificação por texto livre (/geo/1.0/direct) e por código postal (/geo/1.0/zip)
"""
import asyncio
from typing import Any, Callable, Dict, Optional, Tuple

import aiohttp
from ddtrace import tracer

from application.ports.output.geocoding_provider_port import IGeocodingProvider
from domain.constants import API
from domain.exceptions import ApiKeyMissingException, GeocodingProviderException
from domain.value_objects.coordinates import Coordinates
from domain.value_objects.geocode_attempt import GeocodeAttempt
from infrastructure.adapters.output.http.aiohttp_session_manager import (
    AiohttpSessionManager,
    get_aiohttp_session_manager,
)
from infrastructure.adapters.output.providers.openweather.mappers import OpenWeatherDataMapper
from shared.config.logger_config import get_logger

logger = get_logger(child=True)


class OpenWeatherGeocodingProvider(IGeocodingProvider):
    """
    Provider de geocodificação do OpenWeather

    Cada chamada produz exatamente um GeocodeAttempt:
    - 200 com dados válidos -> FOUND
    - 404 -> NOT_FOUND (negativa definitiva)
    - 200 sem dados utilizáveis -> UNAVAILABLE
    - rede, timeout, 401/429/5xx -> GeocodingProviderException
    """

    def __init__(
        self,
        api_key: Optional[str],
        base_url: str = API.OPENWEATHER_GEO_BASE_URL,
        session_manager: Optional[AiohttpSessionManager] = None
    ):
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

    @tracer.wrap(resource="openweather.geocode_direct")
    async def geocode_direct(self, query: str) -> GeocodeAttempt:
        status, data = await self._get("direct", {"q": query, "limit": 1}, lookup=query)

        if status == 404:
            return GeocodeAttempt.not_found(detail=f"direct:{query}")

        coordinates = self._map(OpenWeatherDataMapper.map_direct_geocode, data, lookup=query)
        if coordinates is None:
            logger.info("Geocodificação retornou 200 sem dados válidos", provider=self.provider_name, query=query)
            return GeocodeAttempt.unavailable(detail=f"direct:{query}")

        return GeocodeAttempt.found(coordinates)

    @tracer.wrap(resource="openweather.geocode_postal_code")
    async def geocode_postal_code(self, postal_code: str, country_code: str) -> GeocodeAttempt:
        lookup = f"{postal_code},{country_code}"
        status, data = await self._get("zip", {"zip": lookup}, lookup=lookup)

        if status == 404:
            logger.debug("Código postal não encontrado", postal_code=postal_code, country=country_code)
            return GeocodeAttempt.not_found(detail=f"zip:{lookup}")

        coordinates = self._map(
            OpenWeatherDataMapper.map_zip_geocode, data, postal_code, country_code, lookup=lookup
        )
        if coordinates is None:
            logger.info(
                "Geocodificação postal retornou 200 sem dados válidos",
                provider=self.provider_name,
                postal_code=postal_code,
                country=country_code
            )
            return GeocodeAttempt.unavailable(detail=f"zip:{lookup}")

        return GeocodeAttempt.found(coordinates)

    def _map(self, mapper: Callable[..., Optional[Coordinates]], *args: Any, lookup: str) -> Optional[Coordinates]:
        """Aplica o mapper; coordenadas fora de faixa ou não numéricas viram None"""
        try:
            return mapper(*args)
        except (ValueError, TypeError, AttributeError) as ex:
            logger.warning(
                "Geocodificação retornou coordenadas inválidas",
                provider=self.provider_name,
                lookup=lookup,
                error=str(ex)
            )
            return None

    async def _get(self, endpoint: str, params: Dict[str, Any], lookup: str) -> Tuple[int, Any]:
        """
        Executa GET no endpoint de geocodificação

        Returns:
            (status, json) - json é None para 404 ou corpo não-JSON

        Raises:
            ApiKeyMissingException: Sem credencial configurada
            GeocodingProviderException: Falha de transporte ou status inesperado
        """
        if not self.api_key:
            raise ApiKeyMissingException("OpenWeather API key is not configured", details={"endpoint": endpoint})

        url = f"{self.base_url}/{endpoint}"
        query_params = {**params, "appid": self.api_key}

        try:
            session = await self.session_manager.get_session()
            async with session.get(url, params=query_params) as response:
                status = response.status
                logger.debug("Resposta de geocodificação", endpoint=endpoint, lookup=lookup, status=status)

                if status == 404:
                    return status, None

                if status >= 400:
                    raise GeocodingProviderException(
                        "OpenWeather geocoding request failed",
                        details={"endpoint": endpoint, "lookup": lookup, "status": status}
                    )

                try:
                    data = await response.json(content_type=None)
                except ValueError:
                    logger.warning("Resposta de geocodificação não é JSON", endpoint=endpoint, lookup=lookup)
                    data = None

        except (aiohttp.ClientError, asyncio.TimeoutError) as ex:
            raise GeocodingProviderException(
                f"OpenWeather geocoding request failed: {str(ex)}",
                details={"endpoint": endpoint, "lookup": lookup}
            ) from ex

        return status, data
