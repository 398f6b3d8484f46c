"""
Async Use Case: Resolve Weather by Address
Cache-aside over geocoding + OpenWeather current/forecast calls
"""
from typing import Optional

from ddtrace import tracer

from application.ports.input.resolve_weather_port import IResolveWeatherUseCase
from application.services.cache_service import CacheService
from application.services.coordinate_resolver import CoordinateResolver
from application.services.forecast_fetcher import ForecastFetcher
from domain.entities.cache_entry import CacheEntry, CacheKey
from domain.entities.resolution_outcome import (
    CacheHit,
    Failure,
    FailureKind,
    Fresh,
    NotFound,
    ResolutionOutcome,
)
from domain.entities.weather_record import WeatherRecord
from domain.exceptions import (
    ApiKeyMissingException,
    InvalidAddressException,
    LocationNotFoundException,
    ProviderException,
)
from domain.value_objects.normalized_address import NormalizedAddress
from shared.config.logger_config import get_logger

logger = get_logger(child=True)


class ResolveWeatherUseCase(IResolveWeatherUseCase):
    """
    Async use case: address -> weather record

    Sole translation point from domain exceptions to ResolutionOutcome.
    Each upstream call is attempted at most once per execution (no retries).
    """

    def __init__(
        self,
        coordinate_resolver: CoordinateResolver,
        forecast_fetcher: ForecastFetcher,
        cache_service: CacheService,
        api_key: Optional[str]
    ):
        self.coordinate_resolver = coordinate_resolver
        self.forecast_fetcher = forecast_fetcher
        self.cache_service = cache_service
        self.api_key = api_key

    @tracer.wrap(resource="use_case.resolve_weather")
    async def execute(self, address: str) -> ResolutionOutcome:
        """
        Execute use case asynchronously

        Args:
            address: Free-form address (already sanitized by the input adapter)

        Returns:
            CacheHit, Fresh, NotFound or Failure
        """
        # 1. Blank input
        try:
            normalized = NormalizedAddress.from_raw(address)
        except InvalidAddressException as ex:
            logger.warning("Invalid address", error=str(ex))
            return Failure(kind=FailureKind.INVALID_INPUT, message="Address parameter is required")

        # 2. Credential (fatal, not retryable)
        if not self.api_key:
            return self._config_missing()

        # 3. Coordinate-independent lookup
        entry = await self.cache_service.lookup(CacheKey.for_address(normalized))
        if entry is not None:
            return self._cache_hit(entry, address)

        # 4. Geocoding
        try:
            coordinates = await self.coordinate_resolver.resolve(address)
        except LocationNotFoundException as ex:
            logger.info("Location not found", address=address, details=ex.details)
            return NotFound(reason=ex.message)
        except ApiKeyMissingException:
            return self._config_missing()
        except ProviderException as ex:
            logger.error("Geocoding provider error", address=address, error=str(ex), details=ex.details)
            return Failure(kind=FailureKind.PROVIDER_ERROR, message="There was an issue retrieving weather data.")

        if coordinates is None:
            logger.error("Failed to geocode address", address=address)
            return Failure(
                kind=FailureKind.RESOLUTION_AMBIGUOUS,
                message=f"Could not retrieve weather data for '{address.strip()}'"
            )

        # 5. Lookup keyed by address + coordinates
        location_key = CacheKey.for_location(normalized, coordinates)
        entry = await self.cache_service.lookup(location_key)
        if entry is not None:
            return self._cache_hit(entry, address)

        # 6. Fetch + write-through (expired entries are never served as fallback)
        try:
            record = await self.forecast_fetcher.fetch(coordinates)
        except ApiKeyMissingException:
            return self._config_missing()
        except ProviderException as ex:
            logger.error(
                "Error fetching weather data",
                address=address,
                coordinates=coordinates.location_key(),
                error=str(ex)
            )
            return Failure(kind=FailureKind.PROVIDER_ERROR, message="There was an issue retrieving weather data.")

        await self.cache_service.store(location_key, record)

        logger.info(
            "Fetched fresh weather data",
            address=address,
            cache_key=str(location_key),
            has_current_conditions=record.has_current_conditions,
            has_forecast=record.has_forecast
        )
        return Fresh(record=record)

    @staticmethod
    def _cache_hit(entry: CacheEntry, address: str) -> CacheHit:
        logger.info("Returning cached weather data", address=address, cache_key=str(entry.key))
        return CacheHit(record=WeatherRecord.from_dict(entry.record), cached_at=entry.created_at)

    @staticmethod
    def _config_missing() -> Failure:
        logger.error("OpenWeather API key is not configured")
        return Failure(kind=FailureKind.CONFIG_MISSING, message="The weather service is temporarily unavailable.")
