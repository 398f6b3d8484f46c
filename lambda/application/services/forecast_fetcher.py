"""
Forecast Fetcher - Busca clima atual e previsão para coordenadas resolvidas
"""
import asyncio
from typing import Optional

from ddtrace import tracer

from application.ports.output.weather_provider_port import IWeatherProvider
from domain.entities.weather_record import WeatherRecord
from domain.exceptions import ProviderException, WeatherProviderException
from domain.services.forecast_aggregator import ForecastAggregator
from domain.value_objects.coordinates import Coordinates
from shared.config.logger_config import get_logger

logger = get_logger(child=True)


class ForecastFetcher:
    """
    Orquestra as duas chamadas independentes do provider

    - /weather e /forecast em paralelo (asyncio.gather)
    - Se apenas uma falhar, o registro é produzido com a outra metade ausente
    - Se ambas falharem, WeatherProviderException é propagada
    """

    def __init__(
        self,
        weather_provider: IWeatherProvider,
        aggregator: Optional[ForecastAggregator] = None
    ):
        self.weather_provider = weather_provider
        self.aggregator = aggregator or ForecastAggregator()

    @tracer.wrap(resource="forecast_fetcher.fetch")
    async def fetch(self, coordinates: Coordinates) -> WeatherRecord:
        current_result, forecast_result = await asyncio.gather(
            self.weather_provider.get_current_conditions(coordinates),
            self.weather_provider.get_forecast_samples(coordinates),
            return_exceptions=True
        )

        for result in (current_result, forecast_result):
            if isinstance(result, BaseException) and not isinstance(result, ProviderException):
                raise result

        current_failed = isinstance(current_result, ProviderException)
        forecast_failed = isinstance(forecast_result, ProviderException)

        if current_failed and forecast_failed:
            logger.error(
                "Clima atual e previsão indisponíveis",
                provider=self.weather_provider.provider_name,
                coordinates=coordinates.location_key(),
                current_error=str(current_result),
                forecast_error=str(forecast_result)
            )
            raise WeatherProviderException(
                "Weather provider unavailable",
                details={
                    "location": coordinates.location_key(),
                    "current_error": str(current_result),
                    "forecast_error": str(forecast_result)
                }
            )

        if current_failed:
            logger.warning(
                "Clima atual indisponível, seguindo apenas com previsão",
                provider=self.weather_provider.provider_name,
                coordinates=coordinates.location_key(),
                error=str(current_result)
            )
            current_result = None

        hourly, daily = [], []
        if forecast_failed:
            logger.warning(
                "Previsão indisponível, seguindo apenas com clima atual",
                provider=self.weather_provider.provider_name,
                coordinates=coordinates.location_key(),
                error=str(forecast_result)
            )
        else:
            hourly = self.aggregator.build_hourly(forecast_result)
            daily = self.aggregator.build_daily(forecast_result)

        return WeatherRecord.compose(current_result, hourly_forecast=hourly, forecast=daily)
