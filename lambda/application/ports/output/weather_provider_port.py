"""Weather Provider Port - Interface genérica para provedores climáticos"""
from abc import ABC, abstractmethod
from typing import List

from domain.entities.forecast_sample import ForecastSample
from domain.entities.weather_record import CurrentConditions
from domain.value_objects.coordinates import Coordinates


class IWeatherProvider(ABC):
    """
    Interface genérica para provedores de dados meteorológicos.
    As duas chamadas são independentes: a falha de uma não invalida a outra.
    """

    @abstractmethod
    async def get_current_conditions(self, coordinates: Coordinates) -> CurrentConditions:
        """
        Busca condições atuais

        Raises:
            WeatherProviderException: Se o provider falhar
        """
        pass

    @abstractmethod
    async def get_forecast_samples(self, coordinates: Coordinates) -> List[ForecastSample]:
        """
        Busca amostras da previsão (ordem cronológica, horário local)

        Raises:
            WeatherProviderException: Se o provider falhar
        """
        pass

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Nome do provider (ex: 'OpenWeather')"""
        pass
