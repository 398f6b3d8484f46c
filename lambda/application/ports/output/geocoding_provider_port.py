"""
Output Port: Geocoding Provider
Contrato para provedores que convertem endereço/código postal em coordenadas
"""
from abc import ABC, abstractmethod

from domain.value_objects.geocode_attempt import GeocodeAttempt


class IGeocodingProvider(ABC):
    """Interface para provedores de geocodificação"""

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Nome do provider (ex.: OpenWeather)"""
        raise NotImplementedError

    @abstractmethod
    async def geocode_direct(self, query: str) -> GeocodeAttempt:
        """
        Geocodificação por texto livre (ex: "Paris,FR")

        Returns:
            GeocodeAttempt FOUND ou UNAVAILABLE

        Raises:
            GeocodingProviderException: Falha de rede, timeout ou status inesperado
        """
        raise NotImplementedError

    @abstractmethod
    async def geocode_postal_code(self, postal_code: str, country_code: str) -> GeocodeAttempt:
        """
        Geocodificação por código postal em um país

        Returns:
            GeocodeAttempt FOUND, NOT_FOUND (404 definitivo) ou UNAVAILABLE

        Raises:
            GeocodingProviderException: Falha de rede, timeout ou status inesperado
        """
        raise NotImplementedError
