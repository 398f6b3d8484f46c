"""
Testes Unitários - OpenWeatherGeocodingProvider e OpenWeatherProvider
Sessão aiohttp simulada (sem rede)
"""
import asyncio

import aiohttp
import pytest

from conftest import FakeResponse
from domain.exceptions import (
    ApiKeyMissingException,
    GeocodingProviderException,
    WeatherProviderException,
)
from domain.value_objects.geocode_attempt import GeocodeStatus
from infrastructure.adapters.output.providers.openweather import (
    OpenWeatherGeocodingProvider,
    OpenWeatherProvider,
)


class TestOpenWeatherGeocodingProvider:

    def _provider(self, make_session_manager, handler, api_key='test-key'):
        manager, session = make_session_manager(handler)
        return OpenWeatherGeocodingProvider(api_key=api_key, session_manager=manager), session

    @pytest.mark.asyncio
    async def test_direct_found(self, make_session_manager):
        provider, session = self._provider(
            make_session_manager,
            lambda url, params: FakeResponse(200, [{'name': 'Paris', 'lat': 48.85, 'lon': 2.35}])
        )

        attempt = await provider.geocode_direct("Paris,FR")

        assert attempt.status == GeocodeStatus.FOUND
        assert attempt.coordinates.location_key() == "48.85,2.35"
        url, params = session.calls[0]
        assert url == "https://api.openweathermap.org/geo/1.0/direct"
        assert params == {'q': 'Paris,FR', 'limit': 1, 'appid': 'test-key'}

    @pytest.mark.asyncio
    async def test_direct_empty_list_is_unavailable(self, make_session_manager):
        """REGRA: 200 sem candidatos não é negativa definitiva"""
        provider, _ = self._provider(make_session_manager, lambda url, params: FakeResponse(200, []))

        attempt = await provider.geocode_direct("Atlantis")

        assert attempt.status == GeocodeStatus.UNAVAILABLE

    @pytest.mark.asyncio
    async def test_postal_found(self, make_session_manager):
        provider, session = self._provider(
            make_session_manager,
            lambda url, params: FakeResponse(200, {'zip': '10001', 'name': 'New York', 'lat': 40.75, 'lon': -73.99})
        )

        attempt = await provider.geocode_postal_code("10001", "US")

        assert attempt.is_found
        assert attempt.coordinates.resolved_name == "New York"
        url, params = session.calls[0]
        assert url.endswith("/geo/1.0/zip")
        assert params['zip'] == "10001,US"

    @pytest.mark.asyncio
    async def test_postal_404_is_not_found(self, make_session_manager):
        """REGRA: 404 é a única negativa definitiva"""
        provider, _ = self._provider(
            make_session_manager,
            lambda url, params: FakeResponse(404, {'cod': '404', 'message': 'not found'})
        )

        attempt = await provider.geocode_postal_code("00000", "US")

        assert attempt.status == GeocodeStatus.NOT_FOUND

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", [401, 429, 500, 503])
    async def test_error_status_raises(self, make_session_manager, status):
        provider, _ = self._provider(make_session_manager, lambda url, params: FakeResponse(status, {}))

        with pytest.raises(GeocodingProviderException) as exc_info:
            await provider.geocode_direct("Paris")

        assert exc_info.value.details["status"] == status

    @pytest.mark.asyncio
    @pytest.mark.parametrize("error", [aiohttp.ClientConnectionError("reset"), asyncio.TimeoutError()])
    async def test_transport_error_raises(self, make_session_manager, error):
        provider, _ = self._provider(make_session_manager, lambda url, params: error)

        with pytest.raises(GeocodingProviderException):
            await provider.geocode_postal_code("10001", "US")

    @pytest.mark.asyncio
    async def test_invalid_json_is_unavailable(self, make_session_manager):
        provider, _ = self._provider(
            make_session_manager,
            lambda url, params: FakeResponse(200, json_error=ValueError("not json"))
        )

        attempt = await provider.geocode_direct("Paris")

        assert attempt.status == GeocodeStatus.UNAVAILABLE

    @pytest.mark.asyncio
    @pytest.mark.parametrize("candidate", [
        {'name': 'Springfield', 'lat': 95.0, 'lon': 10.0},
        {'name': 'Springfield', 'lat': 'north', 'lon': 10.0},
        "unexpected"
    ])
    async def test_direct_unusable_coordinates_are_unavailable(self, make_session_manager, candidate):
        """REGRA: 200 com coordenadas inválidas é falha transitória, não erro de validação"""
        provider, _ = self._provider(make_session_manager, lambda url, params: FakeResponse(200, [candidate]))

        attempt = await provider.geocode_direct("Springfield")

        assert attempt.status == GeocodeStatus.UNAVAILABLE

    @pytest.mark.asyncio
    async def test_postal_out_of_range_is_unavailable(self, make_session_manager):
        provider, _ = self._provider(
            make_session_manager,
            lambda url, params: FakeResponse(200, {'name': 'Nowhere', 'lat': 10.0, 'lon': 250.0})
        )

        attempt = await provider.geocode_postal_code("99999", "US")

        assert attempt.status == GeocodeStatus.UNAVAILABLE

    @pytest.mark.asyncio
    async def test_missing_api_key(self, make_session_manager):
        provider, session = self._provider(make_session_manager, lambda url, params: FakeResponse(200, []), api_key=None)

        with pytest.raises(ApiKeyMissingException):
            await provider.geocode_direct("Paris")

        assert session.calls == []


class TestOpenWeatherProvider:

    def _provider(self, make_session_manager, handler, api_key='test-key'):
        manager, session = make_session_manager(handler)
        return OpenWeatherProvider(api_key=api_key, session_manager=manager), session

    @pytest.mark.asyncio
    async def test_current_conditions(self, make_session_manager, new_york):
        payload = {
            'name': 'New York',
            'sys': {'country': 'US'},
            'main': {'temp': 45.5, 'feels_like': 41.0, 'temp_min': 42.0, 'temp_max': 48.0, 'humidity': 62, 'pressure': 1018},
            'weather': [{'description': 'broken clouds', 'icon': '04d'}],
            'wind': {'speed': 8.05, 'deg': 250}
        }
        provider, session = self._provider(make_session_manager, lambda url, params: FakeResponse(200, payload))

        current = await provider.get_current_conditions(new_york)

        assert current.location == 'New York'
        assert current.current_temperature == 46
        url, params = session.calls[0]
        assert url == "https://api.openweathermap.org/data/2.5/weather"
        assert params == {'lat': 40.75, 'lon': -73.99, 'units': 'imperial', 'appid': 'test-key'}

    @pytest.mark.asyncio
    async def test_forecast_samples(self, make_session_manager, new_york):
        payload = {
            'city': {'timezone': -18000},
            'list': [
                {'dt': 1736139600, 'main': {'temp': 40.0}, 'weather': [{'description': 'clear sky', 'icon': '01n'}]},
                {'dt': 1736150400, 'main': {'temp': 39.0}, 'weather': [{'description': 'snow', 'icon': '13n'}]}
            ]
        }
        provider, session = self._provider(make_session_manager, lambda url, params: FakeResponse(200, payload))

        samples = await provider.get_forecast_samples(new_york)

        assert [s.temp for s in samples] == [40.0, 39.0]
        assert session.calls[0][0].endswith("/data/2.5/forecast")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", [401, 404, 500])
    async def test_non_200_raises(self, make_session_manager, new_york, status):
        provider, _ = self._provider(make_session_manager, lambda url, params: FakeResponse(status, {}))

        with pytest.raises(WeatherProviderException) as exc_info:
            await provider.get_current_conditions(new_york)

        assert exc_info.value.details["status"] == status

    @pytest.mark.asyncio
    async def test_timeout_raises(self, make_session_manager, new_york):
        provider, _ = self._provider(make_session_manager, lambda url, params: asyncio.TimeoutError())

        with pytest.raises(WeatherProviderException):
            await provider.get_forecast_samples(new_york)

    @pytest.mark.asyncio
    async def test_invalid_payload_raises(self, make_session_manager, new_york):
        provider, _ = self._provider(make_session_manager, lambda url, params: FakeResponse(200, ["unexpected"]))

        with pytest.raises(WeatherProviderException):
            await provider.get_current_conditions(new_york)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("payload", [
        {'list': [{'dt': 1700000000, 'main': [1, 2]}]},
        {'list': ["unexpected"]},
        {'list': [{'dt': 1700000000, 'main': {'temp': 'warm'}}]}
    ])
    async def test_malformed_forecast_raises_provider_error(self, make_session_manager, new_york, payload):
        """REGRA: corpo malformado vira WeatherProviderException"""
        provider, _ = self._provider(make_session_manager, lambda url, params: FakeResponse(200, payload))

        with pytest.raises(WeatherProviderException) as exc_info:
            await provider.get_forecast_samples(new_york)

        assert exc_info.value.details["endpoint"] == "forecast"
        assert exc_info.value.details["provider"] == "OpenWeather"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("payload", [{'main': [45.0]}, {'main': {'temp': 'hot'}}])
    async def test_malformed_current_raises_provider_error(self, make_session_manager, new_york, payload):
        provider, _ = self._provider(make_session_manager, lambda url, params: FakeResponse(200, payload))

        with pytest.raises(WeatherProviderException):
            await provider.get_current_conditions(new_york)

    @pytest.mark.asyncio
    async def test_invalid_json_raises(self, make_session_manager, new_york):
        provider, _ = self._provider(
            make_session_manager,
            lambda url, params: FakeResponse(200, json_error=ValueError("bad json"))
        )

        with pytest.raises(WeatherProviderException):
            await provider.get_current_conditions(new_york)

    @pytest.mark.asyncio
    async def test_missing_api_key(self, make_session_manager, new_york):
        provider, session = self._provider(make_session_manager, lambda url, params: FakeResponse(200, {}), api_key="")

        with pytest.raises(ApiKeyMissingException):
            await provider.get_current_conditions(new_york)

        assert session.calls == []
