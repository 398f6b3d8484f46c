"""
Testes Unitários - ForecastFetcher
Chamadas independentes de clima atual e previsão
"""
import pytest

from application.services.forecast_fetcher import ForecastFetcher
from conftest import FakeResponse
from domain.exceptions import ApiKeyMissingException, WeatherProviderException
from infrastructure.adapters.output.providers.openweather import OpenWeatherProvider


@pytest.mark.asyncio
async def test_fetch_composes_record(mock_weather_provider, new_york):
    """Testa registro completo: atual + 8 horas + dias agregados"""
    record = await ForecastFetcher(mock_weather_provider).fetch(new_york)

    assert record.location == "New York"
    assert record.current_temperature == 45
    assert len(record.hourly_forecast) == 8
    assert [day.date for day in record.forecast] == ["01/06", "01/07"]
    assert record.forecast[0].high == 61
    assert record.forecast[0].low == 40
    mock_weather_provider.get_current_conditions.assert_awaited_once_with(new_york)
    mock_weather_provider.get_forecast_samples.assert_awaited_once_with(new_york)


@pytest.mark.asyncio
async def test_current_failure_keeps_forecast(mock_weather_provider, new_york):
    """REGRA: falha de uma chamada não invalida a outra"""
    mock_weather_provider.get_current_conditions.side_effect = WeatherProviderException("500")

    record = await ForecastFetcher(mock_weather_provider).fetch(new_york)

    assert record.location is None
    assert record.current_temperature is None
    assert record.has_forecast


@pytest.mark.asyncio
async def test_forecast_failure_keeps_current(mock_weather_provider, new_york):
    mock_weather_provider.get_forecast_samples.side_effect = WeatherProviderException("timeout")

    record = await ForecastFetcher(mock_weather_provider).fetch(new_york)

    assert record.current_temperature == 45
    assert record.hourly_forecast == []
    assert record.forecast == []


@pytest.mark.asyncio
async def test_both_failures_raise(mock_weather_provider, new_york):
    mock_weather_provider.get_current_conditions.side_effect = WeatherProviderException("500")
    mock_weather_provider.get_forecast_samples.side_effect = WeatherProviderException("500")

    with pytest.raises(WeatherProviderException) as exc_info:
        await ForecastFetcher(mock_weather_provider).fetch(new_york)

    assert exc_info.value.details["location"] == "40.75,-73.99"


@pytest.mark.asyncio
async def test_non_provider_errors_propagate(mock_weather_provider, new_york):
    mock_weather_provider.get_forecast_samples.side_effect = ApiKeyMissingException("missing")

    with pytest.raises(ApiKeyMissingException):
        await ForecastFetcher(mock_weather_provider).fetch(new_york)


@pytest.mark.asyncio
async def test_malformed_forecast_body_keeps_current(make_session_manager, new_york):
    """REGRA: /forecast com corpo malformado não invalida /weather"""
    current_payload = {
        'name': 'New York',
        'main': {'temp': 45.0},
        'weather': [{'description': 'broken clouds', 'icon': '04d'}]
    }

    def handler(url, params):
        if url.endswith("/weather"):
            return FakeResponse(200, current_payload)
        return FakeResponse(200, {'list': [{'dt': 1700000000, 'main': [1, 2]}]})

    manager, _ = make_session_manager(handler)
    provider = OpenWeatherProvider(api_key="test-key", session_manager=manager)

    record = await ForecastFetcher(provider).fetch(new_york)

    assert record.location == "New York"
    assert record.current_temperature == 45
    assert record.hourly_forecast == []
    assert record.forecast == []
