"""
Configurações e fixtures compartilhadas para testes unitários
"""
import os

os.environ.setdefault('DD_TRACE_ENABLED', 'false')

from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Dict, List, Optional
from unittest.mock import AsyncMock, MagicMock

import pytest

from application.ports.output.geocoding_provider_port import IGeocodingProvider
from domain.entities.forecast_sample import ForecastSample
from domain.entities.weather_record import CurrentConditions
from domain.value_objects.coordinates import Coordinates
from domain.value_objects.geocode_attempt import GeocodeAttempt


class FakeClock:
    """Relógio controlável: chamar retorna o instante atual"""

    def __init__(self, start: datetime):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


class FakeGeocodingProvider(IGeocodingProvider):
    """
    Provider de geocodificação em memória

    direct: query -> GeocodeAttempt ou exceção
    postal: (código, país) -> GeocodeAttempt ou exceção
    default: resposta para chamadas não mapeadas
    """

    def __init__(self, direct=None, postal=None, default=None):
        self.direct = direct or {}
        self.postal = postal or {}
        self.default = default if default is not None else GeocodeAttempt.unavailable()
        self.calls: List[str] = []

    @property
    def provider_name(self) -> str:
        return "Fake"

    async def geocode_direct(self, query: str) -> GeocodeAttempt:
        self.calls.append(f"direct:{query}")
        return self._answer(self.direct.get(query, self.default))

    async def geocode_postal_code(self, postal_code: str, country_code: str) -> GeocodeAttempt:
        self.calls.append(f"postal:{postal_code},{country_code}")
        return self._answer(self.postal.get((postal_code, country_code), self.default))

    @staticmethod
    def _answer(value):
        if isinstance(value, BaseException):
            raise value
        return value


class FakeResponse:
    """Resposta aiohttp simulada (async context manager)"""

    def __init__(self, status: int = 200, payload: Any = None, json_error: Optional[Exception] = None):
        self.status = status
        self._payload = payload
        self._json_error = json_error

    async def json(self, content_type=None):
        if self._json_error is not None:
            raise self._json_error
        return self._payload

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        return False


class FakeSession:
    """Sessão aiohttp simulada: handler(url, params) -> FakeResponse ou exceção"""

    def __init__(self, handler: Callable[[str, Dict[str, Any]], Any]):
        self._handler = handler
        self.calls: List[tuple] = []

    def get(self, url: str, params: Optional[Dict[str, Any]] = None):
        self.calls.append((url, dict(params or {})))
        result = self._handler(url, dict(params or {}))
        if isinstance(result, BaseException):
            raise result
        return result


@pytest.fixture
def fake_clock():
    return FakeClock(datetime(2025, 1, 6, 12, 0, tzinfo=timezone.utc))


@pytest.fixture
def new_york():
    return Coordinates(latitude=40.75, longitude=-73.99, resolved_name="New York")


@pytest.fixture
def make_session_manager():
    """
    Factory fixture para session manager com FakeSession

    Usage:
        manager, session = make_session_manager(lambda url, params: FakeResponse(200, {...}))
    """
    def _make(handler):
        session = FakeSession(handler)
        manager = MagicMock()
        manager.get_session = AsyncMock(return_value=session)
        return manager, session

    return _make


@pytest.fixture
def make_forecast_sample():
    """
    Factory fixture para criar ForecastSample com valores padrão

    Usage:
        def test_something(make_forecast_sample):
            sample = make_forecast_sample(hour=15, temp=70)
    """
    def _make(
        day: int = 6,
        hour: int = 0,
        temp: Optional[float] = 60.0,
        temp_min: Optional[float] = None,
        temp_max: Optional[float] = None,
        condition: Optional[str] = 'clear sky',
        icon: Optional[str] = '01d'
    ) -> ForecastSample:
        return ForecastSample(
            local_time=datetime(2025, 1, day, hour, 0, tzinfo=timezone(timedelta(hours=-5))),
            temp=temp,
            temp_min=temp_min,
            temp_max=temp_max,
            condition=condition,
            icon=icon
        )

    return _make


@pytest.fixture
def sample_current_conditions():
    return CurrentConditions(
        location='New York',
        country='US',
        current_temperature=45,
        feels_like=41,
        high_temperature=48,
        low_temperature=40,
        humidity=62,
        pressure=1018,
        description='broken clouds',
        icon_id='04d',
        icon_url='https://openweathermap.org/img/w/04d.png',
        wind_speed=8.05,
        wind_deg=250
    )


@pytest.fixture
def mock_weather_provider(sample_current_conditions, make_forecast_sample):
    """Weather provider mockado com clima atual e 10 amostras de previsão"""
    provider = MagicMock()
    provider.provider_name = "Mock"
    provider.get_current_conditions = AsyncMock(return_value=sample_current_conditions)
    provider.get_forecast_samples = AsyncMock(return_value=[
        make_forecast_sample(hour=hour, temp=40 + hour) for hour in range(0, 24, 3)
    ] + [
        make_forecast_sample(day=7, hour=0, temp=38),
        make_forecast_sample(day=7, hour=3, temp=36)
    ])
    return provider
