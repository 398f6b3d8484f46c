"""
Testes para WeatherResponse (mapeamento outcome -> status HTTP)
"""
from datetime import datetime, timezone

import pytest

from application.dtos.responses import WeatherResponse
from domain.entities.resolution_outcome import CacheHit, Failure, FailureKind, Fresh, NotFound
from domain.entities.weather_record import WeatherRecord


class TestWeatherResponse:

    def test_cache_hit(self):
        cached_at = datetime(2025, 1, 6, 12, 0, tzinfo=timezone.utc)
        outcome = CacheHit(record=WeatherRecord(location="New York", current_temperature=45), cached_at=cached_at)

        response = WeatherResponse.from_outcome(outcome)

        assert response.status_code == 200
        assert response.body["cached"] is True
        assert response.body["cachedAt"] == "2025-01-06T12:00:00+00:00"
        assert response.body["data"]["location"] == "New York"
        assert response.body["data"]["currentTemperature"] == 45

    def test_fresh(self):
        response = WeatherResponse.from_outcome(Fresh(record=WeatherRecord(location="Paris")))

        assert response.status_code == 200
        assert response.to_dict()["cached"] is False
        assert response.to_dict()["cachedAt"] is None

    def test_not_found(self):
        response = WeatherResponse.from_outcome(NotFound(reason="ZIP code '00000' does not exist."))

        assert response.status_code == 404
        assert response.body["message"] == "ZIP code '00000' does not exist."

    @pytest.mark.parametrize("kind,status", [
        (FailureKind.INVALID_INPUT, 400),
        (FailureKind.CONFIG_MISSING, 503),
        (FailureKind.PROVIDER_ERROR, 503),
        (FailureKind.RESOLUTION_AMBIGUOUS, 422),
    ])
    def test_failure_status(self, kind, status):
        """REGRA: cada tipo de falha tem status HTTP fixo"""
        response = WeatherResponse.from_outcome(Failure(kind=kind, message="msg"))

        assert response.status_code == status
        assert response.body == {"type": kind.value, "error": kind.value, "message": "msg"}

    def test_unknown_outcome(self):
        with pytest.raises(TypeError):
            WeatherResponse.from_outcome("not an outcome")
