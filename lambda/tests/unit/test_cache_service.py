"""
Testes Unitários - CacheService
Falhas do backend nunca interrompem a requisição
"""
from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

import pytest

from application.services.cache_service import CacheService
from domain.entities.cache_entry import CacheEntry, CacheKey
from domain.entities.weather_record import WeatherRecord

KEY = CacheKey("10001", "40.75,-73.99")


@pytest.fixture
def mock_repository():
    repo = MagicMock()
    repo.is_enabled.return_value = True
    repo.get = AsyncMock(return_value=None)
    repo.put = AsyncMock(return_value=None)
    return repo


@pytest.mark.asyncio
async def test_lookup_hit(mock_repository):
    entry = CacheEntry(key=KEY, record={"location": "New York"}, created_at=datetime.now(timezone.utc))
    mock_repository.get.return_value = entry

    assert await CacheService(mock_repository).lookup(KEY) is entry
    mock_repository.get.assert_awaited_once_with(KEY)


@pytest.mark.asyncio
async def test_lookup_error_is_miss(mock_repository):
    """REGRA: erro de leitura vira cache MISS"""
    mock_repository.get.side_effect = ConnectionError("dynamodb down")

    assert await CacheService(mock_repository).lookup(KEY) is None


@pytest.mark.asyncio
async def test_store_serializes_record(mock_repository):
    record = WeatherRecord(location="New York", current_temperature=45)

    await CacheService(mock_repository).store(KEY, record)

    key, data = mock_repository.put.await_args.args
    assert key == KEY
    assert data["location"] == "New York"
    assert data["current_temperature"] == 45


@pytest.mark.asyncio
async def test_store_error_is_ignored(mock_repository):
    mock_repository.put.side_effect = RuntimeError("write failed")

    assert await CacheService(mock_repository).store(KEY, WeatherRecord()) is None


@pytest.mark.asyncio
async def test_disabled_cache_is_bypassed(mock_repository):
    mock_repository.is_enabled.return_value = False
    service = CacheService(mock_repository)

    assert await service.lookup(KEY) is None
    assert await service.store(KEY, WeatherRecord()) is None
    mock_repository.get.assert_not_awaited()
    mock_repository.put.assert_not_awaited()


@pytest.mark.asyncio
async def test_without_repository():
    service = CacheService(None)

    assert await service.lookup(KEY) is None
    assert await service.store(KEY, WeatherRecord()) is None
