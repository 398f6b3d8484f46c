"""
Domain Services - Serviços de lógica de negócio pura (sem conhecimento de APIs externas)

IMPORTANTE: Mappers de APIs externas → domain entities pertencem à infrastructure!
- infrastructure/adapters/output/providers/openweather/mappers/openweather_data_mapper.py
"""

from domain.services.forecast_aggregator import ForecastAggregator

__all__ = ['ForecastAggregator']
