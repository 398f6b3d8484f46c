"""Application Use Cases - 100% ASYNC com providers desacoplados"""
from .resolve_weather_use_case import ResolveWeatherUseCase

__all__ = [
    'ResolveWeatherUseCase'
]
