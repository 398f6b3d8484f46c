"""Application DTOs - Data Transfer Objects para contratos de API"""

from application.dtos.responses import WeatherResponse, FAILURE_STATUS_CODES

__all__ = [
    'WeatherResponse',
    'FAILURE_STATUS_CODES'
]
