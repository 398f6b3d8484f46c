"""
Exception Handler Service
Centraliza tratamento de exceções com logging estruturado
"""
import json
from typing import Any, Dict

from aws_lambda_powertools.event_handler import Response

from application.dtos.responses import WeatherResponse
from domain.exceptions import (
    ApiKeyMissingException,
    InvalidAddressException,
    LocationNotFoundException,
    ProviderException,
)
from shared.config.logger_config import logger as app_logger


def _json_response(status_code: int, payload: Dict[str, Any]) -> Response:
    return Response(
        status_code=status_code,
        content_type="application/json",
        body=json.dumps(payload)
    )


class ExceptionHandlerService:
    """
    Service para centralizar tratamento de exceções da aplicação
    Responsável por converter exceções e outcomes em respostas HTTP apropriadas

    Detalhes internos dos providers nunca chegam ao corpo da resposta.
    """
    logger = app_logger

    def __init__(self, logger=app_logger):
        # Permite injeção de logger compartilhado para manter contexto de correlação
        if logger:
            ExceptionHandlerService.logger = logger

    @staticmethod
    def to_response(weather_response: WeatherResponse) -> Response:
        """Converte WeatherResponse (status + corpo) em Response do Powertools"""
        return _json_response(weather_response.status_code, weather_response.to_dict())

    @staticmethod
    def handle_invalid_address(ex: InvalidAddressException) -> Response:
        """Handle 400 - Address missing or blank"""
        ExceptionHandlerService.logger.warning("Invalid address", error=str(ex), details=ex.details)
        return _json_response(400, {
            "type": "InvalidInput",
            "error": "Invalid address",
            "message": "Address parameter is required"
        })

    @staticmethod
    def handle_location_not_found(ex: LocationNotFoundException) -> Response:
        """Handle 404 - Location confirmed as nonexistent"""
        ExceptionHandlerService.logger.warning("Location not found", error=str(ex), details=ex.details)
        return _json_response(404, {
            "type": "LocationNotFound",
            "error": "Not found",
            "message": str(ex)
        })

    @staticmethod
    def handle_api_key_missing(ex: ApiKeyMissingException) -> Response:
        """Handle 503 - Service misconfigured"""
        ExceptionHandlerService.logger.error("API key missing", error=str(ex))
        return _json_response(503, {
            "type": "ConfigMissing",
            "error": "Service unavailable",
            "message": "The weather service is temporarily unavailable."
        })

    @staticmethod
    def handle_provider_error(ex: ProviderException) -> Response:
        """Handle 503 - Upstream OpenWeather error"""
        ExceptionHandlerService.logger.error("Weather provider error", error=str(ex), details=ex.details, exc_info=True)
        return _json_response(503, {
            "type": "ProviderError",
            "error": "Service unavailable",
            "message": "There was an issue retrieving weather data."
        })

    @staticmethod
    def handle_value_error(ex: ValueError) -> Response:
        """Handle 400 - Validation errors (ValueError)"""
        ExceptionHandlerService.logger.warning("Validation error", error=str(ex))
        return _json_response(400, {
            "type": "ValidationError",
            "error": "Validation error",
            "message": str(ex)
        })

    @staticmethod
    def handle_unexpected_error(ex: Exception) -> Response:
        """Handle 500 - Unexpected errors"""
        ExceptionHandlerService.logger.error("Unexpected error", error=str(ex), exc_info=True)
        return _json_response(500, {
            "error": "Internal server error",
            "message": "An unexpected error occurred"
        })
