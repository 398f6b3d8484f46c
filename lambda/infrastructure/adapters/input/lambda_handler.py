"""
Input Adapter: Lambda Handler HTTP (100% ASYNC)
Presentation Layer: gerencia requisições HTTP e delega para o use case
"""
import asyncio

from aws_lambda_powertools.event_handler import APIGatewayRestResolver, CORSConfig
from aws_lambda_powertools.utilities.typing import LambdaContext

# Application Layer - DTOs
from application.dtos.responses import WeatherResponse

# Domain Layer - Exceptions
from domain.exceptions import (
    ApiKeyMissingException,
    InvalidAddressException,
    LocationNotFoundException,
    ProviderException,
)

# Infrastructure Layer - Adapters
from infrastructure.adapters.input.exception_handler_service import ExceptionHandlerService
from infrastructure.adapters.output.providers.weather_service_factory import get_weather_service_factory

# Shared Layer - Utilities
from shared.config.logger_config import get_logger
from shared.config.settings import get_settings
from shared.utils.validators import AddressSanitizer

# Configurar Logger com service name do DD_SERVICE
logger = get_logger()

app = APIGatewayRestResolver(cors=CORSConfig(allow_origin=get_settings().cors_origin))

# =============================
# Global Event Loop (persistente entre invocações Lambda)
# =============================
_global_event_loop = None

# =============================
# Exception Handlers (Delegados para ExceptionHandlerService)
# =============================

exception_service = ExceptionHandlerService()

app.exception_handler(InvalidAddressException)(exception_service.handle_invalid_address)
app.exception_handler(LocationNotFoundException)(exception_service.handle_location_not_found)
app.exception_handler(ApiKeyMissingException)(exception_service.handle_api_key_missing)
app.exception_handler(ProviderException)(exception_service.handle_provider_error)
app.exception_handler(ValueError)(exception_service.handle_value_error)
app.exception_handler(Exception)(exception_service.handle_unexpected_error)


# =============================
# Routes (Async execution with sync wrappers for AWS Powertools compatibility)
# =============================

@app.get("/api/weather")
def get_weather_route():
    """
    GET /api/weather?address=10001

    Returns current conditions, hourly and daily forecast for a free-form address

    Query params:
    - address: Address, city or postal code (HTML and <>'"\\ are stripped)

    Note: Uses persistent event loop for true client reuse
    """
    raw_address = app.current_event.get_query_string_value(name="address", default_value=None)
    address = AddressSanitizer.sanitize(raw_address) or ""

    use_case = get_weather_service_factory().get_resolve_weather_use_case()

    # Run async code with persistent loop
    outcome = run_async(use_case.execute(address))

    weather_response = WeatherResponse.from_outcome(outcome)
    logger.info(
        "Outcome resolvido",
        address=address,
        outcome=type(outcome).__name__,
        status_code=weather_response.status_code
    )

    return ExceptionHandlerService.to_response(weather_response)


# =============================
# Lambda Handler (100% ASYNC)
# =============================

@logger.inject_lambda_context()
def lambda_handler(event, context: LambdaContext):
    """
    AWS Lambda main function - 100% ASYNC

    AWS Lambda Powertools manages:
    - REST routing with exception handlers
    - CORS
    - JSON serialization
    - Structured logging

    Datadog APM manages:
    - Distributed tracing
    - Performance monitoring

    Available routes:
    - GET /api/weather?address=<text>
    """
    headers = event.get('headers', {}) or {}
    request_context = event.get('requestContext', {}) or {}
    identity = request_context.get('identity', {}) or {}

    logger.info(
        "Requisição Lambda recebida",
        rota=event.get('path', 'N/A'),
        metodo=event.get('httpMethod', 'N/A'),
        request_id=getattr(context, 'aws_request_id', 'N/A'),
        source_ip=identity.get('sourceIp', 'N/A'),
        session_id=headers.get('x-session-id', 'N/A')
    )

    response = app.resolve(event, context)

    # Add CORS headers manually
    if 'headers' not in response:
        response['headers'] = {}

    response['headers']['Access-Control-Allow-Origin'] = get_settings().cors_origin
    response['headers']['Access-Control-Allow-Headers'] = 'Content-Type,X-Amz-Date,Authorization,X-Api-Key,X-Amz-Security-Token,X-Requested-With,X-Session-Id'
    response['headers']['Access-Control-Allow-Methods'] = 'GET,OPTIONS'
    response['headers']['Access-Control-Max-Age'] = '86400'

    status_code = response.get('statusCode', 'N/A')
    logger.info(
        "Requisição Lambda concluída",
        status_code=status_code,
        sucesso=status_code == 200
    )

    return response


def get_or_create_event_loop():
    """
    Retorna event loop global persistente

    Reutiliza o loop entre invocações (warm starts), mantendo válidos
    a sessão aiohttp e o cliente aioboto3 criados nele.
    """
    global _global_event_loop

    if _global_event_loop is not None and not _global_event_loop.is_closed():
        return _global_event_loop

    _global_event_loop = asyncio.new_event_loop()
    asyncio.set_event_loop(_global_event_loop)

    return _global_event_loop


def run_async(coro):
    """
    Executa coroutine no event loop global (NÃO fecha o loop)

    Args:
        coro: Coroutine a ser executada

    Returns:
        Resultado da coroutine
    """
    loop = get_or_create_event_loop()
    return loop.run_until_complete(coro)
