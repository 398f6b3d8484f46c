"""Response DTOs - Contratos de saída do use case de clima por endereço"""

from dataclasses import dataclass
from typing import Any, Dict

from domain.entities.resolution_outcome import (
    CacheHit,
    Failure,
    FailureKind,
    Fresh,
    NotFound,
    ResolutionOutcome,
)

# Status HTTP por tipo de falha
FAILURE_STATUS_CODES = {
    FailureKind.INVALID_INPUT: 400,
    FailureKind.CONFIG_MISSING: 503,
    FailureKind.PROVIDER_ERROR: 503,
    FailureKind.RESOLUTION_AMBIGUOUS: 422,
}


@dataclass(frozen=True)
class WeatherResponse:
    """Resposta HTTP (status + corpo JSON) derivada de um ResolutionOutcome"""
    status_code: int
    body: Dict[str, Any]

    @staticmethod
    def from_outcome(outcome: ResolutionOutcome) -> 'WeatherResponse':
        """
        Converte outcome do use case para resposta

        Args:
            outcome: CacheHit, Fresh, NotFound ou Failure

        Returns:
            WeatherResponse com status e corpo
        """
        if isinstance(outcome, CacheHit):
            return WeatherResponse(
                status_code=200,
                body={
                    'cached': True,
                    'cachedAt': outcome.cached_at.isoformat(),
                    'data': outcome.record.to_api_response()
                }
            )

        if isinstance(outcome, Fresh):
            return WeatherResponse(
                status_code=200,
                body={
                    'cached': False,
                    'cachedAt': None,
                    'data': outcome.record.to_api_response()
                }
            )

        if isinstance(outcome, NotFound):
            return WeatherResponse(
                status_code=404,
                body={'type': 'LocationNotFound', 'error': 'Not found', 'message': outcome.reason}
            )

        if isinstance(outcome, Failure):
            return WeatherResponse(
                status_code=FAILURE_STATUS_CODES.get(outcome.kind, 500),
                body={'type': outcome.kind.value, 'error': outcome.kind.value, 'message': outcome.message}
            )

        raise TypeError(f"Unsupported outcome: {type(outcome).__name__}")

    def to_dict(self) -> Dict[str, Any]:
        """Corpo para serialização JSON"""
        return self.body
