"""
Resolution Outcome - Resultado etiquetado da resolução de clima por endereço

CacheHit | Fresh | NotFound | Failure
"""
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Union

from domain.entities.weather_record import WeatherRecord


class FailureKind(str, Enum):
    """Taxonomia de falhas expostas ao chamador"""
    INVALID_INPUT = "InvalidInput"
    CONFIG_MISSING = "ConfigMissing"
    PROVIDER_ERROR = "ProviderError"
    RESOLUTION_AMBIGUOUS = "ResolutionAmbiguous"


@dataclass(frozen=True)
class CacheHit:
    record: WeatherRecord
    cached_at: datetime

    cached = True


@dataclass(frozen=True)
class Fresh:
    record: WeatherRecord

    cached = False


@dataclass(frozen=True)
class NotFound:
    reason: str


@dataclass(frozen=True)
class Failure:
    kind: FailureKind
    message: str = ""


ResolutionOutcome = Union[CacheHit, Fresh, NotFound, Failure]
