"""
Daily Forecast Entity - Previsão agregada por dia do calendário
Fonte: amostras de 3h do endpoint /forecast do OpenWeather
"""
from dataclasses import dataclass, asdict
from typing import Optional, Dict, Any


@dataclass(frozen=True)
class DailyForecast:
    """
    Entidade de Previsão Diária

    Agrega várias amostras do mesmo dia: máxima, mínima e a condição
    representativa (precipitação tem prioridade sobre a primeira condição).
    """
    day: str  # Nome do dia da semana (ex: "Monday")
    date: str  # Formato MM/DD
    high: Optional[int] = None  # °F
    low: Optional[int] = None  # °F
    condition: Optional[str] = None
    icon: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'DailyForecast':
        return cls(
            day=data.get('day', ''),
            date=data.get('date', ''),
            high=data.get('high'),
            low=data.get('low'),
            condition=data.get('condition'),
            icon=data.get('icon')
        )
