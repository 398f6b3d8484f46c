"""
Forecast Sample - Amostra bruta da previsão já normalizada pelo mapper
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class ForecastSample:
    """
    Amostra de 3 horas da previsão

    local_time já está no fuso da localização consultada, então
    local_time.date() define o dia do calendário da amostra.
    """
    local_time: datetime
    temp: Optional[float] = None
    temp_min: Optional[float] = None
    temp_max: Optional[float] = None
    condition: Optional[str] = None
    icon: Optional[str] = None

    @property
    def max_temperature(self) -> Optional[float]:
        return self.temp_max if self.temp_max is not None else self.temp

    @property
    def min_temperature(self) -> Optional[float]:
        return self.temp_min if self.temp_min is not None else self.temp
