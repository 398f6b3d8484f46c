"""
Hourly Forecast Entity - Entrada da previsão horária (amostras de 3h do OpenWeather)
"""
from dataclasses import dataclass, asdict
from typing import Optional, Dict, Any


@dataclass(frozen=True)
class HourlyForecast:
    """
    Uma amostra da previsão, pronta para exibição

    time é o rótulo no horário local da localização (ex: "2:00 PM").
    """
    time: str
    temp: Optional[int] = None  # °F arredondado
    condition: Optional[str] = None
    icon: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'HourlyForecast':
        return cls(
            time=data.get('time', ''),
            temp=data.get('temp'),
            condition=data.get('condition'),
            icon=data.get('icon')
        )
