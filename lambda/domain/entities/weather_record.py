"""
Weather Record Entity - Payload canônico de clima de uma localização
Combina condições atuais (/weather) e previsão (/forecast)
"""
from dataclasses import dataclass, field, asdict
from typing import Optional, List, Dict, Any

from domain.entities.hourly_forecast import HourlyForecast
from domain.entities.daily_forecast import DailyForecast


@dataclass(frozen=True)
class CurrentConditions:
    """
    Condições atuais retornadas pelo endpoint de clima atual

    Campos ausentes ficam como None (nunca valores fictícios).
    """
    location: Optional[str] = None
    country: Optional[str] = None
    current_temperature: Optional[int] = None
    feels_like: Optional[int] = None
    high_temperature: Optional[int] = None
    low_temperature: Optional[int] = None
    humidity: Optional[int] = None
    pressure: Optional[int] = None
    description: Optional[str] = None
    icon_id: Optional[str] = None
    icon_url: Optional[str] = None
    wind_speed: Optional[float] = None
    wind_deg: Optional[int] = None


@dataclass(frozen=True)
class WeatherRecord:
    """
    Registro normalizado de clima (o que é armazenado no cache)

    - hourly_forecast: até 8 amostras
    - forecast: até 5 dias, um por dia do calendário
    - Qualquer metade ausente (atual ou previsão) fica com None / lista vazia
    """
    location: Optional[str] = None
    country: Optional[str] = None
    current_temperature: Optional[int] = None
    feels_like: Optional[int] = None
    high_temperature: Optional[int] = None
    low_temperature: Optional[int] = None
    humidity: Optional[int] = None
    pressure: Optional[int] = None
    description: Optional[str] = None
    icon_id: Optional[str] = None
    icon_url: Optional[str] = None
    wind_speed: Optional[float] = None
    wind_deg: Optional[int] = None
    hourly_forecast: List[HourlyForecast] = field(default_factory=list)
    forecast: List[DailyForecast] = field(default_factory=list)

    @classmethod
    def compose(
        cls,
        current: Optional[CurrentConditions],
        hourly_forecast: Optional[List[HourlyForecast]] = None,
        forecast: Optional[List[DailyForecast]] = None
    ) -> 'WeatherRecord':
        """
        Monta o registro a partir das duas chamadas independentes

        Args:
            current: Condições atuais (None se a chamada falhou)
            hourly_forecast: Previsão horária (None se a chamada falhou)
            forecast: Previsão diária (None se a chamada falhou)
        """
        current_fields = asdict(current) if current is not None else {}
        return cls(
            **current_fields,
            hourly_forecast=list(hourly_forecast or []),
            forecast=list(forecast or [])
        )

    @property
    def has_current_conditions(self) -> bool:
        return any(
            value is not None
            for key, value in self.to_dict().items()
            if key not in ('hourly_forecast', 'forecast')
        )

    @property
    def has_forecast(self) -> bool:
        return bool(self.hourly_forecast or self.forecast)

    def to_dict(self) -> Dict[str, Any]:
        """Serialização para cache (snake_case, JSON-compatível)"""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'WeatherRecord':
        """Reconstrói o registro a partir do dict armazenado no cache"""
        return cls(
            location=data.get('location'),
            country=data.get('country'),
            current_temperature=data.get('current_temperature'),
            feels_like=data.get('feels_like'),
            high_temperature=data.get('high_temperature'),
            low_temperature=data.get('low_temperature'),
            humidity=data.get('humidity'),
            pressure=data.get('pressure'),
            description=data.get('description'),
            icon_id=data.get('icon_id'),
            icon_url=data.get('icon_url'),
            wind_speed=data.get('wind_speed'),
            wind_deg=data.get('wind_deg'),
            hourly_forecast=[HourlyForecast.from_dict(item) for item in data.get('hourly_forecast') or []],
            forecast=[DailyForecast.from_dict(item) for item in data.get('forecast') or []]
        )

    def to_api_response(self) -> dict:
        """Converte para formato de resposta da API (camelCase)"""
        return {
            'location': self.location,
            'country': self.country,
            'currentTemperature': self.current_temperature,
            'feelsLike': self.feels_like,
            'highTemperature': self.high_temperature,
            'lowTemperature': self.low_temperature,
            'humidity': self.humidity,
            'pressure': self.pressure,
            'description': self.description,
            'iconUrl': self.icon_url,
            'windSpeed': self.wind_speed,
            'windDeg': self.wind_deg,
            'hourlyForecast': [
                {
                    'time': hourly.time,
                    'temp': hourly.temp,
                    'condition': hourly.condition,
                    'icon': hourly.icon
                }
                for hourly in self.hourly_forecast
            ],
            'forecast': [
                {
                    'day': daily.day,
                    'date': daily.date,
                    'high': daily.high,
                    'low': daily.low,
                    'condition': daily.condition,
                    'icon': daily.icon
                }
                for daily in self.forecast
            ]
        }
