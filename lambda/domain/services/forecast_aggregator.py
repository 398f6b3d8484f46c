"""
Forecast Aggregator - Consolida amostras de 3h em previsão horária e diária
Lógica de negócio pura (sem conhecimento do formato da API externa)
"""
from typing import List, Dict, Optional, Sequence
from datetime import date

from domain.constants import Forecast
from domain.entities.forecast_sample import ForecastSample
from domain.entities.hourly_forecast import HourlyForecast
from domain.entities.daily_forecast import DailyForecast
from domain.helpers.temperature_rounding import round_half_up


def is_precipitation(condition: Optional[str]) -> bool:
    """True se a condição descreve chuva ou neve"""
    text = (condition or "").lower()
    return any(keyword in text for keyword in Forecast.PRECIPITATION_KEYWORDS)


def format_hour_label(sample: ForecastSample) -> str:
    """Rótulo legível no horário local (ex: "2:00 PM", "12:00 AM")"""
    return sample.local_time.strftime("%I:00 %p").lstrip("0")


class ForecastAggregator:
    """
    Agrega amostras da previsão

    - Horária: as primeiras N amostras, sem agregação
    - Diária: agrupa por dia do calendário local
        * high = máximo das temperaturas máximas das amostras
        * low = mínimo das temperaturas mínimas das amostras
        * condição/ícone da primeira amostra, exceto quando uma amostra
          posterior do mesmo dia reporta precipitação e a atual não
    """

    def __init__(
        self,
        hourly_entries: int = Forecast.HOURLY_ENTRIES,
        daily_entries: int = Forecast.DAILY_ENTRIES
    ):
        self.hourly_entries = hourly_entries
        self.daily_entries = daily_entries

    def build_hourly(self, samples: Sequence[ForecastSample]) -> List[HourlyForecast]:
        return [
            HourlyForecast(
                time=format_hour_label(sample),
                temp=round_half_up(sample.temp),
                condition=sample.condition,
                icon=sample.icon
            )
            for sample in samples[:self.hourly_entries]
        ]

    def build_daily(self, samples: Sequence[ForecastSample]) -> List[DailyForecast]:
        days: Dict[date, dict] = {}

        for sample in samples:
            day_key = sample.local_time.date()
            high = sample.max_temperature
            low = sample.min_temperature

            aggregate = days.get(day_key)
            if aggregate is None:
                # dict preserva a ordem de inserção: primeiro dia visto = primeiro da lista
                days[day_key] = {
                    'day': sample.local_time.strftime("%A"),
                    'date': sample.local_time.strftime("%m/%d"),
                    'high': high,
                    'low': low,
                    'condition': sample.condition,
                    'icon': sample.icon
                }
                continue

            if high is not None:
                aggregate['high'] = high if aggregate['high'] is None else max(aggregate['high'], high)
            if low is not None:
                aggregate['low'] = low if aggregate['low'] is None else min(aggregate['low'], low)

            if not is_precipitation(aggregate['condition']) and is_precipitation(sample.condition):
                aggregate['condition'] = sample.condition
                aggregate['icon'] = sample.icon

        return [
            DailyForecast(
                day=aggregate['day'],
                date=aggregate['date'],
                high=round_half_up(aggregate['high']),
                low=round_half_up(aggregate['low']),
                condition=aggregate['condition'],
                icon=aggregate['icon']
            )
            for aggregate in list(days.values())[:self.daily_entries]
        ]
