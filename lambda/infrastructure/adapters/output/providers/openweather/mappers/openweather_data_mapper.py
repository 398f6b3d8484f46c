"""
OpenWeather Data Mapper - Transforma dados da API OpenWeather para entities
LOCALIZAÇÃO: infrastructure (transforma dados externos → domínio)
"""
from datetime import datetime, timedelta, timezone
from typing import Optional, Dict, Any, List

from domain.constants import API
from domain.entities.forecast_sample import ForecastSample
from domain.entities.weather_record import CurrentConditions
from domain.helpers.temperature_rounding import round_half_up
from domain.value_objects.coordinates import Coordinates


def _first_weather(item: Dict[str, Any]) -> Dict[str, Any]:
    weather_list = item.get('weather') or [{}]
    return weather_list[0] or {}


def _optional_float(value: Any) -> Optional[float]:
    return None if value is None else float(value)


class OpenWeatherDataMapper:
    """
    Mapper para transformar respostas da API OpenWeather em entities de domínio

    Responsabilidade: Traduzir formato OpenWeather → Domain entities
    Localização: Infrastructure (conhece detalhes da API externa)
    """

    @staticmethod
    def map_direct_geocode(data: Any) -> Optional[Coordinates]:
        """
        Mapeia resposta de /geo/1.0/direct (lista de candidatos)

        Apenas o primeiro candidato é usado (limit=1).

        Returns:
            Coordinates ou None quando a lista está vazia/inválida
        """
        if not isinstance(data, list) or not data:
            return None

        first = data[0] or {}
        lat, lon = first.get('lat'), first.get('lon')
        if lat is None or lon is None:
            return None

        return Coordinates(
            latitude=float(lat),
            longitude=float(lon),
            resolved_name=first.get('name') or ""
        )

    @staticmethod
    def map_zip_geocode(data: Any, postal_code: str, country_code: str) -> Optional[Coordinates]:
        """
        Mapeia resposta de /geo/1.0/zip (objeto único)

        Returns:
            Coordinates ou None quando lat/lon estão ausentes
        """
        if not isinstance(data, dict):
            return None

        lat, lon = data.get('lat'), data.get('lon')
        if lat is None or lon is None:
            return None

        return Coordinates(
            latitude=float(lat),
            longitude=float(lon),
            resolved_name=data.get('name') or f"{postal_code}, {country_code}"
        )

    @staticmethod
    def map_current_conditions(data: Dict[str, Any]) -> CurrentConditions:
        """
        Mapeia resposta /weather para CurrentConditions

        Campos ausentes permanecem None (sem valores fictícios).
        """
        main = data.get('main') or {}
        wind = data.get('wind') or {}
        weather_info = _first_weather(data)
        icon = weather_info.get('icon')

        return CurrentConditions(
            location=data.get('name') or None,
            country=(data.get('sys') or {}).get('country'),
            current_temperature=round_half_up(main.get('temp')),
            feels_like=round_half_up(main.get('feels_like')),
            high_temperature=round_half_up(main.get('temp_max')),
            low_temperature=round_half_up(main.get('temp_min')),
            humidity=main.get('humidity'),
            pressure=main.get('pressure'),
            description=weather_info.get('description'),
            icon_id=icon,
            icon_url=API.OPENWEATHER_ICON_URL.format(icon=icon) if icon else None,
            wind_speed=wind.get('speed'),
            wind_deg=wind.get('deg')
        )

    @staticmethod
    def map_forecast_samples(data: Dict[str, Any]) -> List[ForecastSample]:
        """
        Mapeia resposta /forecast (amostras de 3h) para ForecastSample

        O horário de cada amostra é convertido para o fuso da localização
        usando o deslocamento city.timezone (segundos em relação a UTC).
        """
        offset_seconds = (data.get('city') or {}).get('timezone') or 0
        local_tz = timezone(timedelta(seconds=offset_seconds))

        samples = []
        for item in data.get('list') or []:
            dt_unix = item.get('dt')
            if dt_unix is None:
                continue

            main = item.get('main') or {}
            weather_info = _first_weather(item)
            samples.append(ForecastSample(
                local_time=datetime.fromtimestamp(dt_unix, tz=timezone.utc).astimezone(local_tz),
                temp=_optional_float(main.get('temp')),
                temp_min=_optional_float(main.get('temp_min')),
                temp_max=_optional_float(main.get('temp_max')),
                condition=weather_info.get('description') or weather_info.get('main'),
                icon=weather_info.get('icon')
            ))

        return samples
