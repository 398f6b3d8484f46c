from .openweather_data_mapper import OpenWeatherDataMapper

__all__ = ['OpenWeatherDataMapper']
