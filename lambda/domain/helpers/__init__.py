"""
Domain Helpers - Funções utilitárias para cálculos de domínio
"""
from domain.helpers.temperature_rounding import round_half_up

__all__ = ['round_half_up']
