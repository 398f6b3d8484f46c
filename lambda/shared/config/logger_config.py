"""
Configuração centralizada de logging
Logger estruturado do AWS Lambda Powertools com service name do Datadog (DD_SERVICE)
"""
import os
from typing import Optional

from aws_lambda_powertools import Logger

DEFAULT_SERVICE_NAME = 'address-weather-forecast'


def get_logger(service_name: Optional[str] = None, child: bool = False) -> Logger:
    """
    Retorna uma instância configurada do Logger

    Args:
        service_name: Nome do serviço (se None, usa DD_SERVICE do ambiente)
        child: Se True, cria um child logger (módulos internos)

    Returns:
        Logger configurado (nível via LOG_LEVEL, padrão INFO)
    """
    if service_name is None:
        service_name = os.environ.get('DD_SERVICE', DEFAULT_SERVICE_NAME)

    level = os.environ.get('LOG_LEVEL', 'INFO').upper()

    if child:
        return Logger(service=service_name, level=level, child=True)

    return Logger(service=service_name, level=level)


# Logger principal da aplicação
logger = get_logger()
