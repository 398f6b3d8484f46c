"""
Domain Constants - Todas as constantes da aplicação centralizadas
Valores de configuração dependentes de ambiente ficam em shared/config/settings.py
"""


class API:
    """Constantes de APIs externas"""

    # OpenWeather
    OPENWEATHER_BASE_URL = "https://api.openweathermap.org/data/2.5"
    OPENWEATHER_GEO_BASE_URL = "https://api.openweathermap.org/geo/1.0"
    OPENWEATHER_ICON_URL = "https://openweathermap.org/img/w/{icon}.png"
    OPENWEATHER_UNITS = "imperial"

    # Timeouts e limites HTTP
    HTTP_TIMEOUT_TOTAL = 8  # segundos
    HTTP_TIMEOUT_CONNECT = 3  # segundos
    HTTP_TIMEOUT_READ = 5  # segundos
    HTTP_CONNECTION_LIMIT = 100
    HTTP_CONNECTION_LIMIT_PER_HOST = 30
    DNS_CACHE_TTL = 300  # segundos


class Cache:
    """Constantes de cache"""

    # Janela de frescor (30 minutos)
    FRESHNESS_SECONDS = 1800

    # Backends suportados
    BACKEND_MEMORY = "memory"
    BACKEND_DYNAMODB = "dynamodb"

    # DynamoDB
    DEFAULT_TABLE_NAME = "weather-address-cache"


class Geocoding:
    """Ordem fixa das estratégias de geocodificação"""

    DEFAULT_COUNTRY = "US"

    # Países tentados na busca por código postal numérico (após o país padrão)
    POSTAL_CODE_COUNTRIES = ("CA", "MX", "GB", "ES", "FR", "DE", "IT", "JP", "AU")

    # Países usados como sufixo na busca textual de último recurso
    FALLBACK_COUNTRIES = ("US", "CA", "GB", "MX", "ES", "FR", "DE", "IT", "JP", "AU")

    # Padrões de endereço
    NUMERIC_PATTERN = r"^\d+$"
    # Sequências de 3+ letras (ex.: "Route 66", "Area 51") indicam nome de lugar
    ALPHANUMERIC_POSTAL_PATTERN = r"^(?=.*\d)(?!.*[A-Za-z]{3})[A-Za-z0-9][A-Za-z0-9 \-]{1,9}$"


class Forecast:
    """Limites de agregação da previsão"""

    HOURLY_ENTRIES = 8  # 8 amostras de 3h = 24 horas
    DAILY_ENTRIES = 5
    PRECIPITATION_KEYWORDS = ("rain", "snow")
