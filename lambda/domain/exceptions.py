"""
Domain Exceptions - Business Rule Violations
Clean Architecture: Domain layer exceptions
"""


class DomainException(Exception):
    """Base exception for all domain-level errors"""
    def __init__(self, message: str, details: dict = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class InvalidAddressException(DomainException):
    """Raised when the address is blank or cannot be used as a lookup key"""
    pass


class ApiKeyMissingException(DomainException):
    """Raised when no OpenWeather credential is configured"""
    pass


class LocationNotFoundException(DomainException):
    """Raised when the provider confirmed the location does not exist"""
    pass


class ProviderException(DomainException):
    """Raised when an upstream provider fails (network, timeout, non-2xx)"""
    pass


class GeocodingProviderException(ProviderException):
    """Raised when the geocoding endpoints fail unexpectedly"""
    pass


class WeatherProviderException(ProviderException):
    """Raised when the current-weather or forecast endpoints fail"""
    pass
