class WeatherServiceError(Exception):
    """Base error for every failure while resolving a CEP to a temperature."""


class ValidationError(WeatherServiceError):
    """Raised when a postal code is malformed."""


class TransportError(WeatherServiceError):
    """Raised when an upstream service cannot be reached."""


class ParseError(WeatherServiceError):
    """Raised when an upstream body is not the JSON we expect."""


class NotFoundError(WeatherServiceError):
    """Raised when an upstream reports no match for the query."""


class ConfigurationError(WeatherServiceError):
    """Raised when required settings (the WeatherAPI key) are missing or rejected."""
