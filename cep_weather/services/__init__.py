"""
services package – wrappers around external APIs.

Export the high‑level service classes so callers can do:

    from cep_weather.services import (
        ViaCepService,
        WeatherApiService,
        WeatherClient,
    )
"""

# Re‑export the concrete service classes for a tidy public API
from .transport   import HttpGet, RequestsTransport      # noqa: F401
from .cep_lookup  import ViaCepService                   # noqa: F401
from .weather_api import WeatherApiService               # noqa: F401
from .client      import WeatherClient, WeatherLookup    # noqa: F401

# Define what gets imported when a user writes:
#   from cep_weather.services import *
__all__ = [
    "HttpGet",
    "RequestsTransport",
    "ViaCepService",
    "WeatherApiService",
    "WeatherClient",
    "WeatherLookup",
]
