"""
cep_weather package – current temperature for a Brazilian postal code (CEP).

Public entry points
-------------------
* `cep_weather.web.create_app` – the Flask application factory (`/weather`)
* `cep_weather.main` – the command-line driver (`python -m cep_weather.main`)
* Service classes:
    - `ViaCepService`
    - `WeatherApiService`
    - `WeatherClient`
* Utility helpers:
    - `is_valid_cep`
    - `c_to_f`
    - `c_to_k`

Having these symbols available at the package root keeps the import
experience ergonomic:

    >>> from cep_weather import WeatherClient, is_valid_cep
"""

# ----------------------------------------------------------------------
# Version information – keep it in a single place
# ----------------------------------------------------------------------
__all__ = [
    "VERSION",
    # Services
    "ViaCepService",
    "WeatherApiService",
    "WeatherClient",
    # Utilities
    "is_valid_cep",
    "c_to_f",
    "c_to_k",
]

from .config import VERSION  # noqa: E402,F401


# ----------------------------------------------------------------------
# Re‑export the service classes (they are defined in sub‑packages)
# ----------------------------------------------------------------------
from .services import (  # noqa: E402,F401
    ViaCepService,
    WeatherApiService,
    WeatherClient,
)

# ----------------------------------------------------------------------
# Re‑export the pure helpers from the utils package
# ----------------------------------------------------------------------
from .utils import is_valid_cep, c_to_f, c_to_k  # noqa: E402,F401
