"""Runtime settings, read from the environment once at import time."""

import os

VERSION = "0.1.0"

VIACEP_URL = os.getenv("VIACEP_URL", "https://viacep.com.br").rstrip("/")
WEATHERAPI_URL = os.getenv("WEATHERAPI_URL", "https://api.weatherapi.com").rstrip("/")

# Seconds to wait on each upstream call before giving up
HTTP_TIMEOUT = float(os.getenv("HTTP_TIMEOUT", "5"))

PORT = int(os.getenv("PORT", "8080"))

USER_AGENT = {"User-Agent": f"cep-weather/{VERSION}"}


def weatherapi_key() -> str:
    """Return the WeatherAPI key, or an empty string when it is not set.

    Read on every call so the key can be exported after the module is imported.
    """
    return os.getenv("WEATHERAPI_KEY", "")
