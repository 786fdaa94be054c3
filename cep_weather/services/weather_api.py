import logging
import math
from typing import Optional

import requests

from .. import config
from ..errors import ConfigurationError, NotFoundError, ParseError, TransportError
from .transport import HttpGet, RequestsTransport

logger = logging.getLogger(__name__)

# WeatherAPI error codes that point at the key rather than the query
KEY_ERROR_CODES = {1002, 2006, 2007, 2008}


class WeatherApiService:
    """Wraps the WeatherAPI.com current-conditions endpoint."""

    def __init__(
        self,
        fetch: Optional[HttpGet] = None,
        api_key: Optional[str] = None,
        base_url: str = config.WEATHERAPI_URL,
    ):
        self.fetch = fetch or RequestsTransport()
        self.api_key = api_key
        self.base_url = base_url

    def _key(self) -> str:
        key = self.api_key or config.weatherapi_key()
        if not key:
            raise ConfigurationError("weatherapi key not set")
        return key

    @staticmethod
    def _raise_for_error(payload: dict, city: str) -> None:
        # An error body is a failed lookup, never a 0°C reading
        error = payload.get("error")
        if not error:
            return
        code = error.get("code") if isinstance(error, dict) else None
        message = error.get("message", "") if isinstance(error, dict) else str(error)
        if code in KEY_ERROR_CODES:
            raise ConfigurationError(f"weatherapi rejected the key: {message}")
        raise NotFoundError(f"no weather for {city}: {message}")

    def resolve_temperature(self, city: str) -> float:
        """
        Return the current temperature in °C for *city*.

        The key check happens before any request is made. Any finite reading
        is passed through as reported, with no range validation.
        """
        params = {"key": self._key(), "q": city}
        try:
            resp = self.fetch(f"{self.base_url}/v1/current.json", params=params)
        except requests.RequestException as exc:
            raise TransportError(f"weatherapi request failed: {exc}") from exc

        try:
            data = resp.json()
        except ValueError as exc:
            raise ParseError(f"weatherapi returned invalid JSON for {city}") from exc
        if not isinstance(data, dict):
            raise ParseError(f"weatherapi returned unexpected payload for {city}")

        self._raise_for_error(data, city)

        current = data.get("current")
        temp_c = current.get("temp_c") if isinstance(current, dict) else None
        if isinstance(temp_c, bool) or not isinstance(temp_c, (int, float)):
            raise ParseError(f"weatherapi payload for {city} has no current.temp_c")

        try:
            value = float(temp_c)
        except OverflowError as exc:
            raise ParseError(f"weatherapi temp_c for {city} is out of range") from exc
        if not math.isfinite(value):
            raise ParseError(f"weatherapi temp_c for {city} is not a finite number")

        logger.debug("temperature for %s is %s°C", city, value)
        return value
