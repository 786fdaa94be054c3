from typing import Optional, Protocol

from .cep_lookup import ViaCepService
from .transport import HttpGet, RequestsTransport
from .weather_api import WeatherApiService


class WeatherLookup(Protocol):
    """The two lookups the `/weather` handler needs."""

    def resolve_city(self, cep: str) -> str:
        ...

    def resolve_temperature(self, city: str) -> float:
        ...


class WeatherClient:
    """ViaCEP + WeatherAPI sharing one fetcher."""

    def __init__(self, fetch: Optional[HttpGet] = None, api_key: Optional[str] = None):
        fetch = fetch or RequestsTransport()
        self.cep_service = ViaCepService(fetch)
        self.weather_service = WeatherApiService(fetch, api_key=api_key)

    def resolve_city(self, cep: str) -> str:
        return self.cep_service.resolve_city(cep)

    def resolve_temperature(self, city: str) -> float:
        return self.weather_service.resolve_temperature(city)
