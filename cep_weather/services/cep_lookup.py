import logging
from typing import Optional

import requests

from .. import config
from ..errors import NotFoundError, ParseError, TransportError, ValidationError
from ..utils.validation import is_valid_cep
from .transport import HttpGet, RequestsTransport

logger = logging.getLogger(__name__)


class ViaCepService:
    """Resolve a CEP to its locality (city name) using ViaCEP."""

    def __init__(self, fetch: Optional[HttpGet] = None, base_url: str = config.VIACEP_URL):
        self.fetch = fetch or RequestsTransport()
        self.base_url = base_url

    def _lookup_url(self, cep: str) -> str:
        return f"{self.base_url}/ws/{cep}/json/"

    def resolve_city(self, cep: str) -> str:
        """
        Return the locality for *cep*.

        A malformed *cep* raises `ValidationError` without touching the network.

        Raises `TransportError` when ViaCEP cannot be reached, `ParseError`
        when the body is not the expected JSON object and `NotFoundError`
        when ViaCEP flags the CEP as unknown or returns no locality.
        """
        if not is_valid_cep(cep):
            raise ValidationError(f"invalid cep {cep!r}")

        try:
            resp = self.fetch(self._lookup_url(cep))
        except requests.RequestException as exc:
            raise TransportError(f"viacep request failed: {exc}") from exc

        try:
            data = resp.json()
        except ValueError as exc:
            raise ParseError(f"viacep returned invalid JSON for {cep}") from exc
        if not isinstance(data, dict):
            raise ParseError(f"viacep returned unexpected payload for {cep}")

        # ViaCEP has sent both `true` and `"true"` over the years
        if data.get("erro") in (True, "true"):
            raise NotFoundError(f"cep {cep} not found")

        locality = data.get("localidade", "")
        if not isinstance(locality, str):
            raise ParseError(f"viacep returned a non-string locality for {cep}")
        if not locality:
            raise NotFoundError(f"cep {cep} not found")

        logger.debug("cep %s resolved to %s", cep, locality)
        return locality
