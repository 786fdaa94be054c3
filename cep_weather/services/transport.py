import logging
from typing import Mapping, Optional, Protocol

import requests

from .. import config

logger = logging.getLogger(__name__)


class HttpGet(Protocol):
    """Anything that can perform a GET and hand back a `requests.Response`."""

    def __call__(
        self, url: str, params: Optional[Mapping[str, str]] = None
    ) -> requests.Response:
        ...


class RequestsTransport:
    """Default `HttpGet`: a shared `requests.Session` with a bounded timeout."""

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        timeout: float = config.HTTP_TIMEOUT,
    ):
        self.session = session if session is not None else requests.Session()
        self.timeout = timeout

    def __call__(
        self, url: str, params: Optional[Mapping[str, str]] = None
    ) -> requests.Response:
        logger.debug("GET %s", url)
        return self.session.get(
            url, params=params, headers=config.USER_AGENT, timeout=self.timeout
        )
