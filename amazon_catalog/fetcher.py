"""HTTP transport for signed catalog URLs."""

import logging
from typing import Optional

import requests

from .config import http_timeout_seconds
from .exceptions import TransportError

logger = logging.getLogger(__name__)


class AbstractHttpFetcher:
    """Interface for HTTP fetchers."""
    def execute(self, url: str) -> str:
        #Return the raw response body, or raise TransportError
        raise NotImplementedError


class RequestsHttpFetcher(AbstractHttpFetcher):
    """GET adapter over requests."""

    def __init__(self, timeout: Optional[float] = None) -> None:
        self.timeout = timeout if timeout is not None else http_timeout_seconds()

    def execute(self, url: str) -> str:
        try:
            response = requests.get(url, headers={"Accept": "application/xml"}, timeout=self.timeout)
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            logger.debug("GET failed: %s", e)
            raise TransportError(str(e)) from e
        return response.text
