"""Errors raised inside the catalog pipeline.

CatalogClient catches every CatalogError at its boundary, records the message
in its error log and returns False; callers of the client never see these.
"""

from typing import Optional


class CatalogError(Exception):
    """Base class for all catalog client failures."""


class RequestValidationError(CatalogError):
    """Caller-supplied arguments rejected before any network call."""


class PageOutOfRangeError(RequestValidationError):
    def __init__(self, page: int, max_page: int) -> None:
        super().__init__("Page must be <= 10, Unless SearchIndex is All then it must be <= 5")
        self.page = page
        self.max_page = max_page


class TransportError(CatalogError):
    """Network or HTTP failure while fetching a signed URL."""


class ResponseParseError(CatalogError):
    """The response body was not well-formed XML."""


class CatalogApiError(CatalogError):
    """The API answered but reported the request as invalid (or sent no body)."""

    def __init__(self, message: str, code: Optional[str] = None, api_message: Optional[str] = None) -> None:
        super().__init__(message)
        self.code = code
        self.api_message = api_message
