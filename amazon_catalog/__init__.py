"""Product Advertising API catalog client."""

from .client import CatalogClient, client_from_env
from .exceptions import (
    CatalogApiError,
    CatalogError,
    PageOutOfRangeError,
    RequestValidationError,
    ResponseParseError,
    TransportError,
)
from .models import CatalogItem, CatalogResult, SearchIndex
from .search_indexes import SEARCH_INDEXES, get_search_index

__all__ = [
    "CatalogApiError",
    "CatalogClient",
    "CatalogError",
    "CatalogItem",
    "CatalogResult",
    "PageOutOfRangeError",
    "RequestValidationError",
    "ResponseParseError",
    "SEARCH_INDEXES",
    "SearchIndex",
    "TransportError",
    "client_from_env",
    "get_search_index",
]
