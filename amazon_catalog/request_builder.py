"""Translate high-level search/lookup arguments into API request parameters."""

import logging
from typing import Optional, Sequence, Union

from .config import (
    ALL_INDEX,
    LOOKUP_RESPONSE_GROUP,
    LOOKUP_REVIEW_SORT,
    MAX_PAGE,
    MAX_PAGE_ALL,
    SEARCH_RESPONSE_GROUP,
)
from .exceptions import PageOutOfRangeError
from .models import LookupRequest, RequestParameters, SearchRequest
from .search_indexes import get_search_index

logger = logging.getLogger(__name__)


def build_search_params(
    category: Optional[str] = None,
    page: Optional[int] = None,
    keywords: Optional[str] = None,
    sort_by: Optional[str] = "salesrank",
    availability: str = "Available",
    condition: str = "New",
) -> RequestParameters:
    """Build ItemSearch parameters.

    Raises PageOutOfRangeError when ``page`` exceeds the bound of the
    resolved category (10, or 5 for "All").
    """
    search_index = category or ALL_INDEX

    params: RequestParameters = {
        "Operation": "ItemSearch",
        "ResponseGroup": SEARCH_RESPONSE_GROUP,
        "Condition": condition,
        "Availability": availability,
        "SearchIndex": search_index,
    }

    # The API rejects Sort on the catch-all index.
    if search_index != ALL_INDEX:
        if get_search_index(search_index) is None:
            logger.debug("Unknown search index %r, passing through", search_index)
        if sort_by:
            params["Sort"] = sort_by

    if keywords is not None:
        params["Keywords"] = keywords

    if page is not None:
        page = max(int(page), 1)
        max_page = MAX_PAGE_ALL if search_index == ALL_INDEX else MAX_PAGE
        if page > max_page:
            raise PageOutOfRangeError(page, max_page)
        params["ItemPage"] = page

    return params


def build_lookup_params(item_ids: Union[str, Sequence[str]], amazon_only: bool = False) -> RequestParameters:
    """Build ItemLookup parameters for one ASIN or a list of them."""
    if not isinstance(item_ids, str):
        item_ids = ",".join(item_ids)

    return {
        "Operation": "ItemLookup",
        "ResponseGroup": LOOKUP_RESPONSE_GROUP,
        "ReviewSort": LOOKUP_REVIEW_SORT,
        "ItemId": item_ids,
        "MerchantId": "Amazon" if amazon_only else "All",
    }


def params_for_search(request: SearchRequest) -> RequestParameters:
    return build_search_params(
        category=request.category,
        page=request.page,
        keywords=request.keywords,
        sort_by=request.sort_by,
        availability=request.availability,
        condition=request.condition,
    )


def params_for_lookup(request: LookupRequest) -> RequestParameters:
    return build_lookup_params(request.item_ids, amazon_only=request.amazon_only)
