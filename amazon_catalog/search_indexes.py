"""Static search index (department) table.

Reference: https://docs.aws.amazon.com/AWSECommerceService/latest/DG/LocaleUS.html
"""

from types import MappingProxyType
from typing import Mapping, Optional

from .models import SearchIndex

_COMMON_PARAMETERS = (
    "Availability",
    "Brand",
    "ItemPage",
    "Keywords",
    "Manufacturer",
    "MaximumPrice",
    "MerchantId",
    "MinPercentageOff",
    "MinimumPrice",
    "Sort",
    "Title",
)

_INDEXES = (
    SearchIndex(
        name="All",
        department="All Departments",
        root_browse_node=0,
        sort_values=(),
        default_sort=None,
        parameters=frozenset({
            "Availability",
            "ItemPage",
            "Keywords",
            "MaximumPrice",
            "MerchantId",
            "MinPercentageOff",
            "MinimumPrice",
        }),
    ),
    SearchIndex(
        name="Appliances",
        department="Appliances",
        root_browse_node=2619526011,
        sort_values=(
            "salesrank",
            "pmrank",
            "price",
            "-price",
            "relevancerank",
            "reviewrank",
            "reviewrank_authority",
        ),
        default_sort="salesrank",
        parameters=frozenset(_COMMON_PARAMETERS),
    ),
    SearchIndex(
        name="ArtsAndCrafts",
        department="Arts, Crafts & Sewing",
        root_browse_node=2617942011,
        sort_values=(
            "salesrank",
            "pmrank",
            "reviewrank",
            "reviewrank_authority",
            "relevancerank",
            "price",
            "-price",
        ),
        default_sort="salesrank",
        parameters=frozenset(_COMMON_PARAMETERS),
    ),
    SearchIndex(
        name="Automotive",
        department="Automotive",
        root_browse_node=15690151,
        sort_values=(
            "salesrank",
            "titlerank",
            "-titlerank",
            "relevancerank",
            "price",
            "-price",
        ),
        default_sort="salesrank",
        parameters=frozenset(_COMMON_PARAMETERS),
    ),
    SearchIndex(
        name="Baby",
        department="Baby",
        root_browse_node=165797011,
        sort_values=(
            "salesrank",
            "psrank",
            "titlerank",
            "-price",
            "price",
        ),
        default_sort="salesrank",
        parameters=frozenset(("Author",) + _COMMON_PARAMETERS),
    ),
    SearchIndex(
        name="Books",
        department="Books",
        root_browse_node=283155,
        sort_values=(
            "relevancerank",
            "salesrank",
            "reviewrank",
            "pricerank",
            "inverse-pricerank",
            "daterank",
            "titlerank",
            "-titlerank",
            "-unit-sales",
            "price",
            "-price",
            "-publication_date",
        ),
        default_sort="salesrank",
        parameters=frozenset({
            "Author",
            "Availability",
            "ItemPage",
            "Keywords",
            "MaximumPrice",
            "MerchantId",
            "MinPercentageOff",
            "MinimumPrice",
            "Power",
            "Publisher",
            "Sort",
            "Title",
        }),
    ),
    SearchIndex(
        name="Electronics",
        department="Electronics",
        root_browse_node=172282,
        sort_values=(
            "salesrank",
            "pmrank",
            "titlerank",
            "-titlerank",
            "reviewrank",
            "price",
            "-price",
            "relevancerank",
        ),
        default_sort="salesrank",
        parameters=frozenset(_COMMON_PARAMETERS),
    ),
)

SEARCH_INDEXES: Mapping[str, SearchIndex] = MappingProxyType({idx.name: idx for idx in _INDEXES})


def get_search_index(name: Optional[str]) -> Optional[SearchIndex]:
    """Return the descriptor for a category token, or None if unknown."""
    if not name:
        return None
    return SEARCH_INDEXES.get(name)
