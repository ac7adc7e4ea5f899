# Data models for catalog requests and results.
from dataclasses import dataclass
from decimal import Decimal
from typing import Dict, FrozenSet, List, Optional, Sequence, Tuple, Union

RequestParameters = Dict[str, Union[str, int]]


@dataclass(frozen=True)
class SearchIndex:
    """Static descriptor of one catalog department (search index)."""

    name: str
    department: str
    root_browse_node: int
    sort_values: Tuple[str, ...] = ()
    default_sort: Optional[str] = None
    parameters: FrozenSet[str] = frozenset()

    def __post_init__(self) -> None:
        if self.default_sort is not None and self.default_sort not in self.sort_values:
            raise ValueError(
                f"default sort {self.default_sort!r} is not a sort value of {self.name!r}"
            )


@dataclass
class SearchRequest:
    """High-level ItemSearch arguments.

    request_builder maps it to the flat ItemSearch parameter mapping.
    """

    category: Optional[str] = None  # None/"" searches "All"
    page: Optional[int] = None  # 1..10, or 1..5 when searching "All"
    keywords: Optional[str] = None
    sort_by: Optional[str] = "salesrank"  # ignored for "All"
    availability: str = "Available"
    condition: str = "New"  # "New" | "Used" | "Collectible" | "Refurbished" | "All"


@dataclass
class LookupRequest:
    """ItemLookup arguments: one ASIN or several."""

    item_ids: Union[str, Sequence[str]]
    amazon_only: bool = False


@dataclass(frozen=True)
class CatalogItem:
    """Simplified projection of one <Item> node."""

    asin: str
    url: str
    list_price: Decimal
    lowest_price: Decimal
    title: str
    available: bool = False
    prime: bool = False
    is_adult_product: bool = False
    large_image: str = ""
    medium_image: str = ""
    small_image: str = ""
    description: str = ""
    features: Tuple[str, ...] = ()
    details: str = ""
    tags: Tuple[Optional[str], Optional[str]] = (None, None)  # (binding, manufacturer)


@dataclass
class CatalogResult:
    """Outcome of one client call, with its diagnostics."""

    items: Optional[List[CatalogItem]] = None
    params: Optional[RequestParameters] = None
    url: Optional[str] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.items is not None
