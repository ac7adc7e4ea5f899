"""Projection of ItemSearch / ItemLookup XML responses into CatalogItem records."""

import logging
import xml.etree.ElementTree as ET
from typing import List, Optional

from .exceptions import CatalogApiError
from .models import CatalogItem
from .utils import ZERO, build_details, minor_units_to_decimal

logger = logging.getLogger(__name__)

_TRUE_VALUES = {"1", "true"}


def _text(node: Optional[ET.Element], path: str) -> Optional[str]:
    """Text of the first element at ``path`` below ``node``, or None if missing."""
    if node is None:
        return None
    found = node.find(path)
    if found is None:
        return None
    return (found.text or "").strip()


def _flag(node: Optional[ET.Element], path: str) -> bool:
    return (_text(node, path) or "").lower() in _TRUE_VALUES


def transform(root: Optional[ET.Element]) -> List[CatalogItem]:
    """Validate a parsed response and return its items in document order.

    Raises CatalogApiError when there is no document or the API flagged
    the request as invalid. A response without <Items> is an empty result.
    """
    if root is None or len(root) == 0:
        raise CatalogApiError("No XML response found from AWS.")

    items_node = root.find("Items")
    if items_node is None:
        return []

    if _text(items_node, "Request/IsValid") != "True":
        code = _text(items_node, "Request/Errors/Error/Code") or ""
        message = _text(items_node, "Request/Errors/Error/Message") or ""
        raise CatalogApiError(f"API ERROR ({code}) : {message}", code=code, api_message=message)

    items = [_parse_item(node) for node in items_node.findall("Item")]
    logger.debug("Transformed %d items", len(items))
    return items


def _parse_item(node: ET.Element) -> CatalogItem:
    attributes = node.find("ItemAttributes")

    if node.find("OfferSummary") is not None:
        lowest_price = minor_units_to_decimal(_text(node, "OfferSummary/LowestNewPrice/Amount"))
    else:
        lowest_price = ZERO

    # Only the first offer's listing decides availability.
    listing = node.find("Offers/Offer/OfferListing")
    if listing is not None:
        available = _text(listing, "AvailabilityAttributes/AvailabilityType") == "now"
        prime = _flag(listing, "IsEligibleForPrime")
    else:
        available = False
        prime = False

    description = _text(node, "EditorialReviews/EditorialReview/Content") or ""
    features = tuple(
        (feature.text or "").strip()
        for feature in (attributes.findall("Feature") if attributes is not None else [])
    )

    return CatalogItem(
        asin=_text(node, "ASIN") or "",
        url=_text(node, "DetailPageURL") or "",
        list_price=minor_units_to_decimal(_text(attributes, "ListPrice/Amount")),
        lowest_price=lowest_price,
        title=_text(attributes, "Title") or "",
        available=available,
        prime=prime,
        is_adult_product=_flag(attributes, "IsAdultProduct"),
        large_image=_text(node, "LargeImage/URL") or "",
        medium_image=_text(node, "MediumImage/URL") or "",
        small_image=_text(node, "SmallImage/URL") or "",
        description=description,
        features=features,
        details=build_details(description, features),
        tags=(_text(attributes, "Binding") or None, _text(attributes, "Manufacturer") or None),
    )
