"""Utility functions for the catalog client."""
import re
from dataclasses import asdict
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any, Dict, Iterable, Optional

from bs4 import BeautifulSoup

from .models import CatalogItem

CENT = Decimal("0.01")
ZERO = Decimal("0.00")

_WHITESPACE_RE = re.compile(r"\s+")
_DISALLOWED_RE = re.compile(r'[^A-Za-z0-9.,\-" ]')


def minor_units_to_decimal(value: Optional[str]) -> Decimal:
    """Convert an integer minor-unit amount ("1999") to a two-place Decimal (19.99)."""
    if value is None:
        return ZERO
    try:
        amount = Decimal(str(value).strip())
    except InvalidOperation:
        return ZERO
    if not amount.is_finite():
        return ZERO
    try:
        return (amount / 100).quantize(CENT, rounding=ROUND_HALF_UP)
    except InvalidOperation:
        # More digits than the decimal context can hold.
        return ZERO


def strip_tags(text: str) -> str:
    """Markup to plain text, with HTML entities decoded."""
    return BeautifulSoup(text, "html.parser").get_text(separator=" ")


def sentence_case(text: str) -> str:
    """Upper-case the first letter of the text and of each sentence after ". "."""
    chars = list(text)
    capitalize = True
    for i, ch in enumerate(chars):
        if capitalize and ch.isalpha():
            chars[i] = ch.upper()
            capitalize = False
        elif ch == "." and i + 1 < len(chars) and chars[i + 1] == " ":
            capitalize = True
    return "".join(chars)


def build_details(description: str, features: Iterable[str]) -> str:
    """Plain-text summary of the description and feature bullets."""
    text = " ".join([description, *features])
    text = strip_tags(text)
    text = _WHITESPACE_RE.sub(" ", text)
    text = _DISALLOWED_RE.sub("", text)
    text = _WHITESPACE_RE.sub(" ", text).strip()
    return sentence_case(text)


def serialize_item(item: CatalogItem) -> Dict[str, Any]:
    """Convert CatalogItem to a JSON-serializable dict."""
    data = asdict(item)
    data["list_price"] = str(item.list_price)
    data["lowest_price"] = str(item.lowest_price)
    data["features"] = list(item.features)
    data["tags"] = list(item.tags)
    return data
