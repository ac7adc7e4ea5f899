import pytest

from amazon_catalog.exceptions import PageOutOfRangeError, RequestValidationError
from amazon_catalog.models import LookupRequest, SearchRequest
from amazon_catalog.request_builder import (
    build_lookup_params,
    build_search_params,
    params_for_lookup,
    params_for_search,
)
from amazon_catalog.search_indexes import SEARCH_INDEXES


def test_search_defaults_to_all_without_sort():
    params = build_search_params()

    assert params == {
        "Operation": "ItemSearch",
        "ResponseGroup": "ItemAttributes,Offers,Images,EditorialReview",
        "Condition": "New",
        "Availability": "Available",
        "SearchIndex": "All",
    }


@pytest.mark.parametrize("category", [None, "", "All"])
def test_all_never_includes_sort(category):
    params = build_search_params(category=category, sort_by="price")

    assert params["SearchIndex"] == "All"
    assert "Sort" not in params


def test_specific_category_includes_sort():
    params = build_search_params(category="Books", sort_by="-price")

    assert params["SearchIndex"] == "Books"
    assert params["Sort"] == "-price"


@pytest.mark.parametrize("sort_by", [None, ""])
def test_falsy_sort_is_omitted(sort_by):
    params = build_search_params(category="Baby", sort_by=sort_by)

    assert "Sort" not in params


def test_unknown_category_passes_through_without_default_sort():
    params = build_search_params(category="Gadgets", sort_by="")

    assert params["SearchIndex"] == "Gadgets"
    assert "Sort" not in params


def test_keywords_are_assigned_verbatim():
    params = build_search_params(keywords="usb-c  cable", page=2)

    assert params["Keywords"] == "usb-c  cable"
    assert params["ItemPage"] == 2


def test_keywords_omitted_when_none():
    assert "Keywords" not in build_search_params(keywords=None)


@pytest.mark.parametrize("category", [name for name in SEARCH_INDEXES if name != "All"])
@pytest.mark.parametrize("page", [1, 5, 10])
def test_page_within_bound_for_specific_categories(category, page):
    assert build_search_params(category=category, page=page)["ItemPage"] == page


@pytest.mark.parametrize("page", [1, 3, 5])
def test_page_within_bound_for_all(page):
    assert build_search_params(category="All", page=page)["ItemPage"] == page


@pytest.mark.parametrize("page", [0, -4])
def test_page_below_one_is_raised_to_one(page):
    assert build_search_params(category="Books", page=page)["ItemPage"] == 1


@pytest.mark.parametrize(
    "category,page,max_page",
    [("Books", 11, 10), ("Electronics", 50, 10), ("All", 6, 5), (None, 6, 5)],
)
def test_page_above_bound_is_rejected(category, page, max_page):
    with pytest.raises(PageOutOfRangeError) as exc_info:
        build_search_params(category=category, page=page)

    assert isinstance(exc_info.value, RequestValidationError)
    assert exc_info.value.max_page == max_page
    assert "Page must be <= 10" in str(exc_info.value)


def test_page_omitted_when_not_given():
    assert "ItemPage" not in build_search_params(category="Books")


def test_lookup_joins_identifiers():
    params = build_lookup_params(["B000X", "B000Y"])

    assert params == {
        "Operation": "ItemLookup",
        "ResponseGroup": "ItemAttributes,Offers,Reviews,Images,EditorialReview",
        "ReviewSort": "-OverallRating",
        "ItemId": "B000X,B000Y",
        "MerchantId": "All",
    }


def test_lookup_single_identifier_amazon_only():
    params = build_lookup_params("B000X", amazon_only=True)

    assert params["ItemId"] == "B000X"
    assert params["MerchantId"] == "Amazon"


def test_request_models_map_to_params():
    search = params_for_search(SearchRequest(category="Automotive", keywords="wiper", condition="Used"))
    lookup = params_for_lookup(LookupRequest(item_ids=("A1", "A2")))

    assert search["Condition"] == "Used"
    assert search["Keywords"] == "wiper"
    assert lookup["ItemId"] == "A1,A2"


def test_params_are_fresh_per_call():
    first = build_search_params(category="Books")
    first["Keywords"] = "mutated"

    assert "Keywords" not in build_search_params(category="Books")
