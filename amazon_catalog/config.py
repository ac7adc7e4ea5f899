import logging
import os

API_VERSION = "2013-08-01"
SERVICE_NAME = "AWSECommerceService"
REQUEST_PATH = "/onca/xml"

SEARCH_RESPONSE_GROUP = "ItemAttributes,Offers,Images,EditorialReview"
LOOKUP_RESPONSE_GROUP = "ItemAttributes,Offers,Reviews,Images,EditorialReview"
LOOKUP_REVIEW_SORT = "-OverallRating"

ALL_INDEX = "All"
MAX_PAGE = 10  # Highest ItemPage accepted for a specific search index
MAX_PAGE_ALL = 5  # Highest ItemPage accepted when searching "All"

DEFAULT_HTTP_TIMEOUT_SECONDS = 10.0
DEFAULT_TRACKING_ID = "mmxca06-20"

# Region codes accepted by AmazonUrlBuilder.
AMAZON_SITE_BRAZIL = "br"
AMAZON_SITE_CANADA = "ca"
AMAZON_SITE_CHINA = "cn"
AMAZON_SITE_FRANCE = "fr"
AMAZON_SITE_GERMANY = "de"
AMAZON_SITE_INDIA = "in"
AMAZON_SITE_ITALY = "it"
AMAZON_SITE_JAPAN = "jp"
AMAZON_SITE_MEXICO = "mx"
AMAZON_SITE_SPAIN = "es"
AMAZON_SITE_UNITED_KINGDOM = "uk"
AMAZON_SITE_UNITED_STATES = "us"

# Credentials; main.py and server.py load .env before importing the package.
AWS_ACCESS_KEY_ID = os.getenv("AWS_ACCESS_KEY_ID", "")
AWS_SECRET_ACCESS_KEY = os.getenv("AWS_SECRET_ACCESS_KEY", "")
AMAZON_ASSOCIATE_TAG = os.getenv("AMAZON_ASSOCIATE_TAG", DEFAULT_TRACKING_ID)
AMAZON_REGION = os.getenv("AMAZON_REGION", AMAZON_SITE_UNITED_STATES)


def http_timeout_seconds() -> float:
    """CATALOG_HTTP_TIMEOUT, or the default when unset or malformed."""
    raw = os.getenv("CATALOG_HTTP_TIMEOUT")
    if not raw:
        return DEFAULT_HTTP_TIMEOUT_SECONDS
    try:
        timeout = float(raw)
    except ValueError:
        timeout = 0.0
    if timeout <= 0:
        logging.getLogger(__name__).warning(
            "Invalid CATALOG_HTTP_TIMEOUT %r, using %s", raw, DEFAULT_HTTP_TIMEOUT_SECONDS
        )
        return DEFAULT_HTTP_TIMEOUT_SECONDS
    return timeout
