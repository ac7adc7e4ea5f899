"""Product Advertising API catalog client.

Flow per call: build params → sign URL → fetch → parse XML → transform items.
Failures never propagate: the public methods return False and the reason is
appended to the client's error log (see get_errors()).

Entry points: CatalogClient.search(), CatalogClient.lookup()
"""

import logging
from typing import List, Optional, Sequence, Union

from . import config
from .exceptions import CatalogError, RequestValidationError, ResponseParseError
from .fetcher import AbstractHttpFetcher, RequestsHttpFetcher
from .models import CatalogItem, CatalogResult, LookupRequest, RequestParameters, SearchRequest
from .request_builder import params_for_lookup, params_for_search
from .signer import AbstractRequestSigner, AmazonUrlBuilder
from .transformer import transform
from .xml_parser import parse_response

logger = logging.getLogger(__name__)


class CatalogClient:
    """Search and lookup against one regional Product Advertising API endpoint.

    Not safe for concurrent calls: the error log and last params are shared
    instance state. Use one client per thread, or the *_result() methods.
    """

    def __init__(
        self,
        api_key: str,
        secret_key: str,
        region: str,
        tracking_id: str = config.DEFAULT_TRACKING_ID,
        signer: AbstractRequestSigner | None = None,
        fetcher: AbstractHttpFetcher | None = None,
    ) -> None:
        self.errors: List[str] = []
        self.last_params: Optional[RequestParameters] = None
        self._signer: AbstractRequestSigner = signer or AmazonUrlBuilder(api_key, secret_key, tracking_id, region)
        self._fetcher: AbstractHttpFetcher = fetcher or RequestsHttpFetcher()

    def search(
        self,
        category: Optional[str] = None,
        page: Optional[int] = None,
        keywords: Optional[str] = None,
        sort_by: Optional[str] = "salesrank",
        availability: str = "Available",
        condition: str = "New",
    ) -> Union[List[CatalogItem], bool]:
        """Search items by category and/or keywords.

        Returns the items, or False on failure (see get_errors()).
        """
        result = self.search_result(category, page, keywords, sort_by, availability, condition)
        return result.items if result.ok else False

    def lookup(self, item_ids: Union[str, Sequence[str]], amazon_only: bool = False) -> Union[List[CatalogItem], bool]:
        """Look up one ASIN or a list of ASINs. Returns the items, or False on failure."""
        result = self.lookup_result(item_ids, amazon_only)
        return result.items if result.ok else False

    def search_result(
        self,
        category: Optional[str] = None,
        page: Optional[int] = None,
        keywords: Optional[str] = None,
        sort_by: Optional[str] = "salesrank",
        availability: str = "Available",
        condition: str = "New",
    ) -> CatalogResult:
        request = SearchRequest(
            category=category,
            page=page,
            keywords=keywords,
            sort_by=sort_by,
            availability=availability,
            condition=condition,
        )
        self.last_params = None
        try:
            params = params_for_search(request)
        except RequestValidationError as e:
            return self._fail(CatalogResult(), str(e))
        return self._execute(params)

    def lookup_result(self, item_ids: Union[str, Sequence[str]], amazon_only: bool = False) -> CatalogResult:
        self.last_params = None
        return self._execute(params_for_lookup(LookupRequest(item_ids=item_ids, amazon_only=amazon_only)))

    def get_errors(self) -> List[str]:
        return list(self.errors)

    def clear_errors(self) -> None:
        self.errors.clear()

    def get_last_params(self) -> Optional[RequestParameters]:
        return self.last_params

    def _execute(self, params: RequestParameters) -> CatalogResult:
        self.last_params = params
        logger.debug("Request params: %s", params)
        result = CatalogResult(params=params)

        try:
            result.url = self._signer.generate(params)
            body = self._fetcher.execute(result.url)
            root = parse_response(body)
            if root is None:
                raise ResponseParseError("malformed XML response")
            items = transform(root)
        except ResponseParseError as e:
            return self._fail(result, f"Error parsing data : {result.url} : {e}")
        except CatalogError as e:
            return self._fail(result, f"Error downloading data : {result.url} : {e}")
        except Exception as e:
            logger.exception("Unexpected failure for %s", params.get("Operation"))
            return self._fail(result, f"Error downloading data : {result.url} : {e}")

        logger.info("%s returned %d items", params.get("Operation"), len(items))
        result.items = items
        return result

    def _fail(self, result: CatalogResult, message: str) -> CatalogResult:
        logger.warning(message)
        self.errors.append(message)
        result.error = message
        return result


def client_from_env(**kwargs) -> CatalogClient:
    """Build a client from the AWS_* / AMAZON_* environment settings."""
    return CatalogClient(
        api_key=config.AWS_ACCESS_KEY_ID,
        secret_key=config.AWS_SECRET_ACCESS_KEY,
        region=config.AMAZON_REGION,
        tracking_id=config.AMAZON_ASSOCIATE_TAG,
        **kwargs,
    )
