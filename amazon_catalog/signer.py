"""Signed request URLs for the Product Advertising API.

Provides:
- AbstractRequestSigner: interface the client calls through
- AmazonUrlBuilder: HMAC-SHA256 query-string signing for the regional endpoints"""

import base64
import hashlib
import hmac
from datetime import datetime, timezone
from typing import Mapping, Optional, Union
from urllib.parse import quote

from .config import API_VERSION, REQUEST_PATH, SERVICE_NAME

REGION_HOSTS = {
    "br": "webservices.amazon.com.br",
    "ca": "webservices.amazon.ca",
    "cn": "webservices.amazon.cn",
    "de": "webservices.amazon.de",
    "es": "webservices.amazon.es",
    "fr": "webservices.amazon.fr",
    "in": "webservices.amazon.in",
    "it": "webservices.amazon.it",
    "jp": "webservices.amazon.co.jp",
    "mx": "webservices.amazon.com.mx",
    "uk": "webservices.amazon.co.uk",
    "us": "webservices.amazon.com",
}


def _encode(value: str) -> str:
    # RFC 3986: only unreserved characters stay literal.
    return quote(value, safe="-_.~")


class AbstractRequestSigner:
    """Interface for request signers."""
    def generate(self, params: Mapping[str, Union[str, int]]) -> str:
        #Return a fully-qualified signed URL for the given parameters
        raise NotImplementedError


class AmazonUrlBuilder(AbstractRequestSigner):
    """Builds signed ECommerceService URLs for one region."""

    def __init__(self, api_key: str, secret_key: str, tracking_id: str, region: str) -> None:
        region = (region or "").lower()
        if region not in REGION_HOSTS:
            raise ValueError(f"Unsupported region {region!r}")
        self.api_key = api_key
        self.secret_key = secret_key
        self.tracking_id = tracking_id
        self.host = REGION_HOSTS[region]

    def generate(self, params: Mapping[str, Union[str, int]], timestamp: Optional[datetime] = None) -> str:
        timestamp = timestamp or datetime.now(timezone.utc)
        query = {str(k): str(v) for k, v in params.items()}
        # Credentials always win over caller-supplied entries.
        query.update(
            {
                "Service": SERVICE_NAME,
                "AWSAccessKeyId": self.api_key,
                "AssociateTag": self.tracking_id,
                "Version": API_VERSION,
                "Timestamp": timestamp.strftime("%Y-%m-%dT%H:%M:%SZ"),
            }
        )

        canonical = "&".join(
            f"{_encode(key)}={_encode(query[key])}" for key in sorted(query)
        )
        signature = self.sign(canonical)
        return f"https://{self.host}{REQUEST_PATH}?{canonical}&Signature={_encode(signature)}"

    def sign(self, canonical_query: str) -> str:
        """Base64 HMAC-SHA256 of the canonical GET request."""
        string_to_sign = f"GET\n{self.host}\n{REQUEST_PATH}\n{canonical_query}"
        digest = hmac.new(
            self.secret_key.encode("utf-8"),
            string_to_sign.encode("utf-8"),
            hashlib.sha256,
        ).digest()
        return base64.b64encode(digest).decode("ascii")
