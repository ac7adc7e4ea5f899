"""Pytest fixtures: fake signer/fetcher collaborators and sample responses."""

import pytest

from amazon_catalog import CatalogClient
from amazon_catalog.exceptions import TransportError
from amazon_catalog.fetcher import AbstractHttpFetcher
from amazon_catalog.signer import AbstractRequestSigner

NS = "http://webservices.amazon.com/AWSECommerceService/2013-08-01"

ITEM_FULL = """
<Item>
  <ASIN>B000X</ASIN>
  <DetailPageURL>https://www.amazon.com/dp/B000X</DetailPageURL>
  <LargeImage><URL>https://img.test/large.jpg</URL></LargeImage>
  <MediumImage><URL>https://img.test/medium.jpg</URL></MediumImage>
  <SmallImage><URL>https://img.test/small.jpg</URL></SmallImage>
  <ItemAttributes>
    <Binding>Paperback</Binding>
    <Feature>durable cover</Feature>
    <Feature>fits in a pocket!</Feature>
    <IsAdultProduct>0</IsAdultProduct>
    <ListPrice><Amount>2499</Amount><CurrencyCode>USD</CurrencyCode></ListPrice>
    <Manufacturer>Acme Press</Manufacturer>
    <Title>Field Guide</Title>
  </ItemAttributes>
  <OfferSummary>
    <LowestNewPrice><Amount>1999</Amount></LowestNewPrice>
  </OfferSummary>
  <Offers>
    <Offer>
      <OfferListing>
        <AvailabilityAttributes><AvailabilityType>now</AvailabilityType></AvailabilityAttributes>
        <IsEligibleForPrime>1</IsEligibleForPrime>
      </OfferListing>
    </Offer>
  </Offers>
  <EditorialReviews>
    <EditorialReview>
      <Source>Product Description</Source>
      <Content>&lt;b&gt;a handy&lt;/b&gt; guide. great for hikes</Content>
    </EditorialReview>
  </EditorialReviews>
</Item>
"""

ITEM_BARE = """
<Item>
  <ASIN>B000Y</ASIN>
  <DetailPageURL>https://www.amazon.com/dp/B000Y</DetailPageURL>
  <ItemAttributes>
    <Title>Plain Widget</Title>
  </ItemAttributes>
</Item>
"""


def make_response(items: str = "", is_valid: bool = True, errors: str = "", with_items: bool = True) -> str:
    items_section = ""
    if with_items:
        items_section = (
            "<Items><Request>"
            f"<IsValid>{'True' if is_valid else 'False'}</IsValid>"
            f"{errors}"
            f"</Request>{items}</Items>"
        )
    return (
        '<?xml version="1.0" ?>'
        f'<ItemSearchResponse xmlns="{NS}">'
        "<OperationRequest><RequestId>abc</RequestId></OperationRequest>"
        f"{items_section}"
        "</ItemSearchResponse>"
    )


def make_error_response(code: str, message: str) -> str:
    return make_response(
        is_valid=False,
        errors=f"<Errors><Error><Code>{code}</Code><Message>{message}</Message></Error></Errors>",
    )


class FakeSigner(AbstractRequestSigner):
    def __init__(self) -> None:
        self.calls = []

    def generate(self, params):
        self.calls.append(dict(params))
        return f"https://catalog.test/onca/xml?Operation={params['Operation']}"


class FakeFetcher(AbstractHttpFetcher):
    def __init__(self, body: str = "", error: Exception | None = None) -> None:
        self.body = body
        self.error = error
        self.urls = []

    def execute(self, url):
        self.urls.append(url)
        if self.error is not None:
            raise self.error
        return self.body


@pytest.fixture
def signer():
    return FakeSigner()


@pytest.fixture
def fetcher():
    return FakeFetcher(body=make_response(items=ITEM_FULL + ITEM_BARE))


@pytest.fixture
def client(signer, fetcher):
    return CatalogClient("key", "secret", "us", signer=signer, fetcher=fetcher)


@pytest.fixture
def failing_fetcher():
    return FakeFetcher(error=TransportError("503 Server Error"))
