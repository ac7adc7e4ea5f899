from functools import lru_cache
from typing import List, Optional, Union

from dotenv import load_dotenv
from fastapi import Depends, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

load_dotenv()

from amazon_catalog import SEARCH_INDEXES, CatalogClient, client_from_env  # noqa: E402
from amazon_catalog.logging_config import configure_logging  # noqa: E402
from amazon_catalog.utils import serialize_item  # noqa: E402

configure_logging()

app = FastAPI()

# Enable CORS for local development
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # In production, specify the exact origin
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class SearchBody(BaseModel):
    category: Optional[str] = None
    page: Optional[int] = None
    keywords: Optional[str] = None
    sort_by: Optional[str] = "salesrank"
    availability: str = "Available"
    condition: str = "New"


class LookupBody(BaseModel):
    item_ids: Union[str, List[str]]
    amazon_only: bool = False


# Shared client instance, built lazily so tests can override it.
# Note: the error log is shared across requests and not thread-safe.
@lru_cache
def get_client() -> CatalogClient:
    return client_from_env()


def _respond(result):
    if result.ok:
        return {"items": [serialize_item(item) for item in result.items], "params": result.params}
    raise HTTPException(status_code=502, detail=result.error)


@app.post("/search")
def search_endpoint(body: SearchBody, client: CatalogClient = Depends(get_client)):
    result = client.search_result(
        category=body.category,
        page=body.page,
        keywords=body.keywords,
        sort_by=body.sort_by,
        availability=body.availability,
        condition=body.condition,
    )
    if result.params is None:
        # Rejected before any request was signed.
        raise HTTPException(status_code=422, detail=result.error)
    return _respond(result)


@app.post("/lookup")
def lookup_endpoint(body: LookupBody, client: CatalogClient = Depends(get_client)):
    return _respond(client.lookup_result(body.item_ids, amazon_only=body.amazon_only))


@app.get("/errors")
def errors_endpoint(client: CatalogClient = Depends(get_client)):
    return {"errors": client.get_errors()}


@app.get("/search-indexes")
def search_indexes_endpoint():
    return {
        name: {
            "department": index.department,
            "root_browse_node": index.root_browse_node,
            "sort_values": list(index.sort_values),
            "default_sort": index.default_sort,
            "parameters": sorted(index.parameters),
        }
        for name, index in SEARCH_INDEXES.items()
    }


@app.get("/")
def root():
    return {"status": "Catalog API is running", "docs": "/docs"}


@app.get("/health")
def health_check():
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
