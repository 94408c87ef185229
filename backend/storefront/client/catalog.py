"""
Catalog query service - builds product listing requests against the API and
sorts/paginates the results locally, since the server does neither.
"""
import logging
import math
from dataclasses import dataclass, fields
from urllib.parse import parse_qs, urlsplit

import httpx

from storefront.client.filters import DEFAULT_SORT, FilterState
from storefront.config import Config
from storefront.models import Category, Product, ProductAttribute, ProductImage

logger = logging.getLogger(__name__)

# Python field name -> query parameter the API expects
PARAM_NAMES = {
    "type": "type",
    "brand": "brand",
    "min_price": "minPrice",
    "max_price": "maxPrice",
    "featured": "featured",
    "search": "search",
}


@dataclass
class CatalogQuery:
    type: str | None = None
    brand: str | None = None
    min_price: float | None = None
    max_price: float | None = None
    featured: bool | None = None
    search: str | None = None

    def to_params(self) -> dict[str, str]:
        """Query parameters for every non-empty field."""
        params = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if value is None or value == "":
                continue
            if isinstance(value, bool):
                value = "true" if value else "false"
            elif isinstance(value, float) and value.is_integer():
                value = int(value)
            params[PARAM_NAMES[f.name]] = str(value)
        return params

    @classmethod
    def from_filter_state(cls, state: FilterState) -> "CatalogQuery":
        filters = state.filters
        return cls(
            type=filters.type.value if filters.type else None,
            brand=filters.brand,
            min_price=filters.min_price,
            max_price=filters.max_price,
            search=state.search_query or None,
        )


def query_from_url(url: str) -> CatalogQuery:
    """Read the type, brand and search parameters of a products page URL."""
    params = parse_qs(urlsplit(url).query)

    def first(name: str) -> str | None:
        values = params.get(name)
        return values[0] if values else None

    return CatalogQuery(type=first("type"), brand=first("brand"), search=first("search"))


def _rating(product: Product) -> float:
    return float(product.product_rating or "0")


def sort_products(products: list[Product], sort_by: str = DEFAULT_SORT) -> list[Product]:
    """Sort by featured, price-low, price-high, newest or rating; ties keep server order.

    Price sorts use the raw price, not the discounted one. Unknown keys
    fall back to featured-first.
    """
    if sort_by == "price-low":
        return sorted(products, key=lambda p: float(p.price))
    if sort_by == "price-high":
        return sorted(products, key=lambda p: -float(p.price))
    if sort_by == "newest":
        return sorted(products, key=lambda p: -p.product_id)
    if sort_by == "rating":
        return sorted(products, key=lambda p: -_rating(p))
    return sorted(products, key=lambda p: 0 if p.is_featured else 1)


def paginate(products: list, page: int, page_size: int = Config.PAGE_SIZE) -> list:
    """Items of a 1-based page. Pages past the end are empty."""
    if page < 1:
        raise ValueError(f"page must be >= 1, got {page}")
    start = (page - 1) * page_size
    return products[start:start + page_size]


def total_pages(count: int, page_size: int = Config.PAGE_SIZE) -> int:
    return math.ceil(count / page_size)


class CatalogClient:
    """Async client for the catalog API."""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._client = httpx.AsyncClient(
            base_url=base_url or Config.API_BASE_URL,
            timeout=timeout if timeout is not None else Config.API_TIMEOUT,
            headers={"Content-Type": "application/json"},
            transport=transport,
        )

    async def __aenter__(self) -> "CatalogClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _get(self, path: str, params: dict | None = None):
        logger.debug(f"Making API request: GET {path} {params or ''}")
        response = await self._client.get(path, params=params)
        response.raise_for_status()
        return response.json()

    async def get_products(self, query: CatalogQuery | None = None) -> list[Product]:
        """Fetch a filtered listing. Any HTTP failure yields an empty list."""
        params = query.to_params() if query else None
        try:
            data = await self._get("/api/products", params)
        except httpx.HTTPError as e:
            logger.error(f"API Error: {e}")
            return []
        return [Product.model_validate(item) for item in data]

    async def get_product(self, product_id: int) -> Product:
        return Product.model_validate(await self._get(f"/api/products/{product_id}"))

    async def get_categories(self) -> list[Category]:
        return [Category.model_validate(item) for item in await self._get("/api/categories")]

    async def search(self, query: str) -> list[Product]:
        data = await self._get("/api/search", {"q": query})
        return [Product.model_validate(item) for item in data]

    async def get_product_images(self, product_id: int) -> list[ProductImage]:
        data = await self._get(f"/api/products/{product_id}/images")
        return [ProductImage.model_validate(item) for item in data]

    async def get_product_attributes(self, product_id: int) -> list[ProductAttribute]:
        data = await self._get(f"/api/products/{product_id}/attributes")
        return [ProductAttribute.model_validate(item) for item in data]


class CatalogBrowser:
    """State behind the product listing page: query, sort key and current page."""

    def __init__(self, client: CatalogClient, page_size: int = Config.PAGE_SIZE):
        self.client = client
        self.page_size = page_size
        self.query = CatalogQuery()
        self.sort_by = DEFAULT_SORT
        self.page = 1
        self.products: list[Product] = []

    def set_query(self, query: CatalogQuery) -> None:
        # New filters or search text start again from the first page
        if query != self.query:
            self.query = query
            self.page = 1

    def set_sort_by(self, sort_by: str) -> None:
        self.sort_by = sort_by

    def set_page(self, page: int) -> None:
        if page < 1:
            raise ValueError(f"page must be >= 1, got {page}")
        self.page = page

    async def load(self) -> list[Product]:
        self.products = await self.client.get_products(self.query)
        return self.products

    @property
    def total_pages(self) -> int:
        return total_pages(len(self.products), self.page_size)

    def page_items(self) -> list[Product]:
        return paginate(sort_products(self.products, self.sort_by), self.page, self.page_size)
