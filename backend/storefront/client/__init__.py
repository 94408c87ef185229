"""Client-side catalog pipeline: cart, filters, and the catalog query service."""
from storefront.client.cart import CartItem, CartLine, CartState, OrderSummary, join_cart, order_summary
from storefront.client.catalog import (
    CatalogBrowser,
    CatalogClient,
    CatalogQuery,
    paginate,
    query_from_url,
    sort_products,
)
from storefront.client.filters import FilterState, ProductFilters

__all__ = [
    "CartItem",
    "CartLine",
    "CartState",
    "OrderSummary",
    "join_cart",
    "order_summary",
    "CatalogBrowser",
    "CatalogClient",
    "CatalogQuery",
    "paginate",
    "query_from_url",
    "sort_products",
    "FilterState",
    "ProductFilters",
]
