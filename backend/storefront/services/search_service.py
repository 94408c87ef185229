from storefront.models import Product


def _contains(value: str | None, term: str) -> bool:
    return bool(value) and term in value.lower()


def matches_search(product: Product, term: str, include_type: bool = False) -> bool:
    """Case-insensitive substring match on name, brand and description.

    The standalone search endpoint also matches on the product type.
    """
    term = term.lower()
    if (
        _contains(product.product_name, term)
        or _contains(product.brand, term)
        or _contains(product.product_description, term)
    ):
        return True
    return include_type and _contains(product.product_type.value, term)


def filter_by_search(products: list[Product], term: str) -> list[Product]:
    """Second filter pass layered over an already-filtered listing."""
    return [p for p in products if matches_search(p, term)]


def search_products(products: list[Product], term: str) -> list[Product]:
    return [p for p in products if matches_search(p, term, include_type=True)]
