import math
from dataclasses import dataclass, fields, replace

from storefront.models import ProductType

DEFAULT_SORT = "featured"

# (label, min, max); math.inf means no upper bound
PRICE_RANGES = [
    ("Under $50", 0, 50),
    ("$50 - $100", 50, 100),
    ("$100 - $200", 100, 200),
    ("Over $200", 200, math.inf),
]


@dataclass
class ProductFilters:
    type: ProductType | None = None
    brand: str | None = None
    min_price: float | None = None
    max_price: float | None = None
    rating: float | None = None

    def __post_init__(self):
        # Raises ValueError for anything outside the closed product type set
        if self.type is not None:
            self.type = ProductType(self.type)


FILTER_KEYS = {f.name for f in fields(ProductFilters)}


class FilterState:
    """Active filters, search text and sort key for the product listing."""

    def __init__(self):
        self.filters = ProductFilters()
        self.search_query = ""
        self.sort_by = DEFAULT_SORT

    def set_filters(self, filters: ProductFilters) -> None:
        self.filters = replace(filters)

    def update_filter(self, key: str, value) -> None:
        """Set one filter field; None unsets it. An unknown product type raises ValueError."""
        if key not in FILTER_KEYS:
            raise KeyError(f"Unknown filter '{key}'. Valid: {sorted(FILTER_KEYS)}")
        if key == "type" and value is not None:
            value = ProductType(value)
        setattr(self.filters, key, value)

    def clear_filters(self) -> None:
        self.filters = ProductFilters()

    def set_search_query(self, query: str) -> None:
        self.search_query = query

    def set_sort_by(self, sort_by: str) -> None:
        self.sort_by = sort_by

    def active_filters(self) -> dict:
        return {
            name: getattr(self.filters, name)
            for name in sorted(FILTER_KEYS)
            if getattr(self.filters, name) is not None
        }

    # The sidebar offers checkboxes, but the filter record holds one value
    # per key, so only the first selection is kept.

    def select_types(self, selected: list[ProductType]) -> None:
        self.update_filter("type", selected[0] if selected else None)

    def select_brands(self, selected: list[str]) -> None:
        self.update_filter("brand", selected[0] if selected else None)

    def select_price_range(self, name: str) -> None:
        price_range = next((r for r in PRICE_RANGES if r[0] == name), None)
        if price_range is None:
            return
        _, low, high = price_range
        self.update_filter("min_price", low)
        self.update_filter("max_price", None if high == math.inf else high)
