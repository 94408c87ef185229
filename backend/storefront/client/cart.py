"""
Cart state for a single shopping session.

The cart keeps product ids only. Prices and names come from joining the
items against a product listing at read time; items whose product is not
in that listing are dropped from the joined view and from every total.
"""
import logging
from dataclasses import dataclass
from decimal import Decimal

from pydantic import BaseModel, Field

from storefront.models import Product
from storefront.services.pricing import effective_price

logger = logging.getLogger(__name__)

FREE_SHIPPING_THRESHOLD = Decimal("50")
SHIPPING_FEE = Decimal("9.99")
TAX_RATE = Decimal("0.08")


class CartItem(BaseModel):
    product_id: int
    quantity: int = Field(1, ge=1)
    selected_size: str | None = None
    selected_color: str | None = None


class CartState:
    def __init__(self, items: list[CartItem] | None = None, is_open: bool = False):
        self.items: list[CartItem] = list(items or [])
        self.is_open = is_open

    def _find(self, product_id: int) -> CartItem | None:
        return next((item for item in self.items if item.product_id == product_id), None)

    def add_to_cart(self, item: CartItem) -> None:
        """Add a line item, or bump the quantity of the row already holding the product.

        A repeat add keeps the existing row's size and color.
        """
        existing = self._find(item.product_id)
        if existing is not None:
            existing.quantity += item.quantity
        else:
            self.items.append(item.model_copy())

    def remove_from_cart(self, product_id: int) -> None:
        self.items = [item for item in self.items if item.product_id != product_id]

    def update_quantity(self, product_id: int, quantity: int) -> None:
        """Set a row's quantity exactly; zero or less removes the row."""
        item = self._find(product_id)
        if item is None:
            return
        if quantity <= 0:
            self.remove_from_cart(product_id)
        else:
            item.quantity = quantity

    def clear_cart(self) -> None:
        self.items = []

    def toggle_cart(self) -> None:
        self.is_open = not self.is_open

    def set_cart_open(self, is_open: bool) -> None:
        self.is_open = is_open

    @property
    def item_count(self) -> int:
        return sum(item.quantity for item in self.items)


@dataclass
class CartLine:
    item: CartItem
    product: Product
    unit_price: Decimal
    line_total: Decimal


@dataclass
class OrderSummary:
    subtotal: Decimal
    shipping: Decimal
    tax: Decimal
    total: Decimal


def join_cart(items: list[CartItem], products: list[Product]) -> list[CartLine]:
    """Pair cart items with their products, dropping items whose product is unknown."""
    by_id = {p.product_id: p for p in products}
    lines = []
    for item in items:
        product = by_id.get(item.product_id)
        if product is None:
            logger.debug(f"Product {item.product_id} not in listing, leaving it out of the cart view")
            continue
        unit_price = effective_price(product)
        lines.append(CartLine(item, product, unit_price, unit_price * item.quantity))
    return lines


def cart_subtotal(items: list[CartItem], products: list[Product]) -> Decimal:
    return sum((line.line_total for line in join_cart(items, products)), Decimal("0"))


def order_summary(items: list[CartItem], products: list[Product]) -> OrderSummary:
    subtotal = cart_subtotal(items, products)
    shipping = Decimal("0") if subtotal > FREE_SHIPPING_THRESHOLD else SHIPPING_FEE
    tax = subtotal * TAX_RATE
    return OrderSummary(subtotal, shipping, tax, subtotal + shipping + tax)
