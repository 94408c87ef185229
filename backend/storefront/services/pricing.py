from decimal import Decimal, ROUND_HALF_UP

from storefront.models import Product

CENTS = Decimal("0.01")


def effective_price(product: Product) -> Decimal:
    """Price after the discount percentage. Derived on read, never stored."""
    price = Decimal(product.price)
    if product.discount_percentage and product.discount_percentage > 0:
        return price * (1 - Decimal(product.discount_percentage) / 100)
    return price


def format_price(amount: Decimal) -> str:
    """Round to cents for display only."""
    return str(Decimal(amount).quantize(CENTS, rounding=ROUND_HALF_UP))
