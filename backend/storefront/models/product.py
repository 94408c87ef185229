from datetime import datetime
from decimal import Decimal, InvalidOperation
from enum import Enum

from pydantic import BaseModel, Field, field_validator


class ProductType(str, Enum):
    SHOES = "Shoes"
    HANDBAG = "Handbag"
    MAKEUP = "Makeup"
    ACCESSORY = "Accessory"
    CLOTHING = "Clothing"


def parse_decimal_string(value) -> str:
    """Normalize a price-like value to its decimal string form."""
    if isinstance(value, bool):
        raise ValueError("must be a decimal string")
    if isinstance(value, (int, float, Decimal)):
        value = str(value)
    if not isinstance(value, str):
        raise ValueError("must be a decimal string")
    try:
        parsed = Decimal(value.strip())
    except InvalidOperation:
        raise ValueError(f"'{value}' is not a decimal number")
    if not parsed.is_finite():
        raise ValueError(f"'{value}' is not a decimal number")
    if parsed < 0:
        raise ValueError("must not be negative")
    return value.strip()


class ProductFields(BaseModel):
    """Insertable product columns (everything except id and timestamps)."""

    product_name: str = Field(..., min_length=1)
    product_type: ProductType
    category_id: int | None = None
    price: str
    discount_percentage: int = Field(0, ge=0, le=100)
    product_rating: str | None = None
    stock_quantity: int = Field(0, ge=0)
    product_description: str | None = None
    main_image_url: str | None = None
    brand: str | None = None
    is_featured: bool = False
    is_active: bool = True

    @field_validator("price", mode="before")
    @classmethod
    def _check_price(cls, value):
        return parse_decimal_string(value)

    @field_validator("product_rating", mode="before")
    @classmethod
    def _check_rating(cls, value):
        if value is None:
            return None
        return parse_decimal_string(value)


class Product(ProductFields):
    product_id: int
    created_at: datetime
    updated_at: datetime
