from pydantic import BaseModel, Field, field_validator

from storefront.models.product import ProductFields, ProductType, parse_decimal_string


class ProductCreate(ProductFields):
    """Body of POST /api/products."""


class ProductUpdate(BaseModel):
    """Partial product update; only fields that are set are applied."""

    product_name: str | None = Field(None, min_length=1)
    product_type: ProductType | None = None
    category_id: int | None = None
    price: str | None = None
    discount_percentage: int | None = Field(None, ge=0, le=100)
    product_rating: str | None = None
    stock_quantity: int | None = Field(None, ge=0)
    product_description: str | None = None
    main_image_url: str | None = None
    brand: str | None = None
    is_featured: bool | None = None
    is_active: bool | None = None

    @field_validator(
        "product_name", "product_type", "price", "discount_percentage",
        "stock_quantity", "is_featured", "is_active",
        mode="before",
    )
    @classmethod
    def _not_null(cls, value, info):
        # These columns cannot be cleared; leave them out to keep the current value
        if value is None:
            raise ValueError(f"{info.field_name} cannot be null")
        return value

    @field_validator("price", "product_rating", mode="before")
    @classmethod
    def _check_decimal(cls, value):
        if value is None:
            return None
        return parse_decimal_string(value)


class ProductFilter(BaseModel):
    """Sparse filter record for repository listings. Unset fields do not filter."""

    type: str | None = None
    brand: str | None = None
    min_price: float | None = None
    max_price: float | None = None
    featured: bool | None = None
