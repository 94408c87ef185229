from pydantic import BaseModel, Field


class CategoryCreate(BaseModel):
    category_name: str = Field(..., min_length=1)
    parent_category_id: int | None = None


class ProductImageCreate(BaseModel):
    product_id: int
    image_url: str
    is_primary: bool = False


class ProductAttributeCreate(BaseModel):
    product_id: int
    attribute_name: str
    attribute_value: str
