from pydantic import BaseModel


class ProductAttribute(BaseModel):
    attribute_id: int
    product_id: int
    attribute_name: str
    attribute_value: str
