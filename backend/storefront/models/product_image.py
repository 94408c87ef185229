from pydantic import BaseModel


class ProductImage(BaseModel):
    image_id: int
    product_id: int
    image_url: str
    is_primary: bool = False
