from pydantic import BaseModel


class Category(BaseModel):
    category_id: int
    category_name: str
    # Categories form a tree through this self-reference
    parent_category_id: int | None = None
