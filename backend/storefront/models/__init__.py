from storefront.models.product import Product, ProductFields, ProductType
from storefront.models.category import Category
from storefront.models.product_image import ProductImage
from storefront.models.product_attribute import ProductAttribute

__all__ = [
    "Product",
    "ProductFields",
    "ProductType",
    "Category",
    "ProductImage",
    "ProductAttribute",
]
