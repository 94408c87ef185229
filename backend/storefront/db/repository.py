import logging
from datetime import datetime, timezone
from typing import Callable

from fastapi import Request

from storefront.models import Category, Product, ProductAttribute, ProductImage
from storefront.schemas.category import CategoryCreate, ProductAttributeCreate, ProductImageCreate
from storefront.schemas.product import ProductCreate, ProductFilter, ProductUpdate

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class ProductRepository:
    """In-memory store for products, categories, images and attributes.

    Records live for the lifetime of the process only. Every entity kind has
    its own id counter starting at 1; ids are never handed out twice, even
    after a delete.
    """

    def __init__(self, clock: Callable[[], datetime] = utc_now):
        self._clock = clock
        self._products: dict[int, Product] = {}
        self._categories: dict[int, Category] = {}
        self._images: dict[int, ProductImage] = {}
        self._attributes: dict[int, ProductAttribute] = {}
        self._next_product_id = 1
        self._next_category_id = 1
        self._next_image_id = 1
        self._next_attribute_id = 1

    # Products

    def list_products(self, product_filter: ProductFilter | None = None) -> list[Product]:
        """Return active products matching every set field of the filter.

        Prices are compared on the raw (non-discounted) price, bounds inclusive.
        Results keep insertion order. Text search is not handled here.
        """
        products = [p for p in self._products.values() if p.is_active]

        if product_filter is None:
            return products

        if product_filter.type:
            products = [p for p in products if p.product_type == product_filter.type]
        if product_filter.brand:
            brand = product_filter.brand.lower()
            products = [p for p in products if p.brand and brand in p.brand.lower()]
        if product_filter.min_price is not None:
            products = [p for p in products if float(p.price) >= product_filter.min_price]
        if product_filter.max_price is not None:
            products = [p for p in products if float(p.price) <= product_filter.max_price]
        if product_filter.featured is not None:
            products = [p for p in products if p.is_featured == product_filter.featured]

        return products

    def get_product(self, product_id: int) -> Product | None:
        return self._products.get(product_id)

    def create_product(self, data: ProductCreate) -> Product:
        product_id = self._next_product_id
        self._next_product_id += 1

        now = self._clock()
        product = Product(
            **data.model_dump(),
            product_id=product_id,
            created_at=now,
            updated_at=now,
        )
        self._products[product_id] = product
        logger.debug(f"Created product {product_id}: {product.product_name}")
        return product

    def update_product(self, product_id: int, changes: ProductUpdate) -> Product | None:
        existing = self._products.get(product_id)
        if existing is None:
            return None

        merged = {
            **existing.model_dump(),
            **changes.model_dump(exclude_unset=True),
            "product_id": existing.product_id,
            "created_at": existing.created_at,
            "updated_at": self._clock(),
        }
        updated = Product.model_validate(merged)
        self._products[product_id] = updated
        return updated

    def delete_product(self, product_id: int) -> bool:
        return self._products.pop(product_id, None) is not None

    # Categories

    def list_categories(self) -> list[Category]:
        return list(self._categories.values())

    def get_category(self, category_id: int) -> Category | None:
        return self._categories.get(category_id)

    def create_category(self, data: CategoryCreate) -> Category:
        category_id = self._next_category_id
        self._next_category_id += 1

        category = Category(category_id=category_id, **data.model_dump())
        self._categories[category_id] = category
        return category

    # Images

    def list_product_images(self, product_id: int) -> list[ProductImage]:
        return [img for img in self._images.values() if img.product_id == product_id]

    def create_product_image(self, data: ProductImageCreate) -> ProductImage:
        image_id = self._next_image_id
        self._next_image_id += 1

        image = ProductImage(image_id=image_id, **data.model_dump())
        self._images[image_id] = image
        return image

    # Attributes

    def list_product_attributes(self, product_id: int) -> list[ProductAttribute]:
        return [attr for attr in self._attributes.values() if attr.product_id == product_id]

    def create_product_attribute(self, data: ProductAttributeCreate) -> ProductAttribute:
        attribute_id = self._next_attribute_id
        self._next_attribute_id += 1

        attribute = ProductAttribute(attribute_id=attribute_id, **data.model_dump())
        self._attributes[attribute_id] = attribute
        return attribute


def get_repository(request: Request) -> ProductRepository:
    """FastAPI dependency returning the repository the app was built with."""
    return request.app.state.repository
