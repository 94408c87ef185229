import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, Query
from pydantic import ValidationError

from storefront.db.repository import ProductRepository, get_repository
from storefront.errors import ErrorType
from storefront.exceptions import AppException
from storefront.models import Product, ProductAttribute, ProductImage
from storefront.schemas.product import ProductCreate, ProductFilter
from storefront.services.search_service import filter_by_search

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["products"])


def parse_product_filter(
    product_type: str | None = None,
    brand: str | None = None,
    min_price: str | None = None,
    max_price: str | None = None,
    featured: str | None = None,
) -> ProductFilter:
    """Coerce raw query-string values into a typed filter record.

    Empty values are ignored. Any value given for featured other than
    "true" means False. A price that is not a number raises ValueError.
    """
    product_filter = ProductFilter()
    if product_type:
        product_filter.type = product_type
    if brand:
        product_filter.brand = brand
    if min_price:
        product_filter.min_price = float(min_price)
    if max_price:
        product_filter.max_price = float(max_price)
    if featured is not None:
        product_filter.featured = featured == "true"
    return product_filter


@router.get("/products", response_model=list[Product])
async def list_products(
    product_type: str | None = Query(None, alias="type"),
    brand: str | None = None,
    min_price: str | None = Query(None, alias="minPrice"),
    max_price: str | None = Query(None, alias="maxPrice"),
    featured: str | None = None,
    search: str | None = None,
    repository: ProductRepository = Depends(get_repository),
):
    try:
        product_filter = parse_product_filter(product_type, brand, min_price, max_price, featured)
        products = repository.list_products(product_filter)

        if search:
            products = filter_by_search(products, search)
    except Exception as e:
        logger.error(f"Failed to fetch products: {e}")
        raise AppException(ErrorType.INTERNAL_ERROR, "Failed to fetch products")

    return products


@router.get("/products/{product_id}", response_model=Product)
async def get_product(product_id: int, repository: ProductRepository = Depends(get_repository)):
    try:
        product = repository.get_product(product_id)
    except Exception as e:
        logger.error(f"Failed to fetch product {product_id}: {e}")
        raise AppException(ErrorType.INTERNAL_ERROR, "Failed to fetch product")

    if product is None:
        raise AppException(ErrorType.NOT_FOUND, "Product not found")
    return product


@router.post("/products", response_model=Product, status_code=201)
async def create_product(
    payload: Any = Body(None),
    repository: ProductRepository = Depends(get_repository),
):
    try:
        data = ProductCreate.model_validate(payload)
    except ValidationError as e:
        raise AppException(
            ErrorType.VALIDATION_ERROR,
            "Invalid product data",
            errors=e.errors(include_url=False, include_context=False),
        )

    try:
        product = repository.create_product(data)
    except Exception as e:
        logger.error(f"Failed to create product: {e}")
        raise AppException(ErrorType.INTERNAL_ERROR, "Failed to create product")

    logger.info(f"Created product {product.product_id}: {product.product_name}")
    return product


@router.get("/products/{product_id}/images", response_model=list[ProductImage])
async def get_product_images(product_id: int, repository: ProductRepository = Depends(get_repository)):
    try:
        return repository.list_product_images(product_id)
    except Exception as e:
        logger.error(f"Failed to fetch images for product {product_id}: {e}")
        raise AppException(ErrorType.INTERNAL_ERROR, "Failed to fetch product images")


@router.get("/products/{product_id}/attributes", response_model=list[ProductAttribute])
async def get_product_attributes(product_id: int, repository: ProductRepository = Depends(get_repository)):
    try:
        return repository.list_product_attributes(product_id)
    except Exception as e:
        logger.error(f"Failed to fetch attributes for product {product_id}: {e}")
        raise AppException(ErrorType.INTERNAL_ERROR, "Failed to fetch product attributes")
