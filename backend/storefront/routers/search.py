import logging
from fastapi import APIRouter, Depends

from storefront.db.repository import ProductRepository, get_repository
from storefront.errors import ErrorType
from storefront.exceptions import AppException
from storefront.models import Product
from storefront.services.search_service import search_products

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["search"])


@router.get("/search", response_model=list[Product])
async def search(q: str | None = None, repository: ProductRepository = Depends(get_repository)):
    """Substring search over every active product, type included."""
    if not q:
        raise AppException(ErrorType.BAD_REQUEST, "Search query is required")

    try:
        products = search_products(repository.list_products(), q)
    except Exception as e:
        logger.error(f"Search failed for '{q}': {e}")
        raise AppException(ErrorType.INTERNAL_ERROR, "Search failed")

    logger.info(f"Search '{q}' matched {len(products)} products")
    return products
