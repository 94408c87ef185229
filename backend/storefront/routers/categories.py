import logging
from fastapi import APIRouter, Depends

from storefront.db.repository import ProductRepository, get_repository
from storefront.errors import ErrorType
from storefront.exceptions import AppException
from storefront.models import Category

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["categories"])


@router.get("/categories", response_model=list[Category])
async def list_categories(repository: ProductRepository = Depends(get_repository)):
    try:
        return repository.list_categories()
    except Exception as e:
        logger.error(f"Failed to fetch categories: {e}")
        raise AppException(ErrorType.INTERNAL_ERROR, "Failed to fetch categories")
