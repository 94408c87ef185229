from fastapi import APIRouter, Depends

from storefront.db.repository import ProductRepository, get_repository

router = APIRouter(tags=["health"])


@router.get("/api/v1/health")
async def health(repository: ProductRepository = Depends(get_repository)):
    """Health check endpoint, with the size of the active catalog."""
    return {"status": "ok", "products": len(repository.list_products())}
