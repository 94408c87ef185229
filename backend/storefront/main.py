import logging
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager

from storefront.config import Config
from storefront.db.repository import ProductRepository
from storefront.db.seed import seed_repository
from storefront.routers import categories, health, products, search
from storefront.exceptions import (
    AppException,
    app_exception_handler,
    generic_exception_handler,
    validation_exception_handler,
)

# Configure logging
logging.basicConfig(
    level=Config.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"Catalog ready with {len(app.state.repository.list_products())} active products")
    yield


def build_repository() -> ProductRepository:
    repository = ProductRepository()
    if Config.SEED_ON_STARTUP:
        seed_repository(repository)
    return repository


def create_app(repository: ProductRepository | None = None) -> FastAPI:
    """Build the API around a repository; a seeded one is created if none is given."""
    app = FastAPI(
        title="Storefront Catalog API",
        version="1.0.0",
        description="Product catalog, categories and search for the storefront",
        lifespan=lifespan
    )
    app.state.repository = repository if repository is not None else build_repository()

    # Register exception handlers
    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=Config.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include routers
    app.include_router(health.router)
    app.include_router(products.router)
    app.include_router(categories.router)
    app.include_router(search.router)

    return app


app = create_app()
