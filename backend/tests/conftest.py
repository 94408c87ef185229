import pytest
from datetime import datetime, timedelta, timezone
from httpx import AsyncClient, ASGITransport

from storefront.db.repository import ProductRepository
from storefront.db.seed import seed_repository
from storefront.main import create_app
from storefront.models import Product


class FakeClock:
    """Deterministic clock; each call is one second after the previous one."""

    def __init__(self):
        self.current = datetime(2024, 1, 1, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        self.current += timedelta(seconds=1)
        return self.current


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def repository(clock):
    """Repository loaded with the sample catalog."""
    return seed_repository(ProductRepository(clock=clock))


@pytest.fixture
def empty_repository(clock):
    return ProductRepository(clock=clock)


@pytest.fixture
def app(repository):
    return create_app(repository)


@pytest.fixture
async def client(app):
    """Async test client talking to the app in-process."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as ac:
        yield ac


@pytest.fixture
def make_product():
    """Build Product records directly, without a repository."""
    counter = {"next_id": 1}

    def _make(**overrides) -> Product:
        product_id = overrides.pop("product_id", counter["next_id"])
        counter["next_id"] = max(counter["next_id"], product_id) + 1
        data = {
            "product_id": product_id,
            "product_name": f"Product {product_id}",
            "product_type": "Shoes",
            "price": "10.00",
            "created_at": datetime(2024, 1, 1, tzinfo=timezone.utc),
            "updated_at": datetime(2024, 1, 1, tzinfo=timezone.utc),
        }
        data.update(overrides)
        return Product(**data)

    return _make
