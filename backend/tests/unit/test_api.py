import pytest
from unittest.mock import patch


class TestListProductsEndpoint:
    """Tests for GET /api/products."""

    @pytest.mark.asyncio
    async def test_lists_active_seed_products(self, client):
        response = await client.get("/api/products")

        assert response.status_code == 200
        data = response.json()
        assert len(data) == 8
        assert data[0]["product_name"] == "Premium White Sneakers"
        assert data[0]["price"] == "129.99"
        assert data[0]["product_type"] == "Shoes"

    @pytest.mark.asyncio
    async def test_type_filter(self, client):
        response = await client.get("/api/products", params={"type": "Shoes"})

        assert response.status_code == 200
        assert [p["product_id"] for p in response.json()] == [1, 6]

    @pytest.mark.asyncio
    async def test_price_and_featured_filters(self, client):
        response = await client.get(
            "/api/products", params={"minPrice": "80", "maxPrice": "130", "featured": "true"}
        )

        names = [p["product_name"] for p in response.json()]
        assert names == ["Premium White Sneakers", "Classic Leather Handbag", "Vintage Denim Jacket"]

    @pytest.mark.asyncio
    async def test_featured_other_than_true_means_false(self, client):
        response = await client.get("/api/products", params={"featured": "yes"})
        assert [p["product_id"] for p in response.json()] == [4, 5, 7]

    @pytest.mark.asyncio
    async def test_empty_params_ignored(self, client):
        response = await client.get("/api/products", params={"type": "", "brand": "", "minPrice": ""})
        assert len(response.json()) == 8

    @pytest.mark.asyncio
    async def test_search_is_case_insensitive(self, client):
        response = await client.get("/api/products", params={"search": "gucci"})

        assert response.status_code == 200
        assert [p["brand"] for p in response.json()] == ["Gucci"]

    @pytest.mark.asyncio
    async def test_search_layers_over_filters(self, client):
        response = await client.get("/api/products", params={"brand": "nike", "search": "cotton"})
        assert [p["product_name"] for p in response.json()] == ["Casual Cotton T-Shirt"]

    @pytest.mark.asyncio
    async def test_search_does_not_match_type(self, client):
        response = await client.get("/api/products", params={"search": "handbag"})
        # Only the handbag whose name contains the word, not every Handbag-typed product
        assert [p["product_id"] for p in response.json()] == [2]

    @pytest.mark.asyncio
    async def test_bad_price_is_internal_error(self, client):
        response = await client.get("/api/products", params={"minPrice": "cheap"})

        assert response.status_code == 500
        assert response.json() == {"message": "Failed to fetch products"}

    @pytest.mark.asyncio
    async def test_repository_failure(self, client, repository):
        with patch.object(repository, "list_products", side_effect=RuntimeError("boom")):
            response = await client.get("/api/products")

        assert response.status_code == 500
        assert "boom" not in response.text


class TestProductEndpoints:
    """Tests for single-product routes."""

    @pytest.mark.asyncio
    async def test_get_product(self, client):
        response = await client.get("/api/products/3")

        assert response.status_code == 200
        assert response.json()["product_name"] == "Luxury Makeup Set"

    @pytest.mark.asyncio
    async def test_get_missing_product(self, client):
        response = await client.get("/api/products/999")

        assert response.status_code == 404
        assert response.json() == {"message": "Product not found"}

    @pytest.mark.asyncio
    async def test_non_numeric_id(self, client):
        response = await client.get("/api/products/abc")
        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_inactive_product_still_fetchable_by_id(self, client, repository):
        from storefront.schemas.product import ProductUpdate
        repository.update_product(4, ProductUpdate(is_active=False))

        assert (await client.get("/api/products/4")).status_code == 200
        assert 4 not in [p["product_id"] for p in (await client.get("/api/products")).json()]

    @pytest.mark.asyncio
    async def test_create_product(self, client):
        payload = {
            "product_name": "Canvas Tote",
            "product_type": "Handbag",
            "price": "45.00",
            "brand": "Muji",
            "stock_quantity": 10,
        }

        response = await client.post("/api/products", json=payload)

        assert response.status_code == 201
        data = response.json()
        assert data["product_id"] == 9
        assert data["discount_percentage"] == 0
        assert data["is_active"] is True
        assert data["created_at"] == data["updated_at"]

        listed = await client.get("/api/products", params={"brand": "muji"})
        assert [p["product_id"] for p in listed.json()] == [9]

    @pytest.mark.asyncio
    async def test_create_invalid_product(self, client):
        response = await client.post(
            "/api/products",
            json={"product_name": "Chair", "product_type": "Furniture", "price": "-3"}
        )

        assert response.status_code == 400
        data = response.json()
        assert data["message"] == "Invalid product data"
        fields = {tuple(e["loc"]) for e in data["errors"]}
        assert ("product_type",) in fields
        assert ("price",) in fields

    @pytest.mark.asyncio
    async def test_create_missing_body(self, client):
        response = await client.post("/api/products")

        assert response.status_code == 400
        assert response.json()["message"] == "Invalid product data"

    @pytest.mark.asyncio
    async def test_create_non_object_body(self, client):
        """A JSON array is reported like any other invalid product payload."""
        response = await client.post("/api/products", json=[{"product_name": "Tote"}])

        assert response.status_code == 400
        data = response.json()
        assert data["message"] == "Invalid product data"
        assert data["errors"][0]["type"] == "model_type"

    @pytest.mark.asyncio
    async def test_images_and_attributes(self, client, repository):
        from storefront.schemas.category import ProductAttributeCreate, ProductImageCreate
        repository.create_product_image(ProductImageCreate(product_id=1, image_url="side.jpg"))
        repository.create_product_attribute(
            ProductAttributeCreate(product_id=1, attribute_name="Size", attribute_value="42")
        )

        images = await client.get("/api/products/1/images")
        attributes = await client.get("/api/products/1/attributes")

        assert images.json() == [{"image_id": 1, "product_id": 1, "image_url": "side.jpg", "is_primary": False}]
        assert attributes.json() == [
            {"attribute_id": 1, "product_id": 1, "attribute_name": "Size", "attribute_value": "42"}
        ]
        assert (await client.get("/api/products/2/images")).json() == []


class TestCategoriesEndpoint:

    @pytest.mark.asyncio
    async def test_list_categories(self, client):
        response = await client.get("/api/categories")

        assert response.status_code == 200
        assert response.json()[0] == {"category_id": 1, "category_name": "Footwear", "parent_category_id": None}
        assert len(response.json()) == 4


class TestSearchEndpoint:
    """Tests for GET /api/search."""

    @pytest.mark.asyncio
    async def test_missing_query(self, client):
        response = await client.get("/api/search")

        assert response.status_code == 400
        assert response.json() == {"message": "Search query is required"}

    @pytest.mark.asyncio
    async def test_empty_query(self, client):
        assert (await client.get("/api/search", params={"q": ""})).status_code == 400

    @pytest.mark.asyncio
    async def test_matches_type(self, client):
        response = await client.get("/api/search", params={"q": "accessory"})

        assert response.status_code == 200
        assert [p["product_id"] for p in response.json()] == [4, 7]

    @pytest.mark.asyncio
    async def test_search_failure(self, client, repository):
        with patch.object(repository, "list_products", side_effect=RuntimeError("boom")):
            response = await client.get("/api/search", params={"q": "shoes"})

        assert response.status_code == 500
        assert response.json() == {"message": "Search failed"}


class TestHealthEndpoint:

    @pytest.mark.asyncio
    async def test_health(self, client):
        response = await client.get("/api/v1/health")
        assert response.json() == {"status": "ok", "products": 8}


class TestCreateApp:
    """Tests for building the app around a repository."""

    def test_default_repository_is_seeded(self):
        from storefront.main import create_app
        app = create_app()
        assert len(app.state.repository.list_products()) == 8

    def test_seeding_can_be_disabled(self):
        from storefront.config import Config
        from storefront.main import create_app
        with patch.object(Config, "SEED_ON_STARTUP", False):
            app = create_app()
        assert app.state.repository.list_products() == []

    def test_injected_repository_is_used(self, empty_repository):
        from storefront.main import create_app
        assert create_app(empty_repository).state.repository is empty_repository
