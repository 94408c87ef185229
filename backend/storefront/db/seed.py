import logging

from storefront.db.repository import ProductRepository
from storefront.schemas.category import CategoryCreate
from storefront.schemas.product import ProductCreate

logger = logging.getLogger(__name__)

_IMAGE_PARAMS = "?ixlib=rb-4.0.3&auto=format&fit=crop&w=400&h=400"


# (name, parent category)
CATEGORIES_DATA = [
    ("Footwear", None),
    ("Bags & Accessories", None),
    ("Beauty & Cosmetics", None),
    ("Fashion", None),
]

# Sample products
PRODUCTS_DATA = [
    {
        "product_name": "Premium White Sneakers",
        "product_type": "Shoes",
        "category_id": 1,
        "price": "129.99",
        "discount_percentage": 19,
        "product_rating": "4.8",
        "stock_quantity": 25,
        "product_description": "Premium white sneakers with modern design and superior comfort. "
                               "Crafted with high-quality materials and featuring advanced cushioning technology.",
        "main_image_url": "https://images.unsplash.com/photo-1549298916-b41d501d3772" + _IMAGE_PARAMS,
        "brand": "Nike",
        "is_featured": True,
    },
    {
        "product_name": "Classic Leather Handbag",
        "product_type": "Handbag",
        "category_id": 2,
        "price": "89.99",
        "discount_percentage": 25,
        "product_rating": "4.6",
        "stock_quantity": 15,
        "product_description": "Elegant leather handbag perfect for any occasion. "
                               "Spacious interior with multiple compartments.",
        "main_image_url": "https://images.unsplash.com/photo-1594633312681-425c7b97ccd1" + _IMAGE_PARAMS,
        "brand": "Gucci",
        "is_featured": True,
    },
    {
        "product_name": "Luxury Makeup Set",
        "product_type": "Makeup",
        "category_id": 3,
        "price": "79.99",
        "discount_percentage": 15,
        "product_rating": "4.9",
        "stock_quantity": 30,
        "product_description": "Complete makeup set with premium quality cosmetics. "
                               "Includes foundation, eyeshadow palette, lipstick, and brushes.",
        "main_image_url": "https://images.unsplash.com/photo-1522335789203-aabd1fc54bc9" + _IMAGE_PARAMS,
        "brand": "Chanel",
        "is_featured": True,
    },
    {
        "product_name": "Gold Chain Necklace",
        "product_type": "Accessory",
        "category_id": 2,
        "price": "199.99",
        "discount_percentage": 10,
        "product_rating": "4.7",
        "stock_quantity": 12,
        "product_description": "Beautiful gold chain necklace with elegant design. Perfect for special occasions.",
        "main_image_url": "https://images.unsplash.com/photo-1515562141207-7a88fb7ce338" + _IMAGE_PARAMS,
        "brand": "Tiffany",
        "is_featured": False,
    },
    {
        "product_name": "Casual Cotton T-Shirt",
        "product_type": "Clothing",
        "category_id": 4,
        "price": "29.99",
        "discount_percentage": 20,
        "product_rating": "4.4",
        "stock_quantity": 50,
        "product_description": "Comfortable cotton t-shirt for everyday wear. Soft fabric with excellent fit.",
        "main_image_url": "https://images.unsplash.com/photo-1521572163474-6864f9cf17ab" + _IMAGE_PARAMS,
        "brand": "Nike",
        "is_featured": False,
    },
    {
        "product_name": "Running Shoes",
        "product_type": "Shoes",
        "category_id": 1,
        "price": "159.99",
        "discount_percentage": 0,
        "product_rating": "4.8",
        "stock_quantity": 20,
        "product_description": "High-performance running shoes for athletes. Advanced cushioning and breathable design.",
        "main_image_url": "https://images.unsplash.com/photo-1542291026-7eec264c27ff" + _IMAGE_PARAMS,
        "brand": "Adidas",
        "is_featured": True,
    },
    {
        "product_name": "Designer Sunglasses",
        "product_type": "Accessory",
        "category_id": 2,
        "price": "249.99",
        "discount_percentage": 15,
        "product_rating": "4.6",
        "stock_quantity": 8,
        "product_description": "Stylish designer sunglasses with UV protection. Premium frames with polarized lenses.",
        "main_image_url": "https://images.unsplash.com/photo-1572635196237-14b3f281503f" + _IMAGE_PARAMS,
        "brand": "Ray-Ban",
        "is_featured": False,
    },
    {
        "product_name": "Vintage Denim Jacket",
        "product_type": "Clothing",
        "category_id": 4,
        "price": "89.99",
        "discount_percentage": 30,
        "product_rating": "4.5",
        "stock_quantity": 18,
        "product_description": "Classic vintage-style denim jacket. Durable construction with timeless design.",
        "main_image_url": "https://images.unsplash.com/photo-1551537482-f2075a1d41f2" + _IMAGE_PARAMS,
        "brand": "Levi's",
        "is_featured": True,
    },
]


def seed_repository(repository: ProductRepository) -> ProductRepository:
    """Load the fixed sample catalog into a repository."""
    for name, parent_id in CATEGORIES_DATA:
        repository.create_category(CategoryCreate(category_name=name, parent_category_id=parent_id))

    for data in PRODUCTS_DATA:
        repository.create_product(ProductCreate(**data))

    logger.info(f"Seeded {len(CATEGORIES_DATA)} categories and {len(PRODUCTS_DATA)} products")
    return repository
