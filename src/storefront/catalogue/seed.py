"""Sample catalogue loaded into an empty store by ``manage.py seed``."""

from protean.utils.globals import current_domain

from storefront.catalogue.category import Category
from storefront.catalogue.management import AddProductImage, CreateCategory, CreateProduct
from storefront.domain import logger

_UNSPLASH = "https://images.unsplash.com"

SAMPLE_CATEGORIES = [
    {"name": "Soccer", "slug": "soccer", "image_url": f"{_UNSPLASH}/photo-1614632537190-23e4146777db"},
    {"name": "Cricket", "slug": "cricket", "image_url": f"{_UNSPLASH}/photo-1531415074968-036ba1b575da"},
    {"name": "Tennis", "slug": "tennis", "image_url": f"{_UNSPLASH}/photo-1595435934249-5df7ed86e1c0"},
    {"name": "Basketball", "slug": "basketball", "image_url": f"{_UNSPLASH}/photo-1546519638-68e109498ffc"},
    {"name": "Running", "slug": "running", "image_url": f"{_UNSPLASH}/photo-1476480862126-209bfaa8edc8"},
]

SAMPLE_PRODUCTS = [
    {
        "name": "UEFA Champions League Third Ball",
        "description": "Official match ball for the UEFA Champions League.",
        "price": 99.95,
        "brand": "Adidas",
        "category": "soccer",
        "stock": 50,
        "rating": 4.5,
        "num_reviews": 120,
    },
    {
        "name": "UEFA Champions League Pro 24/25 Knock-Out",
        "description": "Professional match ball for the UEFA Champions League knockout stage.",
        "price": 149.95,
        "brand": "Adidas",
        "category": "soccer",
        "stock": 30,
        "rating": 4.8,
        "num_reviews": 85,
    },
    {
        "name": "Air Zoom Pegasus 38",
        "description": "Responsive running shoes with Zoom Air cushioning.",
        "price": 129.99,
        "brand": "Nike",
        "category": "running",
        "stock": 75,
        "rating": 4.6,
        "num_reviews": 230,
    },
    {
        "name": "Running Wind Jacket",
        "description": "Lightweight jacket for protection during runs.",
        "price": 89.95,
        "brand": "Adidas",
        "category": "running",
        "stock": 45,
        "rating": 4.3,
        "num_reviews": 112,
    },
    {
        "name": "Mercurial Superfly Elite",
        "description": "Professional soccer cleats with dynamic fit collar.",
        "price": 274.99,
        "brand": "Nike",
        "category": "soccer",
        "stock": 28,
        "rating": 4.7,
        "num_reviews": 95,
    },
    {
        "name": "Portable Training Net",
        "description": "Portable and easy-to-set-up soccer training net.",
        "price": 49.99,
        "brand": "GoSports",
        "category": "soccer",
        "stock": 60,
        "rating": 4.2,
        "num_reviews": 78,
    },
    {
        "name": "Ultimate Camouflage Training Tee",
        "description": "High-performance training tee designed for maximum comfort during intense workouts.",
        "price": 24.95,
        "sale_price": 22.45,
        "brand": "TeriFashion",
        "category": "running",
        "stock": 100,
        "rating": 4.5,
        "num_reviews": 1348,
        "gallery": [
            f"{_UNSPLASH}/photo-1581655353564-df123a1eb820",
            f"{_UNSPLASH}/photo-1583743814966-8936f5b7be1a",
            f"{_UNSPLASH}/photo-1503341504253-dff4815485f1",
        ],
    },
]


def seed_catalogue() -> dict:
    """Create the sample categories and products unless categories already exist.

    Returns the number of categories and products created.
    """
    if current_domain.repository_for(Category).all_categories():
        logger.info("catalogue_seed_skipped", reason="categories already present")
        return {"categories": 0, "products": 0}

    category_ids = {}
    for data in SAMPLE_CATEGORIES:
        category_ids[data["slug"]] = current_domain.process(CreateCategory(**data), asynchronous=False)

    for data in SAMPLE_PRODUCTS:
        fields = {k: v for k, v in data.items() if k not in ("category", "gallery")}
        product_id = current_domain.process(
            CreateProduct(category_id=category_ids[data["category"]], **fields),
            asynchronous=False,
        )
        for position, image_url in enumerate(data.get("gallery", [])):
            current_domain.process(
                AddProductImage(product_id=product_id, image_url=image_url, is_primary=position == 0),
                asynchronous=False,
            )

    logger.info("catalogue_seeded", categories=len(SAMPLE_CATEGORIES), products=len(SAMPLE_PRODUCTS))
    return {"categories": len(SAMPLE_CATEGORIES), "products": len(SAMPLE_PRODUCTS)}
