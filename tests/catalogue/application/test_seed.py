from protean import current_domain
from storefront.catalogue.category import Category
from storefront.catalogue.product import Product
from storefront.catalogue.seed import SAMPLE_CATEGORIES, SAMPLE_PRODUCTS, seed_catalogue


def test_seed_loads_sample_catalogue():
    counts = seed_catalogue()

    assert counts == {"categories": len(SAMPLE_CATEGORIES), "products": len(SAMPLE_PRODUCTS)}
    assert len(current_domain.repository_for(Category).all_categories()) == len(SAMPLE_CATEGORIES)
    assert len(current_domain.repository_for(Product).all_products()) == len(SAMPLE_PRODUCTS)


def test_seed_attaches_gallery_images():
    seed_catalogue()
    with_gallery = [p for p in current_domain.repository_for(Product).all_products() if p.images]
    assert with_gallery
    assert any(image.is_primary for image in with_gallery[0].images)


def test_seed_is_skipped_when_catalogue_exists(category_id):
    assert seed_catalogue() == {"categories": 0, "products": 0}
