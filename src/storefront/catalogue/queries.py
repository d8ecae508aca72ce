"""Read access to the catalogue.

Every function here is side-effect free. Lookups by id raise
``ObjectNotFoundError`` when nothing matches.
"""

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from storefront.catalogue.category import Category
from storefront.catalogue.product import Product


def list_categories() -> list[Category]:
    return current_domain.repository_for(Category).all_categories()


def get_category(category_id: str) -> Category:
    return current_domain.repository_for(Category).get(category_id)


def get_category_by_slug(slug: str) -> Category:
    category = current_domain.repository_for(Category).find_by_slug(slug)
    if category is None:
        raise ObjectNotFoundError({"_entity": f"Category with slug '{slug}' does not exist"})
    return category


def list_products() -> list[Product]:
    return current_domain.repository_for(Product).all_products()


def get_product(product_id: str) -> Product:
    return current_domain.repository_for(Product).get(product_id)


def list_products_by_category(category_id: str) -> list[Product]:
    return current_domain.repository_for(Product).in_category(category_id)


def search_products(query: str) -> list[Product]:
    """Case-insensitive substring search over name, description and brand.

    There is no "everything" fallback: callers decide what a blank query
    means and should not pass one through.
    """
    return current_domain.repository_for(Product).search(query)
