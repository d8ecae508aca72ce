"""Repositories for the catalogue aggregates."""

from protean.utils.query import Q

from storefront.catalogue.category import Category
from storefront.catalogue.product import Product
from storefront.domain import storefront


@storefront.repository(part_of=Category)
class CategoryRepository:
    def all_categories(self) -> list[Category]:
        return self._dao.query.order_by("name").all().items

    def find_by_slug(self, slug: str) -> Category | None:
        return self._dao.query.filter(slug=slug).all().first


@storefront.repository(part_of=Product)
class ProductRepository:
    def all_products(self) -> list[Product]:
        return self._dao.query.order_by("name").all().items

    def in_category(self, category_id: str) -> list[Product]:
        return self._dao.query.filter(category_id=category_id).order_by("name").all().items

    def search(self, text: str) -> list[Product]:
        """Products whose name, description or brand contains ``text``, ignoring case."""
        return (
            self._dao.query.filter(
                Q(name__icontains=text) | Q(description__icontains=text) | Q(brand__icontains=text)
            )
            .order_by("name")
            .all()
            .items
        )
