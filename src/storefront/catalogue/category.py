"""Category aggregate: static reference data grouping products."""

import re
from datetime import UTC, datetime

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, String

from storefront.catalogue.events import CategoryCreated
from storefront.domain import storefront

_SLUG_PATTERN = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")


@storefront.aggregate
class Category:
    """A named grouping of products, addressable by a unique URL slug."""

    name = String(required=True, max_length=100)
    slug = String(required=True, max_length=100, unique=True)
    image_url = String(max_length=1024)
    created_at = DateTime()

    @invariant.post
    def slug_must_be_url_safe(self):
        if self.slug and not _SLUG_PATTERN.match(self.slug):
            raise ValidationError({"slug": ["Slug must contain only lowercase alphanumeric characters and hyphens"]})

    @classmethod
    def create(cls, name, slug, image_url=None):
        category = cls(
            name=name,
            slug=slug,
            image_url=image_url,
            created_at=datetime.now(UTC),
        )
        category.raise_(
            CategoryCreated(
                category_id=str(category.id),
                name=name,
                slug=slug,
            )
        )
        return category
