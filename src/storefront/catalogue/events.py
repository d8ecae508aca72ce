"""Domain events for the Category and Product aggregates."""

from protean.fields import Boolean, Float, Identifier, String

from storefront.domain import storefront


@storefront.event(part_of="Category")
class CategoryCreated:
    """A new category was added to the catalogue."""

    __version__ = "v1"

    category_id = Identifier(required=True)
    name = String(required=True, max_length=100)
    slug = String(required=True, max_length=100)


@storefront.event(part_of="Product")
class ProductCreated:
    """A new product was listed in the catalogue."""

    __version__ = "v1"

    product_id = Identifier(required=True)
    name = String(required=True, max_length=255)
    category_id = Identifier(required=True)
    price = Float(required=True)
    sale_price = Float()


@storefront.event(part_of="Product")
class ProductPriceChanged:
    """The list price or sale price of a product changed."""

    __version__ = "v1"

    product_id = Identifier(required=True)
    previous_price = Float(required=True)
    previous_sale_price = Float()
    price = Float(required=True)
    sale_price = Float()


@storefront.event(part_of="Product")
class ProductImageAdded:
    __version__ = "v1"

    product_id = Identifier(required=True)
    image_id = Identifier(required=True)
    image_url = String(required=True, max_length=1024)
    is_primary = Boolean(default=False)
