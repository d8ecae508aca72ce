"""Product aggregate root with its gallery of images.

Products are read-only from the shopper's point of view. Prices may change
between sessions through ``change_price``; carts always read the current
price and orders snapshot it at placement time.
"""

from datetime import UTC, datetime

from protean import atomic_change, invariant
from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, Float, HasMany, Identifier, Integer, String, Text

from storefront.catalogue.events import ProductCreated, ProductImageAdded, ProductPriceChanged
from storefront.domain import storefront
from storefront.shared.money import effective_price


@storefront.entity(part_of="Product")
class ProductImage:
    image_url = String(required=True, max_length=1024)
    is_primary = Boolean(default=False)


@storefront.aggregate
class Product:
    name = String(required=True, max_length=255)
    description = Text(default="")
    price = Float(required=True, min_value=0.01)
    sale_price = Float(min_value=0.01)
    brand = String(max_length=100, default="")
    category_id = Identifier(required=True)
    stock = Integer(default=0, min_value=0)
    rating = Float(default=0.0, min_value=0.0, max_value=5.0)
    num_reviews = Integer(default=0, min_value=0)
    image_url = String(max_length=1024)
    images = HasMany(ProductImage)
    created_at = DateTime()

    @invariant.post
    def sale_price_must_be_below_price(self):
        if self.sale_price is None or self.price is None:
            return
        if self.sale_price >= self.price:
            raise ValidationError(
                {"sale_price": [f"Sale price ({self.sale_price}) must be less than price ({self.price})"]}
            )

    @classmethod
    def create(
        cls,
        name,
        price,
        category_id,
        description=None,
        sale_price=None,
        brand=None,
        stock=0,
        rating=0.0,
        num_reviews=0,
        image_url=None,
    ):
        product = cls(
            name=name,
            description=description,
            price=price,
            sale_price=sale_price,
            brand=brand,
            category_id=category_id,
            stock=stock,
            rating=rating,
            num_reviews=num_reviews,
            image_url=image_url,
            created_at=datetime.now(UTC),
        )
        product.raise_(
            ProductCreated(
                product_id=str(product.id),
                name=name,
                category_id=str(category_id),
                price=price,
                sale_price=sale_price,
            )
        )
        return product

    def unit_price(self):
        """Current price per unit as a ``Decimal``: the sale price when set."""
        return effective_price(self.price, self.sale_price)

    def change_price(self, price, sale_price=None):
        """Set a new list price and sale price together.

        Passing no ``sale_price`` ends any running sale.
        """
        previous_price = self.price
        previous_sale_price = self.sale_price

        with atomic_change(self):
            self.price = price
            self.sale_price = sale_price

        self.raise_(
            ProductPriceChanged(
                product_id=str(self.id),
                previous_price=previous_price,
                previous_sale_price=previous_sale_price,
                price=price,
                sale_price=sale_price,
            )
        )

    def add_image(self, image_url, is_primary=False):
        image = ProductImage(image_url=image_url, is_primary=is_primary)
        self.add_images(image)

        self.raise_(
            ProductImageAdded(
                product_id=str(self.id),
                image_id=str(image.id),
                image_url=image_url,
                is_primary=is_primary,
            )
        )
        return image
