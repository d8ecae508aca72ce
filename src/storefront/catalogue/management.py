"""Commands and handlers for categories and products."""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Boolean, Float, Identifier, Integer, String, Text
from protean.utils.globals import current_domain

from storefront.catalogue.category import Category
from storefront.catalogue.product import Product
from storefront.domain import storefront


@storefront.command(part_of="Category")
class CreateCategory:
    name = String(required=True, max_length=100)
    slug = String(required=True, max_length=100)
    image_url = String(max_length=1024)


@storefront.command(part_of="Product")
class CreateProduct:
    name = String(required=True, max_length=255)
    description = Text()
    price = Float(required=True, min_value=0.01)
    sale_price = Float(min_value=0.01)
    brand = String(max_length=100)
    category_id = Identifier(required=True)
    stock = Integer(default=0, min_value=0)
    rating = Float(default=0.0, min_value=0.0, max_value=5.0)
    num_reviews = Integer(default=0, min_value=0)
    image_url = String(max_length=1024)


@storefront.command(part_of="Product")
class ChangeProductPrice:
    product_id = Identifier(required=True)
    price = Float(required=True, min_value=0.01)
    sale_price = Float(min_value=0.01)


@storefront.command(part_of="Product")
class AddProductImage:
    product_id = Identifier(required=True)
    image_url = String(required=True, max_length=1024)
    is_primary = Boolean(default=False)


@storefront.command_handler(part_of=Category)
class CategoryManagementHandler:
    @handle(CreateCategory)
    def create_category(self, command):
        repo = current_domain.repository_for(Category)
        if repo.find_by_slug(command.slug) is not None:
            raise ValidationError({"slug": [f"Category with slug '{command.slug}' already exists"]})

        category = Category.create(
            name=command.name,
            slug=command.slug,
            image_url=command.image_url,
        )
        repo.add(category)
        return str(category.id)


@storefront.command_handler(part_of=Product)
class ProductManagementHandler:
    @handle(CreateProduct)
    def create_product(self, command):
        # Raises ObjectNotFoundError for an unknown category
        current_domain.repository_for(Category).get(command.category_id)

        product = Product.create(
            name=command.name,
            description=command.description,
            price=command.price,
            sale_price=command.sale_price,
            brand=command.brand,
            category_id=command.category_id,
            stock=command.stock,
            rating=command.rating,
            num_reviews=command.num_reviews,
            image_url=command.image_url,
        )
        current_domain.repository_for(Product).add(product)
        return str(product.id)

    @handle(ChangeProductPrice)
    def change_product_price(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)
        product.change_price(price=command.price, sale_price=command.sale_price)
        repo.add(product)

    @handle(AddProductImage)
    def add_product_image(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)
        image = product.add_image(command.image_url, is_primary=command.is_primary)
        repo.add(product)
        return str(image.id)
