"""Catalog management — commands and handler."""

from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import Float, Identifier, Integer, String, Text
from protean.utils.globals import current_domain

from commerce.domain import commerce, logger
from commerce.product.product import Product
from shared.errors import NotFound


@commerce.command(part_of="Product")
class AddProduct:
    name = String(required=True, max_length=255)
    description = Text()
    price = Float(required=True, min_value=0.0)
    stock_quantity = Integer(required=True, min_value=0)
    category = String(max_length=100)


@commerce.command(part_of="Product")
class UpdateProduct:
    product_id = Identifier(required=True)
    name = String(required=True, max_length=255)
    description = Text()
    price = Float(required=True, min_value=0.0)
    stock_quantity = Integer(required=True, min_value=0)
    category = String(max_length=100)


@commerce.command(part_of="Product")
class RemoveProduct:
    product_id = Identifier(required=True)


def load_product(product_id):
    """Fetch a product or raise NotFound."""
    try:
        return current_domain.repository_for(Product).get(product_id)
    except ObjectNotFoundError:
        raise NotFound("Product", product_id) from None


@commerce.command_handler(part_of=Product)
class CatalogManagementHandler:
    @handle(AddProduct)
    def add_product(self, command):
        product = Product.create(
            name=command.name,
            description=command.description,
            price=command.price,
            stock_quantity=command.stock_quantity,
            category=command.category,
        )
        current_domain.repository_for(Product).add(product)
        logger.info("product_added", product_id=str(product.id), stock=product.stock_quantity)
        return str(product.id)

    @handle(UpdateProduct)
    def update_product(self, command):
        product = load_product(command.product_id)
        product.update_details(
            name=command.name,
            description=command.description,
            price=command.price,
            stock_quantity=command.stock_quantity,
            category=command.category,
        )
        current_domain.repository_for(Product).add(product)
        return str(product.id)

    @handle(RemoveProduct)
    def remove_product(self, command):
        product = load_product(command.product_id)
        product.remove()

        repo = current_domain.repository_for(Product)
        repo.add(product)
        repo._dao.delete(product)
        logger.info("product_removed", product_id=str(command.product_id))
