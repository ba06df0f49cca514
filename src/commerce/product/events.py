"""Domain events for the Product aggregate."""

from protean.fields import DateTime, Float, Identifier, Integer, String

from commerce.domain import commerce


@commerce.event(part_of="Product")
class ProductAdded:
    """A new product was added to the catalog."""

    __version__ = 1

    product_id = Identifier(required=True)
    name = String(required=True)
    price = Float(required=True)
    stock_quantity = Integer(required=True)
    category = String()
    added_at = DateTime(required=True)


@commerce.event(part_of="Product")
class ProductUpdated:
    """Catalog details of a product were replaced by an administrator."""

    __version__ = 1

    product_id = Identifier(required=True)
    name = String(required=True)
    price = Float(required=True)
    stock_quantity = Integer(required=True)
    category = String()
    updated_at = DateTime(required=True)


@commerce.event(part_of="Product")
class StockDeducted:
    """Stock was taken off a product to fulfil an order."""

    __version__ = 1

    product_id = Identifier(required=True)
    quantity = Integer(required=True)
    previous_stock = Integer(required=True)
    new_stock = Integer(required=True)
    deducted_at = DateTime(required=True)


@commerce.event(part_of="Product")
class ProductRemoved:
    """A product was taken out of the catalog."""

    __version__ = 1

    product_id = Identifier(required=True)
    name = String(required=True)
    removed_at = DateTime(required=True)
