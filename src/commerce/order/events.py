"""Domain events for the Order aggregate."""

from protean.fields import DateTime, Float, Identifier, String, Text

from commerce.domain import commerce


@commerce.event(part_of="Order")
class OrderPlaced:
    """A customer placed an order; stock for every line was deducted."""

    __version__ = 1

    order_id = Identifier(required=True)
    user_id = Identifier(required=True)
    user_email = String()
    items = Text(required=True)  # JSON list of {product_id, quantity, unit_price}
    total_cost = Float(required=True)
    payment_status = String(required=True)
    ordered_at = DateTime(required=True)


@commerce.event(part_of="Order")
class OrderStatusUpdated:
    """An administrator overwrote the order status."""

    __version__ = 1

    order_id = Identifier(required=True)
    previous_status = String(required=True)
    new_status = String(required=True)
    updated_at = DateTime(required=True)
