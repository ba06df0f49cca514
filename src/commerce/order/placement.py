"""Order placement — command and handler.

Placement is all-or-nothing. Every line is checked against current stock
before any product is touched; deductions and the new order are then written
in the handler's Unit of Work, which Protean rolls back if anything raises.
"""

import json

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Identifier, String, Text
from protean.utils.globals import current_domain

from commerce.domain import commerce, logger
from commerce.order.order import Order
from commerce.product.management import load_product
from commerce.product.product import Product
from shared.errors import InsufficientStock


@commerce.command(part_of="Order")
class PlaceOrder:
    user_id = Identifier(required=True)
    user_email = String(max_length=255)
    items = Text(required=True)  # JSON: list of {product_id, quantity}


def parse_order_lines(raw_items):
    """Decode and validate the requested (product_id, quantity) pairs."""
    items = json.loads(raw_items) if isinstance(raw_items, str) else raw_items
    if not isinstance(items, list) or not items:
        raise ValidationError({"items": ["Order must have at least one item"]})

    lines = []
    for index, item in enumerate(items):
        product_id = item.get("product_id") if isinstance(item, dict) else None
        quantity = item.get("quantity") if isinstance(item, dict) else None
        if not product_id:
            raise ValidationError({"items": [f"Item {index}: product_id is required"]})
        if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity <= 0:
            raise ValidationError({"items": [f"Item {index}: quantity must be a positive integer"]})
        lines.append((str(product_id), quantity))
    return lines


@commerce.command_handler(part_of=Order)
class OrderPlacementHandler:
    @handle(PlaceOrder)
    def place_order(self, command):
        requested = parse_order_lines(command.items)

        # Validate every line before staging any deduction.
        products = {}
        reserved = {}
        priced_lines = []
        for product_id, quantity in requested:
            product = products.get(product_id) or load_product(product_id)
            products[product_id] = product

            wanted = reserved.get(product_id, 0) + quantity
            if not product.has_stock_for(wanted):
                logger.info(
                    "order_rejected_insufficient_stock",
                    user_id=str(command.user_id),
                    product_id=product_id,
                    requested=wanted,
                    available=product.stock_quantity,
                )
                raise InsufficientStock(
                    product_id=product_id,
                    product_name=product.name,
                    requested=wanted,
                    available=product.stock_quantity,
                )
            reserved[product_id] = wanted
            priced_lines.append(
                {
                    "product_id": product_id,
                    "product_name": product.name,
                    "quantity": quantity,
                    "unit_price": product.price,
                }
            )

        # Commit staged deductions and the order together.
        product_repo = current_domain.repository_for(Product)
        for product_id, quantity in reserved.items():
            product = products[product_id]
            product.deduct_stock(quantity)
            product_repo.add(product)

        order = Order.place(
            user_id=command.user_id,
            user_email=command.user_email,
            lines=priced_lines,
        )
        current_domain.repository_for(Order).add(order)

        logger.info(
            "order_placed",
            order_id=str(order.id),
            user_id=str(command.user_id),
            lines=len(priced_lines),
            total_cost=order.total_cost,
        )
        return str(order.id)
