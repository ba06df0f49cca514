"""Order aggregate with OrderItem line entities.

An order is written once, at placement, together with all of its lines. Unit
prices are snapshots of the catalog price at purchase time and never follow
later catalog changes.

Status is overwritten by administrators without transition checks; see
``Order.update_status``.
"""

import json
from datetime import UTC, datetime
from decimal import Decimal
from enum import Enum

from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, HasMany, Identifier, Integer, String

from commerce.domain import commerce
from commerce.order.events import OrderPlaced, OrderStatusUpdated


class OrderStatus(Enum):
    PLACED = "Placed"
    SHIPPED = "Shipped"
    DELIVERED = "Delivered"
    CANCELLED = "Cancelled"


class PaymentStatus(Enum):
    PAID = "Paid"


def line_total(unit_price, quantity):
    return Decimal(str(unit_price)) * quantity


@commerce.entity(part_of="Order")
class OrderItem:
    """One product, quantity and price snapshot within an order."""

    product_id = Identifier(required=True)
    product_name = String(max_length=255)
    quantity = Integer(required=True, min_value=1)
    unit_price = Float(required=True, min_value=0.0)


@commerce.aggregate
class Order:
    user_id = Identifier(required=True)
    user_email = String(max_length=255)
    status = String(choices=OrderStatus, default=OrderStatus.PLACED.value)
    payment_status = String(choices=PaymentStatus, default=PaymentStatus.PAID.value)
    total_cost = Float(default=0.0, min_value=0.0)
    items = HasMany(OrderItem)
    ordered_at = DateTime()
    updated_at = DateTime()

    @classmethod
    def place(cls, user_id, lines, user_email=None):
        """Build a placed, paid order from priced lines.

        Args:
            user_id: The ordering user.
            lines: List of dicts with product_id, product_name, quantity, unit_price.
            user_email: Optional email of the ordering user, kept for lookups.
        """
        if not lines:
            raise ValidationError({"items": ["Order must have at least one item"]})

        now = datetime.now(UTC)
        items = [
            OrderItem(
                product_id=line["product_id"],
                product_name=line.get("product_name"),
                quantity=line["quantity"],
                unit_price=line["unit_price"],
            )
            for line in lines
        ]
        total = sum((line_total(item.unit_price, item.quantity) for item in items), Decimal("0"))

        order = cls(
            user_id=user_id,
            user_email=user_email,
            status=OrderStatus.PLACED.value,
            payment_status=PaymentStatus.PAID.value,
            total_cost=float(round(total, 2)),
            items=items,
            ordered_at=now,
            updated_at=now,
        )

        order.raise_(
            OrderPlaced(
                order_id=str(order.id),
                user_id=str(user_id),
                user_email=user_email,
                items=json.dumps(
                    [
                        {
                            "product_id": str(item.product_id),
                            "quantity": item.quantity,
                            "unit_price": item.unit_price,
                        }
                        for item in items
                    ]
                ),
                total_cost=order.total_cost,
                payment_status=order.payment_status,
                ordered_at=now,
            )
        )
        return order

    def update_status(self, new_status):
        """Overwrite the status. Any status may follow any other."""
        try:
            target = OrderStatus(new_status)
        except ValueError:
            raise ValidationError({"status": [f"Unknown order status: {new_status}"]}) from None

        previous = self.status
        now = datetime.now(UTC)
        self.status = target.value
        self.updated_at = now

        self.raise_(
            OrderStatusUpdated(
                order_id=str(self.id),
                previous_status=previous,
                new_status=target.value,
                updated_at=now,
            )
        )
