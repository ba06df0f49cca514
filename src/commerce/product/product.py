"""Product aggregate — a catalog entry with a price and a stock count."""

from datetime import UTC, datetime

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, Integer, String, Text

from commerce.domain import commerce
from commerce.product.events import ProductAdded, ProductRemoved, ProductUpdated, StockDeducted
from shared.errors import InsufficientStock


@commerce.aggregate
class Product:
    """Product aggregate root.

    ``stock_quantity`` is the number of units available for purchase. It is
    decremented by order placement and replaced wholesale by catalog updates.
    """

    name = String(required=True, max_length=255)
    description = Text()
    price = Float(required=True, min_value=0.0)
    stock_quantity = Integer(required=True, min_value=0)
    category = String(max_length=100, default="")
    created_at = DateTime()
    updated_at = DateTime()

    @invariant.post
    def stock_cannot_go_negative(self):
        if self.stock_quantity is not None and self.stock_quantity < 0:
            raise ValidationError({"stock_quantity": ["Stock quantity cannot be negative"]})

    @classmethod
    def create(cls, name, price, stock_quantity=0, description=None, category=None):
        now = datetime.now(UTC)
        product = cls(
            name=name,
            description=description,
            price=price,
            stock_quantity=stock_quantity,
            category=category or "",
            created_at=now,
            updated_at=now,
        )
        product.raise_(
            ProductAdded(
                product_id=str(product.id),
                name=name,
                price=price,
                stock_quantity=stock_quantity,
                category=product.category,
                added_at=now,
            )
        )
        return product

    def update_details(self, name, description, price, stock_quantity, category):
        """Replace all catalog details, including the stock count."""
        now = datetime.now(UTC)
        self.name = name
        self.description = description
        self.price = price
        self.stock_quantity = stock_quantity
        self.category = category or ""
        self.updated_at = now

        self.raise_(
            ProductUpdated(
                product_id=str(self.id),
                name=name,
                price=price,
                stock_quantity=stock_quantity,
                category=self.category,
                updated_at=now,
            )
        )

    def has_stock_for(self, quantity):
        return self.stock_quantity >= quantity

    def deduct_stock(self, quantity):
        """Take ``quantity`` units off the shelf."""
        if quantity <= 0:
            raise ValidationError({"quantity": ["Quantity must be positive"]})
        if not self.has_stock_for(quantity):
            raise InsufficientStock(
                product_id=self.id,
                product_name=self.name,
                requested=quantity,
                available=self.stock_quantity,
            )

        previous = self.stock_quantity
        now = datetime.now(UTC)
        self.stock_quantity = previous - quantity
        self.updated_at = now

        self.raise_(
            StockDeducted(
                product_id=str(self.id),
                quantity=quantity,
                previous_stock=previous,
                new_stock=self.stock_quantity,
                deducted_at=now,
            )
        )

    def remove(self):
        """Mark the product as leaving the catalog; the handler deletes the row."""
        self.raise_(ProductRemoved(product_id=str(self.id), name=self.name, removed_at=datetime.now(UTC)))
