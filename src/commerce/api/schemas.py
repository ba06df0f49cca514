"""Pydantic request/response schemas for the Commerce API.

These are external contracts, kept separate from the Protean commands they
are translated into.
"""

from datetime import datetime

from pydantic import BaseModel

# --- Product schemas ---


class ProductRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Desk Lamp",
                    "description": "Adjustable LED desk lamp.",
                    "price": 12.5,
                    "stock_quantity": 40,
                    "category": "Lighting",
                }
            ]
        }
    }

    name: str
    description: str | None = None
    price: float
    stock_quantity: int = 0
    category: str | None = None


class ProductResponse(BaseModel):
    id: str
    name: str
    description: str | None = None
    price: float
    stock_quantity: int
    category: str | None = None

    @classmethod
    def from_product(cls, product) -> "ProductResponse":
        return cls(
            id=str(product.id),
            name=product.name,
            description=product.description,
            price=product.price,
            stock_quantity=product.stock_quantity,
            category=product.category,
        )


class ProductPageResponse(BaseModel):
    items: list[ProductResponse]
    total: int
    page: int
    size: int
    total_pages: int


# --- Order schemas ---


class OrderLineRequest(BaseModel):
    product_id: str
    quantity: int


class PlaceOrderRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "items": [
                        {"product_id": "5f0c6a9e-1b1e-4a55-9d7e-4b1f3c2a9d10", "quantity": 2},
                        {"product_id": "0a3e2d5c-7f61-4c1b-8f0e-2c9b1d4e6a77", "quantity": 1},
                    ]
                }
            ]
        }
    }

    items: list[OrderLineRequest]


class UpdateStatusRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"status": "Shipped"}]}}

    status: str


class OrderItemResponse(BaseModel):
    product_id: str
    product_name: str | None = None
    quantity: int
    unit_price: float


class OrderResponse(BaseModel):
    id: str
    user_id: str
    user_email: str | None = None
    items: list[OrderItemResponse]
    total_cost: float
    status: str
    payment_status: str
    ordered_at: datetime | None = None

    @classmethod
    def from_order(cls, order) -> "OrderResponse":
        return cls(
            id=str(order.id),
            user_id=str(order.user_id),
            user_email=order.user_email,
            items=[
                OrderItemResponse(
                    product_id=str(item.product_id),
                    product_name=item.product_name,
                    quantity=item.quantity,
                    unit_price=item.unit_price,
                )
                for item in order.items
            ],
            total_cost=order.total_cost,
            status=order.status,
            payment_status=order.payment_status,
            ordered_at=order.ordered_at,
        )


class OrderPageResponse(BaseModel):
    items: list[OrderResponse]
    total: int
    page: int
    size: int
    total_pages: int
