"""FastAPI endpoints for the Commerce domain."""

import json

from fastapi import APIRouter, Depends, Query
from protean.exceptions import ValidationError
from protean.utils.globals import current_domain

from commerce.api.schemas import (
    OrderPageResponse,
    OrderResponse,
    PlaceOrderRequest,
    ProductPageResponse,
    ProductRequest,
    ProductResponse,
    UpdateStatusRequest,
)
from commerce.order.order import Order, OrderStatus
from commerce.order.placement import PlaceOrder
from commerce.order.status import UpdateOrderStatus, load_order
from commerce.product.management import AddProduct, RemoveProduct, UpdateProduct, load_product
from commerce.product.product import Product
from shared.access import Actor, can_view
from shared.errors import AccessDenied
from shared.gateway import require
from shared.pagination import DEFAULT_PAGE_SIZE

product_router = APIRouter(prefix="/products", tags=["products"])
order_router = APIRouter(prefix="/orders", tags=["orders"])


def _page_fields(page) -> dict:
    return {"total": page.total, "page": page.page, "size": page.size, "total_pages": page.total_pages}


# --- Product endpoints ---


@product_router.get("", response_model=ProductPageResponse)
async def list_products(
    search: str | None = None,
    page: int = Query(0, ge=0),
    size: int = Query(DEFAULT_PAGE_SIZE, ge=1),
) -> ProductPageResponse:
    repo = current_domain.repository_for(Product)
    result = repo.search(search, page, size) if search and search.strip() else repo.list_all(page, size)
    return ProductPageResponse(
        items=[ProductResponse.from_product(p) for p in result.items],
        **_page_fields(result),
    )


@product_router.get("/{product_id}", response_model=ProductResponse)
async def get_product(product_id: str) -> ProductResponse:
    return ProductResponse.from_product(load_product(product_id))


@product_router.post("", status_code=201, response_model=ProductResponse)
async def add_product(body: ProductRequest, actor: Actor = Depends(require("catalog.write"))) -> ProductResponse:
    command = AddProduct(
        name=body.name,
        description=body.description,
        price=body.price,
        stock_quantity=body.stock_quantity,
        category=body.category,
    )
    product_id = current_domain.process(command, asynchronous=False)
    return ProductResponse.from_product(load_product(product_id))


@product_router.put("/{product_id}", response_model=ProductResponse)
async def update_product(
    product_id: str, body: ProductRequest, actor: Actor = Depends(require("catalog.write"))
) -> ProductResponse:
    command = UpdateProduct(
        product_id=product_id,
        name=body.name,
        description=body.description,
        price=body.price,
        stock_quantity=body.stock_quantity,
        category=body.category,
    )
    current_domain.process(command, asynchronous=False)
    return ProductResponse.from_product(load_product(product_id))


@product_router.delete("/{product_id}")
async def remove_product(product_id: str, actor: Actor = Depends(require("catalog.write"))) -> dict:
    current_domain.process(RemoveProduct(product_id=product_id), asynchronous=False)
    return {"status": "ok"}


# --- Order endpoints ---


def _order_status_filter(status):
    if status is None:
        return None
    try:
        return OrderStatus(status).value
    except ValueError:
        raise ValidationError({"status": [f"Unknown order status: {status}"]}) from None


@order_router.post("", status_code=201, response_model=OrderResponse)
async def place_order(body: PlaceOrderRequest, actor: Actor = Depends(require("order.place"))) -> OrderResponse:
    command = PlaceOrder(
        user_id=actor.id,
        user_email=actor.email,
        items=json.dumps([line.model_dump() for line in body.items]),
    )
    order_id = current_domain.process(command, asynchronous=False)
    return OrderResponse.from_order(load_order(order_id))


@order_router.get("", response_model=OrderPageResponse)
async def list_orders(
    email: str | None = None,
    status: str | None = None,
    page: int = Query(0, ge=0),
    size: int = Query(DEFAULT_PAGE_SIZE, ge=1),
    actor: Actor = Depends(require("order.read")),
) -> OrderPageResponse:
    """Admins see every order and may filter by email; everyone else sees their own."""
    status = _order_status_filter(status)
    repo = current_domain.repository_for(Order)

    if actor.is_admin and email and status:
        result = repo.by_email_and_status(email, status, page, size)
    elif actor.is_admin and email:
        result = repo.by_email(email, page, size)
    elif actor.is_admin and status:
        result = repo.by_status(status, page, size)
    elif actor.is_admin:
        result = repo.list_all(page, size)
    elif status:
        result = repo.by_user_and_status(actor.id, status, page, size)
    else:
        result = repo.by_user(actor.id, page, size)

    return OrderPageResponse(
        items=[OrderResponse.from_order(o) for o in result.items],
        **_page_fields(result),
    )


@order_router.get("/{order_id}", response_model=OrderResponse)
async def get_order(order_id: str, actor: Actor = Depends(require("order.read"))) -> OrderResponse:
    order = load_order(order_id)
    if not can_view(actor, order.user_id):
        raise AccessDenied("Orders are visible to their owner and administrators only")
    return OrderResponse.from_order(order)


@order_router.patch("/{order_id}/status", response_model=OrderResponse)
async def update_order_status(
    order_id: str, body: UpdateStatusRequest, actor: Actor = Depends(require("order.update_status"))
) -> OrderResponse:
    command = UpdateOrderStatus(order_id=order_id, status=body.status)
    current_domain.process(command, asynchronous=False)
    return OrderResponse.from_order(load_order(order_id))
