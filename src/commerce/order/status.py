"""Order status updates — command and handler."""

from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from commerce.domain import commerce, logger
from commerce.order.order import Order, OrderStatus
from shared.errors import NotFound


@commerce.command(part_of="Order")
class UpdateOrderStatus:
    order_id = Identifier(required=True)
    status = String(required=True, choices=OrderStatus)


def load_order(order_id):
    """Fetch an order or raise NotFound."""
    try:
        return current_domain.repository_for(Order).get(order_id)
    except ObjectNotFoundError:
        raise NotFound("Order", order_id) from None


@commerce.command_handler(part_of=Order)
class OrderStatusHandler:
    @handle(UpdateOrderStatus)
    def update_order_status(self, command):
        order = load_order(command.order_id)
        previous = order.status
        order.update_status(command.status)
        current_domain.repository_for(Order).add(order)
        logger.info("order_status_updated", order_id=str(order.id), previous=previous, status=order.status)
        return str(order.id)
