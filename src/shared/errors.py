"""Typed failures raised by the commerce and rides domains.

Each failure extends the closest Protean exception so that Protean's Unit of
Work rolls back on it and Protean's FastAPI handlers recognise it. The app
registers more specific HTTP mappings for these subclasses in ``app.py``.
"""

from protean.exceptions import (
    InvalidOperationError,
    InvalidStateError,
    ObjectNotFoundError,
    ValidationError,
)


class NotFound(ObjectNotFoundError):
    """A referenced product, order or ride does not exist."""

    def __init__(self, kind, identifier):
        self.kind = kind
        self.identifier = str(identifier)
        messages = {"_entity": [f"{kind} not found: {identifier}"]}
        super().__init__(messages)
        self.messages = messages


class InsufficientStock(ValidationError):
    """Requested quantity exceeds the product's available stock."""

    def __init__(self, product_id, product_name, requested, available):
        self.product_id = str(product_id)
        self.product_name = product_name
        self.requested = requested
        self.available = available
        super().__init__(
            {
                "quantity": [
                    f"Insufficient stock for product '{product_name}': {available} available, {requested} requested"
                ]
            }
        )


class IllegalTransition(InvalidStateError):
    """A requested status change violates the ride state machine."""

    def __init__(self, current, requested, reason):
        self.current = current
        self.requested = requested
        self.reason = reason
        messages = {"status": [reason]}
        super().__init__(messages)
        self.messages = messages


class AccessDenied(InvalidOperationError):
    """The actor is authenticated but not allowed to perform the operation."""

    def __init__(self, reason):
        self.reason = reason
        messages = {"_actor": [reason]}
        super().__init__(messages)
        self.messages = messages
