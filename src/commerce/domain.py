"""Commerce bounded context — product catalog and order placement.

Products and orders live in one domain so that an order and the stock
deductions it causes are persisted in the same Unit of Work.
"""

from protean.domain import Domain

from commerce.utils.logging import configure_logging, get_logger

# Configure logging for the application
configure_logging()

logger = get_logger(__name__)

# Domain Composition Root
commerce = Domain(name="commerce")
