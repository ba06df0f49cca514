"""Rides bounded context — ride requests and the ride status lifecycle."""

import structlog
from protean.domain import Domain

rides = Domain(name="rides")

logger = structlog.get_logger(__name__)
