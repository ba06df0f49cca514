"""FastAPI endpoints for the Rides domain."""

from fastapi import APIRouter, Depends, Query
from protean.exceptions import ValidationError
from protean.utils.globals import current_domain

from rides.api.schemas import RequestRideRequest, RidePageResponse, RideResponse, RideStatusRequest
from rides.ride.lifecycle import UpdateRideStatus, load_ride
from rides.ride.request import RequestRide
from rides.ride.ride import Ride
from rides.ride.transitions import RideStatus
from shared.access import Actor, Role, can_view
from shared.errors import AccessDenied
from shared.gateway import require
from shared.pagination import DEFAULT_PAGE_SIZE

ride_router = APIRouter(prefix="/rides", tags=["rides"])


def _ride_status_filter(status):
    if status is None:
        return None
    try:
        return RideStatus(status.upper()).value
    except ValueError:
        raise ValidationError({"status": [f"Unknown ride status: {status}"]}) from None


def _rides_visible_to(actor, email, status, page, size):
    repo = current_domain.repository_for(Ride)

    if actor.is_admin:
        if email and status:
            return repo.by_customer_email_and_status(email, status, page, size)
        if email:
            return repo.by_customer_email(email, page, size)
        if status:
            return repo.by_status(status, page, size)
        return repo.list_all(page, size)

    if actor.role == Role.DRIVER:
        # Open requests form a shared board; anything else is the driver's own work.
        if status == RideStatus.REQUESTED.value:
            return repo.by_status(status, page, size)
        if status:
            return repo.by_driver_and_status(actor.id, status, page, size)
        return repo.by_driver(actor.id, page, size)

    if status:
        return repo.by_customer_and_status(actor.id, status, page, size)
    return repo.by_customer(actor.id, page, size)


@ride_router.post("", status_code=201, response_model=RideResponse)
async def request_ride(body: RequestRideRequest, actor: Actor = Depends(require("ride.request"))) -> RideResponse:
    command = RequestRide(
        customer_id=actor.id,
        customer_email=actor.email,
        pickup_location=body.pickup_location,
        dropoff_location=body.dropoff_location,
    )
    ride_id = current_domain.process(command, asynchronous=False)
    return RideResponse.from_ride(load_ride(ride_id))


@ride_router.get("", response_model=RidePageResponse)
async def list_rides(
    email: str | None = None,
    status: str | None = None,
    page: int = Query(0, ge=0),
    size: int = Query(DEFAULT_PAGE_SIZE, ge=1),
    actor: Actor = Depends(require("ride.read")),
) -> RidePageResponse:
    result = _rides_visible_to(actor, email, _ride_status_filter(status), page, size)
    return RidePageResponse(
        items=[RideResponse.from_ride(r) for r in result.items],
        total=result.total,
        page=result.page,
        size=result.size,
        total_pages=result.total_pages,
    )


@ride_router.get("/{ride_id}", response_model=RideResponse)
async def get_ride(ride_id: str, actor: Actor = Depends(require("ride.read"))) -> RideResponse:
    ride = load_ride(ride_id)
    if not can_view(actor, ride.customer_id, ride.driver_id):
        raise AccessDenied("Rides are visible to their customer, their driver and administrators only")
    return RideResponse.from_ride(ride)


@ride_router.patch("/{ride_id}/status", response_model=RideResponse)
async def update_ride_status(
    ride_id: str, body: RideStatusRequest, actor: Actor = Depends(require("ride.update_status"))
) -> RideResponse:
    command = UpdateRideStatus(ride_id=ride_id, status=body.status.upper(), actor_id=actor.id)
    current_domain.process(command, asynchronous=False)
    return RideResponse.from_ride(load_ride(ride_id))
