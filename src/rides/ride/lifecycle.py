"""Ride status transitions — command and handler."""

from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from rides.domain import logger, rides
from rides.ride.ride import Ride
from rides.ride.transitions import RideStatus
from shared.errors import IllegalTransition, NotFound


@rides.command(part_of="Ride")
class UpdateRideStatus:
    ride_id = Identifier(required=True)
    status = String(required=True, choices=RideStatus)
    actor_id = Identifier(required=True)


def load_ride(ride_id):
    """Fetch a ride or raise NotFound."""
    try:
        return current_domain.repository_for(Ride).get(ride_id)
    except ObjectNotFoundError:
        raise NotFound("Ride", ride_id) from None


@rides.command_handler(part_of=Ride)
class RideLifecycleHandler:
    @handle(UpdateRideStatus)
    def update_ride_status(self, command):
        ride = load_ride(command.ride_id)
        try:
            ride.transition_to(command.status, actor_id=command.actor_id)
        except IllegalTransition as exc:
            logger.info(
                "ride_transition_rejected",
                ride_id=str(command.ride_id),
                current=exc.current,
                requested=exc.requested,
                reason=exc.reason,
            )
            raise

        current_domain.repository_for(Ride).add(ride)
        logger.info("ride_transitioned", ride_id=str(ride.id), status=ride.status, actor_id=str(command.actor_id))
        return str(ride.id)
