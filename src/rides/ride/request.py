"""Ride requests — command and handler."""

from protean import handle
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from rides.domain import logger, rides
from rides.ride.ride import Ride


@rides.command(part_of="Ride")
class RequestRide:
    customer_id = Identifier(required=True)
    customer_email = String(max_length=255)
    pickup_location = String(required=True, max_length=500)
    dropoff_location = String(required=True, max_length=500)


@rides.command_handler(part_of=Ride)
class RequestRideHandler:
    @handle(RequestRide)
    def request_ride(self, command):
        ride = Ride.request(
            customer_id=command.customer_id,
            customer_email=command.customer_email,
            pickup_location=command.pickup_location,
            dropoff_location=command.dropoff_location,
        )
        current_domain.repository_for(Ride).add(ride)
        logger.info("ride_requested", ride_id=str(ride.id), customer_id=str(command.customer_id))
        return str(ride.id)
