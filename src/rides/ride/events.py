"""Domain events for the Ride aggregate."""

from protean.fields import DateTime, Float, Identifier, String

from rides.domain import rides


@rides.event(part_of="Ride")
class RideRequested:
    """A customer asked for a ride."""

    __version__ = 1

    ride_id = Identifier(required=True)
    customer_id = Identifier(required=True)
    pickup_location = String(required=True)
    dropoff_location = String(required=True)
    requested_at = DateTime(required=True)


@rides.event(part_of="Ride")
class RideAccepted:
    """A driver took the ride; the flat fare was assigned."""

    __version__ = 1

    ride_id = Identifier(required=True)
    customer_id = Identifier(required=True)
    driver_id = Identifier(required=True)
    fare = Float(required=True)
    accepted_at = DateTime(required=True)


@rides.event(part_of="Ride")
class RideCompleted:
    __version__ = 1

    ride_id = Identifier(required=True)
    driver_id = Identifier()
    fare = Float(required=True)
    completed_at = DateTime(required=True)


@rides.event(part_of="Ride")
class RideCancelled:
    __version__ = 1

    ride_id = Identifier(required=True)
    cancelled_by = Identifier(required=True)
    previous_status = String(required=True)
    cancelled_at = DateTime(required=True)
