"""Ride aggregate — one trip from request to completion or cancellation."""

from datetime import UTC, datetime

from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, Identifier, String

from rides.domain import rides
from rides.ride.events import RideAccepted, RideCancelled, RideCompleted, RideRequested
from rides.ride.transitions import FLAT_FARE, RideStatus, SideEffect, check_transition
from shared.errors import IllegalTransition


@rides.aggregate
class Ride:
    customer_id = Identifier(required=True)
    customer_email = String(max_length=255)
    driver_id = Identifier()
    pickup_location = String(required=True, max_length=500)
    dropoff_location = String(required=True, max_length=500)
    fare = Float(default=0.0, min_value=0.0)
    status = String(choices=RideStatus, default=RideStatus.REQUESTED.value)
    requested_at = DateTime()
    completed_at = DateTime()
    updated_at = DateTime()

    @classmethod
    def request(cls, customer_id, pickup_location, dropoff_location, customer_email=None):
        errors = {}
        if not (pickup_location or "").strip():
            errors["pickup_location"] = ["Pickup location is required"]
        if not (dropoff_location or "").strip():
            errors["dropoff_location"] = ["Dropoff location is required"]
        if errors:
            raise ValidationError(errors)

        now = datetime.now(UTC)
        ride = cls(
            customer_id=customer_id,
            customer_email=customer_email,
            pickup_location=pickup_location.strip(),
            dropoff_location=dropoff_location.strip(),
            fare=0.0,
            status=RideStatus.REQUESTED.value,
            requested_at=now,
            updated_at=now,
        )
        ride.raise_(
            RideRequested(
                ride_id=str(ride.id),
                customer_id=str(customer_id),
                pickup_location=ride.pickup_location,
                dropoff_location=ride.dropoff_location,
                requested_at=now,
            )
        )
        return ride

    def transition_to(self, requested_status, actor_id):
        """Move the ride to ``requested_status`` on behalf of ``actor_id``.

        Raises IllegalTransition, leaving the ride untouched, when the
        transition table refuses the change.
        """
        try:
            requested = RideStatus(requested_status)
        except ValueError:
            raise ValidationError({"status": [f"Unknown ride status: {requested_status}"]}) from None

        check = check_transition(self.status, requested, actor_id, self.customer_id)
        if not check.allowed:
            raise IllegalTransition(check.current.value, check.requested.value, check.reason)

        now = datetime.now(UTC)
        if SideEffect.ASSIGN_DRIVER in check.effects:
            self.driver_id = actor_id
        if SideEffect.SET_FARE in check.effects:
            self.fare = FLAT_FARE
        if SideEffect.STAMP_COMPLETION in check.effects:
            self.completed_at = now

        self.status = requested.value
        self.updated_at = now
        self._record_transition(check.current, requested, actor_id, now)

    def _record_transition(self, previous, requested, actor_id, now):
        if requested == RideStatus.ACCEPTED:
            self.raise_(
                RideAccepted(
                    ride_id=str(self.id),
                    customer_id=str(self.customer_id),
                    driver_id=str(actor_id),
                    fare=self.fare,
                    accepted_at=now,
                )
            )
        elif requested == RideStatus.COMPLETED:
            self.raise_(
                RideCompleted(
                    ride_id=str(self.id),
                    driver_id=str(self.driver_id) if self.driver_id else None,
                    fare=self.fare,
                    completed_at=now,
                )
            )
        elif requested == RideStatus.CANCELLED:
            self.raise_(
                RideCancelled(
                    ride_id=str(self.id),
                    cancelled_by=str(actor_id),
                    previous_status=previous.value,
                    cancelled_at=now,
                )
            )
