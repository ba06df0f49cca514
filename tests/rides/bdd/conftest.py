"""Shared BDD fixtures and step definitions for the Rides domain."""

import pytest
from pytest_bdd import given, parsers, then
from rides.ride.events import RideAccepted, RideCancelled, RideCompleted, RideRequested
from rides.ride.ride import Ride

_RIDE_EVENT_CLASSES = {
    "RideRequested": RideRequested,
    "RideAccepted": RideAccepted,
    "RideCompleted": RideCompleted,
    "RideCancelled": RideCancelled,
}


@pytest.fixture()
def error():
    """Container for a captured transition refusal."""
    return {"exc": None}


def _requested_ride(customer_id):
    ride = Ride.request(customer_id=customer_id, pickup_location="Harbour Road", dropoff_location="Station")
    ride._events.clear()
    return ride


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse('a ride requested by customer "{customer_id}"'), target_fixture="ride")
def ride_requested_by(customer_id):
    return _requested_ride(customer_id)


@given(parsers.cfparse('a ride accepted by driver "{driver_id}"'), target_fixture="ride")
def ride_accepted_by(driver_id):
    ride = _requested_ride("cust-bdd")
    ride.transition_to("ACCEPTED", actor_id=driver_id)
    ride._events.clear()
    return ride


@given(parsers.cfparse('a completed ride driven by "{driver_id}"'), target_fixture="ride")
def completed_ride(driver_id):
    ride = _requested_ride("cust-bdd")
    ride.transition_to("ACCEPTED", actor_id=driver_id)
    ride.transition_to("COMPLETED", actor_id=driver_id)
    ride._events.clear()
    return ride


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse('the ride status is "{status}"'))
def ride_status_is(ride, status):
    assert ride.status == status


@then(parsers.cfparse('the ride is assigned to "{driver_id}"'))
def ride_assigned_to(ride, driver_id):
    assert ride.driver_id == driver_id


@then(parsers.cfparse("the ride fare is {fare:f}"))
def ride_fare_is(ride, fare):
    assert ride.fare == fare


@then("the ride has a completion time")
def ride_has_completion_time(ride):
    assert ride.completed_at is not None


@then(parsers.cfparse("a {event_type} event is raised"))
def event_raised(ride, event_type):
    event_cls = _RIDE_EVENT_CLASSES[event_type]
    assert any(isinstance(e, event_cls) for e in ride._events)


@then(parsers.cfparse('the transition is refused with "{reason}"'))
def transition_refused(error, reason):
    assert error["exc"] is not None
    assert error["exc"].reason == reason
