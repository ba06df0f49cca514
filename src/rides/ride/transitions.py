"""Ride status transition table.

States:
    REQUESTED → ACCEPTED → COMPLETED (terminal)
    REQUESTED | ACCEPTED → CANCELLED (terminal)

``check_transition`` evaluates a requested change against the table and
returns a ``TransitionCheck`` instead of raising, so callers decide how a
refusal surfaces.
"""

from dataclasses import dataclass
from enum import Enum

# Flat placeholder fare assigned when a driver accepts a ride.
FLAT_FARE = 25.0


class RideStatus(Enum):
    REQUESTED = "REQUESTED"
    ACCEPTED = "ACCEPTED"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"


class SideEffect(Enum):
    ASSIGN_DRIVER = "assign_driver"
    SET_FARE = "set_fare"
    STAMP_COMPLETION = "stamp_completion"


@dataclass(frozen=True)
class TransitionRule:
    allowed_from: frozenset
    refusal: str
    effects: tuple = ()
    forbid_own_ride: bool = False


@dataclass(frozen=True)
class TransitionCheck:
    current: RideStatus
    requested: RideStatus
    allowed: bool
    reason: str = ""
    effects: tuple = ()


_TRANSITION_RULES = {
    RideStatus.ACCEPTED: TransitionRule(
        allowed_from=frozenset({RideStatus.REQUESTED}),
        refusal="Ride can only be accepted if it is in REQUESTED status",
        effects=(SideEffect.ASSIGN_DRIVER, SideEffect.SET_FARE),
        forbid_own_ride=True,
    ),
    RideStatus.COMPLETED: TransitionRule(
        allowed_from=frozenset({RideStatus.ACCEPTED}),
        refusal="Ride can only be completed after it has been accepted",
        effects=(SideEffect.STAMP_COMPLETION,),
    ),
    RideStatus.CANCELLED: TransitionRule(
        allowed_from=frozenset({RideStatus.REQUESTED, RideStatus.ACCEPTED, RideStatus.CANCELLED}),
        refusal="Cannot cancel a completed ride",
    ),
}


def check_transition(current, requested, actor_id, customer_id) -> TransitionCheck:
    """Decide whether ``actor_id`` may move a ride from ``current`` to ``requested``."""
    current = RideStatus(current)
    requested = RideStatus(requested)

    rule = _TRANSITION_RULES.get(requested)
    if rule is None:
        return TransitionCheck(
            current,
            requested,
            allowed=False,
            reason=f"Rides cannot be moved to {requested.value}",
        )

    if current not in rule.allowed_from:
        return TransitionCheck(current, requested, allowed=False, reason=rule.refusal)

    if rule.forbid_own_ride and str(actor_id) == str(customer_id):
        return TransitionCheck(
            current,
            requested,
            allowed=False,
            reason="Cannot accept a ride you requested yourself",
        )

    return TransitionCheck(current, requested, allowed=True, effects=rule.effects)
