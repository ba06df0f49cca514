"""Actors, roles and the capability table evaluated at the API boundary.

Authentication happens upstream: the gateway verifies the caller and forwards
its identity. This module only answers "may this actor do that?".
"""

from dataclasses import dataclass
from enum import Enum

from shared.errors import AccessDenied


class Role(Enum):
    CUSTOMER = "CUSTOMER"
    DRIVER = "DRIVER"
    ADMIN = "ADMIN"


@dataclass(frozen=True)
class Actor:
    """An authenticated caller: identity, role and (optionally) email."""

    id: str
    role: Role
    email: str | None = None

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN


_EVERYONE = frozenset(Role)

# Operation -> roles allowed to invoke it.
CAPABILITIES: dict[str, frozenset[Role]] = {
    "catalog.write": frozenset({Role.ADMIN}),
    "order.place": _EVERYONE,
    "order.read": _EVERYONE,
    "order.update_status": frozenset({Role.ADMIN}),
    "ride.request": _EVERYONE,
    "ride.read": _EVERYONE,
    "ride.update_status": frozenset({Role.DRIVER, Role.ADMIN}),
}


def allowed_roles(operation: str) -> frozenset[Role]:
    try:
        return CAPABILITIES[operation]
    except KeyError:
        raise ValueError(f"Unknown operation: {operation}") from None


def authorize(operation: str, actor: Actor) -> Actor:
    """Return the actor if its role may perform ``operation``, else raise AccessDenied."""
    if actor.role not in allowed_roles(operation):
        raise AccessDenied(f"Role {actor.role.value} may not perform {operation}")
    return actor


def can_view(actor: Actor, owner_id, assignee_id=None) -> bool:
    """Admins see everything; otherwise only the owner or the assigned party."""
    if actor.is_admin:
        return True
    if owner_id is not None and str(owner_id) == actor.id:
        return True
    return assignee_id is not None and str(assignee_id) == actor.id
