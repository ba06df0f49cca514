"""FastAPI plumbing shared by every router.

The authenticating gateway in front of this service forwards the caller's
identity as ``X-Actor-*`` headers. ``current_actor`` turns them into an
``Actor``; ``require`` checks the actor against the capability table once per
request.
"""

from fastapi import Depends, FastAPI, Header, HTTPException, Request
from fastapi.responses import JSONResponse
from protean.exceptions import ExpectedVersionError

from shared.access import Actor, Role, authorize
from shared.errors import AccessDenied, IllegalTransition, InsufficientStock, NotFound


async def current_actor(
    actor_id: str | None = Header(None, alias="X-Actor-Id"),
    actor_role: str | None = Header(None, alias="X-Actor-Role"),
    actor_email: str | None = Header(None, alias="X-Actor-Email"),
) -> Actor:
    if not actor_id or not actor_id.strip() or not actor_role:
        raise HTTPException(status_code=401, detail="Missing actor identity")
    try:
        role = Role(actor_role.strip().upper())
    except ValueError:
        raise HTTPException(status_code=401, detail=f"Unknown actor role: {actor_role}") from None
    return Actor(id=actor_id.strip(), role=role, email=actor_email or None)


def require(operation: str):
    """Dependency factory: the current actor, provided it may perform ``operation``."""

    async def _authorized(actor: Actor = Depends(current_actor)) -> Actor:
        return authorize(operation, actor)

    return _authorized


def _error_response(status_code: int, exc) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": exc.messages})


def register_error_handlers(app: FastAPI) -> None:
    """Map the typed domain failures to HTTP statuses.

    Registered on top of Protean's own handlers; Starlette resolves handlers by
    the exception's MRO, so these subclasses win over their Protean bases.
    """

    @app.exception_handler(NotFound)
    async def not_found(request: Request, exc: NotFound):
        return _error_response(404, exc)

    @app.exception_handler(InsufficientStock)
    async def insufficient_stock(request: Request, exc: InsufficientStock):
        return _error_response(409, exc)

    @app.exception_handler(IllegalTransition)
    async def illegal_transition(request: Request, exc: IllegalTransition):
        return _error_response(409, exc)

    @app.exception_handler(AccessDenied)
    async def access_denied(request: Request, exc: AccessDenied):
        return _error_response(403, exc)

    @app.exception_handler(ExpectedVersionError)
    async def version_conflict(request: Request, exc: ExpectedVersionError):
        message = str(getattr(exc, "messages", None) or exc)
        return JSONResponse(status_code=409, content={"error": {"_entity": [message]}})
