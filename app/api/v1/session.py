"""Route guard endpoint: evaluate a client path against the caller's session."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from app.api.v1.auth import get_optional_user
from app.schemas.auth import CurrentUser
from app.schemas.session import RouteDecision, SessionState
from app.services.routing import resolve_route

router = APIRouter()


@router.get("/route", response_model=RouteDecision)
def get_route(
    user: Annotated[CurrentUser | None, Depends(get_optional_user)],
    path: Annotated[str, Query(max_length=2048)] = "/",
) -> RouteDecision:
    """
    Return login / redirect / render for `path`.

    The server always has a resolved session, so 'loading' is never returned here.
    """
    return resolve_route(path, SessionState(user=user, loading=False))
