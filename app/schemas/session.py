"""Schemas for the route guard: session snapshot in, routing decision out."""

from typing import Literal

from pydantic import BaseModel, Field

from app.schemas.auth import CurrentUser

RouteAction = Literal["loading", "login", "redirect", "render"]


class SessionState(BaseModel):
    """Snapshot of the identity layer: current user (or None) and a loading flag."""

    user: CurrentUser | None = None
    loading: bool = False


class RouteDecision(BaseModel):
    """
    Outcome of evaluating a path against a session snapshot.

    - loading: session not resolved yet; show a spinner.
    - login: no user at "/"; show the login view.
    - redirect: navigate to `target`.
    - render: show the view at `path`.
    """

    action: RouteAction
    path: str
    target: str | None = Field(default=None, description="Redirect target when action is 'redirect'.")
