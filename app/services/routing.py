"""Route guard: map a path and a session snapshot to a routing decision. Pure; no I/O."""

from app.core.security import ROLE_ADMIN, ROLE_CITIZEN
from app.schemas.session import RouteDecision, SessionState

ROOT_PATH = "/"

# Protected dashboard paths and the role each one requires.
PROTECTED_ROUTES: dict[str, str] = {
    "/admin": ROLE_ADMIN,
    "/citizen": ROLE_CITIZEN,
}

HOME_BY_ROLE: dict[str, str] = {role: path for path, role in PROTECTED_ROUTES.items()}


def _normalize_path(path: str) -> str:
    path = (path or ROOT_PATH).strip()
    if not path.startswith("/"):
        path = "/" + path
    if len(path) > 1:
        path = path.rstrip("/") or ROOT_PATH
    return path


def resolve_route(path: str, session: SessionState) -> RouteDecision:
    """
    Decide what to show for `path`.

    While the session is loading nothing else is evaluated. Unknown paths
    redirect to "/", which then redirects by role or shows the login view.
    """
    path = _normalize_path(path)
    if session.loading:
        return RouteDecision(action="loading", path=path)

    user = session.user
    if path == ROOT_PATH:
        if user is None:
            return RouteDecision(action="login", path=path)
        return RouteDecision(
            action="redirect",
            path=path,
            target=HOME_BY_ROLE.get(user.role, ROOT_PATH),
        )

    required_role = PROTECTED_ROUTES.get(path)
    if required_role is None:
        return RouteDecision(action="redirect", path=path, target=ROOT_PATH)
    if user is None or user.role != required_role:
        return RouteDecision(action="redirect", path=path, target=ROOT_PATH)
    return RouteDecision(action="render", path=path)
