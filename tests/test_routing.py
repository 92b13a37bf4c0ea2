"""Unit tests for app.services.routing: route guard decisions from a session snapshot."""

import unittest

from app.schemas.auth import CurrentUser
from app.schemas.session import SessionState
from app.services.routing import resolve_route


def _user(role: str = "citizen") -> CurrentUser:
    return CurrentUser(id=1, username="u", full_name="U Ser", role=role)


class TestLoading(unittest.TestCase):
    def test_loading_wins_over_everything(self) -> None:
        for path in ("/", "/admin", "/citizen", "/nowhere"):
            decision = resolve_route(path, SessionState(user=_user("admin"), loading=True))
            self.assertEqual(decision.action, "loading")
            self.assertIsNone(decision.target)


class TestRoot(unittest.TestCase):
    def test_no_user_shows_login(self) -> None:
        decision = resolve_route("/", SessionState())
        self.assertEqual(decision.action, "login")

    def test_admin_redirects_to_admin(self) -> None:
        decision = resolve_route("/", SessionState(user=_user("admin")))
        self.assertEqual((decision.action, decision.target), ("redirect", "/admin"))

    def test_citizen_redirects_to_citizen(self) -> None:
        decision = resolve_route("/", SessionState(user=_user("citizen")))
        self.assertEqual((decision.action, decision.target), ("redirect", "/citizen"))


class TestProtectedRoutes(unittest.TestCase):
    def test_matching_role_renders(self) -> None:
        self.assertEqual(resolve_route("/admin", SessionState(user=_user("admin"))).action, "render")
        self.assertEqual(resolve_route("/citizen", SessionState(user=_user("citizen"))).action, "render")

    def test_role_mismatch_redirects_home(self) -> None:
        decision = resolve_route("/admin", SessionState(user=_user("citizen")))
        self.assertEqual((decision.action, decision.target), ("redirect", "/"))
        decision = resolve_route("/citizen", SessionState(user=_user("admin")))
        self.assertEqual((decision.action, decision.target), ("redirect", "/"))

    def test_anonymous_redirects_home(self) -> None:
        decision = resolve_route("/admin", SessionState())
        self.assertEqual((decision.action, decision.target), ("redirect", "/"))

    def test_trailing_slash_is_normalized(self) -> None:
        decision = resolve_route("/admin/", SessionState(user=_user("admin")))
        self.assertEqual(decision.action, "render")
        self.assertEqual(decision.path, "/admin")


class TestCatchAll(unittest.TestCase):
    def test_unknown_path_redirects_home(self) -> None:
        for state in (SessionState(), SessionState(user=_user("admin"))):
            decision = resolve_route("/settings", state)
            self.assertEqual((decision.action, decision.target), ("redirect", "/"))

    def test_empty_path_is_root(self) -> None:
        self.assertEqual(resolve_route("", SessionState()).action, "login")


if __name__ == "__main__":
    unittest.main()
