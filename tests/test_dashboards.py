"""Unit tests for app.services.dashboards: per-tab fetches for citizen and admin views."""

import unittest
from unittest.mock import MagicMock

from app.models import AmenityType
from app.schemas.amenities import AmenityCreate
from app.schemas.announcements import AnnouncementCreate
from app.services.amenities import create_amenity, delete_amenity
from app.services.announcements import create_announcement
from app.services.dashboards import (
    ADMIN_VIEWS,
    CITIZEN_VIEWS,
    AdminTab,
    CitizenTab,
    render_tab,
)
from helpers import add_complaint, add_user, as_current, make_session_factory


def _settings(limit: int = 5) -> MagicMock:
    settings = MagicMock()
    settings.RECENT_COMPLAINTS_LIMIT = limit
    return settings


class TestTabRegistry(unittest.TestCase):
    def test_every_tab_has_a_view(self) -> None:
        self.assertEqual(set(CITIZEN_VIEWS), set(CitizenTab))
        self.assertEqual(set(ADMIN_VIEWS), set(AdminTab))


class TestCitizenTabs(unittest.TestCase):
    def setUp(self) -> None:
        self.session = make_session_factory()()
        self.citizen = add_user(self.session, "frank", full_name="Frank Q")
        self.other = add_user(self.session, "gina")
        self.admin = add_user(self.session, "root", role="admin")

    def tearDown(self) -> None:
        self.session.close()

    def _render(self, tab: CitizenTab, **kwargs: object):
        return render_tab(CITIZEN_VIEWS, tab, self.session, as_current(self.citizen), _settings(), **kwargs)

    def test_empty_complaints_flagged(self) -> None:
        response = self._render(CitizenTab.COMPLAINTS)
        self.assertEqual(response.complaints, [])
        self.assertTrue(response.empty)
        self.assertEqual(response.full_name, "Frank Q")

    def test_complaints_tab_shows_only_own_rows(self) -> None:
        own = add_complaint(self.session, self.citizen)
        add_complaint(self.session, self.other)
        response = self._render(CitizenTab.COMPLAINTS)
        self.assertEqual([c.id for c in response.complaints], [own.id])
        self.assertFalse(response.empty)

    def test_submit_tab_describes_form(self) -> None:
        response = self._render(CitizenTab.SUBMIT)
        self.assertIn("description", response.form.required)
        self.assertIn("location", response.form.required)
        self.assertNotIn("photo", response.form.required)
        self.assertIsNone(response.complaints)

    def test_revisiting_a_tab_refetches(self) -> None:
        amenity = create_amenity(
            self.session,
            AmenityCreate(name="Pool", type=AmenityType.OTHER, location="East"),
        )
        first = self._render(CitizenTab.AMENITIES)
        self.assertEqual([a.id for a in first.amenities], [amenity.id])
        self.assertEqual(first.amenities[0].icon, "📍")
        delete_amenity(self.session, amenity.id)
        second = self._render(CitizenTab.AMENITIES)
        self.assertEqual(second.amenities, [])
        self.assertTrue(second.empty)

    def test_announcements_tab(self) -> None:
        create_announcement(self.session, AnnouncementCreate(title="T", content="C"), self.admin.id)
        response = self._render(CitizenTab.ANNOUNCEMENTS)
        self.assertEqual(len(response.announcements), 1)
        self.assertEqual(response.announcements[0].title, "T")

    def test_request_id_is_echoed(self) -> None:
        response = self._render(CitizenTab.ANNOUNCEMENTS, request_id="gen-3")
        self.assertEqual(response.request_id, "gen-3")
        self.assertEqual(response.tab, "announcements")


class TestAdminTabs(unittest.TestCase):
    def setUp(self) -> None:
        self.session = make_session_factory()()
        self.admin = add_user(self.session, "root", role="admin")
        self.citizen = add_user(self.session, "hank")

    def tearDown(self) -> None:
        self.session.close()

    def _render(self, tab: AdminTab, limit: int = 5):
        return render_tab(ADMIN_VIEWS, tab, self.session, as_current(self.admin), _settings(limit))

    def test_dashboard_tab_stats(self) -> None:
        for minutes in range(3):
            add_complaint(self.session, self.citizen, age_minutes=minutes)
        add_complaint(self.session, self.citizen, status="Resolved", age_minutes=10)
        response = self._render(AdminTab.DASHBOARD, limit=2)
        self.assertEqual(response.stats.total, 4)
        self.assertEqual(response.stats.pending, 3)
        self.assertEqual(response.stats.resolved, 1)
        self.assertEqual(len(response.stats.recent), 2)

    def test_complaints_tab_lists_everyone(self) -> None:
        add_complaint(self.session, self.citizen)
        add_complaint(self.session, self.admin)
        response = self._render(AdminTab.COMPLAINTS)
        self.assertEqual(len(response.complaints), 2)


if __name__ == "__main__":
    unittest.main()
