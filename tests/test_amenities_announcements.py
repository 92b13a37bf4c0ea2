"""Unit tests for amenity and announcement services: CRUD, ordering, icons, created_by stamping."""

import unittest

from pydantic import ValidationError

from app.models import Amenity, AmenityType, Announcement
from app.schemas.amenities import (
    DEFAULT_AMENITY_ICON,
    AmenityCreate,
    AmenityRead,
    amenity_icon,
)
from app.schemas.announcements import AnnouncementCreate
from app.services.amenities import create_amenity, delete_amenity, list_amenities
from app.services.announcements import (
    create_announcement,
    delete_announcement,
    list_announcements,
)
from app.services.store import NotFoundError
from helpers import add_user, make_session_factory


class TestAmenityIcon(unittest.TestCase):
    def test_known_types(self) -> None:
        self.assertEqual(amenity_icon("park"), "🌳")
        self.assertEqual(amenity_icon("school"), "🏫")
        self.assertEqual(amenity_icon("hospital"), "🏥")
        self.assertEqual(amenity_icon("library"), "📚")

    def test_other_and_unknown_fall_back(self) -> None:
        self.assertEqual(amenity_icon("other"), DEFAULT_AMENITY_ICON)
        self.assertEqual(amenity_icon("stadium"), DEFAULT_AMENITY_ICON)
        self.assertEqual(amenity_icon(None), DEFAULT_AMENITY_ICON)


class TestAmenityCreateSchema(unittest.TestCase):
    def test_type_defaults_to_park(self) -> None:
        body = AmenityCreate(name="Central", location="Downtown")
        self.assertEqual(body.type, AmenityType.PARK)

    def test_unknown_type_rejected(self) -> None:
        with self.assertRaises(ValidationError):
            AmenityCreate(name="X", location="Y", type="zoo")

    def test_blank_name_rejected(self) -> None:
        with self.assertRaises(ValidationError):
            AmenityCreate(name="  ", location="Y")


class TestAmenities(unittest.TestCase):
    def setUp(self) -> None:
        self.session = make_session_factory()()

    def tearDown(self) -> None:
        self.session.close()

    def _create(self, name: str, amenity_type: AmenityType = AmenityType.PARK) -> Amenity:
        return create_amenity(
            self.session,
            AmenityCreate(name=name, type=amenity_type, location="Somewhere", description="d"),
        )

    def test_create_and_list_newest_first(self) -> None:
        first = self._create("Riverside Park")
        second = self._create("City Library", AmenityType.LIBRARY)
        rows = list_amenities(self.session)
        self.assertEqual([r.id for r in rows], [second.id, first.id])
        self.assertEqual(AmenityRead.model_validate(rows[0]).icon, "📚")

    def test_delete_removes_only_that_amenity(self) -> None:
        keep = self._create("Keep")
        gone = self._create("Gone")
        announcement = create_announcement(
            self.session,
            AnnouncementCreate(title="Notice", content="Body"),
            created_by=add_user(self.session, "admin", role="admin").id,
        )
        delete_amenity(self.session, gone.id)
        self.assertEqual([r.id for r in list_amenities(self.session)], [keep.id])
        self.assertEqual([a.id for a in list_announcements(self.session)], [announcement.id])

    def test_delete_missing_raises_not_found(self) -> None:
        with self.assertRaises(NotFoundError):
            delete_amenity(self.session, 7)


class TestAnnouncements(unittest.TestCase):
    def setUp(self) -> None:
        self.session = make_session_factory()()
        self.admin = add_user(self.session, "admin", role="admin")

    def tearDown(self) -> None:
        self.session.close()

    def test_created_by_is_stamped(self) -> None:
        row = create_announcement(
            self.session,
            AnnouncementCreate(title="Water outage", content="Tuesday 9-12"),
            created_by=self.admin.id,
        )
        self.assertEqual(row.created_by, self.admin.id)
        self.assertIsNotNone(row.created_at)

    def test_delete_then_list(self) -> None:
        a = create_announcement(self.session, AnnouncementCreate(title="A", content="a"), self.admin.id)
        b = create_announcement(self.session, AnnouncementCreate(title="B", content="b"), self.admin.id)
        delete_announcement(self.session, a.id)
        self.assertEqual([r.id for r in list_announcements(self.session)], [b.id])
        self.assertEqual(self.session.query(Announcement).count(), 1)

    def test_delete_missing_raises_not_found(self) -> None:
        with self.assertRaises(NotFoundError):
            delete_announcement(self.session, 123)


if __name__ == "__main__":
    unittest.main()
