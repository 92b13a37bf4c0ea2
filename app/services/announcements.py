"""Announcement listing (all roles) and admin create/delete."""

from sqlalchemy.orm import Session

from app.models import Announcement
from app.schemas.announcements import AnnouncementCreate
from app.services.store import delete_row, insert_row, select_rows


def list_announcements(session: Session) -> list[Announcement]:
    return select_rows(session, Announcement)


def create_announcement(session: Session, body: AnnouncementCreate, created_by: int) -> Announcement:
    """Insert an announcement stamped with the authoring admin's id."""
    return insert_row(
        session,
        Announcement,
        {"title": body.title, "content": body.content, "created_by": created_by},
    )


def delete_announcement(session: Session, announcement_id: int) -> None:
    delete_row(session, Announcement, announcement_id)
