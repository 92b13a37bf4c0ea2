"""Announcement endpoints: list for any signed-in user, create/delete for admins."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy.orm import Session

from app.api.v1.auth import get_current_user, require_admin
from app.core.database import get_db
from app.schemas.announcements import AnnouncementCreate, AnnouncementRead
from app.schemas.auth import CurrentUser
from app.services.announcements import (
    create_announcement,
    delete_announcement,
    list_announcements,
)
from app.services.store import NotFoundError, StoreError

router = APIRouter()


@router.get("", response_model=list[AnnouncementRead])
def get_announcements(
    db: Annotated[Session, Depends(get_db)],
    _user: Annotated[CurrentUser, Depends(get_current_user)],
) -> list[AnnouncementRead]:
    try:
        rows = list_announcements(db)
    except StoreError as e:
        raise HTTPException(status_code=500, detail="Error loading announcements") from e
    return [AnnouncementRead.model_validate(r) for r in rows]


@router.post("", response_model=AnnouncementRead, status_code=201)
def post_announcement(
    body: AnnouncementCreate,
    db: Annotated[Session, Depends(get_db)],
    admin: Annotated[CurrentUser, Depends(require_admin)],
) -> AnnouncementRead:
    """Publish an announcement; created_by is the calling admin."""
    try:
        row = create_announcement(db, body, created_by=admin.id)
    except StoreError as e:
        raise HTTPException(status_code=500, detail="Error adding announcement") from e
    return AnnouncementRead.model_validate(row)


@router.delete("/{announcement_id}", status_code=204)
def remove_announcement(
    announcement_id: int,
    db: Annotated[Session, Depends(get_db)],
    _admin: Annotated[CurrentUser, Depends(require_admin)],
) -> Response:
    try:
        delete_announcement(db, announcement_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail="Announcement not found") from e
    except StoreError as e:
        raise HTTPException(status_code=500, detail="Error deleting announcement") from e
    return Response(status_code=204)
