"""Complaint submission, listing, admin status updates and overview stats."""

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

from sqlalchemy.orm import Session

from app.models import Complaint, ComplaintStatus
from app.models.base import utcnow
from app.schemas.complaints import (
    NO_PHOTO_PROMPT,
    ComplaintRead,
    ComplaintStats,
    ComplaintSubmitRequest,
)
from app.services.store import insert_row, select_rows, update_row

if TYPE_CHECKING:
    from app.schemas.auth import CurrentUser

logger = logging.getLogger(__name__)


class ComplaintValidationError(Exception):
    """Raised before any store call when a required form field is empty."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class PhotoConfirmationRequired(Exception):
    """
    Raised when no photo is attached and the caller has not confirmed.

    Not an error: the submission is simply not sent.
    """

    def __init__(self, message: str = NO_PHOTO_PROMPT) -> None:
        self.message = message
        super().__init__(message)


def validate_submission(description: str, location: str) -> tuple[str, str]:
    """Return stripped (description, location); raise if either is blank."""
    description = (description or "").strip()
    location = (location or "").strip()
    if not description or not location:
        raise ComplaintValidationError("Please fill problem description and location.")
    return description, location


def submit_complaint(
    session: Session,
    user: "CurrentUser",
    request: ComplaintSubmitRequest,
) -> Complaint:
    """
    Insert one complaint owned by `user`.

    Status is left to the column default. The photo flag only gates the
    confirmation step and is never stored.
    """
    description, location = validate_submission(request.description, request.location)
    if not request.has_photo and not request.confirm_without_photo:
        logger.info("Complaint submission awaiting photo confirmation", extra={"user_id": user.id})
        raise PhotoConfirmationRequired()
    return insert_row(
        session,
        Complaint,
        {
            "user_id": user.id,
            "name": user.full_name,
            "issue": description,
            "location": location,
        },
    )


def list_user_complaints(session: Session, user_id: int) -> list[Complaint]:
    """Complaints owned by user_id, newest first."""
    return select_rows(session, Complaint, user_id=user_id)


def list_all_complaints(session: Session) -> list[Complaint]:
    return select_rows(session, Complaint)


def update_complaint_status(
    session: Session,
    complaint_id: int,
    status: ComplaintStatus,
) -> Complaint:
    """Set status and refresh updated_at. Same-status updates still bump updated_at."""
    return update_row(
        session,
        Complaint,
        complaint_id,
        {"status": ComplaintStatus(status).value, "updated_at": utcnow()},
    )


def compute_stats(complaints: Iterable[Complaint], recent_limit: int = 5) -> ComplaintStats:
    """
    Count complaints per status from an already-fetched list.

    recent holds the `recent_limit` newest rows by created_at (id breaks ties).
    """
    rows = list(complaints)
    counts = {status.value: 0 for status in ComplaintStatus}
    for row in rows:
        if row.status in counts:
            counts[row.status] += 1
    newest = sorted(rows, key=lambda c: (c.created_at, c.id), reverse=True)[:recent_limit]
    return ComplaintStats(
        total=len(rows),
        pending=counts[ComplaintStatus.PENDING.value],
        in_progress=counts[ComplaintStatus.IN_PROGRESS.value],
        resolved=counts[ComplaintStatus.RESOLVED.value],
        recent=[ComplaintRead.model_validate(c) for c in newest],
    )
