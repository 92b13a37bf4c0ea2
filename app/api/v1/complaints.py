"""Complaint endpoints: citizen submission and listing, admin listing and status changes."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.api.v1.auth import get_current_user, require_admin, require_citizen
from app.core.database import get_db
from app.schemas.auth import CurrentUser
from app.schemas.complaints import (
    ComplaintListResponse,
    ComplaintRead,
    ComplaintStatusUpdate,
    ComplaintSubmitRequest,
)
from app.services.complaints import (
    ComplaintValidationError,
    PhotoConfirmationRequired,
    list_all_complaints,
    list_user_complaints,
    submit_complaint,
    update_complaint_status,
)
from app.services.store import NotFoundError, StoreError

router = APIRouter()


def _list_response(rows: list) -> ComplaintListResponse:
    return ComplaintListResponse(
        complaints=[ComplaintRead.model_validate(r) for r in rows],
        empty=not rows,
    )


@router.post("", response_model=ComplaintRead, status_code=201)
def post_complaint(
    body: ComplaintSubmitRequest,
    db: Annotated[Session, Depends(get_db)],
    user: Annotated[CurrentUser, Depends(get_current_user)],
) -> ComplaintRead:
    """
    Submit a complaint with a description and location.

    Without a photo, set confirm_without_photo=true; otherwise the call returns
    428 with the confirmation prompt and nothing is stored.
    """
    try:
        row = submit_complaint(db, user, body)
    except ComplaintValidationError as e:
        raise HTTPException(status_code=422, detail=e.message) from e
    except PhotoConfirmationRequired as e:
        raise HTTPException(status_code=status.HTTP_428_PRECONDITION_REQUIRED, detail=e.message) from e
    except StoreError as e:
        raise HTTPException(status_code=500, detail="Error submitting complaint") from e
    return ComplaintRead.model_validate(row)


@router.get("/mine", response_model=ComplaintListResponse)
def get_my_complaints(
    db: Annotated[Session, Depends(get_db)],
    user: Annotated[CurrentUser, Depends(require_citizen)],
) -> ComplaintListResponse:
    """The caller's own complaints, newest first."""
    try:
        rows = list_user_complaints(db, user.id)
    except StoreError as e:
        raise HTTPException(status_code=500, detail="Error loading complaints") from e
    return _list_response(rows)


@router.get("", response_model=ComplaintListResponse)
def get_all_complaints(
    db: Annotated[Session, Depends(get_db)],
    _admin: Annotated[CurrentUser, Depends(require_admin)],
) -> ComplaintListResponse:
    """All complaints, newest first (admin only)."""
    try:
        rows = list_all_complaints(db)
    except StoreError as e:
        raise HTTPException(status_code=500, detail="Error loading complaints") from e
    return _list_response(rows)


@router.patch("/{complaint_id}/status", response_model=ComplaintRead)
def patch_complaint_status(
    complaint_id: int,
    body: ComplaintStatusUpdate,
    db: Annotated[Session, Depends(get_db)],
    _admin: Annotated[CurrentUser, Depends(require_admin)],
) -> ComplaintRead:
    """Set a complaint's status and refresh updated_at (admin only)."""
    try:
        row = update_complaint_status(db, complaint_id, body.status)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail="Complaint not found") from e
    except StoreError as e:
        raise HTTPException(status_code=500, detail="Error updating complaint") from e
    return ComplaintRead.model_validate(row)
