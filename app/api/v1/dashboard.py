"""Dashboard endpoints: admin overview stats and per-tab fetches for both roles."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from app.api.v1.auth import require_admin, require_citizen
from app.core.config import Settings, get_settings
from app.core.database import get_db
from app.schemas.auth import CurrentUser
from app.schemas.complaints import ComplaintStats
from app.schemas.dashboard import TabResponse
from app.services.complaints import compute_stats, list_all_complaints
from app.services.dashboards import (
    ADMIN_VIEWS,
    CITIZEN_VIEWS,
    AdminTab,
    CitizenTab,
    render_tab,
)
from app.services.store import StoreError

router = APIRouter()

RequestId = Annotated[
    str | None,
    Query(max_length=64, description="Opaque client token echoed back to discard stale responses."),
]


@router.get("/stats", response_model=ComplaintStats)
def get_stats(
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_settings)],
    _admin: Annotated[CurrentUser, Depends(require_admin)],
) -> ComplaintStats:
    """Total and per-status complaint counts plus the newest complaints (admin only)."""
    try:
        rows = list_all_complaints(db)
    except StoreError as e:
        raise HTTPException(status_code=500, detail="Error loading complaints") from e
    return compute_stats(rows, recent_limit=settings.RECENT_COMPLAINTS_LIMIT)


@router.get("/citizen/{tab}", response_model=TabResponse)
def get_citizen_tab(
    tab: CitizenTab,
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_settings)],
    user: Annotated[CurrentUser, Depends(require_citizen)],
    request_id: RequestId = None,
) -> TabResponse:
    """Fetch one citizen tab: complaints (own), submit, amenities, announcements."""
    try:
        return render_tab(CITIZEN_VIEWS, tab, db, user, settings, request_id=request_id)
    except StoreError as e:
        raise HTTPException(status_code=500, detail=f"Error loading {tab.value}") from e


@router.get("/admin/{tab}", response_model=TabResponse)
def get_admin_tab(
    tab: AdminTab,
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_settings)],
    admin: Annotated[CurrentUser, Depends(require_admin)],
    request_id: RequestId = None,
) -> TabResponse:
    """Fetch one admin tab: dashboard, complaints, amenities, announcements."""
    try:
        return render_tab(ADMIN_VIEWS, tab, db, admin, settings, request_id=request_id)
    except StoreError as e:
        raise HTTPException(status_code=500, detail=f"Error loading {tab.value}") from e
