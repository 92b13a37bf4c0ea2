"""Pydantic request/response schemas."""

from app.schemas.amenities import AmenityCreate, AmenityRead
from app.schemas.announcements import AnnouncementCreate, AnnouncementRead
from app.schemas.auth import CurrentUser, LoginRequest, RegisterRequest, TokenResponse
from app.schemas.complaints import (
    ComplaintListResponse,
    ComplaintRead,
    ComplaintStats,
    ComplaintStatusUpdate,
    ComplaintSubmitRequest,
)
from app.schemas.dashboard import SubmitFormInfo, TabResponse
from app.schemas.health import HealthResponse
from app.schemas.session import RouteDecision, SessionState

__all__ = [
    "AmenityCreate",
    "AmenityRead",
    "AnnouncementCreate",
    "AnnouncementRead",
    "ComplaintListResponse",
    "ComplaintRead",
    "ComplaintStats",
    "ComplaintStatusUpdate",
    "ComplaintSubmitRequest",
    "CurrentUser",
    "HealthResponse",
    "LoginRequest",
    "RegisterRequest",
    "RouteDecision",
    "SessionState",
    "SubmitFormInfo",
    "TabResponse",
    "TokenResponse",
]
