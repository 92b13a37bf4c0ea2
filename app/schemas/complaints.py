"""Pydantic schemas for complaint submission, listing, status updates and stats."""

from datetime import datetime

from pydantic import BaseModel, Field, computed_field

from app.models.complaint import ComplaintStatus

ISSUE_MAX_LENGTH = 5_000
LOCATION_MAX_LENGTH = 1_000

# Display badge per status; anything unrecognized falls back to "warning".
STATUS_BADGES: dict[str, str] = {
    ComplaintStatus.RESOLVED.value: "success",
    ComplaintStatus.IN_PROGRESS.value: "info",
}
DEFAULT_STATUS_BADGE = "warning"

NO_PHOTO_PROMPT = "You did not select a photo. Submit complaint without image?"


def status_badge(status: str) -> str:
    """Map a complaint status to its display badge."""
    return STATUS_BADGES.get(status, DEFAULT_STATUS_BADGE)


class ComplaintSubmitRequest(BaseModel):
    """
    Complaint form payload.

    Emptiness is checked by the submission service, not here, so that a blank
    form is reported as a validation error before any store call.
    has_photo is UI-only: it is never persisted and only decides whether
    confirm_without_photo is required.
    """

    description: str = Field(default="", max_length=ISSUE_MAX_LENGTH)
    location: str = Field(default="", max_length=LOCATION_MAX_LENGTH)
    has_photo: bool = Field(default=False, description="Whether a photo was selected (not uploaded).")
    confirm_without_photo: bool = Field(
        default=False,
        description="Caller confirmed submitting without a photo.",
    )


class ComplaintRead(BaseModel):
    """One complaint row as returned to clients."""

    model_config = {"from_attributes": True}

    id: int
    user_id: int
    name: str
    issue: str
    location: str
    status: ComplaintStatus
    created_at: datetime
    updated_at: datetime

    @computed_field  # type: ignore[prop-decorator]
    @property
    def status_badge(self) -> str:
        return status_badge(self.status.value)


class ComplaintStatusUpdate(BaseModel):
    """Admin status change; any status may follow any other."""

    status: ComplaintStatus


class ComplaintListResponse(BaseModel):
    complaints: list[ComplaintRead]
    empty: bool = Field(description="True when the list has no rows (distinct from loading).")


class ComplaintStats(BaseModel):
    """Aggregate complaint counts for the admin overview."""

    total: int = Field(ge=0)
    pending: int = Field(ge=0)
    in_progress: int = Field(ge=0)
    resolved: int = Field(ge=0)
    recent: list[ComplaintRead] = Field(
        default_factory=list,
        description="Most recently created complaints, newest first.",
    )
