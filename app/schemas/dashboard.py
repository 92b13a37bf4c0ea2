"""Schemas for per-tab dashboard responses."""

from typing import Any

from pydantic import BaseModel, Field, model_serializer

from app.schemas.amenities import AmenityRead
from app.schemas.announcements import AnnouncementRead
from app.schemas.complaints import ComplaintRead, ComplaintStats


class SubmitFormInfo(BaseModel):
    """Static description of the complaint form for the citizen 'submit' tab."""

    fields: list[str] = Field(default_factory=lambda: ["description", "location", "photo"])
    required: list[str] = Field(default_factory=lambda: ["description", "location"])
    no_photo_prompt: str


# Per-tab payload fields; only the one belonging to the requested tab is sent.
TAB_SLICES = ("complaints", "amenities", "announcements", "stats", "form")


class TabResponse(BaseModel):
    """
    One dashboard tab's data. Only the field for `tab` is populated.

    request_id is echoed from the query string so a client can drop a
    response that arrives after it switched to another tab.
    """

    tab: str
    request_id: str | None = None
    full_name: str
    empty: bool = False
    complaints: list[ComplaintRead] | None = None
    amenities: list[AmenityRead] | None = None
    announcements: list[AnnouncementRead] | None = None
    stats: ComplaintStats | None = None
    form: SubmitFormInfo | None = None

    @model_serializer(mode="wrap")
    def _drop_unpopulated_slices(self, handler: Any) -> dict[str, Any]:
        # Only top-level slices are dropped; nested nulls (e.g. created_by) stay.
        data = handler(self)
        for key in TAB_SLICES:
            if data.get(key) is None:
                data.pop(key, None)
        return data
