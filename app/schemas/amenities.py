"""Pydantic schemas for city amenities."""

from datetime import datetime

from pydantic import BaseModel, Field, computed_field, field_validator

from app.models.amenity import AmenityType

# Icon per amenity type; unrecognized types get DEFAULT_AMENITY_ICON.
AMENITY_ICONS: dict[str, str] = {
    AmenityType.PARK.value: "🌳",
    AmenityType.SCHOOL.value: "🏫",
    AmenityType.HOSPITAL.value: "🏥",
    AmenityType.LIBRARY.value: "📚",
}
DEFAULT_AMENITY_ICON = "📍"


def amenity_icon(amenity_type: str | None) -> str:
    """Return the display symbol for an amenity type."""
    return AMENITY_ICONS.get(amenity_type or "", DEFAULT_AMENITY_ICON)


class AmenityCreate(BaseModel):
    """Admin amenity form. type defaults to 'park' like the empty form."""

    name: str = Field(..., min_length=1, max_length=255)
    type: AmenityType = AmenityType.PARK
    location: str = Field(..., min_length=1, max_length=1_000)
    description: str = Field(default="", max_length=5_000)

    @field_validator("name", "location")
    @classmethod
    def strip_non_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be blank")
        return v.strip()


class AmenityRead(BaseModel):
    model_config = {"from_attributes": True}

    id: int
    name: str
    type: str
    location: str
    description: str
    created_at: datetime

    @computed_field  # type: ignore[prop-decorator]
    @property
    def icon(self) -> str:
        return amenity_icon(self.type)
