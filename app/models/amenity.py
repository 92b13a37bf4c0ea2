"""ORM model for admin-curated city amenities."""

import enum

from sqlalchemy import Column, DateTime, Integer, String, Text, func

from app.models.base import Base, utcnow


class AmenityType(str, enum.Enum):
    PARK = "park"
    SCHOOL = "school"
    HOSPITAL = "hospital"
    LIBRARY = "library"
    OTHER = "other"


class Amenity(Base):
    """City facility listing (park, school, hospital, library, other)."""

    __tablename__ = "amenities"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    type = Column(String(32), nullable=False, default=AmenityType.PARK.value)
    location = Column(Text, nullable=False, default="")
    description = Column(Text, nullable=False, default="")
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        server_default=func.now(),
    )
