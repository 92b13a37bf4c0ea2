"""SQLAlchemy ORM models."""

from app.models.amenity import Amenity, AmenityType
from app.models.announcement import Announcement
from app.models.base import Base
from app.models.complaint import Complaint, ComplaintStatus
from app.models.user import User

__all__ = [
    "Amenity",
    "AmenityType",
    "Announcement",
    "Base",
    "Complaint",
    "ComplaintStatus",
    "User",
]
