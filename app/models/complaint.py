"""ORM model for citizen complaints."""

import enum

from sqlalchemy import CheckConstraint, Column, DateTime, ForeignKey, Integer, String, Text, func

from app.models.base import Base, utcnow


class ComplaintStatus(str, enum.Enum):
    """Triage status. Any status may be set from any other."""

    PENDING = "Pending"
    IN_PROGRESS = "In-Progress"
    RESOLVED = "Resolved"


STATUS_CHECK_SQL = "status IN ('Pending', 'In-Progress', 'Resolved')"


class Complaint(Base):
    """
    One citizen-submitted issue report.

    The insert path never sets status; the column's server default supplies
    "Pending". user_id is fixed at creation.
    """

    __tablename__ = "complaints"
    __table_args__ = (CheckConstraint(STATUS_CHECK_SQL, name="ck_complaints_status"),)

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    name = Column(String(255), nullable=False, default="")
    issue = Column(Text, nullable=False)
    location = Column(Text, nullable=False)
    status = Column(
        String(32),
        nullable=False,
        server_default=ComplaintStatus.PENDING.value,
        index=True,
    )
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        server_default=func.now(),
    )
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        server_default=func.now(),
    )
