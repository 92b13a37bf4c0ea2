"""Shared fixtures for tests: in-memory SQLite sessions and user rows."""

from datetime import datetime, timedelta, timezone

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.models import Base, Complaint, User
from app.schemas.auth import CurrentUser


def make_session_factory() -> sessionmaker:
    """Fresh in-memory database with all tables; one connection shared across threads."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine, autocommit=False, autoflush=False)


def add_user(
    session: Session,
    username: str,
    role: str = "citizen",
    full_name: str | None = None,
    password_hash: str = "not-a-real-hash",
) -> User:
    user = User(
        username=username,
        full_name=full_name or username.title(),
        password_hash=password_hash,
        role=role,
    )
    session.add(user)
    session.commit()
    session.refresh(user)
    return user


def as_current(user: User) -> CurrentUser:
    return CurrentUser.model_validate(user)


def add_complaint(
    session: Session,
    user: User,
    issue: str = "Streetlight out",
    location: str = "Oak Ave",
    status: str | None = None,
    age_minutes: int = 0,
) -> Complaint:
    """Insert a complaint directly, optionally backdated by age_minutes."""
    stamp = datetime.now(timezone.utc) - timedelta(minutes=age_minutes)
    row = Complaint(
        user_id=user.id,
        name=user.full_name,
        issue=issue,
        location=location,
        created_at=stamp,
        updated_at=stamp,
    )
    if status is not None:
        row.status = status
    session.add(row)
    session.commit()
    session.refresh(row)
    return row
