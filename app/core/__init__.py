"""Core app configuration, database session and security helpers."""

from app.core.config import Settings, get_settings, settings
from app.core.database import SessionLocal, check_db_connected, get_db

__all__ = ["SessionLocal", "Settings", "check_db_connected", "get_db", "get_settings", "settings"]
