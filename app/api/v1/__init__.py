"""API v1 routes."""

from fastapi import APIRouter

from app.api.v1 import amenities, announcements, auth, complaints, dashboard, health, session

router = APIRouter()
router.include_router(health.router, prefix="/health", tags=["health"])
router.include_router(auth.router, prefix="/auth", tags=["auth"])
router.include_router(session.router, prefix="/session", tags=["session"])
router.include_router(complaints.router, prefix="/complaints", tags=["complaints"])
router.include_router(amenities.router, prefix="/amenities", tags=["amenities"])
router.include_router(announcements.router, prefix="/announcements", tags=["announcements"])
router.include_router(dashboard.router, prefix="/dashboard", tags=["dashboard"])
