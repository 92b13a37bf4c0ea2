"""
Per-tab dashboard views for citizens and admins.

Each tab is an enumerated identifier mapped to a view object that owns its own
fetch. Nothing is cached between calls: fetching a tab again re-reads the store.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import TYPE_CHECKING

from sqlalchemy.orm import Session

from app.schemas.amenities import AmenityRead
from app.schemas.announcements import AnnouncementRead
from app.schemas.complaints import NO_PHOTO_PROMPT, ComplaintRead
from app.schemas.dashboard import SubmitFormInfo, TabResponse
from app.services.amenities import list_amenities
from app.services.announcements import list_announcements
from app.services.complaints import compute_stats, list_all_complaints, list_user_complaints

if TYPE_CHECKING:
    from app.core.config import Settings
    from app.schemas.auth import CurrentUser


class CitizenTab(str, Enum):
    COMPLAINTS = "complaints"
    SUBMIT = "submit"
    AMENITIES = "amenities"
    ANNOUNCEMENTS = "announcements"


class AdminTab(str, Enum):
    DASHBOARD = "dashboard"
    COMPLAINTS = "complaints"
    AMENITIES = "amenities"
    ANNOUNCEMENTS = "announcements"


class TabView(ABC):
    """A dashboard tab: fills its slice of a TabResponse from the store."""

    @abstractmethod
    def populate(
        self,
        response: TabResponse,
        session: Session,
        user: "CurrentUser",
        settings: "Settings",
    ) -> None:
        """Fetch this tab's data into `response`."""


class OwnComplaintsView(TabView):
    def populate(self, response, session, user, settings):
        rows = list_user_complaints(session, user.id)
        response.complaints = [ComplaintRead.model_validate(r) for r in rows]
        response.empty = not rows


class AllComplaintsView(TabView):
    def populate(self, response, session, user, settings):
        rows = list_all_complaints(session)
        response.complaints = [ComplaintRead.model_validate(r) for r in rows]
        response.empty = not rows


class SubmitFormView(TabView):
    def populate(self, response, session, user, settings):
        response.form = SubmitFormInfo(no_photo_prompt=NO_PHOTO_PROMPT)


class AmenitiesView(TabView):
    def populate(self, response, session, user, settings):
        rows = list_amenities(session)
        response.amenities = [AmenityRead.model_validate(r) for r in rows]
        response.empty = not rows


class AnnouncementsView(TabView):
    def populate(self, response, session, user, settings):
        rows = list_announcements(session)
        response.announcements = [AnnouncementRead.model_validate(r) for r in rows]
        response.empty = not rows


class OverviewView(TabView):
    """Admin overview: per-status counts scanned from the full list, plus the newest rows."""

    def populate(self, response, session, user, settings):
        rows = list_all_complaints(session)
        response.stats = compute_stats(rows, recent_limit=settings.RECENT_COMPLAINTS_LIMIT)
        response.empty = not rows


CITIZEN_VIEWS: dict[CitizenTab, TabView] = {
    CitizenTab.COMPLAINTS: OwnComplaintsView(),
    CitizenTab.SUBMIT: SubmitFormView(),
    CitizenTab.AMENITIES: AmenitiesView(),
    CitizenTab.ANNOUNCEMENTS: AnnouncementsView(),
}

ADMIN_VIEWS: dict[AdminTab, TabView] = {
    AdminTab.DASHBOARD: OverviewView(),
    AdminTab.COMPLAINTS: AllComplaintsView(),
    AdminTab.AMENITIES: AmenitiesView(),
    AdminTab.ANNOUNCEMENTS: AnnouncementsView(),
}


def render_tab(
    views: dict,
    tab: CitizenTab | AdminTab,
    session: Session,
    user: "CurrentUser",
    settings: "Settings",
    request_id: str | None = None,
) -> TabResponse:
    """Fetch one tab. Raises KeyError for a tab not in `views`."""
    view = views[tab]
    response = TabResponse(tab=tab.value, request_id=request_id, full_name=user.full_name)
    view.populate(response, session, user, settings)
    return response
