"""Amenity listing (all roles) and admin create/delete."""

from sqlalchemy.orm import Session

from app.models import Amenity
from app.schemas.amenities import AmenityCreate
from app.services.store import delete_row, insert_row, select_rows


def list_amenities(session: Session) -> list[Amenity]:
    return select_rows(session, Amenity)


def create_amenity(session: Session, body: AmenityCreate) -> Amenity:
    return insert_row(
        session,
        Amenity,
        {
            "name": body.name,
            "type": body.type.value,
            "location": body.location,
            "description": body.description,
        },
    )


def delete_amenity(session: Session, amenity_id: int) -> None:
    delete_row(session, Amenity, amenity_id)
