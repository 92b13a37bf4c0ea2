"""Amenity endpoints: list for any signed-in user, create/delete for admins."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy.orm import Session

from app.api.v1.auth import get_current_user, require_admin
from app.core.database import get_db
from app.schemas.amenities import AmenityCreate, AmenityRead
from app.schemas.auth import CurrentUser
from app.services.amenities import create_amenity, delete_amenity, list_amenities
from app.services.store import NotFoundError, StoreError

router = APIRouter()


@router.get("", response_model=list[AmenityRead])
def get_amenities(
    db: Annotated[Session, Depends(get_db)],
    _user: Annotated[CurrentUser, Depends(get_current_user)],
) -> list[AmenityRead]:
    try:
        rows = list_amenities(db)
    except StoreError as e:
        raise HTTPException(status_code=500, detail="Error loading amenities") from e
    return [AmenityRead.model_validate(r) for r in rows]


@router.post("", response_model=AmenityRead, status_code=201)
def post_amenity(
    body: AmenityCreate,
    db: Annotated[Session, Depends(get_db)],
    _admin: Annotated[CurrentUser, Depends(require_admin)],
) -> AmenityRead:
    try:
        row = create_amenity(db, body)
    except StoreError as e:
        raise HTTPException(status_code=500, detail="Error adding amenity") from e
    return AmenityRead.model_validate(row)


@router.delete("/{amenity_id}", status_code=204)
def remove_amenity(
    amenity_id: int,
    db: Annotated[Session, Depends(get_db)],
    _admin: Annotated[CurrentUser, Depends(require_admin)],
) -> Response:
    try:
        delete_amenity(db, amenity_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail="Amenity not found") from e
    except StoreError as e:
        raise HTTPException(status_code=500, detail="Error deleting amenity") from e
    return Response(status_code=204)
