"""
Generic table operations over the ORM: select, insert, update by id, delete by id.

Every list is newest first (created_at desc, id desc as tie-break). Store
failures roll back the session and raise StoreError; nothing is partially
applied. Missing rows on update/delete raise NotFoundError.
"""

import logging
from typing import Any, TypeVar

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.models import Base

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


class StoreError(Exception):
    """Raised when the database rejects or fails a call."""

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        self.message = message
        self.cause = cause
        super().__init__(message)


class NotFoundError(Exception):
    """Raised when an update or delete targets an id that does not exist."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


def _fail(session: Session, table: str, operation: str, error: SQLAlchemyError) -> StoreError:
    session.rollback()
    logger.error(
        "Store call failed",
        extra={"table": table, "operation": operation, "reason": str(error)[:500]},
    )
    return StoreError(f"{operation} on {table} failed", cause=error)


def select_rows(
    session: Session,
    model: type[ModelT],
    **filters: Any,
) -> list[ModelT]:
    """Return rows matching equality filters, newest first."""
    table = model.__tablename__
    try:
        query = session.query(model)
        if filters:
            query = query.filter_by(**filters)
        query = query.order_by(model.created_at.desc(), model.id.desc())
        return query.all()
    except SQLAlchemyError as e:
        raise _fail(session, table, "select", e) from e


def insert_row(session: Session, model: type[ModelT], values: dict[str, Any]) -> ModelT:
    """Insert one row and return it with server defaults loaded."""
    table = model.__tablename__
    row = model(**values)
    try:
        session.add(row)
        session.commit()
        session.refresh(row)
    except SQLAlchemyError as e:
        raise _fail(session, table, "insert", e) from e
    logger.info("Row inserted", extra={"table": table, "row_id": row.id})
    return row


def update_row(
    session: Session,
    model: type[ModelT],
    row_id: int,
    values: dict[str, Any],
) -> ModelT:
    """Apply a partial field set to the row with this id."""
    table = model.__tablename__
    try:
        row = session.get(model, row_id)
        if row is None:
            raise NotFoundError(f"{table} row {row_id} not found")
        for field, value in values.items():
            setattr(row, field, value)
        session.commit()
        session.refresh(row)
    except SQLAlchemyError as e:
        raise _fail(session, table, "update", e) from e
    logger.info(
        "Row updated",
        extra={"table": table, "row_id": row_id, "fields": ",".join(sorted(values))},
    )
    return row


def delete_row(session: Session, model: type[ModelT], row_id: int) -> None:
    """Delete the row with this id. Raises NotFoundError if nothing matched."""
    table = model.__tablename__
    try:
        deleted = (
            session.query(model)
            .filter(model.id == row_id)
            .delete(synchronize_session=False)
        )
        if deleted == 0:
            session.rollback()
            raise NotFoundError(f"{table} row {row_id} not found")
        session.commit()
    except SQLAlchemyError as e:
        raise _fail(session, table, "delete", e) from e
    logger.info("Row deleted", extra={"table": table, "row_id": row_id})
