"""Thin data-store collaborator over a SQLAlchemy session.

Every write commits on its own; callers that issue several writes get no
transaction spanning them.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any, TypeVar

from sqlalchemy import select as sa_select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from backoffice.db.base import Base

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


class StoreWriteError(Exception):
    """Raised when an insert, update or delete could not be persisted."""


class RecordNotFoundError(Exception):
    """Raised by services when the addressed row does not exist."""


class DataStore:
    """select/update/insert/delete over ORM models, one commit per write."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def select(self, model: type[ModelT], *criteria: Any, order_by: Iterable[Any] = ()) -> list[ModelT]:
        stmt = sa_select(model)
        if criteria:
            stmt = stmt.where(*criteria)
        order_clauses = list(order_by)
        if order_clauses:
            stmt = stmt.order_by(*order_clauses)
        return list(self.db.scalars(stmt).all())

    def get(self, model: type[ModelT], record_id: Any) -> ModelT | None:
        return self.db.get(model, record_id)

    def update(self, model: type[ModelT], record_id: Any, fields: Mapping[str, Any]) -> ModelT | None:
        """Apply fields to one row; returns None when the row does not exist."""
        try:
            row = self.db.get(model, record_id)
            if row is None:
                return None
            for key, value in fields.items():
                setattr(row, key, value)
            self.db.commit()
        except SQLAlchemyError as exc:
            self.db.rollback()
            raise StoreWriteError(f"update {model.__tablename__}#{record_id} failed") from exc
        self.db.refresh(row)
        return row

    def insert(self, model: type[ModelT], fields: Mapping[str, Any]) -> ModelT:
        row = model(**fields)
        try:
            self.db.add(row)
            self.db.commit()
        except SQLAlchemyError as exc:
            self.db.rollback()
            raise StoreWriteError(f"insert into {model.__tablename__} failed") from exc
        self.db.refresh(row)
        return row

    def delete(self, model: type[ModelT], record_id: Any) -> bool:
        try:
            row = self.db.get(model, record_id)
            if row is None:
                return False
            self.db.delete(row)
            self.db.commit()
        except SQLAlchemyError as exc:
            self.db.rollback()
            raise StoreWriteError(f"delete {model.__tablename__}#{record_id} failed") from exc
        return True

    def next_display_order(self, model: type[ModelT], *criteria: Any) -> int:
        """Return max(display_order) + 1 within the scope, or 0 for an empty scope."""
        rows = self.select(model, *criteria)
        orders = [row.display_order or 0 for row in rows]
        return max(orders) + 1 if orders else 0
