"""Business-hours helpers."""

import logging
from typing import Any

from sqlalchemy import update
from sqlalchemy.orm import Session

from backoffice.models.business_hours import BusinessHour
from backoffice.services.notifications import Notifier
from backoffice.services.sequencer import Direction, MoveResult, move_item
from backoffice.services.store import DataStore, RecordNotFoundError

logger = logging.getLogger(__name__)


class DuplicateWeekdayError(Exception):
    """Raised when a second row is created for the same weekday."""


def list_business_hours(db: Session) -> list[BusinessHour]:
    return DataStore(db).select(BusinessHour, order_by=(BusinessHour.display_order.asc(), BusinessHour.id.asc()))


def _ensure_weekday_free(db: Session, weekday: int, exclude_id: int | None = None) -> None:
    criteria: list[Any] = [BusinessHour.weekday == weekday]
    if exclude_id is not None:
        criteria.append(BusinessHour.id != exclude_id)
    if DataStore(db).select(BusinessHour, *criteria):
        raise DuplicateWeekdayError("Já existe um registro para este dia da semana.")


def create_business_hour(
    db: Session,
    *,
    weekday: int,
    open_time: str,
    close_time: str,
    is_open: bool = True,
    display_order: int | None = None,
) -> BusinessHour:
    _ensure_weekday_free(db, weekday)
    store = DataStore(db)
    if display_order is None:
        display_order = store.next_display_order(BusinessHour)
    return store.insert(
        BusinessHour,
        {
            "weekday": weekday,
            "open_time": open_time,
            "close_time": close_time,
            "is_open": is_open,
            "display_order": display_order,
        },
    )


def update_business_hour(db: Session, hour_id: int, fields: dict[str, Any]) -> BusinessHour:
    if fields.get("weekday") is not None:
        _ensure_weekday_free(db, fields["weekday"], exclude_id=hour_id)
    hour = DataStore(db).update(BusinessHour, hour_id, fields)
    if hour is None:
        raise RecordNotFoundError("Business hour not found")
    return hour


def toggle_open_status(db: Session, hour_id: int, notifier: Notifier) -> BusinessHour:
    hour = db.get(BusinessHour, hour_id)
    if hour is None:
        raise RecordNotFoundError("Business hour not found")
    was_open = hour.is_open
    hour = DataStore(db).update(BusinessHour, hour_id, {"is_open": not was_open})
    if was_open:
        notifier.success("Dia fechado", f"{hour.day_name} marcado como fechado.")
    else:
        notifier.success("Dia aberto", f"{hour.day_name} marcado como aberto.")
    return hour


def close_all_days(db: Session) -> int:
    """Mark every weekday closed; returns the number of rows touched."""
    result = db.execute(update(BusinessHour).values(is_open=False))
    db.commit()
    logger.info("[HOURS] Closed all business days (%s rows).", result.rowcount)
    return result.rowcount or 0


def move_business_hour(
    db: Session,
    hour_id: int,
    direction: Direction | str,
    notifier: Notifier,
) -> tuple[MoveResult, list[BusinessHour]]:
    records = list_business_hours(db)
    result = move_item(DataStore(db), BusinessHour, records, hour_id, direction, notifier, label="os horários")
    return result, list_business_hours(db)
