"""Counters shown on the back-office dashboard."""

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from backoffice.models.business_hours import BusinessHour
from backoffice.models.delivery import Neighborhood
from backoffice.models.menu import MenuItem
from backoffice.models.order import Order


def _count(db: Session, model, *criteria) -> int:
    stmt = select(func.count()).select_from(model)
    if criteria:
        stmt = stmt.where(*criteria)
    return int(db.scalar(stmt) or 0)


def get_dashboard_stats(db: Session) -> dict[str, int]:
    return {
        "menu_items_available": _count(db, MenuItem, MenuItem.is_available.is_(True)),
        "pending_orders": _count(db, Order, Order.status == "pending"),
        "closed_days": _count(db, BusinessHour, BusinessHour.is_open.is_(False)),
        "neighborhoods": _count(db, Neighborhood),
    }
