"""Order listing, creation and receipt line resolution."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from datetime import date, datetime, timezone
from decimal import Decimal, InvalidOperation
from typing import Any

from sqlalchemy.orm import Session

from backoffice.models.customer import Customer
from backoffice.models.menu import MenuItem
from backoffice.models.order import Order
from backoffice.services.customer_service import get_customer_by_phone
from backoffice.services.formatting import UNNAMED_ITEM
from backoffice.services.order_status import is_valid_status
from backoffice.services.store import DataStore, RecordNotFoundError
from backoffice.utils.time import day_window_utc

logger = logging.getLogger(__name__)


class InvalidOrderStatusError(Exception):
    """Raised when a status outside ORDER_STATUSES is requested."""


@dataclass(frozen=True)
class ReceiptLine:
    id: Any
    name: str
    price: Decimal
    quantity: int

    @property
    def subtotal(self) -> Decimal:
        return self.price * self.quantity


def order_number(order: Order) -> str:
    """Zero-padded public order number, e.g. ``00000042``."""
    return str(order.id).zfill(8)


def list_orders(db: Session, *, status: str | None = None, created_on: date | None = None) -> list[Order]:
    """Return orders newest first, optionally narrowed to a status and a creation day."""
    criteria: list[Any] = []
    if status:
        criteria.append(Order.status == status)
    if created_on is not None:
        start, end = day_window_utc(created_on)
        criteria.append(Order.created_at >= start)
        criteria.append(Order.created_at < end)
    return DataStore(db).select(Order, *criteria, order_by=(Order.created_at.desc(), Order.id.desc()))


def list_scheduled_orders(db: Session, scheduled_on: date | None = None) -> list[Order]:
    criteria: list[Any] = [Order.scheduled_date.is_not(None)]
    if scheduled_on is not None:
        criteria.append(Order.scheduled_date == scheduled_on)
    return DataStore(db).select(Order, *criteria, order_by=(Order.scheduled_date.asc(), Order.id.asc()))


def get_order(db: Session, order_id: int) -> Order:
    order = db.get(Order, order_id)
    if order is None:
        raise RecordNotFoundError("Order not found")
    return order


def create_order(
    db: Session,
    *,
    customer_name: str,
    customer_phone: str,
    items: list[dict[str, Any]],
    order_amount: Decimal,
    delivery_fee: Decimal,
    total_amount: Decimal | None = None,
    status: str = "pending",
    delivery_address: Any = None,
    bairro: str | None = None,
    scheduled_date: date | None = None,
) -> Order:
    """Insert an order; total defaults to order_amount + delivery_fee."""
    if not is_valid_status(status):
        raise InvalidOrderStatusError(f"Unknown order status: {status}")
    if total_amount is None:
        total_amount = order_amount + delivery_fee

    store = DataStore(db)
    order = store.insert(
        Order,
        {
            "customer_name": customer_name,
            "customer_phone": customer_phone,
            "items": items,
            "order_amount": order_amount,
            "delivery_fee": delivery_fee,
            "total_amount": total_amount,
            "status": status,
            "delivery_address": delivery_address,
            "bairro": bairro,
            "scheduled_date": scheduled_date,
        },
    )

    customer = get_customer_by_phone(db, customer_phone)
    if customer is not None:
        store.update(Customer, customer.id, {"last_order_date": datetime.now(timezone.utc)})

    logger.info("[ORDERS] Created order id=%s status=%s total=%s.", order.id, order.status, order.total_amount)
    return order


def update_order_status(db: Session, order_id: int, status: str) -> Order:
    if not is_valid_status(status):
        raise InvalidOrderStatusError(f"Unknown order status: {status}")
    order = DataStore(db).update(Order, order_id, {"status": status})
    if order is None:
        raise RecordNotFoundError("Order not found")
    logger.info("[ORDERS] Order id=%s -> %s.", order_id, status)
    return order


def _order_entries(items: Any) -> list[dict[str, Any]]:
    if isinstance(items, str):
        try:
            items = json.loads(items)
        except ValueError:
            return []
    if not isinstance(items, list):
        return []
    return [entry for entry in items if isinstance(entry, dict)]


def _decimal_or_none(value: Any) -> Decimal | None:
    if value is None or value == "":
        return None
    try:
        return Decimal(str(value))
    except InvalidOperation:
        return None


def _int_or_none(value: Any) -> int | None:
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def resolve_receipt_lines(db: Session, order: Order) -> list[ReceiptLine]:
    """Resolve order lines against the menu: menu name and price win over the line's own."""
    entries = _order_entries(order.items)
    menu_ids = {item_id for item_id in (_int_or_none(entry.get("id")) for entry in entries) if item_id is not None}
    menu_by_id: dict[int, MenuItem] = {}
    if menu_ids:
        menu_by_id = {item.id: item for item in DataStore(db).select(MenuItem, MenuItem.id.in_(menu_ids))}

    lines: list[ReceiptLine] = []
    for entry in entries:
        menu_item = menu_by_id.get(_int_or_none(entry.get("id")))
        name = (menu_item.name if menu_item else None) or entry.get("name") or UNNAMED_ITEM
        price = (menu_item.price if menu_item else None) or _decimal_or_none(entry.get("price")) or Decimal("0")
        quantity = _int_or_none(entry.get("quantity")) or 1
        lines.append(ReceiptLine(id=entry.get("id"), name=str(name), price=Decimal(price), quantity=quantity))
    return lines
