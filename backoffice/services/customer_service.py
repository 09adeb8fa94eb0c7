"""Customer CRUD helpers."""

import json
import logging
from typing import Any

from sqlalchemy import or_
from sqlalchemy.orm import Session

from backoffice.models.customer import Customer
from backoffice.services.store import DataStore, RecordNotFoundError

logger = logging.getLogger(__name__)


class DuplicateCustomerError(Exception):
    """Raised when another customer already uses the phone number."""


def coerce_address_input(value: Any) -> Any:
    """Parse address text as JSON when it is valid JSON; otherwise keep the text."""
    if not isinstance(value, str):
        return value
    text = value.strip()
    if not text:
        return None
    try:
        return json.loads(text)
    except ValueError:
        return text


def list_customers(db: Session, search: str | None = None) -> list[Customer]:
    criteria: list[Any] = []
    if search and search.strip():
        pattern = f"%{search.strip()}%"
        criteria.append(or_(Customer.phone.ilike(pattern), Customer.name.ilike(pattern)))
    return DataStore(db).select(Customer, *criteria, order_by=(Customer.name.asc(), Customer.id.asc()))


def get_customer(db: Session, customer_id: int) -> Customer:
    customer = db.get(Customer, customer_id)
    if customer is None:
        raise RecordNotFoundError("Customer not found")
    return customer


def get_customer_by_phone(db: Session, phone: str) -> Customer | None:
    matches = DataStore(db).select(Customer, Customer.phone == phone.strip())
    return matches[0] if matches else None


def _ensure_phone_free(db: Session, phone: str, exclude_id: int | None = None) -> None:
    existing = get_customer_by_phone(db, phone)
    if existing is not None and existing.id != exclude_id:
        raise DuplicateCustomerError("Já existe um cliente com este telefone.")


def create_customer(db: Session, *, phone: str, name: str, address: Any = None) -> Customer:
    _ensure_phone_free(db, phone)
    customer = DataStore(db).insert(
        Customer,
        {"phone": phone.strip(), "name": name.strip(), "address": coerce_address_input(address)},
    )
    logger.info("[CUSTOMERS] Created customer id=%s.", customer.id)
    return customer


def update_customer(db: Session, customer_id: int, fields: dict[str, Any]) -> Customer:
    fields = dict(fields)
    if fields.get("phone") is not None:
        _ensure_phone_free(db, fields["phone"], exclude_id=customer_id)
        fields["phone"] = fields["phone"].strip()
    if "address" in fields:
        fields["address"] = coerce_address_input(fields["address"])
    customer = DataStore(db).update(Customer, customer_id, fields)
    if customer is None:
        raise RecordNotFoundError("Customer not found")
    return customer


def delete_customer(db: Session, customer_id: int) -> None:
    if not DataStore(db).delete(Customer, customer_id):
        raise RecordNotFoundError("Customer not found")
    logger.info("[CUSTOMERS] Deleted customer id=%s.", customer_id)
