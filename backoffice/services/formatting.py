"""Display formatting shared by order listings and receipts."""

from __future__ import annotations

import json
import re
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any

EMPTY_ITEMS: str = "Nenhum item"
UNNAMED_ITEM: str = "Item sem nome"


def format_currency(value: Decimal | int | float | None) -> str:
    """Format an amount as Brazilian Real, e.g. ``R$ 12,50``."""
    if value is None:
        return "R$ 0,00"
    try:
        amount = Decimal(str(value))
    except InvalidOperation:
        return "R$ 0,00"
    return f"R$ {amount:.2f}".replace(".", ",")


def format_order_date(value: datetime | str | None) -> str:
    """Format a timestamp as ``dd/mm/YYYY HH:MM``; empty string when missing."""
    if not value:
        return ""
    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value)
        except ValueError:
            return "Data inválida"
    return value.strftime("%d/%m/%Y %H:%M")


def format_scheduled_date(value: date | str | None) -> str:
    if not value:
        return ""
    if isinstance(value, str):
        try:
            value = date.fromisoformat(value[:10])
        except ValueError:
            return "Data inválida"
    return value.strftime("%d/%m/%Y")


def format_phone(raw: str | None) -> str:
    """Format a stored phone/WhatsApp id for display.

    ``554398237354@s.whatsapp.net`` becomes ``(43) 9823-7354``. Values without
    both an area code and a local part are returned unchanged.
    """
    if not raw:
        return ""
    digits = re.sub(r"\D", "", raw.split("@")[0])
    digits = re.sub(r"^55", "", digits)
    ddd, rest = digits[:2], digits[2:]
    if not ddd or not rest:
        return raw
    if len(rest) == 8:
        first_part, second_part = rest[:4], rest[4:]
    else:
        first_part, second_part = rest[:-4], rest[-4:]
    return f"({ddd}) {first_part}-{second_part}"


def _describe_entries(entries: list[Any]) -> str:
    if not entries:
        return EMPTY_ITEMS
    described: list[str] = []
    for entry in entries:
        if isinstance(entry, dict):
            quantity = entry.get("quantity") or 1
            name = entry.get("name") or UNNAMED_ITEM
            described.append(f"{quantity}x {name}")
        else:
            described.append(str(entry))
    return ", ".join(described)


def format_order_items(items: Any) -> str:
    """Summarize order lines as ``2x Pizza, 1x Refrigerante``.

    Accepts a list, JSON text holding a list, or free text.
    """
    if not items:
        return EMPTY_ITEMS
    if isinstance(items, list):
        return _describe_entries(items)
    if isinstance(items, str):
        trimmed = items.strip()
        if not trimmed.startswith(("[", "{")):
            return trimmed
        try:
            parsed = json.loads(trimmed)
        except ValueError:
            return trimmed
        if not isinstance(parsed, list):
            return EMPTY_ITEMS
        return _describe_entries(parsed)
    if isinstance(items, dict):
        return json.dumps(items, ensure_ascii=False)
    return str(items)
