"""Order status values and their display labels."""

from __future__ import annotations

ORDER_STATUSES: list[str] = ["pending", "confirmed", "delivered", "canceled"]

STATUS_LABELS: dict[str, str] = {
    "pending": "Pendente",
    "confirmed": "Confirmado",
    "delivered": "Entregue",
    "canceled": "Cancelado",
}


def is_valid_status(value: str) -> bool:
    return value in ORDER_STATUSES


def status_label(value: str | None) -> str:
    """Return the Portuguese label, or the raw value for unknown statuses."""
    if not value:
        return ""
    return STATUS_LABELS.get(value, value)
