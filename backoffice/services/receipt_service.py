"""Order receipt assembly and HTML / plain-text rendering."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape
from sqlalchemy.orm import Session

from backoffice.core.config import settings
from backoffice.models.order import Order
from backoffice.services.address import format_address, resolve_order_bairro
from backoffice.services.formatting import format_currency, format_order_date, format_phone, format_scheduled_date
from backoffice.services.order_service import ReceiptLine, order_number, resolve_receipt_lines
from backoffice.services.order_status import status_label

BASE_DIR = Path(__file__).resolve().parent.parent.parent
TEMPLATES_DIR = BASE_DIR / "templates"
RECEIPT_WIDTH = 40

_environment: Environment | None = None


@dataclass
class Receipt:
    """Everything printed on a receipt, already formatted for display."""

    number: str
    created_at: str
    status: str
    customer_name: str
    customer_phone: str
    address: str
    bairro: str
    scheduled_date: str
    lines: list[ReceiptLine] = field(default_factory=list)
    order_amount: Decimal = Decimal("0")
    delivery_fee: Decimal = Decimal("0")
    total_amount: Decimal = Decimal("0")
    footer: str = ""

    @property
    def title(self) -> str:
        return f"PEDIDO #{self.number}"


def build_receipt(db: Session, order: Order) -> Receipt:
    return Receipt(
        number=order_number(order),
        created_at=format_order_date(order.created_at),
        status=status_label(order.status),
        customer_name=order.customer_name or "",
        customer_phone=format_phone(order.customer_phone),
        address=format_address(order.delivery_address),
        bairro=resolve_order_bairro(order.bairro, order.delivery_address),
        scheduled_date=format_scheduled_date(order.scheduled_date),
        lines=resolve_receipt_lines(db, order),
        order_amount=order.order_amount or Decimal("0"),
        delivery_fee=order.delivery_fee or Decimal("0"),
        total_amount=order.total_amount or Decimal("0"),
        footer=settings.receipt_footer,
    )


def _jinja_environment() -> Environment:
    global _environment
    if _environment is None:
        _environment = Environment(
            loader=FileSystemLoader(str(TEMPLATES_DIR)),
            autoescape=select_autoescape(["html"]),
        )
        _environment.filters["currency"] = format_currency
    return _environment


def render_receipt_html(receipt: Receipt) -> str:
    return _jinja_environment().get_template("receipt.html").render(receipt=receipt)


def _two_columns(left: str, right: str, width: int = RECEIPT_WIDTH) -> str:
    gap = max(width - len(left) - len(right), 1)
    return f"{left}{' ' * gap}{right}"


def render_receipt_text(receipt: Receipt) -> str:
    """Fixed-width receipt for thermal printers."""
    rule = "-" * RECEIPT_WIDTH
    out: list[str] = [receipt.title.center(RECEIPT_WIDTH), receipt.created_at.center(RECEIPT_WIDTH), rule]
    out.append(f"Cliente: {receipt.customer_name}")
    if receipt.customer_phone:
        out.append(f"Telefone: {receipt.customer_phone}")
    out.append(f"Endereço: {receipt.address}")
    out.append(f"Bairro: {receipt.bairro}")
    out.append(f"Status: {receipt.status}")
    if receipt.scheduled_date:
        out.append(f"Agendado para: {receipt.scheduled_date}")
    out.append(rule)
    for line in receipt.lines:
        out.append(_two_columns(f"{line.quantity}x {line.name}", format_currency(line.subtotal)))
    out.append(rule)
    out.append(_two_columns("Subtotal:", format_currency(receipt.order_amount)))
    out.append(_two_columns("Taxa de entrega:", format_currency(receipt.delivery_fee)))
    out.append(_two_columns("Total:", format_currency(receipt.total_amount)))
    out.append(rule)
    if receipt.footer:
        out.append(receipt.footer.center(RECEIPT_WIDTH))
    return "\n".join(out) + "\n"
