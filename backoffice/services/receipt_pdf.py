"""ReportLab rendering of order receipts."""

from __future__ import annotations

from io import BytesIO
from typing import Any
from xml.sax.saxutils import escape

from backoffice.services.formatting import format_currency
from backoffice.services.receipt_service import Receipt
from backoffice.utils.pdf_fonts import register_pdf_font

# 80 mm thermal roll; height grows with the number of lines.
RECEIPT_PAGE_WIDTH_MM = 80


def _reportlab():
    from reportlab.lib import colors
    from reportlab.lib.enums import TA_CENTER
    from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
    from reportlab.lib.units import mm
    from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

    return {
        "colors": colors,
        "TA_CENTER": TA_CENTER,
        "ParagraphStyle": ParagraphStyle,
        "getSampleStyleSheet": getSampleStyleSheet,
        "mm": mm,
        "Paragraph": Paragraph,
        "SimpleDocTemplate": SimpleDocTemplate,
        "Spacer": Spacer,
        "Table": Table,
        "TableStyle": TableStyle,
    }


def _build_styles(rl: dict[str, Any]) -> dict[str, Any]:
    font_name = register_pdf_font()
    styles = rl["getSampleStyleSheet"]()
    return {
        "font_name": font_name,
        "title": rl["ParagraphStyle"](
            "ReceiptTitle", parent=styles["Title"], fontName=font_name, fontSize=13, leading=16
        ),
        "center": rl["ParagraphStyle"](
            "ReceiptCenter", parent=styles["Normal"], fontName=font_name, fontSize=8, alignment=rl["TA_CENTER"]
        ),
        "normal": rl["ParagraphStyle"]("ReceiptNormal", parent=styles["Normal"], fontName=font_name, fontSize=8),
    }


def _amounts_table(rl: dict[str, Any], rows: list[list[str]], font_name: str, width: float, bold_last: bool = False) -> Any:
    table = rl["Table"](rows, colWidths=[width * 0.65, width * 0.35])
    commands: list[tuple[Any, ...]] = [
        ("FONTNAME", (0, 0), (-1, -1), font_name),
        ("FONTSIZE", (0, 0), (-1, -1), 8),
        ("ALIGN", (1, 0), (1, -1), "RIGHT"),
        ("LEFTPADDING", (0, 0), (-1, -1), 0),
        ("RIGHTPADDING", (0, 0), (-1, -1), 0),
    ]
    if bold_last and rows:
        commands.append(("LINEABOVE", (0, -1), (-1, -1), 0.5, rl["colors"].black))
    table.setStyle(rl["TableStyle"](commands))
    return table


def render_receipt_pdf(receipt: Receipt) -> bytes:
    """Render one receipt as a single-page PDF sized for an 80 mm printer."""
    rl = _reportlab()
    styles = _build_styles(rl)
    mm = rl["mm"]
    margin = 4 * mm
    page_width = RECEIPT_PAGE_WIDTH_MM * mm
    content_width = page_width - 2 * margin
    page_height = (120 + 6 * len(receipt.lines)) * mm

    story: list[Any] = [
        rl["Paragraph"](receipt.title, styles["title"]),
        rl["Paragraph"](escape(receipt.created_at), styles["center"]),
        rl["Spacer"](1, 6),
        rl["Paragraph"](f"Cliente: {escape(receipt.customer_name)}", styles["normal"]),
    ]
    if receipt.customer_phone:
        story.append(rl["Paragraph"](f"Telefone: {escape(receipt.customer_phone)}", styles["normal"]))
    story.append(rl["Paragraph"](f"Endereço: {escape(receipt.address)}", styles["normal"]))
    story.append(rl["Paragraph"](f"Bairro: {escape(receipt.bairro)}", styles["normal"]))
    story.append(rl["Paragraph"](f"Status: {escape(receipt.status)}", styles["normal"]))
    if receipt.scheduled_date:
        story.append(rl["Paragraph"](f"Agendado para: {escape(receipt.scheduled_date)}", styles["normal"]))
    story.append(rl["Spacer"](1, 6))

    if receipt.lines:
        line_rows = [[f"{line.quantity}x {line.name}", format_currency(line.subtotal)] for line in receipt.lines]
        story.append(_amounts_table(rl, line_rows, styles["font_name"], content_width))
        story.append(rl["Spacer"](1, 6))

    totals = [
        ["Subtotal", format_currency(receipt.order_amount)],
        ["Taxa de entrega", format_currency(receipt.delivery_fee)],
        ["Total", format_currency(receipt.total_amount)],
    ]
    story.append(_amounts_table(rl, totals, styles["font_name"], content_width, bold_last=True))
    if receipt.footer:
        story.append(rl["Spacer"](1, 8))
        story.append(rl["Paragraph"](escape(receipt.footer), styles["center"]))

    buffer = BytesIO()
    rl["SimpleDocTemplate"](
        buffer,
        pagesize=(page_width, page_height),
        leftMargin=margin,
        rightMargin=margin,
        topMargin=margin,
        bottomMargin=margin,
        title=receipt.title,
    ).build(story)
    return buffer.getvalue()
