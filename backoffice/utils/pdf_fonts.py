"""Unicode font discovery for ReportLab receipts."""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)

RECEIPT_FONT_NAME = "ReceiptUnicode"
FONT_CANDIDATES: tuple[str, ...] = (
    "/usr/share/fonts/truetype/dejavu/DejaVuSansMono.ttf",
    "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf",
    "/usr/share/fonts/truetype/liberation/LiberationMono-Regular.ttf",
    "/usr/share/fonts/truetype/noto/NotoSansMono-Regular.ttf",
    "/System/Library/Fonts/Supplemental/Courier New.ttf",
    r"C:\\Windows\\Fonts\\consola.ttf",
    r"C:\\Windows\\Fonts\\arial.ttf",
)

_fallback_logged = False


def find_unicode_ttf() -> str | None:
    for candidate in FONT_CANDIDATES:
        if Path(candidate).exists():
            return candidate
    return None


def register_pdf_font() -> str:
    """Register a Unicode TTF with ReportLab and return the font name to use.

    Falls back to the built-in Courier, which lacks some accented glyphs.
    """
    global _fallback_logged

    font_path = find_unicode_ttf()
    if font_path:
        from reportlab.pdfbase import pdfmetrics
        from reportlab.pdfbase.ttfonts import TTFont

        if RECEIPT_FONT_NAME not in pdfmetrics.getRegisteredFontNames():
            pdfmetrics.registerFont(TTFont(RECEIPT_FONT_NAME, font_path))
        return RECEIPT_FONT_NAME

    if not _fallback_logged:
        logger.warning("[PDF] No Unicode TTF font found; accented characters may render incorrectly.")
        _fallback_logged = True
    return "Courier"
