"""Restaurant-wide settings: vacation mode and default printer."""

import logging

from sqlalchemy.orm import Session

from backoffice.db.seed import ensure_restaurant_settings
from backoffice.models.restaurant_setting import RestaurantSetting
from backoffice.services.business_hours_service import close_all_days
from backoffice.services.notifications import Notifier
from backoffice.services.store import DataStore

logger = logging.getLogger(__name__)

AVAILABLE_PRINTERS: list[str] = ["Impressora Padrão", "Impressora Térmica", "Impressora PDF"]


class UnknownPrinterError(Exception):
    """Raised when saving a printer that is not in AVAILABLE_PRINTERS."""


def get_restaurant_settings(db: Session) -> RestaurantSetting:
    return ensure_restaurant_settings(db)


def save_vacation_settings(
    db: Session,
    *,
    is_on_vacation: bool,
    vacation_message: str | None,
    notifier: Notifier,
) -> tuple[RestaurantSetting, int]:
    """Persist vacation mode; turning it on closes every business-hour day.

    Returns the settings row and the number of days that were closed.
    """
    row = get_restaurant_settings(db)
    row = DataStore(db).update(
        RestaurantSetting,
        row.id,
        {"is_on_vacation": is_on_vacation, "vacation_message": vacation_message},
    )
    closed_days = 0
    if is_on_vacation:
        closed_days = close_all_days(db)
        notifier.success("Horários atualizados", "Todos os dias foram marcados como fechados.")
    notifier.success("Configurações salvas", "As configurações de férias foram atualizadas.")
    logger.info("[SETTINGS] Vacation mode=%s (closed_days=%s).", is_on_vacation, closed_days)
    return row, closed_days


def save_default_printer(db: Session, printer: str, notifier: Notifier) -> RestaurantSetting:
    if printer not in AVAILABLE_PRINTERS:
        raise UnknownPrinterError(f"Impressora desconhecida: {printer}")
    row = get_restaurant_settings(db)
    row = DataStore(db).update(RestaurantSetting, row.id, {"default_printer": printer})
    notifier.success("Configurações salvas", f"Impressora padrão definida como {printer}.")
    return row
