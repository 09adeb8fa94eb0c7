"""Restaurant settings endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from backoffice.core.security import get_current_user
from backoffice.db.session import get_db
from backoffice.schemas.settings import (
    PrinterSettings,
    PrinterSettingsResponse,
    VacationSettings,
    VacationSettingsResponse,
)
from backoffice.services import settings_service
from backoffice.services.notifications import Notifier
from backoffice.services.settings_service import AVAILABLE_PRINTERS, UnknownPrinterError

router: APIRouter = APIRouter(dependencies=[Depends(get_current_user)])


@router.get("/vacation", response_model=VacationSettingsResponse)
def get_vacation(db: Session = Depends(get_db)) -> VacationSettingsResponse:
    row = settings_service.get_restaurant_settings(db)
    return VacationSettingsResponse(is_on_vacation=row.is_on_vacation, vacation_message=row.vacation_message)


@router.put("/vacation", response_model=VacationSettingsResponse)
def save_vacation(payload: VacationSettings, db: Session = Depends(get_db)) -> VacationSettingsResponse:
    notifier = Notifier()
    row, closed_days = settings_service.save_vacation_settings(
        db,
        is_on_vacation=payload.is_on_vacation,
        vacation_message=payload.vacation_message,
        notifier=notifier,
    )
    return VacationSettingsResponse(
        is_on_vacation=row.is_on_vacation,
        vacation_message=row.vacation_message,
        closed_days=closed_days,
        notifications=notifier.as_payload(),
    )


@router.get("/printer", response_model=PrinterSettingsResponse)
def get_printer(db: Session = Depends(get_db)) -> PrinterSettingsResponse:
    row = settings_service.get_restaurant_settings(db)
    return PrinterSettingsResponse(default_printer=row.default_printer, available_printers=AVAILABLE_PRINTERS)


@router.put("/printer", response_model=PrinterSettingsResponse)
def save_printer(payload: PrinterSettings, db: Session = Depends(get_db)) -> PrinterSettingsResponse:
    notifier = Notifier()
    try:
        row = settings_service.save_default_printer(db, payload.default_printer, notifier)
    except UnknownPrinterError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return PrinterSettingsResponse(
        default_printer=row.default_printer,
        available_printers=AVAILABLE_PRINTERS,
        notifications=notifier.as_payload(),
    )
