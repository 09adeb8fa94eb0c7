"""Business-hours endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from backoffice.core.security import get_current_user
from backoffice.db.session import get_db
from backoffice.schemas.business_hours import (
    BusinessHourCreate,
    BusinessHourMoveResponse,
    BusinessHourResponse,
    BusinessHourToggleResponse,
    BusinessHourUpdate,
    ClosedDaysResponse,
)
from backoffice.schemas.common import MoveRequest
from backoffice.services import business_hours_service
from backoffice.services.business_hours_service import DuplicateWeekdayError
from backoffice.services.notifications import Notifier
from backoffice.services.store import RecordNotFoundError

router: APIRouter = APIRouter(dependencies=[Depends(get_current_user)])


@router.get("", response_model=list[BusinessHourResponse])
def list_business_hours(db: Session = Depends(get_db)) -> list[BusinessHourResponse]:
    return [BusinessHourResponse.model_validate(hour) for hour in business_hours_service.list_business_hours(db)]


@router.post("", response_model=BusinessHourResponse, status_code=status.HTTP_201_CREATED)
def create_business_hour(payload: BusinessHourCreate, db: Session = Depends(get_db)) -> BusinessHourResponse:
    try:
        hour = business_hours_service.create_business_hour(db, **payload.model_dump())
    except DuplicateWeekdayError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc)) from exc
    return BusinessHourResponse.model_validate(hour)


@router.patch("/{hour_id}", response_model=BusinessHourResponse)
def update_business_hour(hour_id: int, payload: BusinessHourUpdate, db: Session = Depends(get_db)) -> BusinessHourResponse:
    try:
        hour = business_hours_service.update_business_hour(db, hour_id, payload.model_dump(exclude_unset=True))
    except DuplicateWeekdayError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc)) from exc
    except RecordNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return BusinessHourResponse.model_validate(hour)


@router.post("/{hour_id}/toggle", response_model=BusinessHourToggleResponse)
def toggle_business_hour(hour_id: int, db: Session = Depends(get_db)) -> BusinessHourToggleResponse:
    notifier = Notifier()
    try:
        hour = business_hours_service.toggle_open_status(db, hour_id, notifier)
    except RecordNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return BusinessHourToggleResponse(
        business_hour=BusinessHourResponse.model_validate(hour),
        notifications=notifier.as_payload(),
    )


@router.post("/{hour_id}/move", response_model=BusinessHourMoveResponse)
def move_business_hour(hour_id: int, payload: MoveRequest, db: Session = Depends(get_db)) -> BusinessHourMoveResponse:
    notifier = Notifier()
    result, hours = business_hours_service.move_business_hour(db, hour_id, payload.direction, notifier)
    return BusinessHourMoveResponse(
        moved=result.moved,
        business_hours=[BusinessHourResponse.model_validate(hour) for hour in hours],
        notifications=notifier.as_payload(),
    )


@router.post("/close-all", response_model=ClosedDaysResponse)
def close_all(db: Session = Depends(get_db)) -> ClosedDaysResponse:
    return ClosedDaysResponse(closed_days=business_hours_service.close_all_days(db))
