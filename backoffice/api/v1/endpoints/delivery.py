"""Neighborhood and delivery-zone endpoints."""

from decimal import Decimal

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.orm import Session

from backoffice.core.security import get_current_user
from backoffice.db.session import get_db
from backoffice.schemas.delivery import (
    DeliveryFeeQuote,
    DeliveryZonePayload,
    DeliveryZoneResponse,
    NeighborhoodCreate,
    NeighborhoodResponse,
    NeighborhoodUpdate,
)
from backoffice.services import delivery_service
from backoffice.services.delivery_service import DuplicateNeighborhoodError
from backoffice.services.store import RecordNotFoundError

router: APIRouter = APIRouter(dependencies=[Depends(get_current_user)])


@router.get("/neighborhoods", response_model=list[NeighborhoodResponse])
def list_neighborhoods(db: Session = Depends(get_db)) -> list[NeighborhoodResponse]:
    return [NeighborhoodResponse.model_validate(row) for row in delivery_service.list_neighborhoods(db)]


@router.post("/neighborhoods", response_model=NeighborhoodResponse, status_code=status.HTTP_201_CREATED)
def create_neighborhood(payload: NeighborhoodCreate, db: Session = Depends(get_db)) -> NeighborhoodResponse:
    try:
        row = delivery_service.create_neighborhood(db, name=payload.name, delivery_fee=payload.delivery_fee)
    except DuplicateNeighborhoodError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc)) from exc
    return NeighborhoodResponse.model_validate(row)


@router.patch("/neighborhoods/{neighborhood_id}", response_model=NeighborhoodResponse)
def update_neighborhood(
    neighborhood_id: int,
    payload: NeighborhoodUpdate,
    db: Session = Depends(get_db),
) -> NeighborhoodResponse:
    try:
        row = delivery_service.update_neighborhood(db, neighborhood_id, payload.model_dump(exclude_unset=True))
    except DuplicateNeighborhoodError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc)) from exc
    except RecordNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return NeighborhoodResponse.model_validate(row)


@router.delete("/neighborhoods/{neighborhood_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_neighborhood(neighborhood_id: int, db: Session = Depends(get_db)) -> Response:
    try:
        delivery_service.delete_neighborhood(db, neighborhood_id)
    except RecordNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/zones", response_model=list[DeliveryZoneResponse])
def list_zones(db: Session = Depends(get_db)) -> list[DeliveryZoneResponse]:
    return [DeliveryZoneResponse.model_validate(zone) for zone in delivery_service.list_delivery_zones(db)]


@router.post("/zones", response_model=DeliveryZoneResponse, status_code=status.HTTP_201_CREATED)
def create_zone(payload: DeliveryZonePayload, db: Session = Depends(get_db)) -> DeliveryZoneResponse:
    return DeliveryZoneResponse.model_validate(delivery_service.create_delivery_zone(db, **payload.model_dump()))


@router.put("/zones/{zone_id}", response_model=DeliveryZoneResponse)
def update_zone(zone_id: int, payload: DeliveryZonePayload, db: Session = Depends(get_db)) -> DeliveryZoneResponse:
    try:
        zone = delivery_service.update_delivery_zone(db, zone_id, payload.model_dump())
    except RecordNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return DeliveryZoneResponse.model_validate(zone)


@router.delete("/zones/{zone_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_zone(zone_id: int, db: Session = Depends(get_db)) -> Response:
    try:
        delivery_service.delete_delivery_zone(db, zone_id)
    except RecordNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/quote", response_model=DeliveryFeeQuote)
def quote(
    bairro: str | None = Query(default=None),
    distance: Decimal | None = Query(default=None, ge=0),
    db: Session = Depends(get_db),
) -> DeliveryFeeQuote:
    """Delivery fee for a neighborhood, falling back to the distance zones."""
    fee, source = delivery_service.quote_delivery_fee(db, bairro=bairro, distance=distance)
    return DeliveryFeeQuote(delivery_fee=fee, source=source)
