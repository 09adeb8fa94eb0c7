"""Neighborhood and distance-zone delivery pricing."""

import logging
from decimal import Decimal
from typing import Any

from sqlalchemy import func
from sqlalchemy.orm import Session

from backoffice.models.delivery import DeliveryZone, Neighborhood
from backoffice.services.store import DataStore, RecordNotFoundError

logger = logging.getLogger(__name__)


class DuplicateNeighborhoodError(Exception):
    """Raised when a neighborhood name is already registered."""


def list_neighborhoods(db: Session) -> list[Neighborhood]:
    return DataStore(db).select(Neighborhood, order_by=(Neighborhood.name.asc(),))


def find_neighborhood(db: Session, name: str) -> Neighborhood | None:
    """Case-insensitive lookup by trimmed name."""
    matches = DataStore(db).select(Neighborhood, func.lower(Neighborhood.name) == name.strip().lower())
    return matches[0] if matches else None


def _ensure_name_free(db: Session, name: str, exclude_id: int | None = None) -> None:
    existing = find_neighborhood(db, name)
    if existing is not None and existing.id != exclude_id:
        raise DuplicateNeighborhoodError("Este bairro já existe.")


def create_neighborhood(db: Session, *, name: str, delivery_fee: Decimal) -> Neighborhood:
    _ensure_name_free(db, name)
    return DataStore(db).insert(Neighborhood, {"name": name.strip(), "delivery_fee": delivery_fee})


def update_neighborhood(db: Session, neighborhood_id: int, fields: dict[str, Any]) -> Neighborhood:
    if fields.get("name") is not None:
        _ensure_name_free(db, fields["name"], exclude_id=neighborhood_id)
        fields = {**fields, "name": fields["name"].strip()}
    neighborhood = DataStore(db).update(Neighborhood, neighborhood_id, fields)
    if neighborhood is None:
        raise RecordNotFoundError("Neighborhood not found")
    return neighborhood


def delete_neighborhood(db: Session, neighborhood_id: int) -> None:
    if not DataStore(db).delete(Neighborhood, neighborhood_id):
        raise RecordNotFoundError("Neighborhood not found")


def list_delivery_zones(db: Session) -> list[DeliveryZone]:
    return DataStore(db).select(DeliveryZone, order_by=(DeliveryZone.min_distance.asc(), DeliveryZone.id.asc()))


def create_delivery_zone(db: Session, *, min_distance: Decimal, max_distance: Decimal, delivery_fee: Decimal) -> DeliveryZone:
    return DataStore(db).insert(
        DeliveryZone,
        {"min_distance": min_distance, "max_distance": max_distance, "delivery_fee": delivery_fee},
    )


def update_delivery_zone(db: Session, zone_id: int, fields: dict[str, Any]) -> DeliveryZone:
    zone = DataStore(db).update(DeliveryZone, zone_id, fields)
    if zone is None:
        raise RecordNotFoundError("Delivery zone not found")
    return zone


def delete_delivery_zone(db: Session, zone_id: int) -> None:
    if not DataStore(db).delete(DeliveryZone, zone_id):
        raise RecordNotFoundError("Delivery zone not found")


def fee_for_bairro(db: Session, bairro: str | None) -> Decimal | None:
    if not bairro or not bairro.strip():
        return None
    neighborhood = find_neighborhood(db, bairro)
    return neighborhood.delivery_fee if neighborhood is not None else None


def fee_for_distance(db: Session, distance: Decimal) -> Decimal | None:
    """Fee of the first zone with min_distance <= distance < max_distance."""
    for zone in list_delivery_zones(db):
        if zone.min_distance <= distance < zone.max_distance:
            return zone.delivery_fee
    return None


def quote_delivery_fee(db: Session, *, bairro: str | None = None, distance: Decimal | None = None) -> tuple[Decimal | None, str | None]:
    """Price by neighborhood when known, otherwise by distance zone."""
    fee = fee_for_bairro(db, bairro)
    if fee is not None:
        return fee, "neighborhood"
    if distance is not None:
        fee = fee_for_distance(db, distance)
        if fee is not None:
            return fee, "zone"
    logger.info("[DELIVERY] No fee found for bairro=%r distance=%s.", bairro, distance)
    return None, None
