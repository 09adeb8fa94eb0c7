"""Neighborhood and delivery-zone API schemas."""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, model_validator


class NeighborhoodCreate(BaseModel):
    name: str = Field(min_length=1)
    delivery_fee: Decimal = Field(ge=0)


class NeighborhoodUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1)
    delivery_fee: Decimal | None = Field(default=None, ge=0)


class NeighborhoodResponse(BaseModel):
    id: int
    name: str
    delivery_fee: Decimal

    model_config = ConfigDict(from_attributes=True)


class DeliveryZonePayload(BaseModel):
    """Distance band in km; used for both create and full update."""

    min_distance: Decimal = Field(ge=0)
    max_distance: Decimal = Field(ge=0)
    delivery_fee: Decimal = Field(ge=0)

    @model_validator(mode="after")
    def _check_range(self) -> "DeliveryZonePayload":
        if self.max_distance <= self.min_distance:
            raise ValueError("A distância máxima deve ser maior que a distância mínima")
        return self


class DeliveryZoneResponse(BaseModel):
    id: int
    min_distance: Decimal
    max_distance: Decimal
    delivery_fee: Decimal

    model_config = ConfigDict(from_attributes=True)


class DeliveryFeeQuote(BaseModel):
    delivery_fee: Decimal | None
    source: str | None
