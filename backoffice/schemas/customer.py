"""Customer API schemas."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field


class CustomerCreate(BaseModel):
    """Address may be a JSON object/array, JSON text, or a free-form line."""

    phone: str = Field(min_length=8)
    name: str = Field(min_length=1)
    address: Any = None


class CustomerUpdate(BaseModel):
    phone: str | None = Field(default=None, min_length=8)
    name: str | None = Field(default=None, min_length=1)
    address: Any = None


class CustomerResponse(BaseModel):
    id: int
    phone: str
    phone_display: str
    name: str
    address: Any
    address_display: str
    bairro: str
    last_order_date: datetime | None
    created_at: datetime
