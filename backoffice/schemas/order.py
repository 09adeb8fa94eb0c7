"""Order API schemas."""

from datetime import date, datetime
from decimal import Decimal
from typing import Any, Literal

from pydantic import BaseModel, Field

OrderStatusValue = Literal["pending", "confirmed", "delivered", "canceled"]


class OrderLine(BaseModel):
    """One order line as stored in the order's JSON items."""

    id: int | None = None
    name: str | None = None
    quantity: int = Field(default=1, ge=1)
    price: Decimal | None = Field(default=None, ge=0)


class OrderCreate(BaseModel):
    """Manually created order (used for testing the pipeline)."""

    customer_name: str = Field(min_length=3)
    customer_phone: str = Field(min_length=8)
    items: list[OrderLine]
    order_amount: Decimal = Field(default=Decimal("0.00"), ge=0)
    delivery_fee: Decimal = Field(default=Decimal("0.00"), ge=0)
    total_amount: Decimal | None = Field(default=None, ge=0)
    status: OrderStatusValue = "pending"
    delivery_address: Any = None
    bairro: str | None = None
    scheduled_date: date | None = None


class OrderStatusUpdate(BaseModel):
    status: OrderStatusValue


class OrderResponse(BaseModel):
    id: int
    order_number: str
    customer_name: str | None
    customer_phone: str | None
    phone_display: str
    items: Any
    items_summary: str
    order_amount: Decimal | None
    delivery_fee: Decimal | None
    total_amount: Decimal | None
    status: str
    status_label: str
    created_at: datetime
    created_at_display: str
    delivery_address: Any
    address_display: str
    bairro: str
    scheduled_date: date | None


class ReceiptLineResponse(BaseModel):
    id: int | None
    name: str
    price: Decimal
    quantity: int
    subtotal: Decimal
