"""Order listing, status and receipt endpoints."""

import logging
from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Query, status
from fastapi.responses import HTMLResponse, PlainTextResponse, Response
from sqlalchemy.orm import Session

from backoffice.core.security import get_current_user
from backoffice.db.session import get_db
from backoffice.models.order import Order
from backoffice.schemas.order import (
    OrderCreate,
    OrderResponse,
    OrderStatusUpdate,
    OrderStatusValue,
    ReceiptLineResponse,
)
from backoffice.services import order_service
from backoffice.services.address import format_address, resolve_order_bairro
from backoffice.services.formatting import format_order_date, format_order_items, format_phone
from backoffice.services.order_service import InvalidOrderStatusError
from backoffice.services.order_status import status_label
from backoffice.services.receipt_pdf import render_receipt_pdf
from backoffice.services.receipt_service import build_receipt, render_receipt_html, render_receipt_text
from backoffice.services.store import RecordNotFoundError

router: APIRouter = APIRouter(dependencies=[Depends(get_current_user)])
logger = logging.getLogger(__name__)


def _serialize_order(order: Order) -> OrderResponse:
    return OrderResponse(
        id=order.id,
        order_number=order_service.order_number(order),
        customer_name=order.customer_name,
        customer_phone=order.customer_phone,
        phone_display=format_phone(order.customer_phone),
        items=order.items,
        items_summary=format_order_items(order.items),
        order_amount=order.order_amount,
        delivery_fee=order.delivery_fee,
        total_amount=order.total_amount,
        status=order.status,
        status_label=status_label(order.status),
        created_at=order.created_at,
        created_at_display=format_order_date(order.created_at),
        delivery_address=order.delivery_address,
        address_display=format_address(order.delivery_address),
        bairro=resolve_order_bairro(order.bairro, order.delivery_address),
        scheduled_date=order.scheduled_date,
    )


def _load_order(db: Session, order_id: int) -> Order:
    try:
        return order_service.get_order(db, order_id)
    except RecordNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc


@router.get("", response_model=list[OrderResponse])
def list_orders(
    status_filter: OrderStatusValue | None = Query(default=None, alias="status"),
    created_on: date | None = Query(default=None),
    db: Session = Depends(get_db),
) -> list[OrderResponse]:
    orders = order_service.list_orders(db, status=status_filter, created_on=created_on)
    return [_serialize_order(order) for order in orders]


@router.post("", response_model=OrderResponse, status_code=status.HTTP_201_CREATED)
def create_order(payload: OrderCreate, db: Session = Depends(get_db)) -> OrderResponse:
    """Create an order by hand, e.g. a test order from the back-office."""
    try:
        order = order_service.create_order(
            db,
            customer_name=payload.customer_name,
            customer_phone=payload.customer_phone,
            items=[line.model_dump(mode="json", exclude_none=True) for line in payload.items],
            order_amount=payload.order_amount,
            delivery_fee=payload.delivery_fee,
            total_amount=payload.total_amount,
            status=payload.status,
            delivery_address=payload.delivery_address,
            bairro=payload.bairro,
            scheduled_date=payload.scheduled_date,
        )
    except InvalidOrderStatusError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return _serialize_order(order)


@router.get("/scheduled", response_model=list[OrderResponse])
def list_scheduled_orders(
    scheduled_on: date | None = Query(default=None, alias="date"),
    db: Session = Depends(get_db),
) -> list[OrderResponse]:
    return [_serialize_order(order) for order in order_service.list_scheduled_orders(db, scheduled_on)]


@router.get("/{order_id}", response_model=OrderResponse)
def get_order(order_id: int, db: Session = Depends(get_db)) -> OrderResponse:
    return _serialize_order(_load_order(db, order_id))


@router.patch("/{order_id}/status", response_model=OrderResponse)
def update_status(order_id: int, payload: OrderStatusUpdate, db: Session = Depends(get_db)) -> OrderResponse:
    try:
        order = order_service.update_order_status(db, order_id, payload.status)
    except InvalidOrderStatusError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except RecordNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return _serialize_order(order)


@router.get("/{order_id}/items", response_model=list[ReceiptLineResponse])
def get_order_items(order_id: int, db: Session = Depends(get_db)) -> list[ReceiptLineResponse]:
    """Order lines resolved against the current menu."""
    lines = order_service.resolve_receipt_lines(db, _load_order(db, order_id))
    return [
        ReceiptLineResponse(id=line.id, name=line.name, price=line.price, quantity=line.quantity, subtotal=line.subtotal)
        for line in lines
    ]


@router.get("/{order_id}/receipt.html", response_class=HTMLResponse)
def receipt_html(order_id: int, db: Session = Depends(get_db)) -> HTMLResponse:
    receipt = build_receipt(db, _load_order(db, order_id))
    return HTMLResponse(render_receipt_html(receipt))


@router.get("/{order_id}/receipt.txt", response_class=PlainTextResponse)
def receipt_text(order_id: int, db: Session = Depends(get_db)) -> PlainTextResponse:
    receipt = build_receipt(db, _load_order(db, order_id))
    return PlainTextResponse(render_receipt_text(receipt))


@router.get("/{order_id}/receipt.pdf")
def receipt_pdf(order_id: int, db: Session = Depends(get_db)) -> Response:
    receipt = build_receipt(db, _load_order(db, order_id))
    logger.info("[PDF] Rendering receipt for order id=%s.", order_id)
    return Response(
        content=render_receipt_pdf(receipt),
        media_type="application/pdf",
        headers={"Content-Disposition": f'inline; filename="pedido_{receipt.number}.pdf"'},
    )
