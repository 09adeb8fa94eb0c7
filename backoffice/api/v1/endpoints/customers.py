"""Customer endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.orm import Session

from backoffice.core.security import get_current_user
from backoffice.db.session import get_db
from backoffice.models.customer import Customer
from backoffice.schemas.customer import CustomerCreate, CustomerResponse, CustomerUpdate
from backoffice.services import customer_service
from backoffice.services.address import format_address, get_bairro_from_address
from backoffice.services.customer_service import DuplicateCustomerError
from backoffice.services.formatting import format_phone
from backoffice.services.store import RecordNotFoundError

router: APIRouter = APIRouter(dependencies=[Depends(get_current_user)])


def _serialize_customer(customer: Customer) -> CustomerResponse:
    return CustomerResponse(
        id=customer.id,
        phone=customer.phone,
        phone_display=format_phone(customer.phone),
        name=customer.name,
        address=customer.address,
        address_display=format_address(customer.address),
        bairro=get_bairro_from_address(customer.address),
        last_order_date=customer.last_order_date,
        created_at=customer.created_at,
    )


@router.get("", response_model=list[CustomerResponse])
def list_customers(search: str | None = Query(default=None), db: Session = Depends(get_db)) -> list[CustomerResponse]:
    return [_serialize_customer(customer) for customer in customer_service.list_customers(db, search=search)]


@router.post("", response_model=CustomerResponse, status_code=status.HTTP_201_CREATED)
def create_customer(payload: CustomerCreate, db: Session = Depends(get_db)) -> CustomerResponse:
    try:
        customer = customer_service.create_customer(db, **payload.model_dump())
    except DuplicateCustomerError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc)) from exc
    return _serialize_customer(customer)


@router.get("/{customer_id}", response_model=CustomerResponse)
def get_customer(customer_id: int, db: Session = Depends(get_db)) -> CustomerResponse:
    try:
        return _serialize_customer(customer_service.get_customer(db, customer_id))
    except RecordNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc


@router.patch("/{customer_id}", response_model=CustomerResponse)
def update_customer(customer_id: int, payload: CustomerUpdate, db: Session = Depends(get_db)) -> CustomerResponse:
    try:
        customer = customer_service.update_customer(db, customer_id, payload.model_dump(exclude_unset=True))
    except DuplicateCustomerError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc)) from exc
    except RecordNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return _serialize_customer(customer)


@router.delete("/{customer_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_customer(customer_id: int, db: Session = Depends(get_db)) -> Response:
    try:
        customer_service.delete_customer(db, customer_id)
    except RecordNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)
