"""Menu item and category endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.orm import Session

from backoffice.core.security import get_current_user
from backoffice.db.session import get_db
from backoffice.schemas.common import MoveRequest
from backoffice.schemas.menu import (
    CategoryCreate,
    CategoryMoveResponse,
    CategoryResponse,
    CategoryUpdate,
    MenuItemCreate,
    MenuItemMoveRequest,
    MenuItemMoveResponse,
    MenuItemResponse,
    MenuItemToggleResponse,
    MenuItemUpdate,
)
from backoffice.services import menu_service
from backoffice.services.menu_service import CategoryInUseError
from backoffice.services.notifications import Notifier
from backoffice.services.store import RecordNotFoundError

router: APIRouter = APIRouter(dependencies=[Depends(get_current_user)])


def _not_found(exc: RecordNotFoundError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))


@router.get("/items", response_model=list[MenuItemResponse])
def list_items(
    available: bool | None = Query(default=None),
    category_id: int | None = Query(default=None),
    search: str | None = Query(default=None),
    db: Session = Depends(get_db),
) -> list[MenuItemResponse]:
    items = menu_service.list_menu_items(db, available=available, category_id=category_id, search=search)
    return [MenuItemResponse.model_validate(item) for item in items]


@router.post("/items", response_model=MenuItemResponse, status_code=status.HTTP_201_CREATED)
def create_item(payload: MenuItemCreate, db: Session = Depends(get_db)) -> MenuItemResponse:
    try:
        item = menu_service.create_menu_item(db, **payload.model_dump())
    except RecordNotFoundError as exc:
        raise _not_found(exc) from exc
    return MenuItemResponse.model_validate(item)


@router.patch("/items/{item_id}", response_model=MenuItemResponse)
def update_item(item_id: int, payload: MenuItemUpdate, db: Session = Depends(get_db)) -> MenuItemResponse:
    try:
        item = menu_service.update_menu_item(db, item_id, payload.model_dump(exclude_unset=True))
    except RecordNotFoundError as exc:
        raise _not_found(exc) from exc
    return MenuItemResponse.model_validate(item)


@router.post("/items/{item_id}/toggle-availability", response_model=MenuItemToggleResponse)
def toggle_item_availability(item_id: int, db: Session = Depends(get_db)) -> MenuItemToggleResponse:
    notifier = Notifier()
    try:
        item = menu_service.toggle_availability(db, item_id, notifier)
    except RecordNotFoundError as exc:
        raise _not_found(exc) from exc
    return MenuItemToggleResponse(item=MenuItemResponse.model_validate(item), notifications=notifier.as_payload())


@router.delete("/items/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_item(item_id: int, db: Session = Depends(get_db)) -> Response:
    try:
        menu_service.delete_menu_item(db, item_id)
    except RecordNotFoundError as exc:
        raise _not_found(exc) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/items/{item_id}/move", response_model=MenuItemMoveResponse)
def move_item(item_id: int, payload: MenuItemMoveRequest, db: Session = Depends(get_db)) -> MenuItemMoveResponse:
    """Move an item one position within the list filtered by the request's filters."""
    notifier = Notifier()
    result, items = menu_service.move_menu_item(
        db,
        item_id,
        payload.direction,
        notifier,
        available=payload.available,
        category_id=payload.category_id,
        search=payload.search,
    )
    return MenuItemMoveResponse(
        moved=result.moved,
        items=[MenuItemResponse.model_validate(item) for item in items],
        notifications=notifier.as_payload(),
    )


@router.get("/categories", response_model=list[CategoryResponse])
def list_categories(db: Session = Depends(get_db)) -> list[CategoryResponse]:
    return [CategoryResponse.model_validate(category) for category in menu_service.list_categories(db)]


@router.post("/categories", response_model=CategoryResponse, status_code=status.HTTP_201_CREATED)
def create_category(payload: CategoryCreate, db: Session = Depends(get_db)) -> CategoryResponse:
    return CategoryResponse.model_validate(menu_service.create_category(db, **payload.model_dump()))


@router.patch("/categories/{category_id}", response_model=CategoryResponse)
def update_category(category_id: int, payload: CategoryUpdate, db: Session = Depends(get_db)) -> CategoryResponse:
    try:
        category = menu_service.update_category(db, category_id, payload.model_dump(exclude_unset=True))
    except RecordNotFoundError as exc:
        raise _not_found(exc) from exc
    return CategoryResponse.model_validate(category)


@router.delete("/categories/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_category(category_id: int, db: Session = Depends(get_db)) -> Response:
    try:
        menu_service.delete_category(db, category_id)
    except RecordNotFoundError as exc:
        raise _not_found(exc) from exc
    except CategoryInUseError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc)) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/categories/{category_id}/move", response_model=CategoryMoveResponse)
def move_category(category_id: int, payload: MoveRequest, db: Session = Depends(get_db)) -> CategoryMoveResponse:
    notifier = Notifier()
    result, categories = menu_service.move_category(db, category_id, payload.direction, notifier)
    return CategoryMoveResponse(
        moved=result.moved,
        categories=[CategoryResponse.model_validate(category) for category in categories],
        notifications=notifier.as_payload(),
    )
