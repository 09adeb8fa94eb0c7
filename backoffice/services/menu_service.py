"""Menu item and category helpers shared by the API routers."""

import logging
from typing import Any

from sqlalchemy import or_
from sqlalchemy.orm import Session

from backoffice.models.menu import MenuCategory, MenuItem
from backoffice.services.notifications import Notifier
from backoffice.services.sequencer import Direction, MoveResult, move_item
from backoffice.services.store import DataStore, RecordNotFoundError

logger = logging.getLogger(__name__)


class CategoryInUseError(Exception):
    """Raised when deleting a category that menu items still reference."""


def list_menu_items(
    db: Session,
    *,
    available: bool | None = None,
    category_id: int | None = None,
    search: str | None = None,
) -> list[MenuItem]:
    """Return menu items sorted by display_order, narrowed by the list-view filters."""
    criteria: list[Any] = []
    if available is not None:
        criteria.append(MenuItem.is_available.is_(available))
    if category_id is not None:
        criteria.append(MenuItem.category_id == category_id)
    if search and search.strip():
        pattern = f"%{search.strip()}%"
        criteria.append(or_(MenuItem.name.ilike(pattern), MenuItem.description.ilike(pattern)))
    return DataStore(db).select(MenuItem, *criteria, order_by=(MenuItem.display_order.asc(), MenuItem.id.asc()))


def get_menu_item(db: Session, item_id: int) -> MenuItem:
    item = db.get(MenuItem, item_id)
    if item is None:
        raise RecordNotFoundError("Menu item not found")
    return item


def _ensure_category_exists(db: Session, category_id: int | None) -> None:
    if category_id is not None and db.get(MenuCategory, category_id) is None:
        raise RecordNotFoundError("Category not found")


def create_menu_item(
    db: Session,
    *,
    name: str,
    description: str | None,
    price: Any,
    is_available: bool = True,
    category_id: int | None = None,
    display_order: int | None = None,
) -> MenuItem:
    """Create a menu item; without display_order it goes last in its category."""
    _ensure_category_exists(db, category_id)
    store = DataStore(db)
    if display_order is None:
        scope = MenuItem.category_id.is_(None) if category_id is None else MenuItem.category_id == category_id
        display_order = store.next_display_order(MenuItem, scope)
    item = store.insert(
        MenuItem,
        {
            "name": name,
            "description": description,
            "price": price,
            "is_available": is_available,
            "category_id": category_id,
            "display_order": display_order,
        },
    )
    logger.info("[MENU] Created menu item id=%s at display_order=%s.", item.id, item.display_order)
    return item


def update_menu_item(db: Session, item_id: int, fields: dict[str, Any]) -> MenuItem:
    if "category_id" in fields:
        _ensure_category_exists(db, fields["category_id"])
    item = DataStore(db).update(MenuItem, item_id, fields)
    if item is None:
        raise RecordNotFoundError("Menu item not found")
    return item


def toggle_availability(db: Session, item_id: int, notifier: Notifier) -> MenuItem:
    """Flip is_available and report the new state."""
    item = get_menu_item(db, item_id)
    new_status = not item.is_available
    item = DataStore(db).update(MenuItem, item_id, {"is_available": new_status})
    if new_status:
        notifier.success("Item ativado", "O item foi ativado com sucesso.")
    else:
        notifier.success("Item desativado", "O item foi desativado com sucesso.")
    return item


def delete_menu_item(db: Session, item_id: int) -> None:
    if not DataStore(db).delete(MenuItem, item_id):
        raise RecordNotFoundError("Menu item not found")
    logger.info("[MENU] Deleted menu item id=%s.", item_id)


def move_menu_item(
    db: Session,
    item_id: int,
    direction: Direction | str,
    notifier: Notifier,
    *,
    available: bool | None = None,
    category_id: int | None = None,
    search: str | None = None,
) -> tuple[MoveResult, list[MenuItem]]:
    """Swap an item with its neighbour in the filtered list and return the re-fetched list."""
    filters: dict[str, Any] = {"available": available, "category_id": category_id, "search": search}
    records = list_menu_items(db, **filters)
    result = move_item(DataStore(db), MenuItem, records, item_id, direction, notifier, label="os itens")
    return result, list_menu_items(db, **filters)


def list_categories(db: Session) -> list[MenuCategory]:
    return DataStore(db).select(MenuCategory, order_by=(MenuCategory.display_order.asc(), MenuCategory.id.asc()))


def create_category(db: Session, *, name: str, description: str | None, display_order: int | None = None) -> MenuCategory:
    store = DataStore(db)
    if display_order is None:
        display_order = store.next_display_order(MenuCategory)
    category = store.insert(MenuCategory, {"name": name, "description": description, "display_order": display_order})
    logger.info("[MENU] Created category id=%s at display_order=%s.", category.id, category.display_order)
    return category


def update_category(db: Session, category_id: int, fields: dict[str, Any]) -> MenuCategory:
    category = DataStore(db).update(MenuCategory, category_id, fields)
    if category is None:
        raise RecordNotFoundError("Category not found")
    return category


def delete_category(db: Session, category_id: int) -> None:
    """Delete a category unless menu items still point at it."""
    if db.get(MenuCategory, category_id) is None:
        raise RecordNotFoundError("Category not found")
    if DataStore(db).select(MenuItem, MenuItem.category_id == category_id):
        raise CategoryInUseError(
            "Existem itens associados a esta categoria. Remova ou altere a categoria dos itens primeiro."
        )
    DataStore(db).delete(MenuCategory, category_id)
    logger.info("[MENU] Deleted category id=%s.", category_id)


def move_category(
    db: Session,
    category_id: int,
    direction: Direction | str,
    notifier: Notifier,
) -> tuple[MoveResult, list[MenuCategory]]:
    records = list_categories(db)
    result = move_item(DataStore(db), MenuCategory, records, category_id, direction, notifier, label="as categorias")
    return result, list_categories(db)
