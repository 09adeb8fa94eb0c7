"""Menu item and category API schemas."""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from backoffice.schemas.common import MoveRequest, NotificationResponse


class CategoryCreate(BaseModel):
    """Payload for creating a menu category; display_order defaults to the end."""

    name: str = Field(min_length=1)
    description: str | None = None
    display_order: int | None = Field(default=None, ge=0)


class CategoryUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1)
    description: str | None = None
    display_order: int | None = Field(default=None, ge=0)


class CategoryResponse(BaseModel):
    """Serialized menu category."""

    id: int
    name: str
    description: str | None
    display_order: int

    model_config = ConfigDict(from_attributes=True)


class CategoryMoveResponse(BaseModel):
    moved: bool
    categories: list[CategoryResponse]
    notifications: list[NotificationResponse]


class MenuItemCreate(BaseModel):
    """Payload for creating a menu item; display_order defaults to the end."""

    name: str = Field(min_length=1)
    description: str | None = None
    price: Decimal = Field(ge=0)
    is_available: bool = True
    category_id: int | None = None
    display_order: int | None = Field(default=None, ge=0)


class MenuItemUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1)
    description: str | None = None
    price: Decimal | None = Field(default=None, ge=0)
    is_available: bool | None = None
    category_id: int | None = None
    display_order: int | None = Field(default=None, ge=0)


class MenuItemResponse(BaseModel):
    """Serialized menu item."""

    id: int
    name: str
    description: str | None
    price: Decimal
    is_available: bool
    category_id: int | None
    display_order: int

    model_config = ConfigDict(from_attributes=True)


class MenuItemMoveRequest(MoveRequest):
    """Move request carrying the same filters as the list view it was issued from."""

    available: bool | None = None
    category_id: int | None = None
    search: str | None = None


class MenuItemMoveResponse(BaseModel):
    moved: bool
    items: list[MenuItemResponse]
    notifications: list[NotificationResponse]


class MenuItemToggleResponse(BaseModel):
    item: MenuItemResponse
    notifications: list[NotificationResponse]
