"""Schema exports."""

from backoffice.schemas.auth import AuthUserResponse, LoginRequest, ProfileUpdate, TokenResponse
from backoffice.schemas.common import MoveRequest, NotificationResponse
from backoffice.schemas.menu import (
    CategoryCreate,
    CategoryResponse,
    CategoryUpdate,
    MenuItemCreate,
    MenuItemResponse,
    MenuItemUpdate,
)
from backoffice.schemas.order import OrderCreate, OrderLine, OrderResponse, OrderStatusUpdate

__all__ = [
    "AuthUserResponse",
    "LoginRequest",
    "ProfileUpdate",
    "TokenResponse",
    "MoveRequest",
    "NotificationResponse",
    "CategoryCreate",
    "CategoryResponse",
    "CategoryUpdate",
    "MenuItemCreate",
    "MenuItemResponse",
    "MenuItemUpdate",
    "OrderCreate",
    "OrderLine",
    "OrderResponse",
    "OrderStatusUpdate",
]
