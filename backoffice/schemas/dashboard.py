"""Dashboard schemas."""

from pydantic import BaseModel


class DashboardStats(BaseModel):
    menu_items_available: int
    pending_orders: int
    closed_days: int
    neighborhoods: int
