"""Application models package."""

from backoffice.models.business_hours import DAY_NAMES, BusinessHour
from backoffice.models.customer import Customer
from backoffice.models.delivery import DeliveryZone, Neighborhood
from backoffice.models.menu import MenuCategory, MenuItem
from backoffice.models.order import Order
from backoffice.models.restaurant_setting import RestaurantSetting
from backoffice.models.user import User

__all__ = [
    "User", "MenuCategory", "MenuItem", "BusinessHour", "DAY_NAMES", "Neighborhood", "DeliveryZone",
    "Customer", "Order", "RestaurantSetting",
]
