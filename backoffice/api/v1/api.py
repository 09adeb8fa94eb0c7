"""API v1 router composition."""

from fastapi import APIRouter

from backoffice.api.v1.endpoints import auth, business_hours, customers, dashboard, delivery, menu, orders, settings

api_router: APIRouter = APIRouter()
api_router.include_router(auth.router, prefix="/auth", tags=["auth"])
api_router.include_router(menu.router, prefix="/menu", tags=["menu"])
api_router.include_router(business_hours.router, prefix="/business-hours", tags=["business-hours"])
api_router.include_router(delivery.router, prefix="/delivery", tags=["delivery"])
api_router.include_router(customers.router, prefix="/customers", tags=["customers"])
api_router.include_router(orders.router, prefix="/orders", tags=["orders"])
api_router.include_router(settings.router, prefix="/settings", tags=["settings"])
api_router.include_router(dashboard.router, prefix="/dashboard", tags=["dashboard"])
