"""Dashboard endpoint."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from backoffice.core.security import get_current_user
from backoffice.db.session import get_db
from backoffice.schemas.dashboard import DashboardStats
from backoffice.services.dashboard_service import get_dashboard_stats

router: APIRouter = APIRouter(dependencies=[Depends(get_current_user)])


@router.get("", response_model=DashboardStats)
def dashboard(db: Session = Depends(get_db)) -> DashboardStats:
    return DashboardStats(**get_dashboard_stats(db))
