"""Database seeding helpers."""

import logging

from sqlalchemy.orm import Session

from backoffice.core.config import settings
from backoffice.core.security import get_password_hash
from backoffice.models.restaurant_setting import RestaurantSetting
from backoffice.services.user_service import create_user, get_user_by_email

logger = logging.getLogger(__name__)


def ensure_admin_user(session: Session) -> None:
    """Ensure the configured admin user exists in development only."""
    if settings.app_env != "dev":
        return
    if not settings.admin_email or not settings.admin_password:
        logger.info("[BOOTSTRAP] ADMIN_EMAIL/ADMIN_PASSWORD not set; skipping admin seed.")
        return

    existing_user = get_user_by_email(db=session, email=settings.admin_email)
    if existing_user is not None:
        return

    create_user(
        db=session,
        email=settings.admin_email,
        hashed_password=get_password_hash(settings.admin_password),
        full_name="Administrador",
    )
    logger.warning("[SECURITY] Admin account created for %s. Change the password after first login.", settings.admin_email)


def ensure_restaurant_settings(session: Session) -> RestaurantSetting:
    """Create the singleton settings row when missing."""
    row = session.get(RestaurantSetting, 1)
    if row is None:
        row = RestaurantSetting(id=1, is_on_vacation=False)
        session.add(row)
        session.commit()
        session.refresh(row)
    return row


def ensure_seed_data(session: Session) -> None:
    ensure_restaurant_settings(session)
    ensure_admin_user(session)
