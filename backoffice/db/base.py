"""Shared SQLAlchemy base declarative class and model imports."""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for ORM models."""


# Import model modules so metadata is populated before create_all.
from backoffice.models import business_hours as _business_hours  # noqa: E402,F401
from backoffice.models import customer as _customer  # noqa: E402,F401
from backoffice.models import delivery as _delivery  # noqa: E402,F401
from backoffice.models import menu as _menu  # noqa: E402,F401
from backoffice.models import order as _order  # noqa: E402,F401
from backoffice.models import restaurant_setting as _restaurant_setting  # noqa: E402,F401
from backoffice.models import user as _user  # noqa: E402,F401
