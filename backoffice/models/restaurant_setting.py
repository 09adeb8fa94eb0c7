"""Restaurant settings model for the single-restaurant back-office."""

from sqlalchemy import Boolean, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from backoffice.db.base import Base


class RestaurantSetting(Base):
    """Singleton settings row (id=1)."""

    __tablename__ = "restaurant_settings"

    id: Mapped[int] = mapped_column(primary_key=True, default=1)
    is_on_vacation: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    vacation_message: Mapped[str | None] = mapped_column(Text, nullable=True)
    default_printer: Mapped[str | None] = mapped_column(String(64), nullable=True)
