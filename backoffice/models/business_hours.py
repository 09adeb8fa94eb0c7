"""Business-hours ORM model."""

from sqlalchemy import Boolean, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from backoffice.db.base import Base

DAY_NAMES: tuple[str, ...] = (
    "Domingo",
    "Segunda-feira",
    "Terça-feira",
    "Quarta-feira",
    "Quinta-feira",
    "Sexta-feira",
    "Sábado",
)


class BusinessHour(Base):
    """Opening window for one weekday (0 = Domingo)."""

    __tablename__ = "business_hours"

    id: Mapped[int] = mapped_column(primary_key=True)
    weekday: Mapped[int] = mapped_column(Integer, nullable=False, unique=True)
    open_time: Mapped[str] = mapped_column(String(5), nullable=False, default="08:00")
    close_time: Mapped[str] = mapped_column(String(5), nullable=False, default="18:00")
    is_open: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    display_order: Mapped[int] = mapped_column(Integer, nullable=False, default=0, index=True)

    @property
    def day_name(self) -> str:
        if 0 <= self.weekday < len(DAY_NAMES):
            return DAY_NAMES[self.weekday]
        return str(self.weekday)
