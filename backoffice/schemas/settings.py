"""Restaurant settings schemas."""

from pydantic import BaseModel, Field

from backoffice.schemas.common import NotificationResponse


class VacationSettings(BaseModel):
    is_on_vacation: bool = False
    vacation_message: str | None = Field(default=None, max_length=500)


class VacationSettingsResponse(VacationSettings):
    closed_days: int = 0
    notifications: list[NotificationResponse] = Field(default_factory=list)


class PrinterSettings(BaseModel):
    default_printer: str


class PrinterSettingsResponse(BaseModel):
    default_printer: str | None
    available_printers: list[str]
    notifications: list[NotificationResponse] = Field(default_factory=list)
