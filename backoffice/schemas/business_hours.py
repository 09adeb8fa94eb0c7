"""Business-hours API schemas."""

from pydantic import BaseModel, ConfigDict, Field

from backoffice.schemas.common import NotificationResponse

HHMM_PATTERN: str = r"^([01]\d|2[0-3]):([0-5]\d)$"


class BusinessHourCreate(BaseModel):
    weekday: int = Field(ge=0, le=6)
    open_time: str = Field(default="08:00", pattern=HHMM_PATTERN)
    close_time: str = Field(default="18:00", pattern=HHMM_PATTERN)
    is_open: bool = True
    display_order: int | None = Field(default=None, ge=0)


class BusinessHourUpdate(BaseModel):
    weekday: int | None = Field(default=None, ge=0, le=6)
    open_time: str | None = Field(default=None, pattern=HHMM_PATTERN)
    close_time: str | None = Field(default=None, pattern=HHMM_PATTERN)
    is_open: bool | None = None
    display_order: int | None = Field(default=None, ge=0)


class BusinessHourResponse(BaseModel):
    id: int
    weekday: int
    day_name: str
    open_time: str
    close_time: str
    is_open: bool
    display_order: int

    model_config = ConfigDict(from_attributes=True)


class BusinessHourMoveResponse(BaseModel):
    moved: bool
    business_hours: list[BusinessHourResponse]
    notifications: list[NotificationResponse]


class BusinessHourToggleResponse(BaseModel):
    business_hour: BusinessHourResponse
    notifications: list[NotificationResponse]


class ClosedDaysResponse(BaseModel):
    closed_days: int
