"""Schemas shared by several routers."""

from typing import Literal

from pydantic import BaseModel


class NotificationResponse(BaseModel):
    title: str
    description: str
    variant: str = "default"


class MoveRequest(BaseModel):
    """Move one row a single position up or down."""

    direction: Literal["up", "down"]
