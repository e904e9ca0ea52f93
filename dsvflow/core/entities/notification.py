"""Transient user notifications emitted by repositories."""

from enum import Enum

from pydantic import BaseModel


class NotificationLevel(str, Enum):
    """Severity of a notification."""

    SUCCESS = "success"
    WARNING = "warning"
    INFO = "info"


class Notification(BaseModel):
    """A fire-and-forget message about a completed mutation."""

    level: NotificationLevel = NotificationLevel.SUCCESS
    title: str
    description: str | None = None
