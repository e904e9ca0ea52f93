"""Notifier that writes notifications to the structured log."""

from dsvflow.config import get_logger
from dsvflow.core.entities.notification import Notification, NotificationLevel
from dsvflow.core.interfaces.notifier import INotifier

logger = get_logger(__name__)


class LogNotifier(INotifier):
    """Emits each notification as a log event."""

    def notify(self, notification: Notification) -> None:
        log = logger.warning if notification.level == NotificationLevel.WARNING else logger.info
        log(
            "notification",
            kind=notification.level.value,
            title=notification.title,
            description=notification.description,
        )
