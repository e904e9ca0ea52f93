"""Abstract interface for user notifications."""

from abc import ABC, abstractmethod

from dsvflow.core.entities.notification import Notification


class INotifier(ABC):
    """Receives fire-and-forget notifications; must not raise."""

    @abstractmethod
    def notify(self, notification: Notification) -> None:
        """Deliver a notification."""
        pass
