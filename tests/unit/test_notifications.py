"""Tests for the log-backed notifier."""

from unittest.mock import MagicMock

from dsvflow.core.entities.notification import Notification, NotificationLevel
from dsvflow.infrastructure import notifications
from dsvflow.infrastructure.notifications import LogNotifier


class TestLogNotifier:
    def test_success_logged_as_info(self, monkeypatch):
        logger = MagicMock()
        monkeypatch.setattr(notifications, "logger", logger)

        LogNotifier().notify(Notification(title="Client added successfully", description="Acme"))

        logger.info.assert_called_once_with(
            "notification",
            kind="success",
            title="Client added successfully",
            description="Acme",
        )
        logger.warning.assert_not_called()

    def test_warning_logged_as_warning(self, monkeypatch):
        logger = MagicMock()
        monkeypatch.setattr(notifications, "logger", logger)

        LogNotifier().notify(
            Notification(level=NotificationLevel.WARNING, title="Low stock alert: Caps")
        )

        logger.warning.assert_called_once()
        assert logger.warning.call_args.kwargs["kind"] == "warning"
