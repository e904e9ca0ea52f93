"""Core interfaces (ports) for dependency injection."""

from dsvflow.core.interfaces.kv_store import IKeyValueStore
from dsvflow.core.interfaces.notifier import INotifier
from dsvflow.core.interfaces.report_renderer import IReportRenderer

__all__ = [
    # Storage interfaces
    "IKeyValueStore",
    # Side channels
    "INotifier",
    "IReportRenderer",
]
