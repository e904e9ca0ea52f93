"""Abstract interface for sales report rendering."""

from abc import ABC, abstractmethod

from dsvflow.core.entities.report import SalesReport


class IReportRenderer(ABC):
    """Interface for sales report rendering implementations."""

    media_type: str = "application/octet-stream"

    @abstractmethod
    def render(self, report: SalesReport) -> bytes:
        """Render a sales report into document bytes."""
        ...
