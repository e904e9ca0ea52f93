"""API middleware."""

from dsvflow.api.middleware.error_handler import ErrorHandlerMiddleware
from dsvflow.api.middleware.logging import LoggingMiddleware

__all__ = ["LoggingMiddleware", "ErrorHandlerMiddleware"]
