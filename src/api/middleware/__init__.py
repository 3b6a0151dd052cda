"""Cross-cutting request handling: request context and exception handlers."""

from src.api.middleware.error_handler import register_exception_handlers
from src.api.middleware.request_context import RequestContextMiddleware

__all__ = ["RequestContextMiddleware", "register_exception_handlers"]
