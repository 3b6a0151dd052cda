"""API utilities: response helpers and JSON rendering."""

from src.api.utils.http_helpers import bad_request, forbidden, ok, server_error
from src.api.utils.responses import ORJSONResponse, render_http_response

__all__ = [
    "ORJSONResponse",
    "bad_request",
    "forbidden",
    "ok",
    "render_http_response",
    "server_error",
]
