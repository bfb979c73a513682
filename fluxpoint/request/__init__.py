"""Request dispatching and response variants."""

from fluxpoint.request.handler import RequestHandler, get_request_handler, reset_request_handler_cache
from fluxpoint.request.responses import (
    ApiResponse,
    FailedResponse,
    GeneratedImage,
    McPlayer,
    McServer,
    McSkin,
    is_success,
)

__all__ = [
    "ApiResponse",
    "FailedResponse",
    "GeneratedImage",
    "McPlayer",
    "McServer",
    "McSkin",
    "RequestHandler",
    "get_request_handler",
    "is_success",
    "reset_request_handler_cache",
]
