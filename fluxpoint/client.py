"""Entry point for talking to the Fluxpoint API.

Each endpoint has a blocking ``get_*`` method that returns an
:data:`~fluxpoint.request.responses.ApiResponse`, and a ``queue_*`` method that
runs the same call on a background thread and returns a
:class:`concurrent.futures.Future` of it.
"""

from __future__ import annotations

from concurrent.futures import Executor, Future, ThreadPoolExecutor
import threading
from typing import Callable, Optional, TypeVar

from fluxpoint.core.checks import FluxpointError, check, not_empty, not_null
from fluxpoint.core.config import get_settings
from fluxpoint.image.custom import CustomImage
from fluxpoint.mc.requests import PlayerRequest, ServerRequest, SkinRequest
from fluxpoint.request.handler import RequestHandler
from fluxpoint.request.responses import ApiResponse
from fluxpoint.welcome.welcome_image import WelcomeImage

RequestT = TypeVar("RequestT")


class Client:
    def __init__(
        self,
        token: Optional[str] = None,
        *,
        handler: Optional[RequestHandler] = None,
        executor: Optional[Executor] = None,
        max_workers: int = 4,
    ) -> None:
        self._token: Optional[str] = None
        if token is not None:
            self.set_token(token)
        self._handler = handler if handler is not None else RequestHandler()
        self._executor = executor
        self._owns_executor = executor is None
        self._max_workers = max(1, max_workers)
        self._executor_lock = threading.Lock()

    @classmethod
    def from_settings(cls) -> "Client":
        settings = get_settings()
        handler = RequestHandler(
            base_url=settings.fluxpoint_api_base_url,
            timeout_seconds=settings.fluxpoint_api_timeout_seconds,
            connect_timeout_seconds=settings.fluxpoint_connect_timeout_seconds,
        )
        token = settings.fluxpoint_api_token.strip() or None
        return cls(token, handler=handler, max_workers=settings.fluxpoint_max_workers)

    def __enter__(self) -> "Client":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_executor and self._executor is not None:
            self._executor.shutdown(wait=False)
        self._handler.close()

    @property
    def has_token(self) -> bool:
        return self._token is not None

    def set_token(self, token: str) -> None:
        """Set or replace the API token used by every following request."""
        token = not_empty(token, "Token")
        check(token.isascii(), "Token may only contain ASCII characters.")
        # Each call reads the token once.
        self._token = token

    def _require_token(self) -> str:
        token = self._token
        if token is None:
            raise FluxpointError("No API token set. Call set_token() before sending requests.")
        return token

    def _get_executor(self) -> Executor:
        executor = self._executor
        if executor is not None:
            return executor
        with self._executor_lock:
            if self._executor is None:
                self._executor = ThreadPoolExecutor(
                    max_workers=self._max_workers,
                    thread_name_prefix="fluxpoint",
                )
            return self._executor

    def _queue(self, call: Callable[[RequestT], ApiResponse], request: RequestT) -> "Future[ApiResponse]":
        return self._get_executor().submit(call, request)

    def get_custom_image(self, image: CustomImage) -> ApiResponse:
        not_null(image, "Custom image")
        return self._handler.custom_image(self._require_token(), image)

    def queue_custom_image(self, image: CustomImage) -> "Future[ApiResponse]":
        return self._queue(self.get_custom_image, image)

    def get_welcome_image(self, image: WelcomeImage) -> ApiResponse:
        not_null(image, "Welcome image")
        return self._handler.welcome_image(self._require_token(), image)

    def queue_welcome_image(self, image: WelcomeImage) -> "Future[ApiResponse]":
        return self._queue(self.get_welcome_image, image)

    def get_mc_server(self, request: ServerRequest) -> ApiResponse:
        not_null(request, "Server request")
        return self._handler.mc_server(self._require_token(), request)

    def queue_mc_server(self, request: ServerRequest) -> "Future[ApiResponse]":
        return self._queue(self.get_mc_server, request)

    def get_mc_player(self, request: PlayerRequest) -> ApiResponse:
        not_null(request, "Player request")
        return self._handler.mc_player(self._require_token(), request)

    def queue_mc_player(self, request: PlayerRequest) -> "Future[ApiResponse]":
        return self._queue(self.get_mc_player, request)

    def get_mc_skin(self, request: SkinRequest) -> ApiResponse:
        not_null(request, "Skin request")
        return self._handler.mc_skin(self._require_token(), request)

    def queue_mc_skin(self, request: SkinRequest) -> "Future[ApiResponse]":
        return self._queue(self.get_mc_skin, request)
