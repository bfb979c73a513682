"""HTTP dispatcher for the Fluxpoint API.

Every call goes through :meth:`RequestHandler.dispatch`, which turns a
(token, endpoint, payload) triple into one of the response variants. Network
and HTTP failures come back as :class:`FailedResponse` values, never as
exceptions.
"""

from __future__ import annotations

from functools import lru_cache
import itertools
from typing import Any, Dict, Optional, Type, Union

import httpx

from fluxpoint.core.config import get_settings
from fluxpoint.core.logger import get_logger
from fluxpoint.image.custom import CustomImage
from fluxpoint.image.model import PayloadModel
from fluxpoint.mc.requests import PlayerRequest, QueryParams, ServerRequest, SkinRequest
from fluxpoint.request.responses import (
    ApiResponse,
    FailedResponse,
    GeneratedImage,
    McPlayer,
    McServer,
    McSkin,
)
from fluxpoint.welcome.welcome_image import WelcomeImage


BASE_URL = "https://api.fluxpoint.dev"
INVALID_BODY_MESSAGE = "API returned a null/invalid body."
JsonResponseModel = Union[Type[McServer], Type[McPlayer], Type[McSkin]]
Expectation = Union[Type[GeneratedImage], JsonResponseModel]

logger = get_logger("fluxpoint.request.handler")


def _truncate(detail: str, limit: int = 240) -> str:
    detail = detail.strip()
    if len(detail) > limit:
        return detail[:limit] + "..."
    return detail


class RequestHandler:
    def __init__(
        self,
        *,
        base_url: str = BASE_URL,
        timeout_seconds: int = 20,
        connect_timeout_seconds: int = 10,
        client: Optional[httpx.Client] = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._owns_client = client is None
        if client is None:
            client = httpx.Client(
                timeout=httpx.Timeout(
                    max(1, timeout_seconds),
                    connect=max(1, connect_timeout_seconds),
                )
            )
        self._client = client

    @property
    def base_url(self) -> str:
        return self._base_url

    def __enter__(self) -> "RequestHandler":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def custom_image(self, token: str, image: CustomImage) -> ApiResponse:
        return self.dispatch(token, "POST", "/gen/custom", body=image, expect=GeneratedImage)

    def welcome_image(self, token: str, image: WelcomeImage) -> ApiResponse:
        return self.dispatch(token, "POST", "/gen/welcome", body=image, expect=GeneratedImage)

    def mc_server(self, token: str, request: ServerRequest) -> ApiResponse:
        return self.dispatch(token, "GET", request.path, query=request.parameters(), expect=McServer)

    def mc_player(self, token: str, request: PlayerRequest) -> ApiResponse:
        return self.dispatch(token, "GET", request.path, query=request.parameters(), expect=McPlayer)

    def mc_skin(self, token: str, request: SkinRequest) -> ApiResponse:
        return self.dispatch(token, "GET", request.path, query=request.parameters(), expect=McSkin)

    def dispatch(
        self,
        token: str,
        method: str,
        path: str,
        *,
        body: Optional[PayloadModel] = None,
        query: Optional[QueryParams] = None,
        expect: Expectation,
    ) -> ApiResponse:
        """Send one request and classify its outcome.

        A successful image response keeps its connection open: the returned
        :class:`GeneratedImage` owns it until it is read or closed. Any other
        response is read completely and closed before returning.
        """
        headers: Dict[str, str] = {"Authorization": token}
        content: Optional[bytes] = None
        if body is not None:
            headers["Content-Type"] = "application/json"
            content = body.to_json().encode("utf-8")

        try:
            request = self._client.build_request(
                method,
                f"{self._base_url}{path}",
                params=query,
                headers=headers,
                content=content,
            )
            response = self._client.send(request, stream=True)
        except (httpx.HTTPError, httpx.InvalidURL, UnicodeEncodeError) as exc:
            return self._transport_failure(method, path, exc)

        if not response.is_success:
            return self._read_failure(method, path, response)
        if expect is GeneratedImage:
            return self._stream_image(method, path, response)
        return self._read_json(method, path, response, expect)

    def _transport_failure(self, method: str, path: str, exc: Exception) -> FailedResponse:
        logger.warning(
            "fluxpoint_request_failed",
            method=method,
            path=path,
            status_code=-1,
            error=type(exc).__name__,
        )
        return FailedResponse.from_transport_error(f"Encountered {type(exc).__name__}: {exc}")

    def _read_body(self, method: str, path: str, response: httpx.Response) -> Union[bytes, FailedResponse]:
        try:
            return response.read()
        except httpx.HTTPError as exc:
            return self._transport_failure(method, path, exc)
        finally:
            response.close()

    def _read_failure(self, method: str, path: str, response: httpx.Response) -> FailedResponse:
        status_code = response.status_code
        logger.warning("fluxpoint_request_failed", method=method, path=path, status_code=status_code)

        raw = self._read_body(method, path, response)
        if isinstance(raw, FailedResponse):
            return raw
        if not raw.strip():
            return FailedResponse(code=status_code, message=INVALID_BODY_MESSAGE)

        try:
            payload: Any = response.json()
            if not isinstance(payload, dict):
                raise ValueError("error payload is not a JSON object")
            payload.setdefault("code", status_code)
            return FailedResponse.model_validate(payload)
        except ValueError:
            return FailedResponse(code=status_code, message=_truncate(response.text) or INVALID_BODY_MESSAGE)

    def _stream_image(self, method: str, path: str, response: httpx.Response) -> ApiResponse:
        chunks = response.iter_bytes()
        first = b""
        try:
            for chunk in chunks:
                if chunk:
                    first = chunk
                    break
        except httpx.HTTPError as exc:
            response.close()
            return self._transport_failure(method, path, exc)

        if not first:
            response.close()
            logger.warning("fluxpoint_request_empty_body", method=method, path=path, status_code=response.status_code)
            return FailedResponse(code=response.status_code, message=INVALID_BODY_MESSAGE)

        logger.info("fluxpoint_request_completed", method=method, path=path, status_code=response.status_code)
        return GeneratedImage(
            itertools.chain((first,), chunks),
            close=response.close,
            content_type=response.headers.get("content-type"),
        )

    def _read_json(
        self,
        method: str,
        path: str,
        response: httpx.Response,
        model: JsonResponseModel,
    ) -> ApiResponse:
        status_code = response.status_code
        raw = self._read_body(method, path, response)
        if isinstance(raw, FailedResponse):
            return raw
        if not raw.strip():
            logger.warning("fluxpoint_request_empty_body", method=method, path=path, status_code=status_code)
            return FailedResponse(code=status_code, message=INVALID_BODY_MESSAGE)

        try:
            payload: Any = response.json()
            if not isinstance(payload, dict):
                raise ValueError("response payload is not a JSON object")
            payload["code"] = status_code
            parsed = model.model_validate(payload)
        except ValueError as exc:
            logger.warning("fluxpoint_response_invalid", method=method, path=path, status_code=status_code)
            return FailedResponse(code=status_code, message=f"Invalid {model.__name__} payload: {_truncate(str(exc))}")

        logger.info("fluxpoint_request_completed", method=method, path=path, status_code=status_code)
        return parsed


@lru_cache(maxsize=1)
def get_request_handler() -> RequestHandler:
    settings = get_settings()
    return RequestHandler(
        base_url=settings.fluxpoint_api_base_url,
        timeout_seconds=settings.fluxpoint_api_timeout_seconds,
        connect_timeout_seconds=settings.fluxpoint_connect_timeout_seconds,
    )


def reset_request_handler_cache() -> None:
    get_request_handler.cache_clear()
