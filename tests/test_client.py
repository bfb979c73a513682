from __future__ import annotations

from concurrent.futures import Future, ThreadPoolExecutor
from typing import List

import httpx
import pytest

from fluxpoint.client import Client
from fluxpoint.core.checks import FluxpointError
from fluxpoint.core.config import get_settings
from fluxpoint.image.color import ColorObject
from fluxpoint.image.custom import CustomImageBuilder
from fluxpoint.image.drawables import Rectangle
from fluxpoint.mc.requests import McRequest
from fluxpoint.request.handler import RequestHandler
from fluxpoint.request.responses import FailedResponse, GeneratedImage, McPlayer, McServer, McSkin
from fluxpoint.welcome.welcome_image import WelcomeImageBuilder


class _FakeApi:
    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path
        if path.startswith("/gen/"):
            return httpx.Response(200, content=b"image-bytes")
        if path == "/mc/ping":
            return httpx.Response(200, json={"online": False, "code": 200})
        if path == "/mc/uuid":
            return httpx.Response(200, json={"accountFound": True, "uuid": "u-1", "name": "Notch"})
        if path == "/mc/skin":
            return httpx.Response(200, json={"accountFound": False})
        return httpx.Response(404, json={"code": 404, "message": "not found"})


def _build_client(api: _FakeApi, token: str | None = "T", **kwargs) -> Client:
    handler = RequestHandler(
        base_url="https://api.fluxpoint.test",
        client=httpx.Client(transport=httpx.MockTransport(api)),
    )
    return Client(token, handler=handler, **kwargs)


def _custom_image():
    base = Rectangle().with_width(10).with_height(10).with_color(ColorObject.from_rgb(0, 0, 0))
    return CustomImageBuilder.create_base(base).build()


def _welcome_image():
    return (
        WelcomeImageBuilder()
        .with_username("Someone")
        .with_avatar("https://host/a.png")
        .with_background_color("#000000")
        .build()
    )


def test_blocking_calls_return_response_variants() -> None:
    api = _FakeApi()
    with _build_client(api) as client:
        custom = client.get_custom_image(_custom_image())
        welcome = client.get_welcome_image(_welcome_image())
        server = client.get_mc_server(McRequest.server("mc.example.com"))
        player = client.get_mc_player(McRequest.player("Notch"))
        skin = client.get_mc_skin(McRequest.skin("Notch"))

        assert isinstance(custom, GeneratedImage)
        assert custom.read() == b"image-bytes"
        assert isinstance(welcome, GeneratedImage)
        welcome.close()
        assert isinstance(server, McServer)
        assert isinstance(player, McPlayer)
        assert player.uuid == "u-1"
        assert isinstance(skin, McSkin)
        assert skin.account_found is False

    assert [request.url.path for request in api.requests] == [
        "/gen/custom",
        "/gen/welcome",
        "/mc/ping",
        "/mc/uuid",
        "/mc/skin",
    ]


def test_queued_calls_complete_with_the_blocking_result() -> None:
    api = _FakeApi()
    with _build_client(api) as client:
        futures = [
            client.queue_custom_image(_custom_image()),
            client.queue_welcome_image(_welcome_image()),
            client.queue_mc_server(McRequest.server("mc.example.com")),
            client.queue_mc_player(McRequest.player("Notch")),
            client.queue_mc_skin(McRequest.skin("Notch")),
        ]
        results = [future.result(timeout=5) for future in futures]

        assert all(isinstance(future, Future) for future in futures)
        assert isinstance(results[0], GeneratedImage)
        assert results[0].read() == b"image-bytes"
        results[1].close()
        assert isinstance(results[2], McServer)
        assert isinstance(results[3], McPlayer)
        assert isinstance(results[4], McSkin)


def test_queued_calls_use_injected_executor() -> None:
    api = _FakeApi()
    executor = ThreadPoolExecutor(max_workers=1)
    try:
        client = _build_client(api, executor=executor)
        result = client.queue_mc_player(McRequest.player("Notch")).result(timeout=5)
        assert isinstance(result, McPlayer)
        client.close()
        assert executor.submit(lambda: 1).result(timeout=5) == 1
    finally:
        executor.shutdown(wait=True)


def test_calls_without_token_raise() -> None:
    api = _FakeApi()
    with _build_client(api, token=None) as client:
        assert client.has_token is False
        with pytest.raises(FluxpointError):
            client.get_mc_player(McRequest.player("Notch"))

        future = client.queue_mc_player(McRequest.player("Notch"))
        with pytest.raises(FluxpointError):
            future.result(timeout=5)

    assert api.requests == []


def test_token_replacement_applies_to_following_calls() -> None:
    api = _FakeApi()
    with _build_client(api, token=None) as client:
        client.set_token("first")
        client.get_mc_player(McRequest.player("Notch"))
        client.set_token("second")
        client.get_mc_player(McRequest.player("Notch"))

    assert [request.headers["Authorization"] for request in api.requests] == ["first", "second"]


def test_empty_token_is_rejected() -> None:
    with pytest.raises(ValueError):
        Client("")


def test_non_ascii_token_is_rejected() -> None:
    with _build_client(_FakeApi(), token=None) as client:
        with pytest.raises(ValueError, match="ASCII"):
            client.set_token("t\u00f6k\u00e9n")
        assert client.has_token is False


def test_missing_request_is_rejected() -> None:
    with _build_client(_FakeApi()) as client:
        with pytest.raises(ValueError):
            client.get_custom_image(None)


def test_remote_failure_is_returned_from_future() -> None:
    def _responder(request: httpx.Request) -> httpx.Response:
        return httpx.Response(401, json={"code": 401, "message": "invalid token"})

    handler = RequestHandler(client=httpx.Client(transport=httpx.MockTransport(_responder)))
    with Client("bad", handler=handler) as client:
        result = client.queue_custom_image(_custom_image()).result(timeout=5)

    assert result == FailedResponse(code=401, message="invalid token")


def test_client_from_settings(monkeypatch) -> None:
    monkeypatch.setenv("FLUXPOINT_API_TOKEN", "env-token")
    monkeypatch.setenv("FLUXPOINT_API_BASE_URL", "https://api.fluxpoint.test/")
    get_settings.cache_clear()

    try:
        client = Client.from_settings()
        assert client.has_token is True
        assert client._handler.base_url == "https://api.fluxpoint.test"
        client.close()
    finally:
        get_settings.cache_clear()
