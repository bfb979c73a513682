"""Response variants returned by every API call.

A call never raises for a network or HTTP outcome. It returns one of the
variants in :data:`ApiResponse`; check which one with ``isinstance`` or a
``match`` statement::

    response = client.get_custom_image(image)
    if isinstance(response, FailedResponse):
        print(response.code, response.message)
    else:
        response.save("card.png")
"""

from __future__ import annotations

import io
from pathlib import Path
from typing import Callable, Iterator, List, Optional, Union

from PIL import Image
from pydantic import BaseModel, ConfigDict, Field, field_validator

from fluxpoint.core.checks import FluxpointError


class _JsonResponse(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    code: int = -1
    message: Optional[str] = None


class FailedResponse(_JsonResponse):
    """Error returned by the API, or ``code=-1`` when the request never got an answer."""

    @classmethod
    def from_transport_error(cls, detail: str) -> "FailedResponse":
        return cls(code=-1, message=detail)


class McServer(_JsonResponse):
    online: bool = False
    icon: Optional[str] = None
    motd: Optional[str] = None
    players_online: int = Field(default=0, alias="playersOnline")
    players_max: int = Field(default=0, alias="playersMax")
    version: Optional[str] = None
    full_query: bool = Field(default=False, alias="fullQuery")
    players: List[str] = Field(default_factory=list)
    status: Optional[str] = None
    raw_icon: Optional[str] = Field(default=None, alias="rawIcon")

    @field_validator("players", mode="before")
    @classmethod
    def _null_players_as_empty(cls, value):
        return [] if value is None else value


class McPlayer(_JsonResponse):
    account_found: bool = Field(default=False, alias="accountFound")
    uuid: Optional[str] = None
    name: Optional[str] = None


class McSkin(_JsonResponse):
    account_found: bool = Field(default=False, alias="accountFound")
    uuid: Optional[str] = None
    name: Optional[str] = None
    head_url: Optional[str] = Field(default=None, alias="headUrl")
    cube_url: Optional[str] = Field(default=None, alias="cubeUrl")
    body_url: Optional[str] = Field(default=None, alias="bodyUrl")
    full_url: Optional[str] = Field(default=None, alias="fullUrl")


class GeneratedImage:
    """Rendered image whose bytes are still on the wire.

    The stream belongs to the caller and can be consumed once, by one reader.
    Use it as a context manager, or call :meth:`read`, :meth:`save` or
    :meth:`close`, so the underlying connection is released.
    """

    code = 200
    message: Optional[str] = None

    def __init__(
        self,
        chunks: Iterator[bytes],
        *,
        close: Callable[[], None],
        content_type: Optional[str] = None,
    ) -> None:
        self._chunks = chunks
        self._close = close
        self._consumed = False
        self._closed = False
        self.content_type = content_type

    def __enter__(self) -> "GeneratedImage":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"GeneratedImage(code={self.code}, content_type={self.content_type!r}, consumed={self._consumed})"

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._close()

    def iter_bytes(self) -> Iterator[bytes]:
        if self._consumed or self._closed:
            raise FluxpointError("Generated image stream was already consumed or closed.")
        self._consumed = True
        try:
            for chunk in self._chunks:
                if chunk:
                    yield chunk
        finally:
            self.close()

    def read(self) -> bytes:
        return b"".join(self.iter_bytes())

    def save(self, path: Union[str, Path]) -> Path:
        target = Path(path)
        with target.open("wb") as handle:
            for chunk in self.iter_bytes():
                handle.write(chunk)
        return target

    def as_image(self):
        """Decode the stream into a ``PIL.Image.Image``."""
        image = Image.open(io.BytesIO(self.read()))
        image.load()
        return image


ApiResponse = Union[GeneratedImage, FailedResponse, McServer, McPlayer, McSkin]


def is_success(response: ApiResponse) -> bool:
    return not isinstance(response, FailedResponse)
