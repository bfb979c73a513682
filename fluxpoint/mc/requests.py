"""Query descriptors for the read-only Minecraft endpoints."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, List, Optional, Tuple

from fluxpoint.core.checks import at_least, not_empty, not_null

QueryParams = List[Tuple[str, str]]


class SkinType(str, Enum):
    BODY = "body"
    CUBE = "cube"
    HEAD = "head"
    FULL = "full"
    ALL = "all"


@dataclass
class PlayerRequest:
    """Looks up the UUID of a player name."""

    name: Optional[str] = None

    path: ClassVar[str] = "/mc/uuid"

    def with_name(self, name: str) -> "PlayerRequest":
        self.name = not_empty(name, "Name")
        return self

    def parameters(self) -> QueryParams:
        return [("player", not_empty(self.name, "Player name"))]


@dataclass
class SkinRequest:
    name: Optional[str] = None
    skin_type: SkinType = SkinType.FULL

    path: ClassVar[str] = "/mc/skin"

    def with_name(self, name: str) -> "SkinRequest":
        self.name = not_empty(name, "Name")
        return self

    def with_type(self, skin_type: SkinType) -> "SkinRequest":
        not_null(skin_type, "Skin type")
        self.skin_type = SkinType(skin_type)
        return self

    def parameters(self) -> QueryParams:
        return [
            ("player", not_empty(self.name, "Player name")),
            ("type", SkinType(self.skin_type).value),
        ]


@dataclass
class ServerRequest:
    host: Optional[str] = None
    port: int = 25565
    icon: bool = False

    path: ClassVar[str] = "/mc/ping"

    def with_host(self, host: str) -> "ServerRequest":
        self.host = not_empty(host, "Host")
        return self

    def with_port(self, port: int) -> "ServerRequest":
        self.port = at_least(port, 0, "Port")
        return self

    def include_icon(self, icon: bool = True) -> "ServerRequest":
        """Ask the API to include the server favicon in the response."""
        self.icon = icon
        return self

    def parameters(self) -> QueryParams:
        return [
            ("host", not_empty(self.host, "Host")),
            ("port", str(at_least(self.port, 0, "Port"))),
            ("icon", "true" if self.icon else "false"),
        ]


class McRequest:
    """Shortcuts that build validated Minecraft request descriptors."""

    @staticmethod
    def player(name: str) -> PlayerRequest:
        return PlayerRequest().with_name(name)

    @staticmethod
    def skin(name: str, skin_type: SkinType = SkinType.FULL) -> SkinRequest:
        return SkinRequest().with_name(name).with_type(skin_type)

    @staticmethod
    def server(host: str, port: int = 25565, icon: bool = False) -> ServerRequest:
        return ServerRequest().with_host(host).with_port(port).include_icon(icon)
