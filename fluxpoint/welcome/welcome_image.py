"""Predefined welcome card descriptor."""

from __future__ import annotations

from typing import List, Optional, Union

from pydantic import ConfigDict, Field

from fluxpoint.core.checks import not_empty
from fluxpoint.image.color import ColorObject
from fluxpoint.image.model import PayloadModel


class WelcomeImage(PayloadModel):
    model_config = ConfigDict(frozen=True)

    username: str = Field(min_length=1)
    avatar: str = Field(min_length=1)
    background_color: ColorObject = Field(alias="background")
    members_text: Optional[str] = Field(default=None, alias="members")
    icon: Optional[str] = None
    banner: Optional[str] = None
    welcome_color: Optional[ColorObject] = Field(default=None, alias="color_welcome")
    username_color: Optional[ColorObject] = Field(default=None, alias="color_username")
    members_color: Optional[ColorObject] = Field(default=None, alias="color_members")


class WelcomeImageBuilder:
    def __init__(self) -> None:
        self._username: Optional[str] = None
        self._avatar: Optional[str] = None
        self._background_color: Optional[ColorObject] = None
        self._members_text: Optional[str] = None
        self._icon: Optional[str] = None
        self._banner: Optional[str] = None
        self._welcome_color: Optional[ColorObject] = None
        self._username_color: Optional[ColorObject] = None
        self._members_color: Optional[ColorObject] = None

    def with_username(self, username: str) -> "WelcomeImageBuilder":
        self._username = not_empty(username, "Username")
        return self

    def with_avatar(self, avatar: str) -> "WelcomeImageBuilder":
        """Avatar URL of the member that joined."""
        self._avatar = not_empty(avatar, "Avatar")
        return self

    def with_background_color(self, background_color: Union[ColorObject, str]) -> "WelcomeImageBuilder":
        self._background_color = _to_color(background_color, "Background color")
        return self

    def with_members_text(self, members_text: Optional[str]) -> "WelcomeImageBuilder":
        self._members_text = members_text
        return self

    def with_icon(self, icon: Optional[str]) -> "WelcomeImageBuilder":
        """Icon name known to the API, or an image URL."""
        self._icon = icon
        return self

    def with_banner(self, banner: Optional[str]) -> "WelcomeImageBuilder":
        """Banner name known to the API, or an image URL."""
        self._banner = banner
        return self

    def with_welcome_color(self, welcome_color: Optional[ColorObject]) -> "WelcomeImageBuilder":
        self._welcome_color = welcome_color
        return self

    def with_username_color(self, username_color: Optional[ColorObject]) -> "WelcomeImageBuilder":
        self._username_color = username_color
        return self

    def with_members_color(self, members_color: Optional[ColorObject]) -> "WelcomeImageBuilder":
        self._members_color = members_color
        return self

    def build(self) -> WelcomeImage:
        missing: List[str] = []
        if not self._username:
            missing.append("Username")
        if not self._avatar:
            missing.append("Avatar")
        if self._background_color is None:
            missing.append("Background color")
        if missing:
            raise ValueError(f"Missing required welcome image values: {', '.join(missing)}.")

        return WelcomeImage(
            username=self._username,
            avatar=self._avatar,
            background_color=self._background_color,
            members_text=self._members_text,
            icon=self._icon,
            banner=self._banner,
            welcome_color=self._welcome_color,
            username_color=self._username_color,
            members_color=self._members_color,
        )


def _to_color(value: Union[ColorObject, str, None], name: str) -> ColorObject:
    if isinstance(value, ColorObject):
        return value
    if value is None:
        raise ValueError(f"{name} may not be null.")
    return ColorObject.from_string(value)
