"""Drawable layers for custom images.

Every drawable serializes to an object carrying a ``type`` discriminator:

    bitmap    Rectangle, filled with a color
    url       UrlImage, a bitmap fetched by the API from a URL
    circle    Circle
    triangle  Triangle, cut along one of its corners
    svg       Svg path
    icon      Icon from an icon set (``set:name``)

Setters validate on assignment and return the same instance, so layers can be
built with chained calls. Circle, Svg and Icon have no width or height: calling
``with_width``/``with_height`` on them raises ``ValueError``.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, ClassVar, Literal, Optional, Union

from pydantic import Field, ValidationInfo, field_validator

from fluxpoint.image.color import CYAN, ColorObject
from fluxpoint.image.model import PayloadModel

MAX_DIMENSION = 3000


class Cut(str, Enum):
    TOP_LEFT = "TopLeft"
    TOP_RIGHT = "TopRight"
    BOTTOM_LEFT = "BottomLeft"
    BOTTOM_RIGHT = "BottomRight"


class DrawableBase(PayloadModel):
    type: str
    x: int = 0
    y: int = 0
    width: int = 1
    height: int = 1
    color: Optional[ColorObject] = CYAN
    skip: bool = False

    color_optional: ClassVar[bool] = False

    def with_x(self, x: int):
        self.x = x
        return self

    def with_y(self, y: int):
        self.y = y
        return self

    def with_width(self, width: int):
        self.width = width
        return self

    def with_height(self, height: int):
        self.height = height
        return self

    def with_color(self, color: Optional[ColorObject]):
        if color is None and not self.color_optional:
            raise ValueError(f"Color may not be null on drawable type {type(self).__name__}.")
        self.color = color
        return self

    def with_skip(self, skip: bool = True):
        """Keep the layer in the payload but let the API skip it while rendering."""
        self.skip = skip
        return self


class _UnsizedDrawable(DrawableBase):
    """Drawable sized by ``radius``/``size``.

    ``width`` and ``height`` stay on the wire as the fixed value 1. Keyword
    construction and the setters reject them; parsing a payload accepts the
    fixed value only.
    """

    size_hint: ClassVar[str] = "size"

    def __init__(self, **data) -> None:
        for name in ("width", "height"):
            if name in data:
                raise self._dimension_error(name)
        super().__init__(**data)

    @classmethod
    def _dimension_error(cls, name: str) -> ValueError:
        return ValueError(
            f"Cannot use {name} on drawable type {cls.__name__}; use {cls.size_hint} instead."
        )

    def with_width(self, width: int):
        raise self._dimension_error("width")

    def with_height(self, height: int):
        raise self._dimension_error("height")

    @field_validator("width", "height")
    @classmethod
    def _reject_dimensions(cls, value: int, info: ValidationInfo) -> int:
        if value != 1:
            raise cls._dimension_error(info.field_name)
        return value

    @field_validator("color")
    @classmethod
    def _require_color(cls, value: Optional[ColorObject]) -> ColorObject:
        if value is None:
            raise ValueError(f"Color may not be null on drawable type {cls.__name__}.")
        return value


class Rectangle(DrawableBase):
    """Filled rectangle. Used as the base layer it defines the canvas size."""

    type: Literal["bitmap"] = "bitmap"
    width: int = Field(default=1, ge=1, le=MAX_DIMENSION)
    height: int = Field(default=1, ge=1, le=MAX_DIMENSION)
    color: ColorObject = CYAN
    round: int = Field(default=0, ge=0)

    def with_round(self, round: int) -> "Rectangle":
        self.round = round
        return self


class UrlImage(DrawableBase):
    """Bitmap downloaded by the API. ``color`` is an optional background fill."""

    type: Literal["url"] = "url"
    width: int = Field(default=1, ge=1, le=MAX_DIMENSION)
    height: int = Field(default=1, ge=1, le=MAX_DIMENSION)
    color: Optional[ColorObject] = None
    url: Optional[str] = Field(default=None, min_length=1)
    cache: bool = False
    round: int = Field(default=0, ge=0)

    color_optional: ClassVar[bool] = True

    def with_url(self, url: str) -> "UrlImage":
        if url is None:
            raise ValueError("URL may not be null.")
        self.url = url
        return self

    def with_cache(self, cache: bool) -> "UrlImage":
        self.cache = cache
        return self

    def with_round(self, round: int) -> "UrlImage":
        self.round = round
        return self

    def _require_complete(self) -> None:
        if not self.url:
            raise ValueError("URL may not be null nor empty on drawable type UrlImage.")


class Circle(_UnsizedDrawable):
    type: Literal["circle"] = "circle"
    radius: int = Field(default=1, ge=1)

    size_hint: ClassVar[str] = "radius"

    def with_radius(self, radius: int) -> "Circle":
        self.radius = radius
        return self


class Triangle(DrawableBase):
    type: Literal["triangle"] = "triangle"
    width: int = Field(default=1, ge=0)
    height: int = Field(default=1, ge=0)
    color: ColorObject = CYAN
    cut: Cut = Cut.TOP_LEFT

    def with_cut(self, cut: Cut) -> "Triangle":
        if cut is None:
            raise ValueError("Cut may not be null.")
        self.cut = cut
        return self


class Svg(_UnsizedDrawable):
    type: Literal["svg"] = "svg"
    path: Optional[str] = Field(default=None, min_length=1)
    size: int = Field(default=1, ge=1)

    def with_path(self, path: str) -> "Svg":
        if path is None:
            raise ValueError("Path may not be null.")
        self.path = path
        return self

    def with_size(self, size: int) -> "Svg":
        self.size = size
        return self

    def _require_complete(self) -> None:
        if not self.path:
            raise ValueError("Path may not be null nor empty on drawable type Svg.")


class Icon(_UnsizedDrawable):
    """Icon referenced as ``set:name``, e.g. ``mdi:account``."""

    type: Literal["icon"] = "icon"
    icon: Optional[str] = None
    size: int = Field(default=1, ge=1)

    @field_validator("icon")
    @classmethod
    def _validate_icon_name(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        icon_set, _, name = value.partition(":")
        if not icon_set or not name:
            raise ValueError(f"Icon must be formatted as 'set:name', got {value!r}.")
        return value

    def with_icon(self, icon: str) -> "Icon":
        if icon is None:
            raise ValueError("Icon may not be null.")
        self.icon = icon
        return self

    def with_size(self, size: int) -> "Icon":
        self.size = size
        return self

    def _require_complete(self) -> None:
        if not self.icon:
            raise ValueError("Icon may not be null nor empty on drawable type Icon.")


Drawable = Annotated[
    Union[Rectangle, UrlImage, Circle, Triangle, Svg, Icon],
    Field(discriminator="type"),
]
