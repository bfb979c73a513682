"""Color values accepted by drawables, texts and welcome images."""

from __future__ import annotations

from typing import Sequence

from pydantic import ConfigDict, RootModel, field_validator

from fluxpoint.core.checks import in_range


class ColorObject(RootModel[str]):
    """Immutable color rendered as ``r,g,b``, ``r,g,b,a``, ``#rrggbb`` or a web color name.

    The rendered string is sent to the API as-is; it is never parsed back into channels.
    """

    model_config = ConfigDict(frozen=True)

    @field_validator("root")
    @classmethod
    def _require_value(cls, value: str) -> str:
        if not value:
            raise ValueError("Color may not be empty.")
        return value

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int) -> "ColorObject":
        in_range(r, 0, 255, "Red value")
        in_range(g, 0, 255, "Green value")
        in_range(b, 0, 255, "Blue value")
        return cls(f"{r},{g},{b}")

    @classmethod
    def from_rgba(cls, r: int, g: int, b: int, a: int) -> "ColorObject":
        in_range(r, 0, 255, "Red value")
        in_range(g, 0, 255, "Green value")
        in_range(b, 0, 255, "Blue value")
        in_range(a, 0, 255, "Alpha value")
        return cls(f"{r},{g},{b},{a}")

    @classmethod
    def from_string(cls, color: str) -> "ColorObject":
        if color is None:
            raise ValueError("Color may not be null.")
        return cls(color)

    @classmethod
    def from_color(cls, color: Sequence[int]) -> "ColorObject":
        """Build from an RGB or RGBA tuple such as ``PIL.ImageColor.getrgb`` returns.

        Alpha is dropped; use :meth:`from_rgba` to keep it.
        """
        if color is None or len(color) not in (3, 4):
            raise ValueError("Color must be an (r, g, b) or (r, g, b, a) sequence.")
        return cls.from_rgb(int(color[0]), int(color[1]), int(color[2]))

    @property
    def color(self) -> str:
        return self.root

    def __str__(self) -> str:
        return self.root


BLACK = ColorObject.from_rgb(0, 0, 0)
TRANSPARENT = ColorObject.from_rgba(0, 0, 0, 0)
CYAN = ColorObject.from_rgb(0, 255, 255)
WHITE = ColorObject.from_string("white")
