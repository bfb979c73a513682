"""Text layers for custom images."""

from __future__ import annotations

from enum import Enum
from typing import Optional, Tuple, Union

from pydantic import Field, field_validator

from fluxpoint.core.checks import none_empty
from fluxpoint.image.color import BLACK, TRANSPARENT, WHITE, ColorObject
from fluxpoint.image.model import PayloadModel


class TextAlignment(str, Enum):
    LEFT = "l"
    MIDDLE = "m"
    RIGHT = "r"


class TextBase(PayloadModel):
    """Attributes shared by single and multi line texts.

    Outline settings are sent even while ``outline`` is off; the API ignores them then.
    """

    x: int = Field(default=0, ge=0)
    y: int = Field(default=0, ge=0)
    alignment: TextAlignment = Field(default=TextAlignment.LEFT, alias="align")
    size: int = Field(default=1, ge=1)
    font: str = Field(default="Sans Serif", min_length=1)
    color: ColorObject = BLACK
    background_color: ColorObject = Field(default=TRANSPARENT, alias="back")
    bold: bool = False
    italic: bool = False
    underline: bool = False
    weight: int = Field(default=500, ge=0)
    max_width: int = Field(default=0, ge=0, alias="width")
    max_height: int = Field(default=0, ge=0, alias="height")
    outline: bool = False
    outline_width: int = Field(default=5, ge=0, alias="outlinewidth")
    outline_color: ColorObject = Field(default=WHITE, alias="outlinecolor")
    outline_blur: int = Field(default=1, ge=0, alias="outlineblur")

    @staticmethod
    def _not_null(value, name: str) -> None:
        if value is None:
            raise ValueError(f"{name} may not be null.")

    def with_x(self, x: int):
        self.x = x
        return self

    def with_y(self, y: int):
        self.y = y
        return self

    def with_alignment(self, alignment: TextAlignment):
        self._not_null(alignment, "Text alignment")
        self.alignment = alignment
        return self

    def with_size(self, size: int):
        self.size = size
        return self

    def with_font(self, font: str):
        self._not_null(font, "Font")
        self.font = font
        return self

    def with_color(self, color: ColorObject):
        self._not_null(color, "Color")
        self.color = color
        return self

    def with_background_color(self, background_color: ColorObject):
        self._not_null(background_color, "Background color")
        self.background_color = background_color
        return self

    def as_bold(self, bold: bool = True):
        self.bold = bold
        return self

    def as_italic(self, italic: bool = True):
        self.italic = italic
        return self

    def as_underline(self, underline: bool = True):
        self.underline = underline
        return self

    def with_weight(self, weight: int):
        self.weight = weight
        return self

    def with_max_width(self, max_width: int):
        """Wrap or shrink the text to this width. 0 leaves it unbounded."""
        self.max_width = max_width
        return self

    def with_max_height(self, max_height: int):
        self.max_height = max_height
        return self

    def with_outline(self, outline: bool = True):
        self.outline = outline
        return self

    def with_outline_width(self, outline_width: int):
        self.outline_width = outline_width
        return self

    def with_outline_color(self, outline_color: ColorObject):
        self._not_null(outline_color, "Outline color")
        self.outline_color = outline_color
        return self

    def with_outline_blur(self, outline_blur: int):
        self.outline_blur = outline_blur
        return self


class SingleLine(TextBase):
    text: str = Field(min_length=1)

    def __init__(self, text: Optional[str] = None, **data) -> None:
        if text is not None:
            data["text"] = text
        elif "text" not in data:
            raise ValueError("Text may not be null.")
        super().__init__(**data)


class MultiLine(TextBase):
    lines: Tuple[str, ...] = Field(alias="texts")
    line_spacing: float = Field(default=1.0, ge=1, alias="line")

    def __init__(self, *lines: Optional[str], **data) -> None:
        if lines:
            data["texts"] = list(lines)
        super().__init__(**data)

    @field_validator("lines", mode="before")
    @classmethod
    def _validate_lines(cls, value) -> Tuple[str, ...]:
        if value is None:
            raise ValueError("Line array may not be null.")
        return tuple(none_empty(value, "Line array"))

    def with_line_spacing(self, line_spacing: float) -> "MultiLine":
        self.line_spacing = line_spacing
        return self


Text = Union[SingleLine, MultiLine]
