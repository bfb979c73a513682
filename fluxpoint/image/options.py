"""Global text defaults applied to texts that leave an option unset."""

from __future__ import annotations

from typing import Optional

from pydantic import Field

from fluxpoint.image.color import ColorObject
from fluxpoint.image.model import PayloadModel
from fluxpoint.image.texts import TextAlignment


class GlobalOptions(PayloadModel):
    text_size: Optional[int] = Field(default=None, ge=1, alias="textSize")
    text_color: Optional[ColorObject] = Field(default=None, alias="textColor")
    text_font: Optional[str] = Field(default=None, min_length=1, alias="textFont")
    outline_width: Optional[int] = Field(default=None, ge=0, alias="textOutlineWidth")
    outline_color: Optional[ColorObject] = Field(default=None, alias="textOutlineColor")
    outline_blur: Optional[int] = Field(default=None, ge=0, alias="textOutlineBlur")
    text_alignment: Optional[TextAlignment] = Field(default=None, alias="textAlign")
    x: Optional[int] = Field(default=None, alias="textX")

    def with_text_size(self, text_size: Optional[int]) -> "GlobalOptions":
        self.text_size = text_size
        return self

    def with_text_color(self, text_color: Optional[ColorObject]) -> "GlobalOptions":
        self.text_color = text_color
        return self

    def with_text_font(self, text_font: Optional[str]) -> "GlobalOptions":
        self.text_font = text_font
        return self

    def with_outline_width(self, outline_width: Optional[int]) -> "GlobalOptions":
        self.outline_width = outline_width
        return self

    def with_outline_color(self, outline_color: Optional[ColorObject]) -> "GlobalOptions":
        self.outline_color = outline_color
        return self

    def with_outline_blur(self, outline_blur: Optional[int]) -> "GlobalOptions":
        self.outline_blur = outline_blur
        return self

    def with_text_alignment(self, text_alignment: Optional[TextAlignment]) -> "GlobalOptions":
        self.text_alignment = text_alignment
        return self

    def with_x(self, x: Optional[int]) -> "GlobalOptions":
        self.x = x
        return self
