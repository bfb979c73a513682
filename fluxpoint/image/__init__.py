"""Declarative layers and descriptors for custom images."""

from fluxpoint.image.color import ColorObject
from fluxpoint.image.custom import CustomImage, CustomImageBuilder
from fluxpoint.image.drawables import Circle, Cut, Drawable, Icon, Rectangle, Svg, Triangle, UrlImage
from fluxpoint.image.options import GlobalOptions
from fluxpoint.image.texts import MultiLine, SingleLine, Text, TextAlignment

__all__ = [
    "Circle",
    "ColorObject",
    "CustomImage",
    "CustomImageBuilder",
    "Cut",
    "Drawable",
    "GlobalOptions",
    "Icon",
    "MultiLine",
    "Rectangle",
    "SingleLine",
    "Svg",
    "Text",
    "TextAlignment",
    "Triangle",
    "UrlImage",
]
