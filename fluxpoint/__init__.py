"""Client library for the Fluxpoint image generation and Minecraft API."""

from fluxpoint.client import Client
from fluxpoint.core.checks import FluxpointError
from fluxpoint.image import (
    Circle,
    ColorObject,
    CustomImage,
    CustomImageBuilder,
    Cut,
    GlobalOptions,
    Icon,
    MultiLine,
    Rectangle,
    SingleLine,
    Svg,
    TextAlignment,
    Triangle,
    UrlImage,
)
from fluxpoint.mc import McRequest, SkinType
from fluxpoint.request import ApiResponse, FailedResponse, GeneratedImage, McPlayer, McServer, McSkin, is_success
from fluxpoint.welcome import WelcomeImage, WelcomeImageBuilder

__all__ = [
    "ApiResponse",
    "Circle",
    "Client",
    "ColorObject",
    "CustomImage",
    "CustomImageBuilder",
    "Cut",
    "FailedResponse",
    "FluxpointError",
    "GeneratedImage",
    "GlobalOptions",
    "Icon",
    "McPlayer",
    "McRequest",
    "McServer",
    "McSkin",
    "MultiLine",
    "Rectangle",
    "SingleLine",
    "SkinType",
    "Svg",
    "TextAlignment",
    "Triangle",
    "UrlImage",
    "WelcomeImage",
    "WelcomeImageBuilder",
    "is_success",
]
