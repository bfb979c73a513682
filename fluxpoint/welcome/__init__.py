"""Welcome card descriptors."""

from fluxpoint.welcome.welcome_image import WelcomeImage, WelcomeImageBuilder

__all__ = ["WelcomeImage", "WelcomeImageBuilder"]
