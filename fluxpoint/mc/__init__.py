"""Minecraft player, skin and server lookups."""

from fluxpoint.mc.requests import McRequest, PlayerRequest, ServerRequest, SkinRequest, SkinType

__all__ = ["McRequest", "PlayerRequest", "ServerRequest", "SkinRequest", "SkinType"]
