"""Textures, fonts and the named asset store that keeps them."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

import pygame

if TYPE_CHECKING:
    from .renderer import Renderer

logger = logging.getLogger(__name__)


class AssetError(Exception):
    """Base class for asset loading and lookup failures."""


class TextureLoadError(AssetError):
    """An image file could not be loaded as a texture."""


class FontLoadError(AssetError):
    """A font file could not be opened."""


class AssetNotFoundError(AssetError, KeyError):
    """No asset is stored under the requested name."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""


class Texture:
    """An image ready to be drawn, with its pixel size."""

    def __init__(self, surface: Optional[pygame.Surface] = None, filename: str = "") -> None:
        self.filename = filename
        self.surface = surface
        if surface is not None:
            self.width, self.height = surface.get_size()
        else:
            self.width, self.height = 0, 0

    def load(self, renderer: Optional["Renderer"], filename: str) -> None:
        """Load the image in ``filename``.

        When ``renderer`` draws to the display, the image is converted to the
        display's pixel format.
        """
        self.filename = filename
        try:
            surface = pygame.image.load(filename)
        except (pygame.error, OSError) as exc:
            raise TextureLoadError(f"Failed to load texture file {filename}") from exc
        self.width, self.height = surface.get_size()
        target = renderer.target if renderer is not None else None
        if target is not None and target is pygame.display.get_surface():
            try:
                surface = surface.convert_alpha()
            except pygame.error as exc:
                raise TextureLoadError(
                    f"Failed to convert surface to texture for {filename}"
                ) from exc
        self.surface = surface
        logger.info("Loaded texture %s", filename)

    def unload(self) -> None:
        """Release the image data."""
        self.surface = None


class Font:
    """A TrueType font opened at a given point size."""

    def __init__(self) -> None:
        self.filename = ""
        self.size = 0
        self.font: Optional[pygame.font.Font] = None

    def load(self, filename: str, size: int) -> None:
        """Open the font file ``filename`` at ``size`` points."""
        self.filename = filename
        self.size = size
        if not pygame.font.get_init():
            pygame.font.init()
        try:
            self.font = pygame.font.Font(filename, size)
        except (pygame.error, OSError) as exc:
            self.font = None
            raise FontLoadError(f"Failed to load font file {filename}") from exc


class Assets:
    """Loaded textures and fonts, stored under string names."""

    def __init__(self) -> None:
        self.textures: dict[str, Texture] = {}
        self.fonts: dict[str, Font] = {}

    def load_texture(self, renderer: Optional["Renderer"], filename: str, name: str) -> Texture:
        """Load a texture from ``filename`` and store it as ``name``."""
        texture = Texture()
        texture.load(renderer, filename)
        self.textures[name] = texture
        return texture

    def load_font(self, filename: str, size: int, name: str) -> Font:
        """Load a font from ``filename`` at ``size`` and store it as ``name``."""
        font = Font()
        font.load(filename, size)
        self.fonts[name] = font
        return font

    def get_texture(self, name: str) -> Texture:
        """The texture stored as ``name``."""
        try:
            return self.textures[name]
        except KeyError:
            raise AssetNotFoundError(
                f"Texture {name} does not exist in assets manager."
            ) from None

    def get_font(self, name: str) -> Font:
        """The font stored as ``name``."""
        try:
            return self.fonts[name]
        except KeyError:
            raise AssetNotFoundError(
                f"Font {name} does not exist in assets manager."
            ) from None

    def clear(self) -> None:
        """Unload and forget every stored texture."""
        for texture in self.textures.values():
            texture.unload()
        self.textures.clear()