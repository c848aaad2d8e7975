"""Loading and lookup of textures and fonts by name."""

from __future__ import annotations

import logging

import pygame

log = logging.getLogger(__name__)

UNDEFINED = "undefined"
DEFAULT_FONT_SIZE = 16


class TextureManager:
    """Named textures and fonts, with a fallback texture for missing names."""

    def __init__(self, undefined_path="res/undefined.png") -> None:
        self.textures: dict[str, pygame.Surface] = {}
        self.fonts: dict[str, pygame.font.Font] = {}
        self.create_texture(UNDEFINED, undefined_path)

    def create_texture(self, name: str, file_name) -> None:
        """Load an image under name; a file that cannot be read is skipped."""
        try:
            texture = pygame.image.load(str(file_name))
        except (pygame.error, OSError):
            log.warning("could not find file %s", file_name)
            return
        self.textures[name] = texture

    def get_texture(self, name: str) -> pygame.Surface:
        """The named texture, or the fallback texture if the name is unknown."""
        texture = self.textures.get(name)
        if texture is not None:
            return texture
        log.warning("texture does not exist: %s", name)
        fallback = self.textures.get(UNDEFINED)
        if fallback is None:
            raise KeyError(f"no texture {name!r} and no fallback texture")
        return fallback

    def remove_texture(self, name: str) -> None:
        """Forget a texture; the fallback texture is never removed."""
        if name == UNDEFINED:
            return
        self.textures.pop(name, None)

    def create_font(self, name: str, file_name, size: int = DEFAULT_FONT_SIZE) -> None:
        """Load a font under name; None as file_name selects pygame's default font."""
        pygame.font.init()
        try:
            font = pygame.font.Font(None if file_name is None else str(file_name), size)
        except (pygame.error, OSError):
            log.warning("could not find file %s", file_name)
            return
        self.fonts[name] = font

    def get_font(self, name: str) -> pygame.font.Font:
        try:
            return self.fonts[name]
        except KeyError:
            raise KeyError(f"font does not exist: {name!r}") from None