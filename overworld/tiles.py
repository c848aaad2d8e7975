"""Map tiles and the manager that builds them from a JSON atlas."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum

import pygame

from overworld.animation import read_atlas
from overworld.geometry import Rect, Vector2

log = logging.getLogger(__name__)


class TileId(Enum):
    GRASS = "grass"


@dataclass
class Tile:
    """A square piece of a tile sheet placed somewhere in the world."""

    tile_id: TileId | None = None
    texture: pygame.Surface | None = None
    tex_rect: Rect = field(default_factory=Rect)
    tile_size: int = 1
    solid: bool = False
    position: Vector2 = field(default_factory=Vector2)

    def draw(self, surface: pygame.Surface, offset: Vector2 | None = None) -> None:
        """Blit the tile; offset is the world position of the surface's corner."""
        if self.texture is None:
            return
        shift = offset if offset is not None else Vector2()
        dest = self.position - shift
        area = pygame.Rect(
            int(self.tex_rect.left),
            int(self.tex_rect.top),
            int(self.tex_rect.width),
            int(self.tex_rect.height),
        )
        surface.blit(self.texture, (int(dest.x), int(dest.y)), area)


class TileManager:
    """Named tiles cut out of a single sheet."""

    def __init__(self) -> None:
        self.tiles: dict[str, Tile] = {}
        self.tile_string_id: dict[str, TileId] = {"grass": TileId.GRASS}

    def create_tiles(self, sheet, atlas_path) -> None:
        """Add a tile for every atlas entry; names already known are kept."""
        try:
            atlas = read_atlas(atlas_path)
        except OSError:
            log.warning("failed to open atlas %s", atlas_path)
            return

        for name, entry in atlas.items():
            size = int(entry["size"])
            rect = Rect(entry["left"], entry["top"], size, size)
            tile_id = self.tile_string_id.get(name)
            if tile_id is None:
                log.warning("trying to create tile for unknown id %s", name)
                tile_id = TileId.GRASS
            self.tiles.setdefault(
                name, Tile(tile_id, sheet, rect, size, bool(entry["solid"]))
            )

    def get_tile(self, name: str) -> Tile:
        """The named tile; an unknown name gets an empty tile registered for it."""
        return self.tiles.setdefault(name, Tile())