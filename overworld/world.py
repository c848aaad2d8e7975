"""Tile layers and the map that stacks them."""

from __future__ import annotations

from dataclasses import replace

import pygame

from overworld.geometry import View
from overworld.tiles import Tile, TileManager


def _assigned(target: Tile, source: Tile) -> Tile:
    """A copy of source that keeps the tile size of the tile it replaces."""
    return replace(source, tex_rect=source.tex_rect.copy(), tile_size=target.tile_size)


class Layer:
    """A grid of tiles drawn through a view."""

    def __init__(self, view: View, width: int, height: int, tile_size: int) -> None:
        self.view = view
        self.width = width
        self.height = height
        self.tile_size = tile_size
        self.depth = 0
        self.visible = True
        self.tiles: list[Tile] = [Tile() for _ in range(width * height)]

    def set_tile_positions(self) -> None:
        """Place every tile at its grid cell in world coordinates."""
        for index, tile in enumerate(self.tiles):
            row, col = divmod(index, self.width)
            tile.position = type(tile.position)(col * self.tile_size, row * self.tile_size)

    def visible_range(self) -> tuple[int, int, int, int]:
        """Columns and rows covered by the view as (start_x, end_x, start_y, end_y)."""
        center, size = self.view.center, self.view.size
        start_x = int((center.x - size.x * 0.5) / self.tile_size)
        end_x = int((center.x + size.x * 0.5) / self.tile_size) + 1
        start_y = int((center.y - size.y * 0.5) / self.tile_size)
        end_y = int((center.y + size.y * 0.5) / self.tile_size) + 1

        def clamp(value: int, limit: int) -> int:
            return min(max(value, 0), limit)

        return (
            clamp(start_x, self.width),
            clamp(end_x, self.width),
            clamp(start_y, self.height),
            clamp(end_y, self.height),
        )

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the tiles inside the view, shifted so the view's corner is at (0, 0)."""
        if not self.visible:
            return
        start_x, end_x, start_y, end_y = self.visible_range()
        corner = self.view.rect.position
        for y in range(start_y, end_y):
            for x in range(start_x, end_x):
                index = y * self.width + x
                if index >= len(self.tiles):
                    break
                self.tiles[index].draw(surface, corner)

    def flood_fill(self, tile: Tile) -> None:
        """Replace every tile of the layer with a copy of tile."""
        self.tiles = [_assigned(old, tile) for old in self.tiles]

    def place_tile(self, tile: Tile, pos) -> None:
        """Put a copy of tile at the grid cell pos."""
        x, y = (int(v) for v in pos)
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"cell ({x}, {y}) is outside the layer")
        index = y * self.width + x
        self.tiles[index] = _assigned(self.tiles[index], tile)


class Map:
    """A stack of layers of the same size sharing one view."""

    def __init__(self, view: View, width: int, height: int, tile_size: int) -> None:
        self.view = view
        self.width = width
        self.height = height
        self.tile_size = tile_size
        self.layers: list[Layer] = []
        self.t_manager = TileManager()
        self.file_name: str | None = None

    def draw(self, surface: pygame.Surface) -> None:
        for layer in self.layers:
            layer.draw(surface)

    def load(self, file_name) -> None:
        """Remember the map file name; the layers themselves are generated, not read."""
        self.file_name = str(file_name)

    def create_tiles(self, sheet, atlas_path) -> None:
        self.t_manager.create_tiles(sheet, atlas_path)

    def create_layer(self) -> Layer:
        layer = Layer(self.view, self.width, self.height, self.tile_size)
        self.layers.append(layer)
        return layer

    def generate(self) -> None:
        """Build a grass ground layer and a layer with a single rock."""
        self.clear()

        ground = self.create_layer()
        ground.flood_fill(self.t_manager.get_tile("grass"))
        ground.set_tile_positions()

        objects = self.create_layer()
        objects.place_tile(self.t_manager.get_tile("rock"), (10, 10))
        objects.set_tile_positions()

    def clear(self) -> None:
        self.layers.clear()