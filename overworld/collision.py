"""Tile-based collision lookup and movement correction."""

from __future__ import annotations

from overworld.geometry import Rect, Vector2


class CollisionSystem:
    """A grid of solid tiles that keeps entities from walking into them."""

    def __init__(self, width: int, height: int, tile_size: int) -> None:
        self.width = width
        self.height = height
        self.tile_size = tile_size
        self.collisions = [False] * (width * height)
        marker = 10 * width + 10
        if marker < len(self.collisions):
            self.collisions[marker] = True

    def col_exists_at_point(self, x: float, y: float) -> bool:
        """Whether the point is solid; anything outside the grid counts as solid."""
        xi, yi = int(x), int(y)
        if xi < 0 or yi < 0:
            return True
        x_adj = xi // self.tile_size
        y_adj = yi // self.tile_size
        index = y_adj + x_adj * self.width
        return self.collisions[index] if index < len(self.collisions) else True

    def _tile_floor(self, value: float) -> int:
        v = int(value)
        return v - v % self.tile_size

    def entity_adjust_position(self, move: Vector2, bounds: Rect) -> Vector2:
        """Shorten a move so the bounding box stops at the edge of solid tiles."""
        adj_x, adj_y = move.x, move.y
        col = self.col_exists_at_point

        if move.x:
            if bounds.left + move.x < 0:
                adj_x = abs(bounds.left)

            if move.x > 0:
                edge = bounds.left + bounds.width + move.x
                if col(edge, bounds.top) or col(edge, bounds.top + bounds.height):
                    x = self._tile_floor(edge) - 1
                    adj_x = x - (bounds.left + bounds.width)
            else:
                edge = bounds.left + move.x
                if col(edge, bounds.top) or col(edge, bounds.top + bounds.height):
                    x = self._tile_floor(edge) + self.tile_size
                    adj_x = x - bounds.left

        if move.y:
            if bounds.top < 0:
                adj_x = abs(bounds.top)

            if move.y > 0:
                edge = bounds.top + bounds.height + move.y
                if col(bounds.left, edge) or col(bounds.left + bounds.width, edge):
                    y = self._tile_floor(edge) - 1
                    adj_y = y - (bounds.top + bounds.height)
            else:
                edge = bounds.top + move.y
                if col(bounds.left, edge) or col(bounds.left + bounds.width, edge):
                    y = self._tile_floor(edge) + self.tile_size
                    adj_y = y - bounds.top

        return Vector2(adj_x, adj_y)