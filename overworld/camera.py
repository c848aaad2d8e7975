"""A camera that smoothly follows an entity inside fixed bounds."""

from __future__ import annotations

from overworld.geometry import Rect, View, Vector2


def lerp(a: float, b: float, t: float) -> float:
    return a + t * (b - a)


class Camera:
    """Keeps a view centred on a target without showing beyond the bounds."""

    follow_speed = 0.1

    def __init__(self, target=None, bounds: Rect | None = None) -> None:
        self.view = View()
        self.bounds = bounds.copy() if bounds is not None else Rect()
        self.target = target
        self.zoom_level = 1.0

    def set_target(self, target) -> None:
        self.target = target

    def set_size(self, size) -> None:
        """Resize the view and centre it on half its size."""
        size = Vector2(*size)
        self.view.set_size(size)
        self.view.center = size * 0.5

    def set_bounds(self, bounds: Rect) -> None:
        self.bounds = bounds.copy()

    def update(self, dt: float) -> None:
        """Move the view a step toward the target, clamped to the bounds."""
        if self.target is None:
            raise RuntimeError("camera has no target")

        size = self.view.size
        view_center = self.view.center
        cx, cy = self.target.center.x, self.target.center.y
        half_w, half_h = size.x / 2, size.y / 2
        b = self.bounds

        if cx - half_w < b.left:
            cx += abs(b.left - (cx - half_w))
        elif cx + half_w > b.left + b.width:
            cx -= abs((b.left + b.width) - (cx + half_w))

        if cy - half_h < b.top:
            cy += abs(b.top - (cy - half_h))
        elif cy + half_h > b.top + b.height:
            cy -= abs((b.top + b.height) - (cy + half_h))

        self.view.center = Vector2(
            lerp(view_center.x, cx, self.follow_speed),
            lerp(view_center.y, cy, self.follow_speed),
        )