"""Sprite strip animations read from a JSON atlas."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field, replace
from pathlib import Path

from overworld.geometry import Rect

log = logging.getLogger(__name__)

FRAME_WIDTH = 16
FRAME_HEIGHT = 32
DEFAULT_FRAME_DURATION = 0.2


def read_atlas(path) -> dict:
    """Load a JSON atlas file mapping entry names to their descriptions."""
    with Path(path).open(encoding="utf-8") as fh:
        return json.load(fh)


@dataclass
class Animation:
    """A strip of frames and how long each frame is shown."""

    strip: Rect = field(default_factory=Rect)
    name: str = ""
    frames: int = 0
    duration: float = 0.0


class AnimationHandler:
    """Tracks the current animation and advances its frames over time."""

    def __init__(self) -> None:
        self.t = 0.0
        self.playing = False
        self.animations: dict[str, Animation] = {}
        self.current_frame = Rect(0, 0, FRAME_WIDTH, FRAME_HEIGHT)
        self.current_anim = Animation(replace(self.current_frame), "", 1, 0.0)

    def create_animations(self, atlas_path) -> None:
        """Register every entry of type "animation" found in the atlas."""
        try:
            atlas = read_atlas(atlas_path)
        except OSError:
            log.warning("failed to open atlas %s", atlas_path)
            return

        for name, entry in atlas.items():
            if entry["type"] != "animation":
                continue
            rect = Rect(entry["left"], entry["top"], entry["width"], entry["height"])
            self.animations[name] = Animation(
                rect, name, int(entry["frames"]), DEFAULT_FRAME_DURATION
            )

    def set_animation(self, name: str) -> None:
        """Switch to the named animation; unknown names are ignored with a warning."""
        anim = self.animations.get(name)
        if anim is None:
            log.warning("no such animation exists: %s", name)
            return
        self.current_anim = anim
        self.current_frame.top = anim.strip.top

    def update_frame(self, dt: float) -> None:
        """Advance the animation clock by dt seconds while playing."""
        if not self.playing:
            return

        anim = self.current_anim
        duration = anim.duration
        if duration <= 0 or anim.frames <= 0:
            return

        frame = int((self.t + dt) / duration)
        if frame > int(self.t / duration):
            frame %= anim.frames
            self.current_frame.left = self.current_frame.width * frame

        self.t += dt
        if self.t > duration * anim.frames:
            self.t = 0.0

    def play(self) -> None:
        self.playing = True

    def stop(self) -> None:
        self.current_frame.left = 0
        self.playing = False