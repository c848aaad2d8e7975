"""Animated world entities and the player character."""

from __future__ import annotations

import logging

import pygame

from overworld.animation import AnimationHandler, read_atlas
from overworld.geometry import Rect, Vector2

log = logging.getLogger(__name__)


class Entity:
    """A sprite in the world with an animation and a collision box."""

    def __init__(self) -> None:
        self.speed = 150.0
        self.width = 16
        self.height = 32
        self.position = Vector2()
        self.origin = Vector2()
        self.texture: pygame.Surface | None = None
        self.frame = Rect()
        self.bounding_box = Rect()
        self.anim_handler = AnimationHandler()

    @property
    def center(self) -> Vector2:
        return self.position

    def entity_bounds(self) -> Rect:
        """The collision box in world coordinates."""
        top_left = self.position - self.origin
        return Rect(
            top_left.x + self.bounding_box.left,
            top_left.y + self.bounding_box.top,
            self.bounding_box.width,
            self.bounding_box.height,
        )

    def move(self, offset: Vector2) -> None:
        """Move by offset, playing the walk animation only while moving."""
        if offset.x or offset.y:
            self.anim_handler.play()
        else:
            self.anim_handler.stop()
        self._change_animation(int(offset.x), int(offset.y))
        self.position = self.position + offset

    def _change_animation(self, h_move: int, v_move: int) -> None:
        if h_move > 0:
            self.anim_handler.set_animation("right")
        if h_move < 0:
            self.anim_handler.set_animation("left")
        if v_move > 0:
            self.anim_handler.set_animation("down")
        if v_move < 0:
            self.anim_handler.set_animation("up")

    def update_sprite(self, dt: float) -> None:
        self.anim_handler.update_frame(dt)
        self.frame = self.anim_handler.current_frame.copy()

    def set_texture(self, texture: pygame.Surface, atlas_path) -> None:
        """Attach a sprite sheet and load its animations and bounding box."""
        self.load_bounding_box(atlas_path)
        self.texture = texture
        self.origin = Vector2(self.width * 0.5, self.height * 0.5)
        self.anim_handler.create_animations(atlas_path)
        self.frame = self.anim_handler.current_frame.copy()

    def load_bounding_box(self, atlas_path) -> None:
        """Take the first "bbox" entry of the atlas as the collision box."""
        try:
            atlas = read_atlas(atlas_path)
        except OSError:
            log.warning("failed to open atlas %s", atlas_path)
            return

        for entry in atlas.values():
            if entry["type"] != "bbox":
                continue
            self.bounding_box = Rect(
                entry["left"], entry["top"], entry["width"], entry["height"]
            )
            break

    def draw(self, surface: pygame.Surface, offset: Vector2 | None = None) -> None:
        """Blit the current frame; offset is the world position of the surface's corner."""
        if self.texture is None:
            return
        shift = offset if offset is not None else Vector2()
        dest = self.position - self.origin - shift
        area = pygame.Rect(
            int(self.frame.left),
            int(self.frame.top),
            int(self.frame.width),
            int(self.frame.height),
        )
        surface.blit(self.texture, (int(dest.x), int(dest.y)), area)


class Player(Entity):
    """The entity steered with the W, A, S and D keys."""

    def get_movement(self, dt: float, pressed) -> Vector2:
        """Movement for this frame from a key-state lookup such as pygame.key.get_pressed()."""
        h_move = int(bool(pressed[pygame.K_d])) - int(bool(pressed[pygame.K_a]))
        v_move = int(bool(pressed[pygame.K_s])) - int(bool(pressed[pygame.K_w]))
        return Vector2(h_move * self.speed * dt, v_move * self.speed * dt)