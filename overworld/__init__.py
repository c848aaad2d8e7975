"""A top-down tile-map game: animated sprites, a following camera, collisions, a GUI and an inventory."""

__version__ = "0.1.0"
__all__ = [
    "animation",
    "camera",
    "collision",
    "entity",
    "game",
    "geometry",
    "gui",
    "inventory",
    "items",
    "textures",
    "tiles",
    "world",
]