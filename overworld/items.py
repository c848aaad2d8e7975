"""Item definitions and the atlas that holds every known item."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from overworld.geometry import Rect


class ItemType(Enum):
    UNDEFINED = "undefined"
    HAT = "hat"


class ItemQuality(Enum):
    COMMON = "common"
    UNCOMMON = "uncommon"
    RARE = "rare"


@dataclass
class Item:
    """An item with its name, description and the sprites that show it."""

    item_id: int
    name: str
    description: str
    item_type: ItemType = ItemType.UNDEFINED
    quality: ItemQuality = ItemQuality.COMMON
    icon_rect: Rect = field(default_factory=Rect)
    box_rect: Rect = field(default_factory=Rect)
    icon_texture: object = None
    box_texture: object = None

    @property
    def type_name(self) -> str:
        return self.item_type.value

    @property
    def quality_name(self) -> str:
        return self.quality.value


class ItemAtlas:
    """All items of the game, looked up by id."""

    def __init__(self) -> None:
        self.item_box = None
        self.item_icons = None
        self.items: list[Item] = []

    def set_textures(self, item_box, item_icons) -> None:
        self.item_box = item_box
        self.item_icons = item_icons

    def add_item(
        self,
        item_id: int,
        name: str,
        description: str,
        item_type: ItemType,
        quality: ItemQuality,
        icon_rect: Rect,
        box_rect: Rect,
    ) -> Item:
        item = Item(
            item_id,
            name,
            description,
            item_type,
            quality,
            icon_rect.copy(),
            box_rect.copy(),
            self.item_icons,
            self.item_box,
        )
        self.items.append(item)
        return item

    def create_items(self) -> None:
        """Register the built-in items."""
        self.add_item(
            0,
            "Hunky Joe's Hunky Hat",
            "When you are Hunky Joe, only \na hat of the utmost Hunkiness is acceptable.",
            ItemType.HAT,
            ItemQuality.RARE,
            Rect(0, 0, 16, 16),
            Rect(0, 0, 32, 32),
        )

    def get_item(self, item_id: int) -> Item:
        if not 0 <= item_id < len(self.items):
            raise IndexError(f"no item with id {item_id}")
        return self.items[item_id]