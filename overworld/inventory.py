"""The player's inventory window: a grid of item slots and an item viewer."""

from __future__ import annotations

from dataclasses import dataclass, field

import pygame

from overworld.geometry import Rect, Vector2
from overworld.gui import GuiComponent
from overworld.items import Item, ItemAtlas

EMPTY = -1
LEFT_BUTTON = 1


def scaled_rect(left, top, width, height, x_offset, y_offset, scale) -> Rect:
    """A rectangle scaled by scale and then shifted by the offset."""
    sx, sy = scale
    return Rect(x_offset + left * sx, y_offset + top * sy, width * sx, height * sy)


@dataclass
class InventoryStyle:
    """Layout measurements and colours of the inventory window."""

    inventory_slot_begin: Vector2 = field(default_factory=Vector2)
    inventory_slot_offset: int = 0
    inventory_slot_size: int = 0
    inventory_slot_padding: int = 0

    item_viewer_padding: int = 0

    item_name_padding: Vector2 = field(default_factory=Vector2)
    item_description_line_padding: int = 0

    player_viewer: Rect = field(default_factory=Rect)
    hat_slot: Rect = field(default_factory=Rect)
    clothes_slot: Rect = field(default_factory=Rect)
    inventory_slots: Rect = field(default_factory=Rect)
    item_viewer: Rect = field(default_factory=Rect)
    item_description_box: Rect = field(default_factory=Rect)

    item_name_size: int = 0
    item_description_size: int = 0
    item_type_size: int = 0

    c_item_rare_text: tuple[int, int, int, int] = (0x33, 0x0B, 0xCB, 0xFF)
    c_item_description_text: tuple[int, int, int, int] = (0x9F, 0x4B, 0x24, 0xFF)
    c_item_type_text: tuple[int, int, int, int] = (0x9F, 0x8A, 0x81, 0xFF)


@dataclass
class _Label:
    text: str = ""
    position: Vector2 = field(default_factory=Vector2)
    size: int = 16
    colour: tuple[int, int, int, int] = (255, 255, 255, 255)


class Inventory(GuiComponent):
    """A grid of slots holding item ids, with drag-free pick up and put down."""

    def __init__(self, item_atlas: ItemAtlas, font: pygame.font.Font | None = None) -> None:
        super().__init__()
        self.rows = 3
        self.cols = 10
        self.item_atlas = item_atlas
        self.font = font
        self.texture: pygame.Surface | None = None
        self.visible = False
        self.draw_item_details = False
        self.held_item: Item | None = None
        self.selected_item: Item | None = None
        self.item_box_position = Vector2()
        self.inventory = [EMPTY] * (self.rows * self.cols)
        self.style = InventoryStyle()
        self.item_name = _Label()
        self.item_type = _Label()
        self.item_desc = _Label()
        self.set_gui_positions()

    def set_gui_positions(self) -> None:
        """Lay out every region of the window from its position and scale."""
        pos, scale = self.position, self.scale
        style = self.style

        def region(left, top, width, height):
            return scaled_rect(left, top, width, height, pos.x, pos.y, scale)

        style.player_viewer = region(19.0, 8.0, 64.0, 89.0)
        style.hat_slot = region(88.0, 8.0, 20.0, 20.0)
        style.clothes_slot = region(88.0, 46.0, 20.0, 20.0)
        style.item_viewer = region(15.0, 194.0, 60.0, 60.0)
        style.item_description_box = region(83.0, 194.0, 204.0, 60.0)

        style.inventory_slots = region(15.0, 110.0, 272.0, 76.0)
        style.inventory_slot_begin = Vector2(pos.x + 15.0 * scale.x, pos.y + 111.0 * scale.y)
        style.inventory_slot_offset = 28
        style.inventory_slot_size = 20
        style.inventory_slot_padding = 1

        style.item_viewer_padding = 8
        style.item_name_padding = Vector2(9.0, 4.0)
        style.item_description_line_padding = 5

        style.item_type_size = 16
        style.item_description_size = 16
        style.item_name_size = 16

        x = int(style.item_description_box.left + style.item_name_padding.x)
        line_gap = style.item_description_line_padding * scale.y

        name_y = style.item_description_box.top + style.item_name_padding.y
        self.item_name.size = style.item_name_size
        self.item_name.colour = style.c_item_rare_text
        self.item_name.position = Vector2(x, name_y)

        type_y = name_y + style.item_name_size + line_gap
        self.item_type.size = style.item_type_size
        self.item_type.colour = style.c_item_type_text
        self.item_type.position = Vector2(x, type_y)

        desc_y = type_y + style.item_type_size + line_gap
        self.item_desc.size = style.item_description_size
        self.item_desc.colour = style.c_item_description_text
        self.item_desc.position = Vector2(x, desc_y)

    def slot_at_point(self, mouse_pos) -> int:
        """The slot under the point, or -1 for gaps and points outside the grid."""
        scale = self.scale.x
        offset = int(self.style.inventory_slot_offset * scale)
        size = int(self.style.inventory_slot_size * scale)
        if offset <= 0:
            return EMPTY

        dx = int(mouse_pos[0]) - int(self.style.inventory_slots.left)
        dy = int(mouse_pos[1]) - int(self.style.inventory_slots.top)
        if dx < 0 or dy < 0:
            return EMPTY

        col, col_rest = divmod(dx, offset)
        row, row_rest = divmod(dy, offset)
        if col_rest >= size or row_rest >= size:
            return EMPTY
        if col >= self.cols or row >= self.rows:
            return EMPTY
        return row * self.cols + col

    def slot_selected(self, slot: int) -> None:
        """Show the details of the item in slot, or hide them if there is none."""
        if slot == EMPTY or self.inventory[slot] == EMPTY:
            self.draw_item_details = False
            return

        self.draw_item_details = True
        item = self.item_atlas.get_item(self.inventory[slot])
        self.selected_item = item

        padding = int(self.style.item_viewer_padding * self.scale.x)
        self.item_box_position = Vector2(
            self.style.item_viewer.left + padding, self.style.item_viewer.top + padding
        )

        self.item_name.text = item.name
        self.item_type.text = f"{item.quality_name} {item.type_name}"
        self.item_desc.text = item.description

    def hold_item(self, slot: int) -> None:
        """Pick up the item in slot, leaving the slot empty."""
        if slot == EMPTY or self.inventory[slot] == EMPTY:
            return
        self.held_item = self.item_atlas.get_item(self.inventory[slot])
        self.inventory[slot] = EMPTY

    def place_item(self, slot: int) -> None:
        """Put the held item into slot, picking up whatever was there."""
        if slot == EMPTY or self.held_item is None:
            return
        held_id = self.held_item.item_id
        current = self.inventory[slot]
        self.held_item = None if current == EMPTY else self.item_atlas.get_item(current)
        self.inventory[slot] = held_id

    def handle_input(self, mouse_pos) -> None:
        if self.style.inventory_slots.contains(mouse_pos[0], mouse_pos[1]):
            self.slot_selected(self.slot_at_point(mouse_pos))

    def handle_event(self, mouse_pos, event) -> None:
        if event.type != pygame.MOUSEBUTTONDOWN or getattr(event, "button", None) != LEFT_BUTTON:
            return
        slot = self.slot_at_point(mouse_pos)
        if self.held_item is not None:
            self.place_item(slot)
        else:
            self.hold_item(slot)

    def _blit(self, surface: pygame.Surface, texture, area: Rect, dest: Vector2) -> None:
        if texture is None:
            return
        region = pygame.Rect(int(area.left), int(area.top), int(area.width), int(area.height))
        region = region.clip(texture.get_rect())
        if region.width <= 0 or region.height <= 0:
            return
        image = texture.subsurface(region)
        sx, sy = self.scale
        if (sx, sy) != (1.0, 1.0):
            image = pygame.transform.scale(
                image, (max(0, int(region.width * sx)), max(0, int(region.height * sy)))
            )
        surface.blit(image, (int(dest.x), int(dest.y)))

    def _draw_item_icon(self, surface: pygame.Surface, item: Item, slot: int) -> None:
        scale = self.scale.x
        offset = int(self.style.inventory_slot_offset * scale)
        padding = int(self.style.inventory_slot_padding * scale)
        row, col = divmod(slot, self.cols)
        begin = self.style.inventory_slot_begin
        dest = Vector2(begin.x + offset * col + padding, begin.y + offset * row + padding)
        self._blit(surface, item.icon_texture, item.icon_rect, dest)

    def _draw_label(self, surface: pygame.Surface, label: _Label) -> None:
        if self.font is None or not label.text:
            return
        x, y = int(label.position.x), int(label.position.y)
        for line in label.text.split("\n"):
            rendered = self.font.render(line, True, label.colour[:3])
            surface.blit(rendered, (x, y))
            y += self.font.get_linesize()

    def draw(self, surface: pygame.Surface) -> None:
        if self.texture is not None:
            width, height = self.texture.get_size()
            self._blit(surface, self.texture, Rect(0, 0, width, height), self.position)

        for slot, item_id in enumerate(self.inventory):
            if item_id == EMPTY:
                continue
            self._draw_item_icon(surface, self.item_atlas.get_item(item_id), slot)

        if self.draw_item_details and self.selected_item is not None:
            item = self.selected_item
            self._blit(surface, item.box_texture, item.box_rect, self.item_box_position)
            for label in (self.item_name, self.item_type, self.item_desc):
                self._draw_label(surface, label)