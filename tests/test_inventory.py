import pygame
import pytest

from overworld.geometry import Rect, Vector2
from overworld.inventory import Inventory, InventoryStyle, scaled_rect
from overworld.items import ItemQuality, ItemType

ICON_COLOUR = (10, 200, 30, 255)
BOX_COLOUR = (200, 20, 40, 255)


@pytest.fixture
def atlas():
    from overworld.items import ItemAtlas

    icons = pygame.Surface((16, 16), pygame.SRCALPHA)
    icons.fill(ICON_COLOUR)
    box = pygame.Surface((32, 32), pygame.SRCALPHA)
    box.fill(BOX_COLOUR)
    item_atlas = ItemAtlas()
    item_atlas.set_textures(box, icons)
    item_atlas.create_items()
    item_atlas.add_item(
        1, "Plain Cap", "Just a cap.", ItemType.HAT, ItemQuality.COMMON,
        Rect(0, 0, 16, 16), Rect(0, 0, 32, 32),
    )
    return item_atlas


@pytest.fixture
def inventory(atlas):
    return Inventory(atlas)


def slot_point(inv, slot):
    style = inv.style
    row, col = divmod(slot, inv.cols)
    offset = style.inventory_slot_offset
    return (
        int(style.inventory_slots.left) + col * offset,
        int(style.inventory_slots.top) + row * offset,
    )


def click(pos):
    return pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=pos)


def test_scaled_rect_identity():
    assert scaled_rect(1, 2, 3, 4, 0, 0, Vector2(1, 1)) == Rect(1, 2, 3, 4)


def test_scaled_rect_scales_and_offsets():
    assert scaled_rect(1, 2, 3, 4, 10, 20, Vector2(2, 3)) == Rect(12, 26, 6, 12)


def test_style_default_colours():
    assert InventoryStyle().c_item_rare_text == (0x33, 0x0B, 0xCB, 0xFF)


def test_new_inventory_is_empty_and_hidden(inventory):
    assert inventory.inventory == [-1] * (inventory.rows * inventory.cols)
    assert len(inventory.inventory) == 30
    assert inventory.visible is False
    assert inventory.held_item is None
    assert inventory.draw_item_details is False


def test_every_slot_is_found_at_its_corner(inventory):
    found = [inventory.slot_at_point(slot_point(inventory, s)) for s in range(30)]
    assert found == list(range(30))


def test_gap_between_slots_is_no_slot(inventory):
    x, y = slot_point(inventory, 0)
    assert inventory.slot_at_point((x + inventory.style.inventory_slot_size, y)) == -1
    assert inventory.slot_at_point((x, y + inventory.style.inventory_slot_size)) == -1


def test_points_outside_grid_are_no_slot(inventory):
    x, y = slot_point(inventory, 0)
    assert inventory.slot_at_point((x - 1, y)) == -1
    assert inventory.slot_at_point((x, y - 1)) == -1
    far = (x + inventory.style.inventory_slot_offset * inventory.cols, y)
    assert inventory.slot_at_point(far) == -1


def test_hold_and_place_item(inventory):
    inventory.inventory[0] = 0
    inventory.hold_item(0)
    assert inventory.held_item.item_id == 0
    assert inventory.inventory[0] == -1
    inventory.place_item(5)
    assert inventory.inventory[5] == 0
    assert inventory.held_item is None


def test_place_swaps_with_occupied_slot(inventory):
    inventory.inventory[0] = 0
    inventory.inventory[1] = 1
    inventory.hold_item(0)
    inventory.place_item(1)
    assert inventory.inventory[1] == 0
    assert inventory.held_item.item_id == 1


def test_hold_empty_or_invalid_slot_does_nothing(inventory):
    inventory.hold_item(3)
    inventory.hold_item(-1)
    assert inventory.held_item is None
    assert inventory.inventory == [-1] * 30


def test_place_without_held_item_does_nothing(inventory):
    inventory.inventory[2] = 1
    inventory.place_item(2)
    assert inventory.inventory[2] == 1
    assert inventory.held_item is None


def test_slot_selected_shows_details(inventory, atlas):
    inventory.inventory[4] = 0
    inventory.slot_selected(4)
    item = atlas.get_item(0)
    assert inventory.draw_item_details is True
    assert inventory.item_name.text == item.name
    assert inventory.item_type.text == "rare hat"
    assert inventory.item_desc.text == item.description


def test_slot_selected_empty_hides_details(inventory):
    inventory.inventory[4] = 0
    inventory.slot_selected(4)
    inventory.slot_selected(-1)
    assert inventory.draw_item_details is False
    inventory.slot_selected(4)
    inventory.slot_selected(7)
    assert inventory.draw_item_details is False


def test_handle_event_left_click_picks_up_and_puts_down(inventory):
    inventory.inventory[0] = 1
    inventory.handle_event(slot_point(inventory, 0), click(slot_point(inventory, 0)))
    assert inventory.held_item.item_id == 1
    inventory.handle_event(slot_point(inventory, 12), click(slot_point(inventory, 12)))
    assert inventory.inventory[12] == 1
    assert inventory.held_item is None


def test_handle_event_ignores_other_buttons(inventory):
    inventory.inventory[0] = 1
    event = pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=3, pos=(0, 0))
    inventory.handle_event(slot_point(inventory, 0), event)
    assert inventory.held_item is None
    assert inventory.inventory[0] == 1


def test_handle_input_hover_selects(inventory):
    inventory.inventory[3] = 0
    inventory.handle_input(slot_point(inventory, 3))
    assert inventory.draw_item_details is True
    inventory.handle_input(slot_point(inventory, 4))
    assert inventory.draw_item_details is False


def test_set_gui_positions_follows_position_and_scale(inventory):
    inventory.position = Vector2(40, 30)
    inventory.scale = Vector2(2, 2)
    inventory.set_gui_positions()
    style = inventory.style
    assert style.inventory_slots == scaled_rect(15, 110, 272, 76, 40, 30, Vector2(2, 2))
    assert style.item_viewer == scaled_rect(15, 194, 60, 60, 40, 30, Vector2(2, 2))
    assert inventory.item_type.position.y > inventory.item_name.position.y
    assert inventory.item_desc.position.y > inventory.item_type.position.y
    assert inventory.item_name.position.x == inventory.item_desc.position.x


def test_scaled_slots_are_found(inventory):
    inventory.scale = Vector2(2, 2)
    inventory.set_gui_positions()
    style = inventory.style
    x = int(style.inventory_slots.left) + 2 * style.inventory_slot_offset
    y = int(style.inventory_slots.top)
    assert inventory.slot_at_point((x, y)) == 1


def test_draw_puts_icon_in_slot(inventory):
    inventory.inventory[0] = 0
    surface = pygame.Surface((400, 300), pygame.SRCALPHA)
    surface.fill((0, 0, 0, 255))
    inventory.draw(surface)
    begin = inventory.style.inventory_slot_begin
    pad = inventory.style.inventory_slot_padding
    assert tuple(surface.get_at((int(begin.x) + pad, int(begin.y) + pad))) == ICON_COLOUR
    assert tuple(surface.get_at((0, 0))) == (0, 0, 0, 255)


def test_draw_shows_item_box_when_selected(inventory):
    inventory.inventory[0] = 0
    inventory.slot_selected(0)
    surface = pygame.Surface((400, 300), pygame.SRCALPHA)
    surface.fill((0, 0, 0, 255))
    inventory.draw(surface)
    pos = inventory.item_box_position
    assert tuple(surface.get_at((int(pos.x), int(pos.y)))) == BOX_COLOUR