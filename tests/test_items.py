import pytest

from overworld.geometry import Rect
from overworld.items import Item, ItemAtlas, ItemQuality, ItemType


@pytest.fixture
def atlas():
    a = ItemAtlas()
    a.set_textures("box-sheet", "icon-sheet")
    a.create_items()
    return a


def test_builtin_hat(atlas):
    hat = atlas.get_item(0)
    assert hat.item_id == 0
    assert hat.name == "Hunky Joe's Hunky Hat"
    assert hat.description.startswith("When you are Hunky Joe, only \n")
    assert hat.type_name == "hat"
    assert hat.quality_name == "rare"


def test_builtin_hat_rects_and_textures(atlas):
    hat = atlas.get_item(0)
    assert hat.icon_rect == Rect(0, 0, 16, 16)
    assert hat.box_rect == Rect(0, 0, 32, 32)
    assert hat.icon_texture == "icon-sheet"
    assert hat.box_texture == "box-sheet"


def test_get_item_out_of_range(atlas):
    with pytest.raises(IndexError):
        atlas.get_item(len(atlas.items))


def test_get_item_negative(atlas):
    with pytest.raises(IndexError):
        atlas.get_item(-1)


def test_add_item_appends(atlas):
    item = atlas.add_item(
        1, "Cap", "A plain cap.", ItemType.HAT, ItemQuality.UNCOMMON, Rect(16, 0, 16, 16), Rect(32, 0, 32, 32)
    )
    assert atlas.get_item(1) is item
    assert item.quality_name == "uncommon"


@pytest.mark.parametrize(
    "quality, name",
    [(ItemQuality.COMMON, "common"), (ItemQuality.UNCOMMON, "uncommon"), (ItemQuality.RARE, "rare")],
)
def test_quality_names(quality, name):
    assert Item(0, "x", "y", quality=quality).quality_name == name


def test_default_type_is_undefined():
    item = Item(3, "thing", "a thing")
    assert item.type_name == "undefined"
    assert item.quality_name == "common"