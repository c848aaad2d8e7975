# overworld

A small top-down tile-map game built on pygame. A character walks around a
generated map of grass tiles; the camera follows it smoothly and never shows
beyond the edge of the map, and a collision grid keeps it from walking off the
map or into blocked cells.

## Installing

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Playing

```
overworld
overworld --resources path/to/res
```

`--resources` names the directory holding the images, atlases and fonts; it
defaults to `res` in the current directory.

The game opens on a menu screen (an empty black window); press any key to
start playing.

- **W A S D** move the character.
- **Tab** toggles the GUI component registered under the name `inventory`.
- Closing the window quits.

## Resources

The play screen loads these files from the resource directory:

| File | Used for |
| --- | --- |
| `character.png`, `character_atlas.json` | player sprite sheet, walking animations and bounding box |
| `overworld.png`, `overworld_atlas.json` | map tiles |
| `inventory.png`, `itembox.png`, `itemicon.png` | loaded as textures named `inventory`, `itembox`, `itemicon` |
| `main.ttf`, `VCR_OSD_MONO_1.001.ttf` | fonts named `main` and `main2` |
| `undefined.png` | fallback texture for names that failed to load |

A missing image or atlas is logged as a warning and skipped; asking for a
texture that failed to load returns the `undefined` texture, and raises
`KeyError` if that one is missing too. The `main2` font is required: if it
cannot be loaded, starting the play screen raises `KeyError`.

Atlas files are JSON objects keyed by name. Character atlases hold entries with
`"type": "animation"` (with `left`, `top`, `width`, `height`, `frames`) and an
entry with `"type": "bbox"` for the collision box; the animations named
`left`, `right`, `up` and `down` are used for walking. Tile atlases hold
`left`, `top`, `size` and `solid` for each tile; the map uses the tiles named
`grass` and `rock`.

## Using the pieces

The modules can be used on their own:

- `overworld.geometry`: `Vector2`, `Rect` and `View`.
- `overworld.animation`: `Animation`, `AnimationHandler` and `read_atlas`.
- `overworld.collision`: `CollisionSystem`, which shortens a move so a
  bounding box stops at the edge of solid cells.
- `overworld.entity`: `Entity` and `Player`; `Player.get_movement(dt, pressed)`
  takes a key-state lookup such as `pygame.key.get_pressed()`.
- `overworld.camera`: `Camera` and `lerp`.
- `overworld.items`: `ItemType`, `ItemQuality`, `Item` and `ItemAtlas`
  (`create_items()` registers the built-in hat).
- `overworld.tiles`: `TileId`, `Tile` and `TileManager`.
- `overworld.world`: `Layer` and `Map`.
- `overworld.textures`: `TextureManager`.
- `overworld.gui`: `GuiComponent`, `Button`, `TextButton` and `Gui`.
- `overworld.inventory`: `Inventory`, a 3 × 10 grid of item slots. Hovering a
  filled slot shows the item's name, quality, type and description; a left
  click picks up the item under the cursor, and a second click puts it down,
  swapping with whatever was in that slot.
- `overworld.game`: `Game`, `GameState`, `MenuState`, `PlayState` and `main`.

For example:

```python
from overworld.collision import CollisionSystem
from overworld.geometry import Rect, Vector2

cols = CollisionSystem(50, 50, 16)
step = cols.entity_adjust_position(Vector2(4.0, 0.0), Rect(0.0, 0.0, 8.0, 8.0))
```

## What it does not do

- The menu screen draws nothing; it only waits for a key.
- The play screen does not add an `Inventory` to its GUI, so Tab does nothing
  there until a component named `inventory` is added with
  `Gui.add_component`.
- The collision grid is independent of the map: it marks a single fixed cell
  as solid and does not read the tiles' `solid` flags.
- Maps are always generated; `Map.load` only records the file name and reads
  nothing. There is no saving of any kind.