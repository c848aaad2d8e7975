"""The game loop, its stack of states and the menu and play states."""

from __future__ import annotations

import argparse
from abc import ABC, abstractmethod
from pathlib import Path

import pygame

from overworld.camera import Camera
from overworld.collision import CollisionSystem
from overworld.entity import Player
from overworld.geometry import Rect
from overworld.gui import Gui
from overworld.textures import TextureManager
from overworld.world import Map

WINDOW_SIZE = (800, 600)
WINDOW_TITLE = "Game"
FRAME_RATE = 60
BACKGROUND = (0, 0, 0)
DEFAULT_RESOURCES = "res"


class Game:
    """Owns the window and runs whichever state is on top of the stack."""

    def __init__(self, window: pygame.Surface | None = None) -> None:
        if window is None:
            pygame.display.init()
            window = pygame.display.set_mode(WINDOW_SIZE)
            pygame.display.set_caption(WINDOW_TITLE)
        self.window = window
        self.running = True
        self.states: list[GameState] = []

    def push_state(self, state: GameState) -> None:
        self.states.append(state)

    def pop_state(self) -> None:
        if self.states:
            self.states.pop()

    def change_state(self, state: GameState) -> None:
        self.pop_state()
        self.push_state(state)

    def peek_state(self) -> GameState | None:
        return self.states[-1] if self.states else None

    def close(self) -> None:
        self.running = False

    def game_loop(self) -> None:
        """Handle input, update and draw the top state each frame until closed."""
        clock = pygame.time.Clock()
        while self.running:
            dt = clock.tick(FRAME_RATE) / 1000.0
            state = self.peek_state()
            if state is None:
                if pygame.display.get_init() and any(
                    e.type == pygame.QUIT for e in pygame.event.get()
                ):
                    self.close()
                continue

            state.handle_input(dt)
            state.update(dt)
            self.window.fill(BACKGROUND)
            state.draw(dt)
            if pygame.display.get_init() and pygame.display.get_surface() is self.window:
                pygame.display.flip()


class GameState(ABC):
    """One screen of the game with its own textures."""

    def __init__(self, game: Game, resource_dir=DEFAULT_RESOURCES) -> None:
        self.game = game
        self.resource_dir = Path(resource_dir)
        self.tex_mgr = TextureManager(self.resource_dir / "undefined.png")

    @abstractmethod
    def draw(self, dt: float) -> None:
        """Render the state onto the game's window."""

    @abstractmethod
    def update(self, dt: float) -> None:
        """Advance the state by dt seconds."""

    @abstractmethod
    def handle_input(self, dt: float) -> None:
        """Process pending input."""


class MenuState(GameState):
    """The title screen; any key starts the game."""

    def __init__(self, game: Game, resource_dir=DEFAULT_RESOURCES) -> None:
        super().__init__(game, resource_dir)
        self.gui = Gui()

    def draw(self, dt: float) -> None:
        """The menu has nothing to draw yet."""

    def update(self, dt: float) -> None:
        """The menu has nothing to update."""

    def handle_input(self, dt: float) -> None:
        mouse_pos = pygame.mouse.get_pos()
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.game.close()
            elif event.type == pygame.KEYDOWN:
                self._load_state(PlayState(self.game, self.resource_dir))
            self.gui.handle_event(mouse_pos, event)
        self.gui.handle_input(mouse_pos)

    def _load_state(self, state: GameState) -> None:
        self.game.change_state(state)


class PlayState(GameState):
    """The overworld: a generated map, the player and a following camera."""

    MAP_TILES = 50
    TILE_SIZE = 16

    def __init__(self, game: Game, resource_dir=DEFAULT_RESOURCES) -> None:
        super().__init__(game, resource_dir)
        self.player = Player()
        self.camera = Camera()
        self.gui = Gui()
        self.map = Map(self.camera.view, self.MAP_TILES, self.MAP_TILES, self.TILE_SIZE)
        self.cols = CollisionSystem(self.MAP_TILES, self.MAP_TILES, self.TILE_SIZE)

        extent = float(self.MAP_TILES * self.TILE_SIZE)
        self.camera.set_size((400.0, 300.0))
        self.camera.set_bounds(Rect(0.0, 0.0, extent, extent))

        self.gui.set_view_size(self.game.window.get_size())

        self.load_textures()
        self.set_textures()
        self.set_gui()

        self.camera.set_target(self.player)

        self.map.create_tiles(
            self.tex_mgr.get_texture("overworld"), self._res("overworld_atlas.json")
        )
        self.map.generate()

    def _res(self, name: str) -> Path:
        return self.resource_dir / name

    def draw(self, dt: float) -> None:
        view = self.camera.view
        world = pygame.Surface((max(1, int(view.size.x)), max(1, int(view.size.y))))
        world.fill(BACKGROUND)
        self.map.draw(world)
        self.player.draw(world, view.rect.position)

        window = self.game.window
        window.blit(pygame.transform.scale(world, window.get_size()), (0, 0))
        self.gui.draw(window)

    def update(self, dt: float) -> None:
        self.player.update_sprite(dt)
        self.camera.update(dt)

    def handle_input(self, dt: float) -> None:
        mouse_pos = pygame.mouse.get_pos()
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.game.close()
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_TAB:
                self.gui.toggle_component_visibility("inventory")
            self.gui.handle_event(mouse_pos, event)
        self.gui.handle_input(mouse_pos)

        move = self.player.get_movement(dt, pygame.key.get_pressed())
        adjusted = self.cols.entity_adjust_position(move, self.player.entity_bounds())
        self.player.move(adjusted)

    def load_textures(self) -> None:
        for name, file_name in (
            ("player", "character.png"),
            ("overworld", "overworld.png"),
            ("inventory", "inventory.png"),
            ("itembox", "itembox.png"),
            ("itemicon", "itemicon.png"),
        ):
            self.tex_mgr.create_texture(name, self._res(file_name))

        self.tex_mgr.create_font("main", self._res("main.ttf"))
        self.tex_mgr.create_font("main2", self._res("VCR_OSD_MONO_1.001.ttf"))

    def set_textures(self) -> None:
        self.player.set_texture(
            self.tex_mgr.get_texture("player"), self._res("character_atlas.json")
        )
        self.gui.set_font(self.tex_mgr.get_font("main2"))

    def set_gui(self) -> None:
        self.gui.set_scale(2.0)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="overworld", description="Walk around the overworld.")
    parser.add_argument(
        "--resources", default=DEFAULT_RESOURCES, help="directory holding images, atlases and fonts"
    )
    args = parser.parse_args(argv)

    pygame.init()
    try:
        game = Game()
        game.push_state(MenuState(game, args.resources))
        game.game_loop()
    finally:
        pygame.quit()
    return 0