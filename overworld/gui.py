"""On-screen interface components and the container that manages them."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Callable

import pygame

from overworld.geometry import View, Vector2

log = logging.getLogger(__name__)

TEXT_COLOUR = (255, 255, 255)


class GuiComponent(ABC):
    """A part of the interface that can be shown, hidden, scaled and drawn."""

    def __init__(self) -> None:
        self.visible = False
        self.position = Vector2()
        self.scale = Vector2(1.0, 1.0)

    @abstractmethod
    def handle_input(self, mouse_pos) -> None:
        """React to the current mouse position."""

    @abstractmethod
    def handle_event(self, mouse_pos, event) -> None:
        """React to a single input event."""

    @abstractmethod
    def draw(self, surface: pygame.Surface) -> None:
        """Render the component onto surface."""


class Button(GuiComponent):
    """A component that calls a function when clicked with the left button."""

    def __init__(self) -> None:
        super().__init__()
        self.on_press: Callable[[], None] | None = None
        self.active = False
        self.mouse_pos = Vector2()

    def set_on_press(self, func: Callable[[], None]) -> None:
        self.on_press = func

    def handle_input(self, mouse_pos) -> None:
        """Record where the mouse currently is."""
        x, y = mouse_pos
        self.mouse_pos = Vector2(float(x), float(y))

    def handle_event(self, mouse_pos, event) -> None:
        if (
            event.type == pygame.MOUSEBUTTONDOWN
            and getattr(event, "button", None) == 1
            and self.on_press is not None
        ):
            self.on_press()


class TextButton(Button):
    """A button drawn as a line of text."""

    def __init__(self, text: str = "", font: pygame.font.Font | None = None) -> None:
        super().__init__()
        self.text = text
        self.font = font

    def draw(self, surface: pygame.Surface) -> None:
        if self.font is None:
            return
        rendered = self.font.render(self.text, True, TEXT_COLOUR)
        surface.blit(rendered, (int(self.position.x), int(self.position.y)))


class Gui:
    """Named components with a stack of those currently shown."""

    def __init__(self) -> None:
        self.draw_stack: list[GuiComponent] = []
        self.components: dict[str, GuiComponent] = {}
        self.gui_scale = 1.0
        self.view = View()
        self.font: pygame.font.Font | None = None

    def add_component(self, name: str, component: GuiComponent) -> None:
        self.components[name] = component

    def set_font(self, font) -> None:
        self.font = font

    def set_view_size(self, size) -> None:
        size = Vector2(*size)
        self.view.set_size(size)
        self.view.center = size * 0.5

    def set_scale(self, scalar: float) -> None:
        """Scale every component uniformly."""
        self.gui_scale = scalar
        for component in self.components.values():
            component.scale = Vector2(scalar, scalar)

    def _show_component(self, component: GuiComponent) -> None:
        component.visible = True
        self.draw_stack.append(component)

    def _hide_component(self, component: GuiComponent) -> None:
        component.visible = False
        if self.draw_stack:
            self.draw_stack.pop()

    def toggle_component_visibility(self, name: str) -> None:
        """Show a hidden component or hide a shown one; unknown names are ignored."""
        component = self.components.get(name)
        if component is None:
            log.warning("component does not exist: %s", name)
            return
        if component.visible:
            self._hide_component(component)
        else:
            self._show_component(component)

    def _shown(self):
        return (component for component in self.draw_stack if component.visible)

    def handle_input(self, mouse_pos) -> None:
        for component in self._shown():
            component.handle_input(mouse_pos)

    def handle_event(self, mouse_pos, event) -> None:
        for component in self._shown():
            component.handle_event(mouse_pos, event)

    def draw(self, surface: pygame.Surface) -> None:
        for component in self._shown():
            component.draw(surface)