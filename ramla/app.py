"""The engine: one frame of UI per tick, driven by the script host."""

from __future__ import annotations

import argparse

import pygame

from .button import Button, ButtonState, MouseInput, draw_button
from .colors import Color, Primary
from .cursor import Cursor, CursorType
from .fonts import FontManager
from .fps_counter import GREEN, draw_fps_counter_ex
from .scripting import ScriptError, ScriptHost
from .text import draw_text_logical_centered
from .viewport import REFERENCE_HEIGHT, Viewport

TITLE = "Ramla Engine"
TARGET_FPS = 60
BLACK = Primary.BLACK
WHITE = Primary.WHITE
YELLOW = Color(253, 249, 0)


class Engine:
    """Holds the viewport, fonts, cursor, counter and script host."""

    def __init__(self, width: int = 800, height: int = 600) -> None:
        self.viewport = Viewport(width, height, width, height)
        self.fonts = FontManager()
        self.cursor = Cursor()
        self.counter = 0
        self.host = ScriptHost(self._draw_script_button)
        self._surface: pygame.Surface | None = None
        self._mouse = MouseInput()

    def _draw_script_button(self, btn: Button) -> ButtonState:
        if self._surface is None:
            raise ScriptError("button() called outside a frame")
        return draw_button(self._surface, btn, self.viewport, self._mouse)

    def update_draw_frame(
        self, surface: pygame.Surface, mouse: MouseInput, fps: float
    ) -> ButtonState:
        """Draw one frame onto ``surface`` and return the button's state."""
        surface.fill(BLACK.to_tuple())
        regular = self.fonts.regular()
        self.host.font = regular

        self._surface, self._mouse = surface, mouse
        try:
            state = self.host.call_button("drawTestButton")
        finally:
            self._surface = None

        self.cursor.set(CursorType.POINTER if state.hovered else CursorType.DEFAULT)
        if state.clicked:
            self.counter += 1

        bold = self.fonts.bold()
        counter_y = (REFERENCE_HEIGHT - 120.0) / 2.0 - 80.0
        draw_text_logical_centered(
            surface, self.viewport, bold, f"Counter: {self.counter}", counter_y, 56, WHITE
        )

        message = self.host.call_text("getWelcomeMessage")
        if message is not None:
            draw_text_logical_centered(
                surface, self.viewport, bold, message, counter_y - 80.0, 32, YELLOW
            )

        result = self.host.call_math("multiply", self.counter, 2)
        draw_text_logical_centered(
            surface,
            self.viewport,
            bold,
            f"Counter * 2 = {result:.0f}",
            counter_y - 120.0,
            28,
            GREEN,
        )

        draw_fps_counter_ex(
            surface, fps, self.viewport.screen_width, self.viewport.screen_height, regular
        )
        return state

    def run(self) -> None:
        """Open a window and run frames until it is closed."""
        pygame.init()
        try:
            pygame.display.set_mode(
                (self.viewport.screen_width, self.viewport.screen_height), pygame.RESIZABLE
            )
            pygame.display.set_caption(TITLE)
            self.fonts.load()
            clock = pygame.time.Clock()
            while True:
                events = pygame.event.get()
                if any(event.type == pygame.QUIT for event in events):
                    break
                for event in events:
                    if event.type == pygame.VIDEORESIZE:
                        self.viewport.set_screen_dimensions(event.w, event.h)
                        self.viewport.set_logical_dimensions(event.w, event.h)
                screen = pygame.display.get_surface()
                self.update_draw_frame(screen, MouseInput.poll(events), clock.get_fps())
                pygame.display.flip()
                clock.tick(TARGET_FPS)
        finally:
            self.fonts.unload()
            self.host.close()
            pygame.quit()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="ramla", description="Run the engine window.")
    parser.add_argument("--width", type=int, default=800)
    parser.add_argument("--height", type=int, default=600)
    args = parser.parse_args(argv)
    if args.width <= 0 or args.height <= 0:
        parser.error("width and height must be positive")
    Engine(args.width, args.height).run()
    return 0