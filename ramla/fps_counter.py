"""Frame-rate display in the top right corner."""

from __future__ import annotations

import pygame

from .colors import Color, StatusColors
from .text import draw_text_logical, measure_text
from .viewport import _round_half_away

FONT_SIZE = 20
PADDING = 10.0
GREEN = Color(0, 228, 48)


def format_fps(fps: float) -> str:
    """Return the counter label for ``fps`` frames per second."""
    return f"FPS: {int(fps)}"


def draw_fps_counter(
    surface: pygame.Surface, fps: float, screen_width: int, screen_height: int
) -> pygame.Rect:
    """Draw the counter with the built-in font in the status colour."""
    text = format_fps(fps)
    width, _ = measure_text(None, text, FONT_SIZE)
    x = int(screen_width - width - PADDING)
    return draw_text_logical(
        surface, None, text, x, int(PADDING), FONT_SIZE, StatusColors.SUCCESS
    )


def draw_fps_counter_ex(
    surface: pygame.Surface,
    fps: float,
    screen_width: int,
    screen_height: int,
    font: pygame.font.Font | None = None,
    scale: float = 1.0,
) -> pygame.Rect:
    """Draw the counter with an optional font, scaled by ``scale``."""
    text = format_fps(fps)
    size = _round_half_away(FONT_SIZE * scale)
    padding = PADDING * scale
    width, _ = measure_text(font, text, size)
    x = screen_width - width - padding
    return draw_text_logical(surface, font, text, x, padding, size, GREEN)