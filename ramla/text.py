"""Drawing text in logical and reference-design coordinates."""

from __future__ import annotations

import pygame

from .button import _default_font, _render_text
from .colors import Color
from .viewport import Viewport, _round_half_away


def measure_text(font: pygame.font.Font | None, text: str, size: float) -> tuple[int, int]:
    """Return the ``(width, height)`` of ``text`` drawn at ``size`` pixels."""
    size = _round_half_away(size)
    if size <= 0 or not text:
        return (0, max(size, 0))
    if font is None:
        return (_default_font(size).size(text)[0], size)
    width, height = font.size(text)
    if height == 0 or height == size:
        return (width, size)
    return (max(1, _round_half_away(width * size / height)), size)


def draw_text_logical(
    surface: pygame.Surface,
    font: pygame.font.Font | None,
    text: str,
    x: float,
    y: float,
    font_size: float,
    color: Color,
) -> pygame.Rect:
    """Draw ``text`` with its top-left corner at whole pixels; return its area."""
    px = _round_half_away(x)
    py = _round_half_away(y)
    size = _round_half_away(font_size)
    if not text or size <= 0:
        return pygame.Rect(px, py, 0, 0)
    label = _render_text(font, text, size, color)
    surface.blit(label, (px, py))
    return pygame.Rect((px, py), label.get_size())


def draw_text_logical_centered(
    surface: pygame.Surface,
    viewport: Viewport,
    font: pygame.font.Font | None,
    text: str,
    y_points: float,
    font_size_points: float,
    color: Color,
) -> pygame.Rect:
    """Draw ``text`` centred horizontally, placed and sized in design points."""
    size = viewport.to_physical(font_size_points)
    y = viewport.to_physical(y_points)
    width, _ = measure_text(font, text, size)
    x = _round_half_away(viewport.logical_width / 2.0 - width / 2.0)
    return draw_text_logical(surface, font, text, x, y, size, color)