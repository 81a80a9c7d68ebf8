"""Immediate-mode button: hit testing, state and drawing."""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import lru_cache
from typing import Iterable

import pygame

from .colors import Border, ButtonColors, Color, TextColors
from .viewport import Viewport, _round_half_away


@dataclass
class Button:
    """A button laid out in reference-design pixels."""

    x: float
    y: float
    width: float
    height: float
    text: str = ""
    background_color: Color = ButtonColors.DEFAULT
    text_color: Color = TextColors.ON_DARK
    hover_color: Color = ButtonColors.DEFAULT_HOVER
    pressed_color: Color = ButtonColors.DEFAULT_PRESSED
    border_color: Color = Border.DEFAULT
    border_width: float = 2.0
    font_size: int = 56
    border_radius: float = 0.3
    segments: int = 16
    font: pygame.font.Font | None = field(default=None, repr=False)


@dataclass(frozen=True)
class ButtonState:
    """What the mouse did to a button this frame."""

    hovered: bool = False
    pressed: bool = False
    clicked: bool = False


@dataclass(frozen=True)
class MouseInput:
    """Mouse position and left-button state for one frame."""

    position: tuple[float, float] = (0, 0)
    down: bool = False
    released: bool = False

    @classmethod
    def poll(cls, events: Iterable[pygame.event.Event]) -> MouseInput:
        """Read the mouse now; ``released`` comes from this frame's events."""
        released = any(
            event.type == pygame.MOUSEBUTTONUP and getattr(event, "button", None) == 1
            for event in events
        )
        return cls(
            position=pygame.mouse.get_pos(),
            down=bool(pygame.mouse.get_pressed()[0]),
            released=released,
        )


def adjust_color(color: Color, factor: float) -> Color:
    """Scale brightness: below 1 darkens, above 1 lightens; alpha is kept."""

    def channel(value: int) -> int:
        return max(0, min(255, int(value * factor)))

    return Color(channel(color.r), channel(color.g), channel(color.b), color.a)


def physical_rect(btn: Button, scale: float) -> pygame.Rect:
    """The button's rectangle in whole physical pixels."""
    return pygame.Rect(
        _round_half_away(btn.x * scale),
        _round_half_away(btn.y * scale),
        _round_half_away(btn.width * scale),
        _round_half_away(btn.height * scale),
    )


def is_point_inside(btn: Button, point: tuple[float, float], scale: float) -> bool:
    """Whether a physical point lies on the button, edges included."""
    rect = physical_rect(btn, scale)
    px, py = point
    return rect.x <= px <= rect.x + rect.width and rect.y <= py <= rect.y + rect.height


@lru_cache(maxsize=32)
def _default_font(size: int) -> pygame.font.Font:
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.Font(None, size)


def _render_text(
    font: pygame.font.Font | None, text: str, size: int, color: Color
) -> pygame.Surface:
    if font is None:
        return _default_font(size).render(text, True, color.to_tuple())
    rendered = font.render(text, True, color.to_tuple())
    height = rendered.get_height()
    if height == size or height == 0:
        return rendered
    width = max(1, _round_half_away(rendered.get_width() * size / height))
    return pygame.transform.smoothscale(rendered, (width, size))


def _fill_rect(surface: pygame.Surface, rect: pygame.Rect, color: Color, roundness: float) -> None:
    if roundness > 0.0:
        radius = _round_half_away(roundness * min(rect.width, rect.height) / 2)
        pygame.draw.rect(surface, color.to_tuple(), rect, border_radius=radius)
    else:
        pygame.draw.rect(surface, color.to_tuple(), rect)


def draw_button(
    surface: pygame.Surface, btn: Button, viewport: Viewport, mouse: MouseInput
) -> ButtonState:
    """Draw the button onto ``surface`` and report its state."""
    scale = viewport.scale_factor()
    hovered = is_point_inside(btn, mouse.position, scale)
    state = ButtonState(
        hovered=hovered,
        pressed=hovered and mouse.down,
        clicked=hovered and mouse.released,
    )

    rect = physical_rect(btn, scale)
    border = max(1, _round_half_away(btn.border_width * scale))
    font_size = _round_half_away(btn.font_size * scale)

    if state.pressed:
        fill, edge = btn.pressed_color, adjust_color(btn.pressed_color, 0.6)
    elif state.hovered:
        fill, edge = btn.hover_color, adjust_color(btn.hover_color, 0.8)
    else:
        fill, edge = btn.background_color, btn.border_color

    _fill_rect(surface, rect.inflate(border * 2, border * 2), edge, btn.border_radius)
    _fill_rect(surface, rect, fill, btn.border_radius)

    if btn.text and font_size > 0:
        label = _render_text(btn.font, btn.text, font_size, btn.text_color)
        text_x = _round_half_away(rect.x + (rect.width - label.get_width()) / 2)
        text_y = _round_half_away(rect.y + (rect.height - label.get_height()) / 2)
        surface.blit(label, (text_x, text_y))

    return state