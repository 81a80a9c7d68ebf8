"""Mouse cursor styles and a small controller that applies them."""

from __future__ import annotations

from enum import Enum
from typing import Callable

import pygame


class CursorType(Enum):
    """Cursor kinds, valued by their style names."""

    DEFAULT = "default"
    POINTER = "pointer"
    TEXT = "text"
    CROSSHAIR = "crosshair"
    MOVE = "move"
    NOT_ALLOWED = "not-allowed"
    GRAB = "grab"
    GRABBING = "grabbing"


def cursor_style(cursor: CursorType | str) -> str:
    """Return the style name of a cursor kind; raise ValueError if unknown."""
    return CursorType(cursor).value


def _system_cursor(cursor: CursorType) -> int:
    mapping = {
        CursorType.DEFAULT: pygame.SYSTEM_CURSOR_ARROW,
        CursorType.POINTER: pygame.SYSTEM_CURSOR_HAND,
        CursorType.TEXT: pygame.SYSTEM_CURSOR_IBEAM,
        CursorType.CROSSHAIR: pygame.SYSTEM_CURSOR_CROSSHAIR,
        CursorType.MOVE: pygame.SYSTEM_CURSOR_SIZEALL,
        CursorType.NOT_ALLOWED: pygame.SYSTEM_CURSOR_NO,
        CursorType.GRAB: pygame.SYSTEM_CURSOR_HAND,
        CursorType.GRABBING: pygame.SYSTEM_CURSOR_HAND,
    }
    return mapping[cursor]


def _apply_system_cursor(cursor: CursorType) -> None:
    if pygame.display.get_init() and pygame.display.get_surface() is not None:
        pygame.mouse.set_system_cursor(_system_cursor(cursor))


class Cursor:
    """Tracks the current cursor and applies changes to the window."""

    def __init__(self, apply: Callable[[CursorType], None] | None = None) -> None:
        self._apply = apply if apply is not None else _apply_system_cursor
        self.current = CursorType.DEFAULT

    def set(self, cursor: CursorType | str) -> None:
        """Switch to ``cursor``; raise ValueError for an unknown kind."""
        kind = CursorType(cursor)
        self._apply(kind)
        self.current = kind

    def set_default(self) -> None:
        self.set(CursorType.DEFAULT)

    def set_pointer(self) -> None:
        self.set(CursorType.POINTER)

    def set_text(self) -> None:
        self.set(CursorType.TEXT)