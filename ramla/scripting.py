"""A script host: named functions that drive the UI through a button binding."""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any, Callable

import pygame

from .button import Button, ButtonState
from .colors import Color
from .viewport import REFERENCE_HEIGHT, REFERENCE_WIDTH

WELCOME_MESSAGE = "Hello from script!"
TEST_BUTTON_TEXT = "Script Button!"

BUTTON_BACKGROUND = Color(74, 144, 226)
BUTTON_TEXT = Color(255, 255, 255)
BUTTON_HOVER = Color(94, 164, 246)
BUTTON_PRESSED = Color(54, 124, 206)
BUTTON_BORDER = Color(100, 100, 100)


class ScriptError(Exception):
    """A script function is missing, failed, or was given bad arguments."""


def _to_number(value: Any) -> float | int | None:
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, (int, float)):
        return value
    if isinstance(value, str):
        text = value.strip()
        for convert in (int, float):
            try:
                return convert(text)
            except ValueError:
                continue
    return None


def _to_text(value: Any) -> str | None:
    if isinstance(value, str):
        return value
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if math.isfinite(value) and value.is_integer():
            return f"{value:.1f}"
        return "%.14g" % value
    return None


def _truthy(value: Any) -> bool:
    return value is not None and value is not False


def button_from_table(table: Any, font: pygame.font.Font | None) -> Button:
    """Build a button from a script table; ``font`` is used unless disabled."""
    if not isinstance(table, Mapping):
        raise ScriptError("Expected table as first argument to button()")

    def number(key: str, default: float) -> float:
        value = _to_number(table.get(key))
        return default if value is None else value

    use_font = table.get("useRoboto")
    if not isinstance(use_font, bool):
        use_font = True

    return Button(
        x=float(number("x", 0.0)),
        y=float(number("y", 0.0)),
        width=float(number("width", 0.0)),
        height=float(number("height", 0.0)),
        text=_to_text(table.get("text")) or "",
        background_color=BUTTON_BACKGROUND,
        text_color=BUTTON_TEXT,
        hover_color=BUTTON_HOVER,
        pressed_color=BUTTON_PRESSED,
        border_color=BUTTON_BORDER,
        border_width=float(number("borderWidth", 2.0)),
        font_size=int(number("fontSize", 56)),
        border_radius=float(number("borderRadius", 0.3)),
        segments=int(number("segments", 16)),
        font=font if use_font else None,
    )


def state_to_table(state: ButtonState) -> dict[str, bool]:
    """Turn a button state into the table handed back to scripts."""
    return {
        "hovered": state.hovered,
        "pressed": state.pressed,
        "clicked": state.clicked,
    }


class ScriptHost:
    """Holds named script functions; ``ui`` draws a button and returns its state."""

    def __init__(self, ui: Callable[[Button], ButtonState]) -> None:
        self._ui = ui
        self.font: pygame.font.Font | None = None
        self._globals: dict[str, Callable[..., Any]] = {}
        self._closed = False
        self.register("button", self._button)
        self.register("getWelcomeMessage", lambda: WELCOME_MESSAGE)
        self.register("multiply", lambda a, b: a * b)
        self.register("drawTestButton", self._draw_test_button)

    def __enter__(self) -> ScriptHost:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    @property
    def closed(self) -> bool:
        return self._closed

    def register(self, name: str, function: Callable[..., Any]) -> None:
        """Make ``function`` callable from scripts as ``name``."""
        if self._closed:
            raise ScriptError("script host is closed")
        if not callable(function):
            raise TypeError(f"{name!r} must be callable")
        self._globals[name] = function

    def call(self, name: str, *args: Any) -> Any:
        """Call a script function; any failure is raised as ScriptError."""
        if self._closed:
            raise ScriptError("script host is closed")
        function = self._globals.get(name)
        if function is None:
            raise ScriptError(f"attempt to call a nil value (global '{name}')")
        try:
            return function(*args)
        except ScriptError:
            raise
        except Exception as exc:
            raise ScriptError(f"{name}: {exc}") from exc

    def call_text(self, name: str) -> str | None:
        """Call ``name`` with no arguments; its result as text, or None."""
        try:
            return _to_text(self.call(name))
        except ScriptError:
            return None

    def call_math(self, name: str, a: float, b: float) -> float:
        """Call ``name`` with two numbers; its numeric result, or 0.0."""
        try:
            result = _to_number(self.call(name, float(a), float(b)))
        except ScriptError:
            return 0.0
        return 0.0 if result is None else float(result)

    def call_button(self, name: str) -> ButtonState:
        """Call ``name`` and read the button state table it returns."""
        try:
            result = self.call(name)
        except ScriptError:
            return ButtonState()
        if not isinstance(result, Mapping):
            return ButtonState()
        return ButtonState(
            hovered=_truthy(result.get("hovered")),
            pressed=_truthy(result.get("pressed")),
            clicked=_truthy(result.get("clicked")),
        )

    def close(self) -> None:
        """Drop every function; later calls fail."""
        self._globals.clear()
        self._closed = True

    def _button(self, table: Any) -> dict[str, bool]:
        btn = button_from_table(table, self.font)
        return state_to_table(self._ui(btn))

    def _draw_test_button(self) -> Any:
        width, height = 300, 120
        return self.call(
            "button",
            {
                "x": (REFERENCE_WIDTH - width) / 2,
                "y": (REFERENCE_HEIGHT - height) / 2,
                "width": width,
                "height": height,
                "text": TEST_BUTTON_TEXT,
                "fontSize": 56,
                "borderWidth": 2,
                "borderRadius": 0.3,
                "segments": 16,
                "useRoboto": True,
            },
        )