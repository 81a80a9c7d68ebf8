"""Screen and logical dimensions, and scaling from the reference design."""

from __future__ import annotations

import math
from dataclasses import dataclass

REFERENCE_WIDTH = 1920.0
REFERENCE_HEIGHT = 1080.0


def _round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def _check_dimensions(width: int, height: int) -> None:
    if width < 0 or height < 0:
        raise ValueError(f"dimensions must not be negative: {width}x{height}")


@dataclass
class Viewport:
    """Physical pixels for rendering and logical pixels for UI scaling."""

    screen_width: int = 800
    screen_height: int = 600
    logical_width: int = 800
    logical_height: int = 600

    def scale_factor(self) -> float:
        """Scale from the reference design, covering the logical area."""
        return max(
            self.logical_width / REFERENCE_WIDTH,
            self.logical_height / REFERENCE_HEIGHT,
        )

    def set_screen_dimensions(self, width: int, height: int) -> None:
        _check_dimensions(width, height)
        self.screen_width = width
        self.screen_height = height

    def set_logical_dimensions(self, width: int, height: int) -> None:
        _check_dimensions(width, height)
        self.logical_width = width
        self.logical_height = height

    def to_physical(self, value: float) -> int:
        """Scale a reference-design length and round it to whole pixels."""
        return _round_half_away(value * self.scale_factor())