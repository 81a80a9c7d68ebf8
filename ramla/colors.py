"""Colour type and the named palette used by the UI elements."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Color:
    """An RGBA colour with 8-bit channels."""

    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self) -> None:
        for name, value in zip("rgba", self.to_tuple()):
            if not isinstance(value, int):
                raise TypeError(f"channel {name} must be an int, got {value!r}")
            if not 0 <= value <= 255:
                raise ValueError(f"channel {name} out of range 0..255: {value}")

    def to_tuple(self) -> tuple[int, int, int, int]:
        """Return the colour as an ``(r, g, b, a)`` tuple."""
        return (self.r, self.g, self.b, self.a)


class Primary:
    """Main brand colours."""

    STEEL = Color(70, 130, 180)
    STEEL_LIGHT = Color(100, 149, 237)
    STEEL_DARK = Color(45, 100, 145)
    WHITE = Color(255, 255, 255)
    BLACK = Color(0, 0, 0)


class ButtonColors:
    """Button colour schemes: normal, hover and pressed for each kind."""

    DEFAULT = Primary.STEEL
    DEFAULT_HOVER = Primary.STEEL_LIGHT
    DEFAULT_PRESSED = Primary.STEEL_DARK

    SUCCESS = Color(76, 175, 80)
    SUCCESS_HOVER = Color(102, 187, 106)
    SUCCESS_PRESSED = Color(56, 142, 60)

    WARNING = Color(255, 152, 0)
    WARNING_HOVER = Color(255, 183, 77)
    WARNING_PRESSED = Color(239, 108, 0)

    DANGER = Color(244, 67, 54)
    DANGER_HOVER = Color(239, 83, 80)
    DANGER_PRESSED = Color(198, 40, 40)


class TextColors:
    """Text colours."""

    PRIMARY = Color(33, 33, 33)
    SECONDARY = Color(117, 117, 117)
    LIGHT = Color(189, 189, 189)
    ON_DARK = Color(255, 255, 255)
    LINK = Primary.STEEL


class BackgroundColors:
    """Background and surface colours."""

    LIGHT = Color(250, 250, 250)
    MEDIUM = Color(245, 245, 245)
    DARK = Color(33, 33, 33)
    SURFACE = Color(255, 255, 255)
    OVERLAY = Color(0, 0, 0, 128)


class StatusColors:
    """Status indicator colours."""

    SUCCESS = Color(76, 175, 80)
    WARNING = Color(255, 193, 7)
    ERROR = Color(244, 67, 54)
    INFO = Primary.STEEL


class Gray:
    """Neutral grays, from lightest to darkest."""

    GRAY50 = Color(250, 250, 250)
    GRAY100 = Color(245, 245, 245)
    GRAY200 = Color(238, 238, 238)
    GRAY300 = Color(224, 224, 224)
    GRAY400 = Color(189, 189, 189)
    GRAY500 = Color(158, 158, 158)
    GRAY600 = Color(117, 117, 117)
    GRAY700 = Color(97, 97, 97)
    GRAY800 = Color(66, 66, 66)
    GRAY900 = Color(33, 33, 33)


class Border:
    """Border colours, darker shades of the control colours."""

    DEFAULT = Color(50, 90, 130)
    SUCCESS = Color(56, 120, 60)
    WARNING = Color(220, 108, 0)
    DANGER = Color(180, 40, 40)
    LIGHT = Gray.GRAY300
    MEDIUM = Gray.GRAY500
    DARK = Gray.GRAY700