"""Loading of the UI fonts, with a fallback to the built-in font."""

from __future__ import annotations

from pathlib import Path

import pygame

REGULAR_FILE = "Roboto-Regular.ttf"
BOLD_FILE = "Roboto-Bold.ttf"
FONT_SIZE = 64


class FontManager:
    """Loads the regular and bold fonts once and hands them out."""

    def __init__(self, font_dir: str | Path = "assets/fonts") -> None:
        self.font_dir = Path(font_dir)
        self.loaded = False
        self._regular: pygame.font.Font | None = None
        self._bold: pygame.font.Font | None = None
        self._fallback: pygame.font.Font | None = None

    def __enter__(self) -> FontManager:
        self.load()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.unload()

    def load(self) -> None:
        """Load both fonts; a font that fails to load is left out."""
        if self.loaded:
            return
        if not pygame.font.get_init():
            pygame.font.init()
        self._regular = self._open(REGULAR_FILE)
        self._bold = self._open(BOLD_FILE)
        self.loaded = True

    def unload(self) -> None:
        """Release the fonts."""
        if not self.loaded:
            return
        self._regular = None
        self._bold = None
        self._fallback = None
        self.loaded = False

    def regular(self) -> pygame.font.Font:
        """Return the regular font, or the built-in font if it did not load."""
        self.load()
        return self._regular or self._default()

    def bold(self) -> pygame.font.Font:
        """Return the bold font, or the built-in font if it did not load."""
        self.load()
        return self._bold or self._default()

    def _open(self, name: str) -> pygame.font.Font | None:
        try:
            return pygame.font.Font(str(self.font_dir / name), FONT_SIZE)
        except (OSError, pygame.error):
            return None

    def _default(self) -> pygame.font.Font:
        if self._fallback is None:
            self._fallback = pygame.font.Font(None, FONT_SIZE)
        return self._fallback