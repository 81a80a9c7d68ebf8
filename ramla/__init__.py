"""Resolution-independent UI engine on pygame: scaled buttons, text, FPS counter and a script host."""

__version__ = "0.1.0"