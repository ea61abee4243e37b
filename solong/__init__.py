"""A tile-based puzzle game played on .ber map files, drawn with pygame."""

__version__ = "0.1.0"