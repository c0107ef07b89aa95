"""Terminal games (text RPG, snail, falling balls, push puzzle) and practice exercises."""

__version__ = "0.1.0"