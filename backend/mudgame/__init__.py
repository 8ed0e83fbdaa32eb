"""mudgame - a single-room combat and exploration game."""

__version__ = "0.1.0"
