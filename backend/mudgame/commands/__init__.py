"""Text commands wired onto the engine's CommandRouter."""

from .game import build_router

__all__ = ["build_router"]
