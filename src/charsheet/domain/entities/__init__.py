"""Runtime entity exports."""

from .character import Character

__all__ = ["Character"]
