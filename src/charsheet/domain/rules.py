"""Fixed rule constants for character sheets."""
from __future__ import annotations

ATTRIBUTE_NAMES: tuple[str, ...] = (
    "Strength",
    "Dexterity",
    "Constitution",
    "Intelligence",
    "Wisdom",
    "Charisma",
)

MAX_ATTRIBUTE_POINTS = 70
DEFAULT_ATTRIBUTE_VALUE = 10
DEFAULT_SKILL_POINT_BUDGET = 10
DIE_SIZE = 20
