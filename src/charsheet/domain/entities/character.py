"""Mutable working state for a single character."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict

from charsheet.domain.attributes import default_attribute_scores
from charsheet.domain.rules import DEFAULT_SKILL_POINT_BUDGET


@dataclass(slots=True)
class Character:
    """Stores invested points only; modifiers, classes and totals are derived."""

    attribute_scores: Dict[str, int] = field(default_factory=default_attribute_scores)
    skill_points: Dict[str, int] = field(default_factory=dict)
    points_spending_max: int = DEFAULT_SKILL_POINT_BUDGET
