"""Skill point allocation and skill totals."""
from __future__ import annotations

from typing import Dict

from charsheet.data.repositories import SkillsRepository
from charsheet.domain.attributes import derive_modifiers, total_points
from charsheet.domain.budget import apply_bounded_delta
from charsheet.domain.entities import Character
from charsheet.domain.skills import derive_skill_totals
from charsheet.services.point_adjustment import (
    PointAdjustResult,
    build_adjust_result,
    invalid_selection,
)


class SkillLedger:
    """Spend skill points within each character's own budget."""

    def __init__(self, *, skills_repo: SkillsRepository) -> None:
        self._skills_repo = skills_repo

    def adjust(self, character: Character, skill_name: str, delta: int) -> PointAdjustResult:
        budget = character.points_spending_max
        if skill_name not in self._skills_repo.names():
            return invalid_selection(
                "Invalid skill selection.",
                total_points(character.skill_points),
                budget,
            )
        character.skill_points.setdefault(skill_name, 0)
        decision = apply_bounded_delta(character.skill_points, skill_name, delta, budget)
        return build_adjust_result(decision, skill_name, budget)

    def totals(self, character: Character) -> Dict[str, int]:
        """Derive totals from the character's current points and modifiers."""
        modifiers = derive_modifiers(character.attribute_scores)
        return derive_skill_totals(character.skill_points, modifiers, self._skills_repo.all())

    @staticmethod
    def remaining(character: Character) -> int:
        return max(0, character.points_spending_max - total_points(character.skill_points))
