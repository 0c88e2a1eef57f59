"""Attribute allocation against the shared attribute budget."""
from __future__ import annotations

from charsheet.domain.attributes import total_points
from charsheet.domain.budget import apply_bounded_delta
from charsheet.domain.entities import Character
from charsheet.domain.rules import ATTRIBUTE_NAMES, MAX_ATTRIBUTE_POINTS
from charsheet.services.point_adjustment import (
    PointAdjustResult,
    build_adjust_result,
    invalid_selection,
)


class AttributeLedger:
    """Raise or lower attribute scores without breaking the point budget."""

    def __init__(self, *, max_points: int = MAX_ATTRIBUTE_POINTS) -> None:
        self._max_points = max_points

    @property
    def max_points(self) -> int:
        return self._max_points

    def adjust(self, character: Character, attribute: str, delta: int) -> PointAdjustResult:
        """Apply ``delta`` to one attribute.

        Increases past the budget are refused with ``success=False`` and the
        character untouched; decreases always apply and stop at zero.
        """
        if attribute not in ATTRIBUTE_NAMES:
            return invalid_selection(
                "Invalid attribute selection.",
                total_points(character.attribute_scores),
                self._max_points,
            )
        decision = apply_bounded_delta(character.attribute_scores, attribute, delta, self._max_points)
        return build_adjust_result(decision, attribute, self._max_points)

    def remaining(self, character: Character) -> int:
        return max(0, self._max_points - total_points(character.attribute_scores))
