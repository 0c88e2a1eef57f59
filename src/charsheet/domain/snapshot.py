"""Frozen per-character aggregate held in the roster and persisted."""
from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Tuple

from charsheet.domain.entities import Character

_MAPPING_FIELDS = ("attribute_scores", "attribute_modifiers", "skill_points", "skill_totals")


@dataclass(frozen=True, slots=True)
class CharacterSnapshot:
    """Points plus every value derived from them at snapshot time.

    Mapping fields are copied on construction and exposed read-only.
    """

    attribute_scores: Mapping[str, int]
    attribute_modifiers: Mapping[str, int]
    classes_achieved: Tuple[str, ...]
    points_spending_max: int
    skill_points: Mapping[str, int]
    skill_totals: Mapping[str, int]

    def __post_init__(self) -> None:
        for name in _MAPPING_FIELDS:
            object.__setattr__(self, name, MappingProxyType(dict(getattr(self, name))))
        object.__setattr__(self, "classes_achieved", tuple(self.classes_achieved))

    def to_character(self) -> Character:
        """Return an editable copy of the stored points."""
        return Character(
            attribute_scores=dict(self.attribute_scores),
            skill_points=dict(self.skill_points),
            points_spending_max=self.points_spending_max,
        )
