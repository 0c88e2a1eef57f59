"""d20 skill checks for one character or the best-qualified party member."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from charsheet.core.rng import RNG
from charsheet.core.types import CheckLabel
from charsheet.domain.rules import DIE_SIZE
from charsheet.domain.snapshot import CharacterSnapshot
from charsheet.services.errors import EmptyRosterError

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RollOutcome:
    roll: int
    skill_total: int
    dc: int
    success: bool

    @property
    def label(self) -> CheckLabel:
        return "Success" if self.success else "Failure"


@dataclass(frozen=True, slots=True)
class PartyRollOutcome:
    character_index: int
    skill_name: str
    outcome: RollOutcome


class CheckResolver:
    """Resolves checks as ``roll + skill_total >= dc``."""

    def __init__(self, rng: RNG, *, die_size: int = DIE_SIZE) -> None:
        self._rng = rng
        self._die_size = die_size

    def roll_check(self, skill_total: int, dc: int) -> RollOutcome:
        roll = self._rng.roll_die(self._die_size)
        outcome = resolve_roll(roll, skill_total, dc)
        logger.debug(f"d{self._die_size} rolled {roll} + {skill_total} vs DC {dc}: {outcome.label}")
        return outcome

    def party_roll_check(
        self,
        characters: Sequence[CharacterSnapshot],
        skill_name: str,
        dc: int,
    ) -> PartyRollOutcome:
        """Roll for whichever character has the highest total in ``skill_name``."""
        index = select_best_character(characters, skill_name)
        outcome = self.roll_check(characters[index].skill_totals[skill_name], dc)
        return PartyRollOutcome(character_index=index, skill_name=skill_name, outcome=outcome)


def resolve_roll(roll: int, skill_total: int, dc: int) -> RollOutcome:
    return RollOutcome(roll=roll, skill_total=skill_total, dc=dc, success=roll + skill_total >= dc)


def select_best_character(characters: Sequence[CharacterSnapshot], skill_name: str) -> int:
    """Return the index of the highest total; ties keep the earliest character."""
    if not characters:
        raise EmptyRosterError("A party check needs at least one character.")
    best_index = -1
    best_total = 0
    for index, snapshot in enumerate(characters):
        if skill_name not in snapshot.skill_totals:
            raise ValueError(f"Character {index} has no total for skill '{skill_name}'.")
        total = snapshot.skill_totals[skill_name]
        if best_index < 0 or total > best_total:
            best_index = index
            best_total = total
    return best_index
