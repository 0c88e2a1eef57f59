from __future__ import annotations

import pytest

from charsheet.core.rng import RNG
from charsheet.services.check_service import CheckResolver, resolve_roll, select_best_character
from charsheet.services.errors import EmptyRosterError

from tests.helpers.builders import make_character_service


class _FixedRNG(RNG):
    def __init__(self, *rolls: int) -> None:
        super().__init__(0)
        self._rolls = list(rolls)

    def roll_die(self, sides: int) -> int:
        return self._rolls.pop(0)


def _party_with_stealth(*points: int):
    service = make_character_service()
    snapshots = []
    for value in points:
        character = service.create_default()
        character.skill_points["Stealth"] = value
        snapshots.append(service.build_snapshot(character))
    return snapshots


def test_roll_meeting_dc_succeeds() -> None:
    outcome = CheckResolver(_FixedRNG(10)).roll_check(5, 15)
    assert outcome.roll == 10
    assert outcome.success is True
    assert outcome.label == "Success"


def test_roll_below_dc_fails() -> None:
    outcome = CheckResolver(_FixedRNG(9)).roll_check(5, 15)
    assert outcome.success is False
    assert outcome.label == "Failure"


def test_negative_total_lowers_result() -> None:
    assert resolve_roll(12, -2, 11).success is False
    assert resolve_roll(13, -2, 11).success is True


def test_real_rolls_stay_on_die() -> None:
    resolver = CheckResolver(RNG(99))
    rolls = [resolver.roll_check(0, 10).roll for _ in range(200)]
    assert min(rolls) >= 1
    assert max(rolls) <= 20


def test_party_check_picks_highest_total() -> None:
    party = _party_with_stealth(3, 7, 5)
    result = CheckResolver(_FixedRNG(8)).party_roll_check(party, "Stealth", 15)
    assert result.character_index == 1
    assert result.outcome.skill_total == 7
    assert result.outcome.success is True


@pytest.mark.parametrize(("points", "expected"), [((7, 3, 5), 0), ((3, 5, 7), 2), ((5, 7, 7), 1)])
def test_party_check_order_and_ties(points: tuple[int, ...], expected: int) -> None:
    assert select_best_character(_party_with_stealth(*points), "Stealth") == expected


def test_party_check_handles_all_negative_totals() -> None:
    service = make_character_service()
    character = service.create_default()
    character.attribute_scores["Dexterity"] = 6
    weaker = service.create_default()
    weaker.attribute_scores["Dexterity"] = 2
    party = [service.build_snapshot(weaker), service.build_snapshot(character)]
    assert select_best_character(party, "Stealth") == 1


def test_party_check_on_empty_roster_raises() -> None:
    with pytest.raises(EmptyRosterError):
        CheckResolver(RNG(1)).party_roll_check([], "Stealth", 10)


def test_party_check_unknown_skill_raises() -> None:
    with pytest.raises(ValueError):
        select_best_character(_party_with_stealth(1), "Juggling")
