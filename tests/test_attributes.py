from __future__ import annotations

import pytest

from charsheet.domain.attributes import (
    compute_modifier,
    default_attribute_scores,
    derive_modifiers,
    total_points,
)
from charsheet.domain.rules import ATTRIBUTE_NAMES, DEFAULT_ATTRIBUTE_VALUE, MAX_ATTRIBUTE_POINTS


def test_default_scores_cover_every_attribute() -> None:
    scores = default_attribute_scores()
    assert list(scores) == list(ATTRIBUTE_NAMES)
    assert all(value == DEFAULT_ATTRIBUTE_VALUE for value in scores.values())
    assert total_points(scores) <= MAX_ATTRIBUTE_POINTS


@pytest.mark.parametrize(
    ("score", "expected"),
    [(0, -5), (7, -2), (8, -1), (9, -1), (10, 0), (11, 0), (12, 1), (15, 2), (20, 5)],
)
def test_modifier_floors_toward_negative_infinity(score: int, expected: int) -> None:
    assert compute_modifier(score) == expected


def test_derive_modifiers_maps_every_attribute() -> None:
    scores = default_attribute_scores()
    scores["Strength"] = 14
    scores["Charisma"] = 9
    modifiers = derive_modifiers(scores)
    assert modifiers["Strength"] == 2
    assert modifiers["Charisma"] == -1
    assert modifiers["Wisdom"] == 0
    assert set(modifiers) == set(ATTRIBUTE_NAMES)
