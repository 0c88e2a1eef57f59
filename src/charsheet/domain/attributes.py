"""Attribute score helpers and modifier derivation."""
from __future__ import annotations

from typing import Dict, Mapping

from charsheet.domain.rules import ATTRIBUTE_NAMES, DEFAULT_ATTRIBUTE_VALUE


def default_attribute_scores(value: int = DEFAULT_ATTRIBUTE_VALUE) -> Dict[str, int]:
    """Return a score mapping with every attribute set to ``value``."""
    return {name: value for name in ATTRIBUTE_NAMES}


def compute_modifier(score: int) -> int:
    """Return floor((score - 10) / 2); floor division keeps 9 at -1."""
    return (score - 10) // 2


def derive_modifiers(scores: Mapping[str, int]) -> Dict[str, int]:
    return {name: compute_modifier(score) for name, score in scores.items()}


def total_points(values: Mapping[str, int]) -> int:
    return sum(values.values())
