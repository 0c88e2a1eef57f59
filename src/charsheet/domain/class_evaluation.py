"""Class eligibility evaluation."""
from __future__ import annotations

from typing import Iterable, Mapping

from charsheet.domain.defs import ClassDef


def meets_requirements(scores: Mapping[str, int], requirements: Mapping[str, int]) -> bool:
    """Return True when every listed attribute reaches its minimum.

    Attributes absent from ``requirements`` impose nothing, so an empty
    profile is always satisfied. A required attribute missing from
    ``scores`` counts as zero.
    """
    return all(scores.get(attribute, 0) >= minimum for attribute, minimum in requirements.items())


def evaluate_classes(scores: Mapping[str, int], profiles: Iterable[ClassDef]) -> tuple[str, ...]:
    """Return the names of every satisfied class, once each, in profile order."""
    achieved: list[str] = []
    for profile in profiles:
        if profile.name in achieved:
            continue
        if meets_requirements(scores, profile.requirements):
            achieved.append(profile.name)
    return tuple(achieved)


def unmet_requirements(scores: Mapping[str, int], profile: ClassDef) -> dict[str, int]:
    """Return attribute -> points still missing for ``profile``."""
    return {
        attribute: minimum - scores.get(attribute, 0)
        for attribute, minimum in profile.requirements.items()
        if scores.get(attribute, 0) < minimum
    }
