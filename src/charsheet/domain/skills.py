"""Skill point helpers and total derivation."""
from __future__ import annotations

from typing import Dict, Iterable, Mapping

from charsheet.domain.defs import SkillDef


def empty_skill_points(skill_defs: Iterable[SkillDef]) -> Dict[str, int]:
    return {skill.name: 0 for skill in skill_defs}


def derive_skill_totals(
    points: Mapping[str, int],
    modifiers: Mapping[str, int],
    skill_defs: Iterable[SkillDef],
) -> Dict[str, int]:
    """Return skill name -> invested points plus the governing modifier."""
    return {
        skill.name: points.get(skill.name, 0) + modifiers[skill.attribute]
        for skill in skill_defs
    }
