"""Skill definition structures."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class SkillDef:
    """A skill and the attribute whose modifier it adds."""

    id: str
    name: str
    attribute: str
