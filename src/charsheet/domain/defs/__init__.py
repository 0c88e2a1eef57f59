"""Domain definition exports."""

from .class_def import ClassDef
from .skill_def import SkillDef

__all__ = [
    "ClassDef",
    "SkillDef",
]
