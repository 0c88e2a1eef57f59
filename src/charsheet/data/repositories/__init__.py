"""Repository exports."""

from .classes_repo import ClassesRepository
from .skills_repo import SkillsRepository

__all__ = [
    "ClassesRepository",
    "SkillsRepository",
]
