"""Character creation, derivation and snapshotting."""
from __future__ import annotations

from dataclasses import dataclass

from charsheet.data.repositories import ClassesRepository, SkillsRepository
from charsheet.domain.attributes import default_attribute_scores, derive_modifiers, total_points
from charsheet.domain.class_evaluation import evaluate_classes, unmet_requirements
from charsheet.domain.defs import ClassDef
from charsheet.domain.entities import Character
from charsheet.domain.rules import DEFAULT_SKILL_POINT_BUDGET
from charsheet.domain.skills import derive_skill_totals, empty_skill_points
from charsheet.domain.snapshot import CharacterSnapshot


@dataclass(frozen=True, slots=True)
class SkillBudgetResult:
    success: bool
    message: str
    budget: int


@dataclass(frozen=True, slots=True)
class ClassRequirementView:
    name: str
    requirements: dict[str, int]
    missing: dict[str, int]

    @property
    def achieved(self) -> bool:
        return not self.missing


class CharacterService:
    """Builds characters and the snapshots derived from them."""

    def __init__(self, *, classes_repo: ClassesRepository, skills_repo: SkillsRepository) -> None:
        self._classes_repo = classes_repo
        self._skills_repo = skills_repo

    def create_default(self) -> Character:
        """Return a fresh character: attributes at 10, no skill points."""
        return Character(
            attribute_scores=default_attribute_scores(),
            skill_points=empty_skill_points(self._skills_repo.all()),
            points_spending_max=DEFAULT_SKILL_POINT_BUDGET,
        )

    def build_snapshot(self, character: Character) -> CharacterSnapshot:
        scores = dict(character.attribute_scores)
        modifiers = derive_modifiers(scores)
        skill_defs = self._skills_repo.all()
        points = empty_skill_points(skill_defs)
        points.update(character.skill_points)
        return CharacterSnapshot(
            attribute_scores=scores,
            attribute_modifiers=modifiers,
            classes_achieved=evaluate_classes(scores, self._classes_repo.all()),
            points_spending_max=character.points_spending_max,
            skill_points=points,
            skill_totals=derive_skill_totals(points, modifiers, skill_defs),
        )

    def class_names(self) -> list[str]:
        return [class_def.name for class_def in self._classes_repo.all()]

    def class_requirements(self, character: Character, class_name: str) -> ClassRequirementView:
        """Describe a class's prerequisites against the character's scores."""
        class_def: ClassDef = self._classes_repo.get_by_name(class_name)
        return ClassRequirementView(
            name=class_def.name,
            requirements=dict(class_def.requirements),
            missing=unmet_requirements(character.attribute_scores, class_def),
        )

    def set_skill_budget(self, character: Character, budget: int) -> SkillBudgetResult:
        """Change the character's skill point budget.

        A budget below the points already invested would break the skill
        invariant, so it is refused.
        """
        spent = total_points(character.skill_points)
        if budget < 0:
            return SkillBudgetResult(False, "Skill budget cannot be negative.", character.points_spending_max)
        if budget < spent:
            return SkillBudgetResult(
                False,
                f"{spent} skill points are already spent.",
                character.points_spending_max,
            )
        character.points_spending_max = budget
        return SkillBudgetResult(True, f"Skill budget set to {budget}.", budget)
