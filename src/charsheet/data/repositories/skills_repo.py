"""Skills repository."""
from __future__ import annotations

from typing import Dict

from charsheet.data.errors import DataValidationError
from charsheet.data.repositories.base import RepositoryBase
from charsheet.domain.defs import SkillDef


class SkillsRepository(RepositoryBase[SkillDef]):
    """Loads skills and the attribute that governs each one."""

    def __init__(self, base_path=None) -> None:
        super().__init__("skills.json", base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, SkillDef]:
        skills: Dict[str, SkillDef] = {}
        seen_names: set[str] = set()
        for raw_id, payload in raw.items():
            skill_data = self._require_mapping(payload, f"skill '{raw_id}'")
            self._assert_exact_fields(skill_data, {"name", "attribute"}, f"skill '{raw_id}'")
            name = self._require_str(skill_data["name"], f"skill '{raw_id}' name")
            if name in seen_names:
                raise DataValidationError(f"skill '{raw_id}' reuses the name '{name}'.")
            seen_names.add(name)
            skills[raw_id] = SkillDef(
                id=raw_id,
                name=name,
                attribute=self._require_attribute(skill_data["attribute"], f"skill '{raw_id}' attribute"),
            )
        return skills

    def names(self) -> list[str]:
        """Return skill display names in repository order."""
        return [skill.name for skill in self.all()]

    def get_by_name(self, name: str) -> SkillDef:
        """Return the skill whose display name matches."""
        for skill in self.all():
            if skill.name == name:
                return skill
        raise KeyError(name)
