"""Classes repository with attribute reference validation."""
from __future__ import annotations

from typing import Dict

from charsheet.data.errors import DataValidationError
from charsheet.data.repositories.base import RepositoryBase
from charsheet.domain.defs import ClassDef


class ClassesRepository(RepositoryBase[ClassDef]):
    """Loads class prerequisite profiles."""

    def __init__(self, base_path=None) -> None:
        super().__init__("classes.json", base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, ClassDef]:
        classes: Dict[str, ClassDef] = {}
        seen_names: set[str] = set()
        for raw_id, payload in raw.items():
            class_data = self._require_mapping(payload, f"class '{raw_id}'")
            self._assert_exact_fields(class_data, {"name", "requirements"}, f"class '{raw_id}'")
            name = self._require_str(class_data["name"], f"class '{raw_id}' name")
            if name in seen_names:
                raise DataValidationError(f"class '{raw_id}' reuses the name '{name}'.")
            seen_names.add(name)

            raw_requirements = self._require_mapping(
                class_data["requirements"], f"class '{raw_id}' requirements"
            )
            requirements: Dict[str, int] = {}
            for attribute, minimum in raw_requirements.items():
                context = f"class '{raw_id}' requirement"
                requirements[self._require_attribute(attribute, context)] = (
                    self._require_non_negative_int(minimum, f"{context} '{attribute}'")
                )

            classes[raw_id] = ClassDef(id=raw_id, name=name, requirements=requirements)
        return classes

    def get_by_name(self, name: str) -> ClassDef:
        """Return the class whose display name matches."""
        for class_def in self.all():
            if class_def.name == name:
                return class_def
        raise KeyError(name)
