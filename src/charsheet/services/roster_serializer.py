"""Conversion between roster documents and character snapshots."""
from __future__ import annotations

from typing import Any, Dict, List, Mapping, Sequence

from charsheet.domain.attributes import default_attribute_scores
from charsheet.domain.entities import Character
from charsheet.domain.rules import ATTRIBUTE_NAMES, DEFAULT_SKILL_POINT_BUDGET
from charsheet.domain.snapshot import CharacterSnapshot
from charsheet.services.character_service import CharacterService
from charsheet.services.errors import SaveLoadError

RosterPayload = Dict[str, Any]


class RosterSerializer:
    """Writes snapshots in the store's camelCase layout and reads them back.

    Only invested points are trusted on the way in; modifiers, classes and
    totals are always recomputed so they can never disagree with the points.
    """

    def __init__(self, *, character_service: CharacterService) -> None:
        self._character_service = character_service

    def serialize(self, characters: Sequence[CharacterSnapshot]) -> RosterPayload:
        """Return the ``{"characters": [...]}`` document for a store write."""
        return {"characters": [self._serialize_snapshot(snapshot) for snapshot in characters]}

    def parse_response(self, document: object) -> List[CharacterSnapshot]:
        """Read a ``{"body": {"characters": [...]}}`` retrieve response.

        A missing ``body`` or ``characters``, or no document at all, means the
        user has no roster yet.
        """
        if document is None:
            return []
        if not isinstance(document, Mapping):
            raise SaveLoadError("Roster response must be a JSON object.")
        body = document.get("body")
        if body is None:
            return []
        if not isinstance(body, Mapping):
            raise SaveLoadError("Roster response body must be an object.")
        return self.deserialize(body)

    def deserialize(self, payload: Mapping[str, Any]) -> List[CharacterSnapshot]:
        raw_characters = payload.get("characters")
        if raw_characters is None:
            return []
        if not isinstance(raw_characters, list):
            raise SaveLoadError("characters must be a list.")
        return [
            self._character_service.build_snapshot(self._coerce_character(entry, f"characters[{index}]"))
            for index, entry in enumerate(raw_characters)
        ]

    @staticmethod
    def _serialize_snapshot(snapshot: CharacterSnapshot) -> Dict[str, Any]:
        return {
            "attributeVals": dict(snapshot.attribute_scores),
            "attributeMods": dict(snapshot.attribute_modifiers),
            "classesAchieved": list(snapshot.classes_achieved),
            "pointsSpendingMax": snapshot.points_spending_max,
            "skillPoints": dict(snapshot.skill_points),
            "skillTotals": dict(snapshot.skill_totals),
        }

    def _coerce_character(self, entry: object, context: str) -> Character:
        if not isinstance(entry, Mapping):
            raise SaveLoadError(f"{context} must be an object.")
        character = self._character_service.create_default()

        scores = default_attribute_scores()
        raw_scores = self._coerce_int_mapping(entry.get("attributeVals"), f"{context}.attributeVals")
        scores.update({name: value for name, value in raw_scores.items() if name in ATTRIBUTE_NAMES})
        character.attribute_scores = scores

        raw_points = self._coerce_int_mapping(entry.get("skillPoints"), f"{context}.skillPoints")
        character.skill_points.update(
            {name: value for name, value in raw_points.items() if name in character.skill_points}
        )

        budget = entry.get("pointsSpendingMax")
        if budget is None:
            character.points_spending_max = DEFAULT_SKILL_POINT_BUDGET
        else:
            character.points_spending_max = self._require_non_negative_int(
                budget, f"{context}.pointsSpendingMax"
            )
        return character

    @classmethod
    def _coerce_int_mapping(cls, value: object, context: str) -> Dict[str, int]:
        if value is None:
            return {}
        if not isinstance(value, Mapping):
            raise SaveLoadError(f"{context} must be an object.")
        return {str(key): cls._require_non_negative_int(raw, f"{context}.{key}") for key, raw in value.items()}

    @staticmethod
    def _require_non_negative_int(value: object, context: str) -> int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise SaveLoadError(f"{context} must be an integer.")
        if value < 0:
            raise SaveLoadError(f"{context} must not be negative.")
        return value
