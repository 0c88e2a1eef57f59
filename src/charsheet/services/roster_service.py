"""Roster coordination: selection, creation and remote load/save."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List

from charsheet.core.types import RosterMode
from charsheet.data.errors import DataError
from charsheet.data.roster_store import RosterStore
from charsheet.domain.entities import Character
from charsheet.domain.roster import Roster
from charsheet.domain.snapshot import CharacterSnapshot
from charsheet.services.character_service import CharacterService
from charsheet.services.errors import RosterStateError, SaveLoadError
from charsheet.services.roster_serializer import RosterSerializer

logger = logging.getLogger(__name__)

TRANSPORT_FAILURE_MESSAGE = "Could not reach the character store."
REQUEST_PENDING_MESSAGE = "Another request is still in progress."
CREATION_PENDING_MESSAGE = "Complete the current character creation first."
MALFORMED_ROSTER_MESSAGE = "Stored roster was unreadable; starting with an empty roster."


@dataclass(frozen=True, slots=True)
class RosterActionResult:
    success: bool
    message: str


@dataclass(frozen=True, slots=True)
class RosterSyncResult:
    success: bool
    message: str
    character_count: int


class RosterCoordinator:
    """Owns the roster and the character currently being edited.

    The coordinator is in one of three modes:

    * ``"empty"``: no saved characters; edits go to a default working
      character which the first save turns into the roster.
    * ``"viewing"``: the working character was loaded from
      ``roster.characters[roster.selected_index]``.
    * ``"creating"``: a default character was appended at the tail and is
      selected; ``cancel_create`` drops it and returns to the index that was
      active before.

    Only one store request runs at a time. A request that finishes after
    ``close`` is discarded.
    """

    def __init__(
        self,
        *,
        store: RosterStore,
        character_service: CharacterService,
        serializer: RosterSerializer,
    ) -> None:
        self._store = store
        self._character_service = character_service
        self._serializer = serializer
        self._roster = Roster()
        self._mode: RosterMode = "empty"
        self._restore_index: int | None = None
        self._active = character_service.create_default()
        self._request_in_flight = False
        self._closed = False

    @property
    def mode(self) -> RosterMode:
        return self._mode

    @property
    def is_creating(self) -> bool:
        return self._mode == "creating"

    @property
    def active_index(self) -> int:
        return self._roster.selected_index

    @property
    def active_character(self) -> Character:
        """The live, editable character; ledgers mutate this object."""
        return self._active

    @property
    def characters(self) -> tuple[CharacterSnapshot, ...]:
        return tuple(self._roster.characters)

    @property
    def request_in_flight(self) -> bool:
        return self._request_in_flight

    def active_snapshot(self) -> CharacterSnapshot:
        """Snapshot of the working character including unsaved edits."""
        return self._character_service.build_snapshot(self._active)

    def load(self) -> RosterSyncResult:
        """Replace the roster with the stored one; never raises."""
        if self._request_in_flight:
            return RosterSyncResult(False, REQUEST_PENDING_MESSAGE, len(self._roster))
        self._request_in_flight = True
        try:
            document = self._store.retrieve()
        except DataError as exc:
            logger.warning(f"Roster load failed: {exc}")
            return RosterSyncResult(False, TRANSPORT_FAILURE_MESSAGE, len(self._roster))
        finally:
            self._request_in_flight = False

        if self._closed:
            logger.info("Dropping roster load result for a closed coordinator")
            return RosterSyncResult(False, "Coordinator closed.", 0)
        try:
            characters = self._serializer.parse_response(document)
        except SaveLoadError as exc:
            logger.warning(f"Malformed roster response, starting empty: {exc}")
            self._replace_roster([])
            return RosterSyncResult(False, MALFORMED_ROSTER_MESSAGE, 0)
        self._replace_roster(characters)
        logger.info(f"Loaded {len(characters)} character(s)")
        return RosterSyncResult(True, f"Loaded {len(characters)} character(s).", len(characters))

    def select(self, index: int) -> None:
        """Make ``roster.characters[index]`` the working character.

        Unsaved edits to the previous working character are discarded.
        """
        if not 0 <= index < len(self._roster):
            raise RosterStateError(
                f"Character index {index} is out of range for a roster of {len(self._roster)}."
            )
        self._roster.selected_index = index
        self._active = self._roster.characters[index].to_character()
        if self._mode == "empty":
            self._mode = "viewing"

    def begin_create(self) -> RosterActionResult:
        if self._mode == "creating":
            return RosterActionResult(False, CREATION_PENDING_MESSAGE)
        self._restore_index = self._roster.selected_index
        new_character = self._character_service.create_default()
        self._roster.characters.append(self._character_service.build_snapshot(new_character))
        self._roster.selected_index = len(self._roster) - 1
        self._active = new_character
        self._mode = "creating"
        return RosterActionResult(True, f"Creating character {len(self._roster)}.")

    def cancel_create(self) -> RosterActionResult:
        if self._mode != "creating":
            return RosterActionResult(False, "No character creation to cancel.")
        self._roster.characters.pop()
        restore_index = self._restore_index or 0
        self._restore_index = None
        if self._roster.is_empty():
            self._roster.selected_index = 0
            self._active = self._character_service.create_default()
            self._mode = "empty"
        else:
            self._mode = "viewing"
            self.select(min(restore_index, len(self._roster) - 1))
        return RosterActionResult(True, "Character creation cancelled.")

    def save(self) -> RosterSyncResult:
        """Write the whole roster, with the working character in its slot.

        On a transport failure nothing is retried and nothing is rolled back:
        the roster keeps its previous snapshots and the working character
        keeps its edits.
        """
        if self._request_in_flight:
            return RosterSyncResult(False, REQUEST_PENDING_MESSAGE, len(self._roster))
        updated = self._merged_characters()
        payload = self._serializer.serialize(updated)
        self._request_in_flight = True
        try:
            self._store.store(payload)
        except DataError as exc:
            logger.warning(f"Roster save failed: {exc}")
            return RosterSyncResult(False, TRANSPORT_FAILURE_MESSAGE, len(self._roster))
        finally:
            self._request_in_flight = False

        if self._closed:
            logger.info("Dropping roster save result for a closed coordinator")
            return RosterSyncResult(False, "Coordinator closed.", len(updated))
        self._roster.characters = updated
        self._roster.selected_index = min(self._roster.selected_index, len(updated) - 1)
        self._mode = "viewing"
        self._restore_index = None
        logger.info(f"Saved {len(updated)} character(s)")
        return RosterSyncResult(True, f"Saved {len(updated)} character(s).", len(updated))

    def close(self) -> None:
        self._closed = True

    def _merged_characters(self) -> List[CharacterSnapshot]:
        current = self.active_snapshot()
        if self._roster.is_empty():
            return [current]
        return [
            current if index == self._roster.selected_index else snapshot
            for index, snapshot in enumerate(self._roster.characters)
        ]

    def _replace_roster(self, characters: List[CharacterSnapshot]) -> None:
        self._roster = Roster(characters=list(characters))
        self._restore_index = None
        if characters:
            self._mode = "viewing"
            self._active = characters[0].to_character()
        else:
            self._mode = "empty"
            self._active = self._character_service.create_default()
