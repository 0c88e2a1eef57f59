"""Ordered roster of character snapshots."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from charsheet.domain.snapshot import CharacterSnapshot


@dataclass
class Roster:
    """Snapshots in display order plus the selected index."""

    characters: List[CharacterSnapshot] = field(default_factory=list)
    selected_index: int = 0

    def __len__(self) -> int:
        return len(self.characters)

    def is_empty(self) -> bool:
        return not self.characters
