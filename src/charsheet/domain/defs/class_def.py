"""Class prerequisite definition structures."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict


@dataclass(slots=True)
class ClassDef:
    """A named class and the minimum score it needs per attribute."""

    id: str
    name: str
    requirements: Dict[str, int] = field(default_factory=dict)
