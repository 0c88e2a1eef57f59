"""Shared type aliases for the core and domain layers."""
from typing import Literal

RosterMode = Literal["empty", "viewing", "creating"]
CheckLabel = Literal["Success", "Failure"]

__all__ = ["CheckLabel", "RosterMode"]
