"""Service layer exports."""

from .attribute_ledger import AttributeLedger
from .character_service import CharacterService, ClassRequirementView, SkillBudgetResult
from .check_service import CheckResolver, PartyRollOutcome, RollOutcome
from .errors import EmptyRosterError, RosterStateError, SaveLoadError
from .point_adjustment import PointAdjustResult
from .roster_serializer import RosterSerializer
from .roster_service import RosterActionResult, RosterCoordinator, RosterSyncResult
from .skill_ledger import SkillLedger

__all__ = [
    "AttributeLedger",
    "CharacterService",
    "CheckResolver",
    "ClassRequirementView",
    "EmptyRosterError",
    "PartyRollOutcome",
    "PointAdjustResult",
    "RollOutcome",
    "RosterActionResult",
    "RosterCoordinator",
    "RosterSerializer",
    "RosterStateError",
    "RosterSyncResult",
    "SaveLoadError",
    "SkillBudgetResult",
    "SkillLedger",
]
