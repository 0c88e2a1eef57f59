"""Result objects shared by the attribute and skill ledgers."""
from __future__ import annotations

from dataclasses import dataclass

from charsheet.domain.budget import BudgetDecision

_REJECTION_MESSAGES = {
    "budget_exceeded": "Not enough points remaining.",
    "no_change": "No change requested.",
}


@dataclass(frozen=True, slots=True)
class PointAdjustResult:
    success: bool
    message: str
    value: int
    spent: int
    budget: int

    @property
    def remaining(self) -> int:
        return max(0, self.budget - self.spent)


def build_adjust_result(decision: BudgetDecision, label: str, budget: int) -> PointAdjustResult:
    if decision.accepted:
        message = f"{label} set to {decision.value}."
    else:
        message = _REJECTION_MESSAGES.get(decision.reason, "Change rejected.")
    return PointAdjustResult(
        success=decision.accepted,
        message=message,
        value=decision.value,
        spent=decision.spent,
        budget=budget,
    )


def invalid_selection(message: str, spent: int, budget: int) -> PointAdjustResult:
    return PointAdjustResult(success=False, message=message, value=0, spent=spent, budget=budget)
