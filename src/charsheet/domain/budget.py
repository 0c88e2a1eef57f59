"""Point-budget gate shared by attribute and skill allocation."""
from __future__ import annotations

from dataclasses import dataclass
from typing import MutableMapping


@dataclass(frozen=True, slots=True)
class BudgetDecision:
    accepted: bool
    reason: str
    value: int
    spent: int


def apply_bounded_delta(
    values: MutableMapping[str, int],
    key: str,
    delta: int,
    budget: int,
) -> BudgetDecision:
    """Apply ``delta`` to ``values[key]`` if the budget allows it.

    Increases that would push the total past ``budget`` are refused and leave
    ``values`` untouched. Decreases always apply but never take a value
    below zero.
    """
    current = values[key]
    spent = sum(values.values())
    if delta == 0:
        return BudgetDecision(accepted=False, reason="no_change", value=current, spent=spent)
    if delta > 0 and spent + delta > budget:
        return BudgetDecision(accepted=False, reason="budget_exceeded", value=current, spent=spent)
    updated = max(0, current + delta)
    values[key] = updated
    return BudgetDecision(
        accepted=True,
        reason="applied",
        value=updated,
        spent=spent - current + updated,
    )
