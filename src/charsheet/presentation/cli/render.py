"""Shared CLI rendering helpers."""
from __future__ import annotations

from typing import Iterable, Sequence

from charsheet.domain.rules import ATTRIBUTE_NAMES
from charsheet.domain.snapshot import CharacterSnapshot
from charsheet.presentation.cli.config import debug_enabled
from charsheet.services import ClassRequirementView, PartyRollOutcome, RollOutcome


def render_heading(title: str) -> None:
    """Print a consistent section heading."""
    print(f"\n=== {title} ===")


def render_menu(title: str, options: Sequence[str]) -> None:
    """Display a menu section with numbered options."""
    render_heading(title)
    for idx, label in enumerate(options, start=1):
        print(f"{idx}. {label}")


def render_bullet_lines(lines: Iterable[str]) -> None:
    """Print bullet-prefixed lines."""
    for line in lines:
        print(f"- {line}")


def character_label(index: int, snapshot: CharacterSnapshot) -> str:
    """Roster selector label, e.g. ``Character 2 - Barbarian Bard``."""
    label = f"Character {index + 1}"
    if snapshot.classes_achieved:
        return f"{label} - {' '.join(snapshot.classes_achieved)}"
    return label


def format_attribute_lines(snapshot: CharacterSnapshot) -> list[str]:
    return [
        f"{name}: {snapshot.attribute_scores[name]} (Modifier: {snapshot.attribute_modifiers[name]})"
        for name in ATTRIBUTE_NAMES
    ]


def format_skill_lines(snapshot: CharacterSnapshot, governing: dict[str, str]) -> list[str]:
    lines = []
    for name, points in snapshot.skill_points.items():
        attribute = governing.get(name, "?")
        modifier = snapshot.attribute_modifiers.get(attribute, 0)
        lines.append(
            f"{name} - points: {points} modifier ({attribute}): {modifier} total: {snapshot.skill_totals[name]}"
        )
    return lines


def render_character_sheet(
    title: str,
    snapshot: CharacterSnapshot,
    governing: dict[str, str],
    *,
    attribute_points_left: int,
    skill_points_left: int,
) -> None:
    render_heading(title)
    print(f"Attributes ({attribute_points_left} points left)")
    render_bullet_lines(format_attribute_lines(snapshot))
    classes = ", ".join(snapshot.classes_achieved) if snapshot.classes_achieved else "None"
    print(f"Classes achieved: {classes}")
    print(f"Skills ({skill_points_left} of {snapshot.points_spending_max} points left)")
    render_bullet_lines(format_skill_lines(snapshot, governing))


def render_class_requirements(view: ClassRequirementView) -> None:
    status = "Achieved" if view.achieved else "Not achieved"
    render_heading(f"Selected Class: {view.name} ({status})")
    print("Requirements")
    lines = []
    for attribute, minimum in view.requirements.items():
        line = f"{attribute}: {minimum}"
        if attribute in view.missing:
            line += f" (needs {view.missing[attribute]} more)"
        lines.append(line)
    render_bullet_lines(lines)


def render_roll_outcome(outcome: RollOutcome) -> None:
    print(f"Roll Result: {outcome.roll}")
    if debug_enabled():
        print(f"[{outcome.roll} + {outcome.skill_total} vs DC {outcome.dc}]")
    print(f"Skill Check: {outcome.label}")


def render_party_roll_outcome(result: PartyRollOutcome, snapshot: CharacterSnapshot) -> None:
    print(f"Rolling for {character_label(result.character_index, snapshot)} ({result.skill_name})")
    render_roll_outcome(result.outcome)
