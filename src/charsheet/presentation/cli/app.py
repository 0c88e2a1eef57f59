"""Console-driven UI loop for the character sheet."""
from __future__ import annotations

import secrets
from dataclasses import dataclass
from typing import Callable, List, Mapping, Tuple

from charsheet.core.rng import RNG
from charsheet.data.repositories import ClassesRepository, SkillsRepository
from charsheet.data.roster_store import HttpRosterStore, RosterStore
from charsheet.domain.rules import ATTRIBUTE_NAMES
from charsheet.presentation.cli import config, render
from charsheet.services import (
    AttributeLedger,
    CharacterService,
    CheckResolver,
    RosterCoordinator,
    RosterSerializer,
    SkillLedger,
)

_MAX_RANDOM_SEED = 2**31 - 1
_DEFAULT_DC = 10


@dataclass
class CliSession:
    """Services and view state shared by the menu actions."""

    coordinator: RosterCoordinator
    character_service: CharacterService
    attribute_ledger: AttributeLedger
    skill_ledger: SkillLedger
    skills_repo: SkillsRepository
    check_resolver: CheckResolver
    dc: int = _DEFAULT_DC
    running: bool = True


MenuEntry = Tuple[str, Callable[[CliSession], None]]


def main() -> None:
    """Start the interactive CLI session."""
    config.configure_logging()
    settings = config.load_config()
    session = build_session(settings)
    print("=== Character Sheet ===")
    result = session.coordinator.load()
    print(result.message)
    try:
        while session.running:
            entries = _build_main_menu_entries(session)
            render.render_menu(_menu_title(session), [label for label, _ in entries])
            choice = _prompt_choice(len(entries))
            _, action = entries[choice]
            action(session)
    finally:
        session.coordinator.close()
    print("Goodbye!")


def build_session(
    settings: Mapping[str, str],
    *,
    store: RosterStore | None = None,
    seed: int | None = None,
    definitions_path=None,
) -> CliSession:
    """Wire repositories, services and the roster store together."""
    classes_repo = ClassesRepository(base_path=definitions_path)
    skills_repo = SkillsRepository(base_path=definitions_path)
    character_service = CharacterService(classes_repo=classes_repo, skills_repo=skills_repo)
    if store is None:
        store = HttpRosterStore(settings["api_base_url"], settings["user_id"])
    coordinator = RosterCoordinator(
        store=store,
        character_service=character_service,
        serializer=RosterSerializer(character_service=character_service),
    )
    rng_seed = seed if seed is not None else secrets.randbelow(_MAX_RANDOM_SEED)
    return CliSession(
        coordinator=coordinator,
        character_service=character_service,
        attribute_ledger=AttributeLedger(),
        skill_ledger=SkillLedger(skills_repo=skills_repo),
        skills_repo=skills_repo,
        check_resolver=CheckResolver(RNG(rng_seed)),
    )


def _menu_title(session: CliSession) -> str:
    coordinator = session.coordinator
    if coordinator.mode == "empty":
        return "Main Menu (new character)"
    snapshot = coordinator.characters[coordinator.active_index]
    suffix = " - creating" if coordinator.is_creating else ""
    return f"Main Menu ({render.character_label(coordinator.active_index, snapshot)}{suffix})"


def _build_main_menu_entries(session: CliSession) -> List[MenuEntry]:
    coordinator = session.coordinator
    has_characters = bool(coordinator.characters)
    entries: List[MenuEntry] = [
        ("View Character Sheet", _show_sheet),
        ("Adjust Attribute", _adjust_attribute),
        ("Adjust Skill", _adjust_skill),
        ("Set Skill Budget", _set_skill_budget),
        ("View Class Requirements", _show_class_requirements),
    ]
    if has_characters:
        entries.append(("Select Character", _select_character))
    entries.append(("Add Character", _add_character))
    if coordinator.is_creating:
        entries.append(("Cancel Creation", _cancel_creation))
    entries.append(("Save Characters", _save))
    entries.append((f"Set DC (current {session.dc})", _set_dc))
    entries.append(("Skill Check", _skill_check))
    if has_characters:
        entries.append(("Party Skill Check", _party_skill_check))
    entries.append(("Reload Characters", _reload))
    entries.append(("Quit", _quit))
    return entries


def _show_sheet(session: CliSession) -> None:
    character = session.coordinator.active_character
    governing = {skill.name: skill.attribute for skill in session.skills_repo.all()}
    render.render_character_sheet(
        "Character Sheet",
        session.coordinator.active_snapshot(),
        governing,
        attribute_points_left=session.attribute_ledger.remaining(character),
        skill_points_left=session.skill_ledger.remaining(character),
    )


def _adjust_attribute(session: CliSession) -> None:
    render.render_menu("Attributes", list(ATTRIBUTE_NAMES))
    attribute = ATTRIBUTE_NAMES[_prompt_choice(len(ATTRIBUTE_NAMES))]
    delta = _prompt_int("Change (e.g. 1 or -1): ")
    result = session.attribute_ledger.adjust(session.coordinator.active_character, attribute, delta)
    print(result.message)


def _adjust_skill(session: CliSession) -> None:
    names = session.skills_repo.names()
    render.render_menu("Skills", names)
    skill_name = names[_prompt_choice(len(names))]
    delta = _prompt_int("Change (e.g. 1 or -1): ")
    result = session.skill_ledger.adjust(session.coordinator.active_character, skill_name, delta)
    print(result.message)


def _set_skill_budget(session: CliSession) -> None:
    budget = _prompt_int("New skill point budget: ")
    result = session.character_service.set_skill_budget(session.coordinator.active_character, budget)
    print(result.message)


def _show_class_requirements(session: CliSession) -> None:
    names = session.character_service.class_names()
    render.render_menu("Classes", names)
    class_name = names[_prompt_choice(len(names))]
    view = session.character_service.class_requirements(session.coordinator.active_character, class_name)
    render.render_class_requirements(view)


def _select_character(session: CliSession) -> None:
    characters = session.coordinator.characters
    render.render_menu(
        "Characters",
        [render.character_label(index, snapshot) for index, snapshot in enumerate(characters)],
    )
    session.coordinator.select(_prompt_choice(len(characters)))


def _add_character(session: CliSession) -> None:
    result = session.coordinator.begin_create()
    if not result.success:
        print(f"! {result.message}")
        return
    print(result.message)


def _cancel_creation(session: CliSession) -> None:
    print(session.coordinator.cancel_create().message)


def _save(session: CliSession) -> None:
    print(session.coordinator.save().message)


def _reload(session: CliSession) -> None:
    print(session.coordinator.load().message)


def _set_dc(session: CliSession) -> None:
    session.dc = _prompt_int("DC: ")


def _skill_check(session: CliSession) -> None:
    names = session.skills_repo.names()
    render.render_menu("Skill", names)
    skill_name = names[_prompt_choice(len(names))]
    totals = session.skill_ledger.totals(session.coordinator.active_character)
    outcome = session.check_resolver.roll_check(totals[skill_name], session.dc)
    render.render_roll_outcome(outcome)


def _party_skill_check(session: CliSession) -> None:
    characters = session.coordinator.characters
    if not characters:
        print("No saved characters to roll for.")
        return
    names = session.skills_repo.names()
    render.render_menu("Party Skill", names)
    skill_name = names[_prompt_choice(len(names))]
    result = session.check_resolver.party_roll_check(characters, skill_name, session.dc)
    render.render_party_roll_outcome(result, characters[result.character_index])


def _quit(session: CliSession) -> None:
    session.running = False


def _prompt_choice(count: int) -> int:
    while True:
        raw_value = input("Select an option: ").strip()
        try:
            choice = int(raw_value)
        except ValueError:
            print("Invalid selection. Please enter a number.")
            continue
        if 1 <= choice <= count:
            return choice - 1
        print(f"Invalid selection. Please enter 1-{count}.")


def _prompt_int(prompt: str) -> int:
    while True:
        raw_value = input(prompt).strip()
        try:
            return int(raw_value)
        except ValueError:
            print("Please enter a whole number.")
