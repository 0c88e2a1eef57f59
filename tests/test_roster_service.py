from __future__ import annotations

from http.client import BadStatusLine, IncompleteRead

import pytest

from charsheet.data.roster_store import HttpRosterStore
from charsheet.services.attribute_ledger import AttributeLedger
from charsheet.services.errors import RosterStateError
from charsheet.services.roster_service import CREATION_PENDING_MESSAGE, TRANSPORT_FAILURE_MESSAGE

from tests.helpers.builders import make_coordinator
from tests.helpers.roster_store import InMemoryRosterStore


def _stored_document(*strengths: int) -> dict:
    return {
        "statusCode": 200,
        "body": {
            "characters": [
                {"attributeVals": {"Strength": strength}, "pointsSpendingMax": 10, "skillPoints": {}}
                for strength in strengths
            ]
        },
    }


def test_new_coordinator_starts_empty() -> None:
    coordinator, _, _ = make_coordinator()
    assert coordinator.mode == "empty"
    assert coordinator.characters == ()
    assert coordinator.active_character.attribute_scores["Strength"] == 10


def test_load_replaces_roster_and_views_first() -> None:
    coordinator, _, _ = make_coordinator(InMemoryRosterStore(_stored_document(11, 14)))
    result = coordinator.load()
    assert result.success is True
    assert result.character_count == 2
    assert coordinator.mode == "viewing"
    assert coordinator.active_index == 0
    assert coordinator.active_character.attribute_scores["Strength"] == 11
    assert coordinator.characters[1].classes_achieved == ("Barbarian",)


def test_load_without_body_gives_empty_roster() -> None:
    coordinator, _, _ = make_coordinator(InMemoryRosterStore({"statusCode": 200}))
    result = coordinator.load()
    assert result.success is True
    assert coordinator.mode == "empty"
    assert coordinator.characters == ()


def test_load_malformed_falls_back_to_empty() -> None:
    store = InMemoryRosterStore({"body": {"characters": "broken"}})
    coordinator, _, _ = make_coordinator(store)
    result = coordinator.load()
    assert result.success is False
    assert coordinator.mode == "empty"
    assert coordinator.characters == ()


def test_load_transport_failure_never_raises() -> None:
    store = InMemoryRosterStore(_stored_document(12))
    store.fail_retrieve = True
    coordinator, _, _ = make_coordinator(store)
    result = coordinator.load()
    assert result.success is False
    assert result.message == TRANSPORT_FAILURE_MESSAGE
    assert coordinator.characters == ()
    assert coordinator.request_in_flight is False


def test_select_switches_working_character_and_drops_edits() -> None:
    coordinator, _, _ = make_coordinator(InMemoryRosterStore(_stored_document(11, 13)))
    coordinator.load()
    AttributeLedger().adjust(coordinator.active_character, "Dexterity", 3)

    coordinator.select(1)
    assert coordinator.active_index == 1
    assert coordinator.active_character.attribute_scores["Strength"] == 13

    coordinator.select(0)
    assert coordinator.active_character.attribute_scores["Dexterity"] == 10


@pytest.mark.parametrize("index", [-1, 2])
def test_select_out_of_range_raises(index: int) -> None:
    coordinator, _, _ = make_coordinator(InMemoryRosterStore(_stored_document(10, 10)))
    coordinator.load()
    with pytest.raises(RosterStateError):
        coordinator.select(index)


def test_select_on_empty_roster_raises() -> None:
    coordinator, _, _ = make_coordinator()
    with pytest.raises(RosterStateError):
        coordinator.select(0)


def test_begin_create_appends_default_and_selects_it() -> None:
    coordinator, _, _ = make_coordinator(InMemoryRosterStore(_stored_document(12)))
    coordinator.load()
    result = coordinator.begin_create()
    assert result.success is True
    assert coordinator.mode == "creating"
    assert len(coordinator.characters) == 2
    assert coordinator.active_index == 1
    assert coordinator.active_character.attribute_scores["Strength"] == 10


def test_second_begin_create_is_rejected() -> None:
    coordinator, _, _ = make_coordinator(InMemoryRosterStore(_stored_document(12)))
    coordinator.load()
    coordinator.begin_create()
    result = coordinator.begin_create()
    assert result.success is False
    assert result.message == CREATION_PENDING_MESSAGE
    assert len(coordinator.characters) == 2


def test_cancel_create_restores_length_and_index() -> None:
    coordinator, _, _ = make_coordinator(InMemoryRosterStore(_stored_document(10, 12, 14)))
    coordinator.load()
    coordinator.select(1)
    coordinator.begin_create()

    result = coordinator.cancel_create()
    assert result.success is True
    assert coordinator.mode == "viewing"
    assert len(coordinator.characters) == 3
    assert coordinator.active_index == 1
    assert coordinator.active_character.attribute_scores["Strength"] == 12


def test_cancel_create_from_empty_roster_returns_to_empty() -> None:
    coordinator, _, _ = make_coordinator()
    coordinator.begin_create()
    coordinator.cancel_create()
    assert coordinator.mode == "empty"
    assert coordinator.characters == ()


def test_cancel_create_outside_creation_is_rejected() -> None:
    coordinator, _, _ = make_coordinator(InMemoryRosterStore(_stored_document(12)))
    coordinator.load()
    result = coordinator.cancel_create()
    assert result.success is False
    assert len(coordinator.characters) == 1


def test_save_from_empty_roster_stores_working_character() -> None:
    coordinator, store, _ = make_coordinator()
    AttributeLedger().adjust(coordinator.active_character, "Charisma", 4)
    result = coordinator.save()
    assert result.success is True
    assert coordinator.mode == "viewing"
    assert len(store.stored) == 1
    [entry] = store.stored[0]["characters"]
    assert entry["attributeVals"]["Charisma"] == 14
    assert entry["classesAchieved"] == ["Bard"]
    assert coordinator.characters[0].classes_achieved == ("Bard",)


def test_save_replaces_only_active_slot() -> None:
    coordinator, store, _ = make_coordinator(InMemoryRosterStore(_stored_document(10, 11, 12)))
    coordinator.load()
    coordinator.select(2)
    AttributeLedger().adjust(coordinator.active_character, "Strength", 2)
    coordinator.save()

    strengths = [entry["attributeVals"]["Strength"] for entry in store.stored[-1]["characters"]]
    assert strengths == [10, 11, 14]
    assert coordinator.characters[2].classes_achieved == ("Barbarian",)


def test_save_completes_creation() -> None:
    coordinator, store, _ = make_coordinator(InMemoryRosterStore(_stored_document(12)))
    coordinator.load()
    coordinator.begin_create()
    coordinator.save()
    assert coordinator.mode == "viewing"
    assert len(store.stored[-1]["characters"]) == 2
    assert coordinator.begin_create().success is True


def test_save_failure_keeps_roster_and_edits() -> None:
    store = InMemoryRosterStore(_stored_document(12))
    coordinator, _, _ = make_coordinator(store)
    coordinator.load()
    AttributeLedger().adjust(coordinator.active_character, "Strength", 2)
    store.fail_store = True

    result = coordinator.save()
    assert result.success is False
    assert result.message == TRANSPORT_FAILURE_MESSAGE
    assert coordinator.characters[0].attribute_scores["Strength"] == 12
    assert coordinator.active_character.attribute_scores["Strength"] == 14
    assert coordinator.request_in_flight is False


def test_round_trip_through_store() -> None:
    coordinator, store, _ = make_coordinator()
    ledger = AttributeLedger()
    ledger.adjust(coordinator.active_character, "Intelligence", 4)
    coordinator.save()
    coordinator.begin_create()
    ledger.adjust(coordinator.active_character, "Dexterity", 5)
    coordinator.save()
    saved = coordinator.characters

    reloaded, _, _ = make_coordinator(store)
    reloaded.load()
    assert reloaded.characters == saved
    assert len(saved) == 2


def test_save_while_request_pending_is_rejected() -> None:
    store = InMemoryRosterStore()
    coordinator, _, _ = make_coordinator(store)
    nested_results = []
    store.on_store = lambda: nested_results.append(coordinator.save())

    result = coordinator.save()
    assert result.success is True
    assert [nested.success for nested in nested_results] == [False]
    assert len(store.stored) == 1


def test_load_while_request_pending_is_rejected() -> None:
    store = InMemoryRosterStore(_stored_document(12))
    coordinator, _, _ = make_coordinator(store)
    nested_results = []
    store.on_retrieve = lambda: nested_results.append(coordinator.load())

    coordinator.load()
    assert [nested.success for nested in nested_results] == [False]
    assert store.retrieve_calls == 1


def test_results_after_close_are_dropped() -> None:
    store = InMemoryRosterStore(_stored_document(12))
    coordinator, _, _ = make_coordinator(store)
    store.on_retrieve = coordinator.close

    result = coordinator.load()
    assert result.success is False
    assert coordinator.characters == ()


def _raising_opener(exc: Exception):
    def opener(req, timeout):
        raise exc

    return opener


@pytest.mark.parametrize(
    "store",
    [
        HttpRosterStore("https://example.test/api", "alice", opener=_raising_opener(IncompleteRead(b"partial"))),
        HttpRosterStore("https://example.test/api", "alice", opener=_raising_opener(BadStatusLine("garbage"))),
        HttpRosterStore("example.test/api", "alice"),
    ],
)
def test_http_failures_become_failed_results(store: HttpRosterStore) -> None:
    coordinator, _, _ = make_coordinator(store)

    loaded = coordinator.load()
    assert loaded.success is False
    assert loaded.message == TRANSPORT_FAILURE_MESSAGE

    saved = coordinator.save()
    assert saved.success is False
    assert saved.message == TRANSPORT_FAILURE_MESSAGE
    assert coordinator.mode == "empty"
    assert coordinator.request_in_flight is False


def test_roster_snapshots_are_read_only() -> None:
    coordinator, _, _ = make_coordinator(InMemoryRosterStore(_stored_document(12)))
    coordinator.load()
    [snapshot] = coordinator.characters

    with pytest.raises(TypeError):
        snapshot.attribute_scores["Strength"] = 20
    with pytest.raises(TypeError):
        snapshot.skill_totals["Arcana"] = 5
    assert coordinator.characters[0].attribute_scores["Strength"] == 12
