from __future__ import annotations

import json

from questforge.modules.authoring import (
    AuthoringState,
    export_quest_json,
    load_quest_json,
    quest_export_filename,
    quest_to_authoring_state,
    transform_authoring_state,
)
from questforge.modules.schema import parse_quest
from tests.support.quest_seed import full_state, minimal_state, valid_quest_payload


def test_engine_quest_survives_json_round_trip() -> None:
    for state in (minimal_state(), full_state()):
        quest = transform_authoring_state(state).quest
        text = export_quest_json(quest)

        loaded = load_quest_json(text)

        assert loaded.ok is True
        assert loaded.error is None
        assert loaded.quest == quest
        assert export_quest_json(loaded.quest) == text


def test_malformed_json_is_reported_as_single_string() -> None:
    loaded = load_quest_json("{not json")

    assert loaded.quest is None
    assert loaded.error.startswith("Invalid JSON: ")


def test_schema_failure_is_reported_as_single_string() -> None:
    loaded = load_quest_json(json.dumps(valid_quest_payload(Tier=0, Title="")))

    assert loaded.quest is None
    assert loaded.error.startswith("Invalid quest format: Tier: ")
    assert "; Title: " in loaded.error


def test_non_object_json_is_rejected() -> None:
    loaded = load_quest_json("[1, 2, 3]")

    assert loaded.ok is False
    assert loaded.error.startswith("Invalid quest format: ")


def test_export_filename_replaces_unsafe_characters() -> None:
    quest = parse_quest(valid_quest_payload(Title="Get Apples! (v2)"))

    assert quest_export_filename(quest) == "Get_Apples___v2_.json"


def test_quest_projects_back_into_authoring_state() -> None:
    quest = parse_quest(valid_quest_payload())

    state = quest_to_authoring_state(quest)

    assert isinstance(state, AuthoringState)
    assert state.title == "Get Apples"
    assert state.tier == 2
    assert state.time_limit_hours == 24
    assert state.reward_pool[0].trade_deals[0].item == "Cider"
    fetch, elimination, interaction = state.conditions
    assert (fetch.kind, [(i.name, i.amount) for i in fetch.items]) == ("Fetch", [("Apple", 5)])
    assert fetch.tracking_caption == "Apples delivered"
    assert (elimination.kind, elimination.can_be_auto_completed) == ("Elimination", True)
    assert [(i.name, i.amount) for i in elimination.items] == [("Puppet", 3)]
    assert (interaction.kind, interaction.interaction_object) == ("Interaction", "Cellar door")


def test_loaded_quest_rebuilds_to_the_same_quest() -> None:
    quest = parse_quest(valid_quest_payload())

    rebuilt = transform_authoring_state(quest_to_authoring_state(quest))

    assert rebuilt.ok is True
    assert rebuilt.quest == quest


def test_non_finite_json_numbers_are_rejected_on_load() -> None:
    text = json.dumps(valid_quest_payload(TimeLimitHours=float("inf"), RewardPool=[{"Fame": float("nan")}]))
    assert "Infinity" in text and "NaN" in text

    loaded = load_quest_json(text)

    assert loaded.quest is None
    assert loaded.error.startswith("Invalid quest format: TimeLimitHours: Expected a finite number")
    assert "RewardPool.0.Fame: Expected a finite number" in loaded.error
