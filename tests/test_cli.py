from __future__ import annotations

import json
from pathlib import Path

from typer.testing import CliRunner

from questforge.cli import app
from tests.support.quest_seed import valid_quest_payload

runner = CliRunner()


def _write(tmp_path: Path, name: str, payload) -> Path:
    path = tmp_path / name
    path.write_text(payload if isinstance(payload, str) else json.dumps(payload), encoding="utf-8")
    return path


def test_build_prints_quest_json(tmp_path: Path) -> None:
    state_file = _write(
        tmp_path,
        "state.json",
        {"title": "Get Apples", "description": "Bring apples", "reward_pool": [{"fame": 10}]},
    )

    result = runner.invoke(app, ["build", str(state_file)])

    assert result.exit_code == 0, result.output
    quest = json.loads(result.output)
    assert quest["Conditions"][0]["Items"] == [{"Name": "Apple", "Amount": 1}]


def test_build_writes_named_file(tmp_path: Path) -> None:
    state_file = _write(
        tmp_path,
        "state.json",
        {"Title": "Get Apples", "Description": "Bring apples", "RewardPool": [{"CurrencyNormal": 5}]},
    )
    out_dir = tmp_path / "out"

    result = runner.invoke(app, ["build", str(state_file), "--output-dir", str(out_dir)])

    assert result.exit_code == 0, result.output
    written = out_dir / "Get_Apples.json"
    assert written.exists()
    assert json.loads(written.read_text(encoding="utf-8"))["Title"] == "Get Apples"


def test_build_reports_checklist_errors(tmp_path: Path) -> None:
    state_file = _write(tmp_path, "state.json", {"description": "x", "reward_pool": [{"currency_normal": 5}]})

    result = runner.invoke(app, ["build", str(state_file)])

    assert result.exit_code == 1
    assert "stage: incomplete" in result.output
    assert "Title is required" in result.output


def test_validate_accepts_and_rejects(tmp_path: Path) -> None:
    good = _write(tmp_path, "good.json", valid_quest_payload())
    bad = _write(tmp_path, "bad.json", "{oops")

    ok_result = runner.invoke(app, ["validate", str(good)])
    bad_result = runner.invoke(app, ["validate", str(bad)])

    assert ok_result.exit_code == 0
    assert "ok: Get Apples" in ok_result.output
    assert bad_result.exit_code == 1
    assert "Invalid JSON: " in bad_result.output


def test_validate_missing_file_is_bad_parameter(tmp_path: Path) -> None:
    result = runner.invoke(app, ["validate", str(tmp_path / "missing.json")])

    assert result.exit_code == 2


def test_to_state_prints_authoring_state(tmp_path: Path) -> None:
    quest_file = _write(tmp_path, "quest.json", valid_quest_payload())

    result = runner.invoke(app, ["to-state", str(quest_file)])

    assert result.exit_code == 0, result.output
    state = json.loads(result.output)
    assert state["title"] == "Get Apples"
    assert [c["kind"] for c in state["conditions"]] == ["Fetch", "Elimination", "Interaction"]


def test_options_lists_enumerations() -> None:
    result = runner.invoke(app, ["options"])

    assert result.exit_code == 0
    assert "Bartender" in result.output
    assert "tiers: 1, 2, 3" in result.output
