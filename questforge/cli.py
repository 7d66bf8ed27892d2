from __future__ import annotations

import json
from pathlib import Path
from typing import NoReturn

import typer
from pydantic import ValidationError

from questforge.config import settings
from questforge.logging_setup import configure_logging
from questforge.modules.authoring import (
    AuthoringState,
    export_quest_json,
    load_quest_json,
    quest_export_filename,
    quest_to_authoring_state,
    transform_authoring_state,
)
from questforge.modules.schema import CONDITION_TYPES, NPC_NAMES, QUEST_TIERS, SKILL_NAMES

app = typer.Typer(help="Quest authoring CLI")


@app.callback()
def main(log_level: str | None = typer.Option(None, "--log-level", help="Override QUESTFORGE_LOG_LEVEL")) -> None:
    configure_logging(log_level or settings.log_level)


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise typer.BadParameter(f"cannot read {path}: {exc}") from exc


def _fail(messages: list[str]) -> NoReturn:
    for message in messages:
        typer.echo(message, err=True)
    raise typer.Exit(code=1)


@app.command()
def build(
    state_file: Path = typer.Argument(..., help="Authoring state JSON file"),
    output_dir: Path | None = typer.Option(None, "--output-dir", help="Write <Title>.json into this directory"),
) -> None:
    """Build a quest from an authoring state snapshot."""
    try:
        state = AuthoringState.model_validate_json(_read_text(state_file))
    except ValidationError as exc:
        _fail([f"Invalid authoring state: {exc.error_count()} issue(s)", str(exc)])

    result = transform_authoring_state(state)
    if result.quest is None:
        _fail([f"stage: {result.stage.value}", *result.errors])

    text = export_quest_json(result.quest)
    if output_dir is None:
        typer.echo(text)
        return
    output_dir.mkdir(parents=True, exist_ok=True)
    target = output_dir / quest_export_filename(result.quest)
    target.write_text(text + "\n", encoding="utf-8")
    typer.echo(f"wrote: {target}")


@app.command()
def validate(quest_file: Path = typer.Argument(..., help="Quest JSON file")) -> None:
    """Check a quest file against the quest schema."""
    loaded = load_quest_json(_read_text(quest_file))
    if loaded.quest is None:
        _fail([str(loaded.error)])
    typer.echo(f"ok: {loaded.quest.title}")


@app.command("to-state")
def to_state(quest_file: Path = typer.Argument(..., help="Quest JSON file")) -> None:
    """Print the authoring state a quest file loads into."""
    loaded = load_quest_json(_read_text(quest_file))
    if loaded.quest is None:
        _fail([str(loaded.error)])
    state = quest_to_authoring_state(loaded.quest)
    typer.echo(json.dumps(state.model_dump(mode="json"), ensure_ascii=False, indent=settings.json_indent))


@app.command()
def options() -> None:
    """List the values accepted for enumerated quest fields."""
    typer.echo(f"npcs: {', '.join(NPC_NAMES)}")
    typer.echo(f"skills: {', '.join(SKILL_NAMES)}")
    typer.echo(f"tiers: {', '.join(str(tier) for tier in QUEST_TIERS)}")
    typer.echo(f"condition types: {', '.join(CONDITION_TYPES)}")


if __name__ == "__main__":
    app()
