from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

from pydantic import ValidationError

from questforge.config import settings
from questforge.modules.schema.errors import QuestValidationError
from questforge.modules.schema.models import CONDITION_TYPES, Quest

_VALUE_ERROR_PREFIX = "Value error, "


@dataclass(slots=True)
class QuestValidation:
    success: bool
    errors: list[str] = field(default_factory=list)
    quest: Quest | None = None


def _strip_condition_tags(loc: tuple) -> list:
    # The condition union inserts the variant tag right after `Conditions.<index>`.
    out: list = []
    for idx, part in enumerate(loc):
        if (
            idx >= 2
            and loc[idx - 2] == "Conditions"
            and isinstance(loc[idx - 1], int)
            and part in CONDITION_TYPES
        ):
            continue
        out.append(part)
    return out


def format_validation_errors(exc: ValidationError) -> list[str]:
    """Render pydantic issues as ``<field path>: <message>``, keeping pydantic's order."""
    out: list[str] = []
    for issue in exc.errors(include_url=False):
        parts = [str(part) for part in _strip_condition_tags(issue["loc"])]
        message = str(issue["msg"])
        if message.startswith(_VALUE_ERROR_PREFIX):
            message = message[len(_VALUE_ERROR_PREFIX):]
        path = ".".join(parts)
        out.append(f"{path}: {message}" if path else message)
    return out


def parse_quest(payload: Any) -> Quest:
    try:
        return Quest.model_validate(payload)
    except ValidationError as exc:
        raise QuestValidationError(format_validation_errors(exc)) from exc


def safe_parse_quest(payload: Any) -> QuestValidation:
    try:
        quest = parse_quest(payload)
    except QuestValidationError as exc:
        return QuestValidation(success=False, errors=exc.errors)
    return QuestValidation(success=True, quest=quest)


def dump_quest(quest: Quest) -> dict[str, Any]:
    return quest.model_dump(mode="json", by_alias=True, exclude_none=True)


def dump_quest_json(quest: Quest, *, indent: int | None = None) -> str:
    if indent is None:
        indent = settings.json_indent
    return json.dumps(dump_quest(quest), ensure_ascii=False, indent=indent)
