from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from questforge.modules.authoring.loader import (
    export_quest_json,
    load_quest_json,
    quest_export_filename,
    quest_to_authoring_state,
)
from questforge.modules.authoring.state import AuthoringState
from questforge.modules.authoring.transform import QuestResult, invalid_state_result, transform_authoring_state

logger = logging.getLogger(__name__)


class AuthoringSession:
    """Holds the current authoring snapshot and its latest derived result.

    Every replacement re-derives the result from scratch. The session keeps its
    own copy of the snapshot, so later edits to a caller's object do not leak in.
    A mapping that cannot be read as a state keeps the previous snapshot and
    reports why in the result.
    """

    def __init__(self, state: AuthoringState | dict[str, Any] | None = None) -> None:
        self._state = AuthoringState()
        self._result = transform_authoring_state(self._state)
        if state is not None:
            self.replace_state(state)

    @property
    def state(self) -> AuthoringState:
        return self._state.model_copy(deep=True)

    @property
    def result(self) -> QuestResult:
        return self._result

    def replace_state(self, state: AuthoringState | dict[str, Any]) -> QuestResult:
        if isinstance(state, AuthoringState):
            snapshot = state.model_copy(deep=True)
        else:
            try:
                snapshot = AuthoringState.model_validate(state)
            except ValidationError as exc:
                self._result = invalid_state_result(exc)
                return self._result
        self._state = snapshot
        self._result = transform_authoring_state(snapshot)
        return self._result

    def load_json(self, text: str) -> str | None:
        """Replace the whole state with a quest parsed from ``text``; return an error string on failure."""
        loaded = load_quest_json(text)
        if loaded.quest is None:
            return loaded.error
        logger.debug("authoring state reset from loaded quest %r", loaded.quest.title)
        self.replace_state(quest_to_authoring_state(loaded.quest))
        return None

    def export_json(self) -> str | None:
        if self._result.quest is None:
            return None
        return export_quest_json(self._result.quest)

    def export_filename(self) -> str | None:
        if self._result.quest is None:
            return None
        return quest_export_filename(self._result.quest)
