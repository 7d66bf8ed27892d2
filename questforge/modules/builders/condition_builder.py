from __future__ import annotations

import copy
from typing import Any, assert_never

from questforge.modules.builders.errors import kind_already_selected, kind_mismatch, kind_not_selected
from questforge.modules.schema.models import ConditionType


class ConditionBuilder:
    """Builds one condition fragment.

    The condition kind is chosen once through ``as_fetch``/``as_elimination``/
    ``as_interaction``. Kind-specific methods raise ``ConditionBuilderMisuseError``
    when the builder is configured for another kind.
    """

    def __init__(self) -> None:
        self._kind: ConditionType | None = None
        self._sequence_index = 0
        self._auto_complete = False
        self._caption: str | None = None
        self._entries: list[dict[str, Any]] = []
        self._interaction_object: str | None = None

    @property
    def kind(self) -> ConditionType | None:
        return self._kind

    def _select(self, kind: ConditionType, method: str) -> ConditionBuilder:
        if self._kind is not None and self._kind != kind:
            raise kind_already_selected(method, actual=self._kind)
        self._kind = kind
        return self

    def _require_kind(self, kind: ConditionType, method: str) -> None:
        if self._kind is None:
            raise kind_not_selected(method)
        if self._kind != kind:
            raise kind_mismatch(method, expected=kind, actual=self._kind)

    def as_fetch(self) -> ConditionBuilder:
        return self._select("Fetch", "as_fetch")

    def as_elimination(self) -> ConditionBuilder:
        return self._select("Elimination", "as_elimination")

    def as_interaction(self) -> ConditionBuilder:
        return self._select("Interaction", "as_interaction")

    def with_sequence_index(self, index: int) -> ConditionBuilder:
        self._sequence_index = index
        return self

    def auto_complete(self, enabled: bool = True) -> ConditionBuilder:
        self._auto_complete = enabled
        return self

    def with_caption(self, caption: str) -> ConditionBuilder:
        self._caption = caption
        return self

    def require_items(self, names: list[str], amount: int = 1) -> ConditionBuilder:
        self._require_kind("Fetch", "require_items")
        self._entries.extend({"Name": name, "Amount": amount} for name in names)
        return self

    def eliminate_targets(self, names: list[str], amount: int = 1) -> ConditionBuilder:
        self._require_kind("Elimination", "eliminate_targets")
        self._entries.extend({"Name": name, "Amount": amount} for name in names)
        return self

    def interact_with(self, interaction_object: str) -> ConditionBuilder:
        self._require_kind("Interaction", "interact_with")
        self._interaction_object = interaction_object
        return self

    def build(self) -> dict[str, Any]:
        if self._kind is None:
            raise kind_not_selected("build")
        condition: dict[str, Any] = {
            "Type": self._kind,
            "SequenceIndex": self._sequence_index,
            "CanBeAutoCompleted": self._auto_complete,
        }
        if self._caption is not None:
            condition["TrackingCaption"] = self._caption
        match self._kind:
            case "Fetch":
                condition["Items"] = copy.deepcopy(self._entries)
            case "Elimination":
                condition["TargetCharacters"] = copy.deepcopy(self._entries)
            case "Interaction":
                if self._interaction_object is not None:
                    condition["InteractionObject"] = self._interaction_object
            case _:
                assert_never(self._kind)
        return condition
