from __future__ import annotations

import copy
from collections.abc import Callable
from typing import Any

from questforge.modules.builders.condition_builder import ConditionBuilder
from questforge.modules.builders.reward_builder import RewardBuilder
from questforge.modules.schema.models import Quest
from questforge.modules.schema.validation import QuestValidation, parse_quest, safe_parse_quest

QuestDraft = dict[str, Any]


class QuestBuilder:
    """Accumulates a quest draft, then hands it to the schema.

    Scalar setters override earlier values and ``add_*`` calls append. Nothing is
    checked until ``build()`` or ``validate()``.
    """

    def __init__(self) -> None:
        self._draft: QuestDraft = {"RewardPool": [], "Conditions": []}

    def with_npc(self, npc: str) -> QuestBuilder:
        self._draft["AssociatedNpc"] = npc
        return self

    def with_tier(self, tier: int) -> QuestBuilder:
        self._draft["Tier"] = tier
        return self

    def with_title(self, title: str) -> QuestBuilder:
        self._draft["Title"] = title
        return self

    def with_description(self, description: str) -> QuestBuilder:
        self._draft["Description"] = description
        return self

    def with_time_limit(self, hours: int | float) -> QuestBuilder:
        self._draft["TimeLimitHours"] = hours
        return self

    def add_condition(self, builder_fn: Callable[[ConditionBuilder], dict[str, Any]]) -> QuestBuilder:
        """Append a condition the callback builds itself, kind selection included."""
        self._draft["Conditions"].append(builder_fn(ConditionBuilder()))
        return self

    def add_fetch_condition(self, builder_fn: Callable[[ConditionBuilder], ConditionBuilder]) -> QuestBuilder:
        return self._add_configured_condition(ConditionBuilder().as_fetch(), builder_fn)

    def add_elimination_condition(self, builder_fn: Callable[[ConditionBuilder], ConditionBuilder]) -> QuestBuilder:
        return self._add_configured_condition(ConditionBuilder().as_elimination(), builder_fn)

    def add_interaction_condition(self, builder_fn: Callable[[ConditionBuilder], ConditionBuilder]) -> QuestBuilder:
        return self._add_configured_condition(ConditionBuilder().as_interaction(), builder_fn)

    def _add_configured_condition(
        self,
        seeded: ConditionBuilder,
        builder_fn: Callable[[ConditionBuilder], ConditionBuilder],
    ) -> QuestBuilder:
        self._draft["Conditions"].append(builder_fn(seeded).build())
        return self

    def add_reward(self, builder_fn: Callable[[RewardBuilder], RewardBuilder]) -> QuestBuilder:
        self._draft["RewardPool"].append(builder_fn(RewardBuilder()).build())
        return self

    def add_currency_reward(
        self,
        normal: int | float | None = None,
        gold: int | float | None = None,
        fame: int | float | None = None,
    ) -> QuestBuilder:
        return self.add_reward(lambda builder: builder.currency(normal, gold, fame))

    def draft(self) -> QuestDraft:
        return copy.deepcopy(self._draft)

    preview = draft

    def validate(self) -> QuestValidation:
        return safe_parse_quest(self.draft())

    def build(self) -> Quest:
        return parse_quest(self.draft())
