from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from functools import partial
from typing import Any, assert_never

from pydantic import ValidationError

from questforge.config import settings
from questforge.modules.authoring.diagnostics import completion_errors
from questforge.modules.authoring.filters import (
    ConditionProjection,
    RewardProjection,
    present_number,
    qualifying_conditions,
    qualifying_rewards,
)
from questforge.modules.authoring.state import AuthoringState
from questforge.modules.builders import ConditionBuilder, QuestBuilder, RewardBuilder
from questforge.modules.schema.errors import QuestValidationError
from questforge.modules.schema.models import Quest
from questforge.modules.schema.validation import format_validation_errors

logger = logging.getLogger(__name__)


class BuildStage(str, Enum):
    INCOMPLETE = "incomplete"
    BUILD_ATTEMPT = "build_attempt"
    BUILT = "built"


@dataclass(slots=True)
class QuestResult:
    quest: Quest | None
    errors: list[str] = field(default_factory=list)
    stage: BuildStage = BuildStage.INCOMPLETE

    @property
    def ok(self) -> bool:
        return self.quest is not None and not self.errors


def _configure_reward(projection: RewardProjection, builder: RewardBuilder) -> RewardBuilder:
    if projection.has_currency:
        builder = builder.currency(projection.currency_normal, projection.currency_gold, projection.fame)
    for skill in projection.skills:
        builder = builder.add_skill(skill.skill, skill.experience)
    for deal in projection.trade_deals:
        builder = builder.add_trade_deal(
            deal.item,
            price=deal.price,
            amount=deal.amount,
            fame=deal.fame,
            allow_excluded=deal.allow_excluded,
        )
    return builder


def _configure_condition(projection: ConditionProjection, builder: ConditionBuilder) -> ConditionBuilder:
    builder = builder.with_sequence_index(projection.sequence_index)
    match projection.kind:
        case "Fetch":
            for entry in projection.entries:
                builder = builder.require_items([entry.name], entry.amount)
        case "Elimination":
            for entry in projection.entries:
                builder = builder.eliminate_targets([entry.name], entry.amount)
        case "Interaction":
            if projection.interaction_object is not None:
                builder = builder.interact_with(projection.interaction_object)
        case _:
            assert_never(projection.kind)
    if projection.auto_complete:
        builder = builder.auto_complete()
    if projection.tracking_caption is not None:
        builder = builder.with_caption(projection.tracking_caption)
    return builder


def _add_condition(quest_builder: QuestBuilder, projection: ConditionProjection) -> QuestBuilder:
    configure = partial(_configure_condition, projection)
    match projection.kind:
        case "Fetch":
            return quest_builder.add_fetch_condition(configure)
        case "Elimination":
            return quest_builder.add_elimination_condition(configure)
        case "Interaction":
            return quest_builder.add_interaction_condition(configure)
        case _:
            assert_never(projection.kind)


def _add_default_condition(quest_builder: QuestBuilder) -> QuestBuilder:
    placeholder = settings.placeholder_fetch_item
    return quest_builder.add_fetch_condition(lambda c: c.with_sequence_index(0).require_items([placeholder], 1))


def invalid_state_result(exc: ValidationError) -> QuestResult:
    """Result for a snapshot that cannot even be read as an authoring state."""
    return QuestResult(quest=None, errors=format_validation_errors(exc), stage=BuildStage.INCOMPLETE)


def _coerce_state(state: AuthoringState | dict[str, Any]) -> AuthoringState:
    if isinstance(state, AuthoringState):
        return state
    return AuthoringState.model_validate(state)


def transform_authoring_state(state: AuthoringState | dict[str, Any]) -> QuestResult:
    """Derive a validated quest, or the reasons it cannot be built yet, from a state snapshot.

    The snapshot is only read. A mapping that does not fit the authoring model is
    reported as errors, never raised. Missing basic fields short-circuit with checklist
    errors; otherwise a fresh builder assembles the draft and schema failures are
    reported in place of the checklist. Condition builder misuse propagates.
    """
    try:
        snapshot = _coerce_state(state)
    except ValidationError as exc:
        logger.debug("authoring snapshot rejected: %d issue(s)", exc.error_count())
        return invalid_state_result(exc)
    rewards = qualifying_rewards(snapshot.reward_pool)

    checklist = completion_errors(snapshot, qualifying_reward_count=len(rewards))
    if checklist:
        return QuestResult(quest=None, errors=checklist, stage=BuildStage.INCOMPLETE)

    quest_builder = (
        QuestBuilder()
        .with_npc(snapshot.associated_npc)
        .with_tier(snapshot.tier)
        .with_title(snapshot.title)
        .with_description(snapshot.description)
    )
    time_limit = present_number(snapshot.time_limit_hours)
    if time_limit is not None:
        quest_builder = quest_builder.with_time_limit(time_limit)

    for reward in rewards:
        quest_builder = quest_builder.add_reward(partial(_configure_reward, reward))

    conditions = qualifying_conditions(snapshot.conditions)
    for condition in conditions:
        quest_builder = _add_condition(quest_builder, condition)
    if not conditions:
        quest_builder = _add_default_condition(quest_builder)

    try:
        quest = quest_builder.build()
    except QuestValidationError as exc:
        logger.debug("quest draft rejected by schema: %s", exc.errors)
        return QuestResult(quest=None, errors=list(exc.errors), stage=BuildStage.BUILD_ATTEMPT)
    return QuestResult(quest=quest, errors=[], stage=BuildStage.BUILT)
