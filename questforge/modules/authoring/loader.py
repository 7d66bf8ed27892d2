from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass
from typing import assert_never

from questforge.modules.authoring.diagnostics import invalid_json_message, invalid_quest_message
from questforge.modules.authoring.state import (
    AuthoringState,
    ConditionFragment,
    ConditionItemFragment,
    RewardFragment,
    SkillFragment,
    TradeDealFragment,
)
from questforge.modules.schema.models import (
    Condition,
    EliminationCondition,
    FetchCondition,
    InteractionCondition,
    Quest,
    RewardPool,
)
from questforge.modules.schema.validation import dump_quest_json, safe_parse_quest

logger = logging.getLogger(__name__)

_FILENAME_UNSAFE_RE = re.compile(r"[^a-zA-Z0-9]")


@dataclass(slots=True)
class QuestLoadResult:
    quest: Quest | None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.quest is not None


def load_quest_json(text: str) -> QuestLoadResult:
    """Parse and validate quest JSON. There is no partial success."""
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        logger.info("quest load rejected: malformed JSON (%s)", exc)
        return QuestLoadResult(quest=None, error=invalid_json_message(str(exc)))

    validation = safe_parse_quest(payload)
    if not validation.success:
        logger.info("quest load rejected: %d schema issue(s)", len(validation.errors))
        return QuestLoadResult(quest=None, error=invalid_quest_message(validation.errors))
    return QuestLoadResult(quest=validation.quest)


def export_quest_json(quest: Quest) -> str:
    return dump_quest_json(quest)


def quest_export_filename(quest: Quest) -> str:
    stem = _FILENAME_UNSAFE_RE.sub("_", quest.title or "")
    return f"{stem or 'quest'}.json"


def _reward_fragment(reward: RewardPool) -> RewardFragment:
    return RewardFragment(
        currency_normal=reward.currency_normal,
        currency_gold=reward.currency_gold,
        fame=reward.fame,
        skills=[SkillFragment(skill=skill.skill, experience=skill.experience) for skill in reward.skills or []],
        trade_deals=[
            TradeDealFragment(
                item=deal.item,
                price=deal.price,
                amount=deal.amount,
                fame=deal.fame,
                allow_excluded=deal.allow_excluded,
            )
            for deal in reward.trade_deals or []
        ],
    )


def _condition_fragment(condition: Condition) -> ConditionFragment:
    fragment = ConditionFragment(
        kind=condition.type,
        sequence_index=condition.sequence_index,
        can_be_auto_completed=condition.can_be_auto_completed,
        tracking_caption=condition.tracking_caption or "",
    )
    match condition:
        case FetchCondition():
            fragment.items = [ConditionItemFragment(name=item.name, amount=item.amount) for item in condition.items]
        case EliminationCondition():
            fragment.items = [
                ConditionItemFragment(name=target.name, amount=target.amount)
                for target in condition.target_characters
            ]
        case InteractionCondition():
            fragment.interaction_object = condition.interaction_object
        case _:
            assert_never(condition)
    return fragment


def quest_to_authoring_state(quest: Quest) -> AuthoringState:
    """Project a quest into a brand new authoring state; nothing of the old state survives."""
    return AuthoringState(
        associated_npc=quest.associated_npc,
        tier=quest.tier,
        title=quest.title,
        description=quest.description,
        time_limit_hours=quest.time_limit_hours,
        reward_pool=[_reward_fragment(reward) for reward in quest.reward_pool],
        conditions=[_condition_fragment(condition) for condition in quest.conditions],
    )
