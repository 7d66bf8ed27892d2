"""Decides which partially edited fragments are worth building.

Zero, blank and missing values all mean "absent": they are dropped from the
projection instead of being passed through, so untouched UI defaults never trip
the schema's range checks.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

from questforge.modules.authoring.state import (
    ConditionFragment,
    ConditionItemFragment,
    RewardFragment,
    SkillFragment,
    TradeDealFragment,
)
from questforge.modules.schema.models import ConditionType


@dataclass(frozen=True, slots=True)
class SkillProjection:
    skill: str
    experience: int | float


@dataclass(frozen=True, slots=True)
class TradeDealProjection:
    item: str
    price: int | float | None = None
    amount: int | float | None = None
    fame: int | float | None = None
    allow_excluded: bool | None = None


@dataclass(frozen=True, slots=True)
class RewardProjection:
    currency_normal: int | float | None
    currency_gold: int | float | None
    fame: int | float | None
    skills: tuple[SkillProjection, ...]
    trade_deals: tuple[TradeDealProjection, ...]

    @property
    def has_currency(self) -> bool:
        return any(value is not None for value in (self.currency_normal, self.currency_gold, self.fame))


@dataclass(frozen=True, slots=True)
class ConditionEntryProjection:
    name: str
    amount: int


@dataclass(frozen=True, slots=True)
class ConditionProjection:
    kind: ConditionType
    sequence_index: int
    entries: tuple[ConditionEntryProjection, ...]
    interaction_object: str | None
    auto_complete: bool
    tracking_caption: str | None


def present_number(value: Any) -> int | float | None:
    """Return ``value`` if it is a positive finite number, otherwise ``None``."""
    if value is None or isinstance(value, bool):
        return None
    if not isinstance(value, (int, float)) or not math.isfinite(value) or value <= 0:
        return None
    return value


def present_text(value: str | None) -> str | None:
    if value is None or not value.strip():
        return None
    return value


def _skill_qualifies(skill: SkillFragment) -> bool:
    return bool(skill.skill) and present_number(skill.experience) is not None


def _trade_deal_qualifies(deal: TradeDealFragment) -> bool:
    return present_text(deal.item) is not None


def reward_qualifies(reward: RewardFragment) -> bool:
    if any(present_number(value) is not None for value in (reward.currency_normal, reward.currency_gold, reward.fame)):
        return True
    if any(_skill_qualifies(skill) for skill in reward.skills):
        return True
    return any(_trade_deal_qualifies(deal) for deal in reward.trade_deals)


def project_reward(reward: RewardFragment) -> RewardProjection:
    return RewardProjection(
        currency_normal=present_number(reward.currency_normal),
        currency_gold=present_number(reward.currency_gold),
        fame=present_number(reward.fame),
        skills=tuple(
            SkillProjection(skill=str(skill.skill), experience=skill.experience)
            for skill in reward.skills
            if _skill_qualifies(skill)
        ),
        trade_deals=tuple(
            TradeDealProjection(
                item=deal.item,
                price=present_number(deal.price),
                amount=present_number(deal.amount),
                fame=present_number(deal.fame),
                allow_excluded=deal.allow_excluded,
            )
            for deal in reward.trade_deals
            if _trade_deal_qualifies(deal)
        ),
    )


def qualifying_rewards(rewards: list[RewardFragment]) -> list[RewardProjection]:
    return [project_reward(reward) for reward in rewards if reward_qualifies(reward)]


def condition_qualifies(condition: ConditionFragment) -> bool:
    if condition.kind in ("Fetch", "Elimination"):
        return len(condition.items) > 0
    return present_text(condition.interaction_object) is not None


def _project_entry(item: ConditionItemFragment) -> ConditionEntryProjection:
    return ConditionEntryProjection(name=item.name, amount=item.amount)


def project_condition(condition: ConditionFragment) -> ConditionProjection:
    entries: tuple[ConditionEntryProjection, ...] = ()
    interaction_object = None
    if condition.kind == "Interaction":
        interaction_object = present_text(condition.interaction_object)
    else:
        entries = tuple(_project_entry(item) for item in condition.items)
    return ConditionProjection(
        kind=condition.kind,
        sequence_index=condition.sequence_index,
        entries=entries,
        interaction_object=interaction_object,
        auto_complete=bool(condition.can_be_auto_completed),
        tracking_caption=present_text(condition.tracking_caption),
    )


def qualifying_conditions(conditions: list[ConditionFragment]) -> list[ConditionProjection]:
    return [project_condition(condition) for condition in conditions if condition_qualifies(condition)]
