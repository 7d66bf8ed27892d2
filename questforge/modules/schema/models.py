from __future__ import annotations

import math
from typing import Annotated, Any, Literal, Union, get_args

from pydantic import BaseModel, ConfigDict, Field, StringConstraints, field_validator, model_validator
from pydantic.alias_generators import to_pascal

NPC = Literal[
    "Armorer",
    "Banker",
    "Barber",
    "Bartender",
    "Doctor",
    "GeneralGoods",
    "Harbormaster",
    "Mechanic",
]
Skill = Literal[
    "Archery",
    "Aviation",
    "Awareness",
    "Brawling",
    "Camouflage",
    "Cooking",
    "Demolition",
    "Driving",
    "Endurance",
    "Engineering",
    "Handgun",
    "Medical",
    "MeleeWeapons",
    "Motorcycle",
    "Rifles",
    "Running",
    "Sniping",
    "Stealth",
    "Survival",
    "Thievery",
]
Tier = Literal[1, 2, 3]
ConditionType = Literal["Fetch", "Elimination", "Interaction"]

NPC_NAMES: tuple[str, ...] = get_args(NPC)
SKILL_NAMES: tuple[str, ...] = get_args(Skill)
QUEST_TIERS: tuple[int, ...] = get_args(Tier)
CONDITION_TYPES: tuple[str, ...] = get_args(ConditionType)

NonBlankStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
Count = Annotated[int, Field(strict=True, ge=1)]


def _validate_number(value: Any, *, allow_zero: bool) -> Any:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError("Expected a number")
    if not math.isfinite(value):
        raise ValueError("Expected a finite number")
    if allow_zero and value < 0:
        raise ValueError("Number must be greater than or equal to 0")
    if not allow_zero and value <= 0:
        raise ValueError("Number must be greater than 0")
    return value


class QuestModel(BaseModel):
    """Base for wire models: PascalCase keys on the wire, snake_case in Python."""

    model_config = ConfigDict(
        alias_generator=to_pascal,
        populate_by_name=True,
        extra="forbid",
        frozen=True,
    )


class SkillReward(QuestModel):
    skill: Skill
    experience: int | float

    @field_validator("experience", mode="before")
    @classmethod
    def validate_experience(cls, value: Any) -> Any:
        return _validate_number(value, allow_zero=False)


class TradeDeal(QuestModel):
    item: NonBlankStr
    price: int | float | None = None
    amount: int | float | None = None
    fame: int | float | None = None
    allow_excluded: bool | None = None

    @field_validator("price", "fame", mode="before")
    @classmethod
    def validate_non_negative(cls, value: Any) -> Any:
        return _validate_number(value, allow_zero=True)

    @field_validator("amount", mode="before")
    @classmethod
    def validate_amount(cls, value: Any) -> Any:
        return _validate_number(value, allow_zero=False)


class RewardPool(QuestModel):
    currency_normal: int | float | None = None
    currency_gold: int | float | None = None
    fame: int | float | None = None
    skills: tuple[SkillReward, ...] | None = None
    trade_deals: tuple[TradeDeal, ...] | None = None

    @field_validator("currency_normal", "currency_gold", "fame", mode="before")
    @classmethod
    def validate_amounts(cls, value: Any) -> Any:
        return _validate_number(value, allow_zero=True)

    @model_validator(mode="after")
    def validate_has_content(self):
        if not self.has_content():
            raise ValueError("Reward pool must grant currency, fame, skills, or trade deals")
        return self

    def has_content(self) -> bool:
        if any(value for value in (self.currency_normal, self.currency_gold, self.fame)):
            return True
        return bool(self.skills) or bool(self.trade_deals)


class ConditionItem(QuestModel):
    name: NonBlankStr
    amount: Count = 1


class BaseCondition(QuestModel):
    type: ConditionType
    sequence_index: int = Field(strict=True, ge=0)
    can_be_auto_completed: bool = False
    tracking_caption: str | None = None


class FetchCondition(BaseCondition):
    type: Literal["Fetch"] = "Fetch"
    items: tuple[ConditionItem, ...] = Field(min_length=1)


class EliminationCondition(BaseCondition):
    type: Literal["Elimination"] = "Elimination"
    target_characters: tuple[ConditionItem, ...] = Field(min_length=1)


class InteractionCondition(BaseCondition):
    type: Literal["Interaction"] = "Interaction"
    interaction_object: NonBlankStr


Condition = Annotated[
    Union[FetchCondition, EliminationCondition, InteractionCondition],
    Field(discriminator="type"),
]


class Quest(QuestModel):
    """A validated quest. Frozen, with tuple collections, so a built quest cannot change."""

    associated_npc: NPC
    tier: Tier
    title: NonBlankStr
    description: NonBlankStr
    time_limit_hours: int | float | None = None
    reward_pool: tuple[RewardPool, ...] = Field(min_length=1)
    conditions: tuple[Condition, ...] = Field(min_length=1)

    @field_validator("time_limit_hours", mode="before")
    @classmethod
    def validate_time_limit(cls, value: Any) -> Any:
        return _validate_number(value, allow_zero=False)


def is_fetch_condition(condition: BaseCondition) -> bool:
    return isinstance(condition, FetchCondition)


def is_elimination_condition(condition: BaseCondition) -> bool:
    return isinstance(condition, EliminationCondition)


def is_interaction_condition(condition: BaseCondition) -> bool:
    return isinstance(condition, InteractionCondition)


def extract_condition_items(condition: BaseCondition) -> list[str]:
    """Names of the items to fetch or the characters to eliminate."""
    if isinstance(condition, FetchCondition):
        return [item.name for item in condition.items]
    if isinstance(condition, EliminationCondition):
        return [target.name for target in condition.target_characters]
    return []


def extract_interaction_objects(condition: BaseCondition) -> list[str]:
    if isinstance(condition, InteractionCondition):
        return [condition.interaction_object]
    return []
