from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_pascal

from questforge.config import settings
from questforge.modules.schema.models import ConditionType


class AuthoringModel(BaseModel):
    """Lenient editing model: every field defaults, nothing is range-checked here."""

    model_config = ConfigDict(alias_generator=to_pascal, populate_by_name=True, extra="ignore")


class SkillFragment(AuthoringModel):
    skill: str | None = None
    experience: int | float | None = None


class TradeDealFragment(AuthoringModel):
    item: str = ""
    price: int | float | None = None
    amount: int | float | None = None
    fame: int | float | None = None
    allow_excluded: bool | None = None


class RewardFragment(AuthoringModel):
    currency_normal: int | float | None = None
    currency_gold: int | float | None = None
    fame: int | float | None = None
    skills: list[SkillFragment] = Field(default_factory=list)
    trade_deals: list[TradeDealFragment] = Field(default_factory=list)


class ConditionItemFragment(AuthoringModel):
    name: str = ""
    amount: int = 1


class ConditionFragment(AuthoringModel):
    kind: ConditionType = "Fetch"
    sequence_index: int = 0
    items: list[ConditionItemFragment] = Field(default_factory=list)
    interaction_object: str = ""
    can_be_auto_completed: bool = False
    tracking_caption: str = ""


class AuthoringState(AuthoringModel):
    associated_npc: str = Field(default_factory=lambda: settings.default_npc)
    tier: int = Field(default_factory=lambda: settings.default_tier)
    title: str = ""
    description: str = ""
    time_limit_hours: int | float | None = None
    reward_pool: list[RewardFragment] = Field(default_factory=list)
    conditions: list[ConditionFragment] = Field(default_factory=list)
