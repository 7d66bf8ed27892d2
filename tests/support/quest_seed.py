from __future__ import annotations

from typing import Any

from questforge.modules.authoring import (
    AuthoringState,
    ConditionFragment,
    ConditionItemFragment,
    RewardFragment,
    SkillFragment,
    TradeDealFragment,
)


def valid_quest_payload(**overrides: Any) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "AssociatedNpc": "Bartender",
        "Tier": 2,
        "Title": "Get Apples",
        "Description": "Bring apples to the bar",
        "TimeLimitHours": 24,
        "RewardPool": [
            {
                "CurrencyNormal": 150,
                "Fame": 10,
                "Skills": [{"Skill": "Cooking", "Experience": 50}],
                "TradeDeals": [{"Item": "Cider", "Price": 20, "Amount": 2, "AllowExcluded": False}],
            }
        ],
        "Conditions": [
            {
                "Type": "Fetch",
                "SequenceIndex": 0,
                "CanBeAutoCompleted": False,
                "TrackingCaption": "Apples delivered",
                "Items": [{"Name": "Apple", "Amount": 5}],
            },
            {
                "Type": "Elimination",
                "SequenceIndex": 1,
                "CanBeAutoCompleted": True,
                "TargetCharacters": [{"Name": "Puppet", "Amount": 3}],
            },
            {
                "Type": "Interaction",
                "SequenceIndex": 2,
                "CanBeAutoCompleted": False,
                "InteractionObject": "Cellar door",
            },
        ],
    }
    payload.update(overrides)
    return payload


def minimal_state(**overrides: Any) -> AuthoringState:
    fields: dict[str, Any] = {
        "title": "Get Apples",
        "description": "Bring apples",
        "reward_pool": [RewardFragment(fame=10)],
    }
    fields.update(overrides)
    return AuthoringState(**fields)


def full_state() -> AuthoringState:
    return AuthoringState(
        associated_npc="Doctor",
        tier=3,
        title="Clinic Supplies",
        description="Restock the clinic and clear the road",
        time_limit_hours=12,
        reward_pool=[
            RewardFragment(
                currency_normal=200,
                currency_gold=0,
                skills=[SkillFragment(skill="Medical", experience=75)],
                trade_deals=[TradeDealFragment(item="Bandage", price=5, amount=10, fame=0, allow_excluded=True)],
            ),
            RewardFragment(currency_gold=2),
        ],
        conditions=[
            ConditionFragment(
                kind="Fetch",
                sequence_index=0,
                items=[ConditionItemFragment(name="Antibiotics", amount=2), ConditionItemFragment(name="Splint")],
                tracking_caption="Supplies",
            ),
            ConditionFragment(
                kind="Elimination",
                sequence_index=1,
                items=[ConditionItemFragment(name="Brenner", amount=4)],
                can_be_auto_completed=True,
            ),
            ConditionFragment(kind="Interaction", sequence_index=2, interaction_object="Radio mast"),
        ],
    )
