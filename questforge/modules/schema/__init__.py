from questforge.modules.schema.errors import QuestValidationError
from questforge.modules.schema.models import (
    CONDITION_TYPES,
    NPC,
    NPC_NAMES,
    QUEST_TIERS,
    SKILL_NAMES,
    Condition,
    ConditionItem,
    ConditionType,
    EliminationCondition,
    FetchCondition,
    InteractionCondition,
    Quest,
    RewardPool,
    Skill,
    SkillReward,
    Tier,
    TradeDeal,
    extract_condition_items,
    extract_interaction_objects,
    is_elimination_condition,
    is_fetch_condition,
    is_interaction_condition,
)
from questforge.modules.schema.validation import (
    QuestValidation,
    dump_quest,
    dump_quest_json,
    format_validation_errors,
    parse_quest,
    safe_parse_quest,
)

__all__ = [
    "CONDITION_TYPES",
    "NPC",
    "NPC_NAMES",
    "QUEST_TIERS",
    "SKILL_NAMES",
    "Condition",
    "ConditionItem",
    "ConditionType",
    "EliminationCondition",
    "FetchCondition",
    "InteractionCondition",
    "Quest",
    "QuestValidation",
    "QuestValidationError",
    "RewardPool",
    "Skill",
    "SkillReward",
    "Tier",
    "TradeDeal",
    "dump_quest",
    "dump_quest_json",
    "extract_condition_items",
    "extract_interaction_objects",
    "format_validation_errors",
    "is_elimination_condition",
    "is_fetch_condition",
    "is_interaction_condition",
    "parse_quest",
    "safe_parse_quest",
]
