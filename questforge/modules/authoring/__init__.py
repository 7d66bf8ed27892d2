from questforge.modules.authoring.filters import (
    condition_qualifies,
    project_condition,
    project_reward,
    qualifying_conditions,
    qualifying_rewards,
    reward_qualifies,
)
from questforge.modules.authoring.loader import (
    QuestLoadResult,
    export_quest_json,
    load_quest_json,
    quest_export_filename,
    quest_to_authoring_state,
)
from questforge.modules.authoring.session import AuthoringSession
from questforge.modules.authoring.state import (
    AuthoringState,
    ConditionFragment,
    ConditionItemFragment,
    RewardFragment,
    SkillFragment,
    TradeDealFragment,
)
from questforge.modules.authoring.transform import BuildStage, QuestResult, transform_authoring_state

__all__ = [
    "AuthoringSession",
    "AuthoringState",
    "BuildStage",
    "ConditionFragment",
    "ConditionItemFragment",
    "QuestLoadResult",
    "QuestResult",
    "RewardFragment",
    "SkillFragment",
    "TradeDealFragment",
    "condition_qualifies",
    "export_quest_json",
    "load_quest_json",
    "project_condition",
    "project_reward",
    "qualifying_conditions",
    "qualifying_rewards",
    "quest_export_filename",
    "quest_to_authoring_state",
    "reward_qualifies",
    "transform_authoring_state",
]
