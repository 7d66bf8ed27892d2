from questforge.modules.builders.condition_builder import ConditionBuilder
from questforge.modules.builders.errors import ConditionBuilderMisuseError
from questforge.modules.builders.quest_builder import QuestBuilder, QuestDraft
from questforge.modules.builders.reward_builder import RewardBuilder

__all__ = [
    "ConditionBuilder",
    "ConditionBuilderMisuseError",
    "QuestBuilder",
    "QuestDraft",
    "RewardBuilder",
]
