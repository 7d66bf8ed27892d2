from __future__ import annotations

from questforge.modules.authoring.state import AuthoringState

TITLE_REQUIRED = "Title is required"
DESCRIPTION_REQUIRED = "Description is required"
REWARD_POOL_REQUIRED = "At least one reward pool is required"
REWARD_CONTENT_REQUIRED = "At least one reward must have content (currency, skills, or trade deals)"


def completion_errors(state: AuthoringState, *, qualifying_reward_count: int) -> list[str]:
    """Checklist of required fields still missing, one message per requirement."""
    errors: list[str] = []
    if not state.title.strip():
        errors.append(TITLE_REQUIRED)
    if not state.description.strip():
        errors.append(DESCRIPTION_REQUIRED)
    if not state.reward_pool:
        errors.append(REWARD_POOL_REQUIRED)
    elif qualifying_reward_count == 0:
        errors.append(REWARD_CONTENT_REQUIRED)
    return errors


def invalid_json_message(detail: str) -> str:
    return f"Invalid JSON: {detail}"


def invalid_quest_message(errors: list[str]) -> str:
    return f"Invalid quest format: {'; '.join(errors)}"
