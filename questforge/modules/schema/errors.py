from __future__ import annotations


class QuestValidationError(ValueError):
    """Raised when a quest draft does not satisfy the quest schema."""

    def __init__(self, errors: list[str]):
        self.errors = list(errors)
        summary = "; ".join(self.errors) if self.errors else "quest draft is invalid"
        super().__init__(summary)
