from __future__ import annotations


class ConditionBuilderMisuseError(RuntimeError):
    """Raised when a condition builder is driven against the wrong condition kind."""

    def __init__(self, *, code: str, message: str, method: str | None = None) -> None:
        super().__init__(message)
        self.code = str(code)
        self.message = str(message)
        self.method = method


def kind_not_selected(method: str) -> ConditionBuilderMisuseError:
    return ConditionBuilderMisuseError(
        code="CONDITION_KIND_NOT_SELECTED",
        message=f"{method}() requires a condition kind; call as_fetch(), as_elimination() or as_interaction() first.",
        method=method,
    )


def kind_mismatch(method: str, *, expected: str, actual: str) -> ConditionBuilderMisuseError:
    return ConditionBuilderMisuseError(
        code="CONDITION_KIND_MISMATCH",
        message=f"{method}() is only valid for {expected} conditions, builder is configured for {actual}.",
        method=method,
    )


def kind_already_selected(method: str, *, actual: str) -> ConditionBuilderMisuseError:
    return ConditionBuilderMisuseError(
        code="CONDITION_KIND_ALREADY_SELECTED",
        message=f"{method}() cannot change a builder already configured for {actual} conditions.",
        method=method,
    )
