from __future__ import annotations

import pytest

from questforge.config import Settings, settings


@pytest.fixture(autouse=True)
def _reset_settings() -> None:
    defaults = Settings.model_fields
    for name in ("default_npc", "default_tier", "placeholder_fetch_item", "json_indent"):
        setattr(settings, name, defaults[name].default)
    yield
    for name in ("default_npc", "default_tier", "placeholder_fetch_item", "json_indent"):
        setattr(settings, name, defaults[name].default)
