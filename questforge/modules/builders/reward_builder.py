from __future__ import annotations

import copy
from typing import Any


class RewardBuilder:
    """Accumulates one reward pool fragment in wire shape.

    Values are passed through as given; absent values are simply not written.
    """

    def __init__(self) -> None:
        self._reward: dict[str, Any] = {}

    def currency(
        self,
        normal: int | float | None = None,
        gold: int | float | None = None,
        fame: int | float | None = None,
    ) -> RewardBuilder:
        if normal is not None:
            self._reward["CurrencyNormal"] = normal
        if gold is not None:
            self._reward["CurrencyGold"] = gold
        if fame is not None:
            self._reward["Fame"] = fame
        return self

    def add_skill(self, skill: str, experience: int | float) -> RewardBuilder:
        self._reward.setdefault("Skills", []).append({"Skill": skill, "Experience": experience})
        return self

    def add_trade_deal(
        self,
        item: str,
        *,
        price: int | float | None = None,
        amount: int | float | None = None,
        fame: int | float | None = None,
        allow_excluded: bool | None = None,
    ) -> RewardBuilder:
        deal: dict[str, Any] = {"Item": item}
        for key, value in (
            ("Price", price),
            ("Amount", amount),
            ("Fame", fame),
            ("AllowExcluded", allow_excluded),
        ):
            if value is not None:
                deal[key] = value
        self._reward.setdefault("TradeDeals", []).append(deal)
        return self

    def build(self) -> dict[str, Any]:
        return copy.deepcopy(self._reward)
