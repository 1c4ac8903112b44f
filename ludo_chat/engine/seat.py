from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

from .config import config
from .pawn import Pawn
from .types import Color, Controller

if TYPE_CHECKING:  # avoid runtime imports to prevent circular deps
    from ..strategy.base import BaseStrategy


@dataclass(slots=True)
class Seat:
    color: Color
    # Stable player identity used for statistics; defaults to the color name
    identity: str = ""
    strategy_name: str = "human"
    strategy: Optional["BaseStrategy"] = field(default=None, repr=False)
    pawns: list[Pawn] = field(init=False)

    def __post_init__(self) -> None:
        self.color = Color(int(self.color))
        if not self.identity:
            self.identity = self.color.label
        self.pawns = [
            Pawn(color=int(self.color), pawn_index=i)
            for i in range(config.PAWNS_PER_SEAT)
        ]

    @property
    def controller(self) -> Controller:
        if self.strategy_name.lower() == "human":
            return Controller.HUMAN
        return Controller.AI

    def positions(self) -> list:
        return [p.position for p in self.pawns]

    def finished_count(self) -> int:
        return sum(1 for p in self.pawns if p.finished)

    def has_won(self) -> bool:
        return all(p.finished for p in self.pawns)

    def ensure_strategy(self) -> "BaseStrategy":
        """Resolve the seat's strategy from its name on first use."""
        if self.strategy is None:
            from ..strategy.registry import create as create_strategy

            self.strategy = create_strategy(self.strategy_name)
        return self.strategy
