from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar, Optional, Sequence

from ..engine.types import Move
from .base import BaseStrategy

if TYPE_CHECKING:
    from ..engine.session import GameSession


class HumanStrategy(BaseStrategy):
    """Marker for seats driven by chat commands; never picks a move itself."""

    name: ClassVar[str] = "human"
    description: ClassVar[str] = "Moves chosen by a player in the chat"

    def select_move(
        self, session: "GameSession", moves: Sequence[Move]
    ) -> Optional[Move]:
        return None

    def score_move(self, session: "GameSession", move: Move) -> float:
        return 0.0
