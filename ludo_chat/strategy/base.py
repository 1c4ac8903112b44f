from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar, Optional, Sequence

from ..engine.moves import candidate_moves
from ..engine.types import Move

if TYPE_CHECKING:
    from ..engine.session import GameSession


class BaseStrategy:
    """Base class for move-selection strategies with shared scoring loop."""

    name: ClassVar[str] = "base"
    description: ClassVar[str] = ""

    def decide(self, session: "GameSession", dice_roll: int) -> Optional[Move]:
        """Pick a move for the session's current seat, or None to pass."""
        moves = candidate_moves(session, session.current_seat.color, dice_roll)
        return self.select_move(session, moves)

    def select_move(
        self, session: "GameSession", moves: Sequence[Move]
    ) -> Optional[Move]:
        if not moves:
            return None
        scored = [(self.score_move(session, mv), mv) for mv in moves]
        # highest score wins; lowest pawn index breaks ties
        return max(scored, key=lambda sm: (sm[0], -sm[1].pawn_index))[1]

    def score_move(
        self, session: "GameSession", move: Move
    ) -> float:  # pragma: no cover - abstract
        raise NotImplementedError
