from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

import numpy as np

from ..engine.config import config, strategy_config
from ..engine.moves import captures_for, destination
from ..engine.types import Base, Color, Finished, Move, OnStretch, OnTrack
from .base import BaseStrategy

if TYPE_CHECKING:
    from ..engine.session import GameSession


@dataclass(slots=True)
class HeuristicStrategy(BaseStrategy):
    """Scores each legal move with fixed bonuses and picks the best one.

    +exit_base_bonus    pawn leaves base
    +home_stretch_bonus pawn lands on or inside its home stretch
    +capture_bonus      at least one opposing pawn is captured
    -danger_penalty     an opposing pawn can land on the new cell with
                        1..danger_range steps next turn
    """

    name: ClassVar[str] = "heuristic"
    description: ClassVar[str] = "Exit base, run home, capture, avoid danger"

    exit_base_bonus: float = strategy_config.exit_base_bonus
    home_stretch_bonus: float = strategy_config.home_stretch_bonus
    capture_bonus: float = strategy_config.capture_bonus
    danger_penalty: float = strategy_config.danger_penalty
    danger_range: int = strategy_config.danger_range

    def score_move(self, session: "GameSession", move: Move) -> float:
        score = 0.0
        if isinstance(move.old_position, Base):
            score += self.exit_base_bonus
        if isinstance(move.new_position, (OnStretch, Finished)):
            score += self.home_stretch_bonus
        if captures_for(session, move.color, move.new_position):
            score += self.capture_bonus
        if self.in_danger(session, move):
            score -= self.danger_penalty
        return score

    def threat_map(self, session: "GameSession", color: Color | int) -> np.ndarray:
        """Opposing pawns able to land on each ring cell within danger_range steps.

        Opponents about to turn into their own home stretch do not threaten
        the ring cells beyond their entry cell.
        """
        threats = np.zeros(config.NUM_CELLS, dtype=np.int64)
        for seat in session.seats:
            if seat.color == int(color):
                continue
            for pawn in seat.pawns:
                if not pawn.on_track:
                    continue
                for steps in range(1, self.danger_range + 1):
                    dest = destination(session.board, seat.color, pawn.position, steps)
                    if isinstance(dest, OnTrack):
                        threats[dest.cell] += 1
        return threats

    def in_danger(self, session: "GameSession", move: Move) -> bool:
        if not isinstance(move.new_position, OnTrack):
            return False
        cell = move.new_position.cell
        # nobody is captured on a safe cell
        if session.board.is_safe(cell):
            return False
        return bool(self.threat_map(session, move.color)[cell] > 0)
