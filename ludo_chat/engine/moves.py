from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional, Tuple

from .board import Board
from .config import config
from .types import (
    FINISHED,
    Base,
    Color,
    Finished,
    Move,
    OnStretch,
    OnTrack,
    Position,
)

if TYPE_CHECKING:
    from .session import GameSession


def _stretch_or_finish(index: int) -> Optional[Position]:
    # exact count to finish: overshoot is illegal, never clamped
    if index > config.FINISH_INDEX:
        return None
    if index == config.FINISH_INDEX:
        return FINISHED
    return OnStretch(index)


def destination(
    board: Board, color: Color | int, position: Position, steps: int
) -> Optional[Position]:
    """Where a pawn of ``color`` at ``position`` lands after ``steps``.

    Returns None when the move is not allowed (base without a six, finished
    pawn, overshooting the finish).
    """
    if steps < 1:
        return None
    if isinstance(position, Base):
        if steps != config.ENTRY_ROLL:
            return None
        return OnTrack(board.start_offset(color))
    if isinstance(position, Finished):
        return None
    if isinstance(position, OnStretch):
        return _stretch_or_finish(position.index + steps)
    rel = board.relative(color, position.cell) + steps
    if rel <= config.LAST_TRACK_STEP:
        return OnTrack(board.absolute(color, rel))
    # steps left over after the entry cell continue inside the stretch
    past_entry = rel - config.LAST_TRACK_STEP
    return _stretch_or_finish(past_entry - 1)


def captures_for(
    session: "GameSession", color: Color | int, position: Position
) -> List[Tuple[Color, int]]:
    """Opposing pawns that a pawn of ``color`` landing on ``position`` captures."""
    if not isinstance(position, OnTrack):
        return []
    if session.board.is_safe(position.cell):
        return []
    hits: List[Tuple[Color, int]] = []
    for seat in session.seats:
        if seat.color == int(color):
            continue
        for pawn in seat.pawns:
            if pawn.position == position:
                hits.append((seat.color, pawn.pawn_index))
    return hits


def candidate_moves(
    session: "GameSession", color: Color | int, roll: int
) -> List[Move]:
    seat = session.seat(color)
    moves: List[Move] = []
    for pawn in seat.pawns:
        dest = destination(session.board, seat.color, pawn.position, roll)
        if dest is None:
            continue
        moves.append(
            Move(
                color=seat.color,
                pawn_index=pawn.pawn_index,
                old_position=pawn.position,
                new_position=dest,
                dice_roll=roll,
            )
        )
    return moves


def legal_moves(session: "GameSession", color: Color | int, roll: int) -> List[int]:
    """Pawn indices (ascending) that can move with ``roll``; empty means pass."""
    return [mv.pawn_index for mv in candidate_moves(session, color, roll)]
