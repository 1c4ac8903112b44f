from .board import DEFAULT_BOARD, Board, Cell
from .config import config, strategy_config
from .moves import candidate_moves, captures_for, destination, legal_moves
from .pawn import Pawn
from .seat import Seat
from .session import GameSession
from .types import (
    BASE,
    FINISHED,
    Base,
    Color,
    Controller,
    Finished,
    Move,
    MoveOutcome,
    OnStretch,
    OnTrack,
    Position,
    RollResult,
    StatusSnapshot,
    StretchCell,
    TurnPhase,
)

__all__ = [
    "BASE",
    "FINISHED",
    "Base",
    "Board",
    "Cell",
    "Color",
    "Controller",
    "DEFAULT_BOARD",
    "Finished",
    "GameSession",
    "Move",
    "MoveOutcome",
    "OnStretch",
    "OnTrack",
    "Pawn",
    "Position",
    "RollResult",
    "Seat",
    "StatusSnapshot",
    "StretchCell",
    "TurnPhase",
    "candidate_moves",
    "captures_for",
    "config",
    "destination",
    "legal_moves",
    "strategy_config",
]
