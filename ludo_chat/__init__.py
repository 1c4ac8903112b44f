from .engine import (
    Board,
    Color,
    GameSession,
    MoveOutcome,
    RollResult,
    Seat,
    StatusSnapshot,
)
from .exceptions import (
    IllegalMoveError,
    InvalidBoardVariantError,
    InvalidPawnIndexError,
    InvalidPhaseError,
    LudoError,
    NoActiveSessionError,
    SeatConfigurationError,
    SessionConflictError,
    UnknownStrategyError,
)
from .registry import SessionRegistry
from .service import LudoService, Operation
from .stats import PlayerStats, StatsTracker
from .variants import BoardVariants

__all__ = [
    "Board",
    "BoardVariants",
    "Color",
    "GameSession",
    "IllegalMoveError",
    "InvalidBoardVariantError",
    "InvalidPawnIndexError",
    "InvalidPhaseError",
    "LudoError",
    "LudoService",
    "MoveOutcome",
    "NoActiveSessionError",
    "Operation",
    "PlayerStats",
    "RollResult",
    "Seat",
    "SeatConfigurationError",
    "SessionConflictError",
    "SessionRegistry",
    "StatsTracker",
    "StatusSnapshot",
    "UnknownStrategyError",
]
