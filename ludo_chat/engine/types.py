from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import FrozenSet, List, Optional, Union


class Color(IntEnum):
    RED = 0
    GREEN = 1
    YELLOW = 2
    BLUE = 3

    @property
    def label(self) -> str:
        return self.name.lower()


class TurnPhase(Enum):
    AWAITING_ROLL = "awaiting_roll"
    AWAITING_MOVE = "awaiting_move"
    FINISHED = "finished"


class Controller(str, Enum):
    HUMAN = "human"
    AI = "ai"


# --- Pawn positions (tagged variant) ---


@dataclass(frozen=True, slots=True)
class Base:
    """Pawn has not entered the track yet."""

    def __str__(self) -> str:
        return "base"


@dataclass(frozen=True, slots=True)
class OnTrack:
    """Pawn on a shared ring cell (0..51); capturable unless the cell is safe."""

    cell: int

    def __str__(self) -> str:
        return f"track:{self.cell}"


@dataclass(frozen=True, slots=True)
class OnStretch:
    """Pawn inside its owner's private home stretch; never capturable."""

    index: int

    def __str__(self) -> str:
        return f"stretch:{self.index}"


@dataclass(frozen=True, slots=True)
class Finished:
    def __str__(self) -> str:
        return "finished"


Position = Union[Base, OnTrack, OnStretch, Finished]

BASE = Base()
FINISHED = Finished()


@dataclass(frozen=True, slots=True)
class StretchCell:
    """One cell of a seat's private home stretch."""

    color: Color
    index: int


@dataclass(frozen=True, slots=True)
class Move:
    color: Color
    pawn_index: int
    old_position: Position
    new_position: Position
    dice_roll: int


@dataclass(frozen=True, slots=True)
class RollResult:
    seat: Color
    value: int
    legal_moves: List[int]
    # True when no pawn could move and the turn was handed on
    passed: bool = False


@dataclass(frozen=True, slots=True)
class MoveOutcome:
    mover: Color
    pawn_index: int
    old_position: Position
    new_position: Position
    captured: FrozenSet[Color] = field(default_factory=frozenset)
    finished: bool = False
    winner: Optional[Color] = None


@dataclass(frozen=True, slots=True)
class SeatStatus:
    color: Color
    identity: str
    controller: Controller
    positions: tuple


@dataclass(frozen=True, slots=True)
class StatusSnapshot:
    board_name: str
    safe_cells: tuple
    current_seat: Color
    phase: TurnPhase
    pending_roll: Optional[int]
    legal_moves: tuple
    seats: tuple
    # pawn count per shared cell, all colors
    track_occupancy: tuple
    winner: Optional[Color] = None


@dataclass(frozen=True, slots=True)
class GameSummary:
    identities: tuple
    winner: Optional[Color]
    moves: tuple
    pawns_lost: tuple
    pawns_finished: tuple
