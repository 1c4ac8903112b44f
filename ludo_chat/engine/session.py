from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import List, Optional

from loguru import logger

from ..exceptions import IllegalMoveError, InvalidPawnIndexError, InvalidPhaseError
from .board import DEFAULT_BOARD, Board, occupancy
from .config import config
from .moves import captures_for, destination, legal_moves
from .seat import Seat
from .types import (
    Color,
    GameSummary,
    MoveOutcome,
    RollResult,
    SeatStatus,
    StatusSnapshot,
    TurnPhase,
)


def default_seats() -> List[Seat]:
    return [Seat(color=c) for c in Color]


def _check_pawn_index(pawn_index) -> None:
    if (
        not isinstance(pawn_index, int)
        or isinstance(pawn_index, bool)
        or not 0 <= pawn_index < config.PAWNS_PER_SEAT
    ):
        raise InvalidPawnIndexError(pawn_index)


@dataclass(slots=True)
class GameSession:
    """One in-progress game: pawns, turn order, dice and move application.

    The session is single-threaded; callers serialize commands per session id
    (see ``SessionRegistry.locked``).
    """

    board: Board = field(default=DEFAULT_BOARD)
    seats: List[Seat] = field(default_factory=default_seats)
    # Any object with ``randint(a, b)``; tests inject scripted dice
    rng: random.Random = field(default_factory=random.Random)
    session_id: str = ""
    current_seat_index: int = field(default=0, init=False)
    phase: TurnPhase = field(default=TurnPhase.AWAITING_ROLL, init=False)
    pending_roll: Optional[int] = field(default=None, init=False)
    pending_moves: List[int] = field(default_factory=list, init=False)
    # per-seat counters, indexed by color
    moves_made: List[int] = field(init=False)
    pawns_lost: List[int] = field(init=False)

    def __post_init__(self) -> None:
        if len(self.seats) != config.NUM_SEATS:
            raise ValueError(f"A session needs exactly {config.NUM_SEATS} seats")
        if [int(s.color) for s in self.seats] != list(range(config.NUM_SEATS)):
            raise ValueError("Seats must be listed in color order red, green, yellow, blue")
        self.moves_made = [0] * config.NUM_SEATS
        self.pawns_lost = [0] * config.NUM_SEATS

    # --- Seats ---
    def seat(self, color: Color | int) -> Seat:
        return self.seats[int(color)]

    @property
    def current_seat(self) -> Seat:
        return self.seats[self.current_seat_index]

    # --- Dice ---
    def roll_dice(self) -> int:
        return self.rng.randint(1, config.DICE_FACES)

    def roll(self) -> RollResult:
        """Roll for the current seat and settle the turn if nothing can move."""
        if self.phase is TurnPhase.FINISHED:
            raise InvalidPhaseError("The game is over")
        if self.phase is TurnPhase.AWAITING_MOVE:
            raise InvalidPhaseError(
                f"{self.current_seat.color.label} must move a pawn for the pending "
                f"roll of {self.pending_roll} first"
            )
        seat = self.current_seat
        value = self.roll_dice()
        moves = legal_moves(self, seat.color, value)
        logger.debug(
            f"[{self.session_id}] {seat.color.label} rolled {value}, legal pawns {moves}"
        )
        if not moves:
            self.next_turn()
            return RollResult(seat=seat.color, value=value, legal_moves=[], passed=True)
        self.pending_roll = value
        self.pending_moves = moves
        self.phase = TurnPhase.AWAITING_MOVE
        return RollResult(seat=seat.color, value=value, legal_moves=list(moves))

    # --- Moves ---
    def move_pawn(self, color: Color | int, pawn_index: int, steps: int) -> MoveOutcome:
        """Apply the movement rules to one pawn.

        Validation happens before any mutation, so a rejected move leaves the
        session untouched. Turn order is not advanced here; see ``apply_move``.
        """
        if self.phase is TurnPhase.FINISHED:
            raise InvalidPhaseError("The game is over")
        seat = self.seat(color)
        _check_pawn_index(pawn_index)
        pawn = seat.pawns[pawn_index]
        old = pawn.position
        new = destination(self.board, seat.color, old, steps)
        if new is None:
            raise IllegalMoveError(seat.color.label, pawn_index, steps)

        victims = captures_for(self, seat.color, new)
        pawn.move_to(new)
        self.moves_made[seat.color] += 1
        for victim_color, victim_index in victims:
            self.seat(victim_color).pawns[victim_index].send_to_base()
            self.pawns_lost[victim_color] += 1
            logger.debug(
                f"[{self.session_id}] {seat.color.label} captured "
                f"{victim_color.label} pawn {victim_index} on {new}"
            )

        winner = self.is_game_over()
        return MoveOutcome(
            mover=seat.color,
            pawn_index=pawn_index,
            old_position=old,
            new_position=new,
            captured=frozenset(c for c, _ in victims),
            finished=pawn.finished,
            winner=winner,
        )

    def apply_move(self, pawn_index: int) -> MoveOutcome:
        """Move a pawn of the current seat by the pending roll and end the turn."""
        if self.phase is TurnPhase.FINISHED:
            raise InvalidPhaseError("The game is over")
        if self.phase is TurnPhase.AWAITING_ROLL:
            raise InvalidPhaseError(
                f"{self.current_seat.color.label} has to roll before moving"
            )
        seat = self.current_seat
        _check_pawn_index(pawn_index)
        if pawn_index not in self.pending_moves:
            raise IllegalMoveError(seat.color.label, pawn_index, self.pending_roll)

        outcome = self.move_pawn(seat.color, pawn_index, self.pending_roll)
        if outcome.winner is not None:
            self.phase = TurnPhase.FINISHED
            self.pending_roll = None
            self.pending_moves = []
            logger.info(f"[{self.session_id}] {outcome.winner.label} wins")
        else:
            self.next_turn()
        return outcome

    # --- Turn order ---
    def next_turn(self) -> None:
        self.current_seat_index = (self.current_seat_index + 1) % config.NUM_SEATS
        self.pending_roll = None
        self.pending_moves = []
        self.phase = TurnPhase.AWAITING_ROLL

    def is_game_over(self) -> Optional[Color]:
        for seat in self.seats:
            if seat.has_won():
                return seat.color
        return None

    # --- Projections ---
    def snapshot(self) -> StatusSnapshot:
        cells = [
            p.position.cell
            for seat in self.seats
            for p in seat.pawns
            if p.on_track
        ]
        return StatusSnapshot(
            board_name=self.board.name,
            safe_cells=tuple(self.board.safe_cells()),
            current_seat=self.current_seat.color,
            phase=self.phase,
            pending_roll=self.pending_roll,
            legal_moves=tuple(self.pending_moves),
            seats=tuple(
                SeatStatus(
                    color=s.color,
                    identity=s.identity,
                    controller=s.controller,
                    positions=tuple(s.positions()),
                )
                for s in self.seats
            ),
            track_occupancy=tuple(int(n) for n in occupancy(cells)),
            winner=self.is_game_over(),
        )

    def game_summary(self) -> GameSummary:
        return GameSummary(
            identities=tuple(s.identity for s in self.seats),
            winner=self.is_game_over(),
            moves=tuple(self.moves_made),
            pawns_lost=tuple(self.pawns_lost),
            pawns_finished=tuple(s.finished_count() for s in self.seats),
        )
