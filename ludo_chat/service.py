"""
Composition root for the chat layer.

``LudoService`` owns the session registry, the statistics tracker and the
board catalogue, and exposes every operation the command dispatcher may call.
"""

from __future__ import annotations

import random
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

from loguru import logger

from .engine.board import DEFAULT_BOARD, Board
from .engine.config import config
from .engine.seat import Seat
from .engine.session import GameSession
from .engine.types import (
    Color,
    Controller,
    MoveOutcome,
    RollResult,
    StatusSnapshot,
    TurnPhase,
)
from .exceptions import (
    InvalidPhaseError,
    NoActiveSessionError,
    SeatConfigurationError,
    SessionConflictError,
)
from .registry import SessionRegistry
from .stats import PlayerStats, StatsTracker
from .strategy.registry import create as create_strategy
from .variants import BoardVariants


class Operation(Enum):
    CREATE = "start"
    LIST_BOARDS = "boards"
    ROLL = "roll"
    MOVE = "move"
    STATUS = "status"
    STATS = "stats"
    ABORT = "end"
    AI_TURN = "ai"


class LudoService:
    def __init__(
        self,
        registry: Optional[SessionRegistry] = None,
        stats: Optional[StatsTracker] = None,
        variants: Optional[BoardVariants] = None,
    ) -> None:
        self.registry = registry or SessionRegistry()
        self.stats = stats or StatsTracker()
        self.variants = variants or BoardVariants()
        self._handlers: Dict[Operation, Callable[..., Any]] = {
            Operation.CREATE: self.create_session,
            Operation.LIST_BOARDS: self.list_board_variants,
            Operation.ROLL: self.roll_dice,
            Operation.MOVE: self.apply_move,
            Operation.STATUS: self.get_status_snapshot,
            Operation.STATS: self.get_stats,
            Operation.ABORT: self.abort,
            Operation.AI_TURN: self.play_ai_turn,
        }
        missing = set(Operation) - set(self._handlers)
        if missing:
            raise RuntimeError(f"No handler for operations {sorted(o.name for o in missing)}")

    def dispatch(self, operation: Operation, *args, **kwargs) -> Any:
        return self._handlers[operation](*args, **kwargs)

    # --- Sessions ---
    def _resolve_board(self, board_variant: Optional[str]) -> Board:
        if board_variant is None or board_variant == DEFAULT_BOARD.name:
            return DEFAULT_BOARD
        return self.variants.load(board_variant)

    def create_session(
        self,
        session_id: str,
        board_variant: Optional[str] = None,
        identities: Optional[Sequence[str]] = None,
        controllers: Optional[Sequence[str]] = None,
        rng: Optional[random.Random] = None,
    ) -> GameSession:
        """Start a game for ``session_id``.

        ``identities`` name the player behind each seat (color names by
        default); ``controllers`` gives each seat a strategy name, ``human``
        for seats driven by chat commands.
        """
        if session_id in self.registry:
            raise SessionConflictError(session_id)
        for label, values in (("identities", identities), ("controllers", controllers)):
            if values is not None and len(values) != config.NUM_SEATS:
                raise SeatConfigurationError(
                    f"Expected {config.NUM_SEATS} {label}, got {len(values)}"
                )
        board = self._resolve_board(board_variant)
        seats: List[Seat] = []
        for color in Color:
            seat = Seat(
                color=color,
                identity=identities[color] if identities else "",
                strategy_name=controllers[color] if controllers else "human",
            )
            # unknown strategy names fail here, before the session exists
            seat.strategy = create_strategy(seat.strategy_name)
            seats.append(seat)
        return self.registry.create(session_id, board=board, seats=seats, rng=rng)

    def list_board_variants(self) -> List[str]:
        return self.variants.names()

    def roll_dice(self, session_id: str) -> RollResult:
        with self.registry.locked(session_id):
            session = self.registry.require(session_id)
            return session.roll()

    def apply_move(self, session_id: str, pawn_index: int) -> MoveOutcome:
        with self.registry.locked(session_id):
            session = self.registry.require(session_id)
            outcome = session.apply_move(pawn_index)
            if outcome.winner is not None:
                self._finish(session_id)
            return outcome

    def play_ai_turn(
        self, session_id: str
    ) -> Tuple[RollResult, Optional[MoveOutcome]]:
        """Roll for an AI seat and apply the move its strategy picks.

        A roll already made for the seat (through ``roll_dice``) is played
        instead of rolling again.
        """
        with self.registry.locked(session_id):
            session = self.registry.require(session_id)
            seat = session.current_seat
            if seat.controller is Controller.HUMAN:
                raise InvalidPhaseError(f"{seat.color.label} is played from the chat")
            if session.phase is TurnPhase.AWAITING_MOVE:
                roll = RollResult(
                    seat=seat.color,
                    value=session.pending_roll,
                    legal_moves=list(session.pending_moves),
                )
            else:
                roll = session.roll()
            if roll.passed:
                return roll, None
            move = seat.ensure_strategy().decide(session, roll.value)
            return roll, self.apply_move(session_id, move.pawn_index)

    def run_ai_turns(
        self, session_id: str, max_turns: int = config.MAX_TURNS
    ) -> List[Tuple[RollResult, Optional[MoveOutcome]]]:
        """Play AI seats until a human seat is up or the game ends."""
        played: List[Tuple[RollResult, Optional[MoveOutcome]]] = []
        with self.registry.locked(session_id):
            for _ in range(max_turns):
                session = self.registry.get(session_id)
                if session is None or session.current_seat.controller is Controller.HUMAN:
                    break
                roll, outcome = self.play_ai_turn(session_id)
                played.append((roll, outcome))
                if outcome is not None and outcome.winner is not None:
                    break
        return played

    def get_status_snapshot(self, session_id: str) -> StatusSnapshot:
        with self.registry.locked(session_id):
            return self.registry.require(session_id).snapshot()

    def abort(self, session_id: str) -> None:
        with self.registry.locked(session_id):
            if self.registry.remove(session_id) is None:
                raise NoActiveSessionError(session_id)
            logger.info(f"Session {session_id!r} aborted")

    def _finish(self, session_id: str) -> None:
        session = self.registry.remove(session_id)
        # only the caller that removed the session records it
        if session is not None:
            self.stats.record_summary(session.game_summary())

    # --- Stats ---
    def get_stats(self, identity: str) -> PlayerStats:
        return self.stats.get(identity)
