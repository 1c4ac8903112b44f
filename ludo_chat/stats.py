from __future__ import annotations

import dataclasses
import threading
from dataclasses import dataclass
from typing import Dict, Optional, Sequence

from loguru import logger

from .engine.config import config
from .engine.types import Color, GameSummary
from .locks import KeyedLock


@dataclass(slots=True)
class PlayerStats:
    """Cumulative results for one player identity. Counters only ever grow."""

    identity: str
    games_played: int = 0
    games_won: int = 0
    total_moves: int = 0
    pawns_lost: int = 0
    pawns_finished: int = 0

    @property
    def win_rate(self) -> Optional[float]:
        """Fraction of games won, or None when no game was recorded."""
        if self.games_played == 0:
            return None
        return self.games_won / self.games_played

    @property
    def avg_moves(self) -> Optional[float]:
        if self.games_played == 0:
            return None
        return self.total_moves / self.games_played

    def record(self, won: bool, moves: int, pawns_lost: int, pawns_finished: int) -> None:
        self.games_played += 1
        if won:
            self.games_won += 1
        self.total_moves += moves
        self.pawns_lost += pawns_lost
        self.pawns_finished += pawns_finished


class StatsTracker:
    """Per-identity statistics shared by every session of the process."""

    def __init__(self) -> None:
        self._stats: Dict[str, PlayerStats] = {}
        self._map_lock = threading.Lock()
        self._identity_locks = KeyedLock()

    def _entry(self, identity: str) -> PlayerStats:
        with self._map_lock:
            entry = self._stats.get(identity)
            if entry is None:
                entry = PlayerStats(identity=identity)
                self._stats[identity] = entry
            return entry

    def record_game_end(
        self,
        seat_identities: Sequence[str],
        winner: Optional[Color | int],
        per_seat_moves: Sequence[int],
        per_seat_pawns_lost: Sequence[int],
        per_seat_pawns_finished: Sequence[int],
    ) -> None:
        """Record one finished game for every seat, winner and losers alike."""
        columns = (
            seat_identities,
            per_seat_moves,
            per_seat_pawns_lost,
            per_seat_pawns_finished,
        )
        if any(len(col) != config.NUM_SEATS for col in columns):
            raise ValueError(f"Expected {config.NUM_SEATS} entries per seat column")
        for seat_idx, identity in enumerate(seat_identities):
            won = winner is not None and int(winner) == seat_idx
            with self._identity_locks.hold(identity):
                self._entry(identity).record(
                    won=won,
                    moves=int(per_seat_moves[seat_idx]),
                    pawns_lost=int(per_seat_pawns_lost[seat_idx]),
                    pawns_finished=int(per_seat_pawns_finished[seat_idx]),
                )
        logger.info(
            f"Recorded game end for {list(seat_identities)}, winner seat {winner}"
        )

    def record_summary(self, summary: GameSummary) -> None:
        self.record_game_end(
            summary.identities,
            summary.winner,
            summary.moves,
            summary.pawns_lost,
            summary.pawns_finished,
        )

    def get(self, identity: str) -> PlayerStats:
        """Snapshot copy; unknown identities report zeroed stats."""
        with self._identity_locks.hold(identity):
            with self._map_lock:
                entry = self._stats.get(identity)
            if entry is None:
                return PlayerStats(identity=identity)
            return dataclasses.replace(entry)

    def identities(self) -> list[str]:
        with self._map_lock:
            return sorted(self._stats)
