"""
Plain-text projections of engine state for the chat layer.
Wording is cosmetic; callers should not parse it.
"""

from __future__ import annotations

from typing import Iterable

from .engine.types import (
    Base,
    Color,
    Finished,
    OnStretch,
    OnTrack,
    Position,
    StatusSnapshot,
    TurnPhase,
)
from .stats import PlayerStats

COLOR_EMOJI = {
    Color.RED: "🔴",
    Color.GREEN: "🟢",
    Color.YELLOW: "🟡",
    Color.BLUE: "🔵",
}


def describe_position(position: Position) -> str:
    if isinstance(position, Base):
        return "🏠 base"
    if isinstance(position, Finished):
        return "🏁 finished"
    if isinstance(position, OnStretch):
        return f"🛤️ home stretch {position.index}"
    if isinstance(position, OnTrack):
        return f"🔢 {position.cell}"
    raise TypeError(f"Unknown position {position!r}")


def render_status(snapshot: StatusSnapshot) -> str:
    current = snapshot.current_seat
    lines = [
        "🎮 *Current Game Status*",
        f"Board: {snapshot.board_name}",
    ]
    if snapshot.phase is TurnPhase.FINISHED and snapshot.winner is not None:
        winner = snapshot.winner
        lines.append(f"🏆 Winner: {COLOR_EMOJI[winner]} *{winner.label.upper()}*")
    else:
        lines.append(f"Current player: {COLOR_EMOJI[current]} *{current.label.upper()}*")
        if snapshot.phase is TurnPhase.AWAITING_MOVE:
            lines.append(
                f"Rolled {snapshot.pending_roll}; movable pawns: "
                + ", ".join(str(i) for i in snapshot.legal_moves)
            )
    lines.append("")
    for seat in snapshot.seats:
        label = seat.color.label.upper()
        lines.append(f"{COLOR_EMOJI[seat.color]} *{label}* ({seat.identity}):")
        for idx, pos in enumerate(seat.positions):
            lines.append(f"  Pawn {idx}: {describe_position(pos)}")
    return "\n".join(lines)


def _fmt_ratio(value, percent: bool = False) -> str:
    if value is None:
        return "no data"
    return f"{value * 100:.2f}%" if percent else f"{value:.2f}"


def render_stats(stats: PlayerStats) -> str:
    return "\n".join(
        [
            f"📊 *Stats for {stats.identity}*",
            f"🎲 Games Played: {stats.games_played}",
            f"🏆 Games Won: {stats.games_won}",
            f"🔢 Win Rate: {_fmt_ratio(stats.win_rate, percent=True)}",
            f"🚶 Average Moves: {_fmt_ratio(stats.avg_moves)}",
            f"💀 Pawns Lost: {stats.pawns_lost}",
            f"🏁 Pawns Finished: {stats.pawns_finished}",
        ]
    )


def render_board_list(names: Iterable[str]) -> str:
    names = list(names)
    if not names:
        return "📋 No custom boards available."
    return "📋 *Available Custom Boards*\n\n" + ", ".join(names)
