"""Play all-AI games through the service and print per-seat statistics."""

import argparse
import random
import time
from typing import Optional

from loguru import logger

from .engine.config import config
from .engine.types import Color
from .service import LudoService
from .status import render_stats
from .strategy.registry import available


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Simulate AI-only Ludo games")
    parser.add_argument("--games", type=int, default=10, help="Number of games to play")
    parser.add_argument(
        "--strategies",
        type=str,
        default=",".join([config.DEFAULT_AI] * 4),
        help=f"Comma-separated strategy per seat, one of {sorted(available())}",
    )
    parser.add_argument("--board", type=str, default=None, help="Board variant name")
    parser.add_argument("--seed", type=int, default=None, help="Dice seed")
    return parser.parse_args(argv)


def main(argv: Optional[list[str]] = None) -> LudoService:
    args = parse_args(argv)
    strategies = [s.strip() for s in args.strategies.split(",")]
    if len(strategies) != config.NUM_SEATS:
        raise SystemExit(f"--strategies needs {config.NUM_SEATS} names")
    identities = [f"{c.label}:{s}" for c, s in zip(Color, strategies)]
    rng = random.Random(args.seed)

    service = LudoService()
    start_time = time.time()
    unfinished = 0
    for game_no in range(args.games):
        session_id = f"sim-{game_no}"
        service.create_session(
            session_id,
            board_variant=args.board,
            identities=identities,
            controllers=strategies,
            rng=rng,
        )
        service.run_ai_turns(session_id)
        if session_id in service.registry:
            # hit the turn cap without a winner
            logger.warning(f"Game {session_id} did not finish within {config.MAX_TURNS} turns")
            service.abort(session_id)
            unfinished += 1

    elapsed = time.time() - start_time
    print(f"Played {args.games} game(s) in {elapsed:.2f}s ({unfinished} unfinished)\n")
    for identity in identities:
        print(render_stats(service.get_stats(identity)))
        print()
    return service


if __name__ == "__main__":
    main()
