from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, ClassVar, Optional, Sequence

from ..engine.types import Move
from .base import BaseStrategy

if TYPE_CHECKING:
    from ..engine.session import GameSession


@dataclass(slots=True)
class RandomStrategy(BaseStrategy):
    name: ClassVar[str] = "random"
    description: ClassVar[str] = "Uniformly random legal move"

    rng_seed: int | None = None
    _rng: random.Random = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._rng = random.Random(self.rng_seed)

    def select_move(
        self, session: "GameSession", moves: Sequence[Move]
    ) -> Optional[Move]:
        if not moves:
            return None
        return self._rng.choice(list(moves))

    def score_move(self, session: "GameSession", move: Move) -> float:
        return 0.0
