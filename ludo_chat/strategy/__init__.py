from .base import BaseStrategy
from .heuristic import HeuristicStrategy
from .human import HumanStrategy
from .random_strategy import RandomStrategy
from .registry import STRATEGY_REGISTRY, available, create

__all__ = [
    "BaseStrategy",
    "HeuristicStrategy",
    "HumanStrategy",
    "RandomStrategy",
    "STRATEGY_REGISTRY",
    "available",
    "create",
]
