import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

load_dotenv()


@dataclass(slots=True)
class Config:
    # --- Constants ---
    NUM_CELLS: int = 52
    NUM_SEATS: int = 4
    PAWNS_PER_SEAT: int = 4
    HOME_STRETCH_SIZE: int = 5
    DICE_FACES: int = 6
    ENTRY_ROLL: int = 6
    MAX_TURNS: int = int(os.getenv("LUDO_MAX_TURNS", 5000))

    # Absolute cells on the shared ring
    START_OFFSETS: list[int] = field(
        default_factory=lambda: [0, 13, 26, 39]
    )  # Red, Green, Yellow, Blue
    SAFE_CELLS: list[int] = field(
        default_factory=lambda: [0, 8, 13, 21, 26, 34, 39, 47]
    )

    BOARDS_DIR: str = os.getenv(
        "LUDO_BOARDS_DIR",
        os.path.join(os.path.dirname(os.path.dirname(__file__)), "boards"),
    )
    DEFAULT_AI: str = os.getenv("LUDO_DEFAULT_AI", "heuristic")

    # Derived (populated in __post_init__ due to slots)
    FINISH_INDEX: int = 0
    LAST_TRACK_STEP: int = 0

    def __post_init__(self):
        # Last stretch index is the finish cell
        self.FINISH_INDEX = self.HOME_STRETCH_SIZE - 1
        # Distance from the start offset to the seat's private entry cell
        self.LAST_TRACK_STEP = self.NUM_CELLS - 1

        if len(self.START_OFFSETS) != self.NUM_SEATS:
            raise ValueError("START_OFFSETS must list one cell per seat")


@dataclass(slots=True)
class StrategyConfig:
    exit_base_bonus: float = float(os.getenv("LUDO_AI_EXIT_BASE", 100))
    home_stretch_bonus: float = float(os.getenv("LUDO_AI_HOME_STRETCH", 75))
    capture_bonus: float = float(os.getenv("LUDO_AI_CAPTURE", 50))
    danger_penalty: float = float(os.getenv("LUDO_AI_DANGER", 25))
    # how many cells behind the landing cell an opponent threatens
    danger_range: int = int(os.getenv("LUDO_AI_DANGER_RANGE", 3))


config = Config()
strategy_config = StrategyConfig()
