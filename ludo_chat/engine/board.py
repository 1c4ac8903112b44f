from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Iterable, Sequence, Tuple

import numpy as np

from ..exceptions import InvalidBoardVariantError
from .config import config
from .types import Color, StretchCell


@dataclass(frozen=True, slots=True)
class Cell:
    position: int
    type: str = "normal"
    safe: bool = False


def _default_cells() -> Tuple[Cell, ...]:
    safe = set(config.SAFE_CELLS)
    return tuple(
        Cell(position=i, type="normal", safe=i in safe)
        for i in range(config.NUM_CELLS)
    )


@dataclass(frozen=True, slots=True)
class Board:
    """Static ring geometry: cells, safe flags, start offsets and home stretches.

    Boards hold no pawns; occupancy lives in the session. Absolute cells are
    0..51. A seat's relative distance counts steps from its start offset, so
    the seat's private entry cell sits at relative distance 51.
    """

    name: str = "default"
    cells: Tuple[Cell, ...] = field(default_factory=_default_cells)
    start_offsets: Tuple[int, ...] = field(
        default_factory=lambda: tuple(config.START_OFFSETS)
    )

    @classmethod
    def from_entries(
        cls, entries: Sequence[Mapping[str, Any]], name: str = "custom"
    ) -> "Board":
        """Validate a parsed custom board and build it.

        Entries must be exactly 52 objects whose ``position`` values form a
        permutation of 0..51 and which each carry a boolean ``safe`` flag.
        """
        if not isinstance(entries, (list, tuple)):
            raise InvalidBoardVariantError(
                f"Board '{name}' must be a list of cells, got {type(entries).__name__}"
            )
        if len(entries) != config.NUM_CELLS:
            raise InvalidBoardVariantError(
                f"Board '{name}' has {len(entries)} cells, expected {config.NUM_CELLS}"
            )
        by_position: dict[int, Cell] = {}
        for entry in entries:
            if not isinstance(entry, Mapping):
                raise InvalidBoardVariantError(f"Board '{name}' has a non-object cell")
            pos = entry.get("position")
            # bool is an int subclass; reject it explicitly
            if not isinstance(pos, int) or isinstance(pos, bool):
                raise InvalidBoardVariantError(
                    f"Board '{name}' has a non-integer position {pos!r}"
                )
            if not 0 <= pos < config.NUM_CELLS:
                raise InvalidBoardVariantError(
                    f"Board '{name}' position {pos} is outside 0..{config.NUM_CELLS - 1}"
                )
            if pos in by_position:
                raise InvalidBoardVariantError(
                    f"Board '{name}' repeats position {pos}"
                )
            safe = entry.get("safe")
            if not isinstance(safe, bool):
                raise InvalidBoardVariantError(
                    f"Board '{name}' cell {pos} is missing a boolean safe flag"
                )
            by_position[pos] = Cell(
                position=pos, type=str(entry.get("type", "normal")), safe=safe
            )
        # 52 unique in-range positions is already a permutation
        cells = tuple(by_position[i] for i in range(config.NUM_CELLS))
        return cls(name=name, cells=cells)

    # --- Geometry ---
    def is_safe(self, cell: int) -> bool:
        if not 0 <= cell < config.NUM_CELLS:
            raise ValueError(f"Cell {cell} is outside 0..{config.NUM_CELLS - 1}")
        return self.cells[cell].safe

    def safe_cells(self) -> list[int]:
        return [c.position for c in self.cells if c.safe]

    def start_offset(self, color: Color | int) -> int:
        return self.start_offsets[int(color)]

    def entry_cell(self, color: Color | int) -> int:
        """Last shared cell before the seat turns into its home stretch."""
        return (self.start_offset(color) - 1) % config.NUM_CELLS

    def home_stretch(self, color: Color | int) -> Tuple[StretchCell, ...]:
        col = Color(int(color))
        return tuple(StretchCell(col, i) for i in range(config.HOME_STRETCH_SIZE))

    def relative(self, color: Color | int, cell: int) -> int:
        """Steps travelled from the seat's start offset to ``cell`` (0..51)."""
        return (cell - self.start_offset(color)) % config.NUM_CELLS

    def absolute(self, color: Color | int, relative: int) -> int:
        return (self.start_offset(color) + relative) % config.NUM_CELLS

    def safe_mask(self) -> np.ndarray:
        return np.fromiter(
            (c.safe for c in self.cells), dtype=np.bool_, count=config.NUM_CELLS
        )

    def to_entries(self) -> list[dict[str, Any]]:
        return [{"position": c.position, "type": c.type, "safe": c.safe} for c in self.cells]


def occupancy(cells: Iterable[int]) -> np.ndarray:
    """Count pawns per ring cell."""
    counts = np.zeros(config.NUM_CELLS, dtype=np.int64)
    for cell in cells:
        counts[cell] += 1
    return counts


DEFAULT_BOARD = Board()
