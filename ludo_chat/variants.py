from __future__ import annotations

import json
from pathlib import Path
from typing import Dict, List, Optional

from loguru import logger

from .engine.board import Board
from .engine.config import config
from .exceptions import InvalidBoardVariantError


class BoardVariants:
    """Named custom boards stored as ``<name>.json`` files in one directory.

    ``names`` only offers files that load as valid boards; malformed files are
    skipped with a warning and still rejected by ``load``.
    """

    def __init__(self, directory: Optional[str | Path] = None) -> None:
        self.directory = Path(directory or config.BOARDS_DIR)
        self._cache: Dict[str, Board] = {}

    def names(self) -> List[str]:
        if not self.directory.is_dir():
            logger.warning(f"Board directory {self.directory} does not exist")
            return []
        valid = []
        for path in sorted(self.directory.glob("*.json")):
            try:
                self.load(path.stem)
            except InvalidBoardVariantError as e:
                logger.warning(f"Skipping board file {path.name}: {e}")
                continue
            valid.append(path.stem)
        return valid

    def load(self, name: str) -> Board:
        if name in self._cache:
            return self._cache[name]
        path = self.directory / f"{name}.json"
        if not path.is_file():
            raise InvalidBoardVariantError(f"Unknown board '{name}'")
        try:
            entries = json.loads(path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise InvalidBoardVariantError(f"Board '{name}' is not valid JSON: {e}") from e
        board = Board.from_entries(entries, name=name)
        self._cache[name] = board
        return board
