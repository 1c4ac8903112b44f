from __future__ import annotations

import random
import threading
from contextlib import contextmanager
from typing import Dict, Iterator, List, Optional

from loguru import logger

from .engine.board import DEFAULT_BOARD, Board
from .engine.seat import Seat
from .engine.session import GameSession, default_seats
from .exceptions import NoActiveSessionError, SessionConflictError
from .locks import KeyedLock


class SessionRegistry:
    """Maps external session ids (chat/group ids) to their one live game."""

    def __init__(self) -> None:
        self._sessions: Dict[str, GameSession] = {}
        self._map_lock = threading.Lock()
        self._session_locks = KeyedLock()

    def create(
        self,
        session_id: str,
        board: Optional[Board] = None,
        seats: Optional[List[Seat]] = None,
        rng: Optional[random.Random] = None,
    ) -> GameSession:
        session = GameSession(
            board=board or DEFAULT_BOARD,
            seats=seats if seats is not None else default_seats(),
            rng=rng if rng is not None else random.Random(),
            session_id=session_id,
        )
        with self._map_lock:
            if session_id in self._sessions:
                raise SessionConflictError(session_id)
            self._sessions[session_id] = session
        logger.info(f"Created session {session_id!r} on board '{session.board.name}'")
        return session

    def get(self, session_id: str) -> Optional[GameSession]:
        with self._map_lock:
            return self._sessions.get(session_id)

    def require(self, session_id: str) -> GameSession:
        session = self.get(session_id)
        if session is None:
            raise NoActiveSessionError(session_id)
        return session

    def remove(self, session_id: str) -> Optional[GameSession]:
        """Drop the session; returns it only to the caller that removed it."""
        with self._map_lock:
            session = self._sessions.pop(session_id, None)
        if session is not None:
            logger.info(f"Removed session {session_id!r}")
        return session

    @contextmanager
    def locked(self, session_id: str) -> Iterator[None]:
        """Serialize every command issued against one session id."""
        with self._session_locks.hold(session_id):
            yield

    def __contains__(self, session_id: str) -> bool:
        with self._map_lock:
            return session_id in self._sessions

    def __len__(self) -> int:
        with self._map_lock:
            return len(self._sessions)
