"""
Error taxonomy for the Ludo engine.

Every error is recoverable and is raised synchronously to the caller, which
decides how to present it to the chat.
"""


class LudoError(Exception):
    """Base class for all engine errors."""


class SessionConflictError(LudoError):
    def __init__(self, session_id):
        self.session_id = session_id
        super().__init__(f"A game is already in progress for session {session_id!r}")


class NoActiveSessionError(LudoError):
    def __init__(self, session_id):
        self.session_id = session_id
        super().__init__(f"No game in progress for session {session_id!r}")


class InvalidPawnIndexError(LudoError):
    def __init__(self, pawn_index):
        self.pawn_index = pawn_index
        super().__init__(f"Invalid pawn index {pawn_index!r}; use 0, 1, 2 or 3")


class IllegalMoveError(LudoError):
    def __init__(self, color, pawn_index, steps):
        self.color = color
        self.pawn_index = pawn_index
        self.steps = steps
        super().__init__(
            f"Pawn {pawn_index} of {color} cannot move {steps} step(s)"
        )


class InvalidBoardVariantError(LudoError):
    """Custom board is unknown or malformed (cell count, positions, safe flags)."""


class InvalidPhaseError(LudoError):
    """Command does not match the current turn phase."""


class UnknownStrategyError(LudoError, KeyError):
    def __init__(self, name):
        self.name = name
        LudoError.__init__(self, f"Unknown strategy '{name}'.")

    def __str__(self) -> str:
        return self.args[0]


class SeatConfigurationError(LudoError, ValueError):
    """Per-seat identities or controllers do not cover exactly four seats."""
