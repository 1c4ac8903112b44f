from dataclasses import dataclass, field

from .types import BASE, Finished, OnTrack, Position


@dataclass(slots=True)
class Pawn:
    """Lightweight pawn model. Holds state only.

    Rule logic (legal destinations, finishing, captures) lives in the move
    generator and the session, not the pawn.
    """

    color: int  # enum value 0..3
    pawn_index: int  # 0..3 per seat
    position: Position = field(default=BASE)

    def move_to(self, new_position: Position) -> None:
        self.position = new_position

    def send_to_base(self) -> None:
        self.position = BASE

    @property
    def on_track(self) -> bool:
        return isinstance(self.position, OnTrack)

    @property
    def finished(self) -> bool:
        return isinstance(self.position, Finished)
