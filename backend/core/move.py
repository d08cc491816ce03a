from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .pieces import Player

BOARD_SIZE = 8

Coordinate = tuple[int, int]


def in_bounds(position: Coordinate) -> bool:
    row, col = position
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def midpoint(start: Coordinate, end: Coordinate) -> Coordinate:
    return ((start[0] + end[0]) // 2, (start[1] + end[1]) // 2)


@dataclass(frozen=True, slots=True)
class MoveIntent:
    start: Coordinate
    end: Coordinate
    player: Player

    @property
    def row_delta(self) -> int:
        return self.end[0] - self.start[0]

    @property
    def col_delta(self) -> int:
        return self.end[1] - self.start[1]

    @property
    def is_jump(self) -> bool:
        return abs(self.row_delta) == 2

    def __str__(self) -> str:
        connector = " x " if self.is_jump else " - "
        return f"{self.start[0]},{self.start[1]}{connector}{self.end[0]},{self.end[1]}"


class RejectReason(str, Enum):
    ILLEGAL_SOURCE = "illegal_source"
    ILLEGAL_DESTINATION = "illegal_destination"
    ILLEGAL_CHAIN_DESTINATION = "illegal_chain_destination"


@dataclass(frozen=True, slots=True)
class MoveOutcome:
    """Result of asking the rules to play a move.

    Rejections are ordinary values: the caller inspects ``accepted`` and
    re-prompts. ``captured`` is the square of the removed piece, if any.
    """

    accepted: bool
    reason: Optional[RejectReason] = None
    detail: str = ""
    captured: Optional[Coordinate] = None
    promoted: bool = False

    @classmethod
    def rejected(cls, reason: RejectReason, detail: str) -> "MoveOutcome":
        return cls(accepted=False, reason=reason, detail=detail)

    @classmethod
    def applied(cls, captured: Optional[Coordinate] = None, promoted: bool = False) -> "MoveOutcome":
        return cls(accepted=True, captured=captured, promoted=promoted)

    @property
    def is_capture(self) -> bool:
        return self.captured is not None
