from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Player(Enum):
    ONE = 1
    TWO = 2

    @property
    def opponent(self) -> "Player":
        return Player.TWO if self is Player.ONE else Player.ONE

    @property
    def forward(self) -> int:
        """Row delta of a man's only legal direction."""
        return 1 if self is Player.ONE else -1

    @property
    def promotion_row(self) -> int:
        return 7 if self is Player.ONE else 0

    @property
    def label(self) -> str:
        return f"Player {self.value}"


class Rank(str, Enum):
    MAN = "man"
    KING = "king"


@dataclass(frozen=True, slots=True)
class Piece:
    owner: Player
    rank: Rank = Rank.MAN

    @property
    def is_king(self) -> bool:
        return self.rank is Rank.KING

    def promote(self) -> "Piece":
        if self.is_king:
            return self
        return Piece(self.owner, Rank.KING)

    def row_directions(self) -> tuple[int, ...]:
        if self.is_king:
            return (self.owner.forward, -self.owner.forward)
        return (self.owner.forward,)

    def __repr__(self) -> str:
        piece_type = "K" if self.is_king else "M"
        return f"{piece_type}({self.owner.name})"


def Man(owner: Player) -> Piece:
    return Piece(owner, Rank.MAN)


def King(owner: Player) -> Piece:
    return Piece(owner, Rank.KING)
