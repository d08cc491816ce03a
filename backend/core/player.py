from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable, Literal, Optional, TYPE_CHECKING, Tuple, Union

from .move import Coordinate

if TYPE_CHECKING:
    from .game import Game


class Signal(Enum):
    QUIT = "quit"
    DECLINE = "decline"


QUIT = Signal.QUIT
DECLINE = Signal.DECLINE

MoveRequest = Tuple[Coordinate, Coordinate]
MoveDecision = Union[MoveRequest, Literal[Signal.QUIT]]
ChainDecision = Union[Coordinate, Literal[Signal.DECLINE]]
MovePolicy = Callable[["Game"], MoveDecision]
ChainPolicy = Callable[["Game", Tuple[Coordinate, ...]], ChainDecision]


class PlayerKind(str, Enum):
    HUMAN = "human"
    SCRIPTED = "scripted"


@dataclass
class PlayerController:
    kind: PlayerKind
    name: str
    move_policy: Optional[MovePolicy] = None
    chain_policy: Optional[ChainPolicy] = None

    @property
    def is_interactive(self) -> bool:
        """Decisions arrive from outside (e.g. HTTP) instead of a policy."""
        return self.move_policy is None

    def select_move(self, game: "Game") -> MoveDecision:
        if self.move_policy is None:
            raise RuntimeError(f"{self.name} has no move policy; submit moves directly.")
        return self.move_policy(game)

    def select_chain_destination(self, game: "Game", candidates: Tuple[Coordinate, ...]) -> ChainDecision:
        if self.chain_policy is None:
            return DECLINE
        return self.chain_policy(game, candidates)

    @classmethod
    def human(cls, name: str) -> "PlayerController":
        return cls(kind=PlayerKind.HUMAN, name=name)

    @classmethod
    def scripted(
        cls,
        name: str,
        moves: Iterable[MoveRequest],
        chain_steps: Iterable[ChainDecision] = (),
    ) -> "PlayerController":
        # Running out of moves quits the game; running out of chain steps declines.
        move_iter = iter(moves)
        chain_iter = iter(chain_steps)

        def _move(game: "Game") -> MoveDecision:
            return next(move_iter, QUIT)

        def _chain(game: "Game", candidates: Tuple[Coordinate, ...]) -> ChainDecision:
            return next(chain_iter, DECLINE)

        return cls(kind=PlayerKind.SCRIPTED, name=name, move_policy=_move, chain_policy=_chain)
