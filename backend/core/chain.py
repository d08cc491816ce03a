from __future__ import annotations

import logging
from enum import Enum, auto
from typing import Optional

from .board import Board
from .config import DEFAULT_RULES, RuleOptions
from .move import Coordinate, MoveOutcome, RejectReason, in_bounds
from .pieces import Player
from .rules import apply_chain_step, chain_candidates

logger = logging.getLogger(__name__)


class ChainState(Enum):
    NO_CHAIN_PENDING = auto()
    CHAIN_OFFERED = auto()
    CHAIN_ACCEPTED = auto()
    CHAIN_DECLINED = auto()
    CHAIN_ENDED = auto()


_FINISHED = (ChainState.CHAIN_DECLINED, ChainState.CHAIN_ENDED)


class ChainJumpResolver:
    """Offers follow-up captures to the piece that just jumped.

    The piece is implied by ``position``; the collaborator only supplies a
    landing square (or declines). Destinations outside the current registry
    are rejected and the offer stands.

    ``CHAIN_ACCEPTED`` only holds while an accepted jump is being applied;
    ``accept`` always returns in ``CHAIN_OFFERED`` or a finished state.
    """

    def __init__(
        self,
        board: Board,
        position: Coordinate,
        player: Player,
        options: Optional[RuleOptions] = None,
    ) -> None:
        self.board = board
        self.position = position
        self.player = player
        self.options = options or DEFAULT_RULES
        self.state = ChainState.NO_CHAIN_PENDING
        self.candidates: tuple[Coordinate, ...] = ()
        self.jumps = 0

    @property
    def finished(self) -> bool:
        return self.state in _FINISHED

    @property
    def offered(self) -> bool:
        return self.state is ChainState.CHAIN_OFFERED

    def begin(self) -> ChainState:
        if self.state is not ChainState.NO_CHAIN_PENDING:
            raise RuntimeError("Chain resolver has already started.")
        return self._refresh()

    def accept(self, destination: Coordinate) -> MoveOutcome:
        if not self.offered:
            raise RuntimeError("No chain jump is on offer.")

        if not in_bounds(destination):
            self.state = ChainState.CHAIN_ENDED
            self.candidates = ()
            logger.info("%s ended the chain with off-board square %s", self.player.label, destination)
            return MoveOutcome.rejected(
                RejectReason.ILLEGAL_CHAIN_DESTINATION,
                f"{destination} is off the board; chain ended.",
            )

        outcome = apply_chain_step(self.board, self.position, destination, self.player, self.options)
        if not outcome.accepted:
            return outcome

        self.state = ChainState.CHAIN_ACCEPTED
        self.position = destination
        self.jumps += 1
        logger.info("%s chained to %s (jump %d)", self.player.label, destination, self.jumps + 1)
        if self.board.winner() is not None:
            self.state = ChainState.CHAIN_ENDED
            self.candidates = ()
        else:
            self._refresh()
        return outcome

    def decline(self) -> None:
        if not self.offered:
            raise RuntimeError("No chain jump is on offer.")
        self.state = ChainState.CHAIN_DECLINED
        self.candidates = ()
        logger.info("%s declined the chain at %s", self.player.label, self.position)

    def _refresh(self) -> ChainState:
        self.candidates = chain_candidates(self.board, self.position, self.player, self.options)
        self.state = ChainState.CHAIN_OFFERED if self.candidates else ChainState.CHAIN_ENDED
        return self.state
