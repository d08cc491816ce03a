from __future__ import annotations

import logging
from threading import Lock
from typing import Any, Optional

from core.config import RuleOptions
from core.game import Game

from .schemas import ChainStepRequest, MoveRequest, ResetRequest
from .serializers import serialize_chain, serialize_game

logger = logging.getLogger(__name__)


class MoveRejected(ValueError):
    def __init__(self, reason: str, detail: str) -> None:
        super().__init__(detail)
        self.reason = reason


class GameSession:
    """Thread-safe orchestrator around a single Game instance."""

    def __init__(self, options: Optional[RuleOptions] = None) -> None:
        self.lock = Lock()
        self.options = options or RuleOptions()
        self.game = Game(self.options)

    # public API ---------------------------------------------------------

    def serialize(self) -> dict[str, Any]:
        with self.lock:
            return serialize_game(self.game)

    def reset(self, payload: Optional[ResetRequest] = None) -> dict[str, Any]:
        with self.lock:
            if payload and payload.edgeChainGuard is not None:
                self.options = RuleOptions(edge_chain_guard=payload.edgeChainGuard)
            self.game = Game(self.options)
            logger.info("New game started")
            return serialize_game(self.game)

    def make_move(self, payload: MoveRequest) -> dict[str, Any]:
        with self.lock:
            outcome = self.game.submit_move(payload.start.to_position(), payload.end.to_position())
            if not outcome.accepted:
                raise MoveRejected(outcome.reason.value, outcome.detail)
            return serialize_game(self.game, outcome)

    def chain_options(self) -> dict[str, Any]:
        with self.lock:
            return {
                "pending": self.game.chain is not None,
                "candidates": serialize_chain(self.game),
            }

    def chain_step(self, payload: ChainStepRequest) -> dict[str, Any]:
        with self.lock:
            if payload.destination is None:
                self.game.decline_chain()
                return serialize_game(self.game)
            outcome = self.game.submit_chain_step(payload.destination.to_position())
            if not outcome.accepted and self.game.chain is not None:
                raise MoveRejected(outcome.reason.value, outcome.detail)
            return serialize_game(self.game, outcome)

    def quit(self) -> dict[str, Any]:
        with self.lock:
            self.game.quit()
            return serialize_game(self.game)
