from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

from .board import Board, initialize_board
from .chain import ChainJumpResolver, ChainState
from .config import DEFAULT_RULES, RuleOptions
from .move import Coordinate, MoveIntent, MoveOutcome
from .pieces import Player
from .player import DECLINE, QUIT, PlayerController
from .rules import attempt_move

logger = logging.getLogger(__name__)


class TurnState(Enum):
    PLAYER_ONE_TURN = auto()
    PLAYER_TWO_TURN = auto()
    CHAIN_PENDING = auto()
    GAME_OVER = auto()
    ABORTED = auto()


@dataclass
class MoveRecord:
    intent: MoveIntent
    captured: Optional[Coordinate]
    promoted: bool
    chained: bool = False


class Game:
    """Turn controller for a two-player game on a single board."""

    def __init__(self, options: Optional[RuleOptions] = None):
        self.options = options or DEFAULT_RULES
        self.players: dict[Player, PlayerController] = {
            Player.ONE: PlayerController.human("Player 1"),
            Player.TWO: PlayerController.human("Player 2"),
        }
        self.move_history: list[MoveRecord] = []
        self.reset()

    def reset(self, board: Optional[Board] = None) -> None:
        self.board = board if board is not None else initialize_board()
        self.current_player = Player.ONE
        self.winner: Optional[Player] = self.board.winner()
        self.aborted = False
        self.chain: Optional[ChainJumpResolver] = None
        self.move_history.clear()

    @property
    def state(self) -> TurnState:
        if self.aborted:
            return TurnState.ABORTED
        if self.winner is not None:
            return TurnState.GAME_OVER
        if self.chain is not None:
            return TurnState.CHAIN_PENDING
        if self.current_player is Player.ONE:
            return TurnState.PLAYER_ONE_TURN
        return TurnState.PLAYER_TWO_TURN

    @property
    def is_over(self) -> bool:
        return self.aborted or self.winner is not None

    def setPlayer(self, player: Player, controller: PlayerController) -> None:
        self.players[player] = controller

    def getPlayer(self, player: Player) -> PlayerController:
        return self.players[player]

    def currentController(self) -> PlayerController:
        return self.getPlayer(self.current_player)

    def chain_candidates(self) -> tuple[Coordinate, ...]:
        if self.chain is None:
            return ()
        return self.chain.candidates

    def submit_move(self, start: Coordinate, end: Coordinate) -> MoveOutcome:
        if self.is_over:
            raise RuntimeError("The game is over.")
        if self.chain is not None:
            raise RuntimeError("Finish or decline the chain jump first.")

        player = self.current_player
        outcome = attempt_move(self.board, start, end, player)
        if not outcome.accepted:
            return outcome

        intent = MoveIntent(start, end, player)
        self._record(intent, outcome)
        logger.info("%s played %s", player.label, intent)
        if self._check_winner():
            return outcome

        if intent.is_jump:
            resolver = ChainJumpResolver(self.board, end, player, self.options)
            if resolver.begin() is ChainState.CHAIN_OFFERED:
                self.chain = resolver
                logger.info("%s may continue to %s", player.label, resolver.candidates)
                return outcome

        self._end_turn()
        return outcome

    def submit_chain_step(self, destination: Coordinate) -> MoveOutcome:
        if self.chain is None or not self.chain.offered:
            raise RuntimeError("No chain jump is pending.")

        chain = self.chain
        start = chain.position
        outcome = chain.accept(destination)
        if outcome.accepted:
            self._record(MoveIntent(start, destination, chain.player), outcome, chained=True)
            if self._check_winner():
                self.chain = None
                return outcome
        if chain.finished:
            self.chain = None
            self._end_turn()
        return outcome

    def decline_chain(self) -> None:
        if self.chain is None:
            raise RuntimeError("No chain jump is pending.")
        self.chain.decline()
        self.chain = None
        self._end_turn()

    def quit(self) -> None:
        if self.chain is not None:
            raise RuntimeError("Quitting is only possible at the start of a move.")
        self.aborted = True
        logger.info("%s quit; no winner", self.current_player.label)

    def run(self) -> Optional[Player]:
        """Play to the end using each side's controller policy."""
        while not self.is_over:
            controller = self.currentController()
            if self.chain is not None:
                choice = controller.select_chain_destination(self, self.chain.candidates)
                if choice is DECLINE:
                    self.decline_chain()
                else:
                    self.submit_chain_step(choice)
                continue

            decision = controller.select_move(self)
            if decision is QUIT:
                self.quit()
                break
            start, end = decision
            outcome = self.submit_move(start, end)
            if not outcome.accepted:
                logger.info("Invalid move from %s: %s", controller.name, outcome.detail)
        return self.winner

    def _record(self, intent: MoveIntent, outcome: MoveOutcome, chained: bool = False) -> None:
        self.move_history.append(
            MoveRecord(
                intent=intent,
                captured=outcome.captured,
                promoted=outcome.promoted,
                chained=chained,
            )
        )

    def _check_winner(self) -> bool:
        self.winner = self.board.winner()
        if self.winner is None:
            return False
        logger.info("Game over! Winner: %s", self.winner.label)
        return True

    def _end_turn(self) -> None:
        self.current_player = self.current_player.opponent
