"""Core checkers rules engine package."""

from .board import Board
from .chain import ChainJumpResolver, ChainState
from .config import RuleOptions
from .game import Game, MoveRecord, TurnState
from .move import Coordinate, MoveIntent, MoveOutcome, RejectReason
from .pieces import King, Man, Piece, Player, Rank
from .player import DECLINE, QUIT, PlayerController, PlayerKind
from .rules import apply_chain_step, attempt_move, chain_candidates, initialize_board, winner

__all__ = [
	"Board",
	"Game",
	"MoveRecord",
	"TurnState",
	"ChainJumpResolver",
	"ChainState",
	"RuleOptions",
	"Coordinate",
	"MoveIntent",
	"MoveOutcome",
	"RejectReason",
	"Player",
	"Piece",
	"Rank",
	"Man",
	"King",
	"PlayerController",
	"PlayerKind",
	"QUIT",
	"DECLINE",
	"initialize_board",
	"attempt_move",
	"chain_candidates",
	"apply_chain_step",
	"winner",
]
