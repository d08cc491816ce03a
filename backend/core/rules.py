"""Move legality, capture execution and promotion for 8x8 checkers.

Every public function here takes the board as its first argument and reports
rule violations as a rejected :class:`MoveOutcome` rather than raising.
"""

from __future__ import annotations

import logging
from typing import Optional

from .board import Board, initialize_board
from .config import DEFAULT_RULES, RuleOptions
from .move import BOARD_SIZE, Coordinate, MoveIntent, MoveOutcome, RejectReason, in_bounds, midpoint
from .pieces import Piece, Player

logger = logging.getLogger(__name__)

__all__ = [
    "initialize_board",
    "validate_and_apply",
    "promotes",
    "attempt_move",
    "chain_candidates",
    "apply_chain_step",
    "winner",
]


def validate_and_apply(board: Board, start: Coordinate, end: Coordinate, player: Player) -> MoveOutcome:
    """Check a single step or jump and remove the jumped piece.

    The mover is left on ``start``; :func:`attempt_move` relocates it.
    A capture already decrements the jumped player's count through
    :meth:`Board.capture`, so callers must not decrement it again.
    """
    piece = board.occupant(start)
    if piece is None or piece.owner is not player:
        return MoveOutcome.rejected(RejectReason.ILLEGAL_SOURCE, f"{player.label} has no piece at {start}.")

    if board.occupant(end) is not None:
        return MoveOutcome.rejected(RejectReason.ILLEGAL_DESTINATION, f"Destination {end} is occupied.")

    intent = MoveIntent(start, end, player)
    row_delta = intent.row_delta
    col_delta = intent.col_delta
    if row_delta == 0:
        return MoveOutcome.rejected(RejectReason.ILLEGAL_DESTINATION, "Moves must change row.")

    direction = 1 if row_delta > 0 else -1
    if direction not in piece.row_directions():
        return MoveOutcome.rejected(
            RejectReason.ILLEGAL_DESTINATION,
            "Only kings may move back toward their own side.",
        )

    if abs(row_delta) == 1 and abs(col_delta) == 1:
        return MoveOutcome.applied()

    if abs(row_delta) == 2 and abs(col_delta) == 2:
        jumped_at = midpoint(start, end)
        jumped = board.occupant(jumped_at)
        if jumped is None:
            return MoveOutcome.rejected(RejectReason.ILLEGAL_DESTINATION, f"No piece to jump at {jumped_at}.")
        if jumped.owner is player:
            return MoveOutcome.rejected(RejectReason.ILLEGAL_DESTINATION, "You cannot jump your own piece.")
        board.capture(jumped_at)
        return MoveOutcome.applied(captured=jumped_at)

    return MoveOutcome.rejected(
        RejectReason.ILLEGAL_DESTINATION,
        "Moves must be one diagonal square, or two when jumping.",
    )


def promotes(piece: Piece, end: Coordinate) -> bool:
    return piece.is_king or end[0] == piece.owner.promotion_row


def attempt_move(board: Board, start: Coordinate, end: Coordinate, player: Player) -> MoveOutcome:
    if not in_bounds(start):
        return _reject(RejectReason.ILLEGAL_SOURCE, f"{start} is off the board.")
    piece = board.occupant(start)
    if piece is None or piece.owner is not player:
        return _reject(RejectReason.ILLEGAL_SOURCE, f"{player.label} has no piece at {start}.")
    if not in_bounds(end):
        return _reject(RejectReason.ILLEGAL_DESTINATION, f"{end} is off the board.")

    outcome = validate_and_apply(board, start, end, player)
    if not outcome.accepted:
        logger.debug("%s rejected %s -> %s: %s", player.label, start, end, outcome.detail)
        return outcome

    landed = piece.promote() if promotes(piece, end) else piece
    board.relocate(start, end, landed)
    promoted = landed.is_king and not piece.is_king
    if promoted:
        logger.info("%s crowned a king at %s", player.label, end)
    return MoveOutcome.applied(captured=outcome.captured, promoted=promoted)


def chain_candidates(
    board: Board,
    position: Coordinate,
    player: Player,
    options: Optional[RuleOptions] = None,
) -> tuple[Coordinate, ...]:
    """Landing squares of every capture the piece on ``position`` can continue with.

    Forward diagonals come first, then the backward ones for a king.
    """
    options = options or DEFAULT_RULES
    piece = board.getPiece(*position)
    if piece is None or piece.owner is not player:
        return ()
    if options.edge_chain_guard and not _edge_guard_allows(board, position, player):
        return ()

    landings: list[Coordinate] = []
    for dr in piece.row_directions():
        for dc in (1, -1):
            if _can_capture(board, position, dr, dc, player):
                landings.append((position[0] + 2 * dr, position[1] + 2 * dc))
    return tuple(landings)


def apply_chain_step(
    board: Board,
    position: Coordinate,
    destination: Coordinate,
    player: Player,
    options: Optional[RuleOptions] = None,
) -> MoveOutcome:
    if destination not in chain_candidates(board, position, player, options):
        return _reject(
            RejectReason.ILLEGAL_CHAIN_DESTINATION,
            f"{destination} is not a capture available from {position}.",
        )
    return attempt_move(board, position, destination, player)


def winner(board: Board) -> Optional[Player]:
    return board.winner()


def _can_capture(board: Board, position: Coordinate, dr: int, dc: int, player: Player) -> bool:
    landing = (position[0] + 2 * dr, position[1] + 2 * dc)
    if not in_bounds(landing) or board.occupant(landing) is not None:
        return False
    jumped = board.occupant((position[0] + dr, position[1] + dc))
    return jumped is not None and jumped.owner is not player


def _edge_guard_allows(board: Board, position: Coordinate, player: Player) -> bool:
    row = position[0]
    if row == 1:
        away = 1
    elif row == BOARD_SIZE - 2:
        away = -1
    else:
        return True
    return any(_can_capture(board, position, away, dc, player) for dc in (1, -1))


def _reject(reason: RejectReason, detail: str) -> MoveOutcome:
    logger.debug("rejected: %s", detail)
    return MoveOutcome.rejected(reason, detail)
