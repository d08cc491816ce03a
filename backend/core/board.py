from __future__ import annotations

import logging
from typing import Optional

from .move import BOARD_SIZE, Coordinate, in_bounds
from .pieces import Piece, Player, Man

logger = logging.getLogger(__name__)

INITIAL_PIECES = 12

BoardStatePiece = tuple[int, int, int, bool]
BoardState = tuple[tuple[BoardStatePiece, ...], int, int]


class Board:
    def __init__(self) -> None:
        self.board: list[list[Optional[Piece]]] = [
            [None for _ in range(BOARD_SIZE)] for _ in range(BOARD_SIZE)
        ]
        self.pieces_left: dict[Player, int] = {Player.ONE: 0, Player.TWO: 0}
        self._set_start_pieces()

    @classmethod
    def empty(cls) -> "Board":
        board = cls.__new__(cls)
        board.board = [[None for _ in range(BOARD_SIZE)] for _ in range(BOARD_SIZE)]
        board.pieces_left = {Player.ONE: 0, Player.TWO: 0}
        return board

    def to_state(self) -> BoardState:
        pieces: list[BoardStatePiece] = []
        for row in range(BOARD_SIZE):
            for col in range(BOARD_SIZE):
                piece = self.board[row][col]
                if piece is None:
                    continue
                pieces.append((row, col, piece.owner.value, piece.is_king))
        return (tuple(pieces), self.pieces_left[Player.ONE], self.pieces_left[Player.TWO])

    def occupant(self, position: Coordinate) -> Optional[Piece]:
        row, col = position
        return self.board[row][col]

    def getPiece(self, row: int, col: int) -> Optional[Piece]:
        if in_bounds((row, col)):
            return self.board[row][col]
        return None

    def getAllPieces(self) -> list[tuple[Coordinate, Piece]]:
        pieces: list[tuple[Coordinate, Piece]] = []
        for row in range(BOARD_SIZE):
            for col in range(BOARD_SIZE):
                piece = self.board[row][col]
                if piece:
                    pieces.append(((row, col), piece))
        return pieces

    def count(self, player: Player) -> int:
        return self.pieces_left[player]

    def place(self, position: Coordinate, piece: Piece) -> None:
        if not in_bounds(position):
            raise ValueError(f"Position {position} is off the board.")
        if self.occupant(position) is not None:
            raise ValueError(f"Position {position} is already occupied.")
        if self.pieces_left[piece.owner] >= INITIAL_PIECES:
            raise ValueError(f"{piece.owner.label} already has {INITIAL_PIECES} pieces.")
        row, col = position
        self.board[row][col] = piece
        self.pieces_left[piece.owner] += 1

    def capture(self, position: Coordinate) -> Piece:
        target = self.occupant(position)
        if target is None:
            raise RuntimeError(f"No piece to capture at {position}.")
        row, col = position
        self.board[row][col] = None
        self.pieces_left[target.owner] -= 1
        logger.info(
            "%s lost a piece at %s (%d left)",
            target.owner.label,
            position,
            self.pieces_left[target.owner],
        )
        return target

    def relocate(self, start: Coordinate, end: Coordinate, piece: Piece) -> None:
        """Move the occupant of ``start`` to ``end``, storing ``piece`` there.

        ``piece`` is the post-promotion value of the mover.
        """
        if self.occupant(start) is None:
            raise RuntimeError(f"No piece to move at {start}.")
        if self.occupant(end) is not None:
            raise RuntimeError(f"Destination {end} must be empty.")
        self.board[start[0]][start[1]] = None
        self.board[end[0]][end[1]] = piece

    def winner(self) -> Optional[Player]:
        if self.pieces_left[Player.ONE] == 0:
            return Player.TWO
        if self.pieces_left[Player.TWO] == 0:
            return Player.ONE
        return None

    def _set_start_pieces(self) -> None:
        for row in range(BOARD_SIZE):
            for col in range(BOARD_SIZE):
                if (row + col) % 2 == 0:
                    continue
                if row < 3:
                    self.place((row, col), Man(Player.ONE))
                elif row >= BOARD_SIZE - 3:
                    self.place((row, col), Man(Player.TWO))


def initialize_board() -> Board:
    return Board()
