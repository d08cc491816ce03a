from __future__ import annotations

from typing import Any, Optional

from core.game import Game, MoveRecord
from core.move import Coordinate, MoveOutcome
from core.pieces import Piece, Player


def _coord_tuple_to_dict(coord: Coordinate) -> dict[str, int]:
    row, col = coord
    return {"row": row + 1, "col": col + 1}


def _player_key(player: Player) -> str:
    return "player1" if player is Player.ONE else "player2"


def serialize_piece(coord: Coordinate, piece: Piece) -> dict[str, Any]:
    return {
        **_coord_tuple_to_dict(coord),
        "owner": piece.owner.value,
        "isKing": piece.is_king,
    }


def serialize_record(record: MoveRecord) -> dict[str, Any]:
    return {
        "player": record.intent.player.value,
        "start": _coord_tuple_to_dict(record.intent.start),
        "end": _coord_tuple_to_dict(record.intent.end),
        "captured": _coord_tuple_to_dict(record.captured) if record.captured else None,
        "promoted": record.promoted,
        "chained": record.chained,
    }


def serialize_outcome(outcome: MoveOutcome) -> dict[str, Any]:
    return {
        "accepted": outcome.accepted,
        "reason": outcome.reason.value if outcome.reason else None,
        "detail": outcome.detail,
        "captured": outcome.is_capture,
        "promoted": outcome.promoted,
    }


def serialize_chain(game: Game) -> list[dict[str, int]]:
    return [_coord_tuple_to_dict(coord) for coord in game.chain_candidates()]


def serialize_game(game: Game, outcome: Optional[MoveOutcome] = None) -> dict[str, Any]:
    placed = game.board.getAllPieces()
    pieces = [serialize_piece(coord, piece) for coord, piece in placed]

    last_record = game.move_history[-1] if game.move_history else None
    last_move = serialize_record(last_record) if last_record else None

    payload: dict[str, Any] = {
        "state": game.state.name.lower(),
        "turn": game.current_player.value,
        "winner": game.winner.value if game.winner else None,
        "pieces": pieces,
        "pieceCounts": {
            _player_key(player): {
                "total": game.board.count(player),
                "kings": sum(1 for _, piece in placed if piece.owner is player and piece.is_king),
            }
            for player in Player
        },
        "chain": {
            "pending": game.chain is not None,
            "from": _coord_tuple_to_dict(game.chain.position) if game.chain else None,
            "candidates": serialize_chain(game),
        },
        "edgeChainGuard": game.options.edge_chain_guard,
        "moveCount": len(game.move_history),
        "lastMove": last_move,
    }
    if outcome is not None:
        payload["outcome"] = serialize_outcome(outcome)
    return payload
