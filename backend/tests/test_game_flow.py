from __future__ import annotations

import sys
import unittest
from itertools import product
from pathlib import Path


BACKEND_DIR = Path(__file__).resolve().parents[1]
if str(BACKEND_DIR) not in sys.path:
    sys.path.insert(0, str(BACKEND_DIR))


from core.board import Board  # noqa: E402
from core.game import Game, TurnState  # noqa: E402
from core.move import RejectReason  # noqa: E402
from core.pieces import King, Man, Player  # noqa: E402
from core.player import DECLINE, PlayerController  # noqa: E402


def board_with(*placements) -> Board:
    board = Board.empty()
    for position, piece in placements:
        board.place(position, piece)
    return board


def double_jump_game(extra_twos=((7, 0),)) -> Game:
    placements = [
        ((2, 1), Man(Player.ONE)),
        ((3, 2), Man(Player.TWO)),
        ((5, 4), Man(Player.TWO)),
    ]
    placements.extend((position, Man(Player.TWO)) for position in extra_twos)
    game = Game()
    game.reset(board_with(*placements))
    return game


class TurnOrderTests(unittest.TestCase):
    def test_player_one_moves_first_and_turns_alternate(self) -> None:
        game = Game()
        self.assertEqual(game.state, TurnState.PLAYER_ONE_TURN)
        self.assertTrue(game.submit_move((2, 3), (3, 4)).accepted)
        self.assertEqual(game.state, TurnState.PLAYER_TWO_TURN)
        self.assertTrue(game.submit_move((5, 6), (4, 5)).accepted)
        self.assertEqual(game.state, TurnState.PLAYER_ONE_TURN)
        self.assertEqual(len(game.move_history), 2)

    def test_rejected_move_keeps_the_turn(self) -> None:
        game = Game()
        outcome = game.submit_move((5, 6), (4, 5))
        self.assertEqual(outcome.reason, RejectReason.ILLEGAL_SOURCE)
        self.assertEqual(game.current_player, Player.ONE)
        outcome = game.submit_move((2, 3), (4, 5))
        self.assertEqual(outcome.reason, RejectReason.ILLEGAL_DESTINATION)
        self.assertEqual(game.current_player, Player.ONE)
        self.assertFalse(game.move_history)

    def test_capture_and_recapture(self) -> None:
        game = Game()
        game.submit_move((2, 3), (3, 4))
        game.submit_move((5, 6), (4, 5))
        outcome = game.submit_move((3, 4), (5, 6))
        self.assertEqual(outcome.captured, (4, 5))
        self.assertEqual(game.board.count(Player.TWO), 11)
        # (6, 7) and (6, 5) block every continuation from (5, 6).
        self.assertEqual(game.state, TurnState.PLAYER_TWO_TURN)

        outcome = game.submit_move((6, 7), (4, 5))
        self.assertEqual(outcome.captured, (5, 6))
        self.assertEqual(game.board.count(Player.ONE), 11)
        self.assertEqual(game.state, TurnState.PLAYER_ONE_TURN)

    def test_simple_step_never_opens_a_chain(self) -> None:
        game = Game()
        game.reset(
            board_with(
                ((3, 2), Man(Player.ONE)),
                ((5, 4), Man(Player.TWO)),
                ((5, 2), Man(Player.TWO)),
            )
        )
        game.submit_move((3, 2), (4, 3))
        self.assertIsNone(game.chain)
        self.assertEqual(game.state, TurnState.PLAYER_TWO_TURN)


class ChainFlowTests(unittest.TestCase):
    def test_jump_with_follow_up_waits_for_chain(self) -> None:
        game = double_jump_game()
        outcome = game.submit_move((2, 1), (4, 3))
        self.assertTrue(outcome.is_capture)
        self.assertEqual(game.state, TurnState.CHAIN_PENDING)
        self.assertEqual(game.chain_candidates(), ((6, 5),))
        with self.assertRaises(RuntimeError):
            game.submit_move((7, 0), (6, 1))

        outcome = game.submit_chain_step((6, 5))
        self.assertTrue(outcome.accepted)
        self.assertEqual(game.state, TurnState.PLAYER_TWO_TURN)
        self.assertTrue(game.move_history[-1].chained)
        self.assertEqual(game.board.count(Player.TWO), 1)

    def test_illegal_chain_destination_reprompts(self) -> None:
        game = double_jump_game()
        game.submit_move((2, 1), (4, 3))
        outcome = game.submit_chain_step((5, 2))
        self.assertEqual(outcome.reason, RejectReason.ILLEGAL_CHAIN_DESTINATION)
        self.assertEqual(game.state, TurnState.CHAIN_PENDING)
        self.assertEqual(game.current_player, Player.ONE)

    def test_off_board_chain_destination_ends_turn(self) -> None:
        game = double_jump_game()
        game.submit_move((2, 1), (4, 3))
        outcome = game.submit_chain_step((-1, -1))
        self.assertFalse(outcome.accepted)
        self.assertEqual(game.state, TurnState.PLAYER_TWO_TURN)
        self.assertEqual(game.board.count(Player.TWO), 2)

    def test_decline_ends_turn(self) -> None:
        game = double_jump_game()
        game.submit_move((2, 1), (4, 3))
        game.decline_chain()
        self.assertEqual(game.state, TurnState.PLAYER_TWO_TURN)
        self.assertEqual(game.board.occupant((4, 3)), Man(Player.ONE))
        with self.assertRaises(RuntimeError):
            game.decline_chain()

    def test_quit_is_refused_mid_chain(self) -> None:
        game = double_jump_game()
        game.submit_move((2, 1), (4, 3))
        with self.assertRaises(RuntimeError):
            game.quit()

    def test_chain_step_without_chain_is_an_error(self) -> None:
        with self.assertRaises(RuntimeError):
            Game().submit_chain_step((4, 3))


class GameOverTests(unittest.TestCase):
    def test_last_capture_ends_game(self) -> None:
        game = double_jump_game(extra_twos=())
        game.submit_move((2, 1), (4, 3))
        self.assertEqual(game.state, TurnState.CHAIN_PENDING)
        game.submit_chain_step((6, 5))
        self.assertEqual(game.state, TurnState.GAME_OVER)
        self.assertEqual(game.winner, Player.ONE)
        self.assertIsNone(game.chain)
        with self.assertRaises(RuntimeError):
            game.submit_move((6, 5), (7, 6))

    def test_single_capture_of_last_piece(self) -> None:
        game = Game()
        game.reset(
            board_with(
                ((4, 3), King(Player.TWO)),
                ((3, 2), Man(Player.ONE)),
                ((7, 0), Man(Player.TWO)),
            )
        )
        game.current_player = Player.TWO
        game.submit_move((4, 3), (2, 1))
        self.assertEqual(game.winner, Player.TWO)
        self.assertEqual(game.state, TurnState.GAME_OVER)

    def test_quit_ends_without_winner(self) -> None:
        game = Game()
        game.quit()
        self.assertEqual(game.state, TurnState.ABORTED)
        self.assertIsNone(game.winner)
        self.assertTrue(game.is_over)


class RunLoopTests(unittest.TestCase):
    def test_scripted_game_with_retries_and_chain(self) -> None:
        game = double_jump_game()
        game.setPlayer(
            Player.ONE,
            PlayerController.scripted(
                "P1",
                moves=[((2, 1), (5, 4)), ((2, 1), (4, 3))],
                chain_steps=[(5, 2), (6, 5)],
            ),
        )
        game.setPlayer(Player.TWO, PlayerController.scripted("P2", moves=[((7, 0), (6, 1))]))
        self.assertIsNone(game.run())
        self.assertEqual(game.state, TurnState.ABORTED)
        self.assertEqual(game.board.occupant((6, 5)), Man(Player.ONE))
        self.assertEqual(game.board.occupant((6, 1)), Man(Player.TWO))
        self.assertEqual(len(game.move_history), 3)

    def test_run_returns_winner(self) -> None:
        game = double_jump_game(extra_twos=())
        game.setPlayer(
            Player.ONE,
            PlayerController.scripted("P1", moves=[((2, 1), (4, 3))], chain_steps=[(6, 5)]),
        )
        self.assertEqual(game.run(), Player.ONE)

    def test_policy_less_controller_declines_chains(self) -> None:
        controller = PlayerController.human("Player 1")
        self.assertTrue(controller.is_interactive)
        self.assertIs(controller.select_chain_destination(Game(), ((4, 3),)), DECLINE)
        with self.assertRaises(RuntimeError):
            controller.select_move(Game())


class CounterPropertyTests(unittest.TestCase):
    def test_counts_only_drop_by_one_per_capture(self) -> None:
        game = Game()
        steps = [(dr, dc) for dr, dc in product((-2, -1, 1, 2), repeat=2) if abs(dr) == abs(dc)]
        for _ in range(60):
            if game.is_over:
                break
            if game.chain is not None:
                before = dict(game.board.pieces_left)
                outcome = game.submit_chain_step(game.chain_candidates()[0])
                self._assert_counts(game, before, outcome)
                continue
            before = dict(game.board.pieces_left)
            outcome = None
            for (row, col), piece in game.board.getAllPieces():
                if piece.owner is not game.current_player:
                    continue
                for dr, dc in sorted(steps, key=lambda step: -abs(step[0])):
                    outcome = game.submit_move((row, col), (row + dr, col + dc))
                    if outcome.accepted:
                        break
                if outcome is not None and outcome.accepted:
                    break
            if outcome is None or not outcome.accepted:
                break
            self._assert_counts(game, before, outcome)

    def _assert_counts(self, game: Game, before: dict, outcome) -> None:
        after = game.board.pieces_left
        for player in Player:
            self.assertLessEqual(after[player], before[player])
        lost = sum(before[player] - after[player] for player in Player)
        self.assertEqual(lost, 1 if outcome.is_capture else 0)


if __name__ == "__main__":
    unittest.main()
