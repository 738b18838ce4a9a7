"""Legality filter tests and perft counts.

Reference values: https://www.chessprogramming.org/Perft_Results
The starting position has no castling, en passant or promotion within four
plies, so the published counts apply unchanged.
"""

import pytest

from chessrules.core.applicator import apply_move
from chessrules.core.attacks import DEFAULT_ORACLE, IAttackOracle
from chessrules.core.board import Board
from chessrules.core.enums import Color, PieceType
from chessrules.core.move import Move
from chessrules.core.move_generator import MoveGenerator
from chessrules.core.types import E1, E2, E4, Square, parse_square


def perft(board: Board, color: Color, depth: int) -> int:
    """Count leaf nodes at *depth*, applying each move to a copy."""
    if depth == 0:
        return 1
    moves = MoveGenerator(board).generate_legal_moves(color)
    if depth == 1:
        return len(moves)
    nodes = 0
    for move in moves:
        child = board.copy()
        apply_move(child, move)
        nodes += perft(child, color.opposite, depth - 1)
    return nodes


class _AlwaysAttacked(IAttackOracle):
    def is_square_attacked(self, board: Board, sq: Square, by_color: Color) -> bool:
        return True


# ── Starting position ────────────────────────────────────────────────────────


class TestPerftStarting:
    def test_depth_1(self, initial_board: Board) -> None:
        assert perft(initial_board, Color.WHITE, 1) == 20

    def test_depth_2(self, initial_board: Board) -> None:
        assert perft(initial_board, Color.WHITE, 2) == 400

    def test_depth_3(self, initial_board: Board) -> None:
        assert perft(initial_board, Color.WHITE, 3) == 8_902

    @pytest.mark.slow
    def test_depth_4(self, initial_board: Board) -> None:
        assert perft(initial_board, Color.WHITE, 4) == 197_281


# ── Legality filter ──────────────────────────────────────────────────────────


class TestLegalDestinations:
    def test_pinned_bishop_cannot_move(self) -> None:
        board = Board.from_placement("4k3/4r3/8/8/8/8/4B3/4K3")
        gen = MoveGenerator(board)
        assert gen.legal_destinations(E2, Color.WHITE) == set()

    def test_pinned_rook_moves_along_pin(self) -> None:
        board = Board.from_placement("4k3/4r3/8/8/8/8/4R3/4K3")
        gen = MoveGenerator(board)
        expected = {parse_square(n) for n in ("e3", "e4", "e5", "e6", "e7")}
        assert gen.legal_destinations(E2, Color.WHITE) == expected

    def test_king_cannot_step_into_attack(self) -> None:
        board = Board.from_placement("4k3/8/8/8/8/8/8/r3K3")
        gen = MoveGenerator(board)
        expected = {parse_square(n) for n in ("d2", "e2", "f2")}
        assert gen.legal_destinations(E1, Color.WHITE) == expected

    def test_king_cannot_capture_defended_piece(self) -> None:
        board = Board.from_placement("4k3/8/8/8/8/8/3r4/3rK3")
        gen = MoveGenerator(board)
        assert gen.legal_destinations(E1, Color.WHITE) == set()

    def test_king_may_capture_undefended_piece(self) -> None:
        board = Board.from_placement("4k3/8/8/8/8/8/8/3rK3")
        gen = MoveGenerator(board)
        assert parse_square("d1") in gen.legal_destinations(E1, Color.WHITE)

    def test_check_must_be_answered(self) -> None:
        board = Board.from_placement("4k3/8/8/8/8/1N6/8/r3K3")
        gen = MoveGenerator(board)
        knight_moves = gen.legal_destinations(parse_square("b3"), Color.WHITE)
        assert knight_moves == {parse_square("a1"), parse_square("c1")}

    def test_empty_square_has_no_moves(self, initial_board: Board) -> None:
        gen = MoveGenerator(initial_board)
        for row in range(2, 6):
            for col in range(8):
                assert gen.legal_destinations((row, col), Color.WHITE) == set()
                assert gen.legal_destinations((row, col), Color.BLACK) == set()

    def test_start_pawn_has_two_moves(self, initial_board: Board) -> None:
        gen = MoveGenerator(initial_board)
        for col in range(8):
            assert len(gen.legal_destinations((6, col), Color.WHITE)) == 2
            assert len(gen.legal_destinations((1, col), Color.BLACK)) == 2

    def test_opponent_piece_has_no_moves(self, initial_board: Board) -> None:
        gen = MoveGenerator(initial_board)
        assert gen.legal_destinations(E2, Color.BLACK) == set()

    def test_queries_are_idempotent(self, fools_mate_board: Board) -> None:
        gen = MoveGenerator(fools_mate_board)
        for sq in fools_mate_board.all_pieces(Color.BLACK):
            assert gen.legal_destinations(sq, Color.BLACK) == gen.legal_destinations(
                sq, Color.BLACK
            )

    def test_board_untouched_by_simulation(self, initial_board: Board) -> None:
        before = initial_board.copy()
        MoveGenerator(initial_board).generate_legal_moves(Color.WHITE)
        assert initial_board == before

    def test_king_moves_never_end_attacked(self) -> None:
        board = Board.from_placement("8/8/3k4/8/2q5/8/4K3/8")
        gen = MoveGenerator(board)
        moves = gen.legal_destinations(E2, Color.WHITE)
        assert moves
        for to_sq in moves:
            child = board.copy()
            apply_move(child, Move(E2, to_sq))
            assert not DEFAULT_ORACLE.is_in_check(child, Color.WHITE)

    def test_custom_oracle_is_used(self, initial_board: Board) -> None:
        gen = MoveGenerator(initial_board, _AlwaysAttacked())
        assert gen.legal_destinations(E2, Color.WHITE) == set()
        assert not gen.has_legal_move(Color.WHITE)


class TestMoveEnumeration:
    def test_generate_legal_moves_at_start(self, initial_board: Board) -> None:
        moves = MoveGenerator(initial_board).generate_legal_moves(Color.WHITE)
        assert len(moves) == 20
        assert Move(E2, E4) in moves

    def test_has_legal_move(self, initial_board: Board) -> None:
        assert MoveGenerator(initial_board).has_legal_move(Color.BLACK)

    def test_no_legal_move_offers_king_capture(self, initial_board: Board) -> None:
        for first in MoveGenerator(initial_board).generate_legal_moves(Color.WHITE):
            board = initial_board.copy()
            apply_move(board, first)
            for reply in MoveGenerator(board).generate_legal_moves(Color.BLACK):
                target = board[reply.to_sq]
                assert target is None or target.piece_type != PieceType.KING

    def test_leaves_king_attacked_for_empty_origin(self, initial_board: Board) -> None:
        gen = MoveGenerator(initial_board)
        assert not gen.leaves_king_attacked(Move(E4, parse_square("e5")))

    def test_move_without_own_king_is_never_self_check(self) -> None:
        board = Board.from_placement("4k3/8/8/8/8/8/4R3/8")
        gen = MoveGenerator(board)
        assert len(gen.legal_destinations(E2, Color.WHITE)) == 14
