"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import pytest

from chessrules.core.applicator import apply_move
from chessrules.core.board import Board
from chessrules.core.move import Move
from chessrules.core.types import D8, E5, E7, F2, F3, G2, G4, H4


@pytest.fixture
def initial_board() -> Board:
    """A fresh board in the standard starting layout."""
    return Board.initial()


@pytest.fixture
def fools_mate_board() -> Board:
    """Board after 1.f3 e5 2.g4 Qh4#, white to move."""
    board = Board.initial()
    for move in (Move(F2, F3), Move(E7, E5), Move(G2, G4), Move(D8, H4)):
        apply_move(board, move)
    return board
