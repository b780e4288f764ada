"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/helpers required for testing multiple layers.
"""

from typing import Callable, Generator

import pytest

from src.db.repository import InMemoryGameRepository
from src.latrones.board import Board
from src.latrones.game import GameEngine, Idle, Phase, TurnState
from src.latrones.pieces import PIECES_PER_SIDE, Side
from src.latrones.square import Square


PiecesByName = dict[str, Side]


def idx(name: str) -> int:
    """Index of a square by its name, ex. idx('d4') == 27"""
    return Square.from_algebraic(name).to_index()


@pytest.fixture
def board_with() -> Callable[[PiecesByName], Board]:
    """Call the inner function with {'d4': Side.LIGHT, 'e4': Side.DARK, ...}"""

    def _create_board(pieces: PiecesByName) -> Board:
        board = Board()
        for name, side in pieces.items():
            board.place(idx(name), side)
        return board

    return _create_board


@pytest.fixture
def movement_engine(
    board_with: Callable[[PiecesByName], Board],
) -> Callable[..., GameEngine]:
    """An engine that already finished placement, with the given pieces on the board"""

    def _create_engine(
        pieces: PiecesByName,
        to_move: Side = Side.LIGHT,
        turn: TurnState | None = None,
        capturing_piece: int | None = None,
    ) -> GameEngine:
        return GameEngine(
            board=board_with(pieces),
            current_player=to_move,
            phase=Phase.MOVEMENT,
            placed={side: PIECES_PER_SIDE for side in Side},
            turn=turn if turn is not None else Idle(),
            capturing_piece=capturing_piece,
        )

    return _create_engine


@pytest.fixture
def repository() -> Generator[InMemoryGameRepository, None, None]:
    """Ensures to clear the repository between tests"""
    repo = InMemoryGameRepository()
    try:
        yield repo
    finally:
        repo.clear()
