"""Unit tests for /src/latrones/board.py"""

import pytest

from src.latrones.board import Board
from src.latrones.pieces import Side
from src.latrones.square import BOARD_SIZE, Square

EMPTY_DIAGRAM = "/".join(["8"] * 8)
FIXED_OPENING_DIAGRAM = "/".join(["D6L"] * 8)


def idx(name: str) -> int:
    return Square.from_algebraic(name).to_index()


# -- CREATION / NOTATION ---
def test_new_board_is_empty() -> None:
    board = Board()
    assert board.cells == [None] * BOARD_SIZE
    assert board.to_codes() == [0] * BOARD_SIZE
    assert board.empty_squares() == list(range(BOARD_SIZE))
    assert board.to_diagram() == EMPTY_DIAGRAM


def test_board_needs_exactly_64_squares() -> None:
    with pytest.raises(ValueError):
        _ = Board([None] * 63)


def test_diagram_fixed_opening() -> None:
    """Dark fills the a-file, Light the h-file"""
    board = Board.from_diagram(FIXED_OPENING_DIAGRAM)
    assert board.locate_side(Side.DARK) == list(range(0, BOARD_SIZE, 8))
    assert board.locate_side(Side.LIGHT) == list(range(7, BOARD_SIZE, 8))


def test_diagram_is_read_from_the_top_row() -> None:
    """The first group of the diagram is row 7 (rank 8), just like the board is displayed"""
    board = Board.from_diagram("L7/8/8/8/8/8/8/7D")
    assert board.occupant(idx("a8")) == Side.LIGHT
    assert board.occupant(idx("h1")) == Side.DARK
    assert board.count_pieces() == {Side.LIGHT: 1, Side.DARK: 1}


def test_diagram_accepts_dots_for_empty_squares() -> None:
    dotted = Board.from_diagram("/".join(["...LD..."] + ["........"] * 7))
    compact = Board.from_diagram("/".join(["3LD3"] + ["8"] * 7))
    assert dotted == compact


@pytest.mark.parametrize(
    "diagram",
    [
        FIXED_OPENING_DIAGRAM,
        "8/8/3LD3/8/2D5/8/8/L6D",
        "LLLLLLLL/8/8/8/8/8/8/DDDDDDDD",
    ],
)
def test_diagram_roundtrip(diagram: str) -> None:
    assert Board.from_diagram(diagram).to_diagram() == diagram


@pytest.mark.parametrize(
    "invalid_diagram",
    [
        "/".join(["8"] * 7),  # only 7 rows
        "/".join(["L8"] + ["8"] * 7),  # row too long
        "/".join(["7"] + ["8"] * 7),  # row too short
        "/".join(["X7"] + ["8"] * 7),  # unknown piece
    ],
)
def test_invalid_diagram(invalid_diagram: str) -> None:
    with pytest.raises(ValueError):
        _ = Board.from_diagram(invalid_diagram)


def test_codes_roundtrip() -> None:
    """0 = empty, 1 = light, 2 = dark"""
    board = Board.from_diagram(FIXED_OPENING_DIAGRAM)
    codes = board.to_codes()
    assert codes[0] == 2
    assert codes[7] == 1
    assert codes[1] == 0
    assert Board.from_codes(codes) == board


@pytest.mark.parametrize(
    "codes",
    [
        [0] * 63,
        [0] * 63 + [3],
    ],
)
def test_invalid_codes(codes: list[int]) -> None:
    with pytest.raises(ValueError):
        _ = Board.from_codes(codes)


# -- OCCUPANCY ---
def test_place_and_remove() -> None:
    board = Board()
    board.place(idx("d4"), Side.LIGHT)
    assert board.occupant(idx("d4")) == Side.LIGHT
    assert board.belongs_to(idx("d4"), Side.LIGHT)
    assert not board.belongs_to(idx("d4"), Side.DARK)
    assert not board.is_empty(idx("d4"))

    board.remove(idx("d4"))
    assert board.is_empty(idx("d4"))


def test_relocate() -> None:
    board = Board()
    board.place(idx("d4"), Side.DARK)
    board.relocate(idx("d4"), idx("d5"))
    assert board.is_empty(idx("d4"))
    assert board.occupant(idx("d5")) == Side.DARK


def test_count_pieces() -> None:
    board = Board.from_diagram("8/8/3LD3/8/2D5/8/8/L6D")
    assert board.count(Side.LIGHT) == 2
    assert board.count(Side.DARK) == 3
    assert board.count_pieces() == {Side.LIGHT: 2, Side.DARK: 3}
    assert len(board.empty_squares()) == BOARD_SIZE - 5
