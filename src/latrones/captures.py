"""
Capture rules
----

* jump-capture: the piece leapt over by a jump is removed.
* flanking-capture: a piece sandwiched between two pieces of the other side, either on its
  left and right or above and below, is removed.

The flanking scan is a two-phase commit: every captured square on the board is collected
first and only then cleared, so a removal never influences another square in the same pass.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional

from src.latrones.board import Board
from src.latrones.moves import Move
from src.latrones.pieces import Side
from src.latrones.square import Square

logger = logging.getLogger(__name__)

# the two axes along which a piece can be flanked
FLANK_AXES: list[tuple[tuple[int, int], tuple[int, int]]] = [
    ((0, -1), (0, 1)),
    ((-1, 0), (1, 0)),
]


@dataclass
class FlankScan:
    """Result of a scan: which squares get captured, and which of the mover's pieces did the capturing."""

    captured: set[int] = field(default_factory=set)
    capturing: set[int] = field(default_factory=set)


def jump_capture(board: Board, move: Move, side: Side) -> bool:
    """
    Remove the piece leapt over and land the jumping piece.

    Returns False (and leaves the board alone) when the square in between does not hold an opposing piece.
    """
    jumped = move.jumped_index
    if jumped is None:
        return False

    occupant = board.occupant(jumped)
    if occupant is None or occupant is side:
        return False

    board.remove(jumped)
    board.relocate(move.from_index, move.to_index)
    logger.debug(
        "%s jumps %s, capturing %s",
        side.name,
        move.to_algebraic(),
        Square.from_index(jumped).to_algebraic(),
    )
    return True


def scan_flanks(board: Board, mover: Side) -> FlankScan:
    """Find every flanked piece without touching the board"""
    scan = FlankScan()

    for index, occupant in enumerate(board.cells):
        if occupant is None:
            continue
        square = Square.from_index(index)

        for first_dir, second_dir in FLANK_AXES:
            flankers = _flanking_pair(board, square, first_dir, second_dir)
            if flankers is None:
                continue
            flanking_side = board.occupant(flankers[0])
            if flanking_side is occupant:
                continue

            scan.captured.add(index)
            if flanking_side is mover:
                scan.capturing.update(flankers)

    return scan


def resolve_flanks(board: Board, mover: Side) -> set[int]:
    """Apply all flanking captures in one pass. Returns the mover's pieces that captured."""
    scan = scan_flanks(board, mover)
    for index in scan.captured:
        board.remove(index)

    if scan.captured:
        logger.debug(
            "flanking capture removes %s",
            ", ".join(
                Square.from_index(index).to_algebraic()
                for index in sorted(scan.captured)
            ),
        )
    return scan.capturing


def _flanking_pair(
    board: Board,
    square: Square,
    first_dir: tuple[int, int],
    second_dir: tuple[int, int],
) -> Optional[tuple[int, int]]:
    """Both neighbours along one axis, if they are on the board and occupied by the same side"""
    first = square.offset(*first_dir)
    second = square.offset(*second_dir)
    if not (first.is_within_bounds() and second.is_within_bounds()):
        return None

    first_side = board.occupant(first.to_index())
    second_side = board.occupant(second.to_index())
    if first_side is None or first_side is not second_side:
        return None
    return first.to_index(), second.to_index()
