"""
Geometry of movement

Pieces move orthogonally: either a single step onto an empty neighbour, or a jump over an
adjacent opposing piece onto the empty square right behind it.

No captures are applied here. The Capture Resolver and the GameEngine take care of that.
"""

from dataclasses import dataclass
from typing import Optional, Protocol

from src.latrones.pieces import Side
from src.latrones.square import Square


class Board(Protocol):
    """Just the parts the move generator needs"""

    def occupant(self, index: int) -> Optional[Side]: ...
    def is_empty(self, index: int) -> bool: ...


Vector = tuple[int, int]

# up, down, left, right
ORTHOGONAL_DIRECTIONS: list[Vector] = [(-1, 0), (1, 0), (0, -1), (0, 1)]


@dataclass(frozen=True)
class Move:
    """basic definition of a move to be made"""

    from_index: int
    to_index: int

    @property
    def displacement(self) -> Vector:
        start = Square.from_index(self.from_index)
        end = Square.from_index(self.to_index)
        return end.row - start.row, end.col - start.col

    @property
    def is_jump(self) -> bool:
        """A jump covers two squares along either axis"""
        d_row, d_col = self.displacement
        return abs(d_row) == 2 or abs(d_col) == 2

    @property
    def jumped_index(self) -> Optional[int]:
        """The square leapt over. Only defined for a straight two-step displacement along one axis."""
        d_row, d_col = self.displacement
        if sorted((abs(d_row), abs(d_col))) != [0, 2]:
            return None
        start = Square.from_index(self.from_index)
        return start.offset(d_row // 2, d_col // 2).to_index()

    def to_algebraic(self) -> str:
        return f"{Square.from_index(self.from_index).to_algebraic()}{Square.from_index(self.to_index).to_algebraic()}"


def destinations(
    board: Board, from_index: int, side: Side, jumps_only: bool = False
) -> set[int]:
    """
    Legal destinations for the piece of `side` standing on `from_index`.
    ----

    For each orthogonal direction:
    * empty neighbour --> step (skipped when jumps_only)
    * opposing neighbour with an empty on-board square behind it --> jump (always included)

    Only meaningful when from_index holds a piece of `side`.
    """
    found: set[int] = set()
    start = Square.from_index(from_index)

    for d_row, d_col in ORTHOGONAL_DIRECTIONS:
        neighbour = start.offset(d_row, d_col)
        if not neighbour.is_within_bounds():
            continue

        neighbour_idx = neighbour.to_index()
        occupant = board.occupant(neighbour_idx)
        if occupant is None:
            if not jumps_only:
                found.add(neighbour_idx)
            continue

        if occupant is side:
            continue

        landing = neighbour.offset(d_row, d_col)
        if landing.is_within_bounds() and board.is_empty(landing.to_index()):
            found.add(landing.to_index())

    return found


def has_destinations(board: Board, from_index: int, side: Side) -> bool:
    """Can the piece move at all? (This is what makes a piece selectable)"""
    return bool(destinations(board, from_index, side, jumps_only=False))
