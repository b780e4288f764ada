"""
A square on the board

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass

# (columns, rows). The game is played on 8x8, but keep it in one place
BOARD_DIMENSIONS = (8, 8)
BOARD_SIZE = BOARD_DIMENSIONS[0] * BOARD_DIMENSIONS[1]


@dataclass(frozen=True)
class Square:
    row: int
    col: int

    @classmethod
    def from_index(cls, index: int) -> Square:
        """Row-major: index 0 is the bottom-left corner (a1), index 63 the top-right (h8)"""
        row, col = divmod(index, BOARD_DIMENSIONS[0])
        return cls(row, col)

    @classmethod
    def from_algebraic(cls, sq: str) -> Square:
        """'a1' - 'h8': the letter is the column, the number is the row counting from 1"""
        col = ord(sq[0].lower()) - ord("a")
        row = int(sq[1:]) - 1
        return cls(row, col)

    def to_index(self) -> int:
        return self.row * BOARD_DIMENSIONS[0] + self.col

    def to_algebraic(self) -> str:
        return f"{chr(self.col + ord('a'))}{self.row + 1}"

    def is_within_bounds(self) -> bool:
        return (0 <= self.col < BOARD_DIMENSIONS[0]) and (
            0 <= self.row < BOARD_DIMENSIONS[1]
        )

    def offset(self, d_row: int, d_col: int) -> Square:
        """The square displaced by (d_row, d_col). Might fall off the board, so check bounds after."""
        return Square(self.row + d_row, self.col + d_col)


def is_valid_index(index: object) -> bool:
    """Guard for anything a caller hands in as a square index"""
    return (
        isinstance(index, int)
        and not isinstance(index, bool)
        and 0 <= index < BOARD_SIZE
    )
