"""The board only stores occupancy. Capturing and legality live in captures.py / moves.py"""

from dataclasses import dataclass, field
from typing import Optional, Self

from src.latrones.pieces import (
    CODE_TO_SIDE,
    DIAGRAM_TO_SIDE,
    SIDE_TO_CODE,
    SIDE_TO_DIAGRAM,
    Side,
)
from src.latrones.square import BOARD_DIMENSIONS, BOARD_SIZE, Square


def _empty_cells() -> list[Optional[Side]]:
    return [None] * BOARD_SIZE


@dataclass
class Board:
    cells: list[Optional[Side]] = field(default_factory=_empty_cells)

    def __post_init__(self) -> None:
        if len(self.cells) != BOARD_SIZE:
            raise ValueError(
                f"A board holds exactly {BOARD_SIZE} squares, got {len(self.cells)}"
            )

    @classmethod
    def from_diagram(cls, diagram: str) -> Self:
        """Construct a board from a compact diagram, in the spirit of the FEN board field.

        Rows are separated by slashes and read from the top row (row 7, rank 8) down to row 0,
        so the string looks like the board as it is displayed. Within a row:
        * 'L' / 'D' are a Light / Dark piece
        * '.' is a single empty square
        * a digit is that many consecutive empty squares
        ex. the fixed opening: D6L/D6L/D6L/D6L/D6L/D6L/D6L/D6L
        """
        cells = _empty_cells()
        rows = diagram.strip().split("/")
        if len(rows) != BOARD_DIMENSIONS[1]:
            raise ValueError(f"Diagram must have {BOARD_DIMENSIONS[1]} rows: {diagram!r}")

        for row_idx, row_text in enumerate(rows):
            row = BOARD_DIMENSIONS[1] - 1 - row_idx
            col = 0
            for character in row_text:
                if character.isdigit():
                    col += int(character)
                    continue
                if col >= BOARD_DIMENSIONS[0]:
                    raise ValueError(
                        f"Row {row + 1} of diagram is too long: {row_text!r}"
                    )
                if character != ".":
                    if character not in DIAGRAM_TO_SIDE:
                        raise ValueError(f"Unknown piece character {character!r}")
                    cells[Square(row, col).to_index()] = DIAGRAM_TO_SIDE[character]
                col += 1
            if col != BOARD_DIMENSIONS[0]:
                raise ValueError(
                    f"Row {row + 1} of diagram does not span {BOARD_DIMENSIONS[0]} squares: {row_text!r}"
                )
        return cls(cells)

    def to_diagram(self) -> str:
        return "/".join(
            self._row_to_diagram(row) for row in range(BOARD_DIMENSIONS[1] - 1, -1, -1)
        )

    def _row_to_diagram(self, row: int) -> str:
        characters: list[str] = []
        empty_count = 0
        for col in range(BOARD_DIMENSIONS[0]):
            side = self.occupant(Square(row, col).to_index())
            if side is None:
                empty_count += 1
                continue
            if empty_count > 0:
                characters.append(str(empty_count))
                empty_count = 0
            characters.append(SIDE_TO_DIAGRAM[side])
        if empty_count > 0:
            characters.append(str(empty_count))
        return "".join(characters)

    @classmethod
    def from_codes(cls, codes: list[int]) -> Self:
        """Reverse of to_codes (0 = empty, 1 = light, 2 = dark)"""
        unknown = [code for code in codes if code not in CODE_TO_SIDE]
        if unknown:
            raise ValueError(f"Unknown occupancy codes: {sorted(set(unknown))}")
        return cls([CODE_TO_SIDE[code] for code in codes])

    def to_codes(self) -> list[int]:
        return [SIDE_TO_CODE[side] for side in self.cells]

    def occupant(self, index: int) -> Optional[Side]:
        return self.cells[index]

    def is_empty(self, index: int) -> bool:
        return self.cells[index] is None

    def belongs_to(self, index: int, side: Side) -> bool:
        return self.cells[index] is side

    def place(self, index: int, side: Side) -> None:
        self.cells[index] = side

    def remove(self, index: int) -> None:
        self.cells[index] = None

    def relocate(self, from_index: int, to_index: int) -> None:
        """Move whatever occupies from_index onto to_index"""
        self.cells[to_index] = self.cells[from_index]
        self.cells[from_index] = None

    def locate_side(self, side: Side) -> list[int]:
        return [index for index, occupant in enumerate(self.cells) if occupant is side]

    def empty_squares(self) -> list[int]:
        return [index for index, occupant in enumerate(self.cells) if occupant is None]

    def count(self, side: Side) -> int:
        return sum(1 for occupant in self.cells if occupant is side)

    def count_pieces(self) -> dict[Side, int]:
        """Tally the pieces each side has on the board"""
        return {side: self.count(side) for side in Side}
