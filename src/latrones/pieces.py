"""Defines the two sides and how their pieces are encoded"""

from enum import Enum, auto
from typing import Optional


class Side(Enum):
    LIGHT = auto()
    DARK = auto()

    @property
    def opponent(self) -> "Side":
        return Side.DARK if self is Side.LIGHT else Side.LIGHT


# Both sides drop exactly this many pieces during the placement phase
PIECES_PER_SIDE = 8

# Occupancy snapshot encoding handed to the host: 0 = empty, 1 = light, 2 = dark
SIDE_TO_CODE: dict[Optional[Side], int] = {
    None: 0,
    Side.LIGHT: 1,
    Side.DARK: 2,
}

CODE_TO_SIDE: dict[int, Optional[Side]] = {
    value: key for key, value in SIDE_TO_CODE.items()
}

# Characters used in the compact board diagram (see Board.from_diagram)
DIAGRAM_TO_SIDE: dict[str, Side] = {
    "L": Side.LIGHT,
    "D": Side.DARK,
}

SIDE_TO_DIAGRAM: dict[Side, str] = {
    value: key for key, value in DIAGRAM_TO_SIDE.items()
}
