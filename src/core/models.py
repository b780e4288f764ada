"""
Boundary layer data model(s).

These objects can be used to communicate with the Service.
Both the API layer (higher) and the domain/storage layers (lower) use the model defined here to send to/receive from the Service.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class GameModel:
    """Transport-safe snapshot of the complete engine state. Enough to rebuild the GameEngine exactly."""

    board: list[int]
    current_player: str
    phase: str
    light_placed: int
    dark_placed: int
    selected_square: Optional[int] = None
    must_continue_jump: bool = False
    capturing_piece: Optional[int] = None
    game_over: bool = False
    winner: Optional[str] = None
