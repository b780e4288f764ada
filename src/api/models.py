"""Requests and Response models"""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, field_validator

from src.core.exceptions import InvalidRequestError
from src.core.shared_types import GamePhase, PlayerColor
from src.latrones.square import Square


# --- REQUEST MODELS ---
class CreateGameRequest(BaseModel):
    fixed_opening: bool = False


class GetGameRequest(BaseModel):
    game_id: UUID


class InteractRequest(BaseModel):
    game_id: UUID
    square: int

    @field_validator("square", mode="before")
    @classmethod
    def validate_square(cls, value: int | str) -> int:
        """
        Accept either the zero-based index or the square's name ('a1' - 'h8').
        An out-of-range index is passed on untouched: the engine simply rejects the click.
        """

        def _is_algebraic_notation(value: str) -> bool:
            if len(value) != 2:
                return False
            first_character = value[0].lower()
            second_character = value[1]
            return "a" <= first_character <= "h" and "1" <= second_character <= "8"

        if isinstance(value, bool):
            raise InvalidRequestError(f"Cannot interpret {value!r} as a square.")
        if isinstance(value, int):
            return value
        if isinstance(value, str):
            if value.strip().lstrip("-").isdigit():
                return int(value)
            if _is_algebraic_notation(value.strip()):
                return Square.from_algebraic(value.strip()).to_index()
        raise InvalidRequestError(f"Cannot interpret square: {value!r} as a valid square name.")


class ResetGameRequest(BaseModel):
    game_id: UUID
    fixed_opening: bool = False


class DeleteGameRequest(BaseModel):
    game_id: UUID


# --- RESPONSE MODELS ---
class GameResponse(BaseModel):
    game_id: UUID
    board: list[int]
    current_player: PlayerColor
    phase: GamePhase
    selected_square: Optional[int]
    valid_moves: list[int]
    game_over: bool
    winner: Optional[PlayerColor]


class InteractResponse(BaseModel):
    accepted: bool
    game: GameResponse
