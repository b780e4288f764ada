"""Orchestration of communication from the host (API router / UI) to the game engine and storage layers (and the reverse direction)."""

import logging
from uuid import UUID

from src.api.models import (
    CreateGameRequest,
    DeleteGameRequest,
    GameResponse,
    GetGameRequest,
    InteractRequest,
    InteractResponse,
    ResetGameRequest,
)
from src.core.exceptions import RepositoryError
from src.core.models import GameModel
from src.db.repository import GameRepository
from src.latrones.game import GameEngine

logger = logging.getLogger(__name__)


class LatronesService:
    """Orchestration of layers for the game."""

    def __init__(self, repository: GameRepository) -> None:
        self.repo = repository

    # -- API routes logic ---
    def create_new_game(self, request: CreateGameRequest) -> GameResponse:
        """Start a game, either from an empty board or straight from the fixed opening."""
        engine = (
            GameEngine.with_fixed_opening() if request.fixed_opening else GameEngine()
        )
        stored_game, game_id = self.repo.create_game(engine.to_model())
        logger.info("created game %s (fixed_opening=%s)", game_id, request.fixed_opening)
        return self._create_game_response(game_id, stored_game)

    def get_game_state(self, request: GetGameRequest) -> GameResponse:
        """
        Retrieve current game state.
        ----
        Used by the frontend to (re)render the board.
        """
        game_model = self._fetch_game(request.game_id)
        return self._create_game_response(request.game_id, game_model)

    def interact(self, request: InteractRequest) -> InteractResponse:
        """Forward a click on a square to the engine."""

        # Retrieve persisted GameModel and rebuild the engine
        stored_model = self._fetch_game(request.game_id)
        engine = GameEngine.from_model(stored_model)

        accepted = engine.interact(request.square)
        if not accepted:
            return InteractResponse(
                accepted=False,
                game=self._create_game_response(request.game_id, stored_model),
            )

        after_click = engine.to_model()
        self.repo.update_game(request.game_id, after_click)
        return InteractResponse(
            accepted=True,
            game=self._create_game_response(request.game_id, after_click),
        )

    def reset_game(self, request: ResetGameRequest) -> GameResponse:
        """Wipe the board: back to placement, or to the fixed opening."""
        stored_model = self._fetch_game(request.game_id)
        engine = GameEngine.from_model(stored_model)
        if request.fixed_opening:
            engine.set_fixed_opening()
        else:
            engine.reset()

        after_reset = engine.to_model()
        self.repo.update_game(request.game_id, after_reset)
        return self._create_game_response(request.game_id, after_reset)

    def delete_game(self, request: DeleteGameRequest) -> None:
        """Handle a request to delete a Game record."""
        self._fetch_game(request.game_id)
        self.repo.delete_game(request.game_id)

    # -- Internal helpers --
    def _create_game_response(self, game_id: UUID, model: GameModel) -> GameResponse:
        """Convert info in GameModel to a GameResponse (for game with given ID.)"""
        engine = GameEngine.from_model(model)
        return GameResponse(
            game_id=game_id,
            board=model.board,
            current_player=model.current_player,
            phase=model.phase,
            selected_square=model.selected_square,
            valid_moves=engine.valid_targets(),
            game_over=model.game_over,
            winner=model.winner,
        )

    def _fetch_game(self, game_id: UUID) -> GameModel:
        """Attempt to find the game in the repository and raise error if it fails."""
        game_model = self.repo.get_game(game_id)
        if game_model is None:
            raise RepositoryError(f"Game with {game_id=} not found.")
        return game_model
