"""Unit tests for src/db/repository.py"""

from uuid import uuid4

from src.db.repository import InMemoryGameRepository
from src.latrones.game import GameEngine


def test_create_and_get_game(repository: InMemoryGameRepository) -> None:
    model = GameEngine().to_model()
    stored, game_id = repository.create_game(model)
    assert stored == model
    assert repository.get_game(game_id) == model


def test_get_unknown_game(repository: InMemoryGameRepository) -> None:
    assert repository.get_game(uuid4()) is None


def test_update_game(repository: InMemoryGameRepository) -> None:
    _, game_id = repository.create_game(GameEngine().to_model())
    updated = GameEngine.with_fixed_opening().to_model()

    assert repository.update_game(game_id, updated) == updated
    assert repository.get_game(game_id) == updated


def test_update_unknown_game(repository: InMemoryGameRepository) -> None:
    """Nothing gets created by an update"""
    game_id = uuid4()
    assert repository.update_game(game_id, GameEngine().to_model()) is None
    assert repository.get_game(game_id) is None


def test_delete_game(repository: InMemoryGameRepository) -> None:
    model = GameEngine().to_model()
    _, game_id = repository.create_game(model)

    assert repository.delete_game(game_id) == model
    assert repository.get_game(game_id) is None
    assert repository.delete_game(game_id) is None
