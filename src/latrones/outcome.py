"""Checks for ending the game: elimination and immobilization"""

from typing import Optional

from src.latrones.board import Board
from src.latrones.moves import has_destinations
from src.latrones.pieces import Side


def is_immobilized(board: Board, side: Side) -> bool:
    """None of the side's pieces has anywhere to go (trivially true without pieces)"""
    return not any(
        has_destinations(board, index, side) for index in board.locate_side(side)
    )


def decide_winner(board: Board, side_to_move: Side) -> Optional[Side]:
    """
    The winner, if the game has ended. Order matters:

    1. opponent wiped out (and you still have pieces) --> you win
    2. you are wiped out (and the opponent still has pieces) --> opponent wins
    3. you cannot move any piece --> you lose
    """
    opponent = side_to_move.opponent
    own_count = board.count(side_to_move)
    opponent_count = board.count(opponent)

    if opponent_count == 0 and own_count > 0:
        return side_to_move
    if own_count == 0 and opponent_count > 0:
        return opponent
    if is_immobilized(board, side_to_move):
        return opponent
    return None
