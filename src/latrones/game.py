"""
The GameEngine is the entrypoint into the domain layer for the service layer.

It holds the one and only game state and accepts a single kind of action: interacting with a square
(a click on the board, as the host forwards it). Everything else is a read accessor.
"""

import logging
from dataclasses import dataclass, field, fields
from enum import Enum, auto
from typing import Callable, Optional, Self

from src.core.exceptions import GameStateError
from src.core.models import GameModel
from src.core.shared_types import GamePhase, PlayerColor
from src.latrones.board import Board
from src.latrones.captures import jump_capture, resolve_flanks
from src.latrones.moves import Move, destinations, has_destinations
from src.latrones.outcome import decide_winner
from src.latrones.pieces import PIECES_PER_SIDE, Side
from src.latrones.square import BOARD_DIMENSIONS, Square, is_valid_index

logger = logging.getLogger(__name__)

# Fixed opening: every square of these columns is filled (H file for Light, A file for Dark)
FIXED_OPENING_COLUMNS: dict[Side, int] = {
    Side.LIGHT: BOARD_DIMENSIONS[0] - 1,
    Side.DARK: 0,
}


class Phase(Enum):
    PLACEMENT = auto()
    MOVEMENT = auto()


# --- TURN SUB-STATE ---
# Which piece (if any) the side to move is working with. A pending jump chain always has a piece.
@dataclass(frozen=True)
class Idle:
    """Nothing selected"""


@dataclass(frozen=True)
class Selected:
    square: int


@dataclass(frozen=True)
class ForcedJump:
    """The piece on `square` just jumped and may only continue with another jump"""

    square: int


TurnState = Idle | Selected | ForcedJump


def _no_pieces_placed() -> dict[Side, int]:
    return {side: 0 for side in Side}


@dataclass
class GameEngine:
    # --- DOMAIN LAYER API CALLED BY SERVICE---

    board: Board = field(default_factory=Board)
    current_player: Side = Side.LIGHT
    phase: Phase = Phase.PLACEMENT
    placed: dict[Side, int] = field(default_factory=_no_pieces_placed)
    turn: TurnState = field(default_factory=Idle)
    capturing_piece: Optional[int] = None
    game_over: bool = False
    winner: Optional[Side] = None

    @classmethod
    def with_fixed_opening(cls) -> Self:
        """Skip the placement phase: both sides start on opposite edge columns."""
        engine = cls()
        engine.set_fixed_opening()
        return engine

    def reset(self) -> None:
        """Back to an empty board, Light to place the first piece."""
        fresh = GameEngine()
        for state_field in fields(self):
            setattr(self, state_field.name, getattr(fresh, state_field.name))
        logger.info("game reset")

    def set_fixed_opening(self) -> None:
        self.reset()
        for side, col in FIXED_OPENING_COLUMNS.items():
            for row in range(BOARD_DIMENSIONS[1]):
                self.board.place(Square(row, col).to_index(), side)
            self.placed[side] = PIECES_PER_SIDE

        self.phase = Phase.MOVEMENT
        self.current_player = Side.LIGHT

        # nothing is flanked in this opening, but evaluate it like any other position
        resolve_flanks(self.board, self.current_player)
        self._update_outcome()
        logger.info("fixed opening set up")

    def interact(self, index: int) -> bool:
        """
        Act on a click on square `index`.
        ----

        Returns True if anything changed (a piece was placed, selected or moved). A rejected
        action returns False and leaves the state exactly as it was.
        """
        if self.game_over or not is_valid_index(index):
            return False

        handler = TRANSITIONS[(self.phase, type(self.turn))]
        return handler(self, index)

    # --- READ ACCESSORS ---
    @property
    def selected_square(self) -> Optional[int]:
        if isinstance(self.turn, Idle):
            return None
        return self.turn.square

    @property
    def must_continue_jump(self) -> bool:
        return isinstance(self.turn, ForcedJump)

    @property
    def light_placed(self) -> int:
        return self.placed[Side.LIGHT]

    @property
    def dark_placed(self) -> int:
        return self.placed[Side.DARK]

    def board_snapshot(self) -> list[int]:
        """64 occupancy codes: 0 = empty, 1 = light, 2 = dark"""
        return self.board.to_codes()

    def valid_targets(self) -> list[int]:
        """
        The squares worth highlighting right now:
        * placement: every empty square
        * movement, nothing selected: the pieces that can be selected
        * movement, piece selected: where it can go (only jumps while a jump chain is pending)
        """
        if self.phase is Phase.PLACEMENT:
            return self.board.empty_squares()

        if isinstance(self.turn, Idle):
            return [
                index
                for index in self.board.locate_side(self.current_player)
                if has_destinations(self.board, index, self.current_player)
            ]

        selected = self.turn.square
        # the selected piece might have been captured in the meantime
        if not self.board.belongs_to(selected, self.current_player):
            return []
        return sorted(
            destinations(
                self.board,
                selected,
                self.current_player,
                jumps_only=self.must_continue_jump,
            )
        )

    # --- CONVERSION FOR THE SERVICE LAYER ---
    def to_model(self) -> GameModel:
        """Encode into a format the Service layer uses"""
        return GameModel(
            board=self.board_snapshot(),
            current_player=_side_to_color(self.current_player),
            phase=GamePhase[self.phase.name].value,
            light_placed=self.light_placed,
            dark_placed=self.dark_placed,
            selected_square=self.selected_square,
            must_continue_jump=self.must_continue_jump,
            capturing_piece=self.capturing_piece,
            game_over=self.game_over,
            winner=_side_to_color(self.winner) if self.winner else None,
        )

    @classmethod
    def from_model(cls, model: GameModel) -> Self:
        """Rebuild the engine from the information the Service layer has. Inconsistent data raises GameStateError."""
        try:
            board = Board.from_codes(model.board)
        except ValueError as err:
            raise GameStateError(f"Invalid board: {err}") from err

        try:
            phase = Phase[GamePhase(model.phase).name]
        except ValueError as err:
            raise GameStateError(
                f"Invalid phase: {model.phase!r}. \nPick one from {','.join(GamePhase)}"
            ) from err
        current_player = _color_to_side(model.current_player)

        placed = {Side.LIGHT: model.light_placed, Side.DARK: model.dark_placed}
        if any(not 0 <= count <= PIECES_PER_SIDE for count in placed.values()):
            raise GameStateError(
                f"Placement counters must lie within [0, {PIECES_PER_SIDE}]: {placed}"
            )

        turn = _turn_from_model(model)
        if phase is Phase.PLACEMENT:
            if not isinstance(turn, Idle):
                raise GameStateError("Cannot select a piece during the placement phase.")
            if placed[current_player] >= PIECES_PER_SIDE:
                raise GameStateError(
                    f"{model.current_player} has already placed all {PIECES_PER_SIDE} pieces."
                )

        if model.capturing_piece is not None and not is_valid_index(
            model.capturing_piece
        ):
            raise GameStateError(f"Invalid capturing piece: {model.capturing_piece!r}")

        if model.winner is not None and not model.game_over:
            raise GameStateError("A winner is only known once the game is over.")

        return cls(
            board=board,
            current_player=current_player,
            phase=phase,
            placed=placed,
            turn=turn,
            capturing_piece=model.capturing_piece,
            game_over=model.game_over,
            winner=_color_to_side(model.winner) if model.winner else None,
        )

    # -- PLACEMENT PHASE ---
    def _place(self, index: int) -> bool:
        """Drop a piece of the side to move onto an empty square"""
        if not self.board.is_empty(index):
            return False

        side = self.current_player
        self.board.place(index, side)
        self.placed[side] += 1
        logger.debug(
            "%s places on %s (%d/%d)",
            side.name,
            Square.from_index(index).to_algebraic(),
            self.placed[side],
            PIECES_PER_SIDE,
        )

        if all(count >= PIECES_PER_SIDE for count in self.placed.values()):
            self.phase = Phase.MOVEMENT
            self.current_player = Side.LIGHT
            logger.info("all pieces placed, movement phase starts")
        else:
            self._switch_player()

        resolve_flanks(self.board, side)
        self._update_outcome()
        return True

    # -- MOVEMENT PHASE ---
    def _select(self, index: int) -> bool:
        """Pick up one of your own pieces, provided it can go somewhere"""
        if not self._is_selectable(index):
            return False

        self.turn = Selected(index)
        self.capturing_piece = None
        logger.debug(
            "%s selects %s",
            self.current_player.name,
            Square.from_index(index).to_algebraic(),
        )
        return True

    def _act_on_selection(self, index: int) -> bool:
        """
        A piece is selected (possibly in the middle of a jump chain).
        ----

        1. Selected piece got captured --> forget it and treat the click as a fresh selection.
        2. Click on another of your movable pieces --> switch to that piece (abandons a jump chain).
        3. Pending jump chain --> anything but a jump is rejected.
        4. Otherwise try to move the selected piece there.
        """
        selected = self.turn.square

        if not self.board.belongs_to(selected, self.current_player):
            self.turn = Idle()
            return self._select(index)

        if index != selected and self._is_selectable(index):
            return self._select(index)

        attempted = Move(selected, index)
        if self.must_continue_jump and not attempted.is_jump:
            return False

        move = self._execute(attempted)
        if move is None:
            return False

        self._advance_turn(move)
        self._update_outcome()
        return True

    def _is_selectable(self, index: int) -> bool:
        return self.board.belongs_to(index, self.current_player) and has_destinations(
            self.board, index, self.current_player
        )

    def _execute(self, move: Move) -> Optional[Move]:
        """
        Carry out the move on the board, including its captures.
        ----

        Returns the move, or None when it is not allowed (nothing changes on the board then).
        """
        side = self.current_player
        legal = destinations(self.board, move.from_index, side, jumps_only=False)
        if move.to_index not in legal:
            return None

        # a piece that already captured this turn does not get to move again
        if self.capturing_piece == move.from_index:
            return None

        if move.is_jump and jump_capture(self.board, move, side):
            # a jump-capture is the piece's capture for this turn: no flanking scan
            self.capturing_piece = move.to_index
            return move

        self.board.relocate(move.from_index, move.to_index)
        logger.debug("%s moves %s", side.name, move.to_algebraic())

        capturing = resolve_flanks(self.board, side)
        if move.to_index in capturing and self.capturing_piece is None:
            self.capturing_piece = move.to_index
        return move

    def _advance_turn(self, move: Move) -> None:
        """Either keep jumping with the same piece or hand the turn over."""
        landed = self.board.belongs_to(move.to_index, self.current_player)

        # NOTE a jump-capture has just marked this piece as the capturing piece, so in practice
        # the turn always ends after a single jump.
        if move.is_jump and landed and self.capturing_piece != move.to_index:
            further_jumps = destinations(
                self.board, move.to_index, self.current_player, jumps_only=True
            )
            if further_jumps:
                self.turn = ForcedJump(move.to_index)
                return

        self._end_turn()

    def _end_turn(self) -> None:
        self.turn = Idle()
        self._switch_player()

    def _switch_player(self) -> None:
        self.current_player = self.current_player.opponent
        self.capturing_piece = None

    # --- CHECKS FOR ENDING THE GAME ---
    def _update_outcome(self) -> None:
        """Only the movement phase can end the game"""
        if self.phase is not Phase.MOVEMENT:
            return

        winner = decide_winner(self.board, self.current_player)
        if winner is None:
            return

        self.game_over = True
        self.winner = winner
        logger.info(
            "game over: %s wins (%s)", winner.name, self.board.to_diagram()
        )


# --- TRANSITION TABLE ---
# (phase, turn sub-state) --> handler of the clicked square.
# The placement phase never has a selection, but route every sub-state anyway.
TRANSITIONS: dict[tuple[Phase, type], Callable[[GameEngine, int], bool]] = {
    (Phase.PLACEMENT, Idle): GameEngine._place,
    (Phase.PLACEMENT, Selected): GameEngine._place,
    (Phase.PLACEMENT, ForcedJump): GameEngine._place,
    (Phase.MOVEMENT, Idle): GameEngine._select,
    (Phase.MOVEMENT, Selected): GameEngine._act_on_selection,
    (Phase.MOVEMENT, ForcedJump): GameEngine._act_on_selection,
}


# --- HELPERS ---
def _side_to_color(side: Side) -> str:
    return PlayerColor[side.name].value


def _color_to_side(color: str) -> Side:
    try:
        return Side[PlayerColor(color).name]
    except ValueError as err:
        raise GameStateError(
            f"Invalid player color: {color!r}. \nPick one from {','.join(PlayerColor)}"
        ) from err


def _turn_from_model(model: GameModel) -> TurnState:
    if model.selected_square is None:
        if model.must_continue_jump:
            raise GameStateError("A jump chain needs a selected piece.")
        return Idle()

    if not is_valid_index(model.selected_square):
        raise GameStateError(f"Invalid selected square: {model.selected_square!r}")
    if model.must_continue_jump:
        return ForcedJump(model.selected_square)
    return Selected(model.selected_square)
