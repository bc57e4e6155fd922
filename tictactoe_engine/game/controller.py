"""
Turn Controller

Owns a single game session: validates and applies moves, alternates the
player to move and, when playing against the engine, answers every human
move with the search's reply within the same call.

Move Flow (attempt_move):
    1. Game already won/drawn      → GameOver
    2. Index outside 0..8          → InvalidIndex
    3. Cell already taken          → CellOccupied
    4. Mark the cell, switch player
    5. Auto-play on and game still in progress:
       find_best_move() for the new player, mark it, switch player
    6. Return classify(board)

All checks run before anything is changed, and the new position is built on a
copy that replaces the current board only once every step has succeeded. The
engine never resets itself after a terminal state; callers start a new Game.

Each Game must be owned by exactly one session. Games share no state, so no
locking is needed between them.
"""

import logging
from typing import List, Optional, Tuple

from tictactoe_engine.board.bitboard import BoardState, CellValue, PlayerType, validate_index
from tictactoe_engine.config import GameConfig, parse_player
from tictactoe_engine.errors import CellOccupied, GameOver
from tictactoe_engine.evaluation.classifier import GameState, classify
from tictactoe_engine.search.minimax import find_best_move

logger = logging.getLogger(__name__)


class Game:
    """
    A single tic-tac-toe session.

    Attributes:
        current_player: Player whose move is next
        auto_play_opponent: If True, the engine replies to every move

    Methods:
        attempt_move: Validate and apply a move (plus the engine's reply)
        current_board: The 9 cell values
        current_state: Outcome of the current board
    """

    def __init__(
        self,
        starting_player: PlayerType = PlayerType.CROSS,
        auto_play_opponent: bool = True,
        board: Optional[BoardState] = None,
    ):
        """
        Initialize a game.

        Args:
            starting_player: Player to move first (PlayerType or a name
                such as "x" or "nought")
            auto_play_opponent: Let the engine answer every move
            board: Position to continue from (default: empty board)

        Raises:
            ValueError: If starting_player is not a known player
        """
        self._board = board.copy() if board is not None else BoardState()
        self.current_player = parse_player(starting_player)
        self.auto_play_opponent = auto_play_opponent

    @classmethod
    def from_config(cls, config: GameConfig) -> "Game":
        return cls(config.starting_player, config.auto_play_opponent)

    @property
    def board(self) -> BoardState:
        """Copy of the current board."""
        return self._board.copy()

    def attempt_move(self, index: int) -> GameState:
        """
        Play a move for the current player.

        Args:
            index: Cell index (0-8)

        Returns:
            GameState after the move (and the engine's reply, if any)

        Raises:
            GameOver: If the game is already won or drawn
            InvalidIndex: If index is outside 0..8
            CellOccupied: If the cell is already taken
        """
        state = classify(self._board)
        if state.is_terminal:
            logger.debug(f"Move {index!r} rejected: game over ({state})")
            raise GameOver(state)

        index = validate_index(index)

        if not self._board.is_empty(index):
            logger.debug(f"Move {index} rejected: cell occupied")
            raise CellOccupied(index)

        board = self._board.copy()
        player = self.current_player

        board.mark(player, index)
        logger.debug(f"{player.name} plays {index}")
        player = player.switch()

        if self.auto_play_opponent and not classify(board).is_terminal:
            reply = find_best_move(player, board)
            board.mark(player, reply)
            logger.debug(f"{player.name} (engine) replies {reply}")
            player = player.switch()

        self._board = board
        self.current_player = player

        state = classify(board)
        if state.is_terminal:
            logger.info(f"Game over: {state}")
        return state

    def current_board(self) -> List[CellValue]:
        return self._board.decode()

    def current_state(self) -> GameState:
        return classify(self._board)

    def is_over(self) -> bool:
        return self.current_state().is_terminal

    def to_masks(self) -> Tuple[int, int]:
        """The (noughts, crosses) masks needed to resume this game later."""
        return self._board.key()

    def __repr__(self) -> str:
        return (
            f"Game(board={self._board!r}, current_player={self.current_player.name}, "
            f"auto_play_opponent={self.auto_play_opponent})"
        )


def new_game(starting_player: PlayerType, auto_play_opponent: bool) -> Game:
    """Start a game on an empty board."""
    return Game(starting_player, auto_play_opponent)


def resume_game(
    noughts_mask: int,
    crosses_mask: int,
    current_player: PlayerType,
    auto_play_opponent: bool,
) -> Game:
    """
    Restore a previously persisted game.

    Args:
        noughts_mask: 9-bit mask of Nought's cells
        crosses_mask: 9-bit mask of Cross's cells
        current_player: Player to move
        auto_play_opponent: Let the engine answer every move

    Raises:
        InvalidBoard: If the masks overlap or do not fit in 9 bits
    """
    board = BoardState.from_masks(noughts_mask, crosses_mask)
    return Game(current_player, auto_play_opponent, board=board)


def attempt_move(game: Game, index: int) -> GameState:
    return game.attempt_move(index)


def current_board(game: Game) -> List[CellValue]:
    return game.current_board()


def current_state(game: Game) -> GameState:
    return game.current_state()
