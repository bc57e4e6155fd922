"""
Game State Classification

Derives the outcome of a board: a win for either player (with the completed
line), a draw, or a game still in progress.

Algorithm:
    1. Scan WINNING_PATTERNS in order (rows, columns, diagonals). For each
       pattern Nought is checked before Cross; the first complete line wins.
    2. No complete line: the board is a draw when every cell is claimed by
       exactly one player (noughts ^ crosses == FULL_MASK), otherwise the
       game is still in progress.

The scan order is fixed so that arbitrary (even corrupted) boards always
classify the same way.

Scoring Convention (used by the search):
    - Cross win  = +1 (Cross maximizes)
    - Nought win = -1 (Nought minimizes)
    - Draw       =  0
    Scores are not weighted by depth.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from tictactoe_engine.board.bitboard import FULL_MASK, BoardState, PlayerType
from tictactoe_engine.evaluation.patterns import WINNING_PATTERNS, WinningPattern

CROSS_WIN_SCORE = 1
NOUGHT_WIN_SCORE = -1
DRAW_SCORE = 0


class Outcome(Enum):
    NOUGHT_WINS = "nought_wins"
    CROSS_WINS = "cross_wins"
    DRAW = "draw"
    IN_PROGRESS = "in_progress"


@dataclass(frozen=True)
class GameState:
    """
    Outcome of a board, plus the completed line for wins.

    Attributes:
        outcome: NOUGHT_WINS, CROSS_WINS, DRAW or IN_PROGRESS
        pattern: The winning line (only set for wins)
    """
    outcome: Outcome
    pattern: Optional[WinningPattern] = None

    def __post_init__(self):
        is_win = self.outcome in (Outcome.NOUGHT_WINS, Outcome.CROSS_WINS)
        if is_win and self.pattern is None:
            raise ValueError(f"{self.outcome.name} requires a winning pattern")
        if not is_win and self.pattern is not None:
            raise ValueError(f"{self.outcome.name} cannot carry a winning pattern")

    @classmethod
    def nought_wins(cls, pattern: WinningPattern) -> "GameState":
        return cls(Outcome.NOUGHT_WINS, pattern)

    @classmethod
    def cross_wins(cls, pattern: WinningPattern) -> "GameState":
        return cls(Outcome.CROSS_WINS, pattern)

    @property
    def is_terminal(self) -> bool:
        return self.outcome is not Outcome.IN_PROGRESS

    @property
    def winner(self) -> Optional[PlayerType]:
        """The winning player, or None for draws and unfinished games."""
        if self.outcome is Outcome.NOUGHT_WINS:
            return PlayerType.NOUGHT
        if self.outcome is Outcome.CROSS_WINS:
            return PlayerType.CROSS
        return None

    def __str__(self) -> str:
        if self.pattern is not None:
            return f"{self.outcome.name}({self.pattern.name})"
        return self.outcome.name


DRAW = GameState(Outcome.DRAW)
IN_PROGRESS = GameState(Outcome.IN_PROGRESS)

# (pattern, mask) pairs in scan order
_PATTERN_MASKS = tuple((pattern, pattern.value) for pattern in WINNING_PATTERNS)


def classify(board: BoardState) -> GameState:
    """
    Classify a board.

    Args:
        board: Board to classify

    Returns:
        GameState: win (with pattern), DRAW or IN_PROGRESS
    """
    noughts = board.noughts
    crosses = board.crosses

    for pattern, p in _PATTERN_MASKS:
        if (noughts & p) == p:
            return GameState.nought_wins(pattern)
        elif (crosses & p) == p:
            return GameState.cross_wins(pattern)

    # Every cell claimed by exactly one player
    if (noughts ^ crosses) == FULL_MASK:
        return DRAW

    return IN_PROGRESS


def terminal_score(state: GameState) -> Optional[int]:
    """
    Score a terminal state for the search.

    Returns:
        +1 for a Cross win, -1 for a Nought win, 0 for a draw,
        None if the game is still in progress
    """
    if state.outcome is Outcome.CROSS_WINS:
        return CROSS_WIN_SCORE
    if state.outcome is Outcome.NOUGHT_WINS:
        return NOUGHT_WIN_SCORE
    if state.outcome is Outcome.DRAW:
        return DRAW_SCORE
    return None
