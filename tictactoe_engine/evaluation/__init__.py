"""
Evaluation Module

This module decides the outcome of a board. Tic-tac-toe is small enough to be
searched to the end, so there is no heuristic evaluation: a position is
either won, drawn or still in progress.

Key Components:
    - WinningPattern: The 8 winning lines as 9-bit masks
    - classify: BoardState → GameState
    - terminal_score: GameState → +1 / 0 / -1 (None while in progress)

Data Flow:
    BoardState → classify() → GameState → terminal_score() → int
                                          +1 = Cross wins
                                          -1 = Nought wins
"""

from tictactoe_engine.evaluation.classifier import (
    DRAW,
    IN_PROGRESS,
    GameState,
    Outcome,
    classify,
    terminal_score,
)
from tictactoe_engine.evaluation.patterns import WINNING_PATTERNS, WinningPattern

__all__ = [
    'DRAW',
    'IN_PROGRESS',
    'GameState',
    'Outcome',
    'classify',
    'terminal_score',
    'WINNING_PATTERNS',
    'WinningPattern',
]
