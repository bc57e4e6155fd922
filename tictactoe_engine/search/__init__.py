"""
Search Module

This module implements the engine's opponent: an exhaustive minimax search
with alpha-beta pruning that always returns the game-theoretically optimal
cell.

Key Components:
    - minimax: Core recursive search (Cross maximizes, Nought minimizes)
    - find_best_move: Root-level search, lowest index wins ties
    - analyse: Root search with per-cell scores and node count
    - position_value / principal_variation: Value and best line of a position
"""

from tictactoe_engine.search.minimax import (
    SearchResult,
    analyse,
    find_best_move,
    minimax,
    position_value,
    principal_variation,
)

__all__ = [
    'SearchResult',
    'analyse',
    'find_best_move',
    'minimax',
    'position_value',
    'principal_variation',
]
