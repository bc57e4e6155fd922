"""
Minimax Search with Alpha-Beta Pruning

Exhaustive search of the tic-tac-toe game tree. The tree is at most 9 plies
deep, so every line is searched to the end and the result is the exact
game-theoretic value: no depth limit, heuristic evaluation, move ordering or
transposition table.

Key Concepts:
    - Cross is the maximizer, Nought the minimizer
    - Leaf scores come from classify(): +1 Cross win, -1 Nought win, 0 draw
    - Candidate cells are always scanned in ascending index order
    - The best value found so far is passed down as the new bound
      (beta for the minimizer, alpha for the maximizer)

Tie-break:
    At the root a move only replaces the current best on strict improvement,
    so the lowest index among equally good cells wins for both players.

Algorithm Complexity:
    - Without pruning: at most 9! = 362,880 leaves
    - Alpha-beta visits far fewer nodes; the returned value is unchanged
"""

import logging
import math
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from tictactoe_engine.board.bitboard import BoardState, PlayerType
from tictactoe_engine.errors import NoLegalMoves
from tictactoe_engine.evaluation.classifier import (
    CROSS_WIN_SCORE,
    NOUGHT_WIN_SCORE,
    classify,
    terminal_score,
)

logger = logging.getLogger(__name__)

# Sentinels just outside the attainable score range
ABOVE_MAX_SCORE = CROSS_WIN_SCORE + 1
BELOW_MIN_SCORE = NOUGHT_WIN_SCORE - 1


@dataclass
class SearchResult:
    """
    Result of a root search.

    Attributes:
        best_move: Chosen cell index
        score: Value of the position after best_move (+1 / 0 / -1)
        nodes: Number of positions visited
        scores: Exact score of every candidate cell
    """
    best_move: int
    score: int
    nodes: int
    scores: Dict[int, int] = field(default_factory=dict)


def minimax(
    player: PlayerType,
    board: BoardState,
    alpha: float = -math.inf,
    beta: float = math.inf,
    nodes_searched: Optional[List[int]] = None,
) -> int:
    """
    Minimax search with alpha-beta pruning.

    Args:
        player: Player to move in this position
        board: Position to evaluate (not modified)
        alpha: Best score already guaranteed to the maximizer (Cross)
        beta: Best score already guaranteed to the minimizer (Nought)
        nodes_searched: Optional mutable list [count] to track positions visited

    Returns:
        int: +1 if Cross wins, -1 if Nought wins, 0 for a draw (exact inside
        the (alpha, beta) window, a bound outside it)

    Example:
        If the maximizer above already has a line worth 0 (alpha=0) and the
        minimizer finds a reply worth 0 here, the minimizer stops: the
        maximizer will never choose this branch.
    """
    if nodes_searched is not None:
        nodes_searched[0] += 1

    score = terminal_score(classify(board))
    if score is not None:
        return score

    next_player = player.switch()

    if player is PlayerType.NOUGHT:
        # Minimizing player (wants lowest score)
        best = ABOVE_MAX_SCORE
        for index in board.empty_cells():
            candidate = minimax(
                next_player,
                board.with_mark(player, index),
                alpha,
                best,
                nodes_searched,
            )
            best = min(best, candidate)

            # Maximizer above will never allow this branch
            if best <= alpha:
                break
        return best

    else:
        # Maximizing player (wants highest score)
        best = BELOW_MIN_SCORE
        for index in board.empty_cells():
            candidate = minimax(
                next_player,
                board.with_mark(player, index),
                best,
                beta,
                nodes_searched,
            )
            best = max(best, candidate)

            # Minimizer above will never allow this branch
            if best >= beta:
                break
        return best


def analyse(player: PlayerType, board: BoardState) -> SearchResult:
    """
    Search every empty cell and pick the best one.

    Each candidate is searched with a full window so its score is exact.

    Args:
        player: Player to move
        board: Current position (not modified)

    Returns:
        SearchResult with the chosen cell, its score, node count and the
        score of every candidate

    Raises:
        NoLegalMoves: If the position is already won, drawn or full
    """
    state = classify(board)
    empty_cells = board.empty_cells()
    if state.is_terminal or not empty_cells:
        raise NoLegalMoves(f"No legal moves available ({state})")

    maximizing = player is PlayerType.CROSS
    next_player = player.switch()

    best_move = None
    best_score = -math.inf if maximizing else math.inf
    scores = {}
    nodes = [0]

    for index in empty_cells:
        score = minimax(
            next_player,
            board.with_mark(player, index),
            -math.inf,
            math.inf,
            nodes_searched=nodes,
        )
        scores[index] = score

        # Strict improvement only: the first (lowest) index keeps ties
        if maximizing:
            if score > best_score:
                best_score = score
                best_move = index
        else:
            if score < best_score:
                best_score = score
                best_move = index

    logger.debug(
        f"Search complete: player={player.name}, best_move={best_move}, "
        f"score={best_score}, nodes={nodes[0]}"
    )

    return SearchResult(best_move=best_move, score=best_score, nodes=nodes[0], scores=scores)


def find_best_move(player: PlayerType, board: BoardState) -> int:
    """
    Find the optimal cell for the player to move.

    Args:
        player: Player to move
        board: Current position (not modified)

    Returns:
        Cell index (0-8); the lowest index among equally good cells

    Raises:
        NoLegalMoves: If the position is not in progress
    """
    return analyse(player, board).best_move


def position_value(player: PlayerType, board: BoardState) -> int:
    """
    Exact value of a position with player to move.

    Returns:
        +1 (Cross wins), 0 (draw) or -1 (Nought wins) under optimal play
    """
    return minimax(player, board)


def principal_variation(player: PlayerType, board: BoardState) -> List[int]:
    """
    Line of play when both sides follow find_best_move.

    Args:
        player: Player to move
        board: Starting position (not modified)

    Returns:
        Cells played until the game ends (empty if already terminal)
    """
    board = board.copy()
    line = []
    while not classify(board).is_terminal:
        index = find_best_move(player, board)
        board.mark(player, index)
        line.append(index)
        player = player.switch()
    return line
