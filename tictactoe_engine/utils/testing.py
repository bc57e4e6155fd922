"""
Engine Testing and Verification

Tools for checking that the search plays perfectly.

Test Suites:
    1. Tactical positions: small positions with a known best move
       - Win now, forced block, win instead of block
       - Each position lists every cell that achieves the optimal value

    2. Self-play: the engine plays both sides from the empty board.
       Tic-tac-toe is a forced draw, so every self-play game must be drawn.

    3. Exhaustive check: the engine plays one side while the opponent tries
       every legal move at every turn. The engine must never lose.

Evaluation Metrics:
    - Correct Moves: Positions where the engine found a best move
    - Nodes Searched: Positions visited by the search
    - Outcomes: Count of final results over all enumerated games
"""

import logging
import time
from collections import Counter
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from tqdm import tqdm

from tictactoe_engine.board.bitboard import BoardState, PlayerType
from tictactoe_engine.board.representation import parse_layout
from tictactoe_engine.errors import EngineError
from tictactoe_engine.evaluation.classifier import GameState, Outcome, classify
from tictactoe_engine.game.controller import Game
from tictactoe_engine.search.minimax import analyse, find_best_move

logger = logging.getLogger(__name__)


@dataclass
class TestPosition:
    """
    A test position with expected best move(s).

    Attributes:
        id: Position identifier (e.g., "TT.01")
        layout: Board in layout notation (see board.representation)
        player: Player to move
        best_moves: Every cell that achieves the optimal value
        description: Human-readable description of the position
    """
    id: str
    layout: str
    player: PlayerType
    best_moves: List[int]
    description: str = ""

    # Keep pytest from collecting this class
    __test__ = False


@dataclass
class TestResult:
    """
    Result of testing a single position.

    Attributes:
        position: The test position
        found_move: Cell the engine chose (None if the search failed)
        score: Value of the chosen move
        correct: Whether the engine found a best move
        time_taken: Time spent searching (seconds)
        nodes_searched: Number of positions visited
        error: Error message if the search failed
    """
    position: TestPosition
    found_move: Optional[int]
    score: int
    correct: bool
    time_taken: float
    nodes_searched: int = 0
    error: Optional[str] = None

    __test__ = False


@dataclass
class SelfPlayResult:
    """A finished game between two engine players."""
    starting_player: PlayerType
    state: GameState
    moves: List[int] = field(default_factory=list)


# ============================================================================
# Tactical Test Suite
# ============================================================================

TACTICS_POSITIONS = [
    TestPosition(
        id="TT.01",
        layout="XX./OO./...",
        player=PlayerType.CROSS,
        best_moves=[2],
        description="Cross completes the top row",
    ),
    TestPosition(
        id="TT.02",
        layout="XX./.O./...",
        player=PlayerType.NOUGHT,
        best_moves=[2],
        description="Nought must block the top row",
    ),
    TestPosition(
        id="TT.03",
        layout="X.O/.XO/...",
        player=PlayerType.CROSS,
        best_moves=[8],
        description="Cross wins on the diagonal instead of blocking the right column",
    ),
]


def evaluate_position(position: TestPosition, verbose: bool = False) -> TestResult:
    """
    Evaluate a single test position.

    Args:
        position: Test position to evaluate
        verbose: If True, print detailed output

    Returns:
        TestResult with the engine's move and whether it was correct
    """
    board = parse_layout(position.layout)

    if verbose:
        print(f"\nTesting {position.id}: {position.description}")
        print(f"Layout: {position.layout} ({position.player.name} to move)")
        print(f"Expected moves: {position.best_moves}")

    start_time = time.time()

    try:
        result = analyse(position.player, board)
    except EngineError as e:
        logger.error(f"Error evaluating position {position.id}: {e}")
        return TestResult(
            position=position,
            found_move=None,
            score=0,
            correct=False,
            time_taken=time.time() - start_time,
            error=str(e),
        )

    time_taken = time.time() - start_time
    correct = result.best_move in position.best_moves

    if verbose:
        print(f"Engine found: {result.best_move} (score: {result.score})")
        print(f"Nodes searched: {result.nodes:,}")
        print(f"Result: {'✓ CORRECT' if correct else '✗ WRONG'}")

    return TestResult(
        position=position,
        found_move=result.best_move,
        score=result.score,
        correct=correct,
        time_taken=time_taken,
        nodes_searched=result.nodes,
    )


def run_tactics_suite(
    positions: Optional[List[TestPosition]] = None,
    verbose: bool = False,
) -> Dict[str, Any]:
    """
    Run a tactical test suite.

    Args:
        positions: Positions to test (default: TACTICS_POSITIONS)
        verbose: If True, print detailed results

    Returns:
        Dictionary with test results:
            - score: Number of correct positions
            - total: Total number of positions
            - percentage: Success percentage
            - results: List of TestResult objects
            - total_nodes: Positions visited over the whole suite
            - total_time: Time spent searching
    """
    if positions is None:
        positions = TACTICS_POSITIONS

    results = [evaluate_position(position, verbose=verbose) for position in positions]

    correct_count = sum(1 for r in results if r.correct)
    total_time = sum(r.time_taken for r in results)
    percentage = (correct_count / len(positions) * 100) if positions else 0

    logger.info(f"Tactics suite: {correct_count}/{len(positions)} correct")

    return {
        'score': correct_count,
        'total': len(positions),
        'percentage': percentage,
        'results': results,
        'total_nodes': sum(r.nodes_searched for r in results),
        'total_time': total_time,
    }


# ============================================================================
# Self-play and exhaustive verification
# ============================================================================

def play_self_play(starting_player: PlayerType = PlayerType.CROSS) -> SelfPlayResult:
    """
    Let the engine play both sides of a game from the empty board.

    Args:
        starting_player: Player to move first

    Returns:
        SelfPlayResult with the final state and the cells played
    """
    game = Game(starting_player, auto_play_opponent=False)
    moves = []

    while not game.is_over():
        index = find_best_move(game.current_player, game.board)
        game.attempt_move(index)
        moves.append(index)

    state = game.current_state()
    logger.info(f"Self-play ({starting_player.name} starts): {state} after {moves}")
    return SelfPlayResult(starting_player=starting_player, state=state, moves=moves)


def verify_never_loses(
    ai_player: PlayerType,
    starting_player: PlayerType = PlayerType.CROSS,
    show_progress: bool = False,
) -> Counter:
    """
    Enumerate every game the engine can face as ai_player.

    The engine answers with find_best_move; the opponent tries every empty
    cell at every turn.

    Args:
        ai_player: Side played by the engine
        starting_player: Player to move first
        show_progress: Show a tqdm progress bar over the opponent's first moves

    Returns:
        Counter mapping Outcome to the number of games ending that way
    """
    outcomes: Counter = Counter()
    replies: Dict[Tuple[int, int], int] = {}

    def engine_reply(board: BoardState) -> int:
        key = board.key()
        if key not in replies:
            replies[key] = find_best_move(ai_player, board)
        return replies[key]

    def explore(board: BoardState, player: PlayerType) -> None:
        state = classify(board)
        if state.is_terminal:
            outcomes[state.outcome] += 1
            return

        if player is ai_player:
            explore(board.with_mark(player, engine_reply(board)), player.switch())
        else:
            for index in board.empty_cells():
                explore(board.with_mark(player, index), player.switch())

    root = BoardState()
    player = starting_player
    if player is ai_player:
        root = root.with_mark(player, engine_reply(root))
        player = player.switch()

    first_moves = tqdm(
        root.empty_cells(),
        desc=f"{ai_player.name} engine",
        disable=not show_progress,
    )
    for index in first_moves:
        explore(root.with_mark(player, index), player.switch())

    lost = outcomes[Outcome.NOUGHT_WINS if ai_player is PlayerType.CROSS else Outcome.CROSS_WINS]
    logger.info(
        f"Exhaustive check ({ai_player.name} engine, {starting_player.name} starts): "
        f"{sum(outcomes.values())} games, {lost} lost, {len(replies)} positions searched"
    )
    return outcomes
