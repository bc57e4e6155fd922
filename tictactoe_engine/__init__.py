"""
Tic-Tac-Toe Engine

A 3x3 noughts-and-crosses engine with a bit-packed board, a win/draw
classifier and an exhaustive minimax opponent that never loses.

## Architecture

The engine is organized into several key modules:

1. **board**: Board representation
   - BoardState: two 9-bit masks, one per player
   - Coordinate, layout-notation and numpy conversions

2. **evaluation**: Outcome of a board
   - The 8 winning lines as bit masks
   - classify(): Nought win / Cross win / draw / in progress

3. **search**: Search algorithms
   - Minimax with alpha-beta pruning, searched to the end of the game
   - Deterministic tie-break: lowest cell index

4. **game**: Turn orchestration
   - Validated moves, player alternation, optional engine replies
   - Resume a game from its two persisted masks

5. **utils**: Logging and verification
   - Tactical test positions, self-play, exhaustive never-loses check

## Quick Start

```python
from tictactoe_engine import PlayerType, new_game

game = new_game(PlayerType.CROSS, auto_play_opponent=True)
state = game.attempt_move(4)       # Cross takes the centre, engine replies
print(game.current_board(), state)
```

## Version

0.1.0
"""

__version__ = "0.1.0"
__license__ = "MIT"

from tictactoe_engine.board import BoardState, CellValue, PlayerType
from tictactoe_engine.config import GameConfig
from tictactoe_engine.errors import (
    CellOccupied,
    EngineError,
    GameOver,
    InvalidBoard,
    InvalidIndex,
    NoLegalMoves,
)
from tictactoe_engine.evaluation import GameState, Outcome, WinningPattern, classify
from tictactoe_engine.game import (
    Game,
    attempt_move,
    current_board,
    current_state,
    new_game,
    resume_game,
)
from tictactoe_engine.search import find_best_move, minimax

__all__ = [
    'BoardState',
    'CellValue',
    'PlayerType',
    'GameConfig',
    'CellOccupied',
    'EngineError',
    'GameOver',
    'InvalidBoard',
    'InvalidIndex',
    'NoLegalMoves',
    'GameState',
    'Outcome',
    'WinningPattern',
    'classify',
    'Game',
    'attempt_move',
    'current_board',
    'current_state',
    'new_game',
    'resume_game',
    'find_best_move',
    'minimax',
]
