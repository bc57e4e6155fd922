"""
Engine Exceptions

Every rejection is raised before any state changes, so a caller that catches
one of these can keep using the same Game.

Hierarchy:
    EngineError
        InvalidIndex   - cell index outside 0..8 (also a ValueError)
        CellOccupied   - target cell already taken (also a ValueError)
        GameOver       - move attempted on a finished game
        InvalidBoard   - masks or layout text that cannot describe a board
        NoLegalMoves   - search invoked on a finished/full board (usage error)
"""


class EngineError(Exception):
    """Base class for all tic-tac-toe engine errors."""


class InvalidIndex(EngineError, ValueError):
    """Raised when a cell index is outside 0..8."""

    def __init__(self, index):
        self.index = index
        super().__init__(f"Invalid cell index {index!r}. Must be 0-8.")


class CellOccupied(EngineError, ValueError):
    """Raised when a move targets a cell that is already taken."""

    def __init__(self, index: int):
        self.index = index
        super().__init__(f"Cell {index} is already occupied")


class GameOver(EngineError):
    """Raised when a move is attempted after the game has finished."""

    def __init__(self, state):
        self.state = state
        super().__init__(f"Game is already over ({state})")


class InvalidBoard(EngineError, ValueError):
    """Raised for masks or layouts that violate the board invariants."""


class NoLegalMoves(EngineError, RuntimeError):
    """
    Raised when the search is asked to move on a terminal position.

    This is a programming error on the caller's side: the search must only
    be invoked while the game is in progress.
    """
