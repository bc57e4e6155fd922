"""
Winning Patterns

The 8 straight lines of the 3x3 grid as 9-bit masks (same bit layout as
BoardState: cell 0 is the highest bit).

Each pattern also knows the two endpoints of its line as (x, y) pairs,
x = column and y = row, for drawing a strike-through.
"""

from enum import Enum
from typing import List, Tuple

from tictactoe_engine.board.bitboard import INITIAL_MASK, NUM_CELLS

Point = Tuple[int, int]


class WinningPattern(Enum):
    """A winning line. The value is its 9-bit mask."""
    ROW0 = 0b111_000_000
    ROW1 = 0b000_111_000
    ROW2 = 0b000_000_111
    COL0 = 0b100_100_100
    COL1 = 0b010_010_010
    COL2 = 0b001_001_001
    DIA0 = 0b100_010_001  # top-left to bottom-right
    DIA1 = 0b001_010_100  # top-right to bottom-left

    @property
    def mask(self) -> int:
        return self.value

    @property
    def points(self) -> Tuple[Point, Point]:
        """Endpoints ((x1, y1), (x2, y2)) of the line."""
        return PATTERN_POINTS[self]

    @property
    def cells(self) -> List[int]:
        """The three cell indices covered by the line."""
        return [i for i in range(NUM_CELLS) if self.value & (INITIAL_MASK >> i)]

    def covered_by(self, mask: int) -> bool:
        return (mask & self.value) == self.value


PATTERN_POINTS = {
    WinningPattern.ROW0: ((0, 0), (2, 0)),
    WinningPattern.ROW1: ((0, 1), (2, 1)),
    WinningPattern.ROW2: ((0, 2), (2, 2)),
    WinningPattern.COL0: ((0, 0), (0, 2)),
    WinningPattern.COL1: ((1, 0), (1, 2)),
    WinningPattern.COL2: ((2, 0), (2, 2)),
    WinningPattern.DIA0: ((0, 0), (2, 2)),
    WinningPattern.DIA1: ((0, 2), (2, 0)),
}

# Scan order used by the classifier. Changing it changes which pattern is
# reported for boards with more than one complete line.
WINNING_PATTERNS = (
    WinningPattern.ROW0,
    WinningPattern.ROW1,
    WinningPattern.ROW2,
    WinningPattern.COL0,
    WinningPattern.COL1,
    WinningPattern.COL2,
    WinningPattern.DIA0,
    WinningPattern.DIA1,
)
