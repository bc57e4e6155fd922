"""
Bit-packed Board State

The 3x3 grid is stored as two 9-bit masks, one per player. Cell 0 (top-left)
is the highest bit and cell 8 (bottom-right) the lowest:

    index:  0 1 2        bit:  8 7 6
            3 4 5              5 4 3
            6 7 8              2 1 0

    bit(index) = INITIAL_MASK >> index

Invariant:
    noughts & crosses == 0  (no cell is claimed by both players)

The invariant is checked whenever a board is built from raw masks. mark()
does not check occupancy; callers must verify the cell is empty first.
"""

import operator
from enum import Enum, IntEnum
from typing import List, Tuple

from tictactoe_engine.errors import InvalidBoard, InvalidIndex

NUM_CELLS = 9
INITIAL_MASK = 0b100_000_000  # bit for cell 0
FULL_MASK = 0b111_111_111


class PlayerType(Enum):
    """The two players. Cross maximizes, Nought minimizes."""
    NOUGHT = "nought"
    CROSS = "cross"

    def switch(self) -> "PlayerType":
        """Get the other player."""
        return PlayerType.CROSS if self is PlayerType.NOUGHT else PlayerType.NOUGHT

    @property
    def symbol(self) -> str:
        return "O" if self is PlayerType.NOUGHT else "X"


class CellValue(IntEnum):
    """Contents of a single cell, as returned by BoardState.decode()."""
    EMPTY = 0
    NOUGHT = 1
    CROSS = 2

    def __str__(self) -> str:
        if self is CellValue.NOUGHT:
            return "O"
        if self is CellValue.CROSS:
            return "X"
        return " "


def validate_index(index) -> int:
    """
    Check that index names a cell.

    Args:
        index: Candidate cell index

    Returns:
        The index as a plain int

    Raises:
        InvalidIndex: If index is not an integer in 0..8
    """
    if isinstance(index, bool):
        raise InvalidIndex(index)
    try:
        index = operator.index(index)
    except TypeError:
        raise InvalidIndex(index) from None
    if not 0 <= index < NUM_CELLS:
        raise InvalidIndex(index)
    return index


def cell_mask(index: int) -> int:
    """Bit for a cell index."""
    return INITIAL_MASK >> validate_index(index)


def _validate_mask(name: str, mask) -> int:
    """Coerce a persisted mask (int, numpy integer, ...) to a plain 9-bit int."""
    if isinstance(mask, bool):
        raise InvalidBoard(f"{name} mask must be an integer, got {mask!r}")
    try:
        mask = operator.index(mask)
    except TypeError:
        raise InvalidBoard(f"{name} mask must be an integer, got {mask!r}") from None
    if mask < 0 or mask > FULL_MASK:
        raise InvalidBoard(f"{name} mask {mask:#b} does not fit in 9 bits")
    return mask


class BoardState:
    """
    Two disjoint 9-bit masks, one per player.

    Attributes:
        noughts: Mask of cells claimed by Nought
        crosses: Mask of cells claimed by Cross
    """

    __slots__ = ("noughts", "crosses")

    def __init__(self, noughts: int = 0, crosses: int = 0):
        noughts = _validate_mask("noughts", noughts)
        crosses = _validate_mask("crosses", crosses)

        if noughts & crosses:
            raise InvalidBoard(
                f"Masks overlap: noughts={noughts:09b} crosses={crosses:09b}"
            )

        self.noughts = noughts
        self.crosses = crosses

    @classmethod
    def from_masks(cls, noughts: int, crosses: int) -> "BoardState":
        """Build a board from previously persisted masks."""
        return cls(noughts, crosses)

    def is_empty(self, index: int) -> bool:
        """True if neither player has claimed the cell."""
        return (self.occupied_mask() & cell_mask(index)) == 0

    def mark(self, player: PlayerType, index: int) -> None:
        """
        Claim a cell for a player.

        The cell must be empty; marking an occupied cell breaks the
        disjointness invariant.

        Raises:
            InvalidIndex: If index is outside 0..8
        """
        bit = cell_mask(index)
        if player is PlayerType.NOUGHT:
            self.noughts |= bit
        else:
            self.crosses |= bit

    def with_mark(self, player: PlayerType, index: int) -> "BoardState":
        """Copy of this board with one more cell claimed."""
        board = self.copy()
        board.mark(player, index)
        return board

    def mask_for(self, player: PlayerType) -> int:
        return self.noughts if player is PlayerType.NOUGHT else self.crosses

    def occupied_mask(self) -> int:
        return self.noughts | self.crosses

    def empty_cells(self) -> List[int]:
        """Empty cell indices in ascending order."""
        occupied = self.occupied_mask()
        return [i for i in range(NUM_CELLS) if not occupied & (INITIAL_MASK >> i)]

    def decode(self) -> List[CellValue]:
        """
        Expand the masks into 9 cell values, row-major.

        Returns:
            List of CellValue, index 0 = top-left
        """
        cells = []
        mask = INITIAL_MASK
        for _ in range(NUM_CELLS):
            if self.noughts & mask:
                cells.append(CellValue.NOUGHT)
            elif self.crosses & mask:
                cells.append(CellValue.CROSS)
            else:
                cells.append(CellValue.EMPTY)
            mask >>= 1
        return cells

    def key(self) -> Tuple[int, int]:
        """Hashable snapshot of the board, e.g. for caching."""
        return self.noughts, self.crosses

    def copy(self) -> "BoardState":
        board = BoardState.__new__(BoardState)
        board.noughts = self.noughts
        board.crosses = self.crosses
        return board

    def __eq__(self, other) -> bool:
        if not isinstance(other, BoardState):
            return NotImplemented
        return self.key() == other.key()

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return f"BoardState(noughts={self.noughts:#011b}, crosses={self.crosses:#011b})"
