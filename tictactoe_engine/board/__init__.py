"""
Board Module

This module holds the board-state model and its conversions.

Key Components:
    - BoardState: Two 9-bit masks, one per player (cell 0 = highest bit)
    - PlayerType / CellValue: Player and cell enumerations
    - Representation helpers: coordinates, layout notation, numpy arrays

Data Flow:
    BoardState → decode() → [CellValue] * 9 → rendering layer
    BoardState → board_to_tensor() → (2, 3, 3) numpy array
"""

from tictactoe_engine.board.bitboard import (
    BoardState,
    CellValue,
    PlayerType,
    FULL_MASK,
    INITIAL_MASK,
    NUM_CELLS,
)
from tictactoe_engine.board.representation import (
    board_to_array,
    board_to_tensor,
    coordinates_to_index,
    format_layout,
    index_to_coordinates,
    parse_layout,
    tensor_to_board,
)

__all__ = [
    'BoardState',
    'CellValue',
    'PlayerType',
    'FULL_MASK',
    'INITIAL_MASK',
    'NUM_CELLS',
    'board_to_array',
    'board_to_tensor',
    'coordinates_to_index',
    'format_layout',
    'index_to_coordinates',
    'parse_layout',
    'tensor_to_board',
]
