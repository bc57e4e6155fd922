"""
Utilities Module

This module provides logging setup and tools for verifying the engine.

Key Components:
    - setup_logger: Configure the package logger (stderr or file)
    - Tactical test suite: positions with a known best move
    - Self-play: engine against itself (must always draw)
    - Exhaustive check: engine against every possible opponent (must never lose)
"""

from tictactoe_engine.utils.logger import setup_logger
from tictactoe_engine.utils.testing import (
    TACTICS_POSITIONS,
    evaluate_position,
    play_self_play,
    run_tactics_suite,
    verify_never_loses,
)

__all__ = [
    'setup_logger',
    'TACTICS_POSITIONS',
    'evaluate_position',
    'play_self_play',
    'run_tactics_suite',
    'verify_never_loses',
]
