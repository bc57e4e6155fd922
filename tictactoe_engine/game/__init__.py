"""
Game Module

Turn orchestration for a single session. This is the only entry point a
rendering or input layer needs.

API:
    new_game(starting_player, auto_play_opponent) -> Game
    resume_game(noughts_mask, crosses_mask, current_player, auto_play_opponent) -> Game
    attempt_move(game, index) -> GameState
    current_board(game) -> [CellValue] * 9
    current_state(game) -> GameState
"""

from tictactoe_engine.game.controller import (
    Game,
    attempt_move,
    current_board,
    current_state,
    new_game,
    resume_game,
)

__all__ = [
    'Game',
    'attempt_move',
    'current_board',
    'current_state',
    'new_game',
    'resume_game',
]
