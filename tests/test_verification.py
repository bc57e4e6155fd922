"""
Verification Tests

Checks that the engine plays perfectly: the tactical suite, self-play and
the exhaustive never-loses enumeration.
"""

import pytest

from tictactoe_engine.board import PlayerType
from tictactoe_engine.evaluation import Outcome
from tictactoe_engine.utils import (
    TACTICS_POSITIONS,
    evaluate_position,
    play_self_play,
    run_tactics_suite,
    verify_never_loses,
)
from tictactoe_engine.utils.testing import TestPosition


class TestTacticsSuite:
    """Tests for the tactical positions."""

    def test_all_positions_solved(self):
        suite = run_tactics_suite()

        assert suite['total'] == len(TACTICS_POSITIONS)
        assert suite['score'] == suite['total']
        assert suite['percentage'] == 100.0
        assert suite['total_nodes'] > 0

    @pytest.mark.parametrize("position", TACTICS_POSITIONS, ids=lambda p: p.id)
    def test_position(self, position):
        result = evaluate_position(position)

        assert result.correct, f"{position.id}: expected {position.best_moves}, got {result.found_move}"
        assert result.error is None

    def test_terminal_position_reports_error(self):
        position = TestPosition(
            id="TT.XX",
            layout="XXX/OO./...",
            player=PlayerType.NOUGHT,
            best_moves=[5],
        )

        result = evaluate_position(position)

        assert not result.correct
        assert result.found_move is None
        assert result.error is not None

    def test_empty_suite(self):
        suite = run_tactics_suite(positions=[])

        assert suite['total'] == 0
        assert suite['percentage'] == 0


class TestSelfPlay:
    """Perfect play from both sides is a draw."""

    @pytest.mark.parametrize("starting_player", list(PlayerType))
    def test_self_play_draws(self, starting_player):
        result = play_self_play(starting_player)

        assert result.state.outcome is Outcome.DRAW
        assert len(result.moves) == 9
        assert sorted(result.moves) == list(range(9))


class TestNeverLoses:
    """The engine against every possible opponent line."""

    @pytest.mark.parametrize("ai_player", list(PlayerType))
    @pytest.mark.parametrize("starting_player", list(PlayerType))
    def test_never_loses(self, ai_player, starting_player):
        outcomes = verify_never_loses(ai_player, starting_player)
        loss = Outcome.NOUGHT_WINS if ai_player is PlayerType.CROSS else Outcome.CROSS_WINS

        assert sum(outcomes.values()) > 0
        assert outcomes[loss] == 0
        assert outcomes[Outcome.IN_PROGRESS] == 0
