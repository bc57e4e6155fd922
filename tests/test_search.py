"""
Unit Tests for Search Module

Tests for minimax search with alpha-beta pruning, focusing on:
    - Immediate wins and forced blocks
    - Pruning never changes the value (compared with a plain minimax)
    - Lowest-index tie-break for both players
    - Usage errors on finished positions
"""

import logging

import pytest

from tictactoe_engine.board import BoardState, PlayerType, parse_layout
from tictactoe_engine.errors import NoLegalMoves
from tictactoe_engine.evaluation import DRAW, classify, terminal_score
from tictactoe_engine.search import (
    analyse,
    find_best_move,
    minimax,
    position_value,
    principal_variation,
)


def plain_minimax(player, board, counter=None):
    """Full-width minimax without pruning, used as a reference."""
    if counter is not None:
        counter[0] += 1

    score = terminal_score(classify(board))
    if score is not None:
        return score

    scores = [
        plain_minimax(player.switch(), board.with_mark(player, index), counter)
        for index in board.empty_cells()
    ]
    return max(scores) if player is PlayerType.CROSS else min(scores)


REFERENCE_POSITIONS = [
    ("X........", PlayerType.NOUGHT),
    ("....X....", PlayerType.NOUGHT),
    (".X.......", PlayerType.NOUGHT),
    ("X...O....", PlayerType.CROSS),
    ("X.......O", PlayerType.CROSS),
    ("XX./.O./...", PlayerType.NOUGHT),
    ("XX./OO./...", PlayerType.CROSS),
    ("XX./OO./...", PlayerType.NOUGHT),
    ("X.O/.XO/...", PlayerType.CROSS),
    ("O.X/.X./...", PlayerType.NOUGHT),
]


class TestMinimax:
    """Tests for minimax()."""

    def test_terminal_positions(self):
        assert minimax(PlayerType.NOUGHT, parse_layout("XXX/OO./...")) == 1
        assert minimax(PlayerType.CROSS, parse_layout("OOO/XX./X..")) == -1
        assert minimax(PlayerType.CROSS, parse_layout("XOX/OOX/OXO")) == 0

    @pytest.mark.parametrize("layout, player", REFERENCE_POSITIONS)
    def test_matches_unpruned_search(self, layout, player):
        """Alpha-beta pruning must not change the value."""
        board = parse_layout(layout)

        assert minimax(player, board) == plain_minimax(player, board)

    def test_pruning_visits_fewer_nodes(self):
        board = parse_layout("X...O....")

        pruned = [0]
        full = [0]
        minimax(PlayerType.CROSS, board, nodes_searched=pruned)
        plain_minimax(PlayerType.CROSS, board, counter=full)

        assert 0 < pruned[0] < full[0], "Alpha-beta should skip some subtrees"

    def test_board_not_modified(self):
        board = parse_layout("X...O....")
        before = board.key()

        minimax(PlayerType.CROSS, board)

        assert board.key() == before

    def test_counts_nodes(self):
        nodes = [0]
        minimax(PlayerType.NOUGHT, parse_layout("XXX/OO./..."), nodes_searched=nodes)

        assert nodes[0] == 1, "A terminal position is a single node"


class TestFindBestMove:
    """Tests for find_best_move() and analyse()."""

    def test_takes_immediate_win(self):
        board = parse_layout("XX./OO./...")

        assert find_best_move(PlayerType.CROSS, board) == 2

    def test_nought_takes_immediate_win(self):
        board = parse_layout("XX./OO./X..")

        assert find_best_move(PlayerType.NOUGHT, board) == 5

    def test_blocks_opponent(self):
        board = parse_layout("XX./.O./...")

        assert find_best_move(PlayerType.NOUGHT, board) == 2

    def test_win_before_block(self):
        board = parse_layout("X.O/.XO/...")

        assert find_best_move(PlayerType.CROSS, board) == 8

    def test_only_centre_holds_against_corner_opening(self):
        result = analyse(PlayerType.NOUGHT, parse_layout("X........"))

        assert result.best_move == 4
        assert result.score == 0
        assert all(score == 1 for index, score in result.scores.items() if index != 4)

    @pytest.mark.parametrize("player", list(PlayerType))
    def test_empty_board_tie_break(self, player):
        """Every opening draws, so the lowest index wins the tie."""
        result = analyse(player, BoardState())

        assert sorted(result.scores) == list(range(9))
        assert set(result.scores.values()) == {0}
        assert result.best_move == 0

    @pytest.mark.parametrize("layout, player", REFERENCE_POSITIONS)
    def test_lowest_index_among_best_scores(self, layout, player):
        result = analyse(player, parse_layout(layout))

        extreme = max(result.scores.values()) if player is PlayerType.CROSS else min(result.scores.values())
        assert result.score == extreme
        assert result.best_move == min(i for i, s in result.scores.items() if s == extreme)

    @pytest.mark.parametrize("layout, player", REFERENCE_POSITIONS)
    def test_candidate_scores_are_exact(self, layout, player):
        board = parse_layout(layout)
        result = analyse(player, board)

        for index, score in result.scores.items():
            child = board.with_mark(player, index)
            assert score == plain_minimax(player.switch(), child), f"Cell {index} score is wrong"

    def test_scores_only_empty_cells(self):
        result = analyse(PlayerType.CROSS, parse_layout("XX./OO./..."))

        assert sorted(result.scores) == [2, 5, 6, 7, 8]
        assert result.nodes > 0

    def test_board_not_modified(self):
        board = parse_layout("XX./.O./...")
        before = board.key()

        find_best_move(PlayerType.NOUGHT, board)

        assert board.key() == before

    def test_full_board_raises(self):
        with pytest.raises(NoLegalMoves):
            find_best_move(PlayerType.CROSS, parse_layout("XOX/OOX/OXO"))

    def test_won_board_raises(self):
        with pytest.raises(NoLegalMoves):
            find_best_move(PlayerType.NOUGHT, parse_layout("XXX/OO./..."))

    def test_logs_search_summary(self, caplog):
        caplog.set_level(logging.DEBUG, logger="tictactoe_engine.search.minimax")

        find_best_move(PlayerType.CROSS, parse_layout("XX./OO./..."))

        assert "Search complete" in caplog.text
        assert "best_move=2" in caplog.text


class TestPositionValue:
    """Tests for position_value() and principal_variation()."""

    def test_empty_board_is_draw(self):
        assert position_value(PlayerType.CROSS, BoardState()) == 0

    def test_side_to_move_matters(self):
        board = parse_layout("XX./OO./...")

        assert position_value(PlayerType.CROSS, board) == 1
        assert position_value(PlayerType.NOUGHT, board) == -1

    def test_terminal_value(self):
        assert position_value(PlayerType.CROSS, parse_layout("OOO/XX./X..")) == -1

    def test_principal_variation_from_empty_board(self):
        board = BoardState()
        line = principal_variation(PlayerType.CROSS, board)

        assert len(line) == 9, "Perfect play fills the board"
        assert len(set(line)) == 9
        assert line[:2] == [0, 4]

        player = PlayerType.CROSS
        for index in line:
            board.mark(player, index)
            player = player.switch()
        assert classify(board) == DRAW

    def test_principal_variation_immediate_win(self):
        assert principal_variation(PlayerType.CROSS, parse_layout("XX./OO./...")) == [2]

    def test_principal_variation_terminal(self):
        assert principal_variation(PlayerType.CROSS, parse_layout("XOX/OOX/OXO")) == []
