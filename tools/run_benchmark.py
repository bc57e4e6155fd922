#!/usr/bin/env python3
"""
Engine Verification Benchmark

Runs the tactical suite, engine self-play from both starting players and the
exhaustive never-loses check, then prints a summary table.

Usage:
    python tools/run_benchmark.py [--verbose] [--skip-exhaustive] [--debug] [--log-file PATH]
"""

import sys
import argparse
import time
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from tictactoe_engine.board import BoardState, PlayerType
from tictactoe_engine.config import GameConfig
from tictactoe_engine.evaluation import Outcome
from tictactoe_engine.search import analyse
from tictactoe_engine.utils import (
    play_self_play,
    run_tactics_suite,
    setup_logger,
    verify_never_loses,
)


def format_time(seconds: float) -> str:
    """Format time"""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    else:
        minutes = int(seconds // 60)
        secs = seconds % 60
        return f"{minutes}m {secs:.0f}s"


def run_benchmark(verbose: bool = False, skip_exhaustive: bool = False) -> bool:
    """
    Run every verification and print a report.

    Args:
        verbose: If True, print detailed results for each position
        skip_exhaustive: Skip the (slowest) exhaustive never-loses check

    Returns:
        True if every check passed
    """
    passed = True

    print("=" * 80)
    print("TIC-TAC-TOE ENGINE BENCHMARK")
    print("=" * 80)
    print("Search: Exhaustive minimax with alpha-beta pruning")
    print("=" * 80)

    # Opening search cost
    start_time = time.time()
    opening = analyse(PlayerType.CROSS, BoardState())
    opening_time = time.time() - start_time
    print(f"\nEmpty board, Cross to move:")
    print(f"  Best move: {opening.best_move} (score: {opening.score})")
    print(f"  Nodes: {opening.nodes:,} in {format_time(opening_time)}")
    print(f"  Per-cell scores: {opening.scores}")

    # Tactics
    suite = run_tactics_suite(verbose=verbose)
    print(f"\nTactical suite:")
    print(f"  Correct: {suite['score']}/{suite['total']} ({suite['percentage']:.1f}%)")
    print(f"  Total nodes: {suite['total_nodes']:,}")
    print(f"  Total time: {format_time(suite['total_time'])}")
    if suite['score'] != suite['total']:
        passed = False
        for r in suite['results']:
            if not r.correct:
                print(f"    {r.position.id}: Expected {r.position.best_moves}, got {r.found_move}")

    # Self-play
    print(f"\nSelf-play:")
    for starting_player in (PlayerType.CROSS, PlayerType.NOUGHT):
        start_time = time.time()
        result = play_self_play(starting_player)
        elapsed = time.time() - start_time
        print(f"  {starting_player.name:<7} starts: {result.state} after {result.moves} ({format_time(elapsed)})")
        if result.state.outcome is not Outcome.DRAW:
            passed = False

    if skip_exhaustive:
        print("\nExhaustive check skipped")
    else:
        print("\n" + "=" * 80)
        print("EXHAUSTIVE CHECK")
        print("=" * 80)
        print(f"{'Engine':<8} {'Starts':<8} {'Games':<8} {'Draws':<8} {'Wins':<8} {'Losses':<8} {'Time':<10}")
        print("-" * 80)

        for ai_player in (PlayerType.CROSS, PlayerType.NOUGHT):
            win = Outcome.CROSS_WINS if ai_player is PlayerType.CROSS else Outcome.NOUGHT_WINS
            loss = Outcome.NOUGHT_WINS if ai_player is PlayerType.CROSS else Outcome.CROSS_WINS

            for starting_player in (PlayerType.CROSS, PlayerType.NOUGHT):
                start_time = time.time()
                outcomes = verify_never_loses(ai_player, starting_player, show_progress=verbose)
                elapsed = time.time() - start_time

                print(
                    f"{ai_player.name:<8} {starting_player.name:<8} {sum(outcomes.values()):<8} "
                    f"{outcomes[Outcome.DRAW]:<8} {outcomes[win]:<8} {outcomes[loss]:<8} "
                    f"{format_time(elapsed):<10}"
                )
                if outcomes[loss]:
                    passed = False

    print("\n" + "=" * 80)
    print("Benchmark complete!" if passed else "Benchmark FAILED")
    print("=" * 80)

    return passed


def main():
    parser = argparse.ArgumentParser(
        description="Verify that the tic-tac-toe engine plays perfectly"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Print detailed results for each position"
    )
    parser.add_argument(
        "--skip-exhaustive",
        action="store_true",
        help="Skip the exhaustive never-loses check"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Log engine activity at DEBUG level"
    )
    parser.add_argument(
        "--log-file",
        type=str,
        default=None,
        help="Write logs to this file instead of stderr"
    )

    args = parser.parse_args()
    config = GameConfig(debug=args.debug, log_file=args.log_file)
    setup_logger(debug=config.debug, log_file=config.log_file)

    try:
        passed = run_benchmark(verbose=args.verbose, skip_exhaustive=args.skip_exhaustive)
    except KeyboardInterrupt:
        print("\n\nBenchmark interrupted by user")
        sys.exit(1)

    sys.exit(0 if passed else 1)


if __name__ == "__main__":
    main()
