"""
Game session configuration.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from tictactoe_engine.board.bitboard import PlayerType

PLAYER_ALIASES = {
    "x": PlayerType.CROSS,
    "cross": PlayerType.CROSS,
    "crosses": PlayerType.CROSS,
    "o": PlayerType.NOUGHT,
    "nought": PlayerType.NOUGHT,
    "noughts": PlayerType.NOUGHT,
}


def parse_player(value: Union[PlayerType, str]) -> PlayerType:
    """
    Coerce a player name ("x", "cross", "o", "nought", ...) to PlayerType.

    Raises:
        ValueError: If the name is not recognised
    """
    if isinstance(value, PlayerType):
        return value
    player = PLAYER_ALIASES.get(str(value).strip().lower())
    if player is None:
        raise ValueError(f"Unknown player {value!r}, expected one of {sorted(PLAYER_ALIASES)}")
    return player


@dataclass
class GameConfig:
    """Configuration for a game session.

    Collects the settings a caller needs to start a Game and to set up
    engine logging in one place.
    """

    starting_player: PlayerType = PlayerType.CROSS
    """Player to move first"""

    auto_play_opponent: bool = True
    """Let the engine answer every move"""

    # Logging
    debug: bool = False
    """Log at DEBUG level instead of INFO"""

    log_file: Optional[Path] = None
    """Write logs to this file instead of stderr"""

    def __post_init__(self):
        """Validate configuration after initialization."""
        self.starting_player = parse_player(self.starting_player)

        if not isinstance(self.auto_play_opponent, bool):
            raise ValueError(
                f"auto_play_opponent must be a bool, got {self.auto_play_opponent!r}"
            )

        if self.log_file is not None:
            self.log_file = Path(self.log_file)

    def __repr__(self) -> str:
        """String representation of config."""
        return (
            f"GameConfig(\n"
            f"  Players: {self.starting_player.name} starts, "
            f"auto_play_opponent={self.auto_play_opponent}\n"
            f"  Logging: debug={self.debug}, log_file={self.log_file}\n"
            f")"
        )
