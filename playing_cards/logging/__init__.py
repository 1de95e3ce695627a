"""Match logging module."""

from .formatters import format_board, format_card, format_layout, parse_card
from .game_logger import GameLogConfig, GameLogger
from .replay import BoardSnapshot, build_boards, load_events

__all__ = [
    "BoardSnapshot",
    "GameLogConfig",
    "GameLogger",
    "build_boards",
    "format_board",
    "format_card",
    "format_layout",
    "load_events",
    "parse_card",
]
