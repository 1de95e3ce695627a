"""Main entry point for the memory match console game."""

import argparse
import logging
import random
import sys
from datetime import datetime
from pathlib import Path
from typing import Callable

from playing_cards.animation import ConsoleAnimationDriver
from playing_cards.config import load_config
from playing_cards.errors import PlayingCardsError
from playing_cards.game.session import MatchSession
from playing_cards.logging import GameLogConfig, GameLogger
from playing_cards.models.slot import TapOutcome
from playing_cards.utils.logger import GameDisplay, setup_logging

logger = logging.getLogger(__name__)

QUIT_COMMANDS = {"q", "quit", "exit"}


def generate_log_filename(log_dir: str, slot_count: int) -> str:
    """Generate log filename with timestamp and board size.

    Format: {ISO timestamp}_{slot_count}slots.jsonl

    Args:
        log_dir: Directory for log files.
        slot_count: Number of slots on the board.

    Returns:
        Full path to log file.
    """
    timestamp = datetime.now().strftime("%Y%m%dT%H%M%S")
    return str(Path(log_dir) / f"{timestamp}_{slot_count}slots.jsonl")


def parse_slot(text: str, slot_count: int) -> int:
    """Parse a slot number typed by the player.

    Raises:
        ValueError: If the text is not a slot number on the board.
    """
    try:
        index = int(text)
    except ValueError:
        raise ValueError(f"Not a slot number: {text!r}") from None
    if not 0 <= index < slot_count:
        raise ValueError(f"Slot must be between 0 and {slot_count - 1}")
    return index


def play_interactive(
    session: MatchSession,
    display: GameDisplay,
    read_line: Callable[[str], str] = input,
) -> bool:
    """Play one game from player input.

    Returns:
        True if the game was finished, False if the player quit.
    """
    display.print_game_start(session.game_number, session.slot_count)

    while not session.is_game_over():
        display.print_board(session.slots)
        text = read_line("Slot> ").strip().lower()
        if text in QUIT_COMMANDS:
            return False
        try:
            index = parse_slot(text, session.slot_count)
        except ValueError as e:
            print(e)
            continue

        if session.tap(index) == TapOutcome.IGNORED:
            print("  -> ignored")
        if session.has_pending_pair():
            session.resolve()

    return True


def play_auto(session: MatchSession, rng: random.Random) -> int:
    """Tap random face-down slots until the game is over.

    Returns:
        Total flips for the game.
    """
    while not session.is_game_over():
        slot = rng.choice(session.face_down_slots())
        session.tap(slot.index)
        if session.has_pending_pair():
            session.resolve()
    return session.flip_count()


def ask_play_again(read_line: Callable[[str], str] = input) -> bool:
    """Ask whether to deal a new game."""
    return read_line("Play again? [y/N] ").strip().lower() in ("y", "yes")


def main() -> int:
    """Main entry point.

    Returns:
        Exit code (0 for success)
    """
    parser = argparse.ArgumentParser(
        description="Memory match card game"
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        help="Path to config file (YAML)",
    )
    parser.add_argument(
        "-n",
        "--slots",
        type=int,
        help="Number of card slots, even (overrides config)",
    )
    parser.add_argument(
        "-s",
        "--seed",
        type=int,
        help="Random seed for reproducible deals (overrides config)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose output",
    )
    parser.add_argument(
        "--show-cards",
        action="store_true",
        help="Show face-down cards on the board",
    )
    parser.add_argument(
        "--game-log",
        type=Path,
        help="Directory for match log files (filename auto-generated)",
    )
    parser.add_argument(
        "--autoplay",
        action="store_true",
        help="Play one game with random taps and exit",
    )

    args = parser.parse_args()

    # Load config
    config = load_config(args.config)

    # Apply command-line overrides
    if args.slots is not None:
        config.game.slot_count = args.slots
    if args.seed is not None:
        config.game.seed = args.seed
    if args.verbose:
        config.logging.level = "DEBUG"
    if args.show_cards:
        config.logging.show_cards = True

    # CLI argument overrides config file
    game_log_enabled = args.game_log is not None or config.game_log.enabled
    game_log_dir = str(args.game_log) if args.game_log else config.game_log.output_path

    setup_logging(config.logging.level)

    display = GameDisplay(show_cards=config.logging.show_cards)

    if game_log_enabled:
        log_path = generate_log_filename(game_log_dir, config.game.slot_count)
        game_log_config = GameLogConfig(enabled=True, output_path=log_path)
        print(f"Match log: {log_path}")
    else:
        game_log_config = GameLogConfig(enabled=False)

    try:
        with GameLogger(game_log_config) as game_logger:
            session = MatchSession(
                config,
                driver=ConsoleAnimationDriver(display),
                game_logger=game_logger,
            )
            game_logger.log_session_start(config.game.slot_count, config.game.seed)
            session.initialize()

            if args.autoplay:
                display.print_game_start(session.game_number, session.slot_count)
                play_auto(session, session.rng)
                return 0

            while play_interactive(session, display):
                if not ask_play_again():
                    break
                session.restart()

        return 0

    except PlayingCardsError as e:
        logger.error(f"Cannot start game: {e}")
        return 2
    except (KeyboardInterrupt, EOFError):
        print("\nGame interrupted by user")
        return 1
    except Exception as e:
        logger.exception(f"Game error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
