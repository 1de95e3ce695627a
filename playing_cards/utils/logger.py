"""Logging utilities and board display."""

import logging
import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from playing_cards.models.slot import Slot, TapOutcome

# Slots per printed row
ROW_WIDTH = 4


def setup_logging(level: str = "INFO") -> None:
    """Configure logging for the application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
    """
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


class GameDisplay:
    """Display the board to stdout."""

    def __init__(self, show_cards: bool = False, row_width: int = ROW_WIDTH):
        """Initialize display.

        Args:
            show_cards: Whether to reveal face-down cards (debugging aid)
            row_width: Number of slots per printed row
        """
        self.show_cards = show_cards
        self.row_width = row_width

    def print_separator(self) -> None:
        """Print a separator line."""
        print("=" * 40)

    def format_slot(self, slot: "Slot") -> str:
        """Format one slot as a fixed-width cell."""
        if slot.is_removed:
            label = ""
        elif slot.is_face_up or self.show_cards:
            label = str(slot.card)
        else:
            label = "##"
        return f"{slot.index:>2}:{label:<3}"

    def print_board(self, slots: list["Slot"]) -> None:
        """Print the board in rows."""
        for start in range(0, len(slots), self.row_width):
            row = slots[start:start + self.row_width]
            print("  ".join(self.format_slot(s) for s in row))

    def print_game_start(self, game_number: int, slot_count: int) -> None:
        """Print game start message."""
        self.print_separator()
        print(f"GAME {game_number} ({slot_count // 2} pairs)")
        self.print_separator()

    def print_outcome(self, outcome: "TapOutcome", slots: list["Slot"]) -> None:
        """Print what a tap did."""
        cards = " / ".join(str(s.card) for s in slots)
        print(f"  -> {outcome.value}: {cards}")

    def print_game_end(self, flip_count: int) -> None:
        """Print end-of-game summary."""
        self.print_separator()
        print("Game over")
        print(f"Total flips: {flip_count}")
        self.print_separator()
