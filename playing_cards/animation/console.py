"""Console animation driver."""

from playing_cards.models.slot import Slot, TapOutcome
from playing_cards.utils.logger import GameDisplay

from .base import AnimationDriver


class ConsoleAnimationDriver(AnimationDriver):
    """Render tap outcomes as text lines."""

    def __init__(self, display: GameDisplay | None = None):
        self.display = display or GameDisplay()

    def card_flipped(self, slot: Slot) -> None:
        self.display.print_outcome(TapOutcome.FLIPPED, [slot])

    def pair_matched(self, slots: list[Slot]) -> None:
        self.display.print_outcome(TapOutcome.MATCHED, slots)

    def pair_mismatched(self, slots: list[Slot]) -> None:
        self.display.print_outcome(TapOutcome.MISMATCHED, slots)

    def game_ended(self, flip_count: int) -> None:
        self.display.print_game_end(flip_count)
