"""Base animation driver.

Defines the interface the presentation layer implements to animate the
outcomes a MatchSession reports. The session never renders anything itself.
"""

from abc import ABC, abstractmethod

from playing_cards.models.slot import Slot


class AnimationDriver(ABC):
    """Abstract base class for presentation drivers.

    Hooks fire from MatchSession.tap(). With immediate resolution the
    slots already show the final outcome; in deferred mode the pair is
    still face up until MatchSession.resolve() is called.
    """

    @abstractmethod
    def card_flipped(self, slot: Slot) -> None:
        """Animate a single card turning face up.

        Args:
            slot: The slot that was flipped
        """
        pass

    @abstractmethod
    def pair_matched(self, slots: list[Slot]) -> None:
        """Animate a matched pair leaving the board.

        Args:
            slots: The two removed slots
        """
        pass

    @abstractmethod
    def pair_mismatched(self, slots: list[Slot]) -> None:
        """Animate a mismatched pair turning back face down.

        Args:
            slots: The two slots, in tap order
        """
        pass

    def game_ended(self, flip_count: int) -> None:
        """Show the end-of-game summary.

        Args:
            flip_count: Total flips in the finished game
        """
        pass


class NullAnimationDriver(AnimationDriver):
    """Driver that animates nothing."""

    def card_flipped(self, slot: Slot) -> None:
        pass

    def pair_matched(self, slots: list[Slot]) -> None:
        pass

    def pair_mismatched(self, slots: list[Slot]) -> None:
        pass
