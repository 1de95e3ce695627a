"""Exceptions raised by the game core."""


class PlayingCardsError(Exception):
    """Base class for game errors."""


class EmptyDeckError(PlayingCardsError):
    """Raised when drawing from an exhausted deck."""

    def __init__(self, message: str = "Deck is empty"):
        super().__init__(message)


class InvalidSlotIndexError(PlayingCardsError, IndexError):
    """Raised when a tap targets a slot that does not exist."""

    def __init__(self, index: int, slot_count: int):
        self.index = index
        self.slot_count = slot_count
        super().__init__(
            f"Slot index {index} out of range (0..{slot_count - 1})"
        )


class InvalidSlotCountError(PlayingCardsError, ValueError):
    """Raised when a session is dealt an unusable number of slots."""
