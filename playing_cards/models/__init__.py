"""Game models."""

from .card import FULL_DECK_SIZE, Card, Rank, Suit, create_full_deck
from .deck import Deck
from .slot import Slot, SlotState, TapOutcome

__all__ = [
    "Card",
    "Rank",
    "Suit",
    "FULL_DECK_SIZE",
    "create_full_deck",
    "Deck",
    "Slot",
    "SlotState",
    "TapOutcome",
]
