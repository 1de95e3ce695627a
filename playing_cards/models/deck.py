"""Deck model."""

import random

from playing_cards.errors import EmptyDeckError

from .card import Card, create_full_deck


class Deck:
    """Ordered collection of cards supporting random draws.

    A new deck holds one card per (rank, suit) combination in canonical
    order. There is no separate shuffle step: each draw removes a card
    chosen uniformly at random from what is left.
    """

    def __init__(self, rng: random.Random | None = None):
        """Initialize deck.

        Args:
            rng: Random source for draws (creates one if not provided).
        """
        self._rng = rng or random.Random()
        self._cards: list[Card] = create_full_deck()

    @property
    def cards(self) -> list[Card]:
        """Get a copy of the remaining cards in order."""
        return list(self._cards)

    def draw(self) -> Card:
        """Remove and return a random card.

        Raises:
            EmptyDeckError: If no cards are left.
        """
        if not self._cards:
            raise EmptyDeckError()
        return self._cards.pop(self._rng.randrange(len(self._cards)))

    def cards_remaining(self) -> int:
        """Get number of cards left in the deck."""
        return len(self._cards)

    def is_empty(self) -> bool:
        """Check if deck is empty."""
        return not self._cards

    def __len__(self) -> int:
        return len(self._cards)

    def __contains__(self, card: Card) -> bool:
        return card in self._cards

    def __repr__(self) -> str:
        return f"Deck(remaining={len(self._cards)})"
