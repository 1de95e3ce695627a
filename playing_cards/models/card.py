"""Card, Rank and Suit models."""

from enum import IntEnum

from pydantic import BaseModel


class Suit(IntEnum):
    """Card suit (canonical deck order)."""

    SPADE = 0
    HEART = 1
    DIAMOND = 2
    CLUB = 3


class Rank(IntEnum):
    """Card rank.

    Value is the ordering index (ace low). It is used for identity and
    display only; ranks never beat each other in this game.
    """

    ACE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13


# Map rank to display string
RANK_NAMES = {
    Rank.ACE: "A",
    Rank.TWO: "2",
    Rank.THREE: "3",
    Rank.FOUR: "4",
    Rank.FIVE: "5",
    Rank.SIX: "6",
    Rank.SEVEN: "7",
    Rank.EIGHT: "8",
    Rank.NINE: "9",
    Rank.TEN: "10",
    Rank.JACK: "J",
    Rank.QUEEN: "Q",
    Rank.KING: "K",
}

SUIT_SYMBOLS = {
    Suit.SPADE: "♠",
    Suit.HEART: "♥",
    Suit.DIAMOND: "♦",
    Suit.CLUB: "♣",
}

FULL_DECK_SIZE = len(Suit) * len(Rank)


class Card(BaseModel, frozen=True):
    """Single playing card.

    Two cards are equal iff both rank and suit are equal.
    """

    rank: Rank
    suit: Suit

    @property
    def order(self) -> int:
        """Get the rank ordering index (1 for ace, 13 for king)."""
        return int(self.rank)

    def __str__(self) -> str:
        return f"{RANK_NAMES[self.rank]}{SUIT_SYMBOLS[self.suit]}"

    def __repr__(self) -> str:
        return str(self)


def create_full_deck() -> list[Card]:
    """Create the 52 cards in canonical order (suit by suit, ace to king)."""
    return [Card(rank=rank, suit=suit) for suit in Suit for rank in Rank]
