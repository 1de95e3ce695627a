"""Formatters for match log output."""

from playing_cards.models.card import RANK_NAMES, Card, Rank, Suit
from playing_cards.models.slot import Slot, SlotState

# Suit codes for log output
SUIT_CODES: dict[Suit, str] = {
    Suit.SPADE: "S",
    Suit.HEART: "H",
    Suit.DIAMOND: "D",
    Suit.CLUB: "C",
}

# Rank codes for log output (same strings as the display names)
RANK_CODES: dict[Rank, str] = dict(RANK_NAMES)

# One character per slot state in board strings
STATE_CODES: dict[SlotState, str] = {
    SlotState.FACE_DOWN: "d",
    SlotState.FACE_UP: "u",
    SlotState.REMOVED: "r",
}


def format_card(card: Card) -> str:
    """Format a single card to string.

    Args:
        card: Card to format.

    Returns:
        Formatted string (e.g., "SA" for ace of spades, "D10" for ten of
        diamonds).
    """
    return f"{SUIT_CODES[card.suit]}{RANK_CODES[card.rank]}"


def parse_card(code: str) -> Card:
    """Parse a card code produced by format_card.

    Raises:
        ValueError: If the code is not a valid card code.
    """
    suits = {v: k for k, v in SUIT_CODES.items()}
    ranks = {v: k for k, v in RANK_CODES.items()}
    if len(code) < 2 or code[0] not in suits or code[1:] not in ranks:
        raise ValueError(f"Invalid card code: {code!r}")
    return Card(rank=ranks[code[1:]], suit=suits[code[0]])


def format_layout(slots: list[Slot]) -> str:
    """Format the cards of all slots to a comma-separated string.

    Returns:
        Card codes in slot order (e.g., "SA,SA,HK,HK").
    """
    return ",".join(format_card(s.card) for s in slots)


def format_board(slots: list[Slot]) -> str:
    """Format slot states to a compact string (e.g., "rrdu")."""
    return "".join(STATE_CODES[s.state] for s in slots)
