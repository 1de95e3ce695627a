"""Slot models."""

from enum import Enum

from pydantic import BaseModel

from .card import Card


class SlotState(str, Enum):
    """Visibility of a slot's card."""

    FACE_DOWN = "face_down"
    FACE_UP = "face_up"
    REMOVED = "removed"  # Matched and cleared from play


class TapOutcome(str, Enum):
    """What a tap did, so the presentation layer knows what to animate."""

    FLIPPED = "flipped"
    MATCHED = "matched"
    MISMATCHED = "mismatched"
    IGNORED = "ignored"


class Slot(BaseModel):
    """One fixed grid position holding a card."""

    index: int
    card: Card
    state: SlotState = SlotState.FACE_DOWN

    @property
    def is_face_up(self) -> bool:
        return self.state == SlotState.FACE_UP

    @property
    def is_face_down(self) -> bool:
        return self.state == SlotState.FACE_DOWN

    @property
    def is_removed(self) -> bool:
        return self.state == SlotState.REMOVED

    def __str__(self) -> str:
        if self.is_face_up:
            return f"[{self.card}]"
        if self.is_removed:
            return "[  ]"
        return "[##]"

    def __repr__(self) -> str:
        return f"Slot(index={self.index}, card={self.card}, state={self.state.value})"
