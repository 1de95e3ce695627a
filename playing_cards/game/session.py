"""Match session: slot bookkeeping for the memory game."""

from __future__ import annotations

import logging
import random
from collections import Counter
from typing import TYPE_CHECKING

from playing_cards.animation.base import AnimationDriver, NullAnimationDriver
from playing_cards.config import Config
from playing_cards.errors import (
    EmptyDeckError,
    InvalidSlotCountError,
    InvalidSlotIndexError,
)
from playing_cards.models.card import FULL_DECK_SIZE, Card
from playing_cards.models.deck import Deck
from playing_cards.models.slot import Slot, SlotState, TapOutcome

if TYPE_CHECKING:
    from playing_cards.logging import GameLogger

logger = logging.getLogger(__name__)

# Two face-up cards block further taps until they are resolved
MAX_FACE_UP = 2


class MatchSession:
    """Tracks which slots are face up, face down or removed.

    The session is driven by discrete tap() calls from the presentation
    layer and reports an outcome tag for each one. It owns the slots
    exclusively; drivers and loggers only receive them.
    """

    def __init__(
        self,
        config: Config | None = None,
        rng: random.Random | None = None,
        driver: AnimationDriver | None = None,
        game_logger: GameLogger | None = None,
    ):
        """Initialize match session.

        Args:
            config: Configuration (uses defaults if not provided)
            rng: Random source for deals (seeded from config if not provided)
            driver: Animation driver notified of tap outcomes
            game_logger: GameLogger instance for match logging
        """
        self.config = config or Config()
        self.rng = rng or random.Random(self.config.game.seed)
        self.driver = driver or NullAnimationDriver()
        self.game_logger = game_logger
        self.resolve_immediately = self.config.game.resolve_immediately

        self.slots: list[Slot] = []
        self.game_number = 0
        self._flip_count = 0
        self._pending: tuple[TapOutcome, list[Slot]] | None = None

    @property
    def slot_count(self) -> int:
        """Get number of slots on the board."""
        return len(self.slots)

    def initialize(self, slot_count: int | None = None) -> None:
        """Deal a fresh random board.

        Draws ceil(slot_count / 2) cards from a new deck, doubles each into
        a pair and hands every slot a random card from the pair pool.

        Args:
            slot_count: Number of slots (uses config if not specified)

        Raises:
            InvalidSlotCountError: If slot_count is not a positive even number
            EmptyDeckError: If more than 26 pairs are requested
        """
        if slot_count is None:
            slot_count = self.config.game.slot_count
        _check_slot_count(slot_count)

        # Each pair is one distinct card, so a deck covers at most 26 pairs
        num_pairs = (slot_count + 1) // 2
        if num_pairs > FULL_DECK_SIZE // 2:
            raise EmptyDeckError(
                f"{num_pairs} pairs requested, deck allows {FULL_DECK_SIZE // 2}"
            )

        deck = Deck(self.rng)
        pool: list[Card] = []
        for _ in range(num_pairs):
            card = deck.draw()
            pool += [card, card]

        cards = [pool.pop(self.rng.randrange(len(pool))) for _ in range(slot_count)]
        self._start(cards)

    def deal(self, cards: list[Card]) -> None:
        """Deal a fixed layout, one card per slot in the given order.

        Args:
            cards: Cards for slots 0..n-1. Every card must appear an even
                number of times.

        Raises:
            InvalidSlotCountError: If the layout cannot be fully paired
        """
        _check_slot_count(len(cards))
        unpaired = [c for c, n in Counter(cards).items() if n % 2]
        if unpaired:
            raise InvalidSlotCountError(
                f"Layout has unpaired cards: {', '.join(str(c) for c in unpaired)}"
            )
        self._start(list(cards))

    def restart(self) -> None:
        """Deal a new random board with the same number of slots."""
        self.initialize(self.slot_count or None)

    def _start(self, cards: list[Card]) -> None:
        """Reset slots and counters for a new game."""
        self.slots = [Slot(index=i, card=card) for i, card in enumerate(cards)]
        self._flip_count = 0
        self._pending = None
        self.game_number += 1
        logger.info(f"Game {self.game_number} dealt with {len(cards)} slots")

        if self.game_logger:
            self.game_logger.log_deal(self.game_number, self.slots)

    def tap(self, slot_index: int) -> TapOutcome:
        """Handle a tap on a slot.

        Args:
            slot_index: Index of the tapped slot

        Returns:
            TapOutcome describing what happened

        Raises:
            InvalidSlotIndexError: If slot_index is out of range
        """
        if not 0 <= slot_index < len(self.slots):
            raise InvalidSlotIndexError(slot_index, len(self.slots))

        slot = self.slots[slot_index]
        face_up = self.face_up_slots()
        if len(face_up) >= MAX_FACE_UP or not slot.is_face_down:
            logger.debug(f"Ignored tap on slot {slot_index} ({slot.state.value})")
            self._log_tap(slot_index, TapOutcome.IGNORED)
            return TapOutcome.IGNORED

        self._flip_count += 1
        slot.state = SlotState.FACE_UP
        face_up.append(slot)

        if len(face_up) < MAX_FACE_UP:
            outcome = TapOutcome.FLIPPED
            self._log_tap(slot_index, outcome)
            self.driver.card_flipped(slot)
            return outcome

        if face_up[0].card == face_up[1].card:
            outcome = TapOutcome.MATCHED
        else:
            outcome = TapOutcome.MISMATCHED
        logger.debug(
            f"Slots {face_up[0].index} and {face_up[1].index}: {outcome.value}"
        )

        self._pending = (outcome, face_up)
        if self.resolve_immediately:
            self._apply_pending()
        self._log_tap(slot_index, outcome)

        if outcome == TapOutcome.MATCHED:
            self.driver.pair_matched(face_up)
        else:
            self.driver.pair_mismatched(face_up)

        if self.is_game_over():
            self._finish()
        return outcome

    def resolve(self) -> bool:
        """Apply the pending pair transition in deferred mode.

        Returns:
            True if a pair was resolved, False if nothing was pending
        """
        if self._pending is None:
            return False

        self._apply_pending()
        if self.game_logger:
            self.game_logger.log_resolve(self.game_number, self.slots)

        if self.is_game_over():
            self._finish()
        return True

    def _apply_pending(self) -> None:
        """Remove a matched pair or turn a mismatched pair face down."""
        if self._pending is None:
            return
        outcome, pair = self._pending
        new_state = (
            SlotState.REMOVED if outcome == TapOutcome.MATCHED else SlotState.FACE_DOWN
        )
        for slot in pair:
            slot.state = new_state
        self._pending = None

    def _finish(self) -> None:
        """Report the end of the game."""
        logger.info(f"Game {self.game_number} over after {self._flip_count} flips")
        if self.game_logger:
            self.game_logger.log_game_end(self.game_number, self._flip_count)
        self.driver.game_ended(self._flip_count)

    def _log_tap(self, slot_index: int, outcome: TapOutcome) -> None:
        if self.game_logger:
            self.game_logger.log_tap(
                self.game_number, slot_index, outcome, self._flip_count, self.slots
            )

    def face_up_slots(self) -> list[Slot]:
        """Get slots currently face up, in index order."""
        return [s for s in self.slots if s.is_face_up]

    def face_down_slots(self) -> list[Slot]:
        """Get slots still in play and face down."""
        return [s for s in self.slots if s.is_face_down]

    def has_pending_pair(self) -> bool:
        """Check if a pair is waiting for resolve()."""
        return self._pending is not None

    def is_game_over(self) -> bool:
        """Check if every slot has been removed."""
        return bool(self.slots) and all(s.is_removed for s in self.slots)

    def flip_count(self) -> int:
        """Get the number of taps that flipped a card this game."""
        return self._flip_count

    def remaining_pairs(self) -> int:
        """Get the number of pairs not yet removed."""
        return sum(1 for s in self.slots if not s.is_removed) // 2

    def __str__(self) -> str:
        return (
            f"Game {self.game_number}, {self.flip_count()} flips, "
            f"{self.remaining_pairs()} pairs left"
        )


def _check_slot_count(slot_count: int) -> None:
    """Reject slot counts that cannot be fully paired."""
    if slot_count <= 0 or slot_count % 2:
        raise InvalidSlotCountError(
            f"Slot count must be a positive even number, got {slot_count}"
        )
