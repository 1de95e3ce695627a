"""Tests for match session."""

import random
from collections import Counter

import pytest

from playing_cards.animation.base import AnimationDriver
from playing_cards.config import Config, GameConfig
from playing_cards.errors import (
    EmptyDeckError,
    InvalidSlotCountError,
    InvalidSlotIndexError,
)
from playing_cards.game.session import MatchSession
from playing_cards.models.card import Card, Rank, Suit
from playing_cards.models.slot import Slot, SlotState, TapOutcome

ACE_SPADES = Card(rank=Rank.ACE, suit=Suit.SPADE)
KING_HEARTS = Card(rank=Rank.KING, suit=Suit.HEART)


class RecordingDriver(AnimationDriver):
    """Driver that records the events it receives."""

    def __init__(self):
        self.events: list[tuple[str, list[int]]] = []

    def card_flipped(self, slot: Slot) -> None:
        self.events.append(("flipped", [slot.index]))

    def pair_matched(self, slots: list[Slot]) -> None:
        self.events.append(("matched", [s.index for s in slots]))

    def pair_mismatched(self, slots: list[Slot]) -> None:
        self.events.append(("mismatched", [s.index for s in slots]))

    def game_ended(self, flip_count: int) -> None:
        self.events.append(("game_ended", [flip_count]))


@pytest.fixture
def driver():
    return RecordingDriver()


@pytest.fixture
def session(driver):
    """Session dealt as [A♠, A♠, K♥, K♥]."""
    s = MatchSession(rng=random.Random(0), driver=driver)
    s.deal([ACE_SPADES, ACE_SPADES, KING_HEARTS, KING_HEARTS])
    return s


@pytest.fixture
def deferred_session():
    config = Config(game=GameConfig(resolve_immediately=False))
    s = MatchSession(config)
    s.deal([ACE_SPADES, ACE_SPADES, KING_HEARTS, KING_HEARTS])
    return s


def states(session: MatchSession) -> list[SlotState]:
    return [s.state for s in session.slots]


class TestInitialize:
    """Tests for random deals."""

    @pytest.mark.parametrize("slot_count", [2, 4, 12, 20, 52])
    def test_pairing_invariant(self, slot_count):
        """Test slot count, face-down start and even card counts."""
        session = MatchSession(rng=random.Random(slot_count))
        session.initialize(slot_count)

        assert session.slot_count == slot_count
        assert all(s.state == SlotState.FACE_DOWN for s in session.slots)
        counts = Counter(s.card for s in session.slots)
        assert all(n % 2 == 0 for n in counts.values())
        assert len(counts) == slot_count // 2

    def test_slot_indices(self):
        """Test that slots know their own index."""
        session = MatchSession()
        session.initialize(6)
        assert [s.index for s in session.slots] == list(range(6))

    def test_uses_config_slot_count(self):
        """Test default slot count from config."""
        session = MatchSession(Config(game=GameConfig(slot_count=8)))
        session.initialize()
        assert session.slot_count == 8

    def test_seed_reproducible(self):
        """Test that a configured seed gives the same layout."""
        config = Config(game=GameConfig(seed=123))
        s1 = MatchSession(config)
        s2 = MatchSession(config)
        s1.initialize(16)
        s2.initialize(16)

        assert [s.card for s in s1.slots] == [s.card for s in s2.slots]

    @pytest.mark.parametrize("slot_count", [0, -2, 3, 11])
    def test_invalid_slot_count(self, slot_count):
        """Test that odd and non-positive counts are rejected."""
        with pytest.raises(InvalidSlotCountError):
            MatchSession().initialize(slot_count)

    def test_too_many_pairs(self):
        """Test that more than 26 pairs exhausts the deck."""
        with pytest.raises(EmptyDeckError):
            MatchSession().initialize(54)

    @pytest.mark.parametrize("slot_count", [54, 104, 106])
    def test_deck_limit_leaves_session_untouched(self, slot_count):
        """Test that an oversized board keeps the previous deal."""
        session = MatchSession()
        session.initialize(4)
        before = [s.card for s in session.slots]

        with pytest.raises(EmptyDeckError):
            session.initialize(slot_count)
        assert [s.card for s in session.slots] == before
        assert session.game_number == 1

    def test_full_deck_of_pairs(self):
        """Test that 52 slots use 26 distinct cards."""
        session = MatchSession(rng=random.Random(1))
        session.initialize(52)

        assert len({s.card for s in session.slots}) == 26

    def test_restart_resets(self, session):
        """Test that restart deals a fresh board of the same size."""
        session.tap(0)
        session.tap(1)
        session.restart()

        assert session.slot_count == 4
        assert session.flip_count() == 0
        assert session.game_number == 2
        assert all(s.is_face_down for s in session.slots)


class TestDeal:
    """Tests for fixed layouts."""

    def test_deal_order(self, session):
        """Test that cards land in the given order."""
        assert [s.card for s in session.slots] == [
            ACE_SPADES, ACE_SPADES, KING_HEARTS, KING_HEARTS
        ]

    def test_deal_unpaired(self):
        """Test that a layout with unpaired cards is rejected."""
        with pytest.raises(InvalidSlotCountError):
            MatchSession().deal([ACE_SPADES, KING_HEARTS])


class TestTap:
    """Tests for the tap transition."""

    def test_first_tap_flips(self, session):
        """Test that a tap turns a face-down slot face up."""
        assert session.tap(0) == TapOutcome.FLIPPED
        assert session.slots[0].state == SlotState.FACE_UP
        assert session.flip_count() == 1

    def test_match(self, session):
        """Scenario A: tapping a pair removes it."""
        assert session.tap(0) == TapOutcome.FLIPPED
        assert session.tap(1) == TapOutcome.MATCHED

        assert states(session)[:2] == [SlotState.REMOVED, SlotState.REMOVED]
        assert not session.is_game_over()
        assert session.remaining_pairs() == 1

    def test_mismatch(self, session):
        """Scenario B: a mismatched pair turns back face down."""
        assert session.tap(0) == TapOutcome.FLIPPED
        assert session.tap(2) == TapOutcome.MISMATCHED

        assert session.slots[0].state == SlotState.FACE_DOWN
        assert session.slots[2].state == SlotState.FACE_DOWN
        assert session.flip_count() == 2

    def test_game_over(self, session):
        """Scenario C: clearing every pair ends the game."""
        session.tap(0)
        session.tap(1)
        assert session.tap(2) == TapOutcome.FLIPPED
        assert session.tap(3) == TapOutcome.MATCHED

        assert all(s.is_removed for s in session.slots)
        assert session.is_game_over()
        assert session.flip_count() == 4

    def test_rank_only_is_not_match(self):
        """Test that equal rank with different suit does not match."""
        ace_hearts = Card(rank=Rank.ACE, suit=Suit.HEART)
        session = MatchSession()
        session.deal([ACE_SPADES, ace_hearts, ACE_SPADES, ace_hearts])

        session.tap(0)
        assert session.tap(1) == TapOutcome.MISMATCHED

    def test_tap_face_up_ignored(self, session):
        """Test that tapping the face-up slot again is ignored."""
        session.tap(0)
        assert session.tap(0) == TapOutcome.IGNORED
        assert session.slots[0].state == SlotState.FACE_UP
        assert session.flip_count() == 1

    def test_tap_removed_ignored(self, session):
        """Test that tapping a removed slot is ignored."""
        session.tap(0)
        session.tap(1)
        assert session.tap(0) == TapOutcome.IGNORED
        assert session.flip_count() == 2

    @pytest.mark.parametrize("index", [-1, 4, 100])
    def test_invalid_index(self, session, index):
        """Test that out-of-range taps fail loudly."""
        with pytest.raises(InvalidSlotIndexError):
            session.tap(index)

    def test_invalid_index_is_index_error(self, session):
        """Test that the error can be caught as IndexError."""
        with pytest.raises(IndexError):
            session.tap(4)

    def test_taps_after_game_over(self, session):
        """Test that a finished game does not change on further taps."""
        for i in range(4):
            session.tap(i)
        assert session.is_game_over()

        for i in range(4):
            assert session.tap(i) == TapOutcome.IGNORED
        assert session.is_game_over()
        assert session.flip_count() == 4

    def test_random_play_properties(self):
        """Test face-up limit and flip counting over random play."""
        rng = random.Random(99)
        session = MatchSession(rng=random.Random(5))
        session.initialize(20)

        flips = 0
        for _ in range(20000):
            if session.is_game_over():
                break
            outcome = session.tap(rng.randrange(20))
            if outcome != TapOutcome.IGNORED:
                flips += 1
            assert len(session.face_up_slots()) <= 2
            assert session.flip_count() == flips

        assert session.is_game_over()


class TestDeferredResolve:
    """Tests for pairs held face up until resolve()."""

    def test_pair_stays_face_up(self, deferred_session):
        """Test that the outcome is reported before the pair changes."""
        deferred_session.tap(0)
        assert deferred_session.tap(2) == TapOutcome.MISMATCHED

        assert len(deferred_session.face_up_slots()) == 2
        assert deferred_session.has_pending_pair()

    def test_tap_while_two_face_up(self, deferred_session):
        """Scenario D: taps are ignored while two cards are face up."""
        deferred_session.tap(0)
        deferred_session.tap(2)
        before = states(deferred_session)

        assert deferred_session.tap(1) == TapOutcome.IGNORED
        assert states(deferred_session) == before
        assert deferred_session.flip_count() == 2

    def test_resolve_mismatch(self, deferred_session):
        """Test that resolve turns a mismatched pair face down."""
        deferred_session.tap(0)
        deferred_session.tap(2)

        assert deferred_session.resolve()
        assert all(s.is_face_down for s in deferred_session.slots)
        assert not deferred_session.resolve()

    def test_resolve_last_match_ends_game(self, deferred_session):
        """Test that the game ends only once the last pair is resolved."""
        deferred_session.tap(0)
        deferred_session.tap(1)
        deferred_session.resolve()
        deferred_session.tap(2)
        deferred_session.tap(3)

        assert not deferred_session.is_game_over()
        deferred_session.resolve()
        assert deferred_session.is_game_over()


class TestAnimationDriver:
    """Tests for driver notifications."""

    def test_events(self, session, driver):
        """Test that each outcome reaches the driver."""
        session.tap(0)
        session.tap(2)
        session.tap(0)
        session.tap(0)
        session.tap(1)
        session.tap(2)
        session.tap(3)

        assert driver.events == [
            ("flipped", [0]),
            ("mismatched", [0, 2]),
            ("flipped", [0]),
            ("matched", [0, 1]),
            ("flipped", [2]),
            ("matched", [2, 3]),
            ("game_ended", [6]),
        ]

    def test_ignored_not_forwarded(self, session, driver):
        """Test that ignored taps produce no animation."""
        session.tap(0)
        session.tap(0)
        assert driver.events == [("flipped", [0])]
