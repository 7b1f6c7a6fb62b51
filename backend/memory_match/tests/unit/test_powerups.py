"""Unit tests for the Reveal, Freeze and Hint power-ups."""

import random

import pytest

from memory_match.logic.cards import Card
from memory_match.logic.enums import PowerUpKind
from memory_match.logic.events import EventType, HintReadyEvent, PowerUpUsedEvent
from memory_match.logic.exceptions import UnknownPowerUpError
from memory_match.logic.powerups import POWER_UP_INFO, PowerUp, build_power_ups, find_hint_pair
from memory_match.logic.settings import GameRules
from memory_match.tests.helpers.session import create_session, match_next_pair, pairs_by_key
from memory_match.tests.mocks.listener import RecordingListener


class TestPowerUpSlot:
    def test_build_gives_one_of_each_kind(self):
        power_ups = build_power_ups()
        assert list(power_ups) == [PowerUpKind.REVEAL, PowerUpKind.FREEZE, PowerUpKind.HINT]
        assert all(p.available for p in power_ups.values())

    def test_second_use_is_noop(self):
        session = create_session()
        power_up = PowerUp(kind=PowerUpKind.REVEAL)

        assert power_up.use(session) is True
        session.end_reveal()
        assert power_up.use(session) is False
        assert session.revealing is False

    def test_reset_rearms(self):
        power_up = PowerUp(kind=PowerUpKind.FREEZE, available=False)
        power_up.reset()
        assert power_up.available is True

    def test_info_table_covers_every_kind(self):
        assert set(POWER_UP_INFO) == set(PowerUpKind)
        assert PowerUp(kind=PowerUpKind.HINT).info.name == "Hint"


class TestReveal:
    def test_sets_and_clears_revealing(self):
        session = create_session()

        assert session.use_power_up(PowerUpKind.REVEAL) is True
        assert session.revealing is True
        assert session.power_ups[PowerUpKind.REVEAL].available is False

        session.end_reveal()
        assert session.revealing is False

    def test_does_not_change_card_faces(self):
        session = create_session()
        session.use_power_up(PowerUpKind.REVEAL)
        assert not any(card.face_up for card in session.cards)


class TestFreeze:
    def test_nine_ticks_keep_clock_frozen(self):
        session = create_session()
        start = session.time_remaining

        session.use_power_up(PowerUpKind.FREEZE)
        for _ in range(9):
            session.tick()

        assert session.time_remaining == start
        assert session.timer_frozen is True

    def test_tenth_tick_unfreezes_eleventh_decrements(self):
        session = create_session()
        start = session.time_remaining

        session.use_power_up(PowerUpKind.FREEZE)
        for _ in range(10):
            session.tick()
        assert session.timer_frozen is False
        assert session.time_remaining == start

        session.tick()
        assert session.time_remaining == start - 1

    def test_uses_rules_duration(self):
        session = create_session(rules=GameRules(freeze_duration_seconds=3))
        session.use_power_up(PowerUpKind.FREEZE)
        assert session.frozen_seconds_left == 3


class TestHint:
    def test_picks_two_cards_of_same_pair(self):
        session = create_session()

        session.use_power_up(PowerUpKind.HINT)

        assert len(session.hint_card_ids) == 2
        first, second = (session.get_card(card_id) for card_id in session.hint_card_ids)
        assert first.pair_key == second.pair_key
        assert not first.matched and not second.matched

    def test_empty_when_everything_matched(self):
        session = create_session()
        for card in session.cards:
            card.set_matched()

        assert session.use_power_up(PowerUpKind.HINT) is True
        assert session.hint_card_ids == ()

    def test_skips_pair_with_selected_card(self):
        session = create_session()
        # match all but one pair, then select one card of the last pair
        for _ in range(len(pairs_by_key(session)) - 1):
            match_next_pair(session)
        remaining = [card for card in session.cards if not card.matched]
        session.select_card(remaining[0].id)

        session.use_power_up(PowerUpKind.HINT)

        assert len(remaining) == 2
        assert session.hint_card_ids == ()

    def test_clear_hint(self):
        session = create_session()
        session.use_power_up(PowerUpKind.HINT)
        session.clear_hint()
        assert session.hint_card_ids == ()

    def test_hint_cleared_when_hinted_pair_matched(self):
        session = create_session()
        session.use_power_up(PowerUpKind.HINT)
        first, second = session.hint_card_ids

        session.select_card(first)
        session.select_card(second)

        assert session.hint_card_ids == ()

    def test_find_hint_pair_ignores_face_up_and_matched(self):
        cards = [
            Card(id="a_A", pair_key="a", base_score=10, matched=True, face_up=True),
            Card(id="a_B", pair_key="a", base_score=10, matched=True, face_up=True),
            Card(id="b_A", pair_key="b", base_score=10, face_up=True),
            Card(id="b_B", pair_key="b", base_score=10),
            Card(id="c_A", pair_key="c", base_score=10),
            Card(id="c_B", pair_key="c", base_score=10),
        ]
        assert find_hint_pair(cards, random.Random(0)) == ("c_A", "c_B")

    def test_find_hint_pair_none_for_empty_deck(self):
        assert find_hint_pair([], random.Random(0)) is None


class TestUsePowerUp:
    def test_accepts_string_value(self):
        session = create_session()
        assert session.use_power_up("freeze") is True
        assert session.timer_frozen is True

    def test_rejects_unknown_name(self):
        session = create_session()
        with pytest.raises(UnknownPowerUpError, match="teleport"):
            session.use_power_up("teleport")

    def test_second_use_returns_false(self):
        session = create_session()
        session.use_power_up(PowerUpKind.FREEZE)
        assert session.use_power_up(PowerUpKind.FREEZE) is False

    def test_emits_used_and_hint_events(self):
        listener = RecordingListener()
        session = create_session(listener=listener)

        session.use_power_up(PowerUpKind.HINT)

        used = listener.of_type(EventType.POWER_UP_USED)
        hints = listener.of_type(EventType.HINT_READY)
        assert used == [PowerUpUsedEvent(power_up=PowerUpKind.HINT)]
        assert hints == [HintReadyEvent(card_a=session.hint_card_ids[0], card_b=session.hint_card_ids[1])]

    def test_spent_power_up_emits_nothing(self):
        listener = RecordingListener()
        session = create_session(listener=listener)
        session.use_power_up(PowerUpKind.REVEAL)
        listener.clear()

        session.use_power_up(PowerUpKind.REVEAL)

        assert listener.events == []
