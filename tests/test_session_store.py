from __future__ import annotations

import threading
import time

from hotelbot.domain.entities.session import ConversationStep, Session
from hotelbot.infrastructure.store.memory_session_store import MemorySessionStore


def test_missing_entry_means_idle(sessions):
    assert sessions.get("whatsapp:+1") is None


def test_put_get_delete(sessions, clock):
    session = Session(step=ConversationStep.AWAITING_DATE_RANGE, updated_at=clock())
    sessions.put("whatsapp:+1", session)
    assert sessions.get("whatsapp:+1") == session

    sessions.delete("whatsapp:+1")
    assert sessions.get("whatsapp:+1") is None
    # Deleting twice is harmless.
    sessions.delete("whatsapp:+1")


def test_abandoned_session_expires(sessions, clock):
    sessions.put("whatsapp:+1", Session(step=ConversationStep.AWAITING_DATE_RANGE, updated_at=clock()))

    clock.now += 1800
    assert sessions.get("whatsapp:+1") is not None

    clock.now += 1
    assert sessions.get("whatsapp:+1") is None


def test_evict_expired_sweeps_only_old_sessions(sessions, clock):
    sessions.put("old", Session(step=ConversationStep.AWAITING_DATE_RANGE, updated_at=clock.now - 5000))
    sessions.put("fresh", Session(step=ConversationStep.AWAITING_DATE_RANGE, updated_at=clock.now))

    assert sessions.evict_expired() == 1
    assert sessions.get("old") is None
    assert sessions.get("fresh") is not None


def test_zero_ttl_disables_expiry(clock):
    store = MemorySessionStore(ttl_seconds=0, clock=clock)
    store.put("a", Session(step=ConversationStep.AWAITING_DATE_RANGE, updated_at=0.0))
    assert store.get("a") is not None


def test_put_sweeps_abandoned_sessions_periodically(clock):
    store = MemorySessionStore(ttl_seconds=1800, sweep_interval_seconds=60, clock=clock)
    store.put("abandoned", Session(step=ConversationStep.AWAITING_DATE_RANGE, updated_at=clock()))

    clock.now += 1801
    store.put("new", Session(step=ConversationStep.AWAITING_DATE_RANGE, updated_at=clock()))

    assert store.session_count() == 1
    assert store.get("new") is not None


def test_no_sweep_before_interval(clock):
    store = MemorySessionStore(ttl_seconds=10, sweep_interval_seconds=60, clock=clock)
    store.put("old", Session(step=ConversationStep.AWAITING_DATE_RANGE, updated_at=clock()))

    clock.now += 30
    store.put("new", Session(step=ConversationStep.AWAITING_DATE_RANGE, updated_at=clock()))

    assert store.session_count() == 2


def test_identity_locks_are_dropped_when_released(sessions):
    with sessions.lock("a"):
        with sessions.lock("b"):
            assert sessions.lock_count() == 2
    assert sessions.lock_count() == 0


def test_lock_serializes_one_identity(sessions):
    events = []

    def second() -> None:
        with sessions.lock("a"):
            events.append("second")

    with sessions.lock("a"):
        thread = threading.Thread(target=second)
        thread.start()
        time.sleep(0.05)
        events.append("first")
    thread.join()

    assert events == ["first", "second"]
    assert sessions.lock_count() == 0


def test_claim_accepts_a_message_id_once(sessions):
    assert sessions.claim("SM1") is True
    assert sessions.claim("SM1") is False
    assert sessions.claim("SM2") is True


def test_claimed_ids_are_bounded(clock):
    store = MemorySessionStore(processed_limit=2, clock=clock)
    for message_id in ("m1", "m2", "m3"):
        assert store.claim(message_id) is True

    assert store.claim("m1") is True
    assert store.claim("m3") is False
