import asyncio

import pytest

from models.interview import SessionState
from services.state_store import Store


def _store():
    return Store(SessionState())


@pytest.mark.asyncio
async def test_two_sync_updates_notify_once():
    store = _store()
    calls = []
    store.subscribe(lambda: calls.append(store.get_state()))

    store.set_state({"job_description": "Backend role"})
    store.set_state(lambda s: {"current_index": s.current_index + 1, "job_description": s.job_description + "!"})

    assert calls == []
    assert store.get_state().current_index == 1
    assert store.get_state().job_description == "Backend role!"

    await asyncio.sleep(0)

    assert len(calls) == 1
    assert calls[0].job_description == "Backend role!"
    assert calls[0].current_index == 1


@pytest.mark.asyncio
async def test_each_subscriber_notified_once():
    store = _store()
    counts = {"a": 0, "b": 0}
    store.subscribe(lambda: counts.__setitem__("a", counts["a"] + 1))
    store.subscribe(lambda: counts.__setitem__("b", counts["b"] + 1))

    for i in range(5):
        store.set_state({"current_index": i})
    await asyncio.sleep(0)

    assert counts == {"a": 1, "b": 1}


@pytest.mark.asyncio
async def test_separate_turns_notify_separately():
    store = _store()
    calls = []
    store.subscribe(lambda: calls.append(1))

    store.set_state({"current_index": 1})
    await asyncio.sleep(0)
    store.set_state({"current_index": 2})
    await asyncio.sleep(0)

    assert len(calls) == 2


@pytest.mark.asyncio
async def test_unsubscribe_stops_notifications():
    store = _store()
    calls = []
    unsubscribe = store.subscribe(lambda: calls.append(1))
    unsubscribe()
    unsubscribe()

    store.set_state({"current_index": 3})
    await asyncio.sleep(0)
    assert calls == []


@pytest.mark.asyncio
async def test_failing_listener_does_not_block_others():
    store = _store()
    calls = []

    def boom():
        raise RuntimeError("listener bug")

    store.subscribe(boom)
    store.subscribe(lambda: calls.append(1))
    store.set_state({"current_index": 1})
    await asyncio.sleep(0)

    assert calls == [1]


def test_unspecified_keys_retained():
    store = _store()
    store.set_state({"job_description": "JD", "answers": {"technical-0": "a"}})
    store.set_state({"current_index": 2})

    state = store.get_state()
    assert state.job_description == "JD"
    assert state.answers == {"technical-0": "a"}
    assert state.current_index == 2


def test_snapshots_are_not_mutated_by_later_updates():
    store = _store()
    before = store.get_state()
    store.set_state({"current_index": 4})
    assert before.current_index == 0
    assert store.get_state() is not before


def test_unknown_key_rejected():
    store = _store()
    with pytest.raises(KeyError):
        store.set_state({"not_a_field": 1})


def test_without_loop_commits_wait_for_flush():
    store = _store()
    calls = []
    store.subscribe(lambda: calls.append(1))

    store.set_state({"current_index": 1})
    store.set_state({"current_index": 2})
    assert store.has_pending
    assert calls == []

    store.flush()
    assert calls == [1]
    assert not store.has_pending

    store.flush()
    assert calls == [1]


def test_empty_partial_is_noop():
    store = _store()
    store.set_state({})
    assert not store.has_pending
