from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

import pytest

from src.team_ops.team_ops.core.enums import ChangeKind
from src.team_ops.team_ops.core.exceptions import ConflictError, NotFoundError
from src.team_ops.team_ops.database.memory_store import InMemoryStore


@dataclass(frozen=True)
class Note:
    id: str
    text: str
    tags: tuple[str, ...] = ()
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@pytest.fixture
def store(clock):
    return InMemoryStore(Note, clock=clock)


def test_create_then_get_returns_fields_unchanged(store, fixed_now):
    note_id = store.create(text="hello", tags=("a", "b"))

    note = store.get_by_id(note_id)
    assert note.text == "hello"
    assert note.tags == ("a", "b")
    assert note.created_at == note.updated_at == fixed_now


def test_create_assigns_unique_ids(store):
    ids = {store.create(text=str(i)) for i in range(50)}
    assert len(ids) == 50


def test_create_accepts_empty_sets(store):
    note_id = store.create(text="", tags=())
    assert store.get_by_id(note_id).tags == ()


def test_update_bumps_updated_at_and_keeps_other_fields(store, clock, fixed_now):
    note_id = store.create(text="hello", tags=("a",))
    clock.advance(minutes=5)

    updated = store.update(note_id, text="bye")

    assert updated.text == "bye"
    assert updated.tags == ("a",)
    assert updated.created_at == fixed_now
    assert updated.updated_at > updated.created_at


def test_update_strictly_increases_even_if_clock_is_frozen(store):
    note_id = store.create(text="x")
    first = store.get_by_id(note_id).updated_at

    store.update(note_id, text="y")
    second = store.get_by_id(note_id).updated_at
    store.update(note_id, text="z")
    third = store.get_by_id(note_id).updated_at

    assert first < second < third


def test_update_ignores_identity_and_timestamps_in_patch(store, fixed_now):
    note_id = store.create(text="x")

    updated = store.update(note_id, id="other", created_at=datetime(2000, 1, 1), text="y")

    assert updated.id == note_id
    assert updated.created_at == fixed_now
    assert store.find("other") is None


def test_update_missing_id_raises_not_found(store):
    with pytest.raises(NotFoundError):
        store.update("missing", text="x")


def test_delete_then_get_raises_not_found(store):
    note_id = store.create(text="x")
    store.delete(note_id)

    with pytest.raises(NotFoundError):
        store.get_by_id(note_id)
    assert store.find(note_id) is None


def test_delete_missing_id_raises_not_found(store):
    with pytest.raises(NotFoundError) as exc:
        store.delete("missing")
    assert exc.value.record_id == "missing"


def test_list_keeps_insertion_order(store):
    ids = [store.create(text=t) for t in ("c", "a", "b")]
    assert [n.id for n in store.list()] == ids


def test_filter_is_pure(store):
    for t in ("apple", "banana", "avocado"):
        store.create(text=t)

    first = store.filter(lambda n: n.text.startswith("a"))
    second = store.filter(lambda n: n.text.startswith("a"))

    assert first == second
    assert [n.text for n in first] == ["apple", "avocado"]
    assert len(store) == 3


def test_get_by_ids_skips_unknown(store):
    a = store.create(text="a")
    b = store.create(text="b")

    found = store.get_by_ids([b, "nope", a])

    assert {n.id for n in found} == {a, b}


def test_deterministic_id_conflict_raises(clock):
    store = InMemoryStore(Note, clock=clock, id_factory=lambda values: values["text"])
    store.create(text="same")

    with pytest.raises(ConflictError):
        store.create(text="same")


def test_listener_called_once_before_create_returns(store):
    seen = []

    def listener(event):
        # the record is already visible when the listener runs
        seen.append((event.kind, event.record_id, store.find(event.record_id) is not None))

    store.subscribe(listener)
    note_id = store.create(text="x")

    assert seen == [(ChangeKind.CREATED, note_id, True)]


def test_listener_sees_update_and_delete(store):
    events = []
    note_id = store.create(text="x")
    store.subscribe(events.append)

    store.update(note_id, text="y")
    store.delete(note_id)

    assert [e.kind for e in events] == [ChangeKind.UPDATED, ChangeKind.DELETED]
    assert all(e.entity == "Note" for e in events)


def test_failed_mutation_does_not_notify(store):
    events = []
    store.subscribe(events.append)

    with pytest.raises(NotFoundError):
        store.delete("missing")

    assert events == []


def test_new_subscriber_sees_only_future_changes(store):
    store.create(text="before")
    events = []
    store.subscribe(events.append)

    store.create(text="after")

    assert len(events) == 1


def test_unsubscribe_during_delivery_is_safe(store):
    calls = []
    unsubscribers = []

    def first(event):
        calls.append("first")
        unsubscribers[0]()

    def second(event):
        calls.append("second")

    unsubscribers.append(store.subscribe(first))
    store.subscribe(second)

    store.create(text="one")
    store.create(text="two")

    assert calls == ["first", "second", "second"]


def test_subscribe_during_delivery_takes_effect_next_time(store):
    calls = []

    def late(event):
        calls.append("late")

    def early(event):
        calls.append("early")
        if len(calls) == 1:
            store.subscribe(late)

    store.subscribe(early)
    store.create(text="one")
    store.create(text="two")

    assert calls == ["early", "early", "late"]


def test_unsubscribe_twice_is_harmless(store):
    events = []
    unsubscribe = store.subscribe(events.append)
    unsubscribe()
    unsubscribe()

    store.create(text="x")
    assert events == []


def test_seed_loads_records_as_is(store):
    fixed = datetime(2024, 1, 1)
    count = store.seed([Note(id="n1", text="seeded", created_at=fixed, updated_at=fixed)])

    assert count == 1
    assert store.get_by_id("n1").created_at == fixed

    with pytest.raises(ConflictError):
        store.seed([Note(id="n1", text="again")])
