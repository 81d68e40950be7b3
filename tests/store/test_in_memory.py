"""Tests for the in memory record store."""

from dataclasses import dataclass

import pytest

from record_store.exceptions import InvalidRecordError, RecordStoreException
from record_store.records import Pokemon
from record_store.store import (
    AfterSetEvent,
    BeforeSetEvent,
    InMemoryStore,
    Store,
    StoreRegistry,
)


@dataclass
class Item:
    id: str
    score: int = 0


@pytest.fixture
def store() -> Store[Item]:
    return StoreRegistry().get_instance(Item)


def test_direct_construction_not_allowed() -> None:
    with pytest.raises(RecordStoreException, match="get_instance"):
        InMemoryStore(Item)


def test_get_missing(store: Store[Item]) -> None:
    """Test a record that was never written is absent."""
    assert store.get("missing") is None


def test_set_and_get(store: Store[Item]) -> None:
    item = Item(id="a", score=1)
    store.set(item)
    assert store.get("a") is item
    assert len(store) == 1


def test_last_set_wins(store: Store[Item]) -> None:
    """Test the latest write for an identifier replaces the earlier ones."""
    store.set(Item(id="a", score=1))
    store.set(Item(id="b", score=2))
    store.set(Item(id="a", score=3))
    store.set(Item(id="a", score=4))

    assert store.get("a") == Item(id="a", score=4)
    assert store.get("b") == Item(id="b", score=2)
    assert len(store) == 2


def test_set_replaces_wholesale() -> None:
    """Test replacing a record does not merge fields from the old value."""
    store = StoreRegistry().get_instance(Pokemon)
    store.set(Pokemon(id="Bulba", attack=100, defense=120))
    store.set(Pokemon(id="Bulba", attack=50))
    assert store.get("Bulba") == Pokemon(id="Bulba", attack=50, defense=0)


def test_set_invalid_record(store: Store[Item]) -> None:
    events: list[object] = []
    store.on_before_set(events.append)

    with pytest.raises(InvalidRecordError):
        store.set(object())  # type: ignore[arg-type]
    with pytest.raises(ValueError):
        store.set(Item(id=1))  # type: ignore[arg-type]

    assert events == []
    assert len(store) == 0


def test_set_events_new_record(store: Store[Item]) -> None:
    """Test the events for a record written for the first time."""
    before: list[BeforeSetEvent[Item]] = []
    after: list[AfterSetEvent[Item]] = []
    store.on_before_set(before.append)
    store.on_after_set(after.append)

    item = Item(id="a", score=1)
    store.set(item)

    assert before == [BeforeSetEvent(value=None, new_value=item)]
    assert after == [AfterSetEvent(value=item)]


def test_set_events_existing_record(store: Store[Item]) -> None:
    """Test the before event carries the record held before the write."""
    old = Item(id="a", score=1)
    new = Item(id="a", score=2)
    store.set(old)

    before: list[BeforeSetEvent[Item]] = []
    after: list[AfterSetEvent[Item]] = []
    store.on_before_set(before.append)
    store.on_after_set(after.append)
    store.set(new)

    assert len(before) == 1
    assert before[0].value is old
    assert before[0].new_value is new
    assert after == [AfterSetEvent(value=new)]


def test_listeners_observe_store_state(store: Store[Item]) -> None:
    """Test listeners see the state before and after the write."""
    observed: list[tuple[str, Item | None]] = []
    old = Item(id="a", score=1)
    new = Item(id="a", score=2)
    store.set(old)

    store.on_before_set(lambda event: observed.append(("before", store.get("a"))))
    store.on_after_set(lambda event: observed.append(("after", store.get("a"))))
    store.set(new)

    assert observed == [("before", old), ("after", new)]


def test_before_set_error_aborts_write(store: Store[Item]) -> None:
    after: list[AfterSetEvent[Item]] = []

    def reject(event: BeforeSetEvent[Item]) -> None:
        raise RuntimeError(f"rejected {event.new_value.id}")

    store.on_before_set(reject)
    store.on_after_set(after.append)

    with pytest.raises(RuntimeError, match="rejected a"):
        store.set(Item(id="a"))
    assert store.get("a") is None
    assert after == []


def test_after_set_error_propagates(store: Store[Item]) -> None:
    """Test an after listener error surfaces once the write is done."""

    def fail(event: AfterSetEvent[Item]) -> None:
        raise RuntimeError("after failed")

    store.on_after_set(fail)
    with pytest.raises(RuntimeError, match="after failed"):
        store.set(Item(id="a"))
    assert store.get("a") == Item(id="a")


def test_remove_listeners(store: Store[Item]) -> None:
    before: list[BeforeSetEvent[Item]] = []
    after: list[AfterSetEvent[Item]] = []
    remove_before = store.on_before_set(before.append)
    remove_after = store.on_after_set(after.append)
    store.set(Item(id="a"))

    remove_before()
    remove_after()
    remove_after()
    store.set(Item(id="b"))

    assert len(before) == 1
    assert len(after) == 1


def test_on_after_set_flush(store: Store[Item]) -> None:
    """Test flushing replays the existing records to a new listener."""
    a = Item(id="a")
    b = Item(id="b")
    store.set(a)
    store.set(b)

    after: list[AfterSetEvent[Item]] = []
    store.on_after_set(after.append, flush=True)
    assert after == [AfterSetEvent(value=a), AfterSetEvent(value=b)]

    c = Item(id="c")
    store.set(c)
    assert after[-1] == AfterSetEvent(value=c)


def test_listener_writes_to_store(store: Store[Item]) -> None:
    """Test a listener can write a derived record while being notified."""

    def mirror(event: AfterSetEvent[Item]) -> None:
        if not event.value.id.startswith("copy-"):
            store.set(Item(id=f"copy-{event.value.id}", score=event.value.score))

    store.on_after_set(mirror)
    store.set(Item(id="a", score=5))

    assert store.get("copy-a") == Item(id="copy-a", score=5)


def test_visit(store: Store[Item]) -> None:
    """Test the visitor is called once per record."""
    records = [Item(id="x"), Item(id="y"), Item(id="z")]
    for record in records:
        store.set(record)

    visited: list[Item] = []
    store.visit(visited.append)

    assert len(visited) == 3
    assert sorted(visited, key=lambda item: item.id) == records


def test_visit_empty(store: Store[Item]) -> None:
    visited: list[Item] = []
    store.visit(visited.append)
    assert visited == []


def test_list_records(store: Store[Item]) -> None:
    store.set(Item(id="a"))
    store.set(Item(id="b"))
    assert sorted(record.id for record in store.list_records()) == ["a", "b"]


def test_select_best_empty(store: Store[Item]) -> None:
    assert store.select_best(lambda item: item.score) is None


def test_select_best_tie_keeps_first(store: Store[Item]) -> None:
    """Test the first record reaching the maximum score wins ties."""
    store.set(Item(id="A", score=5))
    store.set(Item(id="B", score=5))
    store.set(Item(id="C", score=3))

    best = store.select_best(lambda item: item.score)
    assert best is not None
    assert best.id == "A"


def test_select_best_negative_only(store: Store[Item]) -> None:
    """Test a record that never scores above zero is not selected."""
    store.set(Item(id="neg", score=-10))
    assert store.select_best(lambda item: item.score) is None


@pytest.mark.parametrize(
    ("scores", "expected"),
    [
        ([0, 0], None),
        ([-5, -1], None),
        ([-5, 0, 2], "2"),
        ([1, 3, 2], "1"),
        ([0.5, 0.25], "0"),
    ],
)
def test_select_best_zero_baseline(
    store: Store[Item], scores: list[float], expected: str | None
) -> None:
    """Test only records scoring strictly above zero are candidates."""
    for i, score in enumerate(scores):
        store.set(Item(id=str(i), score=score))  # type: ignore[arg-type]
    best = store.select_best(lambda item: item.score)
    assert (best.id if best else None) == expected


def test_select_best_pokemon() -> None:
    """Test the strongest pokemon is selected across multiple inserts."""
    store = StoreRegistry().get_instance(Pokemon)
    store.set(Pokemon(id="Bulba", attack=100, defense=120))
    store.set(Pokemon(id="Pika", attack=200, defense=100))

    best = store.select_best(lambda pokemon: pokemon.attack + pokemon.defense)
    assert best is not None
    assert best.id == "Pika"
