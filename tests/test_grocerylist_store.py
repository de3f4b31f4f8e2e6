import json
import random
import threading
from concurrent.futures import ThreadPoolExecutor

import pytest

from components.grocerylist.store import InMemoryGroceryStore


def test_put_inserts_then_overwrites():
    store = InMemoryGroceryStore()
    store.put("milk", 2)
    assert store.snapshot() == {"milk": 2}
    store.put("milk", 5)
    assert store.snapshot() == {"milk": 5}
    assert len(store) == 1


def test_zero_and_negative_quantities_are_kept():
    store = InMemoryGroceryStore()
    store.put("flour", 0)
    store.put("sugar", -3)
    assert store.snapshot() == {"flour": 0, "sugar": -3}
    assert "flour" in store


def test_remove_missing_is_noop():
    store = InMemoryGroceryStore()
    store.remove("milk")
    assert store.snapshot() == {}


def test_remove_twice_same_as_once():
    store = InMemoryGroceryStore()
    store.put("eggs", 12)
    store.put("bread", 1)
    store.remove("eggs")
    once = dict(store.snapshot())
    store.remove("eggs")
    assert store.snapshot() == once == {"bread": 1}


def test_put_twice_same_as_once():
    store = InMemoryGroceryStore()
    store.put("milk", 2)
    once = dict(store.snapshot())
    store.put("milk", 2)
    assert store.snapshot() == once


def test_snapshot_is_immutable_and_detached():
    store = InMemoryGroceryStore()
    store.put("milk", 2)
    snap = store.snapshot()
    with pytest.raises(TypeError):
        snap["milk"] = 3  # type: ignore[index]
    store.put("milk", 7)
    store.put("tea", 1)
    assert snap == {"milk": 2}


def test_snapshot_reflects_net_effect_of_sequence():
    rng = random.Random(1234)
    names = ["milk", "eggs", "bread", "tea", "rice"]
    store = InMemoryGroceryStore()
    expected = {}
    for _ in range(500):
        name = rng.choice(names)
        if rng.random() < 0.6:
            qty = rng.randint(-5, 50)
            store.put(name, qty)
            expected[name] = qty
        else:
            store.remove(name)
            expected.pop(name, None)
    assert store.snapshot() == expected


def test_concurrent_distinct_puts_are_not_lost():
    store = InMemoryGroceryStore()
    n = 500
    with ThreadPoolExecutor(max_workers=32) as pool:
        list(pool.map(lambda i: store.put(f"item-{i}", i), range(n)))
    snap = store.snapshot()
    assert len(snap) == n
    assert all(snap[f"item-{i}"] == i for i in range(n))


def test_concurrent_snapshots_are_identical():
    store = InMemoryGroceryStore()
    for i in range(100):
        store.put(f"item-{i}", i)

    n = 64
    barrier = threading.Barrier(n, timeout=5)

    def read(_):
        barrier.wait()
        return json.dumps(dict(store.snapshot()), sort_keys=True).encode()

    with ThreadPoolExecutor(max_workers=n) as pool:
        results = list(pool.map(read, range(n)))
    assert len(set(results)) == 1


def test_snapshots_never_see_partial_batches():
    # Writers keep both keys equal; a reader must never see them differ.
    store = InMemoryGroceryStore()
    store.put("a", 0)
    store.put("b", 0)
    stop = threading.Event()
    mismatches = []

    def writer():
        i = 0
        while not stop.is_set():
            i += 1
            store.put("a", i)
            store.put("b", i)

    def reader():
        while not stop.is_set():
            snap = store.snapshot()
            # a is always written first, so b may lag by at most one write
            if snap["a"] - snap["b"] not in (0, 1):
                mismatches.append(dict(snap))

    threads = [threading.Thread(target=writer)] + [threading.Thread(target=reader) for _ in range(4)]
    for t in threads:
        t.start()
    threading.Event().wait(0.2)
    stop.set()
    for t in threads:
        t.join(timeout=5)
    assert not mismatches
