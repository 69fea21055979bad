from __future__ import annotations

import threading

import pytest

from src.hr_portal.hr_portal.core.exceptions import NotFoundError, StorageError
from src.hr_portal.hr_portal.store.memory_store import InMemoryRecordStore


def test_get_missing_key_returns_none(store):
    assert store.get("leave:1") is None


def test_get_returns_a_copy_of_the_stored_value(store):
    store.put("leave:1", {"status": "Pending"})

    value = store.get("leave:1")
    value["status"] = "Approved"

    assert store.get("leave:1") == {"status": "Pending"}


def test_update_passes_none_for_missing_key(store):
    seen = []

    def mutate(current):
        seen.append(current)
        return {"count": 1}

    assert store.update("attendance:1:2026-02-02", mutate) == {"count": 1}
    assert seen == [None]


def test_failed_update_leaves_value_untouched(store):
    store.put("leave:1", {"status": "Pending"})

    def mutate(current):
        raise NotFoundError("boom")

    with pytest.raises(NotFoundError):
        store.update("leave:1", mutate)

    assert store.get("leave:1") == {"status": "Pending"}


def test_concurrent_updates_do_not_lose_increments(store):
    barrier = threading.Barrier(20)

    def mutate(current):
        count = (current or {}).get("count", 0)
        return {"count": count + 1}

    def worker():
        barrier.wait()
        store.update("counter", mutate)

    threads = [threading.Thread(target=worker) for _ in range(20)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert store.get("counter") == {"count": 20}


def test_scan_filters_by_prefix_in_key_order(store):
    store.put("leave:2", {"id": 2})
    store.put("regularization:1", {"id": 1})
    store.put("leave:1", {"id": 1})

    assert list(store.scan("leave:")) == [("leave:1", {"id": 1}), ("leave:2", {"id": 2})]


def test_corrupt_payload_raises_storage_error(store):
    store._data["leave:1"] = "{not json"

    with pytest.raises(StorageError):
        store.get("leave:1")
    with pytest.raises(StorageError):
        list(store.scan("leave:"))


def test_non_serializable_value_raises_storage_error(store):
    with pytest.raises(StorageError):
        store.put("leave:1", {"when": object()})
    assert store.get("leave:1") is None


def test_next_sequence_is_unique_under_concurrency(store):
    results: list[int] = []
    lock = threading.Lock()

    def worker():
        for _ in range(50):
            value = store.next_sequence("leave")
            with lock:
                results.append(value)

    threads = [threading.Thread(target=worker) for _ in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert sorted(results) == list(range(1, 201))
    assert store.next_sequence("regularization") == 1


def test_lock_pool_stays_bounded_as_keys_grow():
    store = InMemoryRecordStore(lock_stripes=4)

    for i in range(500):
        store.put(f"attendance:{i}:2026-02-02", {"n": i})

    assert len(store._locks) == 4
    assert store.get("attendance:499:2026-02-02") == {"n": 499}


def test_keys_sharing_a_lock_stripe_still_serialize():
    store = InMemoryRecordStore(lock_stripes=1)
    keys = ["attendance:1:2026-02-02", "attendance:2:2026-02-02"]

    def bump(current):
        value = dict(current or {"n": 0})
        value["n"] += 1
        return value

    def worker(key):
        for _ in range(25):
            store.update(key, bump)

    threads = [threading.Thread(target=worker, args=(k,)) for k in keys for _ in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert [store.get(k)["n"] for k in keys] == [100, 100]


def test_lock_stripes_must_be_positive():
    with pytest.raises(ValueError):
        InMemoryRecordStore(lock_stripes=0)
