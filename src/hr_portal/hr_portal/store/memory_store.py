from __future__ import annotations

import threading
from collections import defaultdict
from typing import Dict, Iterator, List, Optional, Tuple

from .codec import decode, encode
from .repository import Mutator, RecordStore

DEFAULT_LOCK_STRIPES = 64


class InMemoryRecordStore(RecordStore):
    """Process-local store keeping serialized JSON per key.

    Writes to the same key are serialized by a lock picked from a fixed pool of
    stripes; reads are lock-free snapshots of the last committed payload.
    """

    def __init__(self, lock_stripes: int = DEFAULT_LOCK_STRIPES) -> None:
        if lock_stripes < 1:
            raise ValueError("lock_stripes must be >= 1")
        self._data: Dict[str, str] = {}
        self._locks: List[threading.Lock] = [threading.Lock() for _ in range(lock_stripes)]
        self._sequences: Dict[str, int] = defaultdict(int)
        self._sequences_lock = threading.Lock()

    def _lock_for(self, key: str) -> threading.Lock:
        return self._locks[hash(key) % len(self._locks)]

    def get(self, key: str) -> Optional[dict]:
        raw = self._data.get(key)
        if raw is None:
            return None
        return decode(key, raw)

    def put(self, key: str, value: dict) -> None:
        raw = encode(key, value)
        with self._lock_for(key):
            self._data[key] = raw

    def update(self, key: str, mutate: Mutator) -> dict:
        with self._lock_for(key):
            current = self.get(key)
            new_value = mutate(current)
            self._data[key] = encode(key, new_value)
            return decode(key, self._data[key])

    def scan(self, prefix: str) -> Iterator[Tuple[str, dict]]:
        keys = sorted(k for k in list(self._data) if k.startswith(prefix))
        for key in keys:
            raw = self._data.get(key)
            if raw is None:
                continue
            yield key, decode(key, raw)

    def next_sequence(self, name: str) -> int:
        with self._sequences_lock:
            self._sequences[name] += 1
            return self._sequences[name]
