from __future__ import annotations

from typing import Callable, Iterator, Optional, Protocol, Tuple

Mutator = Callable[[Optional[dict]], dict]


class RecordStore(Protocol):
    """Durable key-value storage shared by every feature module.

    Keys are composite strings such as ``attendance:{employee_id}:{date}``;
    values are JSON-serializable dicts.
    """

    def get(self, key: str) -> Optional[dict]:
        raise NotImplementedError

    def put(self, key: str, value: dict) -> None:
        raise NotImplementedError

    def update(self, key: str, mutate: Mutator) -> dict:
        """Atomic read-modify-write of one key.

        ``mutate`` receives the current value (None when missing) and returns the
        value to store. If it raises, nothing is written and the error propagates.
        """

        raise NotImplementedError

    def scan(self, prefix: str) -> Iterator[Tuple[str, dict]]:
        """Yield (key, value) pairs whose key starts with ``prefix``, ordered by key."""

        raise NotImplementedError

    def next_sequence(self, name: str) -> int:
        """Return the next value of a named counter (1, 2, 3, ...)."""

        raise NotImplementedError
