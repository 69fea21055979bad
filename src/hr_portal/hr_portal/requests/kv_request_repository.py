from __future__ import annotations

from typing import Callable, Iterator, Optional

from ..core.exceptions import StorageError
from ..store.repository import RecordStore
from .kinds import R, RequestKind
from .repository import RequestRepository


def request_key(kind: RequestKind, request_id: int) -> str:
    return f"{kind.name}:{int(request_id)}"


class KVRequestRepository(RequestRepository):
    def __init__(self, store: RecordStore):
        self._store = store

    @staticmethod
    def _load(kind: RequestKind[R, object], key: str, r: dict) -> R:
        try:
            return kind.from_payload(r)
        except (KeyError, TypeError, ValueError) as exc:
            raise StorageError(f"Corrupt {kind.name} record {key!r}") from exc

    def next_id(self, kind: RequestKind) -> int:
        return self._store.next_sequence(kind.name)

    def add(self, kind: RequestKind[R, object], req: R) -> None:
        self._store.put(request_key(kind, req.request_id), kind.to_payload(req))

    def get(self, kind: RequestKind[R, object], request_id: int) -> Optional[R]:
        key = request_key(kind, request_id)
        r = self._store.get(key)
        if r is None:
            return None
        return self._load(kind, key, r)

    def transition(
        self,
        kind: RequestKind[R, object],
        request_id: int,
        decide: Callable[[Optional[R]], R],
    ) -> R:
        key = request_key(kind, request_id)

        def _apply(current: Optional[dict]) -> dict:
            req = self._load(kind, key, current) if current is not None else None
            return kind.to_payload(decide(req))

        return self._load(kind, key, self._store.update(key, _apply))

    def list_all(self, kind: RequestKind[R, object]) -> Iterator[R]:
        for key, r in self._store.scan(f"{kind.name}:"):
            yield self._load(kind, key, r)
