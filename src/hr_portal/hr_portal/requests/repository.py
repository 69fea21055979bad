from __future__ import annotations

from typing import Callable, Iterator, Optional, Protocol

from .kinds import R, RequestKind


class RequestRepository(Protocol):
    def next_id(self, kind: RequestKind) -> int:
        raise NotImplementedError

    def add(self, kind: RequestKind[R, object], req: R) -> None:
        raise NotImplementedError

    def get(self, kind: RequestKind[R, object], request_id: int) -> Optional[R]:
        raise NotImplementedError

    def transition(
        self,
        kind: RequestKind[R, object],
        request_id: int,
        decide: Callable[[Optional[R]], R],
    ) -> R:
        """Atomically replace a request with ``decide(current)``.

        ``decide`` receives None for an unknown id; any exception it raises aborts
        the write.
        """

        raise NotImplementedError

    def list_all(self, kind: RequestKind[R, object]) -> Iterator[R]:
        raise NotImplementedError
