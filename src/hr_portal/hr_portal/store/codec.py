from __future__ import annotations

import json

from ..core.exceptions import StorageError


def encode(key: str, value: dict) -> str:
    try:
        return json.dumps(value, sort_keys=True, ensure_ascii=False)
    except (TypeError, ValueError) as exc:
        raise StorageError(f"Cannot serialize record {key!r}: {exc}") from exc


def decode(key: str, raw: str) -> dict:
    try:
        value = json.loads(raw)
    except (TypeError, ValueError) as exc:
        raise StorageError(f"Corrupt payload for record {key!r}") from exc
    if not isinstance(value, dict):
        raise StorageError(f"Corrupt payload for record {key!r}: expected an object")
    return value
