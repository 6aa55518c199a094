from __future__ import annotations

import itertools
import uuid


def new_id(prefix: str) -> str:
    return f"{prefix}_{uuid.uuid4().hex[:12]}"


class IdGenerator:
    """Identifier source scoped to a single conversion call.

    Ids combine a monotonic counter with a random token drawn once per
    generator, so every id handed out by one generator is distinct and ids
    from two generators are very unlikely to meet.
    """

    def __init__(self) -> None:
        self._counter = itertools.count(1)
        self._token = uuid.uuid4().hex[:6]

    def next(self, kind: str, *parts: object) -> str:
        segments = [kind, *(str(part) for part in parts), str(next(self._counter)), self._token]
        return "_".join(segments)


__all__ = ["IdGenerator", "new_id"]
