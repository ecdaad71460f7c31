"""Record id generation.

Guest and task ids only need to be unique within their document. The
default generator uses random uuid4 hex strings; tests can inject a
sequential one to get predictable ids.
"""

from __future__ import annotations

import itertools
import uuid
from threading import Lock


class IdGenerator:
    """Interface: ``new_id()`` returns a fresh string id."""

    def new_id(self) -> str:
        raise NotImplementedError


class UUIDGenerator(IdGenerator):
    def new_id(self) -> str:
        return uuid.uuid4().hex


class SequentialIdGenerator(IdGenerator):
    """Monotonic counter ids with an optional prefix (thread-safe)."""

    def __init__(self, start: int = 1, prefix: str = ''):
        self._counter = itertools.count(start)
        self._prefix = prefix
        self._lock = Lock()

    def new_id(self) -> str:
        with self._lock:
            value = next(self._counter)
        return f'{self._prefix}{value}'
