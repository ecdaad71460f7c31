"""Flat JSON file record store.

Each document lives in ``<data_dir>/<name>.json`` and holds a single
top-level object with one named array, e.g. ``{"rooms": [...]}``.

Every call is a whole-file read or a whole-file rewrite. Writes go to a
temporary file in the same directory and are moved into place with
``os.replace`` so readers never see a half-written document.

Usage:
    store = RecordStore('/srv/hotel/data')

    rooms = store.read('rooms')

    with store.update('cleaningTasks') as tasks:
        tasks.append({...})
"""

from __future__ import annotations

import json
import os
import tempfile
from contextlib import contextmanager
from threading import RLock
from typing import Dict, Iterable, Iterator, List

from frontdesk.storage.errors import RecordFileError, RecordParseError


Record = Dict[str, object]


class RecordStore:
    """Read and write named record arrays stored as JSON files.

    - One re-entrant lock per document, owned by this instance
    - ``update()`` holds the lock across the read-modify-write cycle
    - No schema validation; unknown fields are written back untouched
    """

    def __init__(self, data_dir: str):
        self.data_dir = os.path.abspath(data_dir)
        self._locks: Dict[str, RLock] = {}
        self._locks_guard = RLock()

    def path_for(self, name: str) -> str:
        if not name or os.sep in name or (os.altsep and os.altsep in name) or name in ('.', '..'):
            raise ValueError(f'Invalid document name: {name!r}')
        return os.path.join(self.data_dir, f'{name}.json')

    def _lock_for(self, name: str) -> RLock:
        with self._locks_guard:
            lock = self._locks.get(name)
            if lock is None:
                lock = RLock()
                self._locks[name] = lock
            return lock

    def _load(self, name: str) -> List[Record]:
        path = self.path_for(name)
        try:
            with open(path, 'r', encoding='utf-8') as handle:
                data = json.load(handle)
        except FileNotFoundError as exc:
            raise RecordFileError(f'Data file not found: {path}') from exc
        except json.JSONDecodeError as exc:
            raise RecordParseError(f'Malformed JSON in {path}: {exc}') from exc
        except (OSError, UnicodeDecodeError) as exc:
            raise RecordFileError(f'Could not read {path}: {exc}') from exc

        if not isinstance(data, dict):
            raise RecordParseError(f'{path} must contain a JSON object')
        records = data.get(name)
        if records is None:
            return []
        if not isinstance(records, list):
            raise RecordParseError(f'"{name}" in {path} must be an array')
        return records

    def _dump(self, name: str, records: Iterable[Record]) -> None:
        path = self.path_for(name)
        payload = {name: list(records)}
        tmp_path = None
        try:
            os.makedirs(self.data_dir, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(prefix=f'.{name}.', suffix='.tmp', dir=self.data_dir)
            with os.fdopen(fd, 'w', encoding='utf-8') as handle:
                json.dump(payload, handle, indent=2)
            os.replace(tmp_path, path)
            tmp_path = None
        except (OSError, TypeError, ValueError) as exc:
            raise RecordFileError(f'Could not write {path}: {exc}') from exc
        finally:
            if tmp_path is not None and os.path.exists(tmp_path):
                os.unlink(tmp_path)

    def read(self, name: str) -> List[Record]:
        """Return the records stored under ``name``."""
        with self._lock_for(name):
            return self._load(name)

    def write(self, name: str, records: Iterable[Record]) -> None:
        """Overwrite the document ``name`` with ``records``."""
        with self._lock_for(name):
            self._dump(name, records)

    @contextmanager
    def update(self, name: str) -> Iterator[List[Record]]:
        """Lock ``name``, yield its records for mutation, then write them back.

        Nothing is written if the block raises.
        """
        with self._lock_for(name):
            records = self._load(name)
            yield records
            self._dump(name, records)

    def ensure(self, name: str, default: Iterable[Record] = ()) -> bool:
        """Create ``name`` with ``default`` records if the file is missing.

        Returns True when the file was created.
        """
        with self._lock_for(name):
            if os.path.exists(self.path_for(name)):
                return False
            self._dump(name, default)
            return True
