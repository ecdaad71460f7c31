"""JSON file persistence for front desk records."""

from frontdesk.storage.errors import (
    RecordFileError,
    RecordNotFoundError,
    RecordParseError,
    RecordStoreError,
)
from frontdesk.storage.record_store import RecordStore

__all__ = [
    'RecordStore',
    'RecordStoreError',
    'RecordFileError',
    'RecordParseError',
    'RecordNotFoundError',
]
