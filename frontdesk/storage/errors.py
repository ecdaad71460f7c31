"""Errors raised by the JSON record store."""


class RecordStoreError(RuntimeError):
    """Base class for record store failures."""


class RecordFileError(RecordStoreError):
    """Raised when a data file is missing, unreadable or unwritable."""


class RecordParseError(RecordStoreError):
    """Raised when a data file does not hold a valid JSON document."""


class RecordNotFoundError(RecordStoreError):
    """Raised when a referenced record id is absent."""
