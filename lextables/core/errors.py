"""Exceptions raised while loading lookup tables"""

from typing import Optional


class LoadError(Exception):
    """Base class for bulk-load failures"""


class UnopenableSourceError(LoadError):
    """Raised when a load source cannot be opened or read"""

    def __init__(self, source: object, reason: Optional[str] = None) -> None:
        self.source = source
        self.reason = reason
        message = f"Cannot open source {source}"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class MalformedRecordError(LoadError):
    """Raised when a record is not a complete (integer, string) pair

    Attributes:
        record_number: 1-based number of the offending record
        token: Token that could not be parsed (None for a truncated record)
    """

    def __init__(self, record_number: int, token: Optional[str], reason: str) -> None:
        self.record_number = record_number
        self.token = token
        self.reason = reason
        super().__init__(f"Malformed record #{record_number}: {reason}")
