"""Constant table for compiler front ends

A read-only key to index mapping filled by a bulk load from a text
source of whitespace-separated "<integer> <key>" records, e.g. a
reserved-word list:

    0 int
    1 main
    2 if
"""

import os
import re
from typing import Dict, Iterator, Optional, TextIO, Tuple, Union

from lextables.core.errors import MalformedRecordError, UnopenableSourceError
from lextables.core.table_logger import TableLogger

Source = Union[str, os.PathLike, TextIO]

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


class ConstTable:
    """Key to index mapping populated by bulk load"""

    def __init__(self, logger: Optional[TableLogger] = None, name: str = "constants") -> None:
        """Initialize empty table

        Args:
            logger: Optional event logger
            name: Table name used in log records
        """
        self._data: Dict[str, int] = {}
        self._logger = logger
        self.name = name

    @classmethod
    def from_source(cls, source: Source, logger: Optional[TableLogger] = None) -> "ConstTable":
        """Create a table and load it from a source

        Args:
            source: Path or open text stream
            logger: Optional event logger

        Returns:
            Loaded table
        """
        table = cls(logger=logger)
        table.load_from_source(source)
        return table

    def find_index(self, key: str) -> Optional[int]:
        """Find the index of a key

        Args:
            key: Key to look up

        Returns:
            Index if present, None otherwise (also for non-str keys)
        """
        if not isinstance(key, str):
            return None
        return self._data.get(key)

    def contains(self, key: str) -> bool:
        """Check if key is in the table"""
        return isinstance(key, str) and key in self._data

    def size(self) -> int:
        """Get number of keys"""
        return len(self._data)

    def all_entries(self) -> Dict[str, int]:
        """Get a copy of the key to index mapping"""
        return dict(self._data)

    def load_from_source(self, source: Source) -> None:
        """Load (index, key) records from a path or text stream

        Records are staged and merged into the table only when the whole
        source has been read, so a failed load leaves the table unchanged.
        A duplicate key keeps the last index read for it.

        Args:
            source: Path to a text file, or an open text stream

        Raises:
            UnopenableSourceError: If the source cannot be opened or read
            MalformedRecordError: If a record is not a full (integer, key) pair
        """
        if hasattr(source, "read"):
            staged, records = self._read_all(source)
            description = getattr(source, "name", "<stream>")
        else:
            path = os.fspath(source)
            try:
                with open(path, "r", encoding="utf-8") as stream:
                    staged, records = self._read_all(stream)
            except OSError as e:
                raise UnopenableSourceError(source, e.strerror or str(e)) from e
            description = path

        self._data.update(staged)
        if self._logger:
            self._logger.log_load(self.name, str(description), records)

    def load_from_file(self, path: Union[str, os.PathLike]) -> None:
        """Load records from a file path (see load_from_source)"""
        self.load_from_source(path)

    def _read_all(self, stream: TextIO) -> Tuple[Dict[str, int], int]:
        staged: Dict[str, int] = {}
        records = 0
        try:
            for index, key in self._read_records(stream):
                records += 1
                if key in staged and self._logger:
                    self._logger.log_warning(
                        f"Duplicate key '{key}' in {self.name}: index {staged[key]} replaced by {index}"
                    )
                staged[key] = index
        except (OSError, ValueError) as e:
            # closed stream, binary-mode stream or undecodable bytes
            raise UnopenableSourceError(getattr(stream, "name", "<stream>"), str(e)) from e
        return staged, records

    def _read_records(self, stream: TextIO) -> Iterator[Tuple[int, str]]:
        """Yield one complete (index, key) record at a time

        Reading stops at the first record that cannot be fully extracted:
        running out of tokens before a record starts is the normal end,
        running out after its index token is a truncated record.
        """
        tokens = self._tokens(stream)
        record_number = 0
        while True:
            index_token = next(tokens, None)
            if index_token is None:
                return
            record_number += 1

            key_token = next(tokens, None)
            if key_token is None:
                raise MalformedRecordError(record_number, index_token, "missing key after index")
            if not _INTEGER_RE.fullmatch(index_token):
                raise MalformedRecordError(record_number, index_token, f"index '{index_token}' is not an integer")

            yield int(index_token), key_token

    @staticmethod
    def _tokens(stream: TextIO) -> Iterator[str]:
        for line in stream:
            if not isinstance(line, str):
                raise ValueError("stream is not in text mode")
            yield from line.split()
