"""Indexed table for compiler front ends

Maps unique string keys to dense, zero-based indices plus a metadata
payload. Indices are assigned in order of first insertion and never
change afterwards; entries are never removed, so the assigned indices
are always exactly range(size()).

Lookups return the stored metadata object itself, not a copy. Edits
made through it are visible to later lookups until the next
insert_or_get() call for the same key replaces the object.
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, Generic, List, Optional, Tuple, TypeVar

from lextables.core.table_logger import TableLogger

M = TypeVar('M')

_MISSING: Any = object()


@dataclass
class TableEntry(Generic[M]):
    """Stored value for one key"""
    index: int
    metadata: M


class IndexedTable(Generic[M]):
    """Insertion-ordered key to (index, metadata) registry"""

    def __init__(
        self,
        metadata_factory: Optional[Callable[[], M]] = None,
        logger: Optional[TableLogger] = None,
        name: str = "variables",
    ) -> None:
        """Initialize empty table

        Args:
            metadata_factory: Builds default metadata when insert_or_get() is called without it
            logger: Optional event logger
            name: Table name used in log records
        """
        self._entries: Dict[str, TableEntry[M]] = {}
        self._keys: List[str] = []
        self._metadata_factory = metadata_factory if metadata_factory is not None else (lambda: None)
        self._logger = logger
        self.name = name

    @property
    def next_index(self) -> int:
        """Index the next new key will receive"""
        return len(self._keys)

    def find_index(self, key: str) -> Optional[int]:
        """Find the index of a key

        Args:
            key: Key to look up

        Returns:
            Index if present, None otherwise (also for non-str keys)
        """
        entry = self._entry(key)
        if entry is None:
            return None
        return entry.index

    def find_metadata(self, key: str) -> Optional[M]:
        """Find the metadata stored for a key

        Args:
            key: Key to look up

        Returns:
            Stored metadata if present, None otherwise
        """
        entry = self._entry(key)
        if entry is None:
            return None
        return entry.metadata

    def find_key_by_index(self, index: int) -> Optional[str]:
        """Find the key owning an index

        Args:
            index: Index to look up

        Returns:
            Key if some entry owns the index, None otherwise
        """
        if not self._valid_index(index):
            return None
        return self._keys[index]

    def find_metadata_by_index(self, index: int) -> Optional[M]:
        """Find the metadata of the key owning an index

        Args:
            index: Index to look up

        Returns:
            Stored metadata, or None for an index outside [0, next_index)
        """
        key = self.find_key_by_index(index)
        if key is None:
            return None
        return self._entries[key].metadata

    def find_entry_by_index(self, index: int) -> Optional[Tuple[str, M]]:
        """Find the key and metadata owning an index

        Args:
            index: Index to look up

        Returns:
            (key, metadata) tuple, or None if no entry owns the index
        """
        key = self.find_key_by_index(index)
        if key is None:
            return None
        return key, self._entries[key].metadata

    def insert_or_get(self, key: str, metadata: M = _MISSING) -> int:
        """Add a key, or replace the metadata of an existing one

        Args:
            key: Key to insert
            metadata: Metadata to store, None included (default: metadata_factory())

        Returns:
            Index of the new or already existing entry

        Raises:
            TypeError: If key is not a string
        """
        if not isinstance(key, str):
            raise TypeError(f"Table keys must be str, got {type(key).__name__}")
        if metadata is _MISSING:
            metadata = self._metadata_factory()

        entry = self._entries.get(key)
        if entry is not None:
            entry.metadata = metadata
            if self._logger:
                self._logger.log_update(self.name, key, entry.index)
            return entry.index

        index = len(self._keys)
        self._entries[key] = TableEntry(index, metadata)
        self._keys.append(key)
        if self._logger:
            self._logger.log_insert(self.name, key, index)
        return index

    def contains(self, key: str) -> bool:
        """Check if key is in the table"""
        return self._entry(key) is not None

    def size(self) -> int:
        """Get number of entries"""
        return len(self._keys)

    def all_keys(self) -> List[str]:
        """Get all keys in index order

        Returns:
            Copy of the key list
        """
        return list(self._keys)

    def entries(self) -> List[Tuple[str, int, M]]:
        """Get all entries in index order

        Returns:
            List of (key, index, metadata) tuples
        """
        return [(key, index, self._entries[key].metadata) for index, key in enumerate(self._keys)]

    def _entry(self, key: str) -> Optional[TableEntry[M]]:
        if not isinstance(key, str):
            return None
        return self._entries.get(key)

    def _valid_index(self, index: int) -> bool:
        # bool is an int subclass but never a meaningful index
        if not isinstance(index, int) or isinstance(index, bool):
            return False
        return 0 <= index < len(self._keys)
