"""Event logger for lookup tables

Records insertions, metadata updates, bulk loads and skipped names,
and provides summary statistics. Per-entry events are only kept in
verbose mode; loads, skips and warnings are always kept.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional


class TableEventKind(Enum):
    """Kinds of table events"""
    INSERT = "insert"
    UPDATE = "update"
    LOAD = "load"
    SKIP = "skip"


@dataclass
class TableEvent:
    """Record of a single table event

    Attributes:
        kind: Event kind
        table: Name of the table the event belongs to
        key: Key involved (None for whole-table events)
        index: Index involved, if any
        detail: Free-form description
        line: Source line number (optional)
    """
    kind: TableEventKind
    table: str
    key: Optional[str] = None
    index: Optional[int] = None
    detail: str = ""
    line: Optional[int] = None

    def format(self) -> str:
        """Format event for display

        Returns:
            Formatted string representation
        """
        parts = [f"  {self.kind.value} [{self.table}]"]
        if self.key is not None:
            parts.append(f"'{self.key}'")
        if self.index is not None:
            parts.append(f"#{self.index}")
        if self.detail:
            parts.append(f"- {self.detail}")
        if self.line:
            parts.append(f"(line {self.line})")
        return " ".join(parts)


class TableLogger:
    """Collects table events and warnings

    Usage Example:
        logger = TableLogger(verbose=True)
        table = IndexedTable(logger=logger)
        table.insert_or_get("x")
        print(logger.print_summary())
    """

    def __init__(self, verbose: bool = False) -> None:
        """Initialize table logger

        Args:
            verbose: If True, also record per-entry insert/update events
        """
        self.verbose = verbose
        self.events: List[TableEvent] = []
        self.warnings: List[str] = []

    def log_insert(self, table: str, key: str, index: int) -> None:
        """Log creation of a new entry (verbose only)"""
        if self.verbose:
            self.events.append(TableEvent(TableEventKind.INSERT, table, key, index))

    def log_update(self, table: str, key: str, index: int) -> None:
        """Log replacement of an existing entry's metadata (verbose only)"""
        if self.verbose:
            self.events.append(TableEvent(TableEventKind.UPDATE, table, key, index))

    def log_load(self, table: str, source: str, records: int) -> None:
        """Log a completed bulk load

        Args:
            table: Table name
            source: Description of the load source
            records: Number of records read
        """
        self.events.append(TableEvent(
            TableEventKind.LOAD, table, detail=f"{records} records from {source}"
        ))

    def log_skip(self, table: str, key: str, reason: str, line: Optional[int] = None) -> None:
        """Log a name that was deliberately not registered

        Args:
            table: Table the name was not added to
            key: Skipped name
            reason: Reason for skipping
            line: Source line number
        """
        self.events.append(TableEvent(
            TableEventKind.SKIP, table, key=key, detail=reason, line=line
        ))

    def log_warning(self, message: str) -> None:
        """Log a warning message"""
        self.warnings.append(message)

    def events_of(self, kind: TableEventKind) -> List[TableEvent]:
        """Get all events of one kind

        Args:
            kind: Event kind to filter by

        Returns:
            List of matching events in logging order
        """
        return [event for event in self.events if event.kind == kind]

    def get_summary(self) -> Dict:
        """Get summary statistics

        Returns:
            Dictionary with event counts
        """
        by_kind: Dict[TableEventKind, int] = {}
        for event in self.events:
            by_kind[event.kind] = by_kind.get(event.kind, 0) + 1

        by_table: Dict[str, int] = {}
        for event in self.events:
            by_table[event.table] = by_table.get(event.table, 0) + 1

        return {
            "total_events": len(self.events),
            "events_by_kind": by_kind,
            "events_by_table": by_table,
            "total_warnings": len(self.warnings),
        }

    def print_summary(self) -> str:
        """Generate formatted summary string

        Returns:
            Formatted summary as string
        """
        summary = self.get_summary()
        lines = ["=== Table Summary ===", f"Total events: {summary['total_events']}"]

        if summary['events_by_kind']:
            lines.append("Events by kind:")
            for kind, count in summary['events_by_kind'].items():
                lines.append(f"  {kind.value}: {count}")

        skipped = self.events_of(TableEventKind.SKIP)
        if skipped:
            lines.append("Skipped names (top 10):")
            for event in skipped[:10]:
                lines.append(event.format())

        lines.append(f"Warnings: {summary['total_warnings']}")
        for warning in self.warnings:
            lines.append(f"  {warning}")

        return "\n".join(lines)

    def clear(self) -> None:
        """Clear all logs"""
        self.events.clear()
        self.warnings.clear()
