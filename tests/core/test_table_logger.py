"""Tests for table logger and metadata records"""

from lextables.core.metadata import ConstantMetadata, ValueType, VariableMetadata
from lextables.core.table_logger import TableEvent, TableEventKind, TableLogger


class TestTableLogger:
    """Test suite for TableLogger"""

    def test_initial_state(self):
        logger = TableLogger()
        assert logger.events == []
        assert logger.warnings == []
        assert logger.get_summary()["total_events"] == 0

    def test_entry_events_need_verbose(self):
        """Test insert/update are dropped unless verbose"""
        quiet = TableLogger()
        quiet.log_insert("ids", "x", 0)
        quiet.log_update("ids", "x", 0)
        assert quiet.events == []

        verbose = TableLogger(verbose=True)
        verbose.log_insert("ids", "x", 0)
        verbose.log_update("ids", "x", 0)
        assert len(verbose.events) == 2

    def test_load_and_skip_always_logged(self):
        logger = TableLogger()
        logger.log_load("constants", "keywords.txt", 3)
        logger.log_skip("identifiers", "main", "reserved word", line=2)

        assert len(logger.events_of(TableEventKind.LOAD)) == 1
        skip = logger.events_of(TableEventKind.SKIP)[0]
        assert skip.key == "main"
        assert skip.line == 2

    def test_summary_counts(self):
        logger = TableLogger(verbose=True)
        logger.log_insert("ids", "x", 0)
        logger.log_insert("ids", "y", 1)
        logger.log_skip("ids", "main", "reserved word")
        logger.log_warning("something odd")

        summary = logger.get_summary()
        assert summary["total_events"] == 3
        assert summary["events_by_kind"][TableEventKind.INSERT] == 2
        assert summary["events_by_table"]["ids"] == 3
        assert summary["total_warnings"] == 1

    def test_print_summary(self):
        logger = TableLogger()
        logger.log_skip("identifiers", "main", "reserved word", line=4)
        logger.log_warning("Duplicate key 'int'")

        text = logger.print_summary()
        assert "=== Table Summary ===" in text
        assert "skip: 1" in text
        assert "'main'" in text
        assert "(line 4)" in text
        assert "Duplicate key 'int'" in text

    def test_clear(self):
        logger = TableLogger()
        logger.log_load("constants", "x", 1)
        logger.log_warning("w")
        logger.clear()
        assert logger.events == []
        assert logger.warnings == []


class TestTableEvent:
    """Test suite for TableEvent"""

    def test_format(self):
        event = TableEvent(TableEventKind.INSERT, "ids", key="x", index=0)
        assert event.format() == "  insert [ids] 'x' #0"

    def test_format_whole_table_event(self):
        event = TableEvent(TableEventKind.LOAD, "constants", detail="3 records from k.txt")
        assert event.format() == "  load [constants] - 3 records from k.txt"


class TestMetadata:
    """Test suite for metadata records"""

    def test_variable_defaults(self):
        metadata = VariableMetadata()
        assert metadata.type == ValueType.UNDEFINED
        assert metadata.value == 0
        assert str(metadata) == "undefined"

    def test_variable_integer(self):
        assert str(VariableMetadata(ValueType.INTEGER, 5)) == "integer=5"

    def test_constant_defaults(self):
        metadata = ConstantMetadata()
        assert metadata.type == ValueType.INTEGER
        assert str(metadata) == "integer"
