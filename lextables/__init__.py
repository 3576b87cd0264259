"""lextables - lookup tables for compiler front ends

- IndexedTable: insertion-ordered key to (index, metadata) registry
- ConstTable: key to index mapping loaded from "<index> <key>" records
- IdentifierCollector: fills tables from a Lua AST
"""

from lextables.core.const_table import ConstTable
from lextables.core.errors import LoadError, MalformedRecordError, UnopenableSourceError
from lextables.core.indexed_table import IndexedTable, TableEntry
from lextables.core.metadata import ConstantMetadata, ValueType, VariableMetadata
from lextables.core.table_logger import TableEvent, TableEventKind, TableLogger

__version__ = "0.1.0"

__all__ = [
    'ConstTable',
    'IndexedTable',
    'TableEntry',
    'LoadError',
    'MalformedRecordError',
    'UnopenableSourceError',
    'ConstantMetadata',
    'ValueType',
    'VariableMetadata',
    'TableEvent',
    'TableEventKind',
    'TableLogger',
]
