"""Identifier collector for Lua sources

AST visitor that fills an identifier table and an integer literal table
from a Lua chunk, in order of first appearance. Names listed in a
reserved-word ConstTable are never registered.

Usage:
    collector = collect_identifiers("local x = 5\\nprint(x)")
    collector.identifiers.find_index("x")      # 0
    collector.literals.find_index("5")         # 0
"""

from typing import Any, List, Optional

from lextables.core.ast_visitor import ASTVisitor
from lextables.core.const_table import ConstTable
from lextables.core.indexed_table import IndexedTable
from lextables.core.metadata import ConstantMetadata, ValueType, VariableMetadata
from lextables.core.table_logger import TableLogger

try:
    from luaparser import ast, astnodes
except ImportError:
    raise ImportError(
        "luaparser is required. Install with: pip install luaparser"
    )


class IdentifierCollector(ASTVisitor):
    """Collects identifiers and integer literals into indexed tables

    Declarations and assignments store metadata inferred from the assigned
    value (INTEGER for integer literals, UNDEFINED otherwise), replacing any
    earlier metadata. Plain references only register names not seen yet.
    Field names (t.x), method names (t:m()), constructor keys ({x = 1}),
    labels and goto targets are not identifiers.
    """

    def __init__(self, reserved: Optional[ConstTable] = None,
                 logger: Optional[TableLogger] = None) -> None:
        """Initialize collector

        Args:
            reserved: Reserved-word table; matching names are skipped
            logger: Optional event logger shared with the tables
        """
        self._reserved = reserved
        self._logger = logger
        self.identifiers: IndexedTable[VariableMetadata] = IndexedTable(
            VariableMetadata, logger, name="identifiers"
        )
        self.literals: IndexedTable[ConstantMetadata] = IndexedTable(
            ConstantMetadata, logger, name="literals"
        )

    def visit_LocalAssign(self, node: astnodes.LocalAssign) -> None:
        self._visit_assignment(node.targets, node.values)

    def visit_Assign(self, node: astnodes.Assign) -> None:
        self._visit_assignment(node.targets, node.values)

    def visit_Name(self, node: astnodes.Name) -> None:
        name = node.id
        if self._is_reserved(name, node):
            return
        if not self.identifiers.contains(name):
            self.identifiers.insert_or_get(name)

    def visit_Number(self, node: astnodes.Number) -> None:
        value = self._integer_value(node)
        if value is not None:
            self.literals.insert_or_get(str(value))

    def visit_UMinusOp(self, node: astnodes.UMinusOp) -> None:
        value = self._integer_value(node)
        if value is not None:
            self.literals.insert_or_get(str(value))
        else:
            self.generic_visit(node)

    def visit_Index(self, node: astnodes.Index) -> None:
        self.visit(node.value)
        # t.x names a field, t[x] reads a variable
        if getattr(node, "notation", None) == astnodes.IndexNotation.SQUARE:
            self.visit(node.idx)
        elif not isinstance(node.idx, astnodes.Name):
            self.visit(node.idx)

    def visit_Invoke(self, node: astnodes.Invoke) -> None:
        self.visit(node.source)
        self.visit_all(node.args)

    def visit_Field(self, node: astnodes.Field) -> None:
        if getattr(node, "between_brackets", False):
            self.visit(node.key)
        self.visit(node.value)

    def visit_Function(self, node: astnodes.Function) -> None:
        if isinstance(node.name, astnodes.Name):
            self._declare(node.name, VariableMetadata())
        else:
            self.visit(node.name)
        self._visit_function_body(node.args, node.body)

    def visit_LocalFunction(self, node: astnodes.LocalFunction) -> None:
        self._declare(node.name, VariableMetadata())
        self._visit_function_body(node.args, node.body)

    def visit_Method(self, node: astnodes.Method) -> None:
        self.visit(node.source)
        self._declare_name("self", node)
        self._visit_function_body(node.args, node.body)

    def visit_AnonymousFunction(self, node: astnodes.AnonymousFunction) -> None:
        self._visit_function_body(node.args, node.body)

    def visit_Fornum(self, node: astnodes.Fornum) -> None:
        self._declare(node.target, self._metadata_for(node.start))
        self.visit_all([node.start, node.stop, node.step, node.body])

    def visit_Forin(self, node: astnodes.Forin) -> None:
        for target in node.targets:
            self._declare(target, VariableMetadata())
        self.visit_all(node.iter if isinstance(node.iter, list) else [node.iter])
        self.visit(node.body)

    def visit_Label(self, node: astnodes.Label) -> None:
        pass

    def visit_Goto(self, node: astnodes.Goto) -> None:
        pass

    def _visit_assignment(self, targets: List[Any], values: List[Any]) -> None:
        for position, target in enumerate(targets):
            if isinstance(target, astnodes.Name):
                value = values[position] if position < len(values) else None
                self._declare(target, self._metadata_for(value))
            else:
                self.visit(target)
        self.visit_all(values)

    def _visit_function_body(self, args: List[Any], body: Any) -> None:
        for arg in args:
            if isinstance(arg, astnodes.Name):
                self._declare(arg, VariableMetadata())
        self.visit(body)

    def _declare(self, node: astnodes.Name, metadata: VariableMetadata) -> Optional[int]:
        if self._is_reserved(node.id, node):
            return None
        return self.identifiers.insert_or_get(node.id, metadata)

    def _declare_name(self, name: str, node: Any) -> Optional[int]:
        if self._is_reserved(name, node):
            return None
        return self.identifiers.insert_or_get(name, VariableMetadata())

    def _is_reserved(self, name: str, node: Any) -> bool:
        if self._reserved is None or not self._reserved.contains(name):
            return False
        if self._logger:
            self._logger.log_skip(self.identifiers.name, name, "reserved word", self.line_of(node))
        return True

    def _metadata_for(self, value: Any) -> VariableMetadata:
        number = self._integer_value(value)
        if number is None:
            return VariableMetadata()
        return VariableMetadata(ValueType.INTEGER, number)

    @staticmethod
    def _integer_value(node: Any) -> Optional[int]:
        if isinstance(node, astnodes.Number):
            n = node.n
            if isinstance(n, int) and not isinstance(n, bool):
                return n
            return None
        if isinstance(node, astnodes.UMinusOp):
            inner = IdentifierCollector._integer_value(node.operand)
            return -inner if inner is not None else None
        return None


def collect_identifiers(source: str, reserved: Optional[ConstTable] = None,
                        logger: Optional[TableLogger] = None) -> IdentifierCollector:
    """Parse Lua source and collect its identifiers and literals

    Args:
        source: Lua source text
        reserved: Reserved-word table; matching names are skipped
        logger: Optional event logger

    Returns:
        Collector holding the filled tables
    """
    tree = ast.parse(source)
    collector = IdentifierCollector(reserved, logger)
    collector.visit(tree)
    return collector
