"""AST visitor base class for lextables

Provides a visitor pattern for traversing Lua AST nodes produced by
luaparser. Subclasses define visit_<NodeClass> methods for the nodes
they care about; every other node is traversed generically.
"""

from abc import ABC
from typing import Any, List

try:
    from luaparser import astnodes
except ImportError:
    raise ImportError(
        "luaparser is required. Install with: pip install luaparser"
    )


class ASTVisitor(ABC):
    """Base visitor for Lua AST traversal"""

    def visit(self, node: Any) -> Any:
        """Visit a node using double-dispatch pattern

        Args:
            node: AST node to visit

        Returns:
            Result from visit method (often None)
        """
        method_name = f"visit_{node.__class__.__name__}"
        method = getattr(self, method_name, self.generic_visit)
        return method(node)

    def generic_visit(self, node: Any) -> None:
        """Default visitor - visit all child nodes

        Args:
            node: AST node
        """
        for child in self.get_children(node):
            self.visit(child)

    def visit_all(self, nodes: List[Any]) -> None:
        """Visit each node of a list, skipping None"""
        for node in nodes:
            if node is not None:
                self.visit(node)

    def get_children(self, node: Any) -> List[Any]:
        """Get all child nodes of a node

        Args:
            node: AST node

        Returns:
            List of child nodes, in attribute order
        """
        children = []
        if hasattr(node, "__dict__"):
            for value in node.__dict__.values():
                if isinstance(value, astnodes.Node):
                    children.append(value)
                elif isinstance(value, list):
                    children.extend(v for v in value if isinstance(v, astnodes.Node))
        return children

    def visit_Comment(self, node: astnodes.Comment) -> None:
        pass  # Comments carry no identifiers

    @staticmethod
    def line_of(node: Any) -> int:
        """Get line number for a node

        Returns:
            Line number (1-based) or 0 if not available
        """
        token = getattr(node, "_first_token", None)
        if token is not None and getattr(token, "line", None):
            return int(token.line)
        return 0
