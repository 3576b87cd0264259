"""Analyzers for lextables

Modules:
- IdentifierCollector: registers identifiers and integer literals from a Lua AST
"""

from lextables.analyzers.identifier_collector import IdentifierCollector, collect_identifiers

__all__ = [
    'IdentifierCollector',
    'collect_identifiers',
]
