"""Metadata records stored in front-end lookup tables

Identifiers carry an inferred type and value; constants only a type.
"""

from dataclasses import dataclass
from enum import Enum


class ValueType(Enum):
    """Inferred value categories"""
    UNDEFINED = 0    # Not determined yet
    INTEGER = 1      # Integer literal or integer-initialized variable


@dataclass
class VariableMetadata:
    """Metadata for an identifier table entry"""
    type: ValueType = ValueType.UNDEFINED
    value: int = 0

    def __str__(self) -> str:
        if self.type == ValueType.UNDEFINED:
            return self.type.name.lower()
        return f"{self.type.name.lower()}={self.value}"


@dataclass
class ConstantMetadata:
    """Metadata for a literal table entry"""
    type: ValueType = ValueType.INTEGER

    def __str__(self) -> str:
        return self.type.name.lower()
