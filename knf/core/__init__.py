"""knf Core Package - Shared types and exceptions.

Modules:
    types: Common type definitions, enums and key helpers
    exceptions: Exception classes for loading and validation
"""

from .exceptions import (
    KnfError,
    LoadError,
    ParsingError,
    ValidationError,
)
from .types import ChangeMap, ConstraintKind, FileMode, ValueType

__all__ = [
    # Types
    "ChangeMap",
    "ConstraintKind",
    "FileMode",
    "ValueType",

    # Exceptions
    "KnfError",
    "LoadError",
    "ParsingError",
    "ValidationError",
]
