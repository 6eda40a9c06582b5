"""knf Core Types Package - Common type definitions and aliases."""

from .common import (
    KEY_SEPARATOR,
    ChangeMap,
    Constraint,
    ConstraintKind,
    FileMode,
    LineNumber,
    ValueType,
    join_key,
    split_key,
)

__all__ = [
    # Enums
    "ValueType",
    "ConstraintKind",

    # Numeric types
    "FileMode",
    "LineNumber",

    # Aliases and helpers
    "Constraint",
    "ChangeMap",
    "KEY_SEPARATOR",
    "join_key",
    "split_key",
]
