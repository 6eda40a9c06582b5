"""knf Core Exceptions Package - Exception classes for error handling.

The hierarchy is split in two groups:
- Load errors, raised by read/reload and never partially applied
- Validation errors, returned (not raised) by the validators
"""

from .core import (
    AboveMaximumError,
    BelowMinimumError,
    CheckerMisuseError,
    EmptyFileError,
    GlobalNotLoadedError,
    KnfError,
    LoadError,
    MalformedError,
    NotEqualError,
    NotFoundError,
    NotInAllowedSetError,
    ParsingError,
    PropertyEmptyError,
    StoreNilError,
    UninitializedConfigError,
    UnreadableError,
    ValidationError,
)

__all__ = [
    # Base exception
    "KnfError",

    # Loading
    "ParsingError",
    "LoadError",
    "NotFoundError",
    "EmptyFileError",
    "UnreadableError",
    "MalformedError",
    "UninitializedConfigError",
    "GlobalNotLoadedError",

    # Validation
    "ValidationError",
    "PropertyEmptyError",
    "BelowMinimumError",
    "AboveMaximumError",
    "NotEqualError",
    "NotInAllowedSetError",
    "CheckerMisuseError",
    "StoreNilError",
]
