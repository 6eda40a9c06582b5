"""knf Core Types - Common type definitions and aliases.

This module contains type definitions, enums, and type aliases used throughout
knf.
"""

from enum import Enum
from typing import Any, Dict, FrozenSet, List, NewType, Sequence, Tuple, Union


# Numeric type aliases
FileMode = NewType("FileMode", int)          # Permission bits, e.g. 0o644
LineNumber = NewType("LineNumber", int)      # 1-based line numbers

# Complex types
Constraint = Union[None, bool, int, float, str, Sequence[str], FrozenSet[str]]
ChangeMap = Dict[str, bool]                   # "section:property" -> changed

KEY_SEPARATOR = ":"


def join_key(section: str, prop: str) -> str:
    """Build a composite key from section and property names."""
    return f"{section}{KEY_SEPARATOR}{prop}"


def split_key(key: str) -> Tuple[str, str]:
    """Split a composite key into (section, property).

    Property names never contain the separator, so the split happens at
    the last one. Keys without a separator have an empty section.
    """
    section, sep, prop = key.rpartition(KEY_SEPARATOR)
    if not sep:
        return "", key
    return section, prop


class ValueType(Enum):
    """Value types an accessor can coerce a stored string into."""

    STRING = "str"
    INTEGER = "int"
    FLOAT = "float"
    BOOLEAN = "bool"
    FILE_MODE = "mode"

    @classmethod
    def from_string(cls, value: str) -> "ValueType":
        """Convert string to ValueType, defaulting to STRING for unknown values."""
        try:
            return cls(value)
        except ValueError:
            return cls.STRING

    @classmethod
    def names(cls) -> List[str]:
        return [member.value for member in cls]


class ConstraintKind(Enum):
    """Tag describing which variant a validator constraint holds."""

    NONE = "none"
    BOOL = "bool"
    INT = "int"
    FLOAT = "float"
    STRING = "string"
    STRING_SET = "string_set"
    UNSUPPORTED = "unsupported"

    @classmethod
    def of(cls, value: Any) -> "ConstraintKind":
        """Classify a constraint value.

        bool is checked before int since it's an int subclass.
        """
        if value is None:
            return cls.NONE
        if isinstance(value, bool):
            return cls.BOOL
        if isinstance(value, int):
            return cls.INT
        if isinstance(value, float):
            return cls.FLOAT
        if isinstance(value, str):
            return cls.STRING
        if isinstance(value, (list, tuple, set, frozenset)):
            if all(isinstance(item, str) for item in value):
                return cls.STRING_SET
        return cls.UNSUPPORTED

    @property
    def is_numeric(self) -> bool:
        """Return True for INT and FLOAT constraints."""
        return self in {self.INT, self.FLOAT}
