"""Declarative validation of loaded configuration values.

A Validator pairs a property key with a checker function and a constraint.
Checkers share one signature::

    checker(config, key, constraint) -> Optional[ValidationError]

and return an error instead of raising it, so a validation pass always runs
every validator and reports every failure.

Example:
    errors = config.validate([
        Validator("server:host", empty),
        Validator("server:port", less, 1024),
        Validator("server:port", greater, 65535),
        Validator("log:level", not_contains, ["debug", "info", "error"]),
    ])
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, List, Optional, Sequence, Union

from .coerce import parse_float, parse_int
from .core.exceptions import (
    AboveMaximumError,
    BelowMinimumError,
    CheckerMisuseError,
    NotEqualError,
    NotInAllowedSetError,
    PropertyEmptyError,
    StoreNilError,
    ValidationError,
)
from .core.types import Constraint, ConstraintKind

if TYPE_CHECKING:
    from .config import Config

Checker = Callable[[Optional["Config"], str, Any], Optional[ValidationError]]


@dataclass(frozen=True)
class Validator:
    """A property key, a checker and the constraint passed to it."""

    key: str
    checker: Checker
    value: Constraint = None

    def check(self, config: Optional["Config"]) -> Optional[ValidationError]:
        """Run the checker against a config."""
        return self.checker(config, self.key, self.value)


def validate(config: Optional["Config"], validators: Sequence[Validator]) -> List[ValidationError]:
    """Run validators in order and collect every error.

    Args:
        config: Config to check, None yields a single StoreNilError
        validators: Validators to run

    Returns:
        Errors in validator order, empty if everything is valid
    """
    if config is None:
        return [StoreNilError()]

    errors: List[ValidationError] = []

    for validator in validators:
        error = validator.check(config)
        if error is not None:
            errors.append(error)

    return errors


def empty(config: Optional["Config"], key: str, value: Any = None) -> Optional[ValidationError]:
    """Fail if the property value is empty."""
    if config is None:
        return StoreNilError()

    if config.get_str(key) == "":
        return PropertyEmptyError(key)

    return None


def less(config: Optional["Config"], key: str, value: Any) -> Optional[ValidationError]:
    """Fail if the property value is less than the int or float constraint."""
    if config is None:
        return StoreNilError()

    current = _numeric_value(config, key, value, "less")
    if isinstance(current, ValidationError):
        return current

    if current < value:
        return BelowMinimumError(key, value)

    return None


def greater(config: Optional["Config"], key: str, value: Any) -> Optional[ValidationError]:
    """Fail if the property value is greater than the int or float constraint."""
    if config is None:
        return StoreNilError()

    current = _numeric_value(config, key, value, "greater")
    if isinstance(current, ValidationError):
        return current

    if current > value:
        return AboveMaximumError(key, value)

    return None


def equals(config: Optional["Config"], key: str, value: Any) -> Optional[ValidationError]:
    """Fail if the property value equals the constraint.

    The property is read with the accessor matching the constraint type.
    """
    if config is None:
        return StoreNilError()

    kind = ConstraintKind.of(value)

    if kind == ConstraintKind.INT:
        current: Any = config.get_int(key)
    elif kind == ConstraintKind.FLOAT:
        current = config.get_float(key)
    elif kind == ConstraintKind.BOOL:
        current = config.get_bool(key)
    elif kind == ConstraintKind.STRING:
        current = config.get_str(key)
    else:
        return CheckerMisuseError(key, "equals", value)

    if current == value:
        return NotEqualError(key, value)

    return None


def not_contains(config: Optional["Config"], key: str, value: Any) -> Optional[ValidationError]:
    """Fail if the property value is not one of the allowed strings."""
    if config is None:
        return StoreNilError()

    if ConstraintKind.of(value) != ConstraintKind.STRING_SET:
        return CheckerMisuseError(key, "not_contains", value)

    if config.get_str(key) in value:
        return None

    return NotInAllowedSetError(key, value)


def _numeric_value(
    config: "Config",
    key: str,
    value: Any,
    checker: str
) -> Union[int, float, ValidationError]:
    """Read a property as the numeric class of the constraint.

    Empty or absent properties read as zero, like the accessors. A value that
    can't be parsed is reported as checker misuse.
    """
    kind = ConstraintKind.of(value)

    if not kind.is_numeric:
        return CheckerMisuseError(key, checker, value)

    raw = config.get_str(key)

    if raw == "":
        return 0 if kind == ConstraintKind.INT else 0.0

    parsed = parse_int(raw) if kind == ConstraintKind.INT else parse_float(raw)

    if parsed is None:
        return CheckerMisuseError(key, checker, value)

    return parsed
