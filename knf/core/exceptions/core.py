"""knf Core Exceptions - Exception classes for loading and validating configs.

This module contains the exception hierarchy for knf. Load and reload
failures are raised; validation failures are returned by the validators as
instances of ValidationError subclasses so callers can collect all of them.
"""

from typing import Optional, Any, Dict

from ..types import LineNumber


class KnfError(Exception):
    """Base exception for all knf-specific errors.

    It keeps an optional context dictionary and the underlying exception that
    caused the error, if any.
    """

    def __init__(
        self,
        message: str,
        context: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None
    ):
        """Initialize knf error.

        Args:
            message: Human-readable error description
            context: Optional dictionary with error context (e.g., line numbers)
            cause: Optional underlying exception that caused this error
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}
        self.cause = cause

    def __str__(self) -> str:
        """Return formatted error message with context."""
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} (context: {context_str})"
        return self.message

    def add_context(self, key: str, value: Any) -> "KnfError":
        """Add context information to the error."""
        self.context[key] = value
        return self


class ParsingError(KnfError):
    """Raised when configuration text can't be parsed.

    The loader converts it into MalformedError, which names the file.
    """

    def __init__(
        self,
        line: Optional[LineNumber] = None,
        reason: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None
    ):
        message = f"Parsing error: {reason}" if reason else "Parsing error"
        super().__init__(message, context)
        if line is not None:
            self.add_context("line", line)
        self.line = line
        self.reason = reason


class LoadError(KnfError):
    """Raised when a configuration file can't be loaded.

    Load errors are never partially applied: the config being loaded or
    reloaded keeps its previous data.
    """

    def __init__(
        self,
        path: str,
        message: str,
        cause: Optional[Exception] = None
    ):
        super().__init__(message, cause=cause)
        self.path = path


class NotFoundError(LoadError):
    """Raised when the configuration file does not exist."""

    def __init__(self, path: str):
        super().__init__(path, f"File {path} does not exist")


class EmptyFileError(LoadError):
    """Raised when the configuration file has zero bytes."""

    def __init__(self, path: str):
        super().__init__(path, f"File {path} is empty")


class UnreadableError(LoadError):
    """Raised when the current user can't read the configuration file."""

    def __init__(self, path: str, cause: Optional[Exception] = None):
        super().__init__(path, f"File {path} is not readable", cause)


class MalformedError(LoadError):
    """Raised when the file declares a property before any section."""

    def __init__(self, path: str, cause: Optional[Exception] = None):
        super().__init__(path, f"Configuration file {path} is malformed", cause)


class UninitializedConfigError(KnfError):
    """Raised when reloading a config that was never read from a file."""

    def __init__(self):
        super().__init__("Path to config file is empty (non initialized struct?)")


class GlobalNotLoadedError(KnfError):
    """Raised when the global config is used before it was loaded."""

    def __init__(self):
        super().__init__("Global config is not loaded")


class ValidationError(KnfError):
    """Base class for errors produced by validators.

    Validators return these instead of raising them.
    """

    def __init__(
        self,
        key: Optional[str],
        message: str,
        context: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, context)
        self.key = key


class PropertyEmptyError(ValidationError):
    """Property has an empty value."""

    def __init__(self, key: str):
        super().__init__(key, f"Property {key} can't be empty")


class BelowMinimumError(ValidationError):
    """Property value is less than the allowed minimum."""

    def __init__(self, key: str, minimum: Any):
        super().__init__(key, f"Property {key} can't be less than {_format_number(minimum)}")
        self.minimum = minimum


class AboveMaximumError(ValidationError):
    """Property value is greater than the allowed maximum."""

    def __init__(self, key: str, maximum: Any):
        super().__init__(key, f"Property {key} can't be greater than {_format_number(maximum)}")
        self.maximum = maximum


class NotEqualError(ValidationError):
    """Property value equals a forbidden value."""

    def __init__(self, key: str, value: Any):
        super().__init__(key, f"Property {key} can't be equal {_format_value(value)}")
        self.value = value


class NotInAllowedSetError(ValidationError):
    """Property value is not one of the allowed values."""

    def __init__(self, key: str, allowed: Any):
        super().__init__(key, f"Property {key} doesn't contains any valid value")
        self.allowed = allowed


class CheckerMisuseError(ValidationError):
    """Checker was given a constraint (or met a value) it can't compare.

    The message only names the property; checker and constraint are kept as
    attributes.
    """

    def __init__(self, key: str, checker: str, constraint: Any):
        super().__init__(key, f"Wrong validator for property {key}")
        self.checker = checker
        self.constraint = constraint


class StoreNilError(ValidationError):
    """Validation was requested against a config that doesn't exist."""

    def __init__(self, message: str = "Config is nil"):
        super().__init__(None, message)


def _format_number(value: Any) -> str:
    if isinstance(value, float):
        return f"{value:g}"
    return str(value)


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return _format_number(value)
