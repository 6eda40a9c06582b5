"""knf - Typed section/property configuration files with macros and validation."""

__version__ = "1.0.0"
__description__ = "Typed section/property configuration files with macros and validation"

from .config import Config, read_document
from .core.exceptions import (
    CheckerMisuseError,
    EmptyFileError,
    GlobalNotLoadedError,
    KnfError,
    LoadError,
    MalformedError,
    NotFoundError,
    UninitializedConfigError,
    UnreadableError,
    ValidationError,
)
from .diff import diff_configs, diff_documents
from .global_config import get_global, load_global, reset_global, set_global
from .parser import Document, parse, parse_document
from .validators import Validator, empty, equals, greater, less, not_contains

__all__ = [
    "Config",
    "Document",
    "Validator",
    "read_document",
    "parse",
    "parse_document",
    "diff_configs",
    "diff_documents",
    "load_global",
    "get_global",
    "set_global",
    "reset_global",
    "empty",
    "less",
    "greater",
    "equals",
    "not_contains",
    "KnfError",
    "LoadError",
    "NotFoundError",
    "EmptyFileError",
    "UnreadableError",
    "MalformedError",
    "UninitializedConfigError",
    "GlobalNotLoadedError",
    "ValidationError",
    "CheckerMisuseError",
]
