"""Typed configuration store for knf files.

Config wraps a parsed Document and exposes accessors that never raise: an
absent property yields the supplied default, a malformed one yields the zero
value of the requested type. Callers needing strict checks use validators.
"""

from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple, Union

from loguru import logger

from . import probes
from .coerce import parse_bool, parse_float, parse_int, parse_mode
from .core.exceptions import (
    EmptyFileError,
    MalformedError,
    NotFoundError,
    ParsingError,
    UninitializedConfigError,
    UnreadableError,
    ValidationError,
)
from .core.types import ChangeMap, FileMode, split_key
from .diff import diff_documents
from .parser import Document, parse_document
from .validators import Validator, validate


def read_document(path: Union[str, Path]) -> Document:
    """Check and parse a configuration file.

    Args:
        path: Path to the configuration file

    Returns:
        Parsed document

    Raises:
        NotFoundError: File does not exist
        UnreadableError: File can't be read by the current user
        EmptyFileError: File has zero bytes
        MalformedError: File has a property before any section
    """
    file = str(path)

    if not probes.is_exist(file):
        raise NotFoundError(file)

    if not probes.is_readable(file):
        raise UnreadableError(file)

    if not probes.is_non_empty(file):
        raise EmptyFileError(file)

    try:
        with open(file, "r", encoding="utf-8") as f:
            text = f.read()
    except UnicodeDecodeError as e:
        raise MalformedError(file, e) from e
    except OSError as e:
        raise UnreadableError(file, e) from e

    try:
        return parse_document(text)
    except ParsingError as e:
        logger.debug(f"Failed to parse {file}: {e}")
        raise MalformedError(file, e) from e


class Config:
    """Configuration loaded from a knf file.

    ``Config()`` without arguments is an empty, inert store: every accessor
    returns its default and reload fails with UninitializedConfigError.
    """

    def __init__(self, file: str = "", document: Optional[Document] = None):
        self._file = file
        self._document = document if document is not None else Document()

    @classmethod
    def read(cls, path: Union[str, Path]) -> "Config":
        """Load a configuration file.

        Raises:
            LoadError: If the file can't be loaded (see read_document)
        """
        document = read_document(path)
        logger.debug(f"Loaded {len(document)} properties from {path}")
        return cls(str(path), document)

    @classmethod
    def from_string(cls, text: str) -> "Config":
        """Build a path-less config from text, mostly useful in tests.

        Raises:
            ParsingError: If a property appears before any section
        """
        return cls("", parse_document(text))

    @property
    def file(self) -> str:
        """Path of the source file, empty for path-less configs."""
        return self._file

    @property
    def document(self) -> Document:
        """Current snapshot."""
        return self._document

    def lookup(self, key: str) -> Tuple[str, bool]:
        """Return the resolved value and whether the key is recorded at all.

        Unlike the accessors, this separates a missing property from one
        stored with an empty value.
        """
        value = self._document.resolve(key)
        if value is None:
            return "", False
        return value, True

    def get_str(self, key: str, default: str = "") -> str:
        """Return the resolved value, or default if it's absent or empty."""
        value, _ = self.lookup(key)
        if value == "":
            return default
        return value

    def get_int(self, key: str, default: int = 0) -> int:
        """Return the value as int; 0 if malformed, default if absent or empty."""
        value, _ = self.lookup(key)
        if value == "":
            return default
        result = parse_int(value)
        return 0 if result is None else result

    def get_float(self, key: str, default: float = 0.0) -> float:
        """Return the value as float; 0.0 if malformed, default if absent or empty."""
        value, _ = self.lookup(key)
        if value == "":
            return default
        result = parse_float(value)
        return 0.0 if result is None else result

    def get_bool(self, key: str, default: bool = False) -> bool:
        """Return the value as bool; "false" and "0" are false, other text is true."""
        value, _ = self.lookup(key)
        if value == "":
            return default
        return parse_bool(value)

    def get_mode(self, key: str, default: int = 0) -> FileMode:
        """Return octal permission bits; 0 if malformed, default if absent or empty."""
        value, _ = self.lookup(key)
        if value == "":
            return FileMode(default)
        result = parse_mode(value)
        return FileMode(0 if result is None else result)

    def has_section(self, section: str) -> bool:
        return section in self._document.sections

    def has_prop(self, key: str) -> bool:
        """Check if the property exists and resolves to a non-empty value.

        Empty properties report False here; use lookup() to tell an empty
        property from a missing one.
        """
        value, _ = self.lookup(key)
        return value != ""

    def sections(self) -> List[str]:
        return list(self._document.sections)

    def props(self, section: str) -> List[str]:
        return self._document.props(section)

    def to_dict(self) -> Dict[str, Dict[str, str]]:
        """Return resolved values grouped by section."""
        result: Dict[str, Dict[str, str]] = {name: {} for name in self._document.sections}

        for key in self._document.data:
            section, prop = split_key(key)
            result.setdefault(section, {})[prop] = self._document.resolve(key) or ""

        return result

    def reload(self) -> ChangeMap:
        """Re-read the source file and report which properties changed.

        The snapshot is replaced only if the file loads successfully.

        Returns:
            Composite key -> True if its resolved value changed

        Raises:
            UninitializedConfigError: Config has no source file
            LoadError: If the file can't be loaded
        """
        if not self._file:
            raise UninitializedConfigError()

        document = read_document(self._file)
        changes = diff_documents(self._document, document)

        self._document = document

        logger.debug(f"Reloaded {self._file}: {sum(changes.values())} properties changed")

        return changes

    def validate(self, validators: Sequence[Validator]) -> List[ValidationError]:
        """Run validators against this config and return every failure."""
        return validate(self, validators)

    def __contains__(self, key: str) -> bool:
        return self.has_prop(key)

    def __repr__(self) -> str:
        return (
            f"Config(file={self._file!r}, "
            f"sections={len(self._document.sections)}, "
            f"props={len(self._document.data)})"
        )
