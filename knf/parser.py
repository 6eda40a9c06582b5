"""Parser for the knf section/property text format.

Format::

    # comment
    [section]
      name: value
      other:

Every property must belong to a section; a property line seen before the
first section header makes the whole text malformed.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from loguru import logger

from .core.exceptions import ParsingError
from .core.types import KEY_SEPARATOR, LineNumber, join_key, split_key
from . import macro

COMMENT_PREFIX = "#"


@dataclass
class Document:
    """Parsed configuration snapshot.

    Attributes:
        sections: Section names in first-seen order
        data: Composite key -> raw (unresolved) value
    """

    sections: List[str] = field(default_factory=list)
    data: Dict[str, str] = field(default_factory=dict)

    def resolve(self, key: str) -> Optional[str]:
        """Return the macro-resolved value for key, or None if absent."""
        return macro.resolve(self.data, key)

    def props(self, section: str) -> List[str]:
        """Return property names of a section in first-seen order."""
        props = []
        for key in self.data:
            owner, name = split_key(key)
            if owner == section:
                props.append(name)
        return props

    def __len__(self) -> int:
        return len(self.data)


def parse(text: str) -> Dict[str, str]:
    """Parse configuration text into a flat composite key -> value map.

    Raises:
        ParsingError: If a property appears before any section header
    """
    return parse_document(text).data


def parse_document(text: str) -> Document:
    """Parse configuration text into a Document.

    Args:
        text: Configuration file contents

    Returns:
        Document with sections and raw property values

    Raises:
        ParsingError: If a property appears before any section header
    """
    document = Document()
    section: Optional[str] = None

    for line_number, raw_line in enumerate(text.splitlines(), start=1):
        line = raw_line.strip()

        if not line or line.startswith(COMMENT_PREFIX):
            continue

        if line.startswith("[") and line.endswith("]"):
            section = line[1:-1].strip()
            if section not in document.sections:
                document.sections.append(section)
            continue

        name, sep, value = line.partition(KEY_SEPARATOR)

        if not sep:
            logger.debug(f"Skipping line {line_number} without separator: {line!r}")
            continue

        if section is None:
            raise ParsingError(
                line=LineNumber(line_number),
                reason=f"property {name.strip()!r} declared before any section"
            )

        document.data[join_key(section, name.strip())] = value.strip()

    logger.debug(
        f"Parsed {len(document.sections)} sections with {len(document.data)} properties"
    )

    return document
