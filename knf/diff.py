"""Change detection between two configuration snapshots."""

from typing import TYPE_CHECKING, List

from loguru import logger

from .core.types import ChangeMap
from .parser import Document

if TYPE_CHECKING:
    from .config import Config


def diff_documents(old: Document, new: Document) -> ChangeMap:
    """Compare resolved values of two snapshots.

    Every key of either snapshot is reported. A key present in only one of
    them counts as changed.

    Args:
        old: Snapshot before the change
        new: Snapshot after the change

    Returns:
        Composite key -> True if the resolved value changed
    """
    changes: ChangeMap = {}

    for key in old.data:
        if key not in new.data:
            changes[key] = True
        else:
            changes[key] = old.resolve(key) != new.resolve(key)

    for key in new.data:
        if key not in changes:
            changes[key] = True

    logger.debug(f"Compared {len(changes)} properties, {len(changed_keys(changes))} changed")

    return changes


def diff_configs(old: "Config", new: "Config") -> ChangeMap:
    """Compare two loaded configs property by property."""
    return diff_documents(old.document, new.document)


def changed_keys(changes: ChangeMap) -> List[str]:
    """Return only the keys marked as changed, in report order."""
    return [key for key, changed in changes.items() if changed]
