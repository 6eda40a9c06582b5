"""Macro substitution for knf property values.

A value may reference other properties with ``{macro:section:property}`` or,
for a property of the same section, ``{macro:property}``. References are
resolved recursively and depth-first. Anything that doesn't resolve is left
in the output verbatim, so resolution never fails.

Cycles: a reference to a key that is already being resolved higher up the
same chain is left unexpanded.
"""

import re
from typing import FrozenSet, Mapping, Optional

from loguru import logger

from .core.types import KEY_SEPARATOR, join_key, split_key

MACRO_PATTERN = re.compile(r"\{macro:([^{}\s]+)\}")


def has_macros(value: str) -> bool:
    """Check whether a raw value contains at least one macro token."""
    return MACRO_PATTERN.search(value) is not None


def reference_key(ref: str, section: str) -> str:
    """Turn a token reference into a composite key.

    Bare property names refer to the section of the value being resolved.
    """
    if KEY_SEPARATOR in ref:
        return ref
    return join_key(section, ref)


def resolve(data: Mapping[str, str], key: str) -> Optional[str]:
    """Return the fully substituted value of ``key``.

    Returns None when the key is absent.
    """
    if key not in data:
        return None
    return _resolve(data, key, frozenset())


def expand(
    data: Mapping[str, str],
    value: str,
    section: str,
    visited: FrozenSet[str] = frozenset()
) -> str:
    """Substitute macro tokens in an arbitrary value.

    Args:
        data: Raw property map used to look up references
        value: Raw value that may contain macro tokens
        section: Section that bare references belong to
        visited: Keys already on the resolution chain

    Returns:
        Value with every resolvable token replaced
    """
    if not has_macros(value):
        return value

    def substitute(match: "re.Match[str]") -> str:
        target = reference_key(match.group(1), section)

        if target not in data:
            return match.group(0)

        if target in visited:
            logger.debug(f"Macro cycle detected at {target}, leaving {match.group(0)} unexpanded")
            return match.group(0)

        return _resolve(data, target, visited)

    return MACRO_PATTERN.sub(substitute, value)


def _resolve(data: Mapping[str, str], key: str, visited: FrozenSet[str]) -> str:
    section, _ = split_key(key)
    return expand(data, data[key], section, visited | {key})
