"""Exceptions raised by path construction and queries.

Construction-time problems raise ``ConfigurationError``; everything else
is recoverable and leaves the path untouched.
"""

from __future__ import annotations


class Path2dError(Exception):
    """Base class for all path errors."""


class ConfigurationError(Path2dError, ValueError):
    """Invalid construction options."""


class IndexOutOfRange(Path2dError, IndexError):
    """A sub-path or segment index outside the current bounds."""


class EmptyGeometryError(Path2dError):
    """No vertex to continue from or to query against."""


class CapabilityDisabled(Path2dError):
    """The query needs a computation the path was built without."""


def check_index(index: int, count: int, what: str) -> int:
    """Validate a non-negative index against a count.

    Raises:
        IndexOutOfRange: If ``index`` is not in ``[0, count)``.
    """
    if not 0 <= index < count:
        raise IndexOutOfRange(f"{what} index {index} out of range (count={count})")
    return index
