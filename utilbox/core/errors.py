"""Exception types raised by utilbox helpers.

Most helpers never raise: JSON failures are logged and turned into a
sentinel return value. Only explicit argument validation escapes as an error.
"""

from __future__ import annotations


class UtilboxError(Exception):
    """Base class for all utilbox errors."""


class ArrayIndexError(UtilboxError, IndexError):
    """Raised when an array helper receives an index outside the array."""
