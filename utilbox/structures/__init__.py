"""Copy-on-write helpers for dicts and lists.

None of these helpers mutate their input; each returns a fresh container.
"""

from .arrays import array_move, array_set, array_splice
from .objects import omit

__all__ = ["omit", "array_move", "array_splice", "array_set"]
