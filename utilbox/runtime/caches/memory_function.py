"""In-memory memoization with an exposed, caller-managed cache.

Notes
-----
- One cache per wrapped function, owned by the wrapper. Nothing is shared at
  module level.
- Unbounded: entries are never evicted or expired. Callers invalidate by
  mutating ``memory_map`` (``del``, ``pop``, ``clear``).
- No single-flight. Two concurrent calls with the same key may both run the
  target; the last one to finish wins the cache slot.
- The default key is JSON text of a type-tagged walk of the arguments:
  lists, tuples, dicts and sets are told apart, dict keys keep their type and
  equal dicts share a key whatever their insertion order. Values the walk
  cannot encode (cyclic structures, arbitrary objects) raise
  ``TypeError``/``ValueError`` and are never cached. Pass
  ``create_memory_id`` for such arguments.
"""

from __future__ import annotations

import functools
import inspect
import json
from threading import Lock
from typing import Any, Callable, Dict, Hashable, List, Optional, Set

KeyFunc = Callable[..., Hashable]

_MISSING = object()

# Every container becomes a list headed by its tag; scalars are never lists
_LIST, _TUPLE, _DICT, _SET = "l", "t", "d", "s"


def _sorted_by_text(items: List[Any]) -> List[Any]:
    return sorted(items, key=lambda item: json.dumps(item))


def _tag(value: Any, active: Set[int]) -> Any:
    if value is None or isinstance(value, (str, bool, int, float)):
        return value

    if isinstance(value, (list, tuple, dict, set, frozenset)):
        marker = id(value)
        if marker in active:
            raise ValueError("Circular reference detected")
        active.add(marker)
        try:
            if isinstance(value, dict):
                pairs = [[_tag(k, active), _tag(v, active)] for k, v in value.items()]
                return [_DICT, *_sorted_by_text(pairs)]
            if isinstance(value, (set, frozenset)):
                return [_SET, *_sorted_by_text([_tag(v, active) for v in value])]
            head = _TUPLE if isinstance(value, tuple) else _LIST
            return [head, *(_tag(v, active) for v in value)]
        finally:
            active.discard(marker)

    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def default_memory_id(*args: Any, **kwargs: Any) -> str:
    """Deterministic JSON key for a call.

    Positional arguments keep their order; keyword arguments are ordered by
    name so ``f(a=1, b=2)`` and ``f(b=2, a=1)`` share a key.

    >>> default_memory_id(1, "a", b=[2])
    '[["t", 1, "a"], ["d", ["b", ["l", 2]]]]'
    >>> default_memory_id({1: "x"}) == default_memory_id({"1": "x"})
    False
    """

    active: Set[int] = set()
    return json.dumps([_tag(args, active), _tag(kwargs, active)])


class MemoryFunction:
    """Callable wrapper caching results of ``target_function`` by derived key."""

    def __init__(self, target_function: Callable[..., Any], create_memory_id: Optional[KeyFunc] = None):
        functools.update_wrapper(self, target_function)
        self._lock = Lock()
        self._target = target_function
        self._create_memory_id: KeyFunc = create_memory_id or default_memory_id
        self.memory_map: Dict[Hashable, Any] = {}

    def _lookup(self, key: Hashable) -> Any:
        with self._lock:
            return self.memory_map.get(key, _MISSING)

    def _store(self, key: Hashable, result: Any) -> None:
        with self._lock:
            self.memory_map[key] = result

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        key = self._create_memory_id(*args, **kwargs)

        cached = self._lookup(key)
        if cached is not _MISSING:
            return cached

        result = self._target(*args, **kwargs)
        self._store(key, result)
        return result

    def clear(self) -> None:
        with self._lock:
            self.memory_map.clear()

    def __len__(self) -> int:
        return len(self.memory_map)

    def __get__(self, instance: Any, owner: Any = None) -> Any:
        # Bind like a plain function when used on a method; the cache stays shared
        if instance is None:
            return self
        return BoundMemoryFunction(self, instance)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} of {self._target!r} ({len(self)} cached)>"


class BoundMemoryFunction:
    """A memoized method bound to an instance.

    Calls go through the shared :class:`MemoryFunction`; ``memory_map``,
    ``clear`` and the wrapped metadata are read from it.
    """

    __slots__ = ("__func__", "__self__")

    def __init__(self, memo: MemoryFunction, instance: Any):
        self.__func__ = memo
        self.__self__ = instance

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        return self.__func__(self.__self__, *args, **kwargs)

    def __getattr__(self, name: str) -> Any:
        if name in BoundMemoryFunction.__slots__:
            raise AttributeError(name)
        return getattr(self.__func__, name)

    def __repr__(self) -> str:
        return f"<bound {self.__func__!r} of {self.__self__!r}>"


class AsyncMemoryFunction(MemoryFunction):
    """Variant for coroutine functions. Caches the awaited result."""

    async def __call__(self, *args: Any, **kwargs: Any) -> Any:
        key = self._create_memory_id(*args, **kwargs)

        cached = self._lookup(key)
        if cached is not _MISSING:
            return cached

        result = await self._target(*args, **kwargs)
        self._store(key, result)
        return result


def memory_function(
    target_function: Optional[Callable[..., Any]] = None,
    create_memory_id: Optional[KeyFunc] = None,
) -> Any:
    """Memoize ``target_function``.

    Works as a plain call or as a decorator, with or without arguments::

        square = memory_function(lambda x: x * x)

        @memory_function
        def load(name): ...

        @memory_function(create_memory_id=lambda user: user.id)
        def profile(user): ...

    The returned wrapper exposes the cache as ``memory_map``. Coroutine
    functions get an async wrapper that caches the awaited result.
    """

    def deco(fn: Callable[..., Any]) -> MemoryFunction:
        if inspect.iscoroutinefunction(fn):
            return AsyncMemoryFunction(fn, create_memory_id)
        return MemoryFunction(fn, create_memory_id)

    if target_function is None:
        return deco
    return deco(target_function)


__all__ = ["MemoryFunction", "AsyncMemoryFunction", "BoundMemoryFunction", "default_memory_id", "memory_function"]
