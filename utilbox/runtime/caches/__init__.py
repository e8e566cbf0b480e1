from .memory_function import (
    AsyncMemoryFunction,
    BoundMemoryFunction,
    MemoryFunction,
    default_memory_id,
    memory_function,
)

__all__ = [
    "AsyncMemoryFunction",
    "BoundMemoryFunction",
    "MemoryFunction",
    "default_memory_id",
    "memory_function",
]
