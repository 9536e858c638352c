"""
Iteration primitives

Явный контракт SequenceProducer/Cursor и комбинаторы поверх него.
"""

from src.core.iteration.lazy_map import LazyMap, MappedCursor, lazy_map
from src.core.iteration.protocol import (
    DONE,
    Cursor,
    IterableCursor,
    IterableProducer,
    NonConformingProducer,
    SequenceProducer,
    Step,
    Transform,
    collect,
    from_iterable,
    is_producer,
    iterate,
    open_cursor,
    require_producer,
)

__all__ = [
    # Protocol
    "Step",
    "DONE",
    "Cursor",
    "SequenceProducer",
    "Transform",
    "NonConformingProducer",
    # Capability checks
    "is_producer",
    "require_producer",
    "open_cursor",
    # Consumers
    "collect",
    "iterate",
    # Adapters
    "IterableCursor",
    "IterableProducer",
    "from_iterable",
    # Combinators
    "LazyMap",
    "MappedCursor",
    "lazy_map",
]
