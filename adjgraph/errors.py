"""Errors raised by graph operations."""


class GraphError(Exception):

    """Base class for all adjgraph errors."""


class AllocationFailure(GraphError, MemoryError):

    """Ran out of memory while creating chain nodes or vertex slots."""


class OutOfRange(GraphError, IndexError):

    """A vertex index fell outside [0, bound)."""

    def __init__(self, index: object, bound: int, what: str = "vertex"):
        super().__init__(f"{what} {index!r} out of range [0, {bound})")
        self.index = index
        self.bound = bound


class DoubleRelease(GraphError):

    """A chain or graph was released more than once."""


class ReleasedGraph(GraphError):

    """A graph was used after it was destroyed."""


class ConsumedChain(GraphError):

    """A chain handle was used after prepend or release took ownership of it."""
