"""Singly-linked adjacency chains."""

from __future__ import annotations

from typing import Iterator, Optional

from adjgraph.errors import AllocationFailure, ConsumedChain, DoubleRelease


class ChainNode:

    """A node holding one vertex id and a link to the following node."""

    def __init__(self, value: int, next_node: Optional[ChainNode] = None):
        self.value = value
        self.next = next_node

    def __repr__(self) -> str:
        return f"ChainNode(value={self.value!r})"


class Chain:

    """An owned, possibly empty sequence of vertex ids.

    Chains only grow at the head, so iteration yields the most recently
    prepended value first. A handle owns its nodes until it hands them to a
    new handle via prepend, or frees them via release. Either way the old
    handle is dead afterwards, and touching it raises ConsumedChain:

        chain = Chain().prepend(1).prepend(2)
        list(chain)       # [2, 1]
        chain.release()   # 2
    """

    def __init__(self, head: Optional[ChainNode] = None):
        self.head = head
        self.consumed = False
        self.released = False

    def __repr__(self) -> str:
        if self.released:
            return "Chain(<released>)"
        if self.consumed:
            return "Chain(<consumed>)"
        values = ", ".join(str(v) for v in self)
        return f"Chain([{values}])"

    @staticmethod
    def new(value: int) -> Chain:
        """Return a single-element chain holding value."""
        return Chain().prepend(value)

    def _check(self):
        if self.released:
            raise ConsumedChain("chain has been released")
        if self.consumed:
            raise ConsumedChain("chain was moved into another chain")

    def prepend(self, value: int) -> Chain:
        """Return a new chain with value at the head and this chain as tail.

        This handle gives up its nodes to the returned one.
        """
        self._check()
        try:
            node = ChainNode(value, self.head)
        except MemoryError as ex:
            raise AllocationFailure(f"cannot allocate chain node for {value}") from ex
        self.head = None
        self.consumed = True
        return Chain(node)

    def __iter__(self) -> Iterator[int]:
        """Iterate over values from head to tail."""
        self._check()
        return self._walk()

    def _walk(self) -> Iterator[int]:
        node = self.head
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __bool__(self) -> bool:
        self._check()
        return self.head is not None

    def release(self) -> int:
        """Unlink every node, head to tail, and return how many there were.

        Releasing an empty chain is a no-op that returns 0. Releasing twice
        raises DoubleRelease.
        """
        if self.released:
            raise DoubleRelease("chain already released")
        self._check()
        count = 0
        node = self.head
        self.head = None
        while node is not None:
            following = node.next
            node.next = None
            count += 1
            node = following
        self.released = True
        return count
