"""Tests for adjacency chains."""

import pytest

from adjgraph import chain as chain_module
from adjgraph.chain import Chain, ChainNode
from adjgraph.errors import AllocationFailure, ConsumedChain, DoubleRelease


class TestConstruction:
    """Tests for empty and single-element chains."""

    def test_empty_chain(self) -> None:
        chain = Chain()
        assert list(chain) == []
        assert len(chain) == 0
        assert not chain

    def test_new_holds_one_value(self) -> None:
        chain = Chain.new(4)
        assert list(chain) == [4]
        assert chain.head is not None
        assert chain.head.next is None

    def test_repr(self) -> None:
        assert repr(Chain.new(1).prepend(2)) == "Chain([2, 1])"


class TestPrepend:
    """Tests for prepend ordering and ownership transfer."""

    def test_reverse_of_insertion_order(self) -> None:
        chain = Chain()
        for value in [1, 2, 3, 4]:
            chain = chain.prepend(value)
        assert list(chain) == [4, 3, 2, 1]

    def test_old_handle_is_consumed(self) -> None:
        old = Chain.new(1)
        new = old.prepend(2)
        assert list(new) == [2, 1]
        with pytest.raises(ConsumedChain):
            list(old)
        with pytest.raises(ConsumedChain):
            old.prepend(3)
        with pytest.raises(ConsumedChain):
            old.release()

    def test_nodes_are_moved_not_copied(self) -> None:
        old = Chain.new(1)
        tail = old.head
        new = old.prepend(2)
        assert new.head is not None
        assert new.head.next is tail

    def test_allocation_failure(self, monkeypatch: pytest.MonkeyPatch) -> None:
        def exhausted(*args, **kwargs):
            raise MemoryError

        chain = Chain.new(1)
        monkeypatch.setattr(chain_module, "ChainNode", exhausted)
        with pytest.raises(AllocationFailure):
            chain.prepend(2)
        # The failed prepend leaves the original chain usable.
        assert list(chain) == [1]


class TestTraverse:
    """Tests for iteration."""

    def test_traversal_is_restartable(self) -> None:
        chain = Chain.new(1).prepend(2).prepend(3)
        assert list(chain) == [3, 2, 1]
        assert list(chain) == [3, 2, 1]

    def test_traversal_is_lazy(self) -> None:
        chain = Chain.new(1).prepend(2)
        it = iter(chain)
        assert next(it) == 2
        assert next(it) == 1
        with pytest.raises(StopIteration):
            next(it)


class TestRelease:
    """Tests for releasing chains."""

    def test_release_counts_nodes(self) -> None:
        chain = Chain.new(1).prepend(2).prepend(3)
        assert chain.release() == 3

    def test_release_empty_chain(self) -> None:
        assert Chain().release() == 0

    def test_release_unlinks_nodes(self) -> None:
        chain = Chain.new(1).prepend(2)
        nodes = []
        node = chain.head
        while node is not None:
            nodes.append(node)
            node = node.next
        chain.release()
        assert chain.head is None
        assert all(n.next is None for n in nodes)

    def test_double_release(self) -> None:
        chain = Chain.new(1)
        chain.release()
        with pytest.raises(DoubleRelease):
            chain.release()

    def test_use_after_release(self) -> None:
        chain = Chain.new(1)
        chain.release()
        with pytest.raises(ConsumedChain):
            list(chain)
        assert repr(chain) == "Chain(<released>)"


def test_node_repr() -> None:
    assert repr(ChainNode(5)) == "ChainNode(value=5)"
