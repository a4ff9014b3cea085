"""Directed graph stored as adjacency chains."""

from __future__ import annotations

import logging
import sys
from typing import Callable, Iterator, List, NamedTuple, Optional, TextIO, Tuple

from adjgraph import render
from adjgraph.chain import Chain
from adjgraph.errors import AllocationFailure, DoubleRelease, OutOfRange, ReleasedGraph
from adjgraph.labels import vertex_label


class Release(NamedTuple):

    """What Graph.destroy released."""

    nodes: int
    slots: int
    headers: int


class Graph:

    """A directed graph with a fixed number of vertices.

    Vertices are the integers 0 to vertex_count - 1. Each vertex owns one
    Chain of destinations in slots. Adding an edge prepends to the source's
    chain, so both views list the latest edge of a vertex first.

    Graphs should be created via Graph.create() and destroyed exactly once
    via destroy(), or used as a context manager:

        with Graph.create(3) as graph:
            graph.add_edge(0, 1)
            graph.adjacency_view()

    Every operation on a destroyed graph raises ReleasedGraph, except destroy
    itself, which raises DoubleRelease.
    """

    def __init__(self, vertex_count: int):
        if isinstance(vertex_count, bool) or not isinstance(vertex_count, int):
            raise TypeError(f"vertex count must be an int, got {vertex_count!r}")
        if vertex_count < 0:
            raise ValueError(f"negative vertex count {vertex_count}")
        try:
            self.slots: List[Chain] = [Chain() for _ in range(vertex_count)]
        except MemoryError as ex:
            raise AllocationFailure(
                f"cannot allocate {vertex_count} vertex slots"
            ) from ex
        self.vertex_count = vertex_count
        self.destroyed = False

    def __repr__(self) -> str:
        if self.destroyed:
            return f"Graph(N={self.vertex_count}, destroyed)"
        return f"Graph(N={self.vertex_count}, E={self.edge_count})"

    @staticmethod
    def create(vertex_count: int) -> Graph:
        """Create a graph with vertex_count vertices and no edges."""
        graph = Graph(vertex_count)
        logging.debug("created graph with %d vertices", vertex_count)
        return graph

    def __enter__(self) -> Graph:
        return self

    def __exit__(self, *exc_info):
        if not self.destroyed:
            self.destroy()

    def _check_live(self):
        if self.destroyed:
            raise ReleasedGraph("graph has been destroyed")

    def _check_vertex(self, vertex: int, what: str = "vertex"):
        if isinstance(vertex, bool) or not isinstance(vertex, int):
            raise OutOfRange(vertex, self.vertex_count, what)
        if not 0 <= vertex < self.vertex_count:
            raise OutOfRange(vertex, self.vertex_count, what)

    def add_edge(self, source: int, dest: int):
        """Add the directed edge source -> dest.

        Both endpoints must be in range. Nothing is modified if either check
        fails.
        """
        self._check_live()
        self._check_vertex(source, "source")
        self._check_vertex(dest, "dest")
        self.slots[source] = self.slots[source].prepend(dest)
        logging.debug("added edge %d -> %d", source, dest)

    def neighbors(self, vertex: int) -> List[int]:
        """Return the destinations of vertex, most recently added first."""
        self._check_live()
        self._check_vertex(vertex)
        return list(self.slots[vertex])

    def adjacency(self) -> Iterator[Tuple[int, List[int]]]:
        """Iterate over (vertex, destinations) in vertex order."""
        self._check_live()
        for vertex, chain in enumerate(self.slots):
            yield vertex, list(chain)

    def edges(self) -> Iterator[Tuple[int, int]]:
        """Iterate over (source, dest) pairs in display order."""
        for source, dests in self.adjacency():
            for dest in dests:
                yield source, dest

    @property
    def edge_count(self) -> int:
        self._check_live()
        return sum(len(chain) for chain in self.slots)

    def adjacency_view(
        self,
        out: Optional[TextIO] = None,
        label: Callable[[int], str] = vertex_label,
    ):
        """Write the adjacency list representation to out.

        For vertex V with destinations X, Y, Z (latest first) this prints:

            Adjacency list for vertex V:
             {  X-> Y-> Z-> }
        """
        rows = render.label_rows(self.adjacency(), label)
        if out is None:
            out = sys.stdout
        out.write(render.renderer().adjacency(rows))

    def edge_view(
        self,
        out: Optional[TextIO] = None,
        label: Callable[[int], str] = vertex_label,
    ):
        """Write the vertices and outgoing edges representation to out.

        For vertex V with destinations X, Y, Z (latest first) this prints:

            Vertex V has these outgoing edges:
             (V, X) ; (V, Y) ; (V, Z) ;
        """
        rows = render.label_rows(self.adjacency(), label)
        if out is None:
            out = sys.stdout
        out.write(render.renderer().edges(rows))

    def destroy(self) -> Release:
        """Release every chain, then the slots, then the graph itself."""
        if self.destroyed:
            raise DoubleRelease("graph already destroyed")
        nodes = sum(chain.release() for chain in self.slots)
        slots = len(self.slots)
        self.slots = []
        self.destroyed = True
        logging.debug(
            "destroyed graph: released %d nodes and %d slots", nodes, slots
        )
        return Release(nodes=nodes, slots=slots, headers=1)
