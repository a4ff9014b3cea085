"""Shared fixtures."""

import logging

import pytest

from adjgraph.cli import DEMO_EDGES, DEMO_VERTICES
from adjgraph.graph import Graph


@pytest.fixture(autouse=True)
def reset_root_logger():
    """Drop handlers installed by setup_logging during a test."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
    root.setLevel(level)


@pytest.fixture
def demo_graph():
    graph = Graph.create(DEMO_VERTICES)
    for source, dest in DEMO_EDGES:
        graph.add_edge(source, dest)
    yield graph
    if not graph.destroyed:
        graph.destroy()
