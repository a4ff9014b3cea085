"""Text rendering of graph views."""

from typing import Callable, Iterable, List, Optional, Tuple

from jinja2 import Environment, PackageLoader, StrictUndefined

# A vertex label and the labels of its destinations, in chain order.
Row = Tuple[str, List[str]]


class Renderer:

    """Renders the adjacency and edge views from the package templates."""

    def __init__(self):
        self.env = Environment(
            loader=PackageLoader("adjgraph", "templates"),
            autoescape=False,
            undefined=StrictUndefined,
        )
        self.adjacency_template = self.env.get_template("adjacency.txt.jinja")
        self.edges_template = self.env.get_template("edges.txt.jinja")

    def adjacency(self, rows: List[Row]) -> str:
        return self.adjacency_template.render(rows=rows)

    def edges(self, rows: List[Row]) -> str:
        return self.edges_template.render(rows=rows)


_renderer: Optional[Renderer] = None


def renderer() -> Renderer:
    """Return the shared renderer, loading templates on first use."""
    global _renderer  # pylint: disable=global-statement
    if _renderer is None:
        _renderer = Renderer()
    return _renderer


def label_rows(
    adjacency: Iterable[Tuple[int, List[int]]], label: Callable[[int], str]
) -> List[Row]:
    """Convert (vertex, destinations) pairs to labeled rows.

    All labels are looked up before anything is rendered, so a bad label
    raises before any output is produced.
    """
    return [(label(v), [label(d) for d in dests]) for v, dests in adjacency]
