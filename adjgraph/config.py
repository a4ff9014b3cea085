"""Configuration file parser."""

import logging
from abc import ABC, abstractproperty
from io import StringIO
from pathlib import Path
from typing import Any, Dict, Mapping, TextIO, Type, TypeVar

import yaml

from adjgraph.errors import GraphError
from adjgraph.graph import Graph
from adjgraph.labels import Labels

T = TypeVar("T", bound="Config")


class Config(ABC):

    """Abstract base class for YAML configuration.

    Subclasses should override abstract properties "required" and "optional".

    Example usage:

        # Assuming MyConfig is a subclass of Config:
        cfg = MyConfig.load(Path("/path/to/config.yml"))
        cfg.validate()

    Note that the creator must call validate(). They can optionally pass extra
    defaults as keyword arguments.
    """

    def __init__(self, path: Path, data: Mapping[str, Any]):
        self.path = path
        self.data = data

    def __repr__(self) -> str:
        name = self.__class__.__name__
        return f"{name}(path={self.path!r}, data={self.data!r})"

    @abstractproperty
    def required(self) -> Dict[str, Any]:
        """Required configuration keys and their defaults."""

    @abstractproperty
    def optional(self) -> Dict[str, Any]:
        """Optional configuration keys and their defaults."""

    def validate(self, **defaults: Any):
        """Validate the loaded configuration.

        This must be called manually after creating an instance. Missing
        required keys are logged as errors and filled in with defaults.
        """
        for key in self.required:
            if key not in self.data:
                logging.error("%s: missing %r", self.path, key)
        self.data = {**self.required, **self.optional, **defaults, **self.data}

    @classmethod
    def load(cls: Type[T], path: Path) -> T:
        """Load configuration from a file."""
        with open(path) as f:
            return cls.load_from(path, f)

    @classmethod
    def loads(cls: Type[T], path: Path, content: str) -> T:
        """Load configuration from a string."""
        return cls.load_from(path, StringIO(content))

    @classmethod
    def load_from(cls: Type[T], path: Path, content: TextIO) -> T:
        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as ex:
            logging.error("cannot parse %s: %s", path, ex)
            data = {}
        if not isinstance(data, dict):
            logging.error("invalid YAML in %s: %s", path, type(data))
            data = {}
        return cls(path, data)

    def __getitem__(self, key: str) -> Any:
        """Get a configuration value."""
        return self.data[key]


class GraphConfig(Config):

    """Description of a graph to build, for example:

        vertices: 3
        labels: XYZ
        edges:
          - [0, 1]
          - [1, 2]
    """

    required = {
        "vertices": 0,
    }

    optional = {
        "labels": "ABCDEFG",
        "edges": [],
    }

    def labels(self) -> Labels:
        """Return the label table. Raises ValueError if it is too large.

        A value that is not a string is logged and replaced by the default.
        """
        symbols = self["labels"]
        if not isinstance(symbols, str):
            default = self.optional["labels"]
            logging.error(
                "%s: labels must be a string, got %r; using %r",
                self.path,
                symbols,
                default,
            )
            symbols = default
        return Labels(symbols)

    def build(self) -> Graph:
        """Create the described graph and add its edges in file order.

        Malformed edge entries are logged and skipped. Out-of-range vertices
        raise OutOfRange, after destroying the partially built graph.
        """
        count = self["vertices"]
        if isinstance(count, bool) or not isinstance(count, int):
            logging.error("%s: vertices must be an integer, got %r", self.path, count)
            count = 0
        edges = self["edges"]
        if edges is None:
            edges = []
        elif not isinstance(edges, list):
            logging.error("%s: edges must be a list, got %r", self.path, edges)
            edges = []
        graph = Graph.create(count)
        try:
            for i, edge in enumerate(edges):
                if not isinstance(edge, list) or len(edge) != 2:
                    logging.error(
                        "%s: edge %d: expected [source, dest], got %r",
                        self.path,
                        i,
                        edge,
                    )
                    continue
                graph.add_edge(edge[0], edge[1])
        except GraphError:
            graph.destroy()
            raise
        return graph
