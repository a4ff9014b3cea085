"""Command-line interface."""

import logging
import sys
from argparse import ArgumentParser, Namespace
from pathlib import Path
from typing import Callable, List, Mapping, Optional, Sequence, Tuple

from adjgraph.config import GraphConfig
from adjgraph.errors import GraphError
from adjgraph.graph import Graph
from adjgraph.labels import vertex_label
from adjgraph.logs import fatal, setup_logging

# The demonstration graph: A-G with edges (A,B) (A,C) (C,D) (D,E) (D,G) (E,F)
# (G,F), added in this order.
DEMO_VERTICES = 7
DEMO_EDGES: List[Tuple[int, int]] = [
    (0, 1),
    (0, 2),
    (2, 3),
    (3, 4),
    (3, 6),
    (4, 5),
    (6, 5),
]

VIEWS = ["adjacency", "edges", "both"]


def main(argv: Optional[Sequence[str]] = None):
    parser, commands = get_parser()
    args = parser.parse_args(argv)
    if args.command == "help":
        if args.help_target:
            commands[args.help_target].print_help()
        else:
            parser.print_help()
        return

    log_level = logging.WARNING
    if args.verbose and args.verbose == 1:
        log_level = logging.INFO
    elif args.verbose and args.verbose >= 2:
        log_level = logging.DEBUG
    exit_level = logging.ERROR
    if args.keep_going:
        exit_level = logging.FATAL
    setup_logging(sys.stderr, log_level, exit_level)

    command = globals()[f"command_{args.command}"]
    assert command, "unexpected command name"
    command(args)


def get_parser() -> Tuple[ArgumentParser, Mapping[str, ArgumentParser]]:
    parser = ArgumentParser(
        prog="adjgraph", description="build directed graphs and print them"
    )
    commands = parser.add_subparsers(metavar="command", dest="command", required=True)

    parser_help = commands.add_parser("help", help="show this help message and exit")
    parser_help.add_argument(
        metavar="command",
        dest="help_target",
        nargs="?",
        help="get help for a specific command",
    )

    parser_demo = commands.add_parser("demo", help="print the 7-vertex demo graph")

    parser_show = commands.add_parser("show", help="print a graph from a YAML file")
    parser_show.add_argument("file", help="graph description file")

    for subparser in [parser_demo, parser_show]:
        subparser.add_argument(
            "--view", choices=VIEWS, default="both", help="which views to print"
        )
        subparser.add_argument(
            "-k",
            "--keep-going",
            action="store_true",
            help="keep going if there are errors",
        )
        subparser.add_argument(
            "-v",
            "--verbose",
            action="count",
            help="increase logging (can use multiple times)",
        )

    return parser, commands.choices


def command_demo(args: Namespace):
    graph = Graph.create(DEMO_VERTICES)
    for source, dest in DEMO_EDGES:
        graph.add_edge(source, dest)
    logging.info("built demo graph %r", graph)
    print_views(graph, args.view, vertex_label)


def command_show(args: Namespace):
    path = Path(args.file)
    if not path.is_file():
        fatal("%s: file not found", path)
    cfg = GraphConfig.load(path)
    cfg.validate()
    logging.debug("graph config: %r", cfg)
    try:
        labels = cfg.labels()
        graph = cfg.build()
    except (GraphError, ValueError) as ex:
        fatal("%s: %s", path, ex)
    logging.info("built graph %r from %s", graph, path)
    print_views(graph, args.view, labels)


def print_views(graph: Graph, view: str, label: Callable[[int], str]):
    """Print the selected views to stdout, then destroy the graph."""
    with graph:
        try:
            if view in ("adjacency", "both"):
                graph.adjacency_view(sys.stdout, label)
            if view in ("edges", "both"):
                graph.edge_view(sys.stdout, label)
        except GraphError as ex:
            fatal("%s", ex)
