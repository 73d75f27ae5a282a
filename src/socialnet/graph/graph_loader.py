from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional, Union
import time
import logging

from socialnet.config.settings import LoaderConfig
from socialnet.graph.graph_builder import GraphBuilder
from socialnet.graph.graph_errors import LineParseError, LoadError
from socialnet.graph.graph_schema import Node, Edge
from socialnet.graph.graph_store import GraphStore
from socialnet.utils.text import tokenize, parse_int, split_lines

logger = logging.getLogger("socialnet.load_graph")


@dataclass
class ParsedNetwork:
    """
    Records recovered from a network source, in file order.
    """

    nodes: List[Node] = field(default_factory=list)
    edges: List[Edge] = field(default_factory=list)
    skipped: List[LineParseError] = field(default_factory=list)


@dataclass(frozen=True)
class LoadReport:
    """
    Outcome of a bulk load.

    ``ok`` is False only when the source itself could not be read;
    malformed lines are reported in ``skipped`` without failing the load.
    """

    path: Path
    ok: bool
    nodes_loaded: int = 0
    edges_loaded: int = 0
    skipped: List[LineParseError] = field(default_factory=list)
    error: Optional[str] = None

    def __bool__(self) -> bool:
        return self.ok


def parse_node_line(line: str, line_number: int) -> Node:
    tokens = tokenize(line)
    if not tokens:
        raise LineParseError(line_number, line, "empty node line")

    node_id = parse_int(tokens[0])
    if node_id is None:
        raise LineParseError(line_number, line, "node id is not an integer")

    return Node.create(node_id, tokens[1:])


def parse_edge_line(line: str, line_number: int) -> Edge:
    tokens = tokenize(line)
    if len(tokens) != 2:
        raise LineParseError(
            line_number,
            line,
            f"expected 2 node ids, got {len(tokens)} tokens",
        )

    source, target = (parse_int(t) for t in tokens)
    if source is None or target is None:
        raise LineParseError(line_number, line, "edge endpoint is not an integer")

    return Edge.create(source, target)


def parse_network_lines(
    lines: Iterable[str],
    *,
    edges_marker: str = "edges",
) -> ParsedNetwork:
    """
    Parse the two-section network format.

    Everything before the marker line is a node line, everything after it
    an edge line. A line that does not fit its section is logged and dropped.
    """
    parsed = ParsedNetwork()
    reading_nodes = True

    for line_number, line in enumerate(lines, start=1):
        if line == edges_marker:
            reading_nodes = False
            continue

        try:
            if reading_nodes:
                parsed.nodes.append(parse_node_line(line, line_number))
            else:
                parsed.edges.append(parse_edge_line(line, line_number))
        except LineParseError as exc:
            logger.warning(
                "skipping malformed %s line %s: %s",
                "node" if reading_nodes else "edge",
                line_number,
                exc.reason,
            )
            parsed.skipped.append(exc)

    return parsed


def read_network_source(path: Path, *, encoding: str = "utf-8") -> List[str]:
    """
    Read the whole source up front so an I/O failure leaves nothing applied.
    """
    try:
        return split_lines(path.read_text(encoding=encoding))
    except (OSError, UnicodeDecodeError) as exc:
        raise LoadError(path, str(exc)) from exc


def load_network_file(
    *,
    graph: GraphStore,
    path: Union[str, Path],
    config: Optional[LoaderConfig] = None,
) -> LoadReport:
    """
    Load nodes and edges from a network text file into the GraphStore.

    Raises LoadError when the file cannot be opened or decoded.
    """
    config = config or LoaderConfig()
    path = Path(path)

    t0 = time.perf_counter()
    lines = read_network_source(path, encoding=config.encoding)
    t_read = time.perf_counter()

    parsed = parse_network_lines(lines, edges_marker=config.edges_marker)
    t_parse = time.perf_counter()
    logger.info(
        "read %s lines from %s in %.3fs; parsed nodes=%s edges=%s skipped=%s in %.3fs",
        len(lines),
        path,
        t_read - t0,
        len(parsed.nodes),
        len(parsed.edges),
        len(parsed.skipped),
        t_parse - t_read,
    )

    builder = GraphBuilder(graph)
    nodes_loaded = builder.add_nodes(parsed.nodes)
    edges_loaded = builder.add_edges(parsed.edges)
    logger.info(
        "added nodes=%s edges=%s in %.3fs",
        nodes_loaded,
        edges_loaded,
        time.perf_counter() - t_parse,
    )

    return LoadReport(
        path=path,
        ok=True,
        nodes_loaded=nodes_loaded,
        edges_loaded=edges_loaded,
        skipped=parsed.skipped,
    )
