"""
Graph subsystem for socialnet.

Defines the social graph model and the analytics run over it:
- node table with characteristic sets
- undirected adjacency
- bulk loading from the network text format
- reach, targeting and dominance queries
"""

from socialnet.graph.graph_schema import (
    Node,
    Edge,
    MessageReach,
    DominanceEntry,
    RECEIVED,
    NOT_RECEIVED,
)
from socialnet.graph.graph_errors import SocialNetError, LoadError, LineParseError
from socialnet.graph.graph_store import GraphStore
from socialnet.graph.graph_builder import GraphBuilder
from socialnet.graph.graph_loader import LoadReport, load_network_file
from socialnet.graph.graph_query import GraphQueryEngine, ReachSummary

__all__ = [
    "Node",
    "Edge",
    "MessageReach",
    "DominanceEntry",
    "RECEIVED",
    "NOT_RECEIVED",
    "SocialNetError",
    "LoadError",
    "LineParseError",
    "GraphStore",
    "GraphBuilder",
    "LoadReport",
    "load_network_file",
    "GraphQueryEngine",
    "ReachSummary",
]
