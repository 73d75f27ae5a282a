"""
socialnet
=========

An in-memory social network model: members tagged with characteristics,
undirected connections between them, and three analytical queries.

Queries:
- message reach (who carries a keyword)
- ad targeting (who carries all requested characteristics)
- dominance (who has the most connections)

Public API:
- SocialNetwork
- GraphStore
- GraphQueryEngine
- LoadReport
"""

from socialnet.network import SocialNetwork
from socialnet.graph.graph_store import GraphStore
from socialnet.graph.graph_query import GraphQueryEngine
from socialnet.graph.graph_loader import LoadReport
from socialnet.graph.graph_errors import LoadError, LineParseError

__all__ = [
    "SocialNetwork",
    "GraphStore",
    "GraphQueryEngine",
    "LoadReport",
    "LoadError",
    "LineParseError",
]

__version__ = "0.1.0"
