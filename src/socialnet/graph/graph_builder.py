from __future__ import annotations

from typing import Iterable

from socialnet.graph.graph_schema import Node, Edge
from socialnet.graph.graph_store import GraphStore


class GraphBuilder:
    """
    Populates the social graph from parsed node and edge records.
    """

    def __init__(self, store: GraphStore) -> None:
        self.store = store

    def add_nodes(self, nodes: Iterable[Node]) -> int:
        count = 0
        for node in nodes:
            self.store.add_node(node)
            count += 1
        return count

    def add_edges(self, edges: Iterable[Edge]) -> int:
        count = 0
        for edge in edges:
            self.store.add_edge(edge)
            count += 1
        return count
