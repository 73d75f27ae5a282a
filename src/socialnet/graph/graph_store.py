from __future__ import annotations

import networkx as nx
from typing import Any, Dict, Iterable, Iterator, List, Optional, Set, Tuple

from socialnet.graph.graph_schema import Node, Edge


class GraphStore:
    """
    Authoritative in-memory social graph.

    The node table holds members that were explicitly added; the adjacency
    relation may also reference ids that never were. Both live in a single
    undirected networkx graph: table members carry a ``data`` attribute,
    edge-only ids do not.
    """

    def __init__(self) -> None:
        self._graph = nx.Graph()
        self._available_characteristics: Set[str] = set()
        self.metadata: Dict[str, Any] = {}

    # -------------------- Nodes --------------------

    def add_node(self, node: Node) -> None:
        # Re-adding an id replaces its characteristics; the vocabulary only grows.
        self._graph.add_node(node.id, data=node)
        self._available_characteristics.update(node.characteristics)

    def has_node(self, node_id: int) -> bool:
        return self.get_node(node_id) is not None

    def get_node(self, node_id: int) -> Optional[Node]:
        if node_id not in self._graph:
            return None
        return self._graph.nodes[node_id].get("data")

    def nodes(self) -> Iterator[Node]:
        for _, data in self._graph.nodes(data=True):
            node = data.get("data")
            if node is not None:
                yield node

    def get_nodes(self) -> List[Node]:
        return list(self.nodes())

    def available_characteristics(self) -> Set[str]:
        return set(self._available_characteristics)

    # -------------------- Edges --------------------

    def add_edge(self, edge: Edge) -> None:
        self._graph.add_edge(edge.source, edge.target)

    def has_edge(self, source: int, target: int) -> bool:
        return self._graph.has_edge(source, target)

    def edges(self) -> Iterable[Edge]:
        for u, v in self._graph.edges():
            yield Edge(source=u, target=v)

    def get_edges(self) -> List[Edge]:
        return list(self.edges())

    # -------------------- Traversal --------------------

    def neighbors(self, node_id: int) -> List[int]:
        if node_id not in self._graph:
            return []
        return list(self._graph.adj[node_id])

    def adjacency(self) -> Iterator[Tuple[int, Tuple[int, ...]]]:
        """
        Yield ``(node_id, neighbor_ids)`` for every id with at least one neighbor.

        A self-loop contributes the node to its own neighbor set once.
        """
        for node_id, nbrs in self._graph.adjacency():
            if nbrs:
                yield node_id, tuple(nbrs)

    # -------------------- Analytics --------------------

    def node_count(self) -> int:
        return sum(1 for _ in self.nodes())

    def edge_count(self) -> int:
        return self._graph.number_of_edges()

    # -------------------- Cloning --------------------

    def clone(self) -> "GraphStore":
        g = GraphStore()
        g._graph = self._graph.copy()
        g._available_characteristics = set(self._available_characteristics)
        g.metadata = dict(self.metadata)
        return g
