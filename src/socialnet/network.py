from __future__ import annotations

from pathlib import Path
from typing import Dict, Iterable, List, Optional, Set, Union
import logging

from socialnet.config.settings import SocialNetConfig
from socialnet.graph.graph_errors import LoadError
from socialnet.graph.graph_loader import LoadReport, load_network_file
from socialnet.graph.graph_query import GraphQueryEngine, ReachSummary
from socialnet.graph.graph_schema import DominanceEntry, Edge, MessageReach, Node
from socialnet.graph.graph_store import GraphStore

logger = logging.getLogger("socialnet.network")


class SocialNetwork:
    """
    Handle over one social graph: bulk load, mutation and the analytical queries.

    Callers own the instance and must serialize any mutation against
    in-flight queries; no locking is done here.
    """

    def __init__(
        self,
        *,
        config: Optional[SocialNetConfig] = None,
        store: Optional[GraphStore] = None,
    ) -> None:
        self.config = config or SocialNetConfig()
        self.store = store if store is not None else GraphStore()
        self.queries = GraphQueryEngine(self.store)

    # ------------------------------------------------------------------
    # Loading & mutation
    # ------------------------------------------------------------------

    def load(self, path: Union[str, Path]) -> LoadReport:
        """
        Bulk-load the network text format from ``path``.

        An unreadable source is reported through ``LoadReport.ok`` and
        leaves the graph untouched.
        """
        try:
            report = load_network_file(
                graph=self.store,
                path=path,
                config=self.config.loader,
            )
        except LoadError as exc:
            logger.error("%s", exc)
            self.store.metadata["load_error"] = str(exc)
            return LoadReport(path=exc.path, ok=False, error=exc.reason)

        self.store.metadata["source"] = str(report.path)
        self.store.metadata.pop("load_error", None)
        return report

    def add_node(self, node_id: int, characteristics: Iterable[str] = ()) -> None:
        self.store.add_node(Node.create(node_id, characteristics))

    def add_edge(self, id1: int, id2: int) -> None:
        self.store.add_edge(Edge.create(id1, id2))

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def post_message(self, keyword: str) -> List[MessageReach]:
        return self.queries.post_message(keyword)

    def reach_summary(self, keyword: str) -> ReachSummary:
        return self.queries.reach_summary(keyword)

    def target_ads(self, target_characteristics: Iterable[str]) -> List[int]:
        return self.queries.target_ads(target_characteristics)

    def calculate_dominance_and_influence(
        self,
        target_characteristics: Optional[Iterable[str]] = None,
    ) -> List[DominanceEntry]:
        return self.queries.calculate_dominance_and_influence(target_characteristics)

    def characteristic_counts(self) -> Dict[str, int]:
        return self.queries.characteristic_counts()

    def get_available_characteristics(self) -> Set[str]:
        return self.store.available_characteristics()

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    def neighbors(self, node_id: int) -> List[int]:
        return self.store.neighbors(node_id)

    def node_count(self) -> int:
        return self.store.node_count()

    def edge_count(self) -> int:
        return self.store.edge_count()
