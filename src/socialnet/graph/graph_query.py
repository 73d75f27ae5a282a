from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional
import logging

from socialnet.graph.graph_store import GraphStore
from socialnet.utils.text import label_set
from socialnet.graph.graph_schema import (
    DominanceEntry,
    MessageReach,
    NOT_RECEIVED,
    RECEIVED,
)

logger = logging.getLogger("socialnet.query")


@dataclass(frozen=True)
class ReachSummary:
    """
    Nodes grouped by whether a posted keyword reached them.
    """

    keyword: str
    received: List[int]
    not_received: List[int]

    @property
    def total(self) -> int:
        return len(self.received) + len(self.not_received)


class GraphQueryEngine:
    """
    Read-only analytics over a loaded social graph.

    None of these queries mutate the store, and none raise for unknown
    keywords, empty targets or an empty graph.
    """

    def __init__(self, store: GraphStore) -> None:
        self.store = store

    # ------------------------------------------------------------------
    # Messaging
    # ------------------------------------------------------------------

    def post_message(self, keyword: str) -> List[MessageReach]:
        """
        Classify every node in the table as having received the keyword or not.

        Membership is verbatim and case-sensitive; graph structure is ignored.
        """
        return [
            MessageReach(
                node_id=node.id,
                status=RECEIVED if keyword in node.characteristics else NOT_RECEIVED,
            )
            for node in self.store.nodes()
        ]

    def reach_summary(self, keyword: str) -> ReachSummary:
        received: List[int] = []
        not_received: List[int] = []
        for reach in self.post_message(keyword):
            (received if reach.received else not_received).append(reach.node_id)
        return ReachSummary(
            keyword=keyword,
            received=received,
            not_received=not_received,
        )

    # ------------------------------------------------------------------
    # Targeting
    # ------------------------------------------------------------------

    def target_ads(self, target_characteristics: Iterable[str]) -> List[int]:
        """
        Ids of nodes carrying ALL target characteristics.

        An empty target matches every node.
        """
        targets = label_set(target_characteristics)
        return [node.id for node in self.store.nodes() if node.matches(targets)]

    # ------------------------------------------------------------------
    # Dominance
    # ------------------------------------------------------------------

    def calculate_dominance_and_influence(
        self,
        target_characteristics: Optional[Iterable[str]] = None,
    ) -> List[DominanceEntry]:
        """
        Rank connected nodes by neighbor count, highest first.

        Only ids present in the adjacency relation are ranked. With a
        non-empty target, ids missing from the node table fail the filter.
        Order among equal counts is unspecified.
        """
        targets = label_set(target_characteristics)

        entries: List[DominanceEntry] = []
        for node_id, neighbors in self.store.adjacency():
            if targets:
                node = self.store.get_node(node_id)
                if node is None or not node.matches(targets):
                    continue
            entries.append(DominanceEntry(node_id=node_id, neighbors=neighbors))

        entries.sort(key=lambda e: e.connections, reverse=True)

        logger.debug(
            "ranked %s nodes (targets=%s)",
            len(entries),
            sorted(targets),
        )
        return entries

    # ------------------------------------------------------------------
    # Characteristic distribution
    # ------------------------------------------------------------------

    def characteristic_counts(self) -> Dict[str, int]:
        """
        Number of nodes in the table carrying each characteristic.
        """
        counts: Counter = Counter()
        for node in self.store.nodes():
            counts.update(node.characteristics)
        return dict(counts)
