from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, Iterable, Iterator, Literal, Optional, Tuple, Union

from socialnet.utils.text import label_set

ReachStatus = Literal["Received", "Not Received"]

RECEIVED: ReachStatus = "Received"
NOT_RECEIVED: ReachStatus = "Not Received"


@dataclass(frozen=True)
class Node:
    """
    Member of the social network.

    Characteristics are an unordered set of labels; duplicates collapse.
    """

    id: int
    characteristics: FrozenSet[str]

    @staticmethod
    def create(
        id: int,
        characteristics: Optional[Iterable[str]] = None,
    ) -> "Node":
        return Node(
            id=int(id),
            characteristics=label_set(characteristics),
        )

    def matches(self, targets: Iterable[str]) -> bool:
        """
        True when every target characteristic is present (AND semantics).
        """
        return self.characteristics.issuperset(targets)


@dataclass(frozen=True)
class Edge:
    """
    Undirected connection between two node ids.
    """

    source: int
    target: int

    @staticmethod
    def create(source: int, target: int) -> "Edge":
        return Edge(source=int(source), target=int(target))


@dataclass(frozen=True)
class MessageReach:
    """
    Whether a posted keyword reached a node.
    """

    node_id: int
    status: ReachStatus

    @property
    def received(self) -> bool:
        return self.status == RECEIVED

    def __iter__(self) -> Iterator[Union[int, str]]:
        return iter((self.node_id, self.status))


@dataclass(frozen=True)
class DominanceEntry:
    """
    Degree of a node together with the concrete neighbor ids.
    """

    node_id: int
    neighbors: Tuple[int, ...]

    @property
    def connections(self) -> int:
        return len(self.neighbors)

    def __iter__(self) -> Iterator[Union[int, Tuple[int, ...]]]:
        return iter((self.node_id, self.neighbors))
