import dataclasses
import enum


class Side(enum.Enum):
    LEFT = "left"
    RIGHT = "right"


@dataclasses.dataclass(frozen=True, order=True)
class Node:
    id: int
    side: Side = dataclasses.field(compare=False)

    def __str__(self):
        return f"{self.side.value}:{self.id}"


@dataclasses.dataclass(frozen=True)
class Edge:
    """An undirected edge between two nodes.

    The endpoints are stored lowest id first, so ``Edge(a, b) == Edge(b, a)``
    and both hash the same.
    """

    node1: Node
    node2: Node

    def __post_init__(self):
        if self.node2.id < self.node1.id:
            node1, node2 = self.node2, self.node1
            object.__setattr__(self, "node1", node1)
            object.__setattr__(self, "node2", node2)

    def __iter__(self):
        yield self.node1
        yield self.node2

    def __str__(self):
        return f"{self.node1}-{self.node2}"

    def touches(self, node):
        return node in (self.node1, self.node2)

    def other(self, node):
        if node == self.node1:
            return self.node2
        if node == self.node2:
            return self.node1
        raise ValueError(f"{node} is not an endpoint of {self}")


class EdgeCollection:
    """Flat, ordered and immutable collection of edges.

    Iteration follows insertion order; duplicates are dropped. Comparison with
    another collection (or a set) ignores the order.
    """

    def __init__(self, edges=()):
        self._edges = []
        self._index = set()
        self._by_node = {}

        for edge in edges:
            if edge in self._index:
                continue
            self._edges.append(edge)
            self._index.add(edge)
            for node in edge:
                self._by_node.setdefault(node, []).append(edge)

    def __iter__(self):
        return iter(self._edges)

    def __len__(self):
        return len(self._edges)

    def __contains__(self, edge):
        return edge in self._index

    def __eq__(self, other):
        if isinstance(other, EdgeCollection):
            return self._index == other._index
        if isinstance(other, (set, frozenset)):
            return self._index == other
        return NotImplemented

    __hash__ = None

    def __repr__(self):
        edges = ", ".join(str(e) for e in self._edges)
        return f"EdgeCollection([{edges}])"

    def contains(self, edge):
        return edge in self._index

    def free(self, node):
        """Return True, if no edge in the collection touches ``node``."""
        return node not in self._by_node

    def partner(self, node):
        """Return the node at the other end of the first edge touching
        ``node``, or None if the node is free.

        For a matching, there is at most one such edge.
        """
        edges = self._by_node.get(node)
        if not edges:
            return None
        return edges[0].other(node)

    def edges_of(self, node):
        return list(self._by_node.get(node, ()))

    def find_by_nodes(self, node1, node2):
        """Return the edge connecting both nodes in any order, or None."""
        edge = Edge(node1, node2)
        return edge if edge in self._index else None

    def nodes(self):
        return set(self._by_node)

    def symmetric_difference(self, other):
        """Edges that are in exactly one of both collections.

        Edges of ``self`` keep their order and come first, followed by the new
        edges of ``other``.
        """
        other = other if isinstance(other, EdgeCollection) else EdgeCollection(other)
        kept = [e for e in self._edges if e not in other]
        added = [e for e in other if e not in self._index]
        return EdgeCollection(kept + added)

    __xor__ = symmetric_difference
