import logging

from ._edge import Edge, EdgeCollection, Node, Side
from ._errors import AdjacencyError, LengthMismatchError

logger = logging.getLogger(__name__)


def new_bipartite_graph(left_values, right_values, adjacent, *, strict=False):
    """Build a bipartite graph from two sequences of source values.

    Vertex ``i`` of the left side corresponds to ``left_values[i]``, vertex
    ``j`` of the right side to ``right_values[j]``. The callable ``adjacent``
    is called once for every pair ``(left_value, right_value)``, all right
    values of a left value before advancing to the next left value. If it
    returns a true value, the two vertices are connected.

    If ``adjacent`` raises, an AdjacencyError is raised, which names the pair
    and chains the original exception. With ``strict=True``, both sequences
    must have the same length, otherwise a LengthMismatchError is raised.
    """
    left_values = tuple(left_values)
    right_values = tuple(right_values)

    if strict and len(left_values) != len(right_values):
        raise LengthMismatchError(len(left_values), len(right_values))

    left = tuple(Node(i, Side.LEFT) for i in range(len(left_values)))
    right = tuple(
        Node(j + len(left), Side.RIGHT) for j in range(len(right_values))
    )

    edges = []
    for i, left_value in enumerate(left_values):
        for j, right_value in enumerate(right_values):
            try:
                is_adjacent = adjacent(left_value, right_value)
            except Exception as e:
                raise AdjacencyError(left_value, right_value, e) from e

            if is_adjacent:
                edges.append(Edge(left[i], right[j]))

    graph = BipartiteGraph(
        left, right, EdgeCollection(edges), left_values, right_values
    )

    logger.debug(
        "Built bipartite graph with %d left, %d right vertices and %d edges",
        len(left),
        len(right),
        len(graph.edges),
    )
    return graph


def largest_matching(graph):
    return graph.largest_matching()


def largest_matching_size(graph):
    return graph.largest_matching_size()


def _odd(n):
    return n % 2 == 1


class BipartiteGraph:
    """Two ordered vertex sets and the edges between them.

    The graph doesn't change after construction. Every query works on its own
    matching, so a graph can be queried any number of times.
    """

    def __init__(self, left, right, edges, left_values=None, right_values=None):
        self.left = tuple(left)
        self.right = tuple(right)
        self.edges = edges  # all edges go from left to right nodes
        self._left_values = left_values
        self._right_values = right_values

    @property
    def left_values(self):
        return self._left_values

    @property
    def right_values(self):
        return self._right_values

    def value_of(self, node):
        """Return the source value the node was created from."""
        if node.side is Side.LEFT:
            values, offset = self._left_values, 0
        else:
            values, offset = self._right_values, len(self.left)
        if values is None:
            raise ValueError("Graph was not created from source values")
        return values[node.id - offset]

    def neighbours(self, node1, node2):
        return self.edges.find_by_nodes(node1, node2) is not None

    def largest_matching_size(self):
        return len(self.largest_matching())

    def largest_matching(self):
        """Find a maximum cardinality matching.

        This is the Hopcroft-Karp algorithm: Every phase finds a maximal set of
        vertex-disjoint shortest augmenting paths for the current matching and
        flips the matched and unmatched edges along each of them. The paths are
        vertex-disjoint, so the order in which they are applied doesn't matter.
        Every path increases the size of the matching by one, so the loop ends
        after at most min(len(left), len(right)) phases.
        """
        matching = EdgeCollection()
        paths = self.maximal_disjoint_slap_collection(matching)
        phase = 1

        while paths:
            for path in paths:
                matching = matching.symmetric_difference(path)

            logger.debug(
                "Phase %d: applied %d augmenting paths, matching size is %d",
                phase,
                len(paths),
                len(matching),
            )
            paths = self.maximal_disjoint_slap_collection(matching)
            phase += 1

        return matching

    def matched_pairs(self):
        """Return the largest matching as (left_value, right_value) tuples,
        ordered by the left side."""
        matching = self.largest_matching()
        pairs = []
        for node in self.left:
            partner = matching.partner(node)
            if partner is not None:
                pairs.append((self.value_of(node), self.value_of(partner)))
        return pairs

    def maximal_disjoint_slap_collection(self, matching):
        """Find vertex-disjoint shortest augmenting paths for ``matching``.

        The collection is maximal: no other shortest augmenting path exists,
        that is disjoint with all paths found. Each path is an EdgeCollection,
        starting at a free right vertex and ending at a free left vertex.
        """
        layers = self.partition(matching)
        used = set()
        result = []

        for node in layers[-1]:
            # A matched right vertex can't end an augmenting path.
            if node.side is not Side.RIGHT or not matching.free(node):
                continue
            if node in used:
                continue

            slap = self._find_disjoint_slap(node, matching, layers, used)
            if slap is not None:
                result.append(slap)

        return result

    def _find_disjoint_slap(self, start, matching, layers, used):
        # Depth-first search from the last layer down to layer 0. Level L is
        # the layer of the current node. From a right vertex (odd level) only
        # unmatched edges lead down, from a left vertex (even level) only the
        # matched edge. The search keeps an explicit stack: `nodes` holds the
        # vertices of the current path, `cursors` the position of the next
        # candidate to try in the layer below each of them.
        nodes = [start]
        cursors = [0]
        path = []
        used.add(start)

        while nodes:
            level = len(layers) - len(nodes)
            if level == 0:
                return EdgeCollection(path)

            current = nodes[-1]
            candidates = layers[level - 1]
            idx = cursors[-1]
            next_node = None

            while idx < len(candidates):
                candidate = candidates[idx]
                idx += 1

                if candidate in used:
                    continue

                edge = self.edges.find_by_nodes(current, candidate)
                if edge is None:
                    continue

                if matching.contains(edge) == _odd(level):
                    continue

                next_node = candidate
                break

            cursors[-1] = idx

            if next_node is None:
                # Dead end. Release the node, so that another path can use it.
                used.discard(current)
                nodes.pop()
                cursors.pop()
                if path:
                    path.pop()
            else:
                used.add(next_node)
                nodes.append(next_node)
                cursors.append(0)
                path.append(edge)

        return None

    def partition(self, matching):
        """Split the graph into layers of alternating path distance.

        Layer 0 holds the free left vertices. Odd layers are reached over
        unmatched edges and hold right vertices, even layers are reached over
        matched edges and hold left vertices. Every vertex is in at most one
        layer. The partition stops after the first layer with a free right
        vertex or, if no augmenting path exists, with an empty layer.
        """
        used = set()
        current_layer = [node for node in self.left if matching.free(node)]
        used.update(current_layer)
        layers = [current_layer]
        done = False

        while not done:
            last_layer = current_layer
            current_layer = []

            if _odd(len(layers)):
                for left_node in last_layer:
                    for edge in self.edges.edges_of(left_node):
                        right_node = edge.other(left_node)
                        if right_node in used or matching.contains(edge):
                            continue

                        current_layer.append(right_node)
                        used.add(right_node)

                        if matching.free(right_node):
                            done = True
            else:
                for right_node in last_layer:
                    left_node = matching.partner(right_node)
                    if left_node is None or left_node in used:
                        continue

                    current_layer.append(left_node)
                    used.add(left_node)

            layers.append(current_layer)
            if not current_layer:
                done = True

        return layers
