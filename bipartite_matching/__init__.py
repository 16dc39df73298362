from ._edge import Edge, EdgeCollection, Node, Side
from ._errors import AdjacencyError, LengthMismatchError, MatchingError
from ._graph import (
    BipartiteGraph,
    largest_matching,
    largest_matching_size,
    new_bipartite_graph,
)
from ._mapping import find_matching
