from ._graph import new_bipartite_graph


def find_matching(G):
    """Find the most pairs in a bipartite graph.

    The problem is better known as maximum cardinality matching. The bipartite
    graph `G` is described as a Mapping, where the keys are the vertices of one
    set (U) and the values are a Sequence of vertices of the other set (V),
    which describe the edges (E) of the graph. For example the graph with
    U=(U0, U1), V=(V0, V1) and E=((U0, V0), (U0, V1), (U1, V0)) can be written
    as:

        G = {
            'U0': ['V0', 'V1'],
            'U1': ['V0'],
        }

    The return value is a maximum matching M, described as a Mapping from all
    matched vertices in U to their matched vertex in V. For the example above,
    the return value would be:

        M = {
            'U0': 'V1',
            'U1': 'V0',
        }
    """
    # V in order of first appearance
    V = list(dict.fromkeys(v for neighbours in G.values() for v in neighbours))
    adjacency = {u: set(neighbours) for u, neighbours in G.items()}

    graph = new_bipartite_graph(G, V, lambda u, v: v in adjacency[u])
    return dict(graph.matched_pairs())
