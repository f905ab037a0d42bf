"""Example: analysing a small road network with digraph.

Builds a weighted one-way street map, finds routes with Dijkstra and A*,
inspects its strongly connected districts and dominators, and writes a
highlighted Graphviz rendering to the working directory.
"""

from pathlib import Path

import digraph as dg

# Intersection -> (x, y) position, used by the A* heuristic
POSITIONS = {
    "depot": (0, 0),
    "market": (2, 0),
    "harbor": (4, 0),
    "school": (0, 2),
    "park": (2, 2),
    "station": (4, 2),
    "airport": (6, 1),
}


def build_network():
    """Street map as a weighted digraph, keyed by intersection name."""
    return dg.digraph(
        list(POSITIONS),
        {
            "depot": [("market", 2), ("school", 2)],
            "market": [("harbor", 2), ("park", 3)],
            "school": ("park", 2),
            "park": [("station", 2), ("market", 3)],
            "harbor": [("station", 3), ("airport", 4)],
            "station": [("airport", 3), ("harbor", 3)],
        },
    )


def example_routes(G, h):
    print("=" * 60)
    print("Example 1: Shortest routes")
    print("=" * 60)

    dist, parent = dg.dijkstra(G, h["depot"])
    for name, node in h.items():
        print(f"  depot -> {name:<8} cost {dist[node]}")

    gx, gy = POSITIONS["airport"]

    def straight_line(node):
        x, y = POSITIONS[G.payload(node)]
        return ((x - gx) ** 2 + (y - gy) ** 2) ** 0.5

    path, cost = dg.astar(G, h["depot"], h["airport"], straight_line)
    print(f"\nA* depot -> airport: {' -> '.join(G.payload(n) for n in path)} (cost {cost})")

    try:
        dg.dijkstra_path(G, h["airport"], h["depot"])
    except dg.NoPath as exc:
        print(f"Return trip: {exc}")
    print()
    return path


def example_structure(G, h):
    print("=" * 60)
    print("Example 2: Districts and chokepoints")
    print("=" * 60)

    sccs = dg.strongly_connected_components(G)
    for i, component in enumerate(sccs):
        print(f"  district {i}: {sorted(G.payload(n) for n in component)}")

    tree = dg.DominatorTree.build(G, h["depot"])
    for node in tree.reachable:
        idom = tree.immediate_dominator(node)
        if idom is not None:
            print(f"  every route to {G.payload(node)} passes {G.payload(idom)}")

    forest = dg.kruskal(G)
    print(f"\nCheapest road set connecting everything: weight {forest.total_weight}")
    print(f"Two-colourable: {dg.is_bipartite(G)}")
    print()
    return sccs


if __name__ == "__main__":
    G, h = build_network()
    path = example_routes(G, h)
    example_structure(G, h)

    out = dg.write_dot(G, Path("route_analysis.dot"), dg.PathHighlighter(path))
    print(f"Wrote {out}")
