"""Benchmark the core graph algorithms on generated graphs."""

import time
from typing import Callable, Dict

import digraph as dg


def _time(fn: Callable[[], object], repeats: int) -> float:
    fn()  # Warmup
    start = time.perf_counter()
    for _ in range(repeats):
        fn()
    return (time.perf_counter() - start) / repeats


def benchmark_algorithms(n_nodes: int, k: int = 6, repeats: int = 5, seed: int = 0) -> Dict[str, float]:
    """Time each algorithm on one Watts-Strogatz graph.

    Args:
        n_nodes: Number of nodes.
        k: Ring degree passed to watts_strogatz.
        repeats: Number of timed runs per algorithm.
        seed: Generator seed.

    Returns:
        Dictionary mapping algorithm name -> mean seconds per run.
    """
    G = dg.watts_strogatz(n_nodes, k, 0.1, seed=seed, weight=lambda u, v: 1 + (u ^ v) % 9)
    target = n_nodes // 2

    cases = {
        "bfs": lambda: dg.bfs(G, 0),
        "dfs": lambda: dg.dfs(G, 0),
        "dijkstra": lambda: dg.dijkstra(G, 0),
        "astar": lambda: dg.astar(G, 0, target, lambda n: 0),
        "scc": lambda: dg.strongly_connected_components(G),
        "dominators": lambda: dg.DominatorTree.build(G, 0),
        "kruskal": lambda: dg.kruskal(G),
        "bipartite": lambda: dg.is_bipartite(G),
    }

    results: Dict[str, float] = {"n_nodes": n_nodes, "n_edges": G.edge_count}
    for name, fn in cases.items():
        results[name] = _time(fn, repeats)
    return results


if __name__ == "__main__":
    print("Benchmarking graph algorithms...")

    for n in (1_000, 10_000, 50_000):
        results = benchmark_algorithms(n)
        print(f"\n{n} nodes, {results['n_edges']} edges:")
        for name, seconds in results.items():
            if name in ("n_nodes", "n_edges"):
                continue
            print(f"  {name:<12} {seconds * 1e3:8.2f} ms")
