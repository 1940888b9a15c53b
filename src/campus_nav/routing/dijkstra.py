"""Dijkstra shortest path over a name-keyed adjacency list."""

import math
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass


@dataclass
class DijkstraResult:
    path: list[str]
    distance_m: float
    settled: int  # nodes popped from the unvisited set


def dijkstra_shortest_path(
    order: Iterable[str],
    adjacency: Mapping[str, list[str]],
    weight: Callable[[str, str], float],
    source: str,
    target: str,
) -> DijkstraResult:
    """Compute a single-source shortest path using O(n^2) Dijkstra.

    ``order`` fixes the scan order of the minimum-selection step: among nodes
    with equal tentative distance the first one met in ``order`` is selected.
    The early exit on ``target`` means only nodes closer than it are settled.
    """

    dist: dict[str, float] = {}
    prev: dict[str, str] = {}
    unvisited: dict[str, None] = {}
    for name in order:
        dist[name] = math.inf
        unvisited[name] = None
    dist[source] = 0.0

    settled = 0
    while unvisited:
        u = None
        min_val = math.inf
        for name in unvisited:
            if dist[name] < min_val:
                min_val = dist[name]
                u = name

        if u is None:
            break  # nothing reachable is left

        del unvisited[u]
        settled += 1
        if u == target:
            break

        for v in adjacency.get(u, ()):
            if v not in unvisited:
                continue
            alt = dist[u] + weight(u, v)
            if alt < dist[v]:
                dist[v] = alt
                prev[v] = u

    path = reconstruct_path(prev, source, target)
    return DijkstraResult(path, dist[target] if path else math.inf, settled)


def reconstruct_path(prev: Mapping[str, str], source: str, target: str) -> list[str]:
    """Walk predecessors back from target; empty unless the walk ends at source."""
    path = [target]
    cur = target
    while cur in prev:
        cur = prev[cur]
        path.append(cur)
    if path[-1] != source:
        return []
    path.reverse()
    return path
