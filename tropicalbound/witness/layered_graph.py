"""
Layered witness graph
=====================

For a word ``w = w_0 w_1 ... w_{L-1}`` of n×n tropical matrices the graph has
L + 1 layers of n nodes. Node j of layer i is connected to node k of layer
i + 1 with weight ``w_i[j][k]`` whenever that entry is finite. Every
start-to-end path crosses each layer once, so the lightest path from
(layer 0, start) to (layer L, end) has exactly the weight of entry
(start, end) of the tropical product of the word.
"""

from __future__ import annotations

import heapq
from typing import Dict, List, Optional, Sequence, Tuple

from tropicalbound.elements.matrix import SemiringMatrix
from tropicalbound.elements.semiring import is_finite


class LayeredGraph:
    """Directed graph with non-negative integer weights stored as adjacency lists."""

    def __init__(self, vertices: int):
        self.vertices = vertices
        self.adjacency: List[List[Tuple[int, int]]] = [[] for _ in range(vertices)]

    def add_edge(self, u: int, v: int, weight: int) -> None:
        self.adjacency[u].append((v, weight))

    @classmethod
    def from_word(cls, matrices: Sequence[SemiringMatrix]) -> "LayeredGraph":
        """Build the (L + 1)·n-node graph of a word given as its matrices."""
        n = matrices[0].size()
        graph = cls((len(matrices) + 1) * n)
        for layer, matrix in enumerate(matrices):
            for j, row in enumerate(matrix.rows()):
                for k, weight in enumerate(row):
                    if is_finite(weight):
                        graph.add_edge(layer * n + j, (layer + 1) * n + k, weight)
        return graph

    def shortest_path(self, source: int, target: int) -> Optional[Tuple[int, List[int]]]:
        """
        Dijkstra from ``source`` to ``target``.

        Returns:
            ``(distance, path)`` with the path as vertex ids from source to
            target, or None if the target cannot be reached.
        """
        dist: Dict[int, int] = {source: 0}
        prev: Dict[int, int] = {}
        queue: List[Tuple[int, int]] = [(0, source)]

        while queue:
            d, u = heapq.heappop(queue)
            if u == target:
                break
            if d > dist[u]:
                continue
            for v, weight in self.adjacency[u]:
                candidate = d + weight
                if v not in dist or candidate < dist[v]:
                    dist[v] = candidate
                    prev[v] = u
                    heapq.heappush(queue, (candidate, v))

        if target not in dist:
            return None

        path = [target]
        while path[-1] != source:
            path.append(prev[path[-1]])
        path.reverse()
        return dist[target], path
