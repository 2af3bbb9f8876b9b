"""Minimum spanning tree by Prim's algorithm over a weight matrix."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Set

NO_EDGE = 999
"""Weight marking the absence of an edge; any weight at or above it is unusable."""


class DisjointSet:
    """Union-find over the vertices 0 .. size - 1."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._parent = list(range(size))

    def find(self, vertex: int) -> int:
        """Return the representative of the set holding vertex."""
        while vertex != self._parent[vertex]:
            vertex = self._parent[vertex]
        return vertex

    def union(self, first: int, second: int) -> None:
        """Merge the sets holding first and second."""
        first_root = self.find(first)
        second_root = self.find(second)
        first_is_root = first == first_root
        second_is_root = second == second_root
        if first_is_root:
            self._parent[first] = second
        elif second_is_root:
            self._parent[second] = first
        else:
            self._parent[first_root] = second_root


@dataclass(frozen=True)
class Edge:
    """An undirected weighted edge between two vertices."""

    first: int
    second: int
    weight: int

    def key(self) -> frozenset:
        return frozenset((self.first, self.second))


def _usable(weight: Optional[int]) -> bool:
    return weight is not None and weight < NO_EDGE


def prim_mst(weights: Sequence[Sequence[Optional[int]]], start: int = 0) -> List[Edge]:
    """Return the edges of a minimum spanning tree, in the order they are chosen.

    weights is a square matrix; an entry of None or of NO_EDGE or more means
    there is no edge. Vertices are numbered from 0. At each step the lightest
    edge leaving a reached vertex is taken (ties go to the first found, scanning
    reached vertices in ascending order); an edge that would close a cycle is
    set aside and never considered again.
    """
    matrix = [list(row) for row in weights]
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("weight matrix must be square")
    if size == 0:
        return []
    if not 0 <= start < size:
        raise ValueError("start vertex out of range")

    components = DisjointSet(size)
    visited: Set[int] = {start}
    considered: Set[frozenset] = set()
    tree: List[Edge] = []

    while len(visited) < size:
        lightest: Optional[Edge] = None
        for vertex in sorted(visited):
            for other, weight in enumerate(matrix[vertex]):
                if not _usable(weight) or frozenset((vertex, other)) in considered:
                    continue
                if lightest is None or weight < lightest.weight:
                    lightest = Edge(vertex, other, weight)
        if lightest is None:
            raise ValueError("graph is not connected")

        considered.add(lightest.key())
        if components.find(lightest.first) != components.find(lightest.second):
            tree.append(lightest)
            components.union(lightest.first, lightest.second)
            visited.update((lightest.first, lightest.second))
    return tree