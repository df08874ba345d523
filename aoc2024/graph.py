"""A weighted directed graph with shortest-path queries."""

from __future__ import annotations

import heapq
from dataclasses import dataclass
from itertools import count
from types import MappingProxyType
from typing import Mapping


class NoPathError(LookupError):
    """Raised when the target cannot be reached from the source."""


@dataclass(frozen=True)
class Path:
    """One shortest path and its total distance."""

    distance: int
    path: list[int]


@dataclass(frozen=True)
class BestPaths:
    """Every path that shares the shortest distance."""

    distance: int
    paths: list[list[int]]


class Graph:
    """Directed graph of integer vertices joined by weighted arcs."""

    def __init__(self) -> None:
        self._arcs: dict[int, dict[int, int]] = {}

    def _require(self, vertex: int) -> None:
        if vertex not in self._arcs:
            raise KeyError(f"vertex {vertex} not found")

    def add_vertex(self, vertex: int) -> None:
        """Add a vertex without arcs; an existing vertex is left alone."""
        self._arcs.setdefault(vertex, {})

    def add_arc(self, source: int, target: int, distance: int) -> None:
        """Add or replace the arc from ``source`` to ``target``."""
        self._require(source)
        self._require(target)
        self._arcs[source][target] = distance

    def arcs(self, vertex: int) -> Mapping[int, int]:
        """Return a live read-only view of the arcs leaving ``vertex``."""
        self._require(vertex)
        return MappingProxyType(self._arcs[vertex])

    def _search(self, source: int, target: int) -> tuple[dict[int, int], dict[int, list[int]]]:
        self._require(source)
        self._require(target)
        distances = {source: 0}
        predecessors: dict[int, list[int]] = {source: []}
        done: set[int] = set()
        tie = count()
        heap = [(0, next(tie), source)]
        while heap:
            distance, _, vertex = heapq.heappop(heap)
            if vertex in done:
                continue
            done.add(vertex)
            for neighbour, weight in self._arcs[vertex].items():
                candidate = distance + weight
                best = distances.get(neighbour)
                if best is None or candidate < best:
                    distances[neighbour] = candidate
                    predecessors[neighbour] = [vertex]
                    heapq.heappush(heap, (candidate, next(tie), neighbour))
                elif candidate == best and vertex not in predecessors[neighbour]:
                    predecessors[neighbour].append(vertex)
        if target not in distances:
            raise NoPathError(f"no path from {source} to {target}")
        return distances, predecessors

    def shortest(self, source: int, target: int) -> Path:
        """Return one shortest path from ``source`` to ``target``."""
        distances, predecessors = self._search(source, target)
        route = [target]
        vertex = target
        while vertex != source:
            vertex = predecessors[vertex][0]
            route.append(vertex)
        route.reverse()
        return Path(distances[target], route)

    def shortest_all(self, source: int, target: int) -> BestPaths:
        """Return every shortest path from ``source`` to ``target``."""
        distances, predecessors = self._search(source, target)
        paths: list[list[int]] = []
        stack: list[tuple[int, list[int]]] = [(target, [target])]
        while stack:
            vertex, suffix = stack.pop()
            if vertex == source:
                paths.append(suffix[::-1])
                continue
            for previous in predecessors[vertex]:
                if previous not in suffix:
                    stack.append((previous, suffix + [previous]))
        return BestPaths(distances[target], paths)