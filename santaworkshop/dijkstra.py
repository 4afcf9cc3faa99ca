"""Shortest paths and a greedy route over only the cities children live in."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Sequence

from .models import Children
from .roads import SEPARATOR, START_DISTANCE_KM, city_pairs

INF = 999999999999
NO_CANDIDATE = 99999

Graph = Sequence[Sequence[tuple[int, int]]]

_FULL_GRAPH: tuple[tuple[tuple[int, int], ...], ...] = (
    ((1, 414), (2, 49), (3, 198), (4, 882)),
    ((0, 414), (2, 421), (3, 227), (4, 489)),
    ((0, 49), (1, 421), (3, 196), (4, 851)),
    ((1, 227), (2, 196), (0, 198), (4, 654)),
    ((0, 882), (1, 489), (2, 851), (3, 654)),
)


def shortest_distance(graph: Graph, source: int, destination: int) -> int:
    """Length of the shortest path, or INF when the destination is unreachable."""
    dist = [INF] * len(graph)
    dist[source] = 0
    queue = [(0, source)]
    while queue:
        length, node = heapq.heappop(queue)
        if length > dist[node]:
            continue
        for neighbour, weight in graph[node]:
            candidate = length + weight
            if candidate < dist[neighbour]:
                dist[neighbour] = candidate
                heapq.heappush(queue, (candidate, neighbour))
    return dist[destination]


def greedy_route(graph: Graph, start: int = 0) -> tuple[list[int], int]:
    """Visit every node by repeatedly going to the nearest unvisited one.

    Returns the visiting order, starting with ``start``, and the distance covered.
    """
    node_count = len(graph)
    route = [start]
    visited: set[int] = set()
    current = start
    total = 0
    for _ in range(node_count - 1):
        best_node, best_distance = None, NO_CANDIDATE
        for node in range(node_count):
            if node == current or node in visited:
                continue
            distance = shortest_distance(graph, current, node)
            if distance < best_distance:
                best_node, best_distance = node, distance
        if best_node is None:
            raise ValueError(f"no reachable unvisited city from node {current}")
        total += best_distance
        visited.add(current)
        current = best_node
        route.append(current)
    return route, total


def city_numbers(children: Iterable[Children]) -> list[int]:
    """Indices of the cities the children live in, in order of first appearance."""
    index_of = {name: index for index, name in city_pairs()}
    found: list[int] = []
    for child in children:
        index = index_of.get(child.city)
        if index is not None and index not in found:
            found.append(index)
    return found


def build_subgraph(points: Iterable[int]) -> list[list[tuple[int, int]]]:
    """The road graph restricted to ``points``, renumbered by their sorted order."""
    ordered = sorted(points)
    renumber = {point: position for position, point in enumerate(ordered)}
    subgraph: list[list[tuple[int, int]]] = []
    for point in ordered:
        edges = [
            (renumber[target], weight)
            for other in ordered
            if other != point
            for target, weight in _FULL_GRAPH[point]
            if target == other
        ]
        if edges:
            subgraph.append(edges)
    return subgraph


def route_report(children: Iterable[Children]) -> str:
    """The greedy route through only the children's cities, as printed text."""
    points = sorted(city_numbers(children))
    if not points:
        raise ValueError("no children with a known city")
    names = dict(city_pairs())
    graph = build_subgraph(points)
    route, distance = greedy_route(graph, 0) if graph else ([0], 0)
    parts = [
        "2. Second road which includes only current children's cities:\n",
        "\n",
        f"Start from: Rovaniemi---> {names[points[0]]}",
    ]
    parts.extend(f"---> {names[points[node]]}" for node in route[1:])
    parts.append("\n")
    parts.append(SEPARATOR + "\n")
    parts.append(f"Total distance distance is {START_DISTANCE_KM + distance}")
    return "".join(parts)