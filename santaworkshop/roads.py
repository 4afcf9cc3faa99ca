"""The default road network between destination cities and its minimum spanning tree."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

START_DISTANCE_KM = int(10136.37)
SEPARATOR = "-----------------------------------------------------------------"

_CITY_NAMES = (
    "Molepolole,Botswana",
    "Francistown,Botswana",
    "Gaborone,Botswana",
    "Mahalapye,Botswana",
    "Maun,Botswana",
)

_DEFAULT_EDGES = (
    (0, 1, 414),
    (0, 2, 49),
    (0, 3, 197),
    (1, 2, 421),
    (1, 3, 227),
    (2, 3, 196),
    (0, 4, 882),
    (1, 4, 489),
    (2, 4, 851),
    (3, 4, 654),
)

_CONNECTIONS = (
    (0, 1),
    (0, 2),
    (0, 3),
    (1, 2),
    (1, 3),
    (2, 3),
    (1, 0),
    (2, 0),
    (3, 0),
)


@dataclass(frozen=True)
class Edge:
    """An undirected road between two city indices, with its length in km."""

    src: int
    dest: int
    weight: int


class DisjointSet:
    """Union-find over the integers 0..size-1 with path compression and union by rank."""

    def __init__(self, size: int) -> None:
        self.parent = list(range(size))
        self.rank = [0] * size

    def find(self, node: int) -> int:
        """The representative of the set holding ``node``."""
        root = node
        while self.parent[root] != root:
            root = self.parent[root]
        while self.parent[node] != root:
            self.parent[node], node = root, self.parent[node]
        return root

    def union(self, x: int, y: int) -> bool:
        """Merge the sets of ``x`` and ``y``; False when they were already one set."""
        x_root, y_root = self.find(x), self.find(y)
        if x_root == y_root:
            return False
        if self.rank[x_root] < self.rank[y_root]:
            self.parent[x_root] = y_root
        elif self.rank[x_root] > self.rank[y_root]:
            self.parent[y_root] = x_root
        else:
            self.parent[y_root] = x_root
            self.rank[x_root] += 1
        return True


def kruskal_mst(node_count: int, edges: Iterable[Edge]) -> list[Edge]:
    """The edges of a minimum spanning tree (or forest), cheapest first."""
    sets = DisjointSet(node_count)
    chosen: list[Edge] = []
    for edge in sorted(edges, key=lambda e: e.weight):
        if len(chosen) >= node_count - 1:
            break
        if sets.union(edge.src, edge.dest):
            chosen.append(edge)
    return chosen


def default_edges() -> list[Edge]:
    """The ten roads connecting the five destination cities."""
    return [Edge(src, dest, weight) for src, dest, weight in _DEFAULT_EDGES]


def city_pairs() -> list[tuple[int, str]]:
    """City index and name for every destination city."""
    return list(enumerate(_CITY_NAMES))


@dataclass(frozen=True)
class RoadConnection:
    """A directed link between two named cities, each given as (name, index)."""

    origin: tuple[str, int]
    target: tuple[str, int]


def road_connections() -> list[RoadConnection]:
    """The known direct connections between cities."""
    return [
        RoadConnection((_CITY_NAMES[a], a), (_CITY_NAMES[b], b)) for a, b in _CONNECTIONS
    ]


def mst_report() -> str:
    """The route over all default cities built from their minimum spanning tree."""
    names = dict(city_pairs())
    tree = kruskal_mst(len(names), default_edges())
    lines = [
        "1. First road which includes all default cities:\n",
        "\n",
        "Start from: Rovaniemi:\n",
    ]
    lines.extend(f"\t{names[edge.src]} ---> {names[edge.dest]}\n" for edge in tree)
    total = START_DISTANCE_KM + sum(edge.weight for edge in tree)
    lines.append(SEPARATOR + "\n")
    lines.append(f"Total distance: {total} km")
    return "".join(lines)