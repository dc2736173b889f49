"""
Core graph data structures.

A Graph is built once from a symmetric adjacency matrix and never changes
afterwards. Nodes carry fixed circular-layout coordinates for renderers,
edges are undirected and stored once per pair with source < target.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import FrozenSet, Iterator, List, Sequence, Tuple

import numpy as np

DEFAULT_RADIUS = 150.0
DEFAULT_CENTER: Tuple[float, float] = (250.0, 250.0)


@dataclass(frozen=True)
class Node:
    """
    Graph vertex with layout coordinates.

    Attributes:
        id: Dense 0-based index.
        x: Horizontal layout coordinate.
        y: Vertical layout coordinate.
    """

    id: int
    x: float
    y: float


@dataclass(frozen=True)
class Edge:
    """
    Weighted undirected edge.

    The orientation is only informative: Kruskal edges come out of the
    matrix with source < target, Prim edges point from the visited node to
    the candidate node. Both denote the same undirected pair.

    Attributes:
        source: Id of one endpoint.
        target: Id of the other endpoint.
        weight: Positive integer weight.
    """

    source: int
    target: int
    weight: int

    def __post_init__(self) -> None:
        if self.source == self.target:
            raise ValueError(f"Self-loop on node {self.source} is not an edge")
        if self.weight <= 0:
            raise ValueError(f"Edge weight must be positive, got {self.weight}")

    def endpoints(self) -> FrozenSet[int]:
        """Return the unordered pair of endpoints."""
        return frozenset((self.source, self.target))

    def as_tuple(self) -> Tuple[int, int, int]:
        """Return (source, target, weight)."""
        return (self.source, self.target, self.weight)


def circular_layout(
    n: int,
    radius: float = DEFAULT_RADIUS,
    center: Tuple[float, float] = DEFAULT_CENTER,
) -> Tuple[Node, ...]:
    """
    Place n nodes evenly on a circle.

    Node i sits at angle 2*pi*i/n, measured from the positive x axis.

    Args:
        n: Number of nodes.
        radius: Circle radius.
        center: (x, y) of the circle center.

    Returns:
        Tuple of n nodes ordered by id.
    """
    if n <= 0:
        return ()
    angles = np.arange(n) * (2.0 * math.pi / n)
    xs = center[0] + radius * np.cos(angles)
    ys = center[1] + radius * np.sin(angles)
    return tuple(Node(id=i, x=float(xs[i]), y=float(ys[i])) for i in range(n))


def undirected_edges(matrix: np.ndarray) -> Iterator[Edge]:
    """
    Yield one Edge per positive upper-triangle entry, in row-major order.

    Entries <= 0 mean "no edge" and are skipped.
    """
    n = matrix.shape[0]
    for i in range(n):
        for j in range(i + 1, n):
            weight = int(matrix[i, j])
            if weight > 0:
                yield Edge(i, j, weight)


@dataclass(frozen=True, eq=False)
class Graph:
    """
    Immutable weighted undirected graph.

    Attributes:
        nodes: Nodes ordered by id, 0..n-1.
        edges: Undirected edges with source < target, row-major order.
        matrix: Read-only symmetric integer adjacency matrix of shape (n, n).
    """

    nodes: Tuple[Node, ...]
    edges: Tuple[Edge, ...]
    matrix: np.ndarray

    @classmethod
    def from_matrix(
        cls,
        matrix: Sequence[Sequence[int]] | np.ndarray,
        radius: float = DEFAULT_RADIUS,
        center: Tuple[float, float] = DEFAULT_CENTER,
    ) -> "Graph":
        """
        Build a Graph from an already validated square symmetric matrix.

        Use :func:`mststep.graphs.parser.parse_matrix` for untrusted text.

        Raises:
            ValueError: If the matrix is not square or not symmetric.
        """
        array = np.array(matrix, dtype=np.int64)
        if array.size == 0:
            array = array.reshape(0, 0)
        if array.ndim != 2 or array.shape[0] != array.shape[1]:
            raise ValueError(f"Adjacency matrix must be square, got shape {array.shape}")
        if not np.array_equal(array, array.T):
            raise ValueError("Adjacency matrix must be symmetric")
        array.setflags(write=False)

        n = array.shape[0]
        return cls(
            nodes=circular_layout(n, radius, center),
            edges=tuple(undirected_edges(array)),
            matrix=array,
        )

    @property
    def num_nodes(self) -> int:
        return len(self.nodes)

    def weight(self, i: int, j: int) -> int:
        """Return matrix[i][j]; values <= 0 mean no edge."""
        return int(self.matrix[i, j])

    def neighbors(self, i: int) -> List[int]:
        """Return ids k != i with a positive weight to i, ascending."""
        return [int(k) for k in np.flatnonzero(self.matrix[i] > 0) if k != i]
