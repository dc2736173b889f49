"""
Kruskal's algorithm, one edge per step.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 23.2 (Kruskal).
"""

from __future__ import annotations

from typing import Tuple

from ..logging import get_logger
from .core import Edge, Graph
from .disjoint_set import DisjointSet
from .stepper import RenderState, Stepper

logger = get_logger(__name__)


class KruskalStepper(Stepper):
    """
    Stepwise Kruskal over the graph's edges sorted by weight.

    Ties keep the graph's edge order (row-major over the upper triangle).
    Each step advances the cursor by one edge and accepts it when its
    endpoints lie in different components. Stepping continues until every
    sorted edge has been examined, even once n-1 edges are accepted.

    Example:
        >>> from mststep.graphs.parser import parse_matrix
        >>> stepper = KruskalStepper(parse_matrix("0 1 4\\n1 0 2\\n4 2 0"))
        >>> while not stepper.is_complete():
        ...     _ = stepper.step()
        >>> stepper.total_weight()
        3
    """

    def __init__(self, graph: Graph):
        super().__init__(graph)
        self._sorted_edges: Tuple[Edge, ...] = tuple(sorted(graph.edges, key=lambda e: e.weight))
        self._cursor = -1
        self._disjoint_set = DisjointSet(graph.num_nodes)

    @property
    def cursor(self) -> int:
        """Index into sorted_edges() of the last examined edge, -1 initially."""
        return self._cursor

    def sorted_edges(self) -> Tuple[Edge, ...]:
        return self._sorted_edges

    def parents(self) -> Tuple[int, ...]:
        """Snapshot of the disjoint-set parent array."""
        return self._disjoint_set.parents()

    def render_state(self) -> RenderState:
        return RenderState(cursor=self._cursor)

    def is_complete(self) -> bool:
        return self._cursor >= len(self._sorted_edges) - 1

    def _advance(self) -> Tuple[Edge, bool]:
        self._cursor += 1
        edge = self._sorted_edges[self._cursor]

        root_source = self._disjoint_set.find(edge.source)
        root_target = self._disjoint_set.find(edge.target)
        accepted = root_source != root_target
        if accepted:
            self._disjoint_set.union(root_source, root_target)

        logger.debug(
            "Kruskal step %d: edge %s %s",
            self._cursor,
            edge.as_tuple(),
            "accepted" if accepted else "rejected (cycle)",
        )
        return edge, accepted
