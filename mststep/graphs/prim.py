"""
Prim's algorithm, one frontier pop per step.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 23.2 (Prim).
"""

from __future__ import annotations

from typing import List, Tuple

from ..logging import get_logger
from .core import Edge, Graph
from .parser import clamp_vertex
from .stepper import RenderState, Stepper

logger = get_logger(__name__)


class PrimStepper(Stepper):
    """
    Stepwise Prim growing a tree from a start vertex.

    The frontier is a list of candidate edges kept sorted by weight with a
    stable sort. Edges whose target became visited after they were queued
    stay in the frontier and are discarded when popped, so every step
    shrinks the frontier by exactly one edge before any expansion.
    """

    def __init__(self, graph: Graph, start_vertex: int = 0):
        super().__init__(graph)
        n = graph.num_nodes
        self._start_vertex = clamp_vertex(start_vertex, n)
        self._visited: List[bool] = [False] * n
        self._frontier: List[Edge] = []
        if n:
            self._visited[self._start_vertex] = True
            self._expand(self._start_vertex)

    def _expand(self, node: int) -> None:
        self._frontier.extend(
            Edge(node, k, self.graph.weight(node, k))
            for k in self.graph.neighbors(node)
            if not self._visited[k]
        )
        self._frontier.sort(key=lambda e: e.weight)

    @property
    def start_vertex(self) -> int:
        return self._start_vertex

    def frontier(self) -> Tuple[Edge, ...]:
        """Candidate edges, lightest first."""
        return tuple(self._frontier)

    def visited(self) -> Tuple[bool, ...]:
        return tuple(self._visited)

    def render_state(self) -> RenderState:
        return RenderState(visited=self.visited(), frontier=self.frontier())

    def is_complete(self) -> bool:
        return not self._frontier or len(self._mst_edges) >= self.graph.num_nodes - 1

    def _advance(self) -> Tuple[Edge, bool]:
        edge = self._frontier.pop(0)

        if self._visited[edge.target]:
            logger.debug("Prim: edge %s discarded, target already visited", edge.as_tuple())
            return edge, False

        self._visited[edge.target] = True
        self._expand(edge.target)
        logger.debug(
            "Prim: edge %s accepted, frontier now has %d edges",
            edge.as_tuple(),
            len(self._frontier),
        )
        return edge, True
