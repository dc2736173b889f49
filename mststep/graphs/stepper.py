"""
Common interface for stepwise MST algorithms.

A Stepper owns all of its progress state. Callers advance it with
:meth:`Stepper.step` and read it back through observers that return
immutable snapshots.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .core import Edge, Graph


@dataclass(frozen=True)
class StepResult:
    """
    Outcome of one step() call.

    Attributes:
        edge: Edge examined by this step, or None for a no-op step after
            completion.
        accepted: Whether the edge was added to the MST.
        complete: Whether the stepper is complete after this step.
        step_index: Index of the step that produced this result, counting
            from 0. A no-op step repeats the index of the last real step.
    """

    edge: Optional[Edge]
    accepted: bool
    complete: bool
    step_index: int


@dataclass(frozen=True)
class RenderState:
    """
    Algorithm-specific progress a renderer highlights.

    Attributes:
        cursor: Kruskal position in the sorted edge list, None for Prim.
        visited: Prim visited flags per node, None for Kruskal.
        frontier: Prim candidate edges, lightest first. Empty for Kruskal.
    """

    cursor: Optional[int] = None
    visited: Optional[Tuple[bool, ...]] = None
    frontier: Tuple[Edge, ...] = ()


class Stepper(ABC):
    """Base class holding the MST accumulated so far."""

    def __init__(self, graph: Graph):
        self.graph = graph
        self._mst_edges: List[Edge] = []
        self._current_edge: Optional[Edge] = None
        self._steps_taken = 0

    @abstractmethod
    def is_complete(self) -> bool:
        """Return whether further steps would be no-ops."""

    @abstractmethod
    def _advance(self) -> Tuple[Edge, bool]:
        """Examine the next edge and return it with its acceptance flag."""

    def step(self) -> StepResult:
        """
        Examine one edge.

        Returns:
            StepResult for this call. Once complete, every further call is a
            no-op that leaves all state untouched.
        """
        if self.is_complete():
            return StepResult(None, False, True, self.current_step_index())

        edge, accepted = self._advance()
        self._current_edge = edge
        self._steps_taken += 1
        if accepted:
            self._mst_edges.append(edge)
        return StepResult(edge, accepted, self.is_complete(), self.current_step_index())

    @property
    def current_edge(self) -> Optional[Edge]:
        """Edge examined by the latest step, kept even if it was rejected."""
        return self._current_edge

    @property
    def steps_taken(self) -> int:
        return self._steps_taken

    def current_step_index(self) -> int:
        """Index of the latest consumed step, -1 before the first one."""
        return self._steps_taken - 1

    def mst_edges(self) -> Tuple[Edge, ...]:
        """Accepted edges in insertion order."""
        return tuple(self._mst_edges)

    def total_weight(self) -> int:
        return sum(edge.weight for edge in self._mst_edges)

    def render_state(self) -> RenderState:
        """Algorithm-specific progress for renderers. Subclasses fill in their fields."""
        return RenderState()
