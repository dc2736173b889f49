"""Stepwise MST engine: one facade over the Kruskal and Prim steppers."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Optional, Tuple, Union

from .config import VisualizerConfig
from .graphs.core import Edge, Graph
from .graphs.kruskal import KruskalStepper
from .graphs.parser import clamp_vertex
from .graphs.prim import PrimStepper
from .graphs.stepper import Stepper, StepResult
from .logging import get_logger

logger = get_logger(__name__)


class Algorithm(str, Enum):
    """MST algorithm selector."""

    KRUSKAL = "kruskal"
    PRIM = "prim"

    @classmethod
    def parse(cls, value: Union["Algorithm", str]) -> "Algorithm":
        """
        Accept an Algorithm or its case-insensitive name.

        Raises:
            ValueError: If value names no supported algorithm.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            supported = [a.value for a in cls]
            raise ValueError(
                f"Unsupported algorithm '{value}'. Supported names: {supported}"
            ) from None


# Factories take (graph, start_vertex); Kruskal ignores the start vertex.
_STEPPERS: Dict[Algorithm, Callable[[Graph, int], Stepper]] = {
    Algorithm.KRUSKAL: lambda graph, start_vertex: KruskalStepper(graph),
    Algorithm.PRIM: PrimStepper,
}


@dataclass(frozen=True)
class MstResult:
    """
    MST accumulated so far.

    Attributes:
        mst_edges: Accepted edges in insertion order.
        total_weight: Sum of their weights.
        complete: Whether the algorithm has finished.
    """

    mst_edges: Tuple[Edge, ...]
    total_weight: int
    complete: bool


@dataclass(frozen=True)
class EngineSnapshot:
    """
    Everything a renderer needs after a step.

    Attributes:
        graph: Graph being processed.
        algorithm: Active algorithm.
        mst_edges: Accepted edges in insertion order.
        current_edge: Edge examined by the latest step, if any.
        step_index: Index of the latest consumed step, -1 before the first.
        cursor: Kruskal position in the sorted edge list; None for Prim.
        visited: Prim visited flags per node; None for Kruskal.
        frontier: Prim candidate edges; empty for Kruskal.
        total_weight: Sum of accepted weights.
        complete: Whether the algorithm has finished.
    """

    graph: Graph
    algorithm: Algorithm
    mst_edges: Tuple[Edge, ...]
    current_edge: Optional[Edge]
    step_index: int
    cursor: Optional[int]
    visited: Optional[Tuple[bool, ...]]
    frontier: Tuple[Edge, ...]
    total_weight: int
    complete: bool


class MstEngine:
    """
    Owns a Graph and the active Stepper.

    The engine is synchronous. Concurrent step() calls on one instance are
    not supported; callers serialize them (see :class:`AutoRunner`).

    Args:
        graph: Graph to compute the MST of.
        algorithm: "kruskal" or "prim".
        start_vertex: Prim start vertex, clamped into [0, n-1].

    Example:
        >>> from mststep.graphs import parse_matrix
        >>> engine = MstEngine(parse_matrix("0 1 4\\n1 0 2\\n4 2 0"), "prim")
        >>> engine.run_to_completion()
        2
        >>> engine.total_weight()
        3
    """

    def __init__(
        self,
        graph: Graph,
        algorithm: Union[Algorithm, str] = Algorithm.KRUSKAL,
        start_vertex: int = 0,
    ):
        self._graph = graph
        self._algorithm = Algorithm.parse(algorithm)
        self._start_vertex = start_vertex
        self._stepper: Stepper
        self._last_step: Optional[StepResult] = None
        self.reset()

    def reset(
        self,
        graph: Optional[Graph] = None,
        algorithm: Optional[Union[Algorithm, str]] = None,
        start_vertex: Optional[int] = None,
    ) -> None:
        """
        Discard progress and build a fresh stepper.

        Arguments left as None keep their current value.
        """
        if graph is not None:
            self._graph = graph
        if algorithm is not None:
            self._algorithm = Algorithm.parse(algorithm)
        if start_vertex is not None:
            self._start_vertex = start_vertex
        self._start_vertex = clamp_vertex(self._start_vertex, self._graph.num_nodes)

        self._stepper = _STEPPERS[self._algorithm](self._graph, self._start_vertex)
        self._last_step = None

        logger.info(
            "Reset %s on %d nodes, %d edges%s",
            self._algorithm.value,
            self._graph.num_nodes,
            len(self._graph.edges),
            f", start vertex {self._start_vertex}" if self._algorithm is Algorithm.PRIM else "",
        )

    def step(self) -> bool:
        """
        Advance the active stepper by one step.

        Returns:
            Whether the engine is complete after this step.
        """
        self._last_step = self._stepper.step()
        return self._last_step.complete

    def run_to_completion(
        self,
        max_steps: Optional[int] = None,
        should_cancel: Optional[Callable[[], bool]] = None,
        on_step: Optional[Callable[[StepResult], None]] = None,
    ) -> int:
        """
        Step until complete, cancelled, or max_steps steps were taken.

        Args:
            max_steps: Upper bound on steps taken by this call. None means
                no bound.
            should_cancel: Checked before every step; returning True stops
                the run without taking that step. May block to pace steps.
            on_step: Called with each StepResult.

        Returns:
            Number of steps taken.
        """
        if max_steps is not None and max_steps < 0:
            raise ValueError(f"max_steps must be non-negative, got {max_steps}")

        taken = 0
        while not self.is_complete() and (max_steps is None or taken < max_steps):
            if should_cancel is not None and should_cancel():
                logger.info("Run cancelled after %d steps", taken)
                break
            self.step()
            taken += 1
            if on_step is not None:
                on_step(self._last_step)
        return taken

    @property
    def graph(self) -> Graph:
        return self._graph

    @property
    def algorithm(self) -> Algorithm:
        return self._algorithm

    @property
    def start_vertex(self) -> int:
        return self._start_vertex

    @property
    def stepper(self) -> Stepper:
        return self._stepper

    @property
    def last_step(self) -> Optional[StepResult]:
        """Result of the latest step() since the last reset."""
        return self._last_step

    def is_complete(self) -> bool:
        return self._stepper.is_complete()

    def current_step_index(self) -> int:
        return self._stepper.current_step_index()

    def current_edge(self) -> Optional[Edge]:
        return self._stepper.current_edge

    def mst_edges(self) -> Tuple[Edge, ...]:
        return self._stepper.mst_edges()

    def total_weight(self) -> int:
        return self._stepper.total_weight()

    def result(self) -> MstResult:
        return MstResult(self.mst_edges(), self.total_weight(), self.is_complete())

    def snapshot(self) -> EngineSnapshot:
        """Immutable view of the engine state for renderers."""
        stepper = self._stepper
        state = stepper.render_state()
        return EngineSnapshot(
            graph=self._graph,
            algorithm=self._algorithm,
            mst_edges=stepper.mst_edges(),
            current_edge=stepper.current_edge,
            step_index=stepper.current_step_index(),
            cursor=state.cursor,
            visited=state.visited,
            frontier=state.frontier,
            total_weight=stepper.total_weight(),
            complete=stepper.is_complete(),
        )


class AutoRunner:
    """
    Timer-driven auto-run: one engine step per tick.

    Each step is preceded by a wait of speed_ms milliseconds. cancel() may
    be called from another thread; the pending tick is then suppressed. A
    step already in progress is never interrupted.

    Args:
        engine: Engine to drive.
        speed_ms: Interval between steps, validated against config.
        config: Bounds for speed_ms. Defaults to VisualizerConfig().
    """

    def __init__(
        self,
        engine: MstEngine,
        speed_ms: int = 500,
        config: Optional[VisualizerConfig] = None,
    ):
        self.config = config if config is not None else VisualizerConfig()
        self.engine = engine
        self.speed_ms = self.config.validate_speed(speed_ms)
        self._cancelled = threading.Event()
        self._lock = threading.Lock()

    @property
    def running(self) -> bool:
        return self._lock.locked()

    def cancel(self) -> None:
        """Suppress the next tick of an active run."""
        self._cancelled.set()

    def _tick(self) -> bool:
        # Event.wait returns True as soon as cancel() sets the flag.
        return self._cancelled.wait(self.speed_ms / 1000.0)

    def run(
        self,
        on_step: Optional[Callable[[StepResult], None]] = None,
        max_steps: Optional[int] = None,
    ) -> int:
        """
        Step the engine until it completes or cancel() is called.

        Returns:
            Number of steps taken.

        Raises:
            RuntimeError: If this runner is already running.
        """
        if not self._lock.acquire(blocking=False):
            raise RuntimeError("Auto-run is already active")
        try:
            logger.info("Auto-run started at %d ms per step", self.speed_ms)
            taken = self.engine.run_to_completion(
                max_steps=max_steps, should_cancel=self._tick, on_step=on_step
            )
            logger.info("Auto-run stopped after %d steps", taken)
            return taken
        finally:
            self._cancelled.clear()
            self._lock.release()
