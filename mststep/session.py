"""
Headless controller behind an interactive MST visualizer.

A presentation layer binds its inputs (matrix text, size, algorithm, start
vertex, speed) to an :class:`MstSession` and renders ``session.snapshot()``
plus ``session.error`` after every action.
"""

from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Callable, Iterator, Optional, Union

import numpy as np

from .config import VisualizerConfig, load_config
from .engine import Algorithm, AutoRunner, EngineSnapshot, MstEngine
from .graphs.core import Graph
from .graphs.errors import MatrixParseError
from .graphs.parser import clamp_vertex, empty_matrix, format_matrix, parse_matrix, random_matrix
from .graphs.stepper import StepResult
from .logging import get_logger

logger = get_logger(__name__)


class MstSession:
    """
    User-facing state of one visualizer session.

    Attributes:
        config: Bounds and defaults.
        matrix_text: Current adjacency-matrix text.
        matrix_size: Size used by the matrix generators.
        algorithm: Algorithm used by the next run().
        start_vertex: Prim start vertex used by the next run().
        speed_ms: Auto-run interval.
        error: Message of the last failed parse, "" otherwise.
        graph: Graph of the last successful parse, if any.
        engine: Engine created by the last run(), if any.
    """

    def __init__(self, config: Optional[VisualizerConfig] = None):
        self.config = config if config is not None else load_config()
        self.matrix_size = self.config.default_matrix_size
        self.matrix_text = format_matrix(empty_matrix(self.matrix_size))
        self.algorithm = Algorithm.KRUSKAL
        self.start_vertex = 0
        self.speed_ms = self.config.default_speed_ms
        self.error = ""
        self.graph: Optional[Graph] = None
        self.engine: Optional[MstEngine] = None
        self._runner: Optional[AutoRunner] = None
        # Held by auto_run, step, run and reset_visualization; never waited on.
        self._lock = threading.Lock()

    # Inputs

    def set_matrix_size(self, size: int) -> None:
        """Change the matrix size and replace the text with an empty matrix."""
        self.matrix_size = self.config.validate_matrix_size(size)
        self.generate_empty()

    def generate_empty(self) -> str:
        self.matrix_text = format_matrix(empty_matrix(self.matrix_size))
        return self.matrix_text

    def generate_random(self, rng: Optional[np.random.Generator] = None) -> str:
        self.matrix_text = format_matrix(random_matrix(self.matrix_size, rng=rng))
        return self.matrix_text

    def set_algorithm(self, algorithm: Union[Algorithm, str]) -> None:
        self.algorithm = Algorithm.parse(algorithm)

    def set_start_vertex(self, vertex: int) -> None:
        """Set the Prim start vertex, clamped to the current graph's nodes."""
        if self.graph is not None:
            vertex = clamp_vertex(vertex, self.graph.num_nodes)
        elif vertex < 0:
            vertex = 0
        self.start_vertex = vertex

    def set_speed(self, speed_ms: int) -> None:
        self.speed_ms = self.config.validate_speed(speed_ms)

    # Actions

    def parse(self) -> bool:
        """
        Parse matrix_text into a new Graph.

        On failure the previous graph and engine are kept and error holds a
        readable message.

        Returns:
            Whether parsing succeeded.
        """
        try:
            graph = parse_matrix(
                self.matrix_text,
                radius=self.config.layout_radius,
                center=self.config.layout_center,
            )
        except MatrixParseError as exc:
            self.error = str(exc)
            logger.warning("Matrix rejected: %s", exc)
            return False

        self.graph = graph
        self.start_vertex = clamp_vertex(self.start_vertex, graph.num_nodes)
        self.error = ""
        return True

    def run(self) -> bool:
        """
        Parse the matrix and reset the engine with the selected algorithm.

        Returns:
            Whether parsing succeeded. On failure the engine is untouched.
        """
        with self._exclusive():
            if not self.parse():
                return False
            if self.engine is None:
                self.engine = MstEngine(self.graph, self.algorithm, self.start_vertex)
            else:
                self.engine.reset(self.graph, self.algorithm, self.start_vertex)
            self._runner = None
            return True

    def step(self) -> bool:
        """
        Take one step on the current engine.

        Returns:
            Whether the engine is complete afterwards.

        Raises:
            RuntimeError: If no run() has succeeded yet or an auto-run is
                active.
        """
        with self._exclusive():
            return self._require_engine().step()

    def reset_visualization(self) -> None:
        """Clear the MST progress, keeping graph and algorithm."""
        with self._exclusive():
            if self.engine is not None:
                self.engine.reset()

    def auto_run(
        self,
        on_step: Optional[Callable[[StepResult], None]] = None,
        max_steps: Optional[int] = None,
    ) -> int:
        """
        Step the engine every speed_ms milliseconds until complete.

        Blocks the calling thread. Call cancel_auto_run() from another
        thread to stop early.

        Returns:
            Number of steps taken.

        Raises:
            RuntimeError: If no run() has succeeded yet or another auto-run,
                step, run or reset is in progress.
        """
        with self._exclusive():
            engine = self._require_engine()
            runner = AutoRunner(engine, self.speed_ms, self.config)
            self._runner = runner
            return runner.run(on_step=on_step, max_steps=max_steps)

    def cancel_auto_run(self) -> None:
        if self._runner is not None:
            self._runner.cancel()

    @property
    def auto_running(self) -> bool:
        return self._runner is not None and self._runner.running

    def snapshot(self) -> Optional[EngineSnapshot]:
        """State to render, or None before the first successful run()."""
        return self.engine.snapshot() if self.engine is not None else None

    def _require_engine(self) -> MstEngine:
        if self.engine is None:
            raise RuntimeError("No graph loaded: run() a valid matrix first")
        return self.engine

    @contextmanager
    def _exclusive(self) -> Iterator[None]:
        if not self._lock.acquire(blocking=False):
            raise RuntimeError("Session is busy: cancel the auto-run before stepping or resetting")
        try:
            yield
        finally:
            self._lock.release()
