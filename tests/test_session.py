"""Tests for the headless visualizer session."""

import threading
import time

import numpy as np
import pytest

from mststep import Algorithm, Edge, MstSession, VisualizerConfig


@pytest.fixture
def session():
    return MstSession(VisualizerConfig())


class TestSessionInputs:
    """Tests for session inputs."""

    def test_defaults(self, session):
        """Test a fresh session."""
        assert session.matrix_size == 4
        assert session.matrix_text == "0 0 0 0\n0 0 0 0\n0 0 0 0\n0 0 0 0"
        assert session.algorithm is Algorithm.KRUSKAL
        assert session.start_vertex == 0
        assert session.speed_ms == 500
        assert session.error == ""
        assert session.snapshot() is None

    def test_set_matrix_size_regenerates_text(self, session):
        """Test that changing the size empties the matrix."""
        session.set_matrix_size(2)
        assert session.matrix_text == "0 0\n0 0"

    @pytest.mark.parametrize("size", [1, 11])
    def test_set_matrix_size_bounds(self, session, size):
        """Test the 2-10 size range."""
        with pytest.raises(ValueError):
            session.set_matrix_size(size)
        assert session.matrix_size == 4

    def test_generate_random(self, session):
        """Test that random text parses into a graph of the current size."""
        session.set_matrix_size(6)
        text = session.generate_random(rng=np.random.default_rng(1))
        assert text == session.matrix_text
        assert session.parse()
        assert session.graph.num_nodes == 6

    def test_set_speed(self, session):
        """Test speed validation."""
        session.set_speed(1200)
        assert session.speed_ms == 1200
        with pytest.raises(ValueError):
            session.set_speed(1250)
        assert session.speed_ms == 1200

    def test_set_algorithm(self, session):
        """Test algorithm selection by name."""
        session.set_algorithm("Prim")
        assert session.algorithm is Algorithm.PRIM
        with pytest.raises(ValueError):
            session.set_algorithm("dijkstra")

    def test_set_start_vertex_clamps_to_graph(self, session, triangle_text):
        """Test clamping against the parsed graph."""
        session.matrix_text = triangle_text
        session.parse()
        session.set_start_vertex(8)
        assert session.start_vertex == 2
        session.set_start_vertex(-3)
        assert session.start_vertex == 0


class TestSessionActions:
    """Tests for parse/run/step."""

    def test_parse_error_keeps_previous_graph(self, session, triangle_text):
        """Test that a failed parse is non-fatal."""
        session.matrix_text = triangle_text
        assert session.run()
        session.step()
        graph, engine = session.graph, session.engine

        session.matrix_text = "0 3\n4 0"
        assert session.parse() is False
        assert "symmetric" in session.error
        assert session.graph is graph
        assert session.engine is engine
        assert engine.current_step_index() == 0

    def test_successful_parse_clears_error(self, session, triangle_text):
        """Test that the error message is cleared."""
        session.matrix_text = "0 x\nx 0"
        assert not session.parse()
        assert session.error
        session.matrix_text = triangle_text
        assert session.parse()
        assert session.error == ""

    def test_run_failure_leaves_engine(self, session):
        """Test that run() on bad text does not create an engine."""
        session.matrix_text = "0 1\n0 1 2"
        assert session.run() is False
        assert "square" in session.error
        assert session.engine is None

    def test_run_rejects_oversized_number(self, session, triangle_text):
        """Test that an entry beyond 64 bits is a parse error, not a crash."""
        session.matrix_text = triangle_text
        assert session.run()
        session.step()
        graph, engine = session.graph, session.engine

        session.matrix_text = "0 99999999999999999999\n99999999999999999999 0"
        assert session.run() is False
        assert "64 bits" in session.error
        assert session.graph is graph
        assert session.engine is engine
        assert engine.current_step_index() == 0

    def test_parse_clamps_start_vertex(self, session, five_node_text, triangle_text):
        """Test that a smaller matrix clamps the remembered start vertex."""
        session.matrix_text = five_node_text
        session.parse()
        session.set_start_vertex(4)
        session.matrix_text = triangle_text
        session.parse()
        assert session.start_vertex == 2

    def test_step_through_prim(self, session, triangle_text):
        """Test the step-by-step flow."""
        session.matrix_text = triangle_text
        session.set_algorithm("prim")
        assert session.run()
        assert session.step() is False
        assert session.step() is True
        snapshot = session.snapshot()
        assert snapshot.mst_edges == (Edge(0, 1, 1), Edge(1, 2, 2))
        assert snapshot.total_weight == 3

    def test_run_restarts(self, session, triangle_text):
        """Test that run() after a switch restarts with the new algorithm."""
        session.matrix_text = triangle_text
        session.run()
        session.step()
        engine = session.engine
        session.set_algorithm("prim")
        session.run()
        assert session.engine is engine
        assert session.engine.algorithm is Algorithm.PRIM
        assert session.engine.mst_edges() == ()

    def test_reset_visualization(self, session, triangle_text):
        """Test that progress is cleared."""
        session.matrix_text = triangle_text
        session.run()
        session.step()
        session.reset_visualization()
        assert session.snapshot().mst_edges == ()
        assert session.snapshot().step_index == -1

    def test_step_without_graph(self, session):
        """Test that stepping before run() is refused."""
        with pytest.raises(RuntimeError):
            session.step()
        with pytest.raises(RuntimeError):
            session.auto_run()


class TestSessionAutoRun:
    """Tests for auto-run."""

    def test_auto_run(self, session, triangle_text):
        """Test that auto-run finishes the MST."""
        session.matrix_text = triangle_text
        session.set_speed(100)
        session.run()
        seen = []
        assert session.auto_run(on_step=seen.append) == 3
        assert session.snapshot().complete
        assert len(seen) == 3
        assert not session.auto_running

    def test_step_refused_during_auto_run(self, session, five_node_text):
        """Test the mutual exclusion between manual steps and auto-run."""
        session.matrix_text = five_node_text
        session.set_speed(100)
        session.run()
        errors = []

        def on_step(result):
            assert session.auto_running
            for action in (session.step, session.reset_visualization, session.run, session.auto_run):
                try:
                    action()
                except RuntimeError as exc:
                    errors.append(exc)
            session.cancel_auto_run()

        assert session.auto_run(on_step=on_step) == 1
        assert len(errors) == 4
        assert not session.auto_running
        # Manual stepping works again afterwards.
        session.step()
        assert session.engine.current_step_index() == 1

    def test_cancel_from_another_thread(self, session, five_node_text):
        """Test cancelling a slow auto-run from another thread."""
        session.matrix_text = five_node_text
        session.set_speed(2000)
        session.run()
        timer = threading.Timer(0.2, session.cancel_auto_run)
        timer.start()
        try:
            taken = session.auto_run()
        finally:
            timer.cancel()
        assert taken == 0
        assert not session.snapshot().complete

    def test_concurrent_auto_runs(self, session, five_node_text):
        """Test that of two auto-runs started together exactly one runs."""
        session.matrix_text = five_node_text
        session.set_speed(2000)
        session.run()
        barrier = threading.Barrier(2)
        results = []
        errors = []

        def start():
            barrier.wait()
            try:
                results.append(session.auto_run())
            except RuntimeError as exc:
                errors.append(exc)

        threads = [threading.Thread(target=start) for _ in range(2)]
        for thread in threads:
            thread.start()
        deadline = time.monotonic() + 5.0
        while not (errors and session.auto_running) and time.monotonic() < deadline:
            time.sleep(0.01)
        session.cancel_auto_run()
        for thread in threads:
            thread.join(timeout=5.0)

        assert results == [0]
        assert len(errors) == 1
        assert "busy" in str(errors[0])
        assert session.snapshot().step_index == -1

    def test_step_refused_while_other_thread_auto_runs(self, session, five_node_text):
        """Test that a manual step from another thread cannot interleave with auto-run."""
        session.matrix_text = five_node_text
        session.set_speed(2000)
        session.run()
        worker = threading.Thread(target=session.auto_run)
        worker.start()
        deadline = time.monotonic() + 5.0
        while not session.auto_running and time.monotonic() < deadline:
            time.sleep(0.01)
        try:
            with pytest.raises(RuntimeError):
                session.step()
            with pytest.raises(RuntimeError):
                session.reset_visualization()
        finally:
            session.cancel_auto_run()
            worker.join(timeout=5.0)
        assert session.snapshot().step_index == -1

    def test_cancel_without_runner(self, session):
        """Test that cancelling when idle is harmless."""
        session.cancel_auto_run()
        assert not session.auto_running
