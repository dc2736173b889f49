"""
Example: stepping through Kruskal and Prim

Parses an adjacency matrix, then prints every step of both algorithms:
the edge under consideration, whether it joined the tree, and the running
total. Finishes with a seeded random matrix driven by the session API.
"""

import numpy as np

from mststep import MstEngine, MstSession, parse_matrix

MATRIX = """
0 2 0 6 0
2 0 3 8 5
0 3 0 0 7
6 8 0 0 9
0 5 7 9 0
"""


def show_steps(algorithm, start_vertex=0):
    print("=" * 60)
    print(f"{algorithm.capitalize()} on a 5-node graph")
    print("=" * 60)

    engine = MstEngine(parse_matrix(MATRIX), algorithm, start_vertex)
    while not engine.is_complete():
        engine.step()
        result = engine.last_step
        verdict = "accepted" if result.accepted else "rejected"
        source, target, weight = result.edge.as_tuple()
        print(
            f"Step {result.step_index}: edge {source}-{target} (w={weight}) {verdict}, "
            f"total {engine.total_weight()}"
        )

    print(f"MST weight: {engine.total_weight()}")
    print()


def random_session():
    print("=" * 60)
    print("Session on a random 6x6 matrix")
    print("=" * 60)

    session = MstSession()
    session.set_matrix_size(6)
    session.generate_random(rng=np.random.default_rng(7))
    print(session.matrix_text)

    session.set_algorithm("prim")
    if not session.run():
        print(f"Error: {session.error}")
        return
    while not session.step():
        pass

    snapshot = session.snapshot()
    edges = ", ".join(f"{e.source}-{e.target}" for e in snapshot.mst_edges)
    print(f"MST edges: {edges}")
    print(f"MST weight: {snapshot.total_weight}")
    print()


if __name__ == "__main__":
    show_steps("kruskal")
    show_steps("prim", start_vertex=2)
    random_session()

    print("All examples completed successfully!")
