"""
Graph model and stepwise MST algorithms.

This package provides:
- Graph data structures (Node, Edge, Graph)
- Adjacency-matrix text parsing, formatting and generation
- Disjoint-set union-find
- Stepwise Kruskal and Prim steppers sharing the Stepper interface
"""

from .core import Edge, Graph, Node, circular_layout, undirected_edges
from .disjoint_set import DisjointSet
from .errors import (
    EmptyMatrixError,
    MalformedNumberError,
    MatrixParseError,
    NotSquareError,
    NotSymmetricError,
)
from .kruskal import KruskalStepper
from .parser import (
    clamp_vertex,
    empty_matrix,
    format_matrix,
    is_integer_token,
    parse_matrix,
    random_matrix,
)
from .prim import PrimStepper
from .stepper import RenderState, Stepper, StepResult

__all__ = [
    "Node",
    "Edge",
    "Graph",
    "circular_layout",
    "undirected_edges",
    "DisjointSet",
    "MatrixParseError",
    "EmptyMatrixError",
    "MalformedNumberError",
    "NotSquareError",
    "NotSymmetricError",
    "parse_matrix",
    "format_matrix",
    "empty_matrix",
    "random_matrix",
    "clamp_vertex",
    "is_integer_token",
    "Stepper",
    "StepResult",
    "RenderState",
    "KruskalStepper",
    "PrimStepper",
]

# Example usage:
# from mststep.graphs import KruskalStepper, parse_matrix
#
# graph = parse_matrix("0 1 4\n1 0 2\n4 2 0")
# stepper = KruskalStepper(graph)
# while not stepper.is_complete():
#     print(stepper.step())
