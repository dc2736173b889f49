"""mststep - step through Kruskal's and Prim's minimum spanning tree algorithms."""

__version__ = "0.1.0"

from .config import VisualizerConfig, load_config
from .engine import Algorithm, AutoRunner, EngineSnapshot, MstEngine, MstResult
from .graphs import (
    DisjointSet,
    Edge,
    EmptyMatrixError,
    Graph,
    KruskalStepper,
    MalformedNumberError,
    MatrixParseError,
    Node,
    NotSquareError,
    NotSymmetricError,
    PrimStepper,
    RenderState,
    Stepper,
    StepResult,
    circular_layout,
    clamp_vertex,
    empty_matrix,
    format_matrix,
    is_integer_token,
    parse_matrix,
    random_matrix,
)
from .session import MstSession

__all__ = [
    # Version
    "__version__",
    # Graph model
    "Node",
    "Edge",
    "Graph",
    "circular_layout",
    # Parsing and generation
    "parse_matrix",
    "format_matrix",
    "empty_matrix",
    "random_matrix",
    "clamp_vertex",
    "is_integer_token",
    "MatrixParseError",
    "EmptyMatrixError",
    "MalformedNumberError",
    "NotSquareError",
    "NotSymmetricError",
    # Algorithms
    "DisjointSet",
    "Stepper",
    "StepResult",
    "RenderState",
    "KruskalStepper",
    "PrimStepper",
    # Engine
    "Algorithm",
    "MstEngine",
    "MstResult",
    "EngineSnapshot",
    "AutoRunner",
    # Session and configuration
    "MstSession",
    "VisualizerConfig",
    "load_config",
]
