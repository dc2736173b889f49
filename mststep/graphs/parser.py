"""
Adjacency-matrix text parsing and generation.

The text format is one row per line and whitespace-separated integers per
row. Blank lines are ignored. A value <= 0 means "no edge".
"""

from __future__ import annotations

import re
from typing import List, Optional, Sequence, Tuple

import numpy as np

from ..logging import get_logger
from .core import DEFAULT_CENTER, DEFAULT_RADIUS, Graph
from .errors import EmptyMatrixError, MalformedNumberError, NotSquareError, NotSymmetricError

logger = get_logger(__name__)

_INTEGER = re.compile(r"[+-]?[0-9]+")
_INT64 = np.iinfo(np.int64)


def is_integer_token(token: str) -> bool:
    """Return whether token is a plain base-10 integer such as "12" or "-3"."""
    return _INTEGER.fullmatch(token) is not None


def _tokenize(text: str) -> List[List[int]]:
    rows = []
    lines = [line for line in text.splitlines() if line.strip()]
    for row_index, line in enumerate(lines):
        row = []
        for column_index, token in enumerate(line.split()):
            if not is_integer_token(token):
                raise MalformedNumberError(token, row_index, column_index)
            value = int(token)
            if not _INT64.min <= value <= _INT64.max:
                raise MalformedNumberError(
                    token, row_index, column_index, "value does not fit in 64 bits"
                )
            row.append(value)
        rows.append(row)
    return rows


def parse_matrix(
    text: str,
    *,
    radius: float = DEFAULT_RADIUS,
    center: Tuple[float, float] = DEFAULT_CENTER,
) -> Graph:
    """
    Parse adjacency-matrix text into a Graph.

    Checks run in order: every token is an integer, the matrix is square,
    the matrix is symmetric. The first failing check raises.

    Args:
        text: Newline-separated rows of whitespace-separated integers.
        radius: Layout circle radius for the resulting nodes.
        center: Layout circle center for the resulting nodes.

    Returns:
        New Graph with n nodes on a circle and one edge per positive
        upper-triangle entry.

    Raises:
        EmptyMatrixError: If the text has no non-empty line.
        MalformedNumberError: If a token is not a base-10 integer or does
            not fit in 64 bits.
        NotSquareError: If a row's length differs from the row count.
        NotSymmetricError: If matrix[i][j] != matrix[j][i] for some i, j.

    Example:
        >>> graph = parse_matrix("0 1 4\\n1 0 2\\n4 2 0")
        >>> [e.as_tuple() for e in graph.edges]
        [(0, 1, 1), (0, 2, 4), (1, 2, 2)]
    """
    rows = _tokenize(text)
    n = len(rows)
    if n == 0:
        raise EmptyMatrixError()

    for row_index, row in enumerate(rows):
        if len(row) != n:
            raise NotSquareError(n, row_index, len(row))

    matrix = np.array(rows, dtype=np.int64)
    mismatches = np.argwhere(matrix != matrix.T)
    if mismatches.size:
        i, j = (int(k) for k in mismatches[0])
        raise NotSymmetricError(i, j, int(matrix[i, j]), int(matrix[j, i]))

    graph = Graph.from_matrix(matrix, radius=radius, center=center)
    logger.debug("Parsed %dx%d matrix with %d edges", n, n, len(graph.edges))
    return graph


def format_matrix(matrix: Sequence[Sequence[int]] | np.ndarray) -> str:
    """
    Render a matrix in the text format accepted by :func:`parse_matrix`.

    Example:
        >>> format_matrix([[0, 2], [2, 0]])
        '0 2\\n2 0'
    """
    return "\n".join(" ".join(str(int(value)) for value in row) for row in matrix)


def empty_matrix(size: int) -> np.ndarray:
    """Return a size x size matrix of zeros (a graph with no edges)."""
    if size < 1:
        raise ValueError(f"Matrix size must be positive, got {size}")
    return np.zeros((size, size), dtype=np.int64)


def random_matrix(
    size: int,
    edge_probability: float = 0.7,
    max_weight: int = 9,
    rng: Optional[np.random.Generator] = None,
) -> np.ndarray:
    """
    Generate a random symmetric adjacency matrix.

    Each pair i < j gets an edge with probability edge_probability, with a
    weight drawn uniformly from 1..max_weight. The diagonal stays 0.

    Args:
        size: Number of nodes.
        edge_probability: Chance that a pair is connected.
        max_weight: Largest weight drawn.
        rng: Random generator. A fresh unseeded one is used if None.

    Returns:
        Symmetric integer matrix of shape (size, size).
    """
    if size < 1:
        raise ValueError(f"Matrix size must be positive, got {size}")
    if not 0.0 <= edge_probability <= 1.0:
        raise ValueError(f"edge_probability must be in [0, 1], got {edge_probability}")
    if max_weight < 1:
        raise ValueError(f"max_weight must be at least 1, got {max_weight}")
    if rng is None:
        rng = np.random.default_rng()

    matrix = np.zeros((size, size), dtype=np.int64)
    for i in range(size):
        for j in range(i + 1, size):
            if rng.random() < edge_probability:
                weight = int(rng.integers(1, max_weight + 1))
                matrix[i, j] = weight
                matrix[j, i] = weight
    return matrix


def clamp_vertex(vertex: int, n: int) -> int:
    """Clamp a vertex id into [0, n-1]; returns 0 for an empty graph."""
    if n <= 0:
        return 0
    return max(0, min(vertex, n - 1))
