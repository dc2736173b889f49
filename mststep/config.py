"""Configuration for the stepwise MST visualizer.

Defaults can be overridden through the environment:

- ``MSTSTEP_DEFAULT_SPEED_MS``: initial auto-run interval in milliseconds.
- ``MSTSTEP_DEFAULT_MATRIX_SIZE``: initial adjacency matrix size.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional, Tuple

from .graphs.parser import is_integer_token

_SPEED_ENV_VAR = "MSTSTEP_DEFAULT_SPEED_MS"
_SIZE_ENV_VAR = "MSTSTEP_DEFAULT_MATRIX_SIZE"


@dataclass(frozen=True)
class VisualizerConfig:
    """
    Bounds and defaults shared by the session and the auto-runner.

    Args:
        min_matrix_size: Smallest matrix size a user may request.
        max_matrix_size: Largest matrix size a user may request.
        default_matrix_size: Matrix size of a fresh session.
        min_speed_ms: Fastest auto-run interval.
        max_speed_ms: Slowest auto-run interval.
        speed_step_ms: Auto-run intervals must be multiples of this value.
        default_speed_ms: Auto-run interval of a fresh session.
        layout_radius: Radius of the circle nodes are placed on.
        layout_center: Center of that circle.
    """

    min_matrix_size: int = 2
    max_matrix_size: int = 10
    default_matrix_size: int = 4
    min_speed_ms: int = 100
    max_speed_ms: int = 2000
    speed_step_ms: int = 100
    default_speed_ms: int = 500
    layout_radius: float = 150.0
    layout_center: Tuple[float, float] = (250.0, 250.0)

    def __post_init__(self) -> None:
        if not 1 <= self.min_matrix_size <= self.max_matrix_size:
            raise ValueError(
                f"Invalid matrix size bounds ({self.min_matrix_size}, {self.max_matrix_size})."
            )
        if self.speed_step_ms <= 0 or not 0 < self.min_speed_ms <= self.max_speed_ms:
            raise ValueError(
                f"Invalid speed bounds ({self.min_speed_ms}, {self.max_speed_ms}) "
                f"with step {self.speed_step_ms}."
            )
        self.validate_matrix_size(self.default_matrix_size)
        self.validate_speed(self.default_speed_ms)

    def validate_matrix_size(self, size: int) -> int:
        """
        Check that a requested matrix size is within bounds.

        Raises:
            ValueError: If size is outside [min_matrix_size, max_matrix_size].
        """
        if not self.min_matrix_size <= size <= self.max_matrix_size:
            raise ValueError(
                f"Matrix size must be between {self.min_matrix_size} and "
                f"{self.max_matrix_size}, got {size}."
            )
        return size

    def validate_speed(self, speed_ms: int) -> int:
        """
        Check that an auto-run interval is within bounds and on the step grid.

        Raises:
            ValueError: If speed_ms is out of range or not a multiple of
                speed_step_ms.
        """
        if not self.min_speed_ms <= speed_ms <= self.max_speed_ms:
            raise ValueError(
                f"Auto-run speed must be between {self.min_speed_ms} and "
                f"{self.max_speed_ms} ms, got {speed_ms}."
            )
        if speed_ms % self.speed_step_ms != 0:
            raise ValueError(
                f"Auto-run speed must be a multiple of {self.speed_step_ms} ms, got {speed_ms}."
            )
        return speed_ms


def _read_int(environ: Mapping[str, str], name: str) -> Optional[int]:
    raw = environ.get(name)
    if raw is None or not raw.strip():
        return None
    if not is_integer_token(raw.strip()):
        raise ValueError(f"{name} must be an integer, got {raw!r}.")
    return int(raw)


def load_config(environ: Optional[Mapping[str, str]] = None) -> VisualizerConfig:
    """
    Build a VisualizerConfig, applying environment overrides.

    Args:
        environ: Mapping to read overrides from. Defaults to os.environ.

    Returns:
        Validated configuration.

    Raises:
        ValueError: If an override is not an integer or is out of bounds.
    """
    if environ is None:
        environ = os.environ

    config = VisualizerConfig()
    overrides = {}

    speed = _read_int(environ, _SPEED_ENV_VAR)
    if speed is not None:
        overrides["default_speed_ms"] = speed

    size = _read_int(environ, _SIZE_ENV_VAR)
    if size is not None:
        overrides["default_matrix_size"] = size

    if overrides:
        # replace() re-runs __post_init__ validation
        config = replace(config, **overrides)
    return config
