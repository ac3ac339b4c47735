# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Solver configuration.

Immutable knobs for the shifted-QR eigen solver and the routines
built on it.
"""
from dataclasses import dataclass

from .scalar import ROUNDING_CUTOFF

SHIFT_STRATEGIES = ("wilkinson", "rayleigh")


@dataclass(frozen=True)
class SolverConfig:
    """Immutable configuration for eigen/SVD solves."""
    rounding_cutoff: float = ROUNDING_CUTOFF
    max_iterations: int = 1000          # Per deflation level
    shift: str = "wilkinson"
    require_hermitian: bool = True
    hermitian_tolerance: float = ROUNDING_CUTOFF

    def __post_init__(self) -> None:
        if self.rounding_cutoff <= 0:
            raise ValueError(f"rounding_cutoff must be positive, got {self.rounding_cutoff}")
        if self.max_iterations < 1:
            raise ValueError(f"max_iterations must be at least 1, got {self.max_iterations}")
        if self.shift not in SHIFT_STRATEGIES:
            raise ValueError(
                f"shift must be one of {SHIFT_STRATEGIES}, got {self.shift!r}"
            )
        if self.hermitian_tolerance <= 0:
            raise ValueError(
                f"hermitian_tolerance must be positive, got {self.hermitian_tolerance}"
            )


DEFAULT_CONFIG = SolverConfig()
