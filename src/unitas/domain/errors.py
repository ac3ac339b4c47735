# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Error taxonomy for the decomposition engine.

Every error derives from numpy's LinAlgError, which is itself a
ValueError, so callers may catch at whichever level they need.
"""
import numpy as np


class LinalgError(np.linalg.LinAlgError):
    """Base class for all unitas linear-algebra failures."""


class DimensionMismatchError(LinalgError):
    """Operand shapes are incompatible with the requested operation."""


class DegenerateInputError(LinalgError):
    """Division by a scalar or norm below the rounding cutoff."""


class SingularMatrixError(DegenerateInputError):
    """Back-substitution hit a zero pivot (singular or rank-deficient system)."""


class NotHermitianError(LinalgError):
    """A Hermitian-only routine was given a non-Hermitian matrix."""


class DecompositionNotComputedError(LinalgError):
    """A cached factor was read before the decomposition ran."""


class ConvergenceError(LinalgError):
    """Shifted QR iteration did not deflate within the iteration cap."""
