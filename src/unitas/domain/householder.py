# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Householder reflectors.

H = I − 2·v·vᴴ with v = (x + signum(x₀)·‖x‖·e₁) / ‖·‖ maps x onto a
multiple of e₁. The shift takes the sign of x₀ so the two terms of
v₀ never cancel.
"""
import numpy as np

from .errors import DegenerateInputError
from .matrix import DenseMatrix
from .scalar import ROUNDING_CUTOFF, signum
from .vector import Vector


def reflector_array(x: np.ndarray, cutoff: float = ROUNDING_CUTOFF) -> np.ndarray:
    """
    Reflector for a 1-D complex array.

    Args:
        x: Column to reflect onto e₁.
        cutoff: Norms below this are treated as zero.

    Returns:
        n×n unitary, Hermitian ndarray H with H·x = −signum(x₀)·‖x‖·e₁.

    Raises:
        DegenerateInputError: If x (and hence v) is numerically zero.
    """
    x = np.asarray(x, dtype=np.complex128)
    norm_x = float(np.linalg.norm(x))
    if norm_x < cutoff:
        raise DegenerateInputError(
            f"Householder reflector undefined for a zero vector (norm {norm_x:.3e})"
        )
    v = x.copy()
    v[0] += signum(x[0]) * norm_x
    norm_v = float(np.linalg.norm(v))
    if norm_v < cutoff:
        raise DegenerateInputError(
            f"Householder direction vanished (norm {norm_v:.3e})"
        )
    v /= norm_v
    return np.eye(x.shape[0], dtype=np.complex128) - 2.0 * np.outer(v, v.conj())


def householder_reflector(x) -> DenseMatrix:
    """Reflector for a Vector (or 1-D array-like) as a DenseMatrix."""
    if isinstance(x, Vector):
        x = x.to_array()
    return DenseMatrix(reflector_array(np.asarray(x, dtype=np.complex128)))


def annihilating_block(x: np.ndarray, cutoff: float = ROUNDING_CUTOFF) -> np.ndarray | None:
    """
    Reflector that zeroes x[1:], or None when x[1:] is already zero.

    Reduction loops use this so columns that need no work never reach
    the degenerate path.
    """
    if x.shape[0] < 2 or float(np.linalg.norm(x[1:])) < cutoff:
        return None
    return reflector_array(x, cutoff)
