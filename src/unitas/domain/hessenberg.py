# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Similarity reduction to upper-Hessenberg form.

H = Qᴴ·A·Q with H zero below its first subdiagonal. Each QR sweep on
a Hessenberg matrix keeps the form, which is what makes the shifted
QR eigen solver cheap per iteration.
"""
from dataclasses import dataclass

import numpy as np

from .errors import DimensionMismatchError
from .householder import annihilating_block
from .matrix import DenseMatrix, as_dense, embed_block
from .scalar import ROUNDING_CUTOFF


@dataclass(frozen=True)
class HessenbergDecomposition:
    """Result of Hessenberg reduction: H = Qᴴ·A·Q."""
    h: DenseMatrix
    q: DenseMatrix


def hessenberg_arrays(
    a: np.ndarray,
    cutoff: float = ROUNDING_CUTOFF,
) -> tuple[np.ndarray, np.ndarray]:
    """Reduce a square complex ndarray; returns (H, Q)."""
    m, n = a.shape
    if m != n:
        raise DimensionMismatchError(f"Hessenberg reduction needs a square matrix, got {m}x{n}")
    h = np.array(a, dtype=np.complex128)
    q = np.eye(n, dtype=np.complex128)
    for k in range(n - 2):
        block = annihilating_block(h[k + 1:, k], cutoff)
        if block is None:
            continue
        # Reflectors are Hermitian, so P is its own inverse
        reflector = embed_block(block, n, offset=k + 1)
        h = reflector @ h @ reflector
        q = q @ reflector
    return np.triu(h, -1), q


def hessenberg_reduce(a) -> HessenbergDecomposition:
    """
    Reduce a square matrix to upper-Hessenberg form.

    Args:
        a: Square DenseMatrix (or nested sequence).

    Returns:
        HessenbergDecomposition with H upper Hessenberg and Q unitary.

    Raises:
        DimensionMismatchError: If a is not square.
    """
    data = as_dense(a).to_array()
    h, q = hessenberg_arrays(data)
    return HessenbergDecomposition(h=DenseMatrix(h), q=DenseMatrix(q))
