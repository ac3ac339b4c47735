# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Householder QR factorization and least-squares solve.

For an m×n matrix with m ≥ n, reflectors are built column by column
on the trailing rows, embedded into m×m with a leading identity block
and accumulated into Qᴴ; R = Qᴴ·A is upper triangular.
"""
from dataclasses import dataclass

import numpy as np

from .errors import DimensionMismatchError, SingularMatrixError
from .householder import annihilating_block
from .matrix import DenseMatrix, as_dense, embed_block
from .scalar import ROUNDING_CUTOFF
from .vector import Vector


@dataclass(frozen=True)
class QRDecomposition:
    """Result of QR factorization: A = Q·R, Q unitary (m×m), R upper triangular (m×n)."""
    q: DenseMatrix
    r: DenseMatrix


def qr_arrays(
    a: np.ndarray,
    cutoff: float = ROUNDING_CUTOFF,
) -> tuple[np.ndarray, np.ndarray]:
    """
    QR-factor a complex ndarray.

    Args:
        a: m×n array with m ≥ n.
        cutoff: Columns whose sub-diagonal part is below this need no reflector.

    Returns:
        (Q, R) ndarrays.

    Raises:
        DimensionMismatchError: If a has more columns than rows.
    """
    m, n = a.shape
    if n > m:
        raise DimensionMismatchError(
            f"QR needs rows >= columns, got {m}x{n}"
        )
    q_adj = np.eye(m, dtype=np.complex128)
    r = np.array(a, dtype=np.complex128)
    for k in range(min(n, m - 1)):
        block = annihilating_block(r[k:, k], cutoff)
        if block is None:
            continue
        reflector = embed_block(block, m, offset=k)
        r = reflector @ r
        q_adj = reflector @ q_adj
    return q_adj.conj().T, np.triu(r)


def qr_decompose(a) -> QRDecomposition:
    """
    Householder QR factorization.

    Pure: never touches the input's cache. DenseMatrix.orthogonalize()
    wraps this with write-once caching.

    Raises:
        DimensionMismatchError: If a has more columns than rows.
    """
    data = as_dense(a).to_array()
    q, r = qr_arrays(data)
    return QRDecomposition(q=DenseMatrix(q), r=DenseMatrix(r))


def solve(a, b) -> Vector:
    """
    Solve A·x = b by QR and back-substitution.

    Square nonsingular systems are solved exactly; overdetermined ones
    give the least-squares solution. Uses (and fills) the QR cache of a.

    Args:
        a: m×n DenseMatrix (or nested sequence), m ≥ n.
        b: Right-hand side of length m.

    Returns:
        Solution Vector of length n.

    Raises:
        DimensionMismatchError: If len(b) != m or m < n.
        SingularMatrixError: If R has a near-zero diagonal entry.
    """
    matrix = a if isinstance(a, DenseMatrix) else DenseMatrix(a)
    rhs = b if isinstance(b, Vector) else Vector(b)
    if len(rhs) != matrix.rows:
        raise DimensionMismatchError(
            f"Right-hand side length {len(rhs)} != row count {matrix.rows}"
        )
    factors = matrix.orthogonalize()
    y = factors.q.to_array().conj().T @ rhs.to_array()
    r = factors.r.to_array()

    n = matrix.cols
    x = np.zeros(n, dtype=np.complex128)
    for i in range(n - 1, -1, -1):
        pivot = r[i, i]
        if abs(pivot) < ROUNDING_CUTOFF:
            raise SingularMatrixError(
                f"Zero pivot at R[{i}, {i}]; system is singular or rank-deficient"
            )
        x[i] = (y[i] - r[i, i + 1:] @ x[i + 1:]) / pivot
    return Vector(x)
