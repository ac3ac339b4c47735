# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Singular value decomposition via the Gram matrix.

For m ≤ n the Hermitian Gram matrix AᴴA is eigen-decomposed; the
singular values are the square roots of its eigenvalues and the left
singular vectors follow as uᵢ = A·vᵢ/σᵢ. Tall matrices are handled by
decomposing Aᴴ and swapping the factors.
"""
import logging
import math
from dataclasses import dataclass

import numpy as np

from .config import DEFAULT_CONFIG, SolverConfig
from .eigen import qr_shift_eigs
from .errors import DegenerateInputError
from .matrix import DenseMatrix, as_dense

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SingularValueDecomposition:
    """Thin SVD A ≈ U·S·Vᴴ truncated to the numerical rank."""
    u: DenseMatrix
    s: DenseMatrix
    v: DenseMatrix
    rank: int

    @property
    def singular_values(self) -> tuple[float, ...]:
        return tuple(z.real for z in self.s.diagonal())


def _numerical_rank(eigenvalues, cutoff: float) -> int:
    # Sorted by modulus, so the first value at or below the noise floor
    # ends the rank; roundoff can leave it slightly negative
    if not eigenvalues:
        return 0
    floor = cutoff * max(1.0, abs(eigenvalues[0]))
    for i, value in enumerate(eigenvalues):
        if value.real <= floor:
            return i
    return len(eigenvalues)


def svd(a, config: SolverConfig | None = None) -> SingularValueDecomposition:
    """
    Thin singular value decomposition.

    Args:
        a: m×n DenseMatrix (or nested sequence).
        config: Settings passed to the Gram-matrix eigen solve.

    Returns:
        SingularValueDecomposition with U (m×r), S (r×r, nonnegative,
        descending), V (n×r) and r the numerical rank: the count of Gram
        eigenvalues above rounding_cutoff·max(1, λ₀).

    Raises:
        DegenerateInputError: If the matrix has rank zero.
        ConvergenceError: If the eigen solve does not converge.
    """
    config = config or DEFAULT_CONFIG
    matrix = as_dense(a)
    if matrix.rows > matrix.cols:
        adjoint = svd(matrix.conjugate_transpose(), config)
        return SingularValueDecomposition(
            u=adjoint.v, s=adjoint.s, v=adjoint.u, rank=adjoint.rank,
        )

    data = matrix.to_array()
    gram = data.conj().T @ data
    gram = (gram + gram.conj().T) / 2.0
    eig = qr_shift_eigs(DenseMatrix(gram), config)

    eigenvalues = eig.eigenvalues
    rank = _numerical_rank(eigenvalues, config.rounding_cutoff)
    if rank == 0:
        raise DegenerateInputError(
            f"{matrix.rows}x{matrix.cols} matrix has rank zero; no singular vectors exist"
        )

    sigma = np.array([math.sqrt(max(z.real, 0.0)) for z in eigenvalues[:rank]])
    v = eig.q.to_array()[:, :rank]
    u = (data @ v) / sigma
    logger.debug("SVD of %dx%d matrix has numerical rank %d", matrix.rows, matrix.cols, rank)
    return SingularValueDecomposition(
        u=DenseMatrix(u),
        s=DenseMatrix(np.diag(sigma).astype(np.complex128)),
        v=DenseMatrix(v),
        rank=rank,
    )
