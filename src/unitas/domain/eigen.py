# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Shifted-QR eigen solver for Hermitian matrices.

The matrix is reduced to Hessenberg form, then each deflation level
runs shifted QR sweeps until the off-diagonal part of its last row
vanishes. The converged eigenvalue is split off and the leading block
is solved recursively; the child's unitary factor is embedded with an
identity pad below-right and composed with the parent's.

A·Q ≈ Q·D with D diagonal, entries sorted by descending modulus.
"""
import cmath
import logging
from dataclasses import dataclass

import numpy as np

from .config import DEFAULT_CONFIG, SolverConfig
from .errors import ConvergenceError, DimensionMismatchError, NotHermitianError
from .hessenberg import hessenberg_arrays
from .matrix import DenseMatrix, as_dense, embed_block
from .qr import qr_arrays

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EigenDecomposition:
    """Result of an eigen solve: A·Q ≈ Q·D."""
    d: DenseMatrix
    q: DenseMatrix
    iterations: int

    @property
    def eigenvalues(self) -> tuple[complex, ...]:
        """Diagonal of D, descending by modulus."""
        return self.d.diagonal()


def _wilkinson_shift(h: np.ndarray) -> complex:
    """Eigenvalue of the trailing 2×2 block closest to its bottom-right entry."""
    a, b = h[-2, -2], h[-2, -1]
    c, d = h[-1, -2], h[-1, -1]
    delta = (a - d) / 2.0
    root = cmath.sqrt(delta * delta + b * c)
    plus = delta + root
    minus = delta - root
    denom = plus if abs(plus) >= abs(minus) else minus
    if denom == 0:
        return complex(d)
    return complex(d - b * c / denom)


def _shift(h: np.ndarray, strategy: str) -> complex:
    if strategy == "rayleigh" or h.shape[0] < 2:
        return complex(h[-1, -1])
    return _wilkinson_shift(h)


def _last_row_residual(h: np.ndarray) -> float:
    return float(np.linalg.norm(h[-1, :-1]))


def _deflate(h: np.ndarray, config: SolverConfig) -> tuple[np.ndarray, np.ndarray, int]:
    """
    Triangularize h by recursive deflation.

    Returns:
        (D, Q, iterations) with Qᴴ·h·Q = D.
    """
    n = h.shape[0]
    if n == 1:
        return h.copy(), np.eye(1, dtype=np.complex128), 0

    cutoff = config.rounding_cutoff
    strategy = config.shift
    eye = np.eye(n, dtype=np.complex128)
    h = h.copy()
    q = eye.copy()
    iterations = 0
    residual = _last_row_residual(h)

    while residual > cutoff:
        if iterations >= config.max_iterations:
            raise ConvergenceError(
                f"No deflation of a {n}x{n} block after {iterations} iterations "
                f"(residual {residual:.3e})"
            )
        mu = _shift(h, strategy)
        q_k, r_k = qr_arrays(h - mu * eye, cutoff)
        h = r_k @ q_k + mu * eye
        q = q @ q_k
        iterations += 1

        shrunk = _last_row_residual(h)
        # Growth is not a stall: shifted steps need not shrink this entry monotonically
        if abs(residual - shrunk) <= cutoff:
            if strategy == "rayleigh":
                logger.debug("Rayleigh shift stalled at size %d; switching to Wilkinson", n)
                strategy = "wilkinson"
            else:
                logger.debug(
                    "Stagnation at size %d (residual %.3e); forcing deflation", n, shrunk
                )
                break
        residual = shrunk

    h[-1, :-1] = 0j
    sub_d, sub_q, sub_iterations = _deflate(h[:-1, :-1], config)

    d = np.zeros((n, n), dtype=np.complex128)
    d[:-1, :-1] = sub_d
    d[:-1, -1] = sub_q.conj().T @ h[:-1, -1]
    d[-1, -1] = h[-1, -1]
    q = q @ embed_block(sub_q, n, offset=0)
    return d, q, iterations + sub_iterations


def _sort_order(d: np.ndarray) -> list[int]:
    moduli = np.abs(np.diagonal(d))
    # sorted() is stable, so equal moduli keep their original order
    return sorted(range(d.shape[0]), key=lambda i: -moduli[i])


def _permutation_array(order: list[int]) -> np.ndarray:
    n = len(order)
    p = np.zeros((n, n), dtype=np.complex128)
    for j, i in enumerate(order):
        p[i, j] = 1.0
    return p


def sort_permutation(d) -> DenseMatrix:
    """
    Permutation P such that Pᵀ·D·P has its diagonal sorted by
    descending modulus (ties keep their original order).
    """
    data = as_dense(d).to_array()
    return DenseMatrix(_permutation_array(_sort_order(data)))


def _require_hermitian(matrix: DenseMatrix, tol: float) -> None:
    if not matrix.is_square():
        raise DimensionMismatchError(
            f"Eigen solve needs a square matrix, got {matrix.rows}x{matrix.cols}"
        )
    if not matrix.is_hermitian(tol):
        raise NotHermitianError(
            f"{matrix.rows}x{matrix.cols} matrix is not Hermitian within {tol:.1e}"
        )


def _solve(h: np.ndarray, q0: np.ndarray, config: SolverConfig) -> EigenDecomposition:
    d, q, iterations = _deflate(h, config)
    p = _permutation_array(_sort_order(d))
    logger.debug("Eigen solve of size %d converged after %d iterations", h.shape[0], iterations)
    return EigenDecomposition(
        d=DenseMatrix(p.T @ d @ p),
        q=DenseMatrix(q0 @ q @ p),
        iterations=iterations,
    )


def qr_shift_eigs(a, config: SolverConfig | None = None) -> EigenDecomposition:
    """
    Eigen-decompose a Hermitian matrix by Hessenberg reduction and
    shifted QR with deflation.

    Args:
        a: Square Hermitian DenseMatrix (or nested sequence).
        config: Solver settings; DEFAULT_CONFIG when None.

    Returns:
        EigenDecomposition with D diagonal (real for Hermitian input)
        and Q unitary.

    Raises:
        DimensionMismatchError: If a is not square.
        NotHermitianError: If config.require_hermitian and a is not Hermitian.
        ConvergenceError: If a deflation level exceeds config.max_iterations.
    """
    config = config or DEFAULT_CONFIG
    matrix = as_dense(a)
    if config.require_hermitian:
        _require_hermitian(matrix, config.hermitian_tolerance)
    elif not matrix.is_square():
        raise DimensionMismatchError(
            f"Eigen solve needs a square matrix, got {matrix.rows}x{matrix.cols}"
        )
    h, q0 = hessenberg_arrays(matrix.to_array(), config.rounding_cutoff)
    return _solve(h, q0, config)


def power_method(a, config: SolverConfig | None = None) -> EigenDecomposition:
    """Shifted QR deflation applied directly to the (Hermitian) input."""
    config = config or DEFAULT_CONFIG
    matrix = as_dense(a)
    _require_hermitian(matrix, config.hermitian_tolerance)
    data = matrix.to_array()
    return _solve(data, np.eye(matrix.rows, dtype=np.complex128), config)


def hess_power_method(a, config: SolverConfig | None = None) -> EigenDecomposition:
    """Shifted QR deflation after Hessenberg reduction of the (Hermitian) input."""
    config = config or DEFAULT_CONFIG
    matrix = as_dense(a)
    _require_hermitian(matrix, config.hermitian_tolerance)
    h, q0 = hessenberg_arrays(matrix.to_array(), config.rounding_cutoff)
    return _solve(h, q0, config)
