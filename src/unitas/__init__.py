# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Unitas

Dense complex linear algebra built around a decomposition engine:
Householder QR factorization and least-squares solve, reduction to
upper-Hessenberg form, a recursive shifted-QR eigen solver for
Hermitian matrices and a singular value decomposition built on it.
Also includes direct and fast Fourier transforms and JSON file I/O.
"""

from unitas.domain.scalar import (
    ROUNDING_CUTOFF,
    TRIANGLE_TOLERANCE,
    snap,
    signum,
    scalars_close,
    principal_sqrt,
)
from unitas.domain.errors import (
    LinalgError,
    DimensionMismatchError,
    DegenerateInputError,
    SingularMatrixError,
    NotHermitianError,
    DecompositionNotComputedError,
    ConvergenceError,
)
from unitas.domain.config import SolverConfig, DEFAULT_CONFIG
from unitas.domain.vector import Vector
from unitas.domain.matrix import DenseMatrix, embed_block
from unitas.domain.householder import householder_reflector
from unitas.domain.qr import QRDecomposition, qr_decompose, solve
from unitas.domain.hessenberg import HessenbergDecomposition, hessenberg_reduce
from unitas.domain.eigen import (
    EigenDecomposition,
    qr_shift_eigs,
    power_method,
    hess_power_method,
    sort_permutation,
)
from unitas.domain.svd import SingularValueDecomposition, svd
from unitas.domain.spectral import (
    dft,
    idft,
    fft,
    ifft,
    fourier_matrix,
    pad_to_power_of_two,
)

__version__ = "1.0.0"

__all__ = [
    "ROUNDING_CUTOFF",
    "TRIANGLE_TOLERANCE",
    "snap",
    "signum",
    "scalars_close",
    "principal_sqrt",
    "LinalgError",
    "DimensionMismatchError",
    "DegenerateInputError",
    "SingularMatrixError",
    "NotHermitianError",
    "DecompositionNotComputedError",
    "ConvergenceError",
    "SolverConfig",
    "DEFAULT_CONFIG",
    "Vector",
    "DenseMatrix",
    "embed_block",
    "householder_reflector",
    "QRDecomposition",
    "qr_decompose",
    "solve",
    "HessenbergDecomposition",
    "hessenberg_reduce",
    "EigenDecomposition",
    "qr_shift_eigs",
    "power_method",
    "hess_power_method",
    "sort_permutation",
    "SingularValueDecomposition",
    "svd",
    "dft",
    "idft",
    "fft",
    "ifft",
    "fourier_matrix",
    "pad_to_power_of_two",
]
