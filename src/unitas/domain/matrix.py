# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Dense complex matrix.

A single read-only complex128 array of shape (rows, cols) is the only
storage; column and row Vectors are built on demand. Every
transformation returns a new DenseMatrix. The one piece of mutable
state is the write-once QR cache filled by orthogonalize().

Range operations that take explicit bounds (minor, permutation) use
1-based inclusive indices; element access is 0-based.
"""
import logging
import threading
from numbers import Number

import numpy as np

from .errors import DecompositionNotComputedError, DimensionMismatchError
from .scalar import ROUNDING_CUTOFF, TRIANGLE_TOLERANCE, snap_array
from .vector import Vector

logger = logging.getLogger(__name__)


def embed_block(block: np.ndarray, size: int, offset: int) -> np.ndarray:
    """
    Identity of the given size with block placed on the diagonal at offset.

    offset = size - k gives an identity pad above/left (expand);
    offset = 0 gives an identity pad below/right (expand_bottom).
    """
    k = block.shape[0]
    if block.shape != (k, k) or offset < 0 or offset + k > size:
        raise DimensionMismatchError(
            f"Cannot embed a {block.shape} block at offset {offset} in size {size}"
        )
    out = np.eye(size, dtype=np.complex128)
    out[offset:offset + k, offset:offset + k] = block
    return out


def _as_array(values) -> np.ndarray:
    if isinstance(values, DenseMatrix):
        return values._data
    if not isinstance(values, np.ndarray):
        rows = [list(r) for r in values]
        if len({len(r) for r in rows}) > 1:
            raise DimensionMismatchError("Matrix rows must all have the same length")
        values = rows
    return np.asarray(values, dtype=np.complex128)


class DenseMatrix:
    """Rectangular matrix of complex scalars."""

    __slots__ = ("_data", "_qr", "_lock")

    def __init__(self, values) -> None:
        arr = _as_array(values)
        if arr.ndim != 2:
            raise DimensionMismatchError(
                f"Matrix needs two-dimensional input, got shape {arr.shape}"
            )
        if arr.size == 0:
            raise DimensionMismatchError("Matrix must have at least one row and column")
        data = snap_array(arr)
        data.setflags(write=False)
        self._data = data
        self._qr = None
        self._lock = threading.Lock()

    @classmethod
    def from_columns(cls, columns) -> "DenseMatrix":
        """Build a matrix whose columns are the given Vectors."""
        columns = list(columns)
        if not columns:
            raise DimensionMismatchError("Need at least one column")
        if len({len(c) for c in columns}) > 1:
            raise DimensionMismatchError("All columns must have the same length")
        return cls(np.column_stack([c.to_array() for c in columns]))

    @classmethod
    def identity(cls, n: int) -> "DenseMatrix":
        if n < 1:
            raise DimensionMismatchError(f"Identity size must be positive, got {n}")
        return cls(np.eye(n, dtype=np.complex128))

    @classmethod
    def zeros(cls, m: int, n: int) -> "DenseMatrix":
        if m < 1 or n < 1:
            raise DimensionMismatchError(f"Cannot build a {m}x{n} zero matrix")
        return cls(np.zeros((m, n), dtype=np.complex128))

    @classmethod
    def permutation(cls, row1: int, row2: int, n: int) -> "DenseMatrix":
        """
        Permutation swapping rows row1 and row2 (1-based) when it
        pre-multiplies, or the same columns when it post-multiplies.
        Sizes of two or less return the identity.
        """
        if n < 1 or not 1 <= row1 <= n or not 1 <= row2 <= n:
            raise DimensionMismatchError(
                f"Invalid permutation ({row1}, {row2}) for size {n}"
            )
        eye = np.eye(n, dtype=np.complex128)
        if n <= 2:
            return cls(eye)
        eye[[row1 - 1, row2 - 1]] = eye[[row2 - 1, row1 - 1]]
        return cls(eye)

    # ── Shape and access ───────────────────────────────────────────

    @property
    def shape(self) -> tuple[int, int]:
        return self._data.shape

    @property
    def rows(self) -> int:
        return self._data.shape[0]

    @property
    def cols(self) -> int:
        return self._data.shape[1]

    def __getitem__(self, index: tuple[int, int]) -> complex:
        return complex(self._data[index])

    def __repr__(self) -> str:
        return f"DenseMatrix(shape={self.shape})"

    def column(self, j: int) -> Vector:
        return Vector(self._data[:, j])

    def row(self, i: int) -> Vector:
        return Vector(self._data[i, :])

    def columns(self) -> tuple[Vector, ...]:
        return tuple(self.column(j) for j in range(self.cols))

    def diagonal(self) -> tuple[complex, ...]:
        return tuple(complex(z) for z in np.diagonal(self._data))

    def diag_moduli(self) -> tuple[float, ...]:
        return tuple(float(m) for m in np.abs(np.diagonal(self._data)))

    def to_array(self) -> np.ndarray:
        """Writable copy of the backing array."""
        return self._data.copy()

    def to_list(self) -> list[list[complex]]:
        return [[complex(z) for z in row] for row in self._data]

    def frobenius_norm(self) -> float:
        return float(np.linalg.norm(self._data))

    def allclose(self, other: "DenseMatrix", tol: float = 1e-9) -> bool:
        """Same shape and every entry within tol (modulus of the difference)."""
        other_data = _as_array(other)
        if other_data.shape != self.shape:
            return False
        return bool(np.max(np.abs(self._data - other_data)) < tol)

    # ── Arithmetic ─────────────────────────────────────────────────

    def _check_same_shape(self, other: "DenseMatrix") -> None:
        if other.shape != self.shape:
            raise DimensionMismatchError(
                f"Dimensions must match: {self.shape} vs {other.shape}"
            )

    def add(self, other: "DenseMatrix") -> "DenseMatrix":
        self._check_same_shape(other)
        return DenseMatrix(self._data + other._data)

    def subtract(self, other: "DenseMatrix") -> "DenseMatrix":
        self._check_same_shape(other)
        return DenseMatrix(self._data - other._data)

    def multiply(self, other):
        """Product with a DenseMatrix, a Vector or a scalar."""
        if isinstance(other, DenseMatrix):
            if self.cols != other.rows:
                raise DimensionMismatchError(
                    f"Inner dimensions must match: {self.shape} @ {other.shape}"
                )
            return DenseMatrix(self._data @ other._data)
        if isinstance(other, Vector):
            if self.cols != len(other):
                raise DimensionMismatchError(
                    f"Vector length {len(other)} does not match {self.cols} columns"
                )
            return Vector(self._data @ other.to_array())
        if isinstance(other, Number):
            return DenseMatrix(self._data * complex(other))
        raise TypeError(f"Cannot multiply DenseMatrix by {type(other).__name__}")

    def __add__(self, other):
        if not isinstance(other, DenseMatrix):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, DenseMatrix):
            return NotImplemented
        return self.subtract(other)

    def __matmul__(self, other):
        if not isinstance(other, (DenseMatrix, Vector)):
            return NotImplemented
        return self.multiply(other)

    def __mul__(self, coeff):
        if not isinstance(coeff, Number):
            return NotImplemented
        return self.multiply(coeff)

    __rmul__ = __mul__

    def __neg__(self) -> "DenseMatrix":
        return DenseMatrix(-self._data)

    def transpose(self) -> "DenseMatrix":
        return DenseMatrix(self._data.T)

    def conjugate(self) -> "DenseMatrix":
        return DenseMatrix(self._data.conj())

    def conjugate_transpose(self) -> "DenseMatrix":
        return DenseMatrix(self._data.conj().T)

    # ── Block operations ───────────────────────────────────────────

    def minor(self, begin_row: int, begin_col: int, end_row: int, end_col: int) -> "DenseMatrix":
        """Sub-block spanning the given rows and columns, 1-based inclusive."""
        if not (1 <= begin_row <= end_row <= self.rows and 1 <= begin_col <= end_col <= self.cols):
            raise DimensionMismatchError(
                f"Invalid minor rows {begin_row}..{end_row}, cols {begin_col}..{end_col} "
                f"of a {self.rows}x{self.cols} matrix"
            )
        return DenseMatrix(self._data[begin_row - 1:end_row, begin_col - 1:end_col])

    def append_right(self, other: "DenseMatrix") -> "DenseMatrix":
        """[self | other]; row counts must match."""
        if other.rows != self.rows:
            raise DimensionMismatchError(
                f"Row counts differ: {self.rows} vs {other.rows}"
            )
        return DenseMatrix(np.hstack([self._data, other._data]))

    def append_bottom(self, other: "DenseMatrix") -> "DenseMatrix":
        """[self ; other]; column counts must match."""
        if other.cols != self.cols:
            raise DimensionMismatchError(
                f"Column counts differ: {self.cols} vs {other.cols}"
            )
        return DenseMatrix(np.vstack([self._data, other._data]))

    def expand(self, count: int = 1) -> "DenseMatrix":
        """Pad a square matrix with count identity rows/columns above-left."""
        self._require_square("expand")
        size = self.rows + count
        return DenseMatrix(embed_block(self._data, size, offset=count))

    def expand_bottom(self, count: int = 1) -> "DenseMatrix":
        """Pad a square matrix with count identity rows/columns below-right."""
        self._require_square("expand_bottom")
        return DenseMatrix(embed_block(self._data, self.rows + count, offset=0))

    def _require_square(self, operation: str) -> None:
        if not self.is_square():
            raise DimensionMismatchError(
                f"{operation} needs a square matrix, got {self.rows}x{self.cols}"
            )

    # ── Structural predicates (pure) ───────────────────────────────

    def is_square(self) -> bool:
        return self.rows == self.cols

    def is_hermitian(self, tol: float = ROUNDING_CUTOFF) -> bool:
        if not self.is_square():
            return False
        diff = self._data - self._data.conj().T
        return bool(np.all(np.abs(diff.real) < tol) and np.all(np.abs(diff.imag) < tol))

    def is_upper_triangle(self, tol: float = TRIANGLE_TOLERANCE) -> bool:
        return bool(np.all(np.abs(np.tril(self._data, -1)) <= tol))

    def is_lower_triangle(self, tol: float = TRIANGLE_TOLERANCE) -> bool:
        return bool(np.all(np.abs(np.triu(self._data, 1)) <= tol))

    def is_diagonal(self, tol: float = TRIANGLE_TOLERANCE) -> bool:
        return self.is_upper_triangle(tol) and self.is_lower_triangle(tol)

    def is_hessenberg(self, tol: float = ROUNDING_CUTOFF) -> bool:
        """Zero (within tol) everywhere two or more places below the diagonal."""
        return bool(np.all(np.abs(np.tril(self._data, -2)) <= tol))

    def sanitized(self, tol: float = TRIANGLE_TOLERANCE) -> "DenseMatrix":
        """Copy with every entry of modulus at most tol set to exact zero."""
        data = self._data.copy()
        data[np.abs(data) <= tol] = 0j
        return DenseMatrix(data)

    # ── Decompositions ─────────────────────────────────────────────

    def orthogonalize(self):
        """
        QR-factor this matrix, caching the result on first call.

        Returns:
            The cached QRDecomposition; later calls return the same object.

        Raises:
            DimensionMismatchError: If the matrix has more columns than rows.
        """
        from .qr import qr_decompose

        with self._lock:
            if self._qr is None:
                self._qr = qr_decompose(self)
                logger.debug("Cached QR factorization for %dx%d matrix", self.rows, self.cols)
            return self._qr

    def get_qr(self):
        return self.orthogonalize()

    @property
    def q(self) -> "DenseMatrix":
        if self._qr is None:
            raise DecompositionNotComputedError(
                "Orthogonal factor not computed; call orthogonalize() first"
            )
        return self._qr.q

    @property
    def r(self) -> "DenseMatrix":
        if self._qr is None:
            raise DecompositionNotComputedError(
                "Triangular factor not computed; call orthogonalize() first"
            )
        return self._qr.r

    def solve(self, b: Vector) -> Vector:
        from .qr import solve
        return solve(self, b)

    def hess_transform(self):
        from .hessenberg import hessenberg_reduce
        return hessenberg_reduce(self)

    def qr_shift_eigs(self, config=None):
        from .eigen import qr_shift_eigs
        return qr_shift_eigs(self, config)

    def power_method(self, config=None):
        from .eigen import power_method
        return power_method(self, config)

    def hess_power_method(self, config=None):
        from .eigen import hess_power_method
        return hess_power_method(self, config)

    def svd(self, config=None):
        from .svd import svd
        return svd(self, config)


def as_dense(values) -> DenseMatrix:
    """Return values unchanged if already a DenseMatrix, else construct one."""
    if isinstance(values, DenseMatrix):
        return values
    return DenseMatrix(values)
