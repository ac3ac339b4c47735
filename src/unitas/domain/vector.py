# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Immutable complex vector.

Fixed-length sequence of complex scalars backed by a read-only numpy
array. Every operation returns a new Vector. Range operations that
take explicit bounds (isolate) use 1-based inclusive indices; plain
indexing is 0-based.
"""
import math
from numbers import Number

import numpy as np

from .errors import DegenerateInputError, DimensionMismatchError
from .scalar import ROUNDING_CUTOFF, scalars_close, snap_array


class Vector:
    """Column vector of complex scalars."""

    __slots__ = ("_data",)

    def __init__(self, values) -> None:
        data = snap_array(values)
        if data.ndim != 1:
            raise DimensionMismatchError(
                f"Vector needs one-dimensional input, got shape {data.shape}"
            )
        if data.size == 0:
            raise DimensionMismatchError("Vector must have at least one element")
        data.setflags(write=False)
        self._data = data

    @classmethod
    def basis(cls, n: int, k: int = 1) -> "Vector":
        """Standard basis vector e_k of length n (1-based k)."""
        if n < 1 or not 1 <= k <= n:
            raise DimensionMismatchError(f"Cannot build e_{k} of length {n}")
        data = np.zeros(n, dtype=np.complex128)
        data[k - 1] = 1.0
        return cls(data)

    @classmethod
    def zeros(cls, n: int) -> "Vector":
        if n < 1:
            raise DimensionMismatchError(f"n must be a natural number, got {n}")
        return cls(np.zeros(n, dtype=np.complex128))

    # ── Sequence protocol ──────────────────────────────────────────

    def __len__(self) -> int:
        return self._data.shape[0]

    def __getitem__(self, index):
        if isinstance(index, slice):
            return Vector(self._data[index])
        return complex(self._data[index])

    def __iter__(self):
        return (complex(z) for z in self._data)

    def __repr__(self) -> str:
        return f"Vector(length={len(self)})"

    def to_array(self) -> np.ndarray:
        """Writable copy of the backing array."""
        return self._data.copy()

    def to_list(self) -> list[complex]:
        return [complex(z) for z in self._data]

    # ── Arithmetic ─────────────────────────────────────────────────

    def _check_length(self, other: "Vector") -> None:
        if len(other) != len(self):
            raise DimensionMismatchError(
                f"Vector lengths differ: {len(self)} vs {len(other)}"
            )

    def add(self, other: "Vector") -> "Vector":
        self._check_length(other)
        return Vector(self._data + other._data)

    def subtract(self, other: "Vector") -> "Vector":
        self._check_length(other)
        return Vector(self._data - other._data)

    def multiply(self, coeff: complex) -> "Vector":
        return Vector(self._data * complex(coeff))

    def divide(self, coeff: complex) -> "Vector":
        coeff = complex(coeff)
        if abs(coeff) < ROUNDING_CUTOFF:
            raise DegenerateInputError(f"Cannot divide a vector by {coeff}")
        return Vector(self._data / coeff)

    def __add__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, coeff):
        if not isinstance(coeff, Number):
            return NotImplemented
        return self.multiply(coeff)

    __rmul__ = __mul__

    def __truediv__(self, coeff):
        if not isinstance(coeff, Number):
            return NotImplemented
        return self.divide(coeff)

    def __neg__(self) -> "Vector":
        return Vector(-self._data)

    def conjugate(self) -> "Vector":
        return Vector(self._data.conj())

    # ── Norms and products ─────────────────────────────────────────

    def norm(self) -> float:
        """Euclidean norm."""
        return math.sqrt(float(np.sum(np.abs(self._data) ** 2)))

    def normalize(self) -> "Vector":
        """Unit vector in the same direction; degenerate for a zero vector."""
        return self.divide(self.norm())

    def inner(self, other: "Vector") -> complex:
        """Inner product, conjugate-linear in self: sum(conj(self_i) * other_i)."""
        self._check_length(other)
        return complex(np.vdot(self._data, other._data))

    def outer(self, other: "Vector"):
        """Outer product self · otherᴴ as a DenseMatrix."""
        from .matrix import DenseMatrix
        return DenseMatrix(np.outer(self._data, other._data.conj()))

    def isclose(self, other: "Vector", tol: float = ROUNDING_CUTOFF) -> bool:
        if len(other) != len(self):
            return False
        return all(scalars_close(a, b, tol) for a, b in zip(self, other))

    # ── Structural edits ───────────────────────────────────────────

    def isolate(self, a: int, b: int) -> "Vector":
        """Elements a through b inclusive, 1-based."""
        if b < a or a < 1 or b > len(self):
            raise DimensionMismatchError(
                f"Invalid range [{a}, {b}] for vector of length {len(self)}"
            )
        return Vector(self._data[a - 1:b])

    def remove_first(self) -> "Vector":
        if len(self) == 1:
            raise DimensionMismatchError("Cannot remove the only element of a vector")
        return Vector(self._data[1:])

    def append(self, other: "Vector") -> "Vector":
        return Vector(np.concatenate([self._data, other._data]))

    def reverse(self) -> "Vector":
        return Vector(self._data[::-1])

    def expand(self) -> "Vector":
        """Shift every element down one place, new first element zero."""
        return Vector(np.concatenate([[0j], self._data]))

    def expand_bottom(self) -> "Vector":
        """Same elements with a zero appended."""
        return Vector(np.concatenate([self._data, [0j]]))
