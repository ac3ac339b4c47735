# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Complex scalar helpers.

Python's complex is the scalar type. These helpers add the fixed
rounding cutoff the engine relies on: snapping near-zero values to
exact zero, tolerance-based equality and a complex signum.
"""
import cmath
import math

import numpy as np

ROUNDING_CUTOFF = 1e-10

# Looser bound used when deciding whether an entry is structurally zero
TRIANGLE_TOLERANCE = 100 * ROUNDING_CUTOFF


def snap(z: complex, cutoff: float = ROUNDING_CUTOFF) -> complex:
    """Return 0j when both components of z are below the cutoff."""
    z = complex(z)
    if abs(z.real) < cutoff and abs(z.imag) < cutoff:
        return 0j
    return z


def snap_array(values, cutoff: float = ROUNDING_CUTOFF) -> np.ndarray:
    """Vectorized snap: returns a new complex128 array."""
    arr = np.array(values, dtype=np.complex128)
    mask = (np.abs(arr.real) < cutoff) & (np.abs(arr.imag) < cutoff)
    arr[mask] = 0j
    return arr


def signum(z: complex) -> complex:
    """
    Unit-modulus scalar at the argument of z.

    signum(0) is 1, so a Householder shift on a zero leading
    entry still moves away from the origin.
    """
    z = complex(z)
    if z == 0:
        return 1 + 0j
    return cmath.rect(1.0, cmath.phase(z))


def real_signum(x: float, cutoff: float = ROUNDING_CUTOFF) -> int:
    """Sign of a real number with a dead zone of width cutoff around zero."""
    if x < -cutoff:
        return -1
    if x > cutoff:
        return 1
    return 0


def scalars_close(a: complex, b: complex, tol: float = ROUNDING_CUTOFF) -> bool:
    """Componentwise equality within tol."""
    a = complex(a)
    b = complex(b)
    return abs(a.real - b.real) < tol and abs(a.imag - b.imag) < tol


def principal_sqrt(z: complex) -> complex:
    """Principal square root via the polar form."""
    z = complex(z)
    if z == 0:
        return 0j
    return cmath.rect(math.sqrt(abs(z)), cmath.phase(z) / 2.0)
