# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Discrete Fourier transforms.

Direct O(N²) DFT, Cooley–Tukey FFT (radix-2 for powers of two, mixed
radix on the smallest prime factor otherwise, direct DFT for prime
lengths) and the Fourier matrix. Forward transforms use ω = e^{−2πi/N};
inverse transforms divide by N.
"""
import math

import numpy as np

from .errors import DimensionMismatchError
from .matrix import DenseMatrix
from .vector import Vector


def _as_signal(x) -> np.ndarray:
    data = x.to_array() if isinstance(x, Vector) else np.asarray(x, dtype=np.complex128)
    if data.ndim != 1 or data.shape[0] == 0:
        raise DimensionMismatchError(
            f"Transform needs a non-empty one-dimensional signal, got shape {data.shape}"
        )
    return data


def _smallest_prime_factor(n: int) -> int:
    if n % 2 == 0:
        return 2
    for p in range(3, math.isqrt(n) + 1, 2):
        if n % p == 0:
            return p
    return n


def _direct(x: np.ndarray, sign: int) -> np.ndarray:
    n = x.shape[0]
    k = np.arange(n)
    kernel = np.exp(sign * 2j * np.pi * np.outer(k, k) / n)
    return kernel @ x


def _cooley_tukey(x: np.ndarray, sign: int) -> np.ndarray:
    n = x.shape[0]
    if n == 1:
        return x.copy()
    radix = _smallest_prime_factor(n)
    if radix == n:
        return _direct(x, sign)
    m = n // radix
    if radix == 2:
        even = _cooley_tukey(x[0::2], sign)
        odd = _cooley_tukey(x[1::2], sign)
        twiddled = np.exp(sign * 2j * np.pi * np.arange(m) / n) * odd
        return np.concatenate([even + twiddled, even - twiddled])

    k = np.arange(n)
    out = np.zeros(n, dtype=np.complex128)
    for r in range(radix):
        sub = _cooley_tukey(x[r::radix], sign)
        out += np.exp(sign * 2j * np.pi * r * k / n) * sub[k % m]
    return out


def dft(x) -> Vector:
    """Direct discrete Fourier transform."""
    return Vector(_direct(_as_signal(x), -1))


def idft(x) -> Vector:
    """Direct inverse transform, scaled by 1/N."""
    data = _as_signal(x)
    return Vector(_direct(data, 1) / data.shape[0])


def fft(x) -> Vector:
    """
    Fast Fourier transform of any length.

    Raises:
        DimensionMismatchError: If x is empty or not one-dimensional.
    """
    return Vector(_cooley_tukey(_as_signal(x), -1))


def ifft(x) -> Vector:
    """Inverse fast Fourier transform, scaled by 1/N."""
    data = _as_signal(x)
    return Vector(_cooley_tukey(data, 1) / data.shape[0])


def fourier_matrix(n: int) -> DenseMatrix:
    """n×n matrix F with F[j, k] = ω^{jk}, ω = e^{−2πi/n}."""
    if n < 1:
        raise DimensionMismatchError(f"Fourier matrix size must be positive, got {n}")
    k = np.arange(n)
    return DenseMatrix(np.exp(-2j * np.pi * np.outer(k, k) / n))


def pad_to_power_of_two(x) -> Vector:
    """Zero-pad the front of x up to the next power-of-two length."""
    data = _as_signal(x)
    n = data.shape[0]
    target = 1 << (n - 1).bit_length()
    if target == n:
        return Vector(data)
    return Vector(np.concatenate([np.zeros(target - n, dtype=np.complex128), data]))
