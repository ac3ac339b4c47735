# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
JSON-compatible serialization.

Pure conversions between domain objects and plain payloads. A scalar
is written as a bare number when its imaginary part is zero and as
[re, im] otherwise; both forms are accepted on input.
"""
from numbers import Real

from .eigen import EigenDecomposition
from .errors import DimensionMismatchError
from .hessenberg import HessenbergDecomposition
from .matrix import DenseMatrix
from .qr import QRDecomposition
from .svd import SingularValueDecomposition
from .vector import Vector


def encode_scalar(z: complex) -> float | list[float]:
    """
    Encode a complex scalar.

    Returns:
        float when Im z == 0, else [re, im].
    """
    z = complex(z)
    if z.imag == 0:
        return z.real
    return [z.real, z.imag]


def decode_scalar(value) -> complex:
    """
    Decode a number or a [re, im] pair.

    Raises:
        ValueError: If value is neither.
    """
    if isinstance(value, bool):
        raise ValueError(f"Not a scalar entry: {value!r}")
    if isinstance(value, Real):
        return complex(value)
    if isinstance(value, (list, tuple)) and len(value) == 2:
        re, im = value
        if isinstance(re, Real) and isinstance(im, Real):
            return complex(re, im)
    raise ValueError(f"Not a scalar entry: {value!r}")


def vector_to_payload(v: Vector) -> list:
    return [encode_scalar(z) for z in v]


def vector_from_payload(payload) -> Vector:
    if not isinstance(payload, list):
        raise ValueError("Vector payload must be a list of entries")
    return Vector([decode_scalar(z) for z in payload])


def matrix_to_payload(m: DenseMatrix) -> list[list]:
    """Row-major nested list of encoded entries."""
    return [[encode_scalar(z) for z in row] for row in m.to_list()]


def matrix_from_payload(payload) -> DenseMatrix:
    """
    Build a DenseMatrix from a row-major nested list.

    Raises:
        ValueError: If the payload is not a list of lists of entries.
        DimensionMismatchError: If rows are ragged or empty.
    """
    if not isinstance(payload, list) or not all(isinstance(row, list) for row in payload):
        raise ValueError("Matrix payload must be a list of rows")
    if not payload:
        raise DimensionMismatchError("Matrix payload has no rows")
    return DenseMatrix([[decode_scalar(z) for z in row] for row in payload])


def decomposition_to_payload(operation: str, result) -> dict:
    """
    Payload for the result of a named operation.

    Args:
        operation: Operation name recorded in the payload.
        result: A decomposition result object or a solution Vector.

    Returns:
        Dict with 'operation' and one key per factor.
    """
    payload: dict = {'operation': operation}
    if isinstance(result, QRDecomposition):
        payload['q'] = matrix_to_payload(result.q)
        payload['r'] = matrix_to_payload(result.r)
    elif isinstance(result, HessenbergDecomposition):
        payload['h'] = matrix_to_payload(result.h)
        payload['q'] = matrix_to_payload(result.q)
    elif isinstance(result, EigenDecomposition):
        payload['eigenvalues'] = [encode_scalar(z) for z in result.eigenvalues]
        payload['d'] = matrix_to_payload(result.d)
        payload['q'] = matrix_to_payload(result.q)
        payload['iterations'] = result.iterations
    elif isinstance(result, SingularValueDecomposition):
        payload['singular_values'] = list(result.singular_values)
        payload['rank'] = result.rank
        payload['u'] = matrix_to_payload(result.u)
        payload['s'] = matrix_to_payload(result.s)
        payload['v'] = matrix_to_payload(result.v)
    elif isinstance(result, Vector):
        payload['x'] = vector_to_payload(result)
    else:
        raise TypeError(f"Cannot serialize {type(result).__name__}")
    return payload
