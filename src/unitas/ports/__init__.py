# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Port interfaces for matrix file I/O.

Adapters implement these to handle different file formats.
"""
from typing import Any, Protocol, runtime_checkable

from unitas.domain.matrix import DenseMatrix
from unitas.domain.vector import Vector


@runtime_checkable
class MatrixReader(Protocol):
    """Port for reading a matrix and optional right-hand side."""

    def read_matrix(self, path: str) -> tuple[DenseMatrix, Vector | None]:
        """Read a matrix file; the right-hand side is None when absent."""
        ...


@runtime_checkable
class DecompositionWriter(Protocol):
    """Port for writing decomposition results."""

    def write(self, payload: dict[str, Any], path: str) -> None:
        """Write a result payload to the output file."""
        ...
