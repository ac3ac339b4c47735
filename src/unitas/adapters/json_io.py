# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
JSON matrix file I/O adapter.

Input documents look like {"matrix": [[...], ...], "rhs": [...]};
entries are numbers or [re, im] pairs. "rhs" is optional.
"""
import json
from typing import Any

from unitas.domain.matrix import DenseMatrix
from unitas.domain.serialization import matrix_from_payload, vector_from_payload
from unitas.domain.vector import Vector
from unitas.ports import DecompositionWriter, MatrixReader


class JsonMatrixReader(MatrixReader):
    """Reads a matrix (and optional right-hand side) from JSON files."""

    def read_matrix(self, path: str) -> tuple[DenseMatrix, Vector | None]:
        with open(path, encoding='utf-8') as f:
            doc = json.load(f)
        if not isinstance(doc, dict) or 'matrix' not in doc:
            raise ValueError(f"'matrix' key not found in {path}")
        matrix = matrix_from_payload(doc['matrix'])
        rhs = doc.get('rhs')
        return matrix, (vector_from_payload(rhs) if rhs is not None else None)


class JsonDecompositionWriter(DecompositionWriter):
    """Writes decomposition payloads to JSON files."""

    def write(self, payload: dict[str, Any], path: str) -> None:
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(payload, f, indent=2, ensure_ascii=False)
