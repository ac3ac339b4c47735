# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Tests for adapters/json_io.py: JSON matrix reader and result writer."""
import json

import pytest

from unitas.adapters.json_io import JsonDecompositionWriter, JsonMatrixReader
from unitas.ports import DecompositionWriter, MatrixReader


def _write(path, doc) -> str:
    path.write_text(json.dumps(doc), encoding="utf-8")
    return str(path)


class TestPorts:
    def test_adapters_satisfy_ports(self):
        assert isinstance(JsonMatrixReader(), MatrixReader)
        assert isinstance(JsonDecompositionWriter(), DecompositionWriter)


class TestJsonMatrixReader:
    def test_reads_matrix_and_rhs(self, tmp_path):
        path = _write(tmp_path / "in.json", {"matrix": [[1, [0, 1]], [2, 3]], "rhs": [1, 2]})
        matrix, rhs = JsonMatrixReader().read_matrix(path)
        assert matrix.shape == (2, 2)
        assert matrix[0, 1] == 1j
        assert rhs.to_list() == [1, 2]

    def test_rhs_optional(self, tmp_path):
        path = _write(tmp_path / "in.json", {"matrix": [[1]]})
        _, rhs = JsonMatrixReader().read_matrix(path)
        assert rhs is None

    def test_missing_matrix_key(self, tmp_path):
        path = _write(tmp_path / "in.json", {"rows": []})
        with pytest.raises(ValueError, match="matrix"):
            JsonMatrixReader().read_matrix(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            JsonMatrixReader().read_matrix(str(tmp_path / "absent.json"))


class TestJsonDecompositionWriter:
    def test_writes_indented_json(self, tmp_path):
        path = tmp_path / "out.json"
        JsonDecompositionWriter().write({"operation": "qr", "q": [[1.0]]}, str(path))
        text = path.read_text(encoding="utf-8")
        assert json.loads(text) == {"operation": "qr", "q": [[1.0]]}
        assert "\n  " in text
