# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Tests for cli.py: argument handling, dispatch and exit codes."""
import json
import sys

import pytest

from unitas.cli import main, run


def _input(tmp_path, doc) -> str:
    path = tmp_path / "in.json"
    path.write_text(json.dumps(doc), encoding="utf-8")
    return str(path)


class TestRun:
    def test_qr_writes_factors(self, tmp_path):
        output = tmp_path / "out.json"
        run(_input(tmp_path, {"matrix": [[1, 2], [3, 4], [5, 6]]}), str(output), "qr")
        payload = json.loads(output.read_text(encoding="utf-8"))
        assert payload["operation"] == "qr"
        assert len(payload["q"]) == 3
        assert len(payload["r"][0]) == 2

    def test_solve_uses_rhs(self, tmp_path):
        output = tmp_path / "out.json"
        payload = run(
            _input(tmp_path, {"matrix": [[1, 0], [0, 1]], "rhs": [3, 4]}),
            str(output),
            "solve",
        )
        assert payload["x"] == [3.0, 4.0]

    def test_solve_without_rhs(self, tmp_path):
        with pytest.raises(ValueError, match="rhs"):
            run(_input(tmp_path, {"matrix": [[1]]}), str(tmp_path / "out.json"), "solve")

    def test_unknown_operation(self, tmp_path):
        with pytest.raises(ValueError, match="Unknown operation"):
            run(_input(tmp_path, {"matrix": [[1]]}), str(tmp_path / "out.json"), "lu")


class TestMain:
    def test_eigen_with_rayleigh_shift(self, tmp_path, capsys):
        output = tmp_path / "out.json"
        main([
            '-i', _input(tmp_path, {"matrix": [[2, 1], [1, 2]]}),
            '-o', str(output), '--op', 'eigen', '--shift', 'rayleigh',
        ])
        payload = json.loads(output.read_text(encoding="utf-8"))
        assert payload["eigenvalues"] == pytest.approx([3.0, 1.0])
        assert "Wrote eigen result" in capsys.readouterr().out

    def test_reads_sys_argv(self, tmp_path, monkeypatch):
        output = tmp_path / "out.json"
        monkeypatch.setattr(sys, 'argv', [
            'unitas', '-i', _input(tmp_path, {"matrix": [[3], [4]]}),
            '-o', str(output), '--op', 'svd',
        ])
        main()
        payload = json.loads(output.read_text(encoding="utf-8"))
        assert payload["singular_values"] == pytest.approx([5.0])

    def test_missing_input_file(self, tmp_path, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(['-i', str(tmp_path / "absent.json"), '-o', str(tmp_path / "out.json")])
        assert exc_info.value.code == 1
        assert "not found" in capsys.readouterr().err.lower()

    def test_malformed_json(self, tmp_path, capsys):
        path = tmp_path / "in.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(SystemExit) as exc_info:
            main(['-i', str(path), '-o', str(tmp_path / "out.json")])
        assert exc_info.value.code == 1
        assert "Error" in capsys.readouterr().err

    def test_non_hermitian_eigen(self, tmp_path, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main([
                '-i', _input(tmp_path, {"matrix": [[1, 2], [3, 4]]}),
                '-o', str(tmp_path / "out.json"), '--op', 'eigen',
            ])
        assert exc_info.value.code == 1
        assert "Hermitian" in capsys.readouterr().err

    def test_invalid_iteration_cap(self, tmp_path, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main([
                '-i', _input(tmp_path, {"matrix": [[1]]}),
                '-o', str(tmp_path / "out.json"), '--max-iterations', '0',
            ])
        assert exc_info.value.code == 1
        assert "max_iterations" in capsys.readouterr().err

    def test_unknown_op_rejected_by_parser(self, tmp_path):
        with pytest.raises(SystemExit) as exc_info:
            main(['-i', 'in.json', '-o', 'out.json', '--op', 'lu'])
        assert exc_info.value.code == 2

    def test_input_and_output_required(self):
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 2
