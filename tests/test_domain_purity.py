# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Domain modules may import only the standard library pieces they need, numpy and unitas."""
import ast
import importlib

import pytest

ALLOWED = {
    "cmath", "math", "numbers", "logging", "threading",
    "dataclasses", "typing", "numpy", "unitas", "__future__",
}

DOMAIN_MODULES = [
    "scalar", "errors", "config", "vector", "matrix", "householder",
    "qr", "hessenberg", "eigen", "svd", "spectral", "serialization",
]


class TestDomainPurity:
    @pytest.mark.parametrize("name", DOMAIN_MODULES)
    def test_module_pure(self, name):
        mod = importlib.import_module(f"unitas.domain.{name}")
        with open(mod.__file__, encoding="utf-8") as f:
            source = ast.parse(f.read())
        for node in ast.walk(source):
            if isinstance(node, ast.ImportFrom):
                if node.level > 0:
                    continue
                tops = [node.module.split(".")[0]]
            elif isinstance(node, ast.Import):
                tops = [alias.name.split(".")[0] for alias in node.names]
            else:
                continue
            for top in tops:
                assert top in ALLOWED, f"Forbidden import in {name}: {top}"

    def test_domain_has_no_io(self):
        """No adapter or CLI code leaks into the domain layer."""
        for name in DOMAIN_MODULES:
            mod = importlib.import_module(f"unitas.domain.{name}")
            with open(mod.__file__, encoding="utf-8") as f:
                text = f.read()
            assert "unitas.adapters" not in text
            assert "unitas.cli" not in text
