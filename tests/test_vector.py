# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Tests for domain/vector.py: immutable complex vector."""
import numpy as np
import pytest

from unitas.domain.errors import DegenerateInputError, DimensionMismatchError
from unitas.domain.matrix import DenseMatrix
from unitas.domain.vector import Vector


class TestConstruction:
    def test_empty_raises(self):
        with pytest.raises(DimensionMismatchError):
            Vector([])

    def test_two_dimensional_raises(self):
        with pytest.raises(DimensionMismatchError):
            Vector([[1, 2], [3, 4]])

    def test_entries_snapped(self):
        v = Vector([1e-12, 1.0])
        assert v[0] == 0j

    def test_basis(self):
        assert Vector.basis(3).to_list() == [1, 0, 0]
        assert Vector.basis(3, 2).to_list() == [0, 1, 0]

    def test_basis_out_of_range(self):
        with pytest.raises(DimensionMismatchError):
            Vector.basis(3, 4)

    def test_zeros(self):
        assert Vector.zeros(2).to_list() == [0, 0]


class TestImmutability:
    def test_to_array_is_a_copy(self):
        v = Vector([1, 2])
        arr = v.to_array()
        arr[0] = 99
        assert v[0] == 1

    def test_backing_array_read_only(self):
        v = Vector([1, 2])
        with pytest.raises(ValueError):
            v._data[0] = 5

    def test_operations_return_new_vectors(self):
        v = Vector([1, 2])
        w = v + v
        assert v.to_list() == [1, 2]
        assert w.to_list() == [2, 4]


class TestArithmetic:
    def test_add_subtract(self):
        a = Vector([1, 2j])
        b = Vector([3, 4])
        assert (a + b).to_list() == [4, 4 + 2j]
        assert (a - b).to_list() == [-2, -4 + 2j]

    def test_length_mismatch(self):
        with pytest.raises(DimensionMismatchError):
            Vector([1, 2]) + Vector([1, 2, 3])

    def test_scalar_multiply(self):
        assert (Vector([1, 2]) * 1j).to_list() == [1j, 2j]
        assert (2 * Vector([1, 2])).to_list() == [2, 4]

    def test_divide_by_near_zero(self):
        with pytest.raises(DegenerateInputError):
            Vector([1, 2]) / 1e-12

    def test_negate_and_conjugate(self):
        v = Vector([1 + 1j])
        assert (-v)[0] == -1 - 1j
        assert v.conjugate()[0] == 1 - 1j


class TestNorms:
    def test_norm(self):
        assert Vector([3, 4]).norm() == pytest.approx(5.0)
        assert Vector([3j, 4]).norm() == pytest.approx(5.0)

    def test_normalize(self):
        u = Vector([3, 4]).normalize()
        assert u.norm() == pytest.approx(1.0)
        assert u[0] == pytest.approx(0.6)

    def test_normalize_zero_vector(self):
        with pytest.raises(DegenerateInputError):
            Vector([0, 0]).normalize()

    def test_inner_is_conjugate_linear_in_self(self):
        a = Vector([1j, 2])
        b = Vector([3, 1 - 1j])
        assert Vector([1j]).inner(Vector([1j])) == pytest.approx(1.0)
        assert a.inner(b) == pytest.approx(b.inner(a).conjugate())

    def test_outer(self):
        m = Vector([1, 1j]).outer(Vector([1, 1j]))
        assert isinstance(m, DenseMatrix)
        np.testing.assert_allclose(m.to_array(), [[1, -1j], [1j, 1]])

    def test_isclose(self):
        assert Vector([1, 2]).isclose(Vector([1 + 1e-12, 2]))
        assert not Vector([1, 2]).isclose(Vector([1, 2, 3]))


class TestStructuralEdits:
    def test_isolate_one_based_inclusive(self):
        assert Vector([1, 2, 3, 4]).isolate(2, 3).to_list() == [2, 3]

    def test_isolate_invalid(self):
        with pytest.raises(DimensionMismatchError):
            Vector([1, 2, 3]).isolate(0, 2)
        with pytest.raises(DimensionMismatchError):
            Vector([1, 2, 3]).isolate(3, 2)

    def test_expand(self):
        assert Vector([1, 2]).expand().to_list() == [0, 1, 2]
        assert Vector([1, 2]).expand_bottom().to_list() == [1, 2, 0]

    def test_remove_first_reverse_append(self):
        v = Vector([1, 2, 3])
        assert v.remove_first().to_list() == [2, 3]
        assert v.reverse().to_list() == [3, 2, 1]
        assert v.append(Vector([4])).to_list() == [1, 2, 3, 4]

    def test_remove_only_element(self):
        with pytest.raises(DimensionMismatchError):
            Vector([1]).remove_first()

    def test_slice_returns_vector(self):
        s = Vector([1, 2, 3])[1:]
        assert isinstance(s, Vector)
        assert len(s) == 2
