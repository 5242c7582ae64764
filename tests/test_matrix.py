import random

import pytest

from neurovis.matrix import Matrix


def test_empty_matrix_shape_and_str():
    m = Matrix([])
    assert m.shape == (0, 0)
    assert str(m) == "{Empty Matrix}\n"


def test_zeros_has_requested_shape_and_content():
    m = Matrix.zeros(2, 3)
    assert m.shape == (2, 3)
    assert m.rows == 2 and m.cols == 3
    assert all(v == 0.0 for row in m.to_lists() for v in row)


def test_ragged_rows_rejected():
    with pytest.raises(ValueError):
        Matrix([[1, 2], [3]])


def test_transpose_swaps_indices_and_is_involution():
    m = Matrix([[1, 2, 3], [4, 5, 6]])
    t = m.transpose()
    assert t.shape == (3, 2)
    for i in range(2):
        for j in range(3):
            assert m[i, j] == t[j, i]
    assert t.transpose() == m


def test_matmul_known_product():
    a = Matrix([[1, 2], [3, 4]])
    b = Matrix([[5, 6], [7, 8]])
    assert (a @ b) == Matrix([[19, 22], [43, 50]])


def test_matmul_identity():
    a = Matrix([[1, 2, 3], [4, 5, 6]])
    identity = Matrix([[1, 0, 0], [0, 1, 0], [0, 0, 1]])
    assert a @ identity == a


def test_matmul_dimension_mismatch():
    with pytest.raises(ValueError):
        Matrix([[1, 2]]) @ Matrix([[1, 2]])


def test_add_sub_round_trip():
    a = Matrix([[1, 2], [3, 4]])
    b = Matrix([[10, -3], [7, 0]])
    assert (a + b) - b == a


@pytest.mark.parametrize("op", ["add", "sub", "hadamard"])
def test_shape_mismatch_rejected(op):
    a = Matrix([[1, 2]])
    b = Matrix([[1], [2]])
    with pytest.raises(ValueError):
        if op == "add":
            a + b
        elif op == "sub":
            a - b
        else:
            a.hadamard(b)


def test_scalar_multiplication_both_sides():
    a = Matrix([[1, 2], [3, 4]])
    assert a * 2 == a + a
    assert 2 * a == a * 2


def test_hadamard_with_ones_and_commutative():
    a = Matrix([[1, 2], [3, 4]])
    b = Matrix([[5, 6], [7, 8]])
    ones = Matrix([[1, 1], [1, 1]])
    assert a.hadamard(ones) == a
    assert a.hadamard(b) == b.hadamard(a)


def test_apply_maps_every_element():
    a = Matrix([[1, -2], [3, 4]])
    assert a.apply(lambda v: v * 0) == Matrix.zeros(2, 2)
    assert a.apply(abs).apply(lambda v: -v) == a.apply(lambda v: -abs(v))


def test_setitem_getitem():
    m = Matrix.zeros(2, 2)
    m[1, 0] = 7.5
    assert m[1, 0] == 7.5
    assert m[0, 0] == 0.0


@pytest.mark.parametrize("index", [(2, 0), (0, 2), (-1, 0), (0, -1)])
def test_index_out_of_range(index):
    m = Matrix([[1.0, 2.0], [3.0, 4.0]])
    with pytest.raises(IndexError):
        m[index]
    with pytest.raises(IndexError):
        m[index] = 9.0
    assert m.to_lists() == [[1.0, 2.0], [3.0, 4.0]]


def test_column_to_vector_round_trip():
    values = [0.25, -1.0, 3.0]
    m = Matrix.column(values)
    assert m.shape == (3, 1)
    assert m.to_vector() == values


def test_to_vector_requires_single_column():
    with pytest.raises(ValueError):
        Matrix([[1, 2]]).to_vector()


def test_randomize_within_bounds_and_reproducible():
    a = Matrix.zeros(4, 5)
    b = Matrix.zeros(4, 5)
    a.randomize(-2.0, 2.0, random.Random(3))
    b.randomize(-2.0, 2.0, random.Random(3))
    assert a == b
    assert all(-2.0 <= v <= 2.0 for row in a.to_lists() for v in row)
    assert a.shape == (4, 5)


def test_str_format():
    assert str(Matrix([[1, 0.5]])) == "[1.0000, 0.5000]\n"
    assert str(Matrix([[1], [2]])).count("\n") == 2


def test_equality_with_other_types():
    assert (Matrix([[1]]) == 5) is False
    assert Matrix([[1, 2]]) != Matrix([[1], [2]])


def test_to_lists_is_a_copy():
    m = Matrix([[1, 2]])
    copy = m.to_lists()
    copy[0][0] = 99.0
    assert m[0, 0] == 1.0