import numpy as np
import pytest

from intmatrix import Matrix, DimensionMismatch, InvalidBlockLayout, NonSquare, OddDimension


def test_create_is_zero_filled():
    m = Matrix.create(3, 2)
    assert m.shape == (3, 2)
    assert m.tolist() == [[0, 0], [0, 0], [0, 0]]
    assert Matrix().shape == (0, 0)


def test_create_rejects_negative_dimensions():
    with pytest.raises(ValueError):
        Matrix(-1, 2)


def test_fill_random_stays_in_range_and_fill_zero_clears(rng):
    m = Matrix(16, 16)
    m.fill_random(rng)
    assert m.values.min() >= 0 and m.values.max() < 10
    assert m.values.any()
    m.fill_zero()
    assert not m.values.any()


def test_fill_random_custom_range(rng):
    m = Matrix(8, 8)
    m.fill_random(rng, low=-5, high=-2)
    assert m.values.min() >= -5 and m.values.max() < -2


def test_from_list_copies_input():
    rows = [[1, 2], [3, 4]]
    m = Matrix.from_list(rows)
    rows[0][0] = 99
    assert m.tolist() == [[1, 2], [3, 4]]


def test_from_list_rejects_floats():
    with pytest.raises(TypeError):
        Matrix.from_list([[1.5, 2.0]])


def test_copy_is_deep(random_matrix):
    m = random_matrix(4)
    c = m.copy()
    c.values[0, 0] = 1234
    c.values[3, 3] = -1
    assert m.values[0, 0] != 1234
    assert m.values[3, 3] != -1
    assert not np.shares_memory(m.values, c.values)


@pytest.mark.parametrize("n", [0, 2, 4, 6, 32])
def test_split_then_assemble_round_trip(random_matrix, n):
    m = random_matrix(n)
    assert Matrix.from_quadrants(m.split()) == m


def test_split_places_quadrants():
    m = Matrix.from_list([[1, 2, 3, 4],
                          [5, 6, 7, 8],
                          [9, 10, 11, 12],
                          [13, 14, 15, 16]])
    (q11, q12), (q21, q22) = m.split()
    assert q11.tolist() == [[1, 2], [5, 6]]
    assert q12.tolist() == [[3, 4], [7, 8]]
    assert q21.tolist() == [[9, 10], [13, 14]]
    assert q22.tolist() == [[11, 12], [15, 16]]


def test_split_quadrants_do_not_alias_parent(random_matrix):
    m = random_matrix(4)
    before = m.copy()
    for row in m.split():
        for q in row:
            q.values[...] = -7
    assert m == before


def test_split_rejects_non_square():
    with pytest.raises(NonSquare):
        Matrix(2, 4).split()


def test_split_rejects_odd_dimension():
    with pytest.raises(OddDimension):
        Matrix(3, 3).split()


def test_from_quadrants_placement():
    def block(v):
        return Matrix.from_list([[v]])
    m = Matrix.from_quadrants([[block(1), block(2)], [block(3), block(4)]])
    assert m.tolist() == [[1, 2], [3, 4]]


@pytest.mark.parametrize("quadrants", [
    None,
    [[Matrix(2, 2), Matrix(2, 2)], [Matrix(2, 2)]],
    [[Matrix(2, 2), Matrix(2, 2)]],
    [[Matrix(2, 2), Matrix(2, 2), Matrix(2, 2)], [Matrix(2, 2), Matrix(2, 2), Matrix(2, 2)]],
    [[Matrix(2, 2), Matrix(2, 2)], [Matrix(2, 2), Matrix(3, 3)]],
    [[Matrix(2, 3), Matrix(2, 3)], [Matrix(2, 3), Matrix(2, 3)]],
    [[Matrix(2, 2), "x"], [Matrix(2, 2), Matrix(2, 2)]],
    42,
])
def test_from_quadrants_rejects_bad_layouts(quadrants):
    with pytest.raises(InvalidBlockLayout):
        Matrix.from_quadrants(quadrants)


def test_add_sub():
    a = Matrix.from_list([[1, 2], [3, 4]])
    b = Matrix.from_list([[10, 20], [30, 40]])
    assert a.add(b).tolist() == [[11, 22], [33, 44]]
    assert b.sub(a).tolist() == [[9, 18], [27, 36]]
    assert (a + b) == a.add(b)
    assert a.tolist() == [[1, 2], [3, 4]]


def test_additive_inverse(random_matrix):
    a, b = random_matrix(5, 7), random_matrix(5, 7)
    assert a.add(b).sub(b) == a


def test_add_rejects_mismatched_shapes():
    a = Matrix(2, 3)
    b = Matrix(3, 2)
    with pytest.raises(DimensionMismatch):
        a.add(b)
    with pytest.raises(DimensionMismatch):
        a.sub(b)


def test_add_wraps_at_fixed_width():
    big = Matrix.from_list([[2**31 - 1]], dtype=np.int32)
    one = Matrix.from_list([[1]], dtype=np.int32)
    assert big.add(one).tolist() == [[-2**31]]


def test_str_renders_rows():
    assert str(Matrix.from_list([[1, 2], [3, 4]])) == "| 1 2 |\n| 3 4 |\n"


def test_equality_checks_shape_and_values():
    assert Matrix(2, 2) == Matrix(2, 2)
    assert Matrix(2, 2) != Matrix(2, 3)
    assert Matrix.from_list([[1]]) != Matrix.from_list([[2]])


@pytest.mark.parametrize("rows", [[[3_000_000_000]], [[1, 2], [-2**31 - 1, 0]]])
def test_from_list_rejects_values_outside_int32(rows):
    with pytest.raises(ValueError):
        Matrix.from_list(rows, dtype=np.int32)


def test_from_list_accepts_int32_bounds_and_wider_dtype():
    m = Matrix.from_list([[2**31 - 1, -2**31]], dtype=np.int32)
    assert m.tolist() == [[2**31 - 1, -2**31]]
    assert Matrix.from_list([[3_000_000_000]], dtype=np.int64).tolist() == [[3_000_000_000]]


def test_from_quadrants_widens_to_common_dtype():
    blocks = [[Matrix.from_list([[1]], dtype=np.int32), Matrix.from_list([[2]], dtype=np.int64)],
              [Matrix.from_list([[3]], dtype=np.int32), Matrix.from_list([[4]], dtype=np.int32)]]
    m = Matrix.from_quadrants(blocks)
    assert m.dtype == np.int64
    assert m.tolist() == [[1, 2], [3, 4]]
