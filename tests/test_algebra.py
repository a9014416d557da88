import pytest

from openfinite.algebra import (
    CooMatrix,
    MatrixType,
    ReshapeError,
    RMatrix,
    Shape,
    laplace_1d,
    laplace_2d,
    laplace_3d,
    random_int_matrix,
)


def _is_symmetric(dense):
    n = len(dense)
    return all(dense[i][j] == dense[j][i] for i in range(n) for j in range(n))


def _off_diagonal_values(dense):
    n = len(dense)
    return {dense[i][j] for i in range(n) for j in range(n) if i != j}


def test_default_shape_is_empty():
    assert Shape().size() == 0


def test_reshape_flatten_keeps_size():
    s = Shape(2, 3, 4)
    total = s.size()
    s.reshape(-1)
    assert list(s) == [total]


def test_reshape_two_and_three_dims():
    s = Shape(2, 3)
    s.reshape(3, 2)
    assert list(s) == [3, 2]
    s.reshape(1, 2, 3)
    assert list(s) == [1, 2, 3]
    s.reshape(1, 1, 2, 3)
    assert list(s) == [1, 1, 2, 3]


def test_reshape_mismatch_raises():
    s = Shape(2, 3)
    with pytest.raises(ReshapeError, match="cannot reshape array of size"):
        s.reshape(4, 2)
    with pytest.raises(ReshapeError):
        s.reshape(5)
    assert list(s) == [2, 3]


def test_shape_str():
    assert str(Shape(2, 3)) == "(2,3,)"


def test_rmatrix_fill_and_index_round_trip():
    m = RMatrix(2, 3, 1.5)
    assert all(v == 1.5 for row in m.rows() for v in row)
    m.fill(-2.0)
    assert all(v == -2.0 for row in m.rows() for v in row)
    m[1, 2] = 7.0
    assert m[1, 2] == 7.0
    assert m[0, 2] == -2.0
    assert m.shape == (2, 3)


def test_rmatrix_out_of_range():
    m = RMatrix(2, 3)
    with pytest.raises(IndexError):
        m[2, 0]
    with pytest.raises(IndexError):
        m[0, 3] = 1.0
    assert m[1, 2] == 0.0


def test_rmatrix_str_header():
    assert str(RMatrix(2, 3)).startswith("RMatrix(2,3):")


def test_matrix_type_lookup():
    assert MatrixType(0) is MatrixType.F
    assert MatrixType(3) is MatrixType.CSR
    assert MatrixType["COO"] is MatrixType(5)
    assert MatrixType(7) is MatrixType.BSC


def test_random_int_matrix_deterministic_and_in_range():
    a = random_int_matrix(4, 5, low=-3, upper=8, seed=42)
    b = random_int_matrix(4, 5, low=-3, upper=8, seed=42)
    assert a.rows() == b.rows()
    values = [v for row in a.rows() for v in row]
    assert all(-3 <= v < 8 and v == int(v) for v in values)


def test_random_int_matrix_invalid_range():
    with pytest.raises(ValueError):
        random_int_matrix(2, 2, low=5, upper=5, seed=1)


def test_coo_to_dense_sums_duplicates():
    m = CooMatrix((2, 2), [0, 0], [1, 1], [1.0, 2.0])
    assert m.to_dense()[0][1] == 3.0
    assert m.to_dense()[1][0] == 0.0


def test_laplace_1d_structure():
    n = 6
    m = laplace_1d(n)
    assert m.nnz == 3 * n - 2
    dense = m.to_dense()
    assert _is_symmetric(dense)
    assert all(dense[i][i] == 2.0 for i in range(n))
    assert _off_diagonal_values(dense) <= {0.0, -1.0}
    assert all(sum(dense[i]) == 0.0 for i in range(1, n - 1))


def test_laplace_2d_structure():
    size, n = 9, 3
    m = laplace_2d(size)
    assert m.shape == (size, size)
    assert m.nnz == size + 4 * (n - 1) * n
    dense = m.to_dense()
    assert _is_symmetric(dense)
    assert all(dense[i][i] == 4.0 for i in range(size))
    assert _off_diagonal_values(dense) <= {0.0, -1.0}
    assert sum(dense[4]) == 0.0


def test_laplace_2d_rejects_non_square():
    with pytest.raises(ValueError):
        laplace_2d(10)


def test_laplace_3d_structure():
    size, n = 27, 3
    m = laplace_3d(size)
    assert m.nnz == size + 6 * n * n * (n - 1)
    dense = m.to_dense()
    assert _is_symmetric(dense)
    assert all(dense[i][i] == 6.0 for i in range(size))
    assert _off_diagonal_values(dense) <= {0.0, -1.0}
    assert sum(dense[13]) == 0.0


def test_laplace_3d_larger_cube_and_rejects_non_cube():
    size = 64
    assert laplace_3d(size).shape == (size, size)
    with pytest.raises(ValueError):
        laplace_3d(30)