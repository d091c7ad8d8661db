import numpy as np
import pytest

from ndint import DimensionMismatch, NDArray, Point, Shape, asarray, dot, matmul, ones


def make_pair():
    A = asarray([[1, 2, 3], [4, 5, 6]])  # (2,3)
    B = asarray([[7, 8], [9, 10], [11, 12]])  # (3,2)
    return A, B


def test_dot_matrix():
    A, B = make_pair()
    C = A.dot(B)
    assert C.shape == Shape(2, 2)
    np.testing.assert_array_equal(C.toarray(), [[58, 64], [139, 154]])
    for i in range(2):
        for j in range(2):
            expected = sum(A.at(Point(i, k)) * B.at(Point(k, j)) for k in range(3))
            assert C.at(Point(i, j)) == expected


def test_dot_vector_is_column():
    A, _ = make_pair()
    C = A.dot(asarray([1, 0, -1]))
    assert C.shape == Shape(2, 1)
    np.testing.assert_array_equal(C.toarray(), [[-2], [-2]])


def test_dot_result_is_independent():
    A, B = make_pair()
    C = A @ B
    assert isinstance(C, NDArray)
    assert not C.shares_storage(A)
    assert not C.shares_storage(B)
    C.set(Point(0, 0), 0)
    np.testing.assert_array_equal(A.toarray(), [[1, 2, 3], [4, 5, 6]])


def test_dot_wraps_on_overflow():
    A = asarray([[2**16]])
    B = asarray([[2**16 + 1]])
    assert A.dot(B).at(Point(0, 0)) == 2**16


def test_dot_matches_numpy():
    rs = np.random.RandomState(0)
    a = rs.randint(-50, 50, size=(4, 5))
    b = rs.randint(-50, 50, size=(5, 3))
    C = asarray(a).dot(asarray(b))
    np.testing.assert_array_equal(C.toarray(), a @ b)


def test_functional_matmul():
    A, B = make_pair()
    np.testing.assert_array_equal(matmul(A, B).toarray(), A.dot(B).toarray())
    np.testing.assert_array_equal(dot(A, B).toarray(), A.dot(B).toarray())
    with pytest.raises(TypeError):
        matmul([[1]], B)


@pytest.mark.parametrize(
    "left, right, expected, actual",
    [
        ((3,), (3,), 2, 1),  # left must be 2D
        ((2, 3, 1), (1, 2), 2, 3),
        ((2, 3), (2, 2), 3, 2),  # inner sizes differ
        ((2, 3), (2,), 3, 2),
        ((2, 3), (3, 2, 1), 3, 3),  # right has too many axes
    ],
)
def test_dot_dimension_mismatch(left, right, expected, actual):
    with pytest.raises(DimensionMismatch) as exc:
        ones(Shape(left)).dot(ones(Shape(right)))
    assert exc.value.expected == expected
    assert exc.value.actual == actual


def test_dot_rejects_non_array():
    A, _ = make_pair()
    with pytest.raises(TypeError):
        A.dot(np.ones((3, 2), dtype=np.int32))