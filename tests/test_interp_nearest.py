import numpy as np
import pytest

from densepy import DomainError, InvalidInputError, interp_nearest


def _brute_force(points, centers, values, radius):
    out = np.full((points.shape[0], values.shape[1]), np.nan)
    index = np.zeros(points.shape[0], dtype=np.int64)
    for ip in range(points.shape[0]):
        best = radius * radius
        for ic in range(centers.shape[0]):
            dsq = float(np.sum((points[ip] - centers[ic]) ** 2))
            if dsq < best:
                best = dsq
                index[ip] = ic + 1
                out[ip] = values[ic]
    return out, index


def test_exact_hit_returns_center_value():
    out, index = interp_nearest(
        [[0, 0]], [[0, 0], [10, 10]], [[1], [2]], 1, return_index=True
    )

    np.testing.assert_array_equal(out, [[1.0]])
    np.testing.assert_array_equal(index, [1])


def test_point_outside_radius_is_unmatched():
    out, index = interp_nearest(
        [[5, 5]], [[0, 0], [10, 10]], [[1], [2]], 1, return_index=True
    )

    assert out.shape == (1, 1)
    assert np.isnan(out[0, 0])
    np.testing.assert_array_equal(index, [0])


def test_values_only_by_default():
    out = interp_nearest([[0.2, 0.0]], [[0.0, 0.0]], [[3.0, 4.0, 5.0]], 1.0)

    assert isinstance(out, np.ndarray)
    np.testing.assert_array_equal(out, [[3.0, 4.0, 5.0]])


def test_nearest_center_wins_and_all_columns_copied():
    centers = np.array([[0.0, 0.0], [1.0, 0.0], [0.0, 2.0]])
    values = np.array([[1.0, -1.0], [2.0, -2.0], [3.0, -3.0]])
    points = np.array([[0.9, 0.1], [0.1, 1.8], [0.2, 0.1]])

    out, index = interp_nearest(points, centers, values, 5.0, return_index=True)

    np.testing.assert_array_equal(index, [2, 3, 1])
    np.testing.assert_array_equal(out, values[[1, 2, 0]])


def test_ties_resolve_to_first_center():
    centers = np.array([[-1.0, 0.0], [1.0, 0.0], [0.0, 1.0]])
    values = np.array([[10.0], [20.0], [30.0]])

    out, index = interp_nearest([[0.0, 0.0]], centers, values, 2.0, return_index=True)

    np.testing.assert_array_equal(index, [1])
    np.testing.assert_array_equal(out, [[10.0]])


def test_duplicate_exact_centers_pick_first():
    centers = np.array([[3.0, 3.0], [1.0, 1.0], [1.0, 1.0]])
    values = np.array([[0.0], [5.0], [6.0]])

    _, index = interp_nearest([[1.0, 1.0]], centers, values, 1.0, return_index=True)

    np.testing.assert_array_equal(index, [2])


def test_center_exactly_on_radius_is_not_matched():
    out, index = interp_nearest(
        [[0.0, 0.0]], [[2.0, 0.0]], [[7.0]], 2.0, return_index=True
    )

    assert np.isnan(out[0, 0])
    np.testing.assert_array_equal(index, [0])


def test_matches_brute_force_in_3d():
    rng = np.random.default_rng(0)
    points = rng.random((200, 3))
    centers = rng.random((50, 3))
    values = rng.normal(size=(50, 4))

    out, index = interp_nearest(points, centers, values, 0.15, return_index=True)
    ref_out, ref_index = _brute_force(points, centers, values, 0.15)

    assert 0 < np.count_nonzero(index) < points.shape[0]
    np.testing.assert_array_equal(index, ref_index)
    np.testing.assert_array_equal(out, ref_out)


def test_index_is_integer_array():
    _, index = interp_nearest(
        [[0.0], [9.0]], [[0.0]], [[1.0]], 1.0, return_index=True
    )

    assert index.dtype == np.int64
    assert index.shape == (2,)


def test_no_centers_leaves_everything_unmatched():
    out, index = interp_nearest(
        np.zeros((3, 2)), np.zeros((0, 2)), np.zeros((0, 2)), 1.0, return_index=True
    )

    assert out.shape == (3, 2)
    assert np.all(np.isnan(out))
    np.testing.assert_array_equal(index, [0, 0, 0])


def test_no_points_gives_empty_result():
    out, index = interp_nearest(
        np.zeros((0, 2)), [[0.0, 0.0]], [[1.0, 2.0]], 1.0, return_index=True
    )

    assert out.shape == (0, 2)
    assert index.shape == (0,)


def test_inputs_are_not_modified():
    points = np.array([[0.5, 0.5]])
    centers = np.array([[0.0, 0.0], [1.0, 1.0]])
    values = np.array([[1.0], [2.0]])
    copies = [points.copy(), centers.copy(), values.copy()]

    interp_nearest(points, centers, values, 10.0)

    for before, after in zip(copies, [points, centers, values]):
        np.testing.assert_array_equal(before, after)


def test_fortran_ordered_inputs():
    points = np.asfortranarray([[0.9, 0.1], [0.1, 1.8]])
    centers = np.asfortranarray([[0.0, 0.0], [1.0, 0.0], [0.0, 2.0]])
    values = np.asfortranarray([[1.0, 4.0], [2.0, 5.0], [3.0, 6.0]])

    out = interp_nearest(points, centers, values, 1.0)

    np.testing.assert_array_equal(out, [[2.0, 5.0], [3.0, 6.0]])


@pytest.mark.parametrize("radius", [0, -1.0, np.nan, np.inf, [1.0, 2.0], "1", True])
def test_invalid_radius(radius):
    with pytest.raises(DomainError) as excinfo:
        interp_nearest([[0.0, 0.0]], [[0.0, 0.0]], [[1.0]], radius)

    assert excinfo.value.identifier == "interpnearest:invalidInput"


def test_numpy_scalar_radius_is_accepted():
    out = interp_nearest([[0.0, 0.0]], [[0.5, 0.0]], [[1.0]], np.array([1.0]))

    np.testing.assert_array_equal(out, [[1.0]])


def test_dimension_mismatch():
    with pytest.raises(InvalidInputError, match="centers"):
        interp_nearest([[0.0, 0.0]], [[0.0, 0.0, 0.0]], [[1.0]], 1.0)


def test_value_row_mismatch():
    with pytest.raises(InvalidInputError, match="values"):
        interp_nearest([[0.0, 0.0]], [[0.0, 0.0], [1.0, 1.0]], [[1.0]], 1.0)


@pytest.mark.parametrize(
    "points",
    [
        [0.0, 0.0],
        np.zeros((1, 2, 1)),
        np.zeros((1, 2), dtype=bool),
        np.zeros((1, 2), dtype=complex),
        np.array([["a", "b"]]),
    ],
)
def test_points_must_be_real_matrix(points):
    with pytest.raises(InvalidInputError, match="points"):
        interp_nearest(points, [[0.0, 0.0]], [[1.0]], 1.0)


def test_validation_happens_before_radius_check():
    # shape errors are reported even when the radius is also invalid
    with pytest.raises(InvalidInputError):
        interp_nearest([[0.0, 0.0]], [[0.0]], [[1.0]], -1.0)
