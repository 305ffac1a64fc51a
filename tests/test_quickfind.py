import numpy as np
import pytest

from densepy import IndexOutOfRangeError, InvalidInputError, quickfind


def test_scans_in_given_order():
    tf = np.array([False, True, False, True])

    assert quickfind(tf, np.array([3, 4, 2], dtype=np.uint32)) == 4


def test_returns_original_one_based_index():
    tf = np.array([True, False, False, True])

    assert quickfind(tf, [4, 1]) == 4
    assert quickfind(tf, [2, 3, 1]) == 1


def test_no_true_entry_returns_minus_one():
    tf = np.array([False, True, False])

    assert quickfind(tf, [1, 3, 1]) == -1
    assert quickfind(np.zeros(5, dtype=bool), np.arange(1, 6)) == -1


@pytest.mark.parametrize("idx", [[], np.array([], dtype=np.uint32)])
def test_empty_order_returns_minus_one(idx):
    assert quickfind(np.array([True, True]), idx) == -1


def test_result_is_python_int():
    result = quickfind(np.array([True]), np.array([1], dtype=np.uint32))

    assert type(result) is int
    assert result == 1


def test_multidimensional_mask_uses_flat_positions():
    tf = np.array([[False, False, False], [False, True, False]])

    # position 5 in row-major order is tf[1, 1]
    assert quickfind(tf, [6, 5, 1]) == 5


@pytest.mark.parametrize("bad", [0, 5, -2])
def test_out_of_range_index(bad):
    tf = np.array([False, False, False, False])

    with pytest.raises(IndexOutOfRangeError) as excinfo:
        quickfind(tf, [1, bad, 2])

    assert excinfo.value.identifier == "quickfind:indexerror"


def test_stops_at_first_offending_entry():
    tf = np.array([False, True])

    with pytest.raises(IndexOutOfRangeError, match="entry 2 is 3"):
        quickfind(tf, [1, 3, 9, 2])


def test_entries_after_a_match_are_not_checked():
    tf = np.array([False, True])

    assert quickfind(tf, [2, 99]) == 2


def test_mask_must_be_boolean():
    with pytest.raises(InvalidInputError) as excinfo:
        quickfind(np.array([0, 1]), [1, 2])

    assert excinfo.value.identifier == "quickfind:inputerror"


def test_order_must_be_integer():
    with pytest.raises(InvalidInputError, match="Second input"):
        quickfind(np.array([False, True]), np.array([1.0, 2.0]))
