from __future__ import annotations

import pytest

from combsort.validate import (
    equals_oracle,
    first_order_violation_index,
    is_ordered,
    is_permutation,
    oracle_sort,
    permutation_counter_diff,
    assert_no_mutation,
)


def test_oracle_directions() -> None:
    a = [3, -1, 2]
    assert oracle_sort(a) == [-1, 2, 3]
    assert oracle_sort(a, ascending=False) == [3, 2, -1]
    assert a == [3, -1, 2]


def test_equals_oracle() -> None:
    assert equals_oracle([2, 1], [1, 2])
    assert equals_oracle([2, 1], (2, 1), ascending=False)
    assert not equals_oracle([2, 1], [2, 1])


@pytest.mark.parametrize(
    "xs, ascending, expected",
    [
        ([], True, None),
        ([1], False, None),
        ([1, 1, 2], True, None),
        ([1, 3, 2], True, 1),
        ([3, 2, 2], False, None),
        ([3, 1, 2], False, 1),
        ([1, 2], False, 0),
    ],
)
def test_first_order_violation_index(xs, ascending, expected) -> None:
    assert first_order_violation_index(xs, ascending) == expected
    assert is_ordered(xs, ascending) is (expected is None)


def test_permutation_helpers() -> None:
    assert is_permutation([1, 2, 2], [2, 1, 2])
    assert not is_permutation([1, 2], [1, 2, 2])
    assert not is_permutation([1, 1], [1, 2])
    assert permutation_counter_diff([1, 2, 2], [2, 1, 2]) == {}
    assert permutation_counter_diff([1, 1, 3], [1, 2]) == {1: 1, 3: 1, 2: -1}


def test_assert_no_mutation_reports_first_difference() -> None:
    assert_no_mutation([1, 2, 3], [1, 2, 3])
    with pytest.raises(AssertionError, match="index 1: before=2, after=9"):
        assert_no_mutation([1, 2, 3], [1, 9, 3])
    with pytest.raises(AssertionError, match="length changed from 2 to 3"):
        assert_no_mutation([1, 2], [1, 2, 3])
