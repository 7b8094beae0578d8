import pytest

from contestlib.subarrays import (
    count_divisible_subarrays,
    count_subarrays_with_sum,
    max_subarray_sum,
    max_subarray_sum_bounded,
    min_max_division,
)

SAMPLE = [-1, 3, -2, 5, 3, -5, 2, 2]


def test_max_subarray_sum_worked_example():
    assert max_subarray_sum(SAMPLE) == 9


def test_max_subarray_sum_all_negative_picks_largest():
    values = [-7, -3, -9, -4]
    assert max_subarray_sum(values) == max(values)


def test_max_subarray_sum_all_positive_is_total():
    values = [4, 1, 7, 2]
    assert max_subarray_sum(values) == sum(values)


def test_max_subarray_sum_empty():
    with pytest.raises(ValueError):
        max_subarray_sum([])


def test_bounded_worked_example():
    assert max_subarray_sum_bounded(SAMPLE, 1, 2) == 8


def test_bounded_with_full_range_equals_unbounded():
    assert max_subarray_sum_bounded(SAMPLE, 1, len(SAMPLE)) == max_subarray_sum(SAMPLE)


def test_bounded_with_exact_full_length_is_total():
    n = len(SAMPLE)
    assert max_subarray_sum_bounded(SAMPLE, n, n) == sum(SAMPLE)


def test_bounded_with_length_one_is_maximum():
    assert max_subarray_sum_bounded(SAMPLE, 1, 1) == max(SAMPLE)


@pytest.mark.parametrize("low, high", [(9, 9), (3, 2), (-1, 2)])
def test_bounded_rejects_impossible_lengths(low, high):
    with pytest.raises(ValueError):
        max_subarray_sum_bounded(SAMPLE, low, high)


def test_count_divisible_worked_example():
    assert count_divisible_subarrays([3, 1, 2, 7, 4]) == 1


def test_count_divisible_all_multiples():
    values = [5, 10, -15, 0, 20]
    n = len(values)
    assert count_divisible_subarrays(values) == n * (n + 1) // 2


def test_count_divisible_invariant_under_reversal():
    values = [4, -3, 8, 2, 6, -1, 5]
    assert count_divisible_subarrays(values) == count_divisible_subarrays(values[::-1])


def test_count_with_sum_zeros():
    values = [0, 0, 0, 0]
    n = len(values)
    assert count_subarrays_with_sum(values, 0) == n * (n + 1) // 2


def test_count_with_sum_positive_covers_every_subarray():
    values = [2, 1, 3, 1, 4]
    n = len(values)
    total = sum(count_subarrays_with_sum(values, t) for t in range(1, sum(values) + 1))
    assert total == n * (n + 1) // 2


def test_count_with_sum_invariant_under_reversal():
    values = [2, -1, 3, 5, -2, 2, 0]
    for target in range(-3, 8):
        assert count_subarrays_with_sum(values, target) == count_subarrays_with_sum(
            values[::-1], target
        )


def test_min_max_division_single_part_is_total():
    values = [2, 4, 7, 3, 5]
    assert min_max_division(values, 1) == sum(values)


def test_min_max_division_many_parts_is_maximum():
    values = [2, 4, 7, 3, 5]
    assert min_max_division(values, len(values)) == max(values)
    assert min_max_division(values, len(values) + 3) == max(values)


def test_min_max_division_monotonic_in_parts():
    values = [6, 1, 8, 2, 9, 3, 4, 7]
    results = [min_max_division(values, k) for k in range(1, len(values) + 1)]
    assert results == sorted(results, reverse=True)
    assert all(max(values) <= r <= sum(values) for r in results)


@pytest.mark.parametrize("values, parts", [([], 2), ([1, 2], 0)])
def test_min_max_division_rejects_bad_input(values, parts):
    with pytest.raises(ValueError):
        min_max_division(values, parts)