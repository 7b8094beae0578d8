import pytest

from contestlib.sums import four_values, three_values, two_values


def _check(values, target, positions, count):
    assert len(positions) == count
    assert len(set(positions)) == count
    assert all(1 <= p <= len(values) for p in positions)
    assert sum(values[p - 1] for p in positions) == target


def test_two_values_worked_example():
    assert two_values([2, 7, 5, 1], 8) == (2, 4)


@pytest.mark.parametrize(
    "values,target",
    [([1, 2, 3, 4, 5], 9), ([5, 5], 10), ([10, 3, 7, 2, 8], 10)],
)
def test_two_values_invariant(values, target):
    _check(values, target, two_values(values, target), 2)


def test_two_values_impossible():
    assert two_values([1, 2, 3], 100) is None
    assert two_values([5], 10) is None


def test_three_values_worked_example():
    values = [2, 7, 5, 1]
    result = three_values(values, 8)
    _check(values, 8, result, 3)
    assert sorted(result) == [1, 3, 4]


@pytest.mark.parametrize(
    "values,target",
    [([1, 2, 3, 4, 5, 6], 12), ([3, 3, 3], 9), ([8, 1, 6, 2, 9, 4], 13)],
)
def test_three_values_invariant(values, target):
    _check(values, target, three_values(values, target), 3)


def test_three_values_impossible():
    assert three_values([1, 1, 1, 1], 10) is None
    assert three_values([4, 4], 8) is None


def test_four_values_worked_example():
    values = [3, 2, 5, 8, 1, 3, 2, 3]
    result = four_values(values, 15)
    _check(values, 15, result, 4)
    assert list(result) == sorted(result)


@pytest.mark.parametrize(
    "values,target",
    [([1, 2, 3, 4, 5, 6, 7], 16), ([2, 2, 2, 2], 8), ([9, 1, 4, 6, 2, 8], 21)],
)
def test_four_values_invariant(values, target):
    _check(values, target, four_values(values, target), 4)


def test_four_values_impossible():
    assert four_values([1, 1, 1, 1, 1], 50) is None
    assert four_values([1, 2, 3], 6) is None