import pytest

from contestlib.arrays import count_collecting_rounds, nearest_smaller_positions


def test_collecting_sorted_needs_one_round():
    assert count_collecting_rounds([1, 2, 3, 4, 5, 6]) == 1


def test_collecting_reversed_needs_one_round_per_value():
    values = list(range(7, 0, -1))
    assert count_collecting_rounds(values) == len(values)


def test_collecting_worked_example():
    assert count_collecting_rounds([4, 2, 1, 5, 3]) == 3


def test_collecting_rounds_bounded_by_length():
    values = [3, 1, 4, 6, 5, 2]
    rounds = count_collecting_rounds(values)
    assert 1 <= rounds <= len(values)


@pytest.mark.parametrize("values", [[1, 1, 2], [0, 1, 2], [2, 3, 4]])
def test_collecting_rejects_non_permutation(values):
    with pytest.raises(ValueError):
        count_collecting_rounds(values)


def test_nearest_smaller_worked_example():
    values = [2, 5, 1, 4, 8, 3, 2, 5]
    assert nearest_smaller_positions(values) == [0, 1, 0, 3, 4, 3, 3, 7]


def test_nearest_smaller_increasing():
    values = [1, 2, 3, 4, 5]
    assert nearest_smaller_positions(values) == list(range(len(values)))


def test_nearest_smaller_decreasing_and_equal():
    assert nearest_smaller_positions([9, 7, 7, 3, 1]) == [0] * 5


def test_nearest_smaller_invariant():
    values = [6, 2, 8, 3, 3, 9, 1, 4, 7, 5]
    result = nearest_smaller_positions(values)
    assert len(result) == len(values)
    for index, position in enumerate(result):
        if position:
            assert position - 1 < index
            assert values[position - 1] < values[index]
            assert all(values[k] >= values[index] for k in range(position, index))
        else:
            assert all(values[k] >= values[index] for k in range(index))


def test_nearest_smaller_empty():
    assert nearest_smaller_positions([]) == []