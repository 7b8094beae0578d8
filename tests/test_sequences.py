import pytest

from contestlib.sequences import count_towers, longest_unique_run


def test_longest_unique_run_example():
    assert longest_unique_run([1, 2, 1, 3, 2, 7, 4, 2]) == 5


@pytest.mark.parametrize("songs", [[4, 9, 2, 7], [1], list(range(50))])
def test_all_distinct_gives_full_length(songs):
    assert longest_unique_run(songs) == len(songs)


def test_repeated_single_song():
    assert longest_unique_run([3, 3, 3, 3]) == 1


def test_longest_unique_run_bounded_by_distinct_count():
    songs = [1, 2, 3, 1, 2, 3, 4, 1, 2]
    result = longest_unique_run(songs)
    assert result <= len(set(songs))
    assert result == len(set(songs))


def test_count_towers_example():
    assert count_towers([3, 8, 2, 1, 5]) == 2


def test_increasing_cubes_each_need_a_tower():
    cubes = [1, 2, 3, 4, 5, 6]
    assert count_towers(cubes) == len(cubes)


def test_equal_cubes_cannot_stack():
    cubes = [4, 4, 4]
    assert count_towers(cubes) == len(cubes)


def test_decreasing_cubes_form_one_tower():
    assert count_towers([9, 7, 5, 3]) == count_towers([9])


def test_count_towers_bounds():
    cubes = [5, 1, 4, 2, 3, 6, 2, 8]
    result = count_towers(cubes)
    assert 1 <= result <= len(cubes)