import random

from puzzlekit.building_houses import longest_segments


def test_worked_example():
    assert longest_segments([1, 3, 5, 2, 4]) == [1, 1, 1, 3, 5]


def test_empty_queries():
    assert longest_segments([]) == []


def test_result_never_decreases():
    rng = random.Random(7)
    queries = [rng.randrange(-20, 20) for _ in range(60)]
    result = longest_segments(queries)
    assert result == sorted(result)
    assert len(result) == len(queries)


def test_contiguous_block_in_any_order_ends_full():
    rng = random.Random(3)
    queries = list(range(-5, 15))
    rng.shuffle(queries)
    assert longest_segments(queries)[-1] == len(queries)


def test_repeated_position_repeats_previous_answer():
    result = longest_segments([4, 5, 5, 4])
    assert result[2] == result[1]
    assert result[3] == result[1]


def test_gapped_positions_never_join():
    queries = [0, 10, 20, 30]
    result = longest_segments(queries)
    assert set(result) == {result[0]}
    assert result[0] == len(queries[:1])