import pytest

from puzzlekit.memory_slots import CircularMemory, process_requests


def test_worked_example():
    requests = [
        ["store", "0", "6"],
        ["store", "0", "3"],
        ["free", "0", "3"],
        ["store", "10", "3"],
        ["store", "6", "6"],
    ]
    assert process_requests(requests, 15) == [0, 6, 3, 10, -1]


def test_store_on_empty_memory_starts_at_start():
    memory = CircularMemory(10)
    assert memory.store(4, 3) == 4


def test_full_memory_refuses_then_accepts_after_free():
    memory = CircularMemory(8)
    assert memory.store(0, 8) == 0
    assert memory.store(3, 1) is None
    assert memory.free(3, 1) == 1
    assert memory.store(0, 1) == 3


def test_store_wraps_around_end():
    memory = CircularMemory(10)
    assert memory.store(8, 4) == 8
    assert memory.store(9, 1) is None or memory.store(9, 1) not in {8, 9, 0, 1}


def test_free_returns_count():
    memory = CircularMemory(5)
    assert memory.free(2, 4) == 4


def test_failed_store_reported_as_minus_one():
    result = process_requests([["store", "0", "4"], ["store", "0", "1"]], 4)
    assert result[-1] == -1


def test_zero_slots_rejected():
    with pytest.raises(ValueError):
        CircularMemory(0)