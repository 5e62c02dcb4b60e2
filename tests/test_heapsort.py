import random

import pytest

from sortviz.heapsort import heap_sort, heapify


def _is_max_heap(values, size):
    return all(
        values[parent] >= values[child]
        for parent in range(size)
        for child in (2 * parent + 1, 2 * parent + 2)
        if child < size
    )


@pytest.mark.parametrize("seed", range(6))
def test_heap_sort_sorts_random_lists(seed):
    rng = random.Random(seed)
    data = [rng.randint(-50, 200) for _ in range(rng.randint(1, 40))]
    expected = sorted(data)
    steps = list(heap_sort(data))
    assert data == expected
    assert list(steps[-1].array) == expected


def test_heap_sort_empty_yields_nothing():
    data = []
    assert list(heap_sort(data)) == []
    assert data == []


def test_heap_sort_single_element_only_completion():
    data = [7]
    steps = list(heap_sort(data))
    assert len(steps) == 1
    assert steps[0].label == "Heap Sort Complete"
    assert steps[0].sorted_indices == (0,)


def test_completion_frame_marks_every_index_in_order():
    data = [9, 3, 7, 1, 8, 2]
    final = list(heap_sort(data))[-1]
    assert final.sorted_indices == tuple(range(len(data)))
    assert final.sleep_ms(10) == 200
    assert final.sleep_ms(100) == 300


def test_extract_frames_swap_root_with_end():
    data = [4, 10, 3, 5, 1]
    steps = list(heap_sort(data))
    extracts = [s for s in steps if s.label == "Heap Sort (Extract Max)"]
    assert [s.swapped for s in extracts] == [(0, end) for end in range(len(data) - 1, 0, -1)]
    for step in extracts:
        end = step.swapped[1]
        assert end in step.sorted_indices
        assert step.array[end] == max(step.array[: end + 1])


def test_heapify_builds_heap_property():
    data = [1, 5, 3]
    steps = list(heapify(data, 3, 0, []))
    assert _is_max_heap(data, 3)
    assert sorted(data) == [1, 3, 5]
    assert steps[0].comparing == (0, 1, 2)
    assert any(s.swapped == (0, 1) for s in steps)


def test_heapify_respects_heap_size():
    data = [1, 2, 9]
    steps = list(heapify(data, 2, 0, [2]))
    assert data[2] == 9
    assert steps[0].comparing == (0, 1)
    assert all(s.sorted_indices == (2,) for s in steps)


def test_heapify_leaf_only_compares():
    data = [3, 2, 1]
    steps = list(heapify(data, 3, 2, []))
    assert data == [3, 2, 1]
    assert len(steps) == 1
    assert steps[0].comparing == (2,)
    assert steps[0].swapped == ()


def test_step_arrays_are_permutations_of_input():
    data = [5, 2, 5, 0, 9, 1, 1]
    original = sorted(data)
    for step in heap_sort(data):
        assert sorted(step.array) == original