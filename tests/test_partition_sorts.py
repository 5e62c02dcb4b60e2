import random

import pytest

from sortviz.partition_sorts import merge_sort, quick_sort

SAMPLES = [
    [5],
    [2, 1],
    [3, 3, 3],
    [9, 8, 7, 6, 5, 4, 3, 2, 1],
    [1, 2, 3, 4, 5],
    [4, 1, 4, 2, 0, 7, 7, 3],
    random.Random(7).choices(range(1, 201), k=50),
]


@pytest.mark.parametrize("sort", [merge_sort, quick_sort])
@pytest.mark.parametrize("data", SAMPLES)
def test_sorts_in_place(sort, data):
    array = list(data)
    steps = list(sort(array))
    assert array == sorted(data)
    assert list(steps[-1].array) == sorted(data)


@pytest.mark.parametrize("sort", [merge_sort, quick_sort])
def test_empty_yields_nothing(sort):
    array = []
    assert list(sort(array)) == []
    assert array == []


@pytest.mark.parametrize("sort", [merge_sort, quick_sort])
@pytest.mark.parametrize("data", SAMPLES)
def test_every_frame_is_permutation(sort, data):
    for step in sort(list(data)):
        assert sorted(step.array) == sorted(data)
        for index in (*step.comparing, *step.swapped, *step.sorted_indices):
            assert 0 <= index < len(data)


@pytest.mark.parametrize(
    "sort,name", [(merge_sort, "Merge Sort Complete"), (quick_sort, "Quick Sort Complete")]
)
def test_completion_frame(sort, name):
    data = [6, 2, 9, 1, 5]
    last = list(sort(list(data)))[-1]
    assert last.label == name
    assert sorted(last.sorted_indices) == list(range(len(data)))
    assert last.sleep_ms(50) == 200
    assert last.sleep_ms(100) == 300


def test_merge_first_comparison_of_pair():
    steps = list(merge_sort([2, 1]))
    assert steps[0].comparing == (0, 1)
    assert steps[0].label == "Merge Sort"


def test_merge_range_frames_have_floor():
    steps = list(merge_sort([4, 3, 2, 1]))
    range_frames = [s for s in steps if s.comparing and s.scale != 1.0 and s.label == "Merge Sort"]
    assert range_frames
    assert all(s.sleep_ms(0) == 10 for s in range_frames)
    assert range_frames[-1].comparing == tuple(range(4))


def test_quick_sort_marks_pivots_progressively():
    data = random.Random(3).choices(range(100), k=30)
    previous = ()
    for step in quick_sort(list(data)):
        assert set(previous) <= set(step.sorted_indices) or step.label.endswith("Complete")
        previous = step.sorted_indices
        assert len(set(step.sorted_indices)) == len(step.sorted_indices)


def test_quick_sort_sorted_positions_hold_final_values():
    data = [8, 3, 5, 1, 9, 2, 7]
    expected = sorted(data)
    for step in quick_sort(list(data)):
        for index in step.sorted_indices:
            assert step.array[index] == expected[index]


def test_quick_sort_first_comparison_uses_last_pivot():
    steps = list(quick_sort([3, 1, 2]))
    assert steps[0].comparing == (0, 2)
    assert steps[0].label == "Quick Sort"