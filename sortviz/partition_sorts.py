"""Merge sort and quick sort as generators of frames.

Each function sorts the given list in place and yields a ``Step`` for every
frame the visualizer shows, ending with a completion frame.
"""

from __future__ import annotations

from typing import Generator, Iterator

from sortviz.core import Step

_MERGE_NAME = "Merge Sort"
_QUICK_NAME = "Quick Sort"


def _complete(array: list[int], name: str, sorted_indices: list[int]) -> Step:
    return Step(
        array=tuple(array),
        sorted_indices=tuple(sorted_indices),
        label=f"{name} Complete",
        scale=3.0,
        floor=200.0,
    )


def _merge(array: list[int], left: int, middle: int, right: int) -> Iterator[Step]:
    lower = array[left : middle + 1]
    upper = array[middle + 1 : right + 1]
    i = j = 0
    k = left

    while i < len(lower) and j < len(upper):
        yield Step(tuple(array), comparing=(left + i, middle + 1 + j), label=_MERGE_NAME)
        if lower[i] <= upper[j]:
            array[k] = lower[i]
            i += 1
        else:
            array[k] = upper[j]
            j += 1
        yield Step(tuple(array), swapped=(k,), label=_MERGE_NAME)
        k += 1

    for value in (*lower[i:], *upper[j:]):
        array[k] = value
        yield Step(tuple(array), swapped=(k,), label=_MERGE_NAME)
        k += 1


def _merge_sort_range(array: list[int], left: int, right: int) -> Iterator[Step]:
    if left >= right:
        return
    middle = left + (right - left) // 2
    yield from _merge_sort_range(array, left, middle)
    yield from _merge_sort_range(array, middle + 1, right)
    yield from _merge(array, left, middle, right)
    yield Step(
        tuple(array),
        comparing=tuple(range(left, right + 1)),
        label=_MERGE_NAME,
        scale=1 / 1.5,
        floor=10.0,
    )


def merge_sort(array: list[int]) -> Iterator[Step]:
    """Sort ``array`` with top-down merge sort, showing each merge."""
    if not array:
        return
    yield from _merge_sort_range(array, 0, len(array) - 1)
    yield _complete(array, _MERGE_NAME, list(range(len(array))))


def _partition(
    array: list[int], low: int, high: int, sorted_indices: list[int]
) -> Generator[Step, None, int]:
    pivot = array[high]
    i = low - 1

    for j in range(low, high):
        yield Step(tuple(array), comparing=(j, high), sorted_indices=tuple(sorted_indices), label=_QUICK_NAME)
        if array[j] < pivot:
            i += 1
            array[i], array[j] = array[j], array[i]
            yield Step(tuple(array), swapped=(i, j), sorted_indices=tuple(sorted_indices), label=_QUICK_NAME)

    place = i + 1
    array[place], array[high] = array[high], array[place]
    yield Step(tuple(array), swapped=(place, high), sorted_indices=tuple(sorted_indices), label=_QUICK_NAME)

    if place not in sorted_indices:
        sorted_indices.append(place)
    yield Step(
        tuple(array),
        sorted_indices=tuple(sorted_indices),
        label=_QUICK_NAME,
        scale=1 / 1.5,
        floor=10.0,
    )
    return place


def _quick_sort_range(array: list[int], low: int, high: int, sorted_indices: list[int]) -> Iterator[Step]:
    if low < high:
        pivot = yield from _partition(array, low, high, sorted_indices)
        yield from _quick_sort_range(array, low, pivot - 1, sorted_indices)
        yield from _quick_sort_range(array, pivot + 1, high, sorted_indices)
    elif low == high and 0 <= low < len(array) and low not in sorted_indices:
        sorted_indices.append(low)
        yield Step(
            tuple(array),
            sorted_indices=tuple(sorted_indices),
            label=_QUICK_NAME,
            scale=0.5,
            floor=5.0,
        )


def quick_sort(array: list[int]) -> Iterator[Step]:
    """Sort ``array`` with quick sort using the last element as pivot."""
    if not array:
        return
    sorted_indices: list[int] = []
    yield from _quick_sort_range(array, 0, len(array) - 1, sorted_indices)
    sorted_indices.extend(k for k in range(len(array)) if k not in sorted_indices)
    yield _complete(array, _QUICK_NAME, sorted_indices)