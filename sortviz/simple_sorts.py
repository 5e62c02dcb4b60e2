"""Bubble, insertion and selection sort as generators of frames.

Each function sorts the given list in place and yields a ``Step`` for every
frame the visualizer shows, ending with a completion frame.
"""

from __future__ import annotations

from typing import Iterator

from sortviz.core import Step


def _complete(array: list[int], name: str, sorted_indices: list[int]) -> Step:
    return Step(
        array=tuple(array),
        sorted_indices=tuple(sorted_indices),
        label=f"{name} Complete",
        scale=3.0,
        floor=200.0,
    )


def bubble_sort(array: list[int]) -> Iterator[Step]:
    """Sort ``array`` with bubble sort, stopping early after a pass without swaps."""
    if not array:
        return
    name = "Bubble Sort"
    n = len(array)
    sorted_indices: list[int] = []

    for i in range(n - 1):
        swapped = False
        for j in range(n - i - 1):
            yield Step(tuple(array), comparing=(j, j + 1), sorted_indices=tuple(sorted_indices), label=name)
            if array[j] > array[j + 1]:
                array[j], array[j + 1] = array[j + 1], array[j]
                swapped = True
                yield Step(tuple(array), swapped=(j, j + 1), sorted_indices=tuple(sorted_indices), label=name)
        sorted_indices.append(n - 1 - i)
        if not swapped:
            sorted_indices.extend(k for k in range(n - i - 1) if k not in sorted_indices)
            break

    sorted_indices.extend(k for k in range(n) if k not in sorted_indices)
    yield _complete(array, name, sorted_indices)


def insertion_sort(array: list[int]) -> Iterator[Step]:
    """Sort ``array`` with insertion sort, showing each shift of the key."""
    if not array:
        return
    name = "Insertion Sort"
    n = len(array)

    for i in range(1, n):
        key = array[i]
        j = i - 1
        partition = tuple(range(i))

        yield Step(tuple(array), comparing=(i,), sorted_indices=partition, label=name)
        while j >= 0 and array[j] > key:
            yield Step(tuple(array), comparing=(j, i), sorted_indices=partition, label=name)
            array[j + 1] = array[j]
            yield Step(tuple(array), swapped=(j + 1,), sorted_indices=partition, label=name)
            j -= 1
        array[j + 1] = key
        yield Step(tuple(array), swapped=(j + 1,), sorted_indices=partition, label=name)

    yield _complete(array, name, list(range(n)))


def selection_sort(array: list[int]) -> Iterator[Step]:
    """Sort ``array`` with selection sort, one minimum per pass."""
    if not array:
        return
    name = "Selection Sort"
    n = len(array)
    sorted_indices: list[int] = []

    for i in range(n - 1):
        min_idx = i
        yield Step(tuple(array), comparing=(min_idx,), sorted_indices=tuple(sorted_indices), label=name)

        for j in range(i + 1, n):
            yield Step(tuple(array), comparing=(min_idx, j), sorted_indices=tuple(sorted_indices), label=name)
            if array[j] < array[min_idx]:
                min_idx = j
                yield Step(tuple(array), comparing=(min_idx, i), sorted_indices=tuple(sorted_indices), label=name)

        if min_idx != i:
            array[min_idx], array[i] = array[i], array[min_idx]
            yield Step(tuple(array), swapped=(min_idx, i), sorted_indices=tuple(sorted_indices), label=name)
        sorted_indices.append(i)

    if n - 1 not in sorted_indices:
        sorted_indices.append(n - 1)
    yield _complete(array, name, sorted_indices)