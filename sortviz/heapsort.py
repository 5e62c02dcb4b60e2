"""Heap sort as a generator of frames.

``heap_sort`` sorts the given list in place and yields a ``Step`` for every
frame the visualizer shows, ending with a completion frame.
"""

from __future__ import annotations

from typing import Iterator, Sequence

from sortviz.core import Step

_NAME = "Heap Sort"
_EXTRACT_LABEL = f"{_NAME} (Extract Max)"


def heapify(
    array: list[int], heap_size: int, root: int, sorted_indices: Sequence[int]
) -> Iterator[Step]:
    """Sift ``array[root]`` down within the first ``heap_size`` items."""
    marked = tuple(sorted_indices)
    limit = min(heap_size, len(array))
    while True:
        left = 2 * root + 1
        right = 2 * root + 2
        children = tuple(child for child in (left, right) if child < limit)

        yield Step(tuple(array), comparing=(root, *children), sorted_indices=marked, label=_NAME)

        largest = root
        for child in children:
            if array[child] > array[largest]:
                largest = child
        if largest == root:
            return

        array[root], array[largest] = array[largest], array[root]
        yield Step(tuple(array), swapped=(root, largest), sorted_indices=marked, label=_NAME)
        root = largest


def heap_sort(array: list[int]) -> Iterator[Step]:
    """Sort ``array`` by building a max-heap and extracting the maximum repeatedly."""
    if not array:
        return
    n = len(array)
    sorted_indices: list[int] = []

    for root in range(n // 2 - 1, -1, -1):
        yield from heapify(array, n, root, sorted_indices)

    for end in range(n - 1, 0, -1):
        array[0], array[end] = array[end], array[0]
        sorted_indices.append(end)
        yield Step(
            tuple(array),
            swapped=(0, end),
            sorted_indices=tuple(sorted_indices),
            label=_EXTRACT_LABEL,
        )
        yield from heapify(array, end, 0, sorted_indices)

    final = sorted(set(sorted_indices) | set(range(n)))
    yield Step(
        array=tuple(array),
        sorted_indices=tuple(final),
        label=f"{_NAME} Complete",
        scale=3.0,
        floor=200.0,
    )