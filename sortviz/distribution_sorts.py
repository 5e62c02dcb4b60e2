"""Counting sort and LSD radix sort as generators of frames.

Each function sorts the given list in place and yields a ``Step`` for every
frame the visualizer shows, ending with a completion frame.
"""

from __future__ import annotations

from typing import Iterator, Sequence

from sortviz.core import Step

_COUNTING_NAME = "Counting Sort"
_RADIX_NAME = "Radix Sort"


def _complete(array: list[int], name: str, max_override: int) -> Step:
    return Step(
        array=tuple(array),
        sorted_indices=tuple(range(len(array))),
        label=f"{name} Complete",
        max_override=max_override,
        scale=3.0,
        floor=200.0,
    )


def max_for_radix(array: Sequence[int]) -> int:
    """Largest value, 0 for an empty sequence, or -1 if any value is negative."""
    if not array:
        return 0
    if any(value < 0 for value in array):
        return -1
    return max(array)


def counting_sort(array: list[int]) -> Iterator[Step]:
    """Sort ``array`` by counting occurrences of each value in its range."""
    if not array:
        return
    low, high = min(array), max(array)
    counts = [0] * (high - low + 1)
    output = [0] * len(array)

    count_label = f"{_COUNTING_NAME} (Count)"
    for i, value in enumerate(array):
        counts[value - low] += 1
        yield Step(
            tuple(array),
            comparing=(i,),
            label=count_label,
            max_override=high,
            scale=0.5,
            floor=1.0,
        )

    for slot in range(1, len(counts)):
        counts[slot] += counts[slot - 1]

    output_label = f"{_COUNTING_NAME} (Output)"
    for i in range(len(array) - 1, -1, -1):
        value = array[i]
        counts[value - low] -= 1
        output[counts[value - low]] = value
        yield Step(tuple(array), comparing=(i,), label=output_label, max_override=high)

    copy_label = f"{_COUNTING_NAME} (Copy back)"
    for i, value in enumerate(output):
        array[i] = value
        yield Step(
            tuple(array),
            swapped=(i,),
            sorted_indices=tuple(range(i + 1)),
            label=copy_label,
            max_override=high,
        )

    yield _complete(array, _COUNTING_NAME, high)


def _radix_pass(array: list[int], exp: int, max_value: int) -> Iterator[Step]:
    label = f"{_RADIX_NAME} (Pass exp {exp})"
    counts = [0] * 10
    output = [0] * len(array)

    def frame(**highlight: tuple[int, ...]) -> Step:
        return Step(
            tuple(array),
            label=label,
            max_override=max_value,
            scale=0.5,
            floor=1.0,
            **highlight,
        )

    for i, value in enumerate(array):
        counts[(value // exp) % 10] += 1
        yield frame(comparing=(i,))

    for digit in range(1, 10):
        counts[digit] += counts[digit - 1]

    for i in range(len(array) - 1, -1, -1):
        digit = (array[i] // exp) % 10
        counts[digit] -= 1
        output[counts[digit]] = array[i]
        yield frame(comparing=(i,))

    for i, value in enumerate(output):
        array[i] = value
        yield frame(swapped=(i,))


def radix_sort(array: list[int]) -> Iterator[Step]:
    """Sort non-negative ``array`` digit by digit, least significant first.

    If any value is negative the array is left untouched and a single
    message frame is yielded instead.
    """
    if not array:
        return
    max_value = max_for_radix(array)
    if max_value == -1:
        yield Step(
            tuple(array),
            label=f"{_RADIX_NAME}: Only non-negative numbers supported.",
            with_delay=False,
            fixed_ms=2000.0,
        )
        return

    exp = 1
    while max_value // exp > 0:
        yield from _radix_pass(array, exp, max_value)
        exp *= 10

    yield _complete(array, _RADIX_NAME, max_value)