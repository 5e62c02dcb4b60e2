"""Shared playback state, frame description and bar layout for the visualizer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Sequence

MIN_DELAY_MS = 0.0
MAX_DELAY_MS = 300.0
DELAY_STEP_MS = 10.0
DEFAULT_DELAY_MS = 50.0
PAUSE_POLL_MS = 50
BACKGROUND = (20, 25, 30)
NUMBERS_HEIGHT = 30.0
LABEL_OFFSET = 5.0


class Action(Enum):
    """What the caller should do after events have been handled."""

    CONTINUE = "continue"
    EXIT = "exit"


@dataclass
class Playback:
    """Pause flag and per-step delay shared between the UI and a running sort."""

    paused: bool = False
    delay_ms: float = DEFAULT_DELAY_MS

    def toggle_pause(self) -> None:
        self.paused = not self.paused

    def speed_up(self) -> None:
        self.delay_ms = max(MIN_DELAY_MS, self.delay_ms - DELAY_STEP_MS)

    def slow_down(self) -> None:
        self.delay_ms = min(MAX_DELAY_MS, self.delay_ms + DELAY_STEP_MS)


@dataclass(frozen=True)
class Step:
    """One frame produced by a sorting algorithm.

    ``array`` is a snapshot of the data; the index tuples say which bars to
    highlight. ``label`` is the status line; when ``with_delay`` is true the
    current delay is appended to it. The time to hold the frame is
    ``max(delay * scale, floor)`` unless ``fixed_ms`` is given.
    """

    array: tuple[int, ...]
    comparing: tuple[int, ...] = ()
    swapped: tuple[int, ...] = ()
    sorted_indices: tuple[int, ...] = ()
    label: str = ""
    with_delay: bool = True
    max_override: int = -1
    scale: float = 1.0
    floor: float = 0.0
    fixed_ms: float | None = None

    def sleep_ms(self, delay_ms: float) -> int:
        """Whole milliseconds to hold this frame for the given delay."""
        if self.fixed_ms is not None:
            ms = self.fixed_ms
        else:
            ms = max(delay_ms * self.scale, self.floor)
        return int(ms) if ms > 0 else 0


@dataclass(frozen=True)
class Area:
    """A rectangle in window coordinates."""

    left: float
    top: float
    width: float
    height: float


class BarColor(Enum):
    """Bar fill colours, as RGB triples."""

    DEFAULT = (100, 160, 220)
    COMPARING = (255, 255, 0)
    SWAPPED = (255, 0, 0)
    SORTED = (0, 255, 0)


@dataclass(frozen=True)
class Bar:
    """Geometry and colour of one bar and of the number drawn under it."""

    x: float
    y: float
    width: float
    height: float
    color: BarColor
    value: int
    label_x: float
    label_y: float
    label_size: int


def format_delay(value: float, precision: int = 0) -> str:
    """Format a delay with a fixed number of decimals."""
    return f"{value:.{precision}f}"


def map_value_to_height(value: int, min_value: int, max_value: int, area_height: float) -> float:
    """Scale a value into a bar height, never less than one pixel."""
    if max_value == min_value:
        return max(1.0, area_height / 2.0)
    fraction = (value - min_value) / (max_value - min_value)
    return max(1.0, fraction * area_height)


def label_size(bar_width: float, container_height: float) -> int:
    """Character size for bar numbers; 0 when there is no room for them."""
    size = 12
    if bar_width < 30:
        size = 10
    if bar_width < 15:
        size = 8
    if bar_width < 8 or container_height < NUMBERS_HEIGHT + 10:
        size = 0
    return size


def _bar_color(index: int, comparing: set[int], swapped: set[int], sorted_set: set[int]) -> BarColor:
    if index in sorted_set:
        return BarColor.SORTED
    if index in swapped:
        return BarColor.SWAPPED
    if index in comparing:
        return BarColor.COMPARING
    return BarColor.DEFAULT


def layout_bars(
    array: Sequence[int],
    area: Area,
    comparing: Iterable[int] = (),
    swapped: Iterable[int] = (),
    sorted_indices: Iterable[int] = (),
    max_override: int = -1,
) -> list[Bar]:
    """Lay out one bar per value inside ``area``, with room for numbers below."""
    if not array:
        return []
    container_height = max(1.0, area.height - NUMBERS_HEIGHT)
    count = len(array)
    slot = area.width / count
    if count > 200:
        gap = 0.0
    elif count > 100:
        gap = 1.0
    else:
        gap = 2.0
    bar_width = max(1.0, slot - gap)

    low, high = min(array), max(array)
    if max_override != -1:
        high = max(high, max_override)
        if low > 0 and max_override >= low:
            low = 0

    size = label_size(slot, container_height)
    comparing_set, swapped_set, sorted_set = set(comparing), set(swapped), set(sorted_indices)
    label_y = area.top + container_height + LABEL_OFFSET

    bars = []
    for index, value in enumerate(array):
        height = map_value_to_height(value, low, high, container_height)
        slot_left = area.left + index * slot
        bars.append(
            Bar(
                x=slot_left + gap / 2.0,
                y=area.top + container_height - height,
                width=bar_width,
                height=height,
                color=_bar_color(index, comparing_set, swapped_set, sorted_set),
                value=value,
                label_x=slot_left + slot / 2.0,
                label_y=label_y,
                label_size=size,
            )
        )
    return bars