"""Drawing frames with pygame and driving a sort's frames with pause and speed control."""

from __future__ import annotations

import time
from functools import lru_cache
from typing import Callable, Iterable, Iterator, Sequence

import pygame

from sortviz.core import (
    BACKGROUND,
    PAUSE_POLL_MS,
    Action,
    Area,
    Playback,
    Step,
    format_delay,
    layout_bars,
)

PANEL_COLOR = (45, 50, 55)
STATUS_COLOR = (255, 255, 0)
LABEL_COLOR = (255, 255, 255)
STATUS_SIZE = 14

SPEED_UP_KEYS = frozenset({pygame.K_KP_PLUS, pygame.K_EQUALS, pygame.K_PLUS})
SLOW_DOWN_KEYS = frozenset({pygame.K_KP_MINUS, pygame.K_MINUS})

FontFactory = Callable[[int], object]
EventSource = Callable[[], Iterable[pygame.event.Event]]
SortFunction = Callable[[list[int]], Iterator[Step]]


@lru_cache(maxsize=None)
def _system_font(size: int) -> pygame.font.Font:
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.Font(None, size)


def _sleep(ms: int) -> None:
    if ms > 0:
        time.sleep(ms / 1000.0)


def poll_events(events: Iterable[pygame.event.Event], playback: Playback) -> Action:
    """Apply pause and speed keys to ``playback``; report EXIT on close or Escape."""
    for event in events:
        if event.type == pygame.QUIT:
            return Action.EXIT
        if event.type != pygame.KEYDOWN:
            continue
        if event.key == pygame.K_ESCAPE:
            return Action.EXIT
        if event.key == pygame.K_SPACE:
            playback.toggle_pause()
        elif event.key in SPEED_UP_KEYS:
            playback.speed_up()
        elif event.key in SLOW_DOWN_KEYS:
            playback.slow_down()
    return Action.CONTINUE


class Renderer:
    """Draws bars, the side panel and the status line onto a surface."""

    def __init__(
        self,
        surface: pygame.Surface,
        bar_area: Area,
        panel: pygame.Rect,
        status_pos: tuple[float, float] = (20.0, 0.0),
        font_factory: FontFactory | None = None,
        present: Callable[[], None] | None = None,
        sleep: Callable[[int], None] | None = None,
    ) -> None:
        self.surface = surface
        self.bar_area = bar_area
        self.panel = pygame.Rect(panel)
        self.status_pos = status_pos
        self.status = ""
        self._fonts: dict[int, object] = {}
        self._font_factory = font_factory or _system_font
        self._present = present or pygame.display.flip
        self._sleep = sleep or _sleep

    def _font(self, size: int):
        if size not in self._fonts:
            self._fonts[size] = self._font_factory(size)
        return self._fonts[size]

    def draw_bars(
        self,
        area: Area,
        array: Sequence[int],
        comparing: Iterable[int] = (),
        swapped: Iterable[int] = (),
        sorted_indices: Iterable[int] = (),
        max_override: int = -1,
    ) -> None:
        """Draw one bar per value, with its number underneath when there is room."""
        for bar in layout_bars(array, area, comparing, swapped, sorted_indices, max_override):
            rect = pygame.Rect(int(bar.x), int(bar.y), max(1, int(bar.width)), max(1, int(round(bar.height))))
            pygame.draw.rect(self.surface, bar.color.value, rect)
            if bar.label_size > 0:
                text = self._font(bar.label_size).render(str(bar.value), True, LABEL_COLOR)
                self.surface.blit(text, (int(bar.label_x - text.get_width() / 2.0), int(bar.label_y)))

    def draw_frame(self, array: Sequence[int], step: Step | None, status: str) -> None:
        """Clear the surface and draw the panel, the status line and the bars."""
        self.surface.fill(BACKGROUND)
        pygame.draw.rect(self.surface, PANEL_COLOR, self.panel)
        if status:
            text = self._font(STATUS_SIZE).render(status, True, STATUS_COLOR)
            self.surface.blit(text, (int(self.status_pos[0]), int(self.status_pos[1])))
        if step is None:
            self.draw_bars(self.bar_area, array)
        else:
            self.draw_bars(
                self.bar_area,
                array,
                step.comparing,
                step.swapped,
                step.sorted_indices,
                step.max_override,
            )

    def _show(self, step: Step) -> None:
        self.draw_frame(step.array, step, self.status)
        self._present()

    def _wait_while_paused(self, step: Step, playback: Playback, events: EventSource) -> Action:
        while playback.paused:
            self.status = f"PAUSED. Delay: {format_delay(playback.delay_ms)}ms. (Space)"
            self._show(step)
            if poll_events(events(), playback) is Action.EXIT:
                return Action.EXIT
            if not playback.paused:
                break
            self._sleep(PAUSE_POLL_MS)
        return Action.CONTINUE

    def visualize(
        self,
        name: str,
        array: list[int],
        steps: SortFunction,
        playback: Playback,
        events: EventSource,
    ) -> Action:
        """Sort ``array`` with ``steps``, showing every frame; EXIT if the user quit."""
        if not playback.paused:
            self.status = f"{name}. Delay: {format_delay(playback.delay_ms)}ms"
        for step in steps(array):
            if poll_events(events(), playback) is Action.EXIT:
                return Action.EXIT
            if playback.paused and self._wait_while_paused(step, playback, events) is Action.EXIT:
                return Action.EXIT
            if step.with_delay:
                self.status = f"{step.label}. Delay: {format_delay(playback.delay_ms)}ms"
            else:
                self.status = step.label
            self._show(step)
            self._sleep(step.sleep_ms(playback.delay_ms))
        return Action.CONTINUE