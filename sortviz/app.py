"""The interactive window: side panel with buttons, number input and bar view."""

from __future__ import annotations

import argparse
import random
from dataclasses import dataclass
from functools import lru_cache
from typing import Callable, Iterator

import pygame

from sortviz.core import Action, Area, Playback, Step, format_delay
from sortviz.distribution_sorts import counting_sort, radix_sort
from sortviz.heapsort import heap_sort
from sortviz.partition_sorts import merge_sort, quick_sort
from sortviz.render import SLOW_DOWN_KEYS, SPEED_UP_KEYS, Renderer
from sortviz.simple_sorts import bubble_sort, insertion_sort, selection_sort

WINDOW_WIDTH = 1280
WINDOW_HEIGHT = 720
PANEL_WIDTH = 320.0
BAR_AREA = Area(PANEL_WIDTH, 0.0, WINDOW_WIDTH - PANEL_WIDTH, float(WINDOW_HEIGHT))
INPUT_CHAR_LIMIT = 5
MAX_ARRAY_ELEMENTS = int(BAR_AREA.width // 7)
RANDOM_SIZE = 50
RANDOM_LOW, RANDOM_HIGH = 1, 200

PADDING = 10.0
SIDE_PADDING = 20.0
CONTROL_SIZE = (PANEL_WIDTH - 2 * SIDE_PADDING, 35.0)
ALGO_SIZE = ((PANEL_WIDTH - 2 * SIDE_PADDING - PADDING) / 2.0, 30.0)

ALGORITHMS: dict[str, tuple[str, Callable[[list[int]], Iterator[Step]]]] = {
    "bubble_sort": ("Bubble Sort", bubble_sort),
    "insertion_sort": ("Insertion Sort", insertion_sort),
    "selection_sort": ("Selection Sort", selection_sort),
    "merge_sort": ("Merge Sort", merge_sort),
    "quick_sort": ("Quick Sort", quick_sort),
    "heap_sort": ("Heap Sort", heap_sort),
    "counting_sort": ("Counting Sort", counting_sort),
    "radix_sort": ("Radix Sort", radix_sort),
}


def _layout() -> tuple[list[tuple[str, str, int, pygame.Rect]], float]:
    specs = []
    y = 20.0
    for label, ident in (("Random Array", "random_array"), ("Clear Array", "clear_array")):
        specs.append((label, ident, 16, pygame.Rect(SIDE_PADDING, y, *CONTROL_SIZE)))
        y += CONTROL_SIZE[1] + PADDING
    y += PADDING * 1.5
    columns = (SIDE_PADDING, SIDE_PADDING + ALGO_SIZE[0] + PADDING)
    for index, (ident, (label, _)) in enumerate(ALGORITHMS.items()):
        if index > 0 and index % 2 == 0:
            y += ALGO_SIZE[1] + PADDING / 1.5
        specs.append((label, ident, 12, pygame.Rect(columns[index % 2], y, *ALGO_SIZE)))
    y += ALGO_SIZE[1] + PADDING * 2.5
    return specs, y


STATUS_Y = _layout()[1]


@dataclass
class Button:
    """A clickable panel button."""

    label: str
    id: str
    rect: pygame.Rect
    char_size: int
    font: object = None
    active: bool = False
    enabled: bool = True

    def contains(self, pos: tuple[float, float]) -> bool:
        """True when enabled and ``pos`` lies inside the button."""
        return self.enabled and self.rect.collidepoint(pos)

    def set_active(self, active: bool) -> None:
        self.active = active

    def set_enabled(self, enabled: bool) -> None:
        self.enabled = enabled

    def colours(self, hovered: bool) -> tuple[tuple[int, int, int], tuple[int, int, int]]:
        """Fill and text colour for the current state."""
        if not self.enabled:
            return (100, 100, 100), (180, 180, 180)
        if self.active:
            return (30, 80, 180), (255, 255, 255)
        if hovered:
            return (100, 170, 230), (255, 255, 255)
        return (50, 120, 200), (255, 255, 255)


def build_buttons(font: Callable[[int], object] | None = None) -> list[Button]:
    """The panel's buttons: two array controls then one per algorithm, two per row."""
    specs, _ = _layout()
    return [
        Button(label, ident, rect, size, font(size) if font is not None else None)
        for label, ident, size, rect in specs
    ]


@lru_cache(maxsize=None)
def _load_font(size: int) -> pygame.font.Font:
    return pygame.font.Font(None, size)


class SorterApp:
    """State of the visualizer window and the handling of user input."""

    def __init__(self) -> None:
        self.data: list[int] = []
        self.input = ""
        self.playback = Playback()
        self.buttons = build_buttons(None)
        self.message = self._with_delay("Delay: {}ms. Add numbers or select sort.")

    def _with_delay(self, template: str) -> str:
        return template.format(format_delay(self.playback.delay_ms))

    def type_character(self, char: str) -> None:
        """Append a digit to the input, up to the input limit; ignore anything else."""
        if len(char) == 1 and "0" <= char <= "9" and len(self.input) < INPUT_CHAR_LIMIT:
            self.input += char

    def backspace(self) -> None:
        self.input = self.input[:-1]

    def submit(self) -> None:
        """Add the typed number to the array."""
        if not self.input:
            return
        if len(self.data) < MAX_ARRAY_ELEMENTS:
            self.data.append(int(self.input))
            self.message = self._with_delay(f"Num added. Total: {len(self.data)}. Delay: {{}}ms")
        else:
            self.message = self._with_delay("Max array size. Delay: {}ms")
        self.input = ""

    def clear(self) -> None:
        self.data.clear()
        self.input = ""
        self.message = self._with_delay("Array cleared. Delay: {}ms")

    def randomize(self, rng: random.Random | None = None) -> None:
        """Replace the array with random values."""
        rng = rng or random.Random()
        size = min(RANDOM_SIZE, MAX_ARRAY_ELEMENTS)
        self.data[:] = [rng.randint(RANDOM_LOW, RANDOM_HIGH) for _ in range(size)]
        self.message = self._with_delay(f"Rand. array (sz {len(self.data)}). Delay: {{}}ms")

    def speed_up(self) -> None:
        self.playback.speed_up()
        self.message = self._with_delay("Delay: {}ms. Add numbers or select sort.")

    def slow_down(self) -> None:
        self.playback.slow_down()
        self.message = self._with_delay("Delay: {}ms. Add numbers or select sort.")

    def _press(self, button: Button, renderer: Renderer) -> Action:
        for other in self.buttons:
            other.set_active(False)
        if button.id == "clear_array":
            self.clear()
            return Action.CONTINUE
        if button.id == "random_array":
            self.randomize()
            return Action.CONTINUE
        if not self.data:
            self.message = self._with_delay("Array is empty! Delay: {}ms")
            return Action.CONTINUE

        label, sort = ALGORITHMS[button.id]
        button.set_active(True)
        for other in self.buttons:
            other.set_enabled(False)
        self.playback.paused = False
        action = renderer.visualize(label, self.data, sort, self.playback, pygame.event.get)
        for other in self.buttons:
            other.set_enabled(True)
        if action is Action.CONTINUE:
            self.message = self._with_delay(f"{button.label} complete. Delay: {{}}ms")
        return action

    def _draw_controls(self, screen: pygame.Surface, mouse: tuple[int, int]) -> None:
        for button in self.buttons:
            fill, text_colour = button.colours(button.contains(mouse))
            pygame.draw.rect(screen, fill, button.rect)
            pygame.draw.rect(screen, (150, 180, 220), button.rect, 1)
            text = button.font.render(button.label, True, text_colour)
            screen.blit(text, text.get_rect(center=button.rect.center))

        label = _load_font(16).render("Add Number:", True, (200, 200, 200))
        screen.blit(label, (SIDE_PADDING, WINDOW_HEIGHT - 65))
        box = pygame.Rect(SIDE_PADDING, WINDOW_HEIGHT - 40, PANEL_WIDTH - 2 * SIDE_PADDING, 30)
        pygame.draw.rect(screen, (70, 75, 80), box)
        pygame.draw.rect(screen, (120, 120, 120), box, 1)

        input_font = _load_font(18)
        text = input_font.render(self.input, True, (255, 255, 255))
        text_pos = (SIDE_PADDING + 5, WINDOW_HEIGHT - 38)
        screen.blit(text, text_pos)
        if self.input:
            caret = pygame.Rect(text_pos[0] + text.get_width(), text_pos[1] + 2, 2, int(18 * 0.8))
            pygame.draw.rect(screen, (255, 255, 255), caret)

    def _handle_key(self, key: int) -> None:
        if key in SPEED_UP_KEYS:
            self.speed_up()
        elif key in SLOW_DOWN_KEYS:
            self.slow_down()
        elif key == pygame.K_BACKSPACE:
            self.backspace()
        elif key in (pygame.K_RETURN, pygame.K_KP_ENTER):
            self.submit()

    def run(self) -> None:
        """Open the window and process input until it is closed."""
        pygame.init()
        try:
            screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
            pygame.display.set_caption("Sorting Visualizer")
            pygame.key.start_text_input()
            clock = pygame.time.Clock()
            self.buttons = build_buttons(_load_font)
            renderer = Renderer(
                screen,
                BAR_AREA,
                pygame.Rect(0, 0, PANEL_WIDTH, WINDOW_HEIGHT),
                status_pos=(SIDE_PADDING, STATUS_Y),
                font_factory=_load_font,
            )
            running = True
            while running:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT or (
                        event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE
                    ):
                        running = False
                        break
                    if event.type == pygame.KEYDOWN:
                        self._handle_key(event.key)
                    elif event.type == pygame.TEXTINPUT:
                        for char in event.text:
                            self.type_character(char)
                    elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                        button = next((b for b in self.buttons if b.contains(event.pos)), None)
                        if button is not None and self._press(button, renderer) is Action.EXIT:
                            running = False
                            break
                if not running:
                    break
                renderer.draw_frame(self.data, None, self.message)
                self._draw_controls(screen, pygame.mouse.get_pos())
                pygame.display.flip()
                clock.tick(60)
        finally:
            pygame.quit()


def main(argv: list[str] | None = None) -> int:
    """Start the visualizer window."""
    parser = argparse.ArgumentParser(prog="sortviz", description="Watch sorting algorithms at work.")
    parser.parse_args(argv)
    SorterApp().run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())