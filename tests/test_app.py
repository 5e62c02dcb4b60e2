import random

import pytest

from sortviz.app import (
    ALGORITHMS,
    INPUT_CHAR_LIMIT,
    MAX_ARRAY_ELEMENTS,
    PANEL_WIDTH,
    SorterApp,
    build_buttons,
)


def test_initial_message():
    assert SorterApp().message == "Delay: 50ms. Add numbers or select sort."


def test_type_character_accepts_digits_up_to_limit():
    app = SorterApp()
    for char in "12a-34567":
        app.type_character(char)
    assert app.input == "12345"
    assert len(app.input) == INPUT_CHAR_LIMIT


def test_backspace_removes_last_and_tolerates_empty():
    app = SorterApp()
    app.type_character("4")
    app.type_character("2")
    app.backspace()
    assert app.input == "4"
    app.backspace()
    app.backspace()
    assert app.input == ""


def test_submit_adds_number():
    app = SorterApp()
    for char in "042":
        app.type_character(char)
    app.submit()
    assert app.data == [42]
    assert app.input == ""
    assert app.message == "Num added. Total: 1. Delay: 50ms"


def test_submit_without_input_changes_nothing():
    app = SorterApp()
    before = app.message
    app.submit()
    assert app.data == []
    assert app.message == before


def test_submit_at_capacity_discards_input():
    app = SorterApp()
    app.data.extend([1] * MAX_ARRAY_ELEMENTS)
    app.type_character("9")
    app.submit()
    assert len(app.data) == MAX_ARRAY_ELEMENTS
    assert app.input == ""
    assert app.message.startswith("Max array size.")


def test_clear_empties_data_and_input():
    app = SorterApp()
    app.data.extend([3, 2, 1])
    app.type_character("7")
    app.clear()
    assert app.data == []
    assert app.input == ""
    assert app.message.startswith("Array cleared.")


def test_randomize_fills_within_range():
    app = SorterApp()
    app.randomize(random.Random(7))
    assert len(app.data) == min(50, MAX_ARRAY_ELEMENTS)
    assert all(1 <= value <= 200 for value in app.data)
    assert app.message == f"Rand. array (sz {len(app.data)}). Delay: 50ms"


def test_randomize_is_reproducible_with_seed():
    first, second = SorterApp(), SorterApp()
    first.randomize(random.Random(3))
    second.randomize(random.Random(3))
    assert first.data == second.data


def test_speed_controls_clamp():
    app = SorterApp()
    for _ in range(10):
        app.speed_up()
    assert app.playback.delay_ms == 0.0
    assert app.message == "Delay: 0ms. Add numbers or select sort."
    for _ in range(40):
        app.slow_down()
    assert app.playback.delay_ms == 300.0


def test_build_buttons_order_and_layout():
    buttons = build_buttons(None)
    assert [b.id for b in buttons] == ["random_array", "clear_array", *ALGORITHMS]
    assert all(0 <= b.rect.left and b.rect.right <= PANEL_WIDTH for b in buttons)
    for index, button in enumerate(buttons):
        for other in buttons[index + 1 :]:
            assert not button.rect.colliderect(other.rect)


def test_build_buttons_uses_font_factory():
    sizes = []
    buttons = build_buttons(lambda size: sizes.append(size) or size)
    assert [b.font for b in buttons] == [b.char_size for b in buttons]
    assert sizes[:2] == [16, 16]


@pytest.mark.parametrize(
    "active, enabled, hovered, expected",
    [
        (False, False, True, (100, 100, 100)),
        (True, True, True, (30, 80, 180)),
        (False, True, True, (100, 170, 230)),
        (False, True, False, (50, 120, 200)),
    ],
)
def test_button_colours(active, enabled, hovered, expected):
    button = build_buttons(None)[0]
    button.set_active(active)
    button.set_enabled(enabled)
    assert button.colours(hovered)[0] == expected


def test_disabled_button_does_not_contain_point():
    button = build_buttons(None)[0]
    centre = button.rect.center
    assert button.contains(centre)
    button.set_enabled(False)
    assert not button.contains(centre)