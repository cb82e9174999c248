"""Tests for the rich display helpers."""

from intervalset import Interval
from intervalset.display import (
    MENU_ITEMS,
    display_declined,
    display_error,
    display_intervals,
    display_menu,
    display_success,
)


def test_display_menu(console_buffer):
    console, buf = console_buffer
    display_menu("Interval Manager", console)

    out = buf.getvalue()
    assert "=== Interval Manager ===" in out
    for number, label in enumerate(MENU_ITEMS, start=1):
        assert f"{number}. {label}" in out


def test_display_intervals_table(console_buffer):
    console, buf = console_buffer
    display_intervals(
        [Interval(start=1, end=5), Interval(start=8, end=10)], console
    )

    out = buf.getvalue()
    assert "Stored intervals" in out
    assert "[1, 5]" in out
    assert "[8, 10]" in out
    # Lengths column
    assert " 5 " in out
    assert " 3 " in out


def test_display_intervals_empty(console_buffer):
    console, buf = console_buffer
    display_intervals([], console)

    assert buf.getvalue().strip() == "No intervals stored."


def test_messages(console_buffer):
    console, buf = console_buffer
    display_success("Interval [1, 2] added.", console)
    display_declined("Interval [3, 4] not found.", console)

    out = buf.getvalue()
    assert "Interval [1, 2] added." in out
    assert "Interval [3, 4] not found." in out


def test_error_text_is_not_parsed_as_markup(console_buffer):
    console, buf = console_buffer
    display_error("Expected an integer, got '[bold]'", console)

    assert "Error: Expected an integer, got '[bold]'" in buf.getvalue()
