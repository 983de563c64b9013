"""Tests for the element ring buffer."""
from __future__ import annotations

from waveload.buffer import ElementBuffer
from waveload.types import Element


# --- Allocation ---

def test_total_includes_overscan_on_both_sides():
    buf = ElementBuffer(visible_length=10, wave_length=3)
    assert len(buf) == 14
    assert buf.display_start == 2
    assert buf.display_end == 12


def test_single_wave_has_no_overscan():
    buf = ElementBuffer(visible_length=5, wave_length=1)
    assert len(buf) == 5
    assert buf.display_start == 0
    assert buf.display_end == 5


def test_elements_start_at_origin_with_given_alpha():
    buf = ElementBuffer(visible_length=4, wave_length=2, alpha=42)
    assert all(e == Element(x=0, y=0, alpha=42) for e in buf.elements)


def test_elements_are_distinct_objects():
    buf = ElementBuffer(visible_length=4, wave_length=2)
    buf[0].y = 99
    assert buf[1].y == 0


# --- resize() ---

def test_resize_reallocates_everything():
    buf = ElementBuffer(visible_length=10, wave_length=3)
    old = buf.elements
    buf[5].y = 7

    result = buf.resize(10, 5, alpha=60)

    assert result is buf
    assert len(buf) == 18
    assert buf.wave_length == 5
    assert buf.visible_length == 10
    assert buf.display_start == 4
    assert buf.display_end == 14
    assert buf.elements is not old
    assert all(e.y == 0 and e.alpha == 60 for e in buf.elements)


# --- assign_x() ---

def test_assign_x_lays_out_visible_window():
    buf = ElementBuffer(visible_length=4, wave_length=3)
    buf.assign_x(element_width=10, interval=5, left_padding=3)
    assert [e.x for e in buf.visible()] == [3, 18, 33, 48]


def test_assign_x_leaves_overscan_untouched():
    buf = ElementBuffer(visible_length=4, wave_length=3)
    buf.assign_x(element_width=10, interval=5)
    assert buf[0].x == 0
    assert buf[1].x == 0
    assert buf[len(buf) - 1].x == 0


# --- visible() / snapshot() ---

def test_visible_is_the_drawn_window():
    buf = ElementBuffer(visible_length=6, wave_length=4)
    visible = buf.visible()
    assert len(visible) == 6
    assert visible[0] is buf[3]
    assert visible[-1] is buf[8]


def test_snapshot_copies_state():
    buf = ElementBuffer(visible_length=3, wave_length=1, alpha=100)
    buf[1].y = 12
    snap = buf.snapshot()
    assert snap == [(0, 0, 100), (0, 12, 100), (0, 0, 100)]
    buf[1].y = 0
    assert snap[1] == (0, 12, 100)
