import pytest

from boincview.colorstring import ColorString
from boincview.scrollbar import ScrollBar
from boincview.scrollview import ScrollView


def make_view(lines: int, height: int = 5, scrollbar=None) -> ScrollView:
    view = ScrollView(height, scrollbar)
    for i in range(lines):
        view.add_text(0, "line %d", i)
    return view


def test_add_text_formats_line():
    view = ScrollView(3)
    line = view.add_text(7, "%s-%d", "a", 3)
    assert line.text() == "a-3"
    assert view.content[-1] is line
    assert len(view) == 1


def test_add_string_keeps_object():
    view = ScrollView(3)
    cs = ColorString(1, "x")
    view.add_string(cs)
    assert view.content == [cs]


def test_scroll_does_nothing_when_content_fits():
    view = make_view(3, height=5)
    assert view.scroll_to(2) is False
    assert view.start_index == 0


def test_scroll_clamps_to_bounds():
    view = make_view(12, height=5)
    view.scroll_to(100)
    assert view.start_index == len(view) - view.height
    view.scroll_to(-100)
    assert view.start_index == 0


def test_visible_lines_are_window():
    view = make_view(12, height=5)
    view.scroll_to(3)
    lines = view.visible_lines()
    assert [l.text() for l in lines] == [f"line {i}" for i in range(3, 8)]


def test_visible_lines_update_scrollbar():
    bar = ScrollBar(5)
    view = make_view(12, height=5, scrollbar=bar)
    view.scroll_to(2)
    view.visible_lines()
    assert (bar.vmin, bar.vmax, bar.vpos1, bar.vpos2) == (0, 12, 2, 7)
    assert bar.visible is True


def test_autoscroll_jumps_to_end():
    view = make_view(12, height=5)
    view.set_autoscroll(True)
    assert view.autoscroll is True
    assert view.visible_lines()[-1].text() == "line 11"


def test_autoscroll_short_content_starts_at_zero():
    view = make_view(2, height=5)
    view.set_autoscroll(True)
    assert view.start_index == 0


def test_set_start_index_near_end_is_pulled_up():
    view = make_view(12, height=5)
    view.set_start_index(10)
    assert view.start_index == len(view) - view.height
    view.set_start_index(2)
    assert view.start_index == 2


def test_clear_resets():
    view = make_view(12, height=5)
    view.scroll_to(4)
    view.clear()
    assert len(view) == 0
    assert view.start_index == 0
    assert view.visible_lines() == []


def test_max_content_width():
    view = ScrollView(4)
    view.add_text(0, "ab")
    view.add_text(0, "абвгд")
    view.add_text(0, "")
    assert view.max_content_width() == len("абвгд")
    assert ScrollView(4).max_content_width() == 0


def test_page_up_disables_autoscroll():
    view = make_view(12, height=6)
    view.set_autoscroll(True)
    before = view.start_index
    view.page_up()
    assert view.autoscroll is False
    assert view.start_index == before - view.height // 2


def test_home_and_end():
    view = make_view(12, height=5)
    view.end()
    assert view.start_index == len(view) - view.height
    assert view.autoscroll is False
    view.home()
    assert view.start_index == 0


@pytest.mark.parametrize("new_height", [3, 8, 20])
def test_resize_with_autoscroll_keeps_end_visible(new_height):
    view = make_view(12, height=5)
    view.set_autoscroll(True)
    view.resize(new_height)
    assert view.start_index == max(len(view) - new_height, 0)