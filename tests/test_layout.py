import pytest

from boincview.layout import (
    COLUMN_NAMES,
    KeypadTranslator,
    adjust_task_height_percent,
    column_title,
    task_height,
)


def test_task_height_minimum_is_five():
    assert task_height(100, 0) == 5


def test_task_height_leaves_room_for_messages():
    height = 100
    assert task_height(height, 10000) == height - 10


def test_task_height_in_range_is_proportional():
    assert task_height(100, 5000) == 50


@pytest.mark.parametrize("percent", [0, 1000, 3000, 5000, 7000, 9000, 10000])
def test_task_height_within_bounds(percent):
    height = 60
    rows = task_height(height, percent)
    assert 5 <= rows <= height - 10


def test_task_height_monotonic():
    heights = [task_height(80, p) for p in range(0, 10001, 500)]
    assert heights == sorted(heights)


def test_plus_shrinks_task_list():
    assert adjust_task_height_percent(40, 5000, "+") < 5000


def test_minus_grows_task_list():
    assert adjust_task_height_percent(40, 3000, "-") > 3000


def test_keys_given_as_codes():
    assert adjust_task_height_percent(40, 5000, ord("+")) == adjust_task_height_percent(
        40, 5000, "+"
    )


def test_plus_ignored_when_list_too_small():
    assert adjust_task_height_percent(100, 0, "+") == 0


def test_minus_ignored_when_list_too_large():
    assert adjust_task_height_percent(100, 10000, "-") == 10000


def test_percent_never_negative():
    assert adjust_task_height_percent(10000, 5, "+") == 0


@pytest.mark.parametrize("key", ["x", "q", 27, "++"])
def test_other_keys_leave_percent(key):
    assert adjust_task_height_percent(50, 4321, key) == 4321


def test_column_title_all_visible():
    assert column_title(COLUMN_NAMES, lambda i: True) == "".join(COLUMN_NAMES)


def test_column_title_none_visible():
    assert column_title(COLUMN_NAMES, lambda i: False) == ""


def test_column_title_flags_sequence():
    names = ["a", "b", "c"]
    assert column_title(names, [True, False, True]) == "ac"


def test_column_title_short_flags_hide_rest():
    assert column_title(["a", "b", "c"], [True]) == "a"


def test_keypad_plus_sequence():
    translator = KeypadTranslator()
    results = [translator.feed(code) for code in (27, 79, 107)]
    assert results[:2] == [27, 79]
    assert results[2] == ord("+")


def test_keypad_minus_sequence():
    translator = KeypadTranslator()
    results = [translator.feed(code) for code in (27, 79, 109)]
    assert results[2] == ord("-")


def test_plain_codes_pass_through():
    translator = KeypadTranslator()
    assert translator.feed(107) == 107
    assert translator.feed(109) == 109


def test_sequence_must_be_consecutive():
    translator = KeypadTranslator()
    results = [translator.feed(code) for code in (27, 1, 79, 107)]
    assert results[-1] == 107