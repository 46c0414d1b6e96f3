import pytest

from alarmtimer.target_time import TargetTimeForm, format_target_time


def test_format_zero():
    assert format_target_time(0, 0, 0) == "00 : 00 : 00"


def test_format_pads_each_field():
    assert format_target_time(1, 2, 3) == "01 : 02 : 03"


@pytest.mark.parametrize(
    "hours,minutes,seconds",
    [(24, 0, 0), (99, 0, 0), (0, 60, 0), (0, 0, 60), (-1, 0, 0)],
)
def test_format_invalid_time_of_day_is_empty(hours, minutes, seconds):
    assert format_target_time(hours, minutes, seconds) == ""


def test_format_fields_round_trip():
    text = format_target_time(23, 59, 58)
    assert [int(part) for part in text.split(" : ")] == [23, 59, 58]


def test_new_form_has_no_target():
    form = TargetTimeForm()
    assert form.target_time == ""
    assert (form.hours, form.minutes, form.seconds) == (0, 0, 0)


def test_accept_stores_and_returns_target():
    form = TargetTimeForm()
    result = form.accept(0, 5, 30)
    assert result == form.target_time
    assert result == format_target_time(0, 5, 30)
    assert (form.hours, form.minutes, form.seconds) == (0, 5, 30)


def test_accept_clamps_to_field_ranges():
    form = TargetTimeForm()
    form.accept(150, 70, -5)
    assert (form.hours, form.minutes, form.seconds) == (99, 59, 0)
    assert form.target_time == ""


def test_reset_zeroes_everything():
    form = TargetTimeForm()
    form.accept(3, 4, 5)
    form.reset()
    assert (form.hours, form.minutes, form.seconds) == (0, 0, 0)
    assert form.target_time == "00 : 00 : 00"