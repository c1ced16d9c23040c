from datetime import date, datetime

from src.team_ops.team_ops.common.datetime_utils import (
    end_of_month,
    end_of_week,
    hours_between,
    in_window,
    is_this_week,
    is_today,
    parse_iso_date,
    start_of_month,
    start_of_week,
)


def test_week_starts_on_sunday():
    wednesday = datetime(2024, 2, 14, 15, 30)

    assert start_of_week(wednesday) == datetime(2024, 2, 11, 0, 0)
    assert end_of_week(wednesday).date() == date(2024, 2, 17)
    assert end_of_week(wednesday).hour == 23


def test_sunday_and_saturday_belong_to_same_week():
    assert start_of_week(date(2024, 2, 11)) == datetime(2024, 2, 11)
    assert start_of_week(date(2024, 2, 17)) == datetime(2024, 2, 11)
    assert start_of_week(date(2024, 2, 18)) == datetime(2024, 2, 18)


def test_month_bounds_handle_leap_year():
    assert start_of_month(date(2024, 2, 14)) == datetime(2024, 2, 1)
    assert end_of_month(date(2024, 2, 14)).date() == date(2024, 2, 29)
    assert end_of_month(date(2023, 2, 14)).date() == date(2023, 2, 28)


def test_is_today_and_is_this_week():
    now = datetime(2024, 2, 14, 10, 0)

    assert is_today(date(2024, 2, 14), now=now)
    assert not is_today(datetime(2024, 2, 15, 0, 0), now=now)
    assert is_this_week(datetime(2024, 2, 17, 23, 59), now=now)
    assert not is_this_week(date(2024, 2, 10), now=now)


def test_in_window_is_inclusive():
    assert in_window(date(2024, 1, 1), date(2024, 1, 1), date(2024, 1, 31))
    assert in_window(date(2024, 1, 31), date(2024, 1, 1), date(2024, 1, 31))
    assert not in_window(date(2024, 2, 1), date(2024, 1, 1), date(2024, 1, 31))


def test_hours_between_rounds_to_two_places():
    assert hours_between(datetime(2024, 1, 1, 9, 10), datetime(2024, 1, 1, 17, 30)) == 8.33


def test_parse_iso_date():
    assert parse_iso_date("2024-02-29") == date(2024, 2, 29)
