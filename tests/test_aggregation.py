import os
import sys
from datetime import datetime
from typing import Optional

import pytest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from salon_dashboard.schemas.analytics import DateFilter
from salon_dashboard.schemas.appointment import Appointment
from salon_dashboard.schemas.shop_config import OperatingHours
from salon_dashboard.services.aggregation import (
    aggregate,
    build_hourly_histogram,
    compute_kpis,
    filter_by_period,
    format_currency,
    hour_label,
    normalize_price,
    resolve_hour_range,
    round_money,
    week_bounds,
)

# 2026-10-21 is a Wednesday.
WEDNESDAY = datetime(2026, 10, 21, 15, 30)


def _appt(
    appointment_id: int = 1,
    *,
    time: Optional[str] = "10:00",
    date: Optional[str] = "2026-10-21",
    price: Optional[str] = "R$ 35,00",
) -> Appointment:
    return Appointment(
        id=appointment_id,
        nome=f"Cliente {appointment_id}",
        servico="Corte Masculino",
        horario=time,
        data=date,
        preco=price,
    )


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("R$ 1.234,50", 1234.5),
        ("35,00", 35.0),
        ("R$ 55,00", 55.0),
        ("", 0.0),
        (None, 0.0),
        ("grátis", 0.0),
        ("-20,00", 20.0),
        (42, 42.0),
    ],
)
def test_normalize_price(raw, expected) -> None:
    assert normalize_price(raw) == pytest.approx(expected)


def test_format_currency_rounds_to_two_decimals_with_comma() -> None:
    assert format_currency(59.996) == "60,00"
    assert format_currency(0) == "0,00"
    assert format_currency(1234.5) == "1234,50"


def test_currency_ties_round_up() -> None:
    assert format_currency(0.125) == "0,13"
    assert format_currency(27.625) == "27,63"
    assert str(round_money(2.675)) == "2.67"  # binary value sits below the tie


def test_average_ticket_tie_rounds_up() -> None:
    appointments = [_appt(1, price="R$ 30,00"), _appt(2, price="R$ 25,25")]

    result = aggregate(appointments, DateFilter.all_time, None, now=WEDNESDAY)

    assert result.total_revenue_display == "55,25"
    assert result.average_ticket_display == "27,63"
    assert result.average_ticket == pytest.approx(27.63)


def test_hour_label_is_zero_padded() -> None:
    assert hour_label(8) == "08h"
    assert hour_label(20) == "20h"
    assert hour_label(0) == "00h"


def test_histogram_scenario_with_configured_hours() -> None:
    hours = OperatingHours(abertura="09:00", fechamento="20:00")
    appointments = [_appt(1, time="09:15"), _appt(2, time="09:45"), _appt(3, time="14:00")]

    histogram = build_hourly_histogram(appointments, hours)

    assert len(histogram.labels) == 12
    assert histogram.labels[0] == "09h"
    assert histogram.labels[-1] == "20h"
    counts = dict(zip(histogram.labels, histogram.counts))
    assert counts["09h"] == 2
    assert counts["14h"] == 1
    assert sum(histogram.counts) == 3


def test_inverted_hours_clamp_close_to_last_hour() -> None:
    hours = OperatingHours(abertura="10:00", fechamento="05:00")

    histogram = build_hourly_histogram([], hours)

    assert histogram.labels[0] == "10h"
    assert histogram.labels[-1] == "23h"
    assert len(histogram.counts) == 14
    assert histogram.counts == [0] * 14


def test_missing_hours_fall_back_to_dashboard_default() -> None:
    assert resolve_hour_range(None) == (8, 20)
    histogram = build_hourly_histogram([_appt(time="08:30")], None)
    assert histogram.labels[0] == "08h"
    assert len(histogram.labels) == 13
    assert histogram.counts[0] == 1


@pytest.mark.parametrize(
    "opening, closing, expected",
    [
        ("abc", "18:00", (8, 18)),
        ("09:00", "", (9, 23)),
        ("09:00", "xx:00", (9, 23)),
        ("09:00", "25:00", (9, 23)),
        ("-2:00", "06:00", (0, 6)),
        ("23:00", "23:30", (23, 23)),
    ],
)
def test_malformed_hours_never_produce_empty_range(opening, closing, expected) -> None:
    hours = OperatingHours(abertura=opening, fechamento=closing)
    open_hour, close_hour = resolve_hour_range(hours)

    assert (open_hour, close_hour) == expected
    assert len(build_hourly_histogram([], hours).labels) == close_hour - open_hour + 1 >= 1


def test_unusable_or_out_of_range_times_are_dropped() -> None:
    hours = OperatingHours(abertura="09:00", fechamento="18:00")
    appointments = [
        _appt(1, time=None),
        _appt(2, time=""),
        _appt(3, time="noon"),
        _appt(4, time="07:59"),
        _appt(5, time="19:00"),
        _appt(6, time="18:59"),
    ]

    histogram = build_hourly_histogram(appointments, hours)

    assert sum(histogram.counts) == 1
    assert dict(zip(histogram.labels, histogram.counts))["18h"] == 1


def test_histogram_is_idempotent() -> None:
    hours = OperatingHours(abertura="09:00", fechamento="12:00")
    appointments = [_appt(1, time="09:00"), _appt(2, time="11:10")]

    assert build_hourly_histogram(appointments, hours) == build_hourly_histogram(
        appointments, hours
    )


def test_week_bounds_run_sunday_to_saturday() -> None:
    start, end = week_bounds(WEDNESDAY)
    assert start.isoformat() == "2026-10-18"
    assert end.isoformat() == "2026-10-24"

    sunday_start, _ = week_bounds(datetime(2026, 10, 18, 0, 0))
    assert sunday_start.isoformat() == "2026-10-18"


def test_this_week_filter_includes_preceding_sunday_only() -> None:
    appointments = [
        _appt(1, date="2026-10-18"),
        _appt(2, date="2026-10-24"),
        _appt(3, date="2026-10-25"),
        _appt(4, date="2026-10-17"),
        _appt(5, date=None),
    ]

    selected = filter_by_period(appointments, DateFilter.this_week, WEDNESDAY)

    assert [item.id for item in selected] == [1, 2]


def test_today_filter_ignores_time_of_day_and_bad_dates() -> None:
    appointments = [
        _appt(1, date="2026-10-21"),
        _appt(2, date="2026-10-20"),
        _appt(3, date="21/10/2026"),
        _appt(4, date=""),
    ]

    selected = filter_by_period(appointments, DateFilter.today, WEDNESDAY)

    assert [item.id for item in selected] == [1]


def test_all_time_keeps_everything_in_order() -> None:
    appointments = [_appt(3, date=None), _appt(1, date="2020-01-01"), _appt(2, date="bad")]

    selected = filter_by_period(appointments, DateFilter.all_time, WEDNESDAY)

    assert [item.id for item in selected] == [3, 1, 2]
    assert selected is not appointments


def test_kpis_avoid_division_by_zero() -> None:
    assert compute_kpis([]) == (0.0, 0, 0.0)


def test_kpis_sum_prices_and_average() -> None:
    appointments = [
        _appt(1, price="R$ 35,00"),
        _appt(2, price="R$ 60,00"),
        _appt(3, price=None),
    ]

    total, count, average = compute_kpis(appointments)

    assert total == pytest.approx(95.0)
    assert count == 3
    assert average * count == pytest.approx(total)


def test_aggregate_combines_filter_kpis_and_histogram() -> None:
    hours = OperatingHours(abertura="09:00", fechamento="20:00")
    appointments = [
        _appt(1, time="09:15", date="2026-10-21", price="R$ 35,00"),
        _appt(2, time="22:00", date="2026-10-21", price="R$ 25,00"),
        _appt(3, time="10:00", date="2026-10-01", price="R$ 80,00"),
    ]

    result = aggregate(appointments, DateFilter.today, hours, now=WEDNESDAY)

    assert result.client_count == 2
    assert result.total_revenue == pytest.approx(60.0)
    assert result.average_ticket == pytest.approx(30.0)
    assert result.total_revenue_display == "60,00"
    assert result.average_ticket_display == "30,00"
    assert len(result.hourly_labels) == len(result.hourly_counts) == 12
    assert sum(result.hourly_counts) == 1
    assert sum(result.hourly_counts) <= result.client_count


def test_aggregate_empty_period() -> None:
    result = aggregate([_appt(date="2020-01-01")], DateFilter.this_week, None, now=WEDNESDAY)

    assert result.client_count == 0
    assert result.average_ticket == 0
    assert result.average_ticket_display == "0,00"
    assert result.hourly_counts == [0] * 13


def test_hourly_total_matches_count_when_every_time_is_in_range() -> None:
    hours = OperatingHours(abertura="09:00", fechamento="20:00")
    appointments = [_appt(index, time=f"{hour:02d}:00") for index, hour in enumerate(range(9, 21))]

    result = aggregate(appointments, DateFilter.all_time, hours, now=WEDNESDAY)

    assert sum(result.hourly_counts) == result.client_count == 12
    assert result.hourly_counts == [1] * 12
