"""Derived figures for the dashboard and reports pages.

Everything here is a pure function of its arguments: the appointment list is
treated as an immutable snapshot and a fresh result is built on every call.
Malformed input never raises. An unparseable price counts as zero and an
appointment with an unusable date or time is left out of the aggregate that
needs it.
"""

from __future__ import annotations

import logging
import re
from datetime import date, datetime, timedelta
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, List, Optional, Sequence, Tuple, Union

from salon_dashboard.schemas.analytics import AggregateResult, DateFilter, HourlyHistogram
from salon_dashboard.schemas.appointment import Appointment
from salon_dashboard.schemas.shop_config import OperatingHours

logger = logging.getLogger(__name__)

DEFAULT_OPEN_HOUR = 8
DEFAULT_CLOSE_HOUR = 20
LAST_HOUR = 23

_PRICE_NOISE = re.compile(r"[^\d,]")
_LEADING_FLOAT = re.compile(r"\d+(?:\.\d*)?|\.\d+")
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_CENTS = Decimal("0.01")


def normalize_price(value: Union[str, int, float, None]) -> float:
    """Turn a display price such as ``"R$ 1.234,50"`` into ``1234.5``."""
    if value is None:
        return 0.0
    digits = _PRICE_NOISE.sub("", str(value)).replace(",", ".", 1)
    match = _LEADING_FLOAT.match(digits)
    if not match:
        return 0.0
    return float(match.group(0))


def round_money(amount: float) -> Decimal:
    """Two-decimal rounding with ties going up, e.g. ``27.625 -> 27.63``."""
    return Decimal(amount).quantize(_CENTS, rounding=ROUND_HALF_UP)


def format_currency(amount: float) -> str:
    return f"{round_money(amount)}".replace(".", ",")


def hour_label(hour: int) -> str:
    return f"{hour:02d}h"


def _leading_int(value: Optional[str]) -> Optional[int]:
    if not value:
        return None
    match = _LEADING_INT.match(str(value).split(":", 1)[0])
    if not match:
        return None
    return int(match.group(1))


def _parse_date(value: Optional[str]) -> Optional[date]:
    if not value:
        return None
    try:
        return datetime.strptime(value.strip(), "%Y-%m-%d").date()
    except ValueError:
        return None


def week_bounds(now: datetime) -> Tuple[date, date]:
    """Sunday through Saturday of the calendar week containing ``now``."""
    today = now.date()
    start = today - timedelta(days=(today.weekday() + 1) % 7)
    return start, start + timedelta(days=6)


def filter_by_period(
    appointments: Iterable[Appointment],
    period: DateFilter,
    now: datetime,
) -> List[Appointment]:
    period = DateFilter(period)
    if period is DateFilter.all_time:
        return list(appointments)

    if period is DateFilter.today:
        first = last = now.date()
    elif period is DateFilter.this_week:
        first, last = week_bounds(now)
    else:  # pragma: no cover - closed enum
        raise ValueError(f"Unsupported date filter {period!r}")

    selected = []
    for item in appointments:
        day = _parse_date(item.date)
        if day is not None and first <= day <= last:
            selected.append(item)
    return selected


def resolve_hour_range(hours: Optional[OperatingHours]) -> Tuple[int, int]:
    """Return the inclusive ``(open, close)`` hour pair used for bucketing."""
    if hours is None:
        return DEFAULT_OPEN_HOUR, DEFAULT_CLOSE_HOUR

    open_hour = _leading_int(hours.opening)
    if open_hour is None:
        open_hour = DEFAULT_OPEN_HOUR
    open_hour = min(max(open_hour, 0), LAST_HOUR)

    close_hour = _leading_int(hours.closing)
    if close_hour is None or close_hour < open_hour or close_hour > LAST_HOUR:
        logger.debug(
            "Closing hour %r unusable with opening %s; using %s",
            hours.closing,
            open_hour,
            LAST_HOUR,
        )
        close_hour = LAST_HOUR
    return open_hour, close_hour


def build_hourly_histogram(
    appointments: Iterable[Appointment],
    hours: Optional[OperatingHours],
) -> HourlyHistogram:
    open_hour, close_hour = resolve_hour_range(hours)
    labels = [hour_label(hour) for hour in range(open_hour, close_hour + 1)]
    counts = [0] * len(labels)

    for item in appointments:
        hour = _leading_int(item.time)
        if hour is None or not open_hour <= hour <= close_hour:
            continue
        counts[hour - open_hour] += 1

    return HourlyHistogram(labels=labels, counts=counts)


def compute_kpis(appointments: Sequence[Appointment]) -> Tuple[float, int, float]:
    """Return ``(total_revenue, client_count, average_ticket)``."""
    total = sum(normalize_price(item.price) for item in appointments)
    count = len(appointments)
    average = total / count if count > 0 else 0.0
    return total, count, average


def aggregate(
    appointments: Iterable[Appointment],
    period: DateFilter,
    hours: Optional[OperatingHours],
    now: Optional[datetime] = None,
) -> AggregateResult:
    if now is None:
        now = datetime.now()
    period = DateFilter(period)

    filtered = filter_by_period(appointments, period, now)
    total, count, average = compute_kpis(filtered)
    histogram = build_hourly_histogram(filtered, hours)
    logger.debug(
        "Aggregated %s appointments for period %s (revenue %.2f)",
        count,
        period.value,
        total,
    )

    return AggregateResult(
        total_revenue=float(round_money(total)),
        client_count=count,
        average_ticket=float(round_money(average)),
        hourly_labels=histogram.labels,
        hourly_counts=histogram.counts,
        total_revenue_display=format_currency(total),
        average_ticket_display=format_currency(average),
    )
