"""Regularly spaced net worth series built from sparse daily snapshots.

Each window function returns exactly ``n`` points in chronological order,
ending with the period that contains ``as_of``. Periods without a snapshot
are forward-filled with the last known value. The value carried into the
window is the most recent snapshot strictly older than the window start, or
the earliest snapshot overall when none precedes the window. With no
snapshots at all every point is zero.

All arithmetic is on calendar dates (no wall-clock times), so window
boundaries do not shift with the server's time zone. Callers derive
``as_of`` from a single clock read (see history.snapshots.utc_today).
"""

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from datetime import date, timedelta
from decimal import Decimal

from networth.models import NetWorthSnapshot

ZERO = Decimal("0")


@dataclass(frozen=True)
class SeriesPoint:
    """One chart point. ``date`` is the day, or the first day of the month/year."""

    date: date
    total: Decimal
    cash: Decimal
    investments: Decimal


@dataclass(frozen=True)
class PeriodChange:
    date: date
    change: Decimal


def _month_start(as_of: date, months_back: int) -> date:
    index = as_of.year * 12 + (as_of.month - 1) - months_back
    return date(index // 12, index % 12 + 1, 1)


def _point(period: date, snapshot: NetWorthSnapshot | None) -> SeriesPoint:
    if snapshot is None:
        return SeriesPoint(date=period, total=ZERO, cash=ZERO, investments=ZERO)
    return SeriesPoint(
        date=period,
        total=snapshot.total_value,
        cash=snapshot.cash_value,
        investments=snapshot.investment_value,
    )


def _forward_fill(
    snapshots: Iterable[NetWorthSnapshot],
    periods: Sequence[date],
    period_of: Callable[[date], date],
) -> list[SeriesPoint]:
    """Map snapshots onto ``periods`` (ascending period start dates).

    Within a period the latest snapshot wins. Snapshots sharing a date keep
    their input order, so the last one supplied wins.
    """
    if not periods:
        return []

    ordered = sorted(snapshots, key=lambda s: s.snapshot_date)

    latest_in_period: dict[date, NetWorthSnapshot] = {}
    for snapshot in ordered:
        latest_in_period[period_of(snapshot.snapshot_date)] = snapshot

    window_start = periods[0]
    last_known: NetWorthSnapshot | None = None
    for snapshot in ordered:
        if snapshot.snapshot_date >= window_start:
            break
        last_known = snapshot
    if last_known is None and ordered:
        last_known = ordered[0]

    points = []
    for period in periods:
        if period in latest_in_period:
            last_known = latest_in_period[period]
        points.append(_point(period, last_known))
    return points


def last_n_days(
    snapshots: Iterable[NetWorthSnapshot],
    n: int,
    as_of: date,
) -> list[SeriesPoint]:
    """One point per calendar day for the ``n`` days ending on ``as_of``."""
    periods = [as_of - timedelta(days=offset) for offset in range(n - 1, -1, -1)]
    return _forward_fill(snapshots, periods, lambda d: d)


def last_n_months(
    snapshots: Iterable[NetWorthSnapshot],
    n: int,
    as_of: date,
) -> list[SeriesPoint]:
    """One point per calendar month for the ``n`` months ending with ``as_of``'s month.

    Uses the latest snapshot within each month, not an average.
    """
    periods = [_month_start(as_of, offset) for offset in range(n - 1, -1, -1)]
    return _forward_fill(snapshots, periods, lambda d: d.replace(day=1))


def last_n_years(
    snapshots: Iterable[NetWorthSnapshot],
    n: int,
    as_of: date,
) -> list[SeriesPoint]:
    """One point per calendar year for the ``n`` years ending with ``as_of``'s year."""
    periods = [date(as_of.year - offset, 1, 1) for offset in range(n - 1, -1, -1)]
    return _forward_fill(snapshots, periods, lambda d: date(d.year, 1, 1))


def period_changes(points: Sequence[SeriesPoint]) -> list[PeriodChange]:
    """Change in total versus the previous point, for every point after the first."""
    return [
        PeriodChange(date=current.date, change=current.total - previous.total)
        for previous, current in zip(points, points[1:])
    ]
