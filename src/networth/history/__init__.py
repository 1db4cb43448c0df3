"""Time-series aggregation of historical net worth snapshots."""

from networth.history.series import (
    PeriodChange,
    SeriesPoint,
    last_n_days,
    last_n_months,
    last_n_years,
    period_changes,
)
from networth.history.snapshots import (
    merge_current_snapshot,
    parse_snapshot_date,
    rebase_snapshots,
    utc_today,
)

__all__ = [
    "PeriodChange",
    "SeriesPoint",
    "last_n_days",
    "last_n_months",
    "last_n_years",
    "merge_current_snapshot",
    "parse_snapshot_date",
    "period_changes",
    "rebase_snapshots",
    "utc_today",
]
