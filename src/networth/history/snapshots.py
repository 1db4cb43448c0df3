"""Snapshot normalisation before charting: date parsing, rebasing, today's row."""

from collections.abc import Iterable
from dataclasses import replace
from datetime import date, datetime, timezone

from networth.logging import get_logger
from networth.models import ExchangeRates, NetWorthSnapshot
from networth.valuation.conversion import convert_to_base, lookup_rate

logger = get_logger(__name__)


def utc_today() -> date:
    """Current UTC calendar day. The only place the engine reads the clock."""
    return datetime.now(timezone.utc).date()


def parse_snapshot_date(value: date | datetime | str) -> date:
    """Normalise a stored snapshot date to a UTC calendar day.

    Accepts ``date``, ``datetime`` (aware values are converted to UTC first)
    or an ISO string (``YYYY-MM-DD`` or a full timestamp).

    Raises:
        ValueError: If value is not a date, a datetime or an ISO string.
    """
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise ValueError(f"snapshot date must be a date or ISO string, got {type(value).__name__}")
    if len(value) == 10:
        return date.fromisoformat(value)
    return parse_snapshot_date(datetime.fromisoformat(value))


def rebase_snapshots(
    snapshots: Iterable[NetWorthSnapshot],
    base_currency: str,
    rates: ExchangeRates | None,
) -> list[NetWorthSnapshot]:
    """Re-express snapshots recorded under another base currency.

    Snapshots whose currency has no usable rate keep their raw values and
    original currency label.
    """
    rebased = []
    for snapshot in snapshots:
        if snapshot.currency == base_currency:
            rebased.append(snapshot)
            continue
        if lookup_rate(snapshot.currency, rates) is None:
            logger.warning(
                "snapshot_rebase_skipped",
                snapshot_date=snapshot.snapshot_date.isoformat(),
                currency=snapshot.currency,
                base_currency=base_currency,
            )
            rebased.append(snapshot)
            continue
        rebased.append(
            replace(
                snapshot,
                total_value=convert_to_base(snapshot.total_value, snapshot.currency, base_currency, rates),
                cash_value=convert_to_base(snapshot.cash_value, snapshot.currency, base_currency, rates),
                investment_value=convert_to_base(
                    snapshot.investment_value, snapshot.currency, base_currency, rates
                ),
                currency=base_currency,
            )
        )
    return rebased


def merge_current_snapshot(
    snapshots: Iterable[NetWorthSnapshot],
    current: NetWorthSnapshot,
) -> list[NetWorthSnapshot]:
    """Replace the row for ``current.snapshot_date`` (or add one), sorted by date."""
    merged = [s for s in snapshots if s.snapshot_date != current.snapshot_date]
    merged.append(current)
    return sorted(merged, key=lambda s: s.snapshot_date)
