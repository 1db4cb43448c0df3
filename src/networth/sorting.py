"""Click-driven ordering for tabular records (holdings, expenses, snapshots).

Direction state machine: the first request on a key sorts descending
(highest first), repeated requests on the same key toggle asc/desc, and a
request on a different key starts again at descending.

Comparison policy, in priority order:
1. both values missing -> equal
2. one value missing -> missing sorts first ascending, last descending
3. both dates (date/datetime or ISO ``YYYY-MM-DD...`` strings) -> chronological
4. both numbers -> numeric
5. otherwise -> locale-style string comparison

Sorting is stable and never mutates the input.
"""

import re
import unicodedata
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from datetime import date, datetime, timezone
from enum import Enum
from functools import cmp_to_key
from numbers import Number
from typing import Any

from networth.exceptions import InvalidSortKeyError

_ISO_DATE_PREFIX = re.compile(r"^\d{4}-\d{2}-\d{2}")


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True)
class SortConfig:
    """Current sort state. An empty config leaves records in input order."""

    key: str | None = None
    direction: SortDirection | None = None

    @property
    def is_active(self) -> bool:
        return self.key is not None and self.direction is not None


def next_sort_config(current: SortConfig, key: str) -> SortConfig:
    """Advance the sort state after a request to sort by ``key``.

    Raises:
        InvalidSortKeyError: If key is empty.
    """
    if not key:
        raise InvalidSortKeyError("sort key must be a non-empty string")
    if current.key != key:
        return SortConfig(key=key, direction=SortDirection.DESC)
    if current.direction is SortDirection.DESC:
        return SortConfig(key=key, direction=SortDirection.ASC)
    return SortConfig(key=key, direction=SortDirection.DESC)


def _as_datetime(value: Any) -> datetime | None:
    """Return a naive UTC datetime for date-like values, else None."""
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc).replace(tzinfo=None)
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if isinstance(value, str) and _ISO_DATE_PREFIX.match(value):
        try:
            return _as_datetime(datetime.fromisoformat(value))
        except ValueError:
            return None
    return None


def _is_number(value: Any) -> bool:
    return isinstance(value, Number) and not isinstance(value, bool)


def _collation_key(value: str) -> tuple[str, str, str]:
    # base letters, then accents, then lower-case before upper-case
    decomposed = unicodedata.normalize("NFKD", value)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return base.casefold(), decomposed.casefold(), value.swapcase()


def _cmp(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


def _natural_compare(a: Any, b: Any) -> int:
    a_date, b_date = _as_datetime(a), _as_datetime(b)
    if a_date is not None and b_date is not None:
        return _cmp(a_date, b_date)
    if _is_number(a) and _is_number(b):
        return _cmp(a, b)
    return _cmp(_collation_key(str(a)), _collation_key(str(b)))


def compare_values(a: Any, b: Any, direction: SortDirection) -> int:
    """Three-way comparison of two field values under ``direction``."""
    ascending = direction is SortDirection.ASC
    if a is None and b is None:
        return 0
    if a is None:
        return -1 if ascending else 1
    if b is None:
        return 1 if ascending else -1

    result = _natural_compare(a, b)
    return result if ascending else -result


def _field(record: Any, key: str) -> Any:
    if isinstance(record, Mapping):
        return record.get(key)
    return getattr(record, key, None)


def sort_records(records: Iterable[Any], config: SortConfig) -> list[Any]:
    """Return a new list of ``records`` ordered by ``config``.

    Records may be mappings or objects; a missing field counts as missing.
    """
    items = list(records)
    if not config.is_active:
        return items

    key, direction = config.key, config.direction
    return sorted(
        items,
        key=cmp_to_key(lambda x, y: compare_values(_field(x, key), _field(y, key), direction)),
    )


class TableSorter:
    """Holds the sort state of one table and applies it to record lists.

    Args:
        default: Initial sort state (unsorted when omitted).
    """

    def __init__(self, default: SortConfig | None = None) -> None:
        self._config = default or SortConfig()

    @property
    def config(self) -> SortConfig:
        return self._config

    def request_sort(self, key: str) -> SortConfig:
        self._config = next_sort_config(self._config, key)
        return self._config

    def sort(self, records: Iterable[Any]) -> list[Any]:
        return sort_records(records, self._config)
