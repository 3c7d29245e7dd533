"""
Chronological ordering of academic periods.

Every standing computation depends on the same ordering of periods, so it
lives here once: by session ascending, then First Semester before Second
Semester within a session.
"""

import logging
from functools import cmp_to_key

from ..models import Period

logger = logging.getLogger(__name__)


def period_sort_key(period: Period) -> tuple:
    """
    Sort key for a period.

    Sessions are "YYYY/YYYY+1" with zero-padded 4-digit years, so plain
    string order is chronological order.
    """
    return (period.session, period.semester.order)


def compare_periods(a: Period, b: Period) -> int:
    """
    Three-way comparison of two periods.

    Returns -1 if a is earlier than b, 1 if later, 0 if they are the same
    (session, semester) pair. The order is total: no two distinct periods
    compare equal.
    """
    key_a, key_b = period_sort_key(a), period_sort_key(b)
    if key_a < key_b:
        return -1
    if key_a > key_b:
        return 1
    return 0


def order_periods(records) -> list:
    """
    Distinct periods present in the records, earliest first.

    Args:
        records: Iterable of ResultRecord

    Returns:
        [Period, ...] with no duplicates
    """
    periods = {r.period for r in records}
    return sorted(periods, key=cmp_to_key(compare_periods))


def dedupe_records(records) -> list:
    """
    Resolve duplicate (session, semester, course code) records.

    DUPLICATE HANDLING:
    Upstream should never send two results for the same course in the same
    period. When it does, the LAST record in input order wins. The kept
    record takes the position of the first occurrence so the relative
    order of everything else is unchanged.
    """
    latest = {}
    for record in records:
        if record.key in latest:
            logger.warning(
                "Duplicate result for %s in %s; keeping the later record",
                record.course_code, record.period,
            )
        latest[record.key] = record
    return list(latest.values())


def chronological(records) -> list:
    """De-duplicated records sorted by period (stable within a period)."""
    return sorted(dedupe_records(records), key=lambda r: period_sort_key(r.period))


def group_by_period(records) -> list:
    """
    De-duplicated records grouped per period, in chronological order.

    Returns:
        [(Period, [ResultRecord, ...]), ...]
    """
    groups = {}
    for record in chronological(records):
        groups.setdefault(record.period, []).append(record)
    return list(groups.items())
