"""Chart-ready summaries derived from the waste log.

Everything here is a pure function of its inputs and is recomputed from
scratch on each call.
"""

from __future__ import annotations

import datetime
from collections.abc import Iterable

from .models import Category, CategoryTotal, DayBucket, SummaryStats, WasteLogEntry, WeeklyTrend

WINDOW_DAYS = 7
_WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")


def round_half_up_pct(part: int, whole: int) -> int:
    """Return ``part / whole * 100`` rounded half-up, or 0 when ``whole`` is 0."""
    if whole == 0:
        return 0
    # floor(100 * part / whole + 0.5) without floating point
    return (200 * part + whole) // (2 * whole)


def _owned(entries: Iterable[WasteLogEntry], owner_user_id: str) -> list[WasteLogEntry]:
    return [e for e in entries if e.user_id == owner_user_id]


def _window_total(
    entries: list[WasteLogEntry], start: datetime.date, end: datetime.date
) -> int:
    return sum(e.quantity for e in entries if start <= e.date <= end)


def weekly_series(
    entries: Iterable[WasteLogEntry],
    owner_user_id: str,
    reference_date: datetime.date,
) -> list[DayBucket]:
    """One bucket per day from ``reference_date - 6`` to ``reference_date``."""
    owned = _owned(entries, owner_user_id)
    buckets = []
    for offset in range(WINDOW_DAYS - 1, -1, -1):
        day = reference_date - datetime.timedelta(days=offset)
        bucket = DayBucket(date=day, label=_WEEKDAYS[day.weekday()])
        for entry in owned:
            if entry.date == day:
                field = entry.category.name.lower()
                setattr(bucket, field, getattr(bucket, field) + entry.quantity)
        buckets.append(bucket)
    return buckets


def category_breakdown(
    entries: Iterable[WasteLogEntry], owner_user_id: str
) -> list[CategoryTotal]:
    """Total quantity per category over all dates.

    Only categories that occur are returned, in order of first appearance.
    """
    totals: dict[Category, int] = {}
    for entry in _owned(entries, owner_user_id):
        totals[entry.category] = totals.get(entry.category, 0) + entry.quantity
    return [CategoryTotal(category=c, total=t) for c, t in totals.items()]


def summary_stats(entries: Iterable[WasteLogEntry], owner_user_id: str) -> SummaryStats:
    """Total items and the independently rounded share of each category."""
    totals = {ct.category: ct.total for ct in category_breakdown(entries, owner_user_id)}
    total_items = sum(totals.values())
    return SummaryStats(
        total_items=total_items,
        recyclable_pct=round_half_up_pct(totals.get(Category.RECYCLABLE, 0), total_items),
        compostable_pct=round_half_up_pct(totals.get(Category.COMPOSTABLE, 0), total_items),
        landfill_pct=round_half_up_pct(totals.get(Category.LANDFILL, 0), total_items),
    )


def weekly_trend(
    entries: Iterable[WasteLogEntry],
    owner_user_id: str,
    reference_date: datetime.date,
) -> WeeklyTrend:
    """Compare the 7 days ending at ``reference_date`` with the 7 days before."""
    owned = _owned(entries, owner_user_id)
    week = datetime.timedelta(days=WINDOW_DAYS)
    this_start = reference_date - datetime.timedelta(days=WINDOW_DAYS - 1)
    this_week = _window_total(owned, this_start, reference_date)
    last_week = _window_total(owned, this_start - week, reference_date - week)
    reduction = None
    if last_week > 0:
        reduction = round_half_up_pct(last_week - this_week, last_week)
    return WeeklyTrend(this_week=this_week, last_week=last_week, reduction_pct=reduction)
