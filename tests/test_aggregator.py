"""Tests for the derived dashboard statistics."""

import datetime

from wastewise_bot.core.aggregator import (
    category_breakdown,
    round_half_up_pct,
    summary_stats,
    weekly_series,
    weekly_trend,
)
from wastewise_bot.core.models import Category, SummaryStats, WasteLogEntry

D = datetime.date(2024, 5, 10)  # a Friday


def entry(category, qty, user="U", date=D, name="item"):
    return WasteLogEntry(
        date=date, category=category, item_name=name, quantity=qty, user_id=user
    )


def days_ago(n: int) -> datetime.date:
    return D - datetime.timedelta(days=n)


def test_summary_stats_example() -> None:
    entries = [
        entry(Category.RECYCLABLE, 2, "U"),
        entry(Category.LANDFILL, 1, "U"),
        entry(Category.RECYCLABLE, 5, "V"),
    ]
    assert summary_stats(entries, "U") == SummaryStats(
        total_items=3, recyclable_pct=67, compostable_pct=0, landfill_pct=33
    )


def test_summary_stats_empty_is_all_zero() -> None:
    assert summary_stats([], "U") == SummaryStats()
    assert summary_stats([entry(Category.LANDFILL, 4, "V")], "U") == SummaryStats()


def test_summary_percentages_round_independently() -> None:
    entries = [
        entry(Category.RECYCLABLE, 1),
        entry(Category.COMPOSTABLE, 1),
        entry(Category.LANDFILL, 1),
    ]
    stats = summary_stats(entries, "U")
    assert (stats.recyclable_pct, stats.compostable_pct, stats.landfill_pct) == (33, 33, 33)


def test_round_half_up() -> None:
    assert round_half_up_pct(1, 8) == 13  # 12.5
    assert round_half_up_pct(1, 200) == 1  # 0.5
    assert round_half_up_pct(5, 8) == 63  # 62.5
    assert round_half_up_pct(0, 0) == 0
    assert round_half_up_pct(-1, 8) == -12  # -12.5


def test_weekly_series_same_day_goes_in_last_bucket() -> None:
    entries = [entry(Category.RECYCLABLE, 2), entry(Category.LANDFILL, 3)]
    buckets = weekly_series(entries, "U", D)
    assert len(buckets) == 7
    assert [b.date for b in buckets] == [days_ago(n) for n in range(6, -1, -1)]
    assert all(b.total == 0 for b in buckets[:6])
    assert buckets[-1].recyclable == 2
    assert buckets[-1].landfill == 3
    assert buckets[-1].total == 5


def test_weekly_series_labels() -> None:
    labels = [b.label for b in weekly_series([], "U", D)]
    assert labels == ["Sat", "Sun", "Mon", "Tue", "Wed", "Thu", "Fri"]


def test_weekly_series_excludes_outside_window_and_other_users() -> None:
    entries = [
        entry(Category.COMPOSTABLE, 4, date=days_ago(6)),
        entry(Category.COMPOSTABLE, 9, date=days_ago(7)),
        entry(Category.COMPOSTABLE, 9, date=D + datetime.timedelta(days=1)),
        entry(Category.COMPOSTABLE, 9, user="V", date=days_ago(3)),
    ]
    buckets = weekly_series(entries, "U", D)
    assert buckets[0].compostable == 4
    assert sum(b.total for b in buckets) == 4


def test_category_breakdown_omits_absent_categories() -> None:
    entries = [
        entry(Category.LANDFILL, 1, date=days_ago(30)),
        entry(Category.RECYCLABLE, 2),
        entry(Category.LANDFILL, 4),
        entry(Category.COMPOSTABLE, 7, user="V"),
    ]
    totals = category_breakdown(entries, "U")
    assert [(t.category, t.total) for t in totals] == [
        (Category.LANDFILL, 5),
        (Category.RECYCLABLE, 2),
    ]


def test_category_breakdown_empty() -> None:
    assert category_breakdown([], "U") == []


def test_aggregates_are_pure() -> None:
    entries = [entry(Category.RECYCLABLE, 2), entry(Category.LANDFILL, 1)]
    assert summary_stats(entries, "U") == summary_stats(entries, "U")
    assert weekly_series(entries, "U", D) == weekly_series(entries, "U", D)
    assert len(entries) == 2


def test_weekly_trend_reduction() -> None:
    entries = [
        entry(Category.LANDFILL, 10, date=days_ago(8)),
        entry(Category.LANDFILL, 6, date=days_ago(2)),
        entry(Category.LANDFILL, 50, date=days_ago(20)),
    ]
    trend = weekly_trend(entries, "U", D)
    assert (trend.this_week, trend.last_week, trend.reduction_pct) == (6, 10, 40)


def test_weekly_trend_increase_is_negative() -> None:
    entries = [
        entry(Category.LANDFILL, 4, date=days_ago(13)),
        entry(Category.RECYCLABLE, 6, date=days_ago(0)),
    ]
    assert weekly_trend(entries, "U", D).reduction_pct == -50


def test_weekly_trend_without_previous_week() -> None:
    trend = weekly_trend([entry(Category.RECYCLABLE, 3)], "U", D)
    assert trend.this_week == 3
    assert trend.last_week == 0
    assert trend.reduction_pct is None
