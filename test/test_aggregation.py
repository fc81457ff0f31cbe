"""
Tests for per-date aggregation and history pagination.
"""

import pytest

from hours_tracker.aggregation import HistoryPaginator, distinct_dates, group_by_date, total_hours
from hours_tracker.model.entry import TimeEntry


def make_entry(date, time, timestamp=0):
    return TimeEntry(time=time, comment="work", ticket_ref="", timestamp=timestamp, date=date)


@pytest.fixture
def entries():
    return [
        make_entry("2024-01-01", "1h", 1),
        make_entry("2024-01-01", "30m", 2),
        make_entry("2024-01-02", "2h", 3),
    ]


@pytest.mark.unit
def test_total_hours(entries):
    assert total_hours(entries, "2024-01-01") == 1.5
    assert total_hours(entries, "2024-01-02") == 2
    assert total_hours(entries, "2024-01-03") == 0


@pytest.mark.unit
def test_distinct_dates_newest_first(entries):
    assert distinct_dates(entries) == ["2024-01-02", "2024-01-01"]


@pytest.mark.unit
def test_distinct_dates_across_year_boundary():
    entries = [make_entry(date, "1h") for date in ("2023-12-31", "2024-01-01", "2023-02-28", "2024-01-01")]
    assert distinct_dates(entries) == ["2024-01-01", "2023-12-31", "2023-02-28"]


@pytest.mark.unit
def test_group_by_date_keeps_first_occurrence_order():
    entries = [
        make_entry("2024-01-01", "1h", 1),
        make_entry("2024-01-03", "1h", 2),
        make_entry("2024-01-01", "2h", 3),
    ]
    groups = group_by_date(entries)
    assert list(groups) == ["2024-01-01", "2024-01-03"]
    assert [entry.timestamp for entry in groups["2024-01-01"]] == [1, 3]


@pytest.fixture
def twelve_dates():
    return [f"2024-01-{day:02d}" for day in range(12, 0, -1)]


@pytest.mark.unit
def test_paginator_pages(twelve_dates):
    paginator = HistoryPaginator(twelve_dates, page_size=5)

    assert paginator.total_pages == 3
    assert paginator.page(1) == twelve_dates[:5]
    assert len(paginator.page(2)) == 5
    assert paginator.page(3) == ["2024-01-02", "2024-01-01"]


@pytest.mark.unit
def test_paginator_out_of_range_page_is_not_clamped(twelve_dates):
    assert HistoryPaginator(twelve_dates).page(4) == []


@pytest.mark.unit
def test_paginator_minimum_one_page():
    paginator = HistoryPaginator([])
    assert paginator.page_size == 5
    assert paginator.total_pages == 1
    assert paginator.page(1) == []
    assert not paginator.has_next(1)


@pytest.mark.unit
def test_paginator_navigation_bounds(twelve_dates):
    paginator = HistoryPaginator(twelve_dates, page_size=5)
    assert not paginator.has_previous(1)
    assert paginator.has_next(1)
    assert paginator.has_previous(3)
    assert not paginator.has_next(3)


@pytest.mark.unit
def test_paginator_rejects_bad_page_size():
    with pytest.raises(ValueError):
        HistoryPaginator([], page_size=0)
