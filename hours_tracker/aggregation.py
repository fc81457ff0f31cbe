import math
import typing

from .duration import parse_duration
from .model.entry import TimeEntry

DEFAULT_PAGE_SIZE = 5


def total_hours(entries: typing.Iterable[TimeEntry], date: str) -> float:
    return sum(parse_duration(entry.time) for entry in entries if entry.date == date)


def distinct_dates(entries: typing.Iterable[TimeEntry]) -> list[str]:
    """Dates having at least one entry, newest first.

    ``YYYY-MM-DD`` strings sort chronologically, so plain string ordering is enough.
    """
    return sorted({entry.date for entry in entries}, reverse=True)


def group_by_date(entries: typing.Iterable[TimeEntry]) -> dict[str, list[TimeEntry]]:
    groups = {}
    for entry in entries:
        groups.setdefault(entry.date, []).append(entry)
    return groups


class HistoryPaginator:

    def __init__(self, dates: typing.Sequence[str], page_size: int = DEFAULT_PAGE_SIZE):
        if page_size < 1:
            raise ValueError(f'page size must be positive, got {page_size}')
        self._dates = list(dates)
        self._page_size = page_size

    @property
    def page_size(self) -> int:
        return self._page_size

    @property
    def total_pages(self) -> int:
        return max(1, math.ceil(len(self._dates) / self._page_size))

    def page(self, number: int) -> list[str]:
        start = (number - 1) * self._page_size
        return self._dates[start:start + self._page_size]

    def has_previous(self, number: int) -> bool:
        return number > 1

    def has_next(self, number: int) -> bool:
        return number < self.total_pages
