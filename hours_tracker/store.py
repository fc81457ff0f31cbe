import dataclasses
import logging
import time
import typing

from .model.entry import TimeEntry
from .storage import Storage

LOGGER = logging.getLogger(__name__)


def now_millis() -> int:
    return int(time.time() * 1000)


class EntryStore:
    """Ordered in-memory entry collection written through to a storage.

    Validation of ``time`` and ``comment`` happens before entries get here.
    """

    def __init__(self, storage: Storage, clock: typing.Callable[[], int] = now_millis):
        self._storage = storage
        self._clock = clock
        self._entries: list[TimeEntry] = []
        self._last_timestamp = 0
        self._unreadable = []
        self._load_failed = False

    def load(self):
        self._entries = []
        self._unreadable = []
        self._load_failed = False
        try:
            records = self._storage.load()
            if records is not None and not isinstance(records, list):
                raise ValueError(f'expected a list of entries, got {type(records).__name__}')
        except (OSError, ValueError) as e:
            LOGGER.warning('cannot load entries, changes will not be saved: %s', e)
            self._load_failed = True
            records = None
        for record in records or []:
            try:
                self._entries.append(TimeEntry.from_record(record))
            except (KeyError, ValueError, TypeError) as e:
                LOGGER.warning('skipping unreadable entry %r: %s', record, e)
                self._unreadable.append(record)
        self._last_timestamp = max((entry.timestamp for entry in self._entries), default=0)
        LOGGER.debug('loaded %d entries', len(self._entries))

    def _save(self):
        if self._load_failed:
            LOGGER.warning('stored entries could not be read, not overwriting them')
            return
        try:
            # unreadable records are written back untouched
            self._storage.save([entry.to_record() for entry in self._entries] + self._unreadable)
        except OSError as e:
            LOGGER.warning('cannot save entries, changes are kept in memory only: %s', e)

    def _next_timestamp(self) -> int:
        # monotonic, so two entries created within the same millisecond never share an identity
        self._last_timestamp = max(self._clock(), self._last_timestamp + 1)
        return self._last_timestamp

    def create(self, time: str, comment: str, ticket_ref: str, date: str) -> TimeEntry:
        entry = TimeEntry(time=time, comment=comment, ticket_ref=ticket_ref or '',
                          timestamp=self._next_timestamp(), date=date)
        self._entries.append(entry)
        self._save()
        return dataclasses.replace(entry)

    def update(self, timestamp: int, time: str, comment: str, ticket_ref: str) -> bool:
        matched = False
        for entry in self._entries:
            if entry.timestamp == timestamp:
                entry.time = time
                entry.comment = comment
                entry.ticket_ref = ticket_ref or ''
                matched = True
        self._save()
        return matched

    def delete(self, timestamp: int) -> bool:
        remaining = [entry for entry in self._entries if entry.timestamp != timestamp]
        removed = len(remaining) != len(self._entries)
        self._entries = remaining
        self._save()
        return removed

    def get(self, timestamp: int) -> typing.Optional[TimeEntry]:
        return next((dataclasses.replace(entry) for entry in self._entries if entry.timestamp == timestamp), None)

    def query_by_date(self, date: str) -> list[TimeEntry]:
        return [dataclasses.replace(entry) for entry in self._entries if entry.date == date]

    def query_all(self) -> list[TimeEntry]:
        return [dataclasses.replace(entry) for entry in self._entries]

    def __len__(self):
        return len(self._entries)
