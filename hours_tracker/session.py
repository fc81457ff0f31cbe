"""Session state of the tracker.

``TrackerSession`` owns everything an interactive surface needs to keep
between actions: the selected date, the entry form, its field errors, the
entry being edited and the history view position. Its methods are the only
way this state changes.
"""
import logging
import typing
from dataclasses import dataclass

from .aggregation import HistoryPaginator, distinct_dates, total_hours, DEFAULT_PAGE_SIZE
from .duration import validate_duration, FORMAT_HINT
from .export import export
from .formatting import today, format_title_date
from .model.entry import TimeEntry
from .store import EntryStore

LOGGER = logging.getLogger(__name__)

TIME_REQUIRED = 'Time is required'
TIME_INVALID = f'Invalid time format. Use format like: {FORMAT_HINT}'
COMMENT_REQUIRED = 'Comment is required'


@dataclass
class EntryForm:
    time: str = ''
    comment: str = ''
    ticket_ref: str = ''


@dataclass
class FormErrors:
    time: str = ''
    comment: str = ''

    def __bool__(self):
        return bool(self.time or self.comment)


def time_error(value: str) -> str:
    if not value.strip():
        return TIME_REQUIRED
    if not validate_duration(value):
        return TIME_INVALID
    return ''


def comment_error(value: str) -> str:
    return '' if value.strip() else COMMENT_REQUIRED


class TrackerSession:

    def __init__(self, store: EntryStore, page_size: int = DEFAULT_PAGE_SIZE,
                 clock: typing.Callable[[], str] = today):
        self._store = store
        self._page_size = page_size
        self._clock = clock
        self._selected_date = clock()
        self._form = EntryForm()
        self._errors = FormErrors()
        self._editing: typing.Optional[TimeEntry] = None
        self._show_history = False
        self._current_page = 1

    @property
    def store(self) -> EntryStore:
        return self._store

    @property
    def selected_date(self) -> str:
        return self._selected_date

    @property
    def form(self) -> EntryForm:
        return self._form

    @property
    def errors(self) -> FormErrors:
        return self._errors

    @property
    def editing(self) -> typing.Optional[TimeEntry]:
        return self._editing

    @property
    def show_history(self) -> bool:
        return self._show_history

    @property
    def current_page(self) -> int:
        return self._current_page

    @property
    def max_date(self) -> str:
        return self._clock()

    @property
    def title(self) -> str:
        return format_title_date(self._selected_date, self._clock())

    def select_date(self, date: str):
        if date > self.max_date:
            raise ValueError(f'cannot log time against a future date: {date}')
        self._selected_date = date
        self._show_history = False

    def set_time(self, value: str):
        self._form.time = value
        self._errors.time = time_error(value)

    def set_comment(self, value: str):
        self._form.comment = value
        self._errors.comment = comment_error(value)

    def set_ticket_ref(self, value: str):
        self._form.ticket_ref = value

    def validate_form(self) -> bool:
        self._errors = FormErrors(time=time_error(self._form.time), comment=comment_error(self._form.comment))
        return not self._errors

    def start_edit(self, timestamp: int) -> bool:
        entry = self._store.get(timestamp)
        if entry is None:
            return False
        self._editing = entry
        self._form = EntryForm(entry.time, entry.comment, entry.ticket_ref)
        self._errors = FormErrors()
        return True

    def cancel(self):
        self._editing = None
        self._form = EntryForm()
        self._errors = FormErrors()

    def submit(self) -> typing.Optional[TimeEntry]:
        """Creates or updates an entry from the form.

        Returns the stored entry, or ``None`` when the form has errors or the
        edited entry no longer exists.
        """
        if not self.validate_form():
            return None
        form = self._form
        if self._editing is not None:
            timestamp = self._editing.timestamp
            self._store.update(timestamp, form.time, form.comment, form.ticket_ref)
            result = self._store.get(timestamp)
        else:
            result = self._store.create(form.time, form.comment, form.ticket_ref, self._selected_date)
        self.cancel()
        return result

    def delete(self, timestamp: int, confirm: typing.Callable[[], bool]) -> bool:
        if not confirm():
            LOGGER.debug('deletion of %s declined', timestamp)
            return False
        return self._store.delete(timestamp)

    def entries(self, date: str = None) -> list[TimeEntry]:
        return self._store.query_by_date(date or self._selected_date)

    def total_hours(self, date: str = None) -> float:
        return total_hours(self._store.query_all(), date or self._selected_date)

    def toggle_history(self):
        self._show_history = not self._show_history

    def paginator(self) -> HistoryPaginator:
        return HistoryPaginator(distinct_dates(self._store.query_all()), self._page_size)

    def history_page(self) -> list[str]:
        return self.paginator().page(self._current_page)

    def change_page(self, page: int):
        total = self.paginator().total_pages
        if not 1 <= page <= total:
            raise ValueError(f'page {page} is out of range 1..{total}')
        self._current_page = page

    def export(self, output_dir: str = '.') -> str:
        return export(self._store.query_all(), output_dir)
