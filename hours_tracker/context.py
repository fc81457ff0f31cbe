import click

from .aggregation import DEFAULT_PAGE_SIZE
from .session import TrackerSession
from .storage import JsonFileStorage
from .store import EntryStore

DEFAULT_STORAGE_PATH = '~/.hours-tracker/entries.json'


class HoursTrackerContext:

    def __init__(self, config: dict = None):
        self._config = config or {}
        page_size = self._config.get('page_size', DEFAULT_PAGE_SIZE)
        try:
            self._page_size = int(page_size)
        except (TypeError, ValueError):
            raise ValueError(f'page_size must be a number, got {page_size!r}')
        if self._page_size < 1:
            raise ValueError(f'page_size must be positive, got {self._page_size}')
        self._session = None

    @property
    def storage_path(self) -> str:
        return self._config.get('storage', DEFAULT_STORAGE_PATH)

    @property
    def page_size(self) -> int:
        return self._page_size

    @property
    def export_dir(self) -> str:
        return self._config.get('export_dir', '.')

    def make_storage(self):
        return JsonFileStorage(self.storage_path)

    @property
    def session(self) -> TrackerSession:
        if self._session is None:
            store = EntryStore(self.make_storage())
            store.load()
            self._session = TrackerSession(store, page_size=self.page_size)
        return self._session


pass_tracker = click.make_pass_decorator(HoursTrackerContext)
