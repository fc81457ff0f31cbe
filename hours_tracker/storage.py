import abc
import json
import os
import typing

STORAGE_KEY = 'timeEntries'


class Storage:
    """Key-value persistence for the serialized entry collection."""

    @abc.abstractmethod
    def load(self) -> typing.Optional[list[dict]]:
        """Returns stored records, ``None`` when nothing was stored yet."""

    @abc.abstractmethod
    def save(self, records: list[dict]):
        pass


class MemoryStorage(Storage):

    def __init__(self, records: list[dict] = None):
        self._data = {}
        if records is not None:
            self._data[STORAGE_KEY] = json.dumps(records)
        self.saves = 0

    def load(self) -> typing.Optional[list[dict]]:
        if STORAGE_KEY not in self._data:
            return None
        return json.loads(self._data[STORAGE_KEY])

    def save(self, records: list[dict]):
        self._data[STORAGE_KEY] = json.dumps(records)
        self.saves += 1


class JsonFileStorage(Storage):

    def __init__(self, path, key: str = STORAGE_KEY):
        self._path = os.path.expanduser(path)
        self._key = key

    @property
    def path(self) -> str:
        return self._path

    def _read(self) -> dict:
        if not os.path.exists(self._path):
            return {}
        with open(self._path, 'r', encoding='utf-8') as f:
            content = json.load(f)
        if not isinstance(content, dict):
            raise ValueError(f'{self._path} does not contain a JSON object')
        return content

    def load(self) -> typing.Optional[list[dict]]:
        return self._read().get(self._key)

    def save(self, records: list[dict]):
        directory = os.path.dirname(self._path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        content = self._read()
        content[self._key] = records
        with open(self._path, 'w', encoding='utf-8') as f:
            json.dump(content, f, indent=2)
