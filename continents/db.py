''' Database logic '''

import logging

from threading import Lock

from .model import Continent

class Database:
    ''' Stores continents in memory, keyed by name '''

    def __init__(self):
        self._lock = Lock()
        self._data: dict[str, Continent] = {}

    def get(self, key: str) -> Continent|None:
        ''' Get the continent stored under the specified key '''

        with self._lock:
            result = self._data.get(key, None)
            logging.debug('Got get request for key "%s". Result was "%s".', key, str(result))

        return result

    def put(self, key: str, value: Continent) -> None:
        ''' Store a new continent or replace an existing one '''

        with self._lock:
            logging.debug('Got put request to store "%s" for key "%s"', value, key)
            self._data[key] = value

    def get_all(self) -> list[tuple[str, Continent]]:
        ''' Get a list of all key-continent pairs '''

        with self._lock:
            return list(self._data.items())

    def __len__(self):
        with self._lock:
            return len(self._data)

    def __contains__(self, key):
        with self._lock:
            return key in self._data
