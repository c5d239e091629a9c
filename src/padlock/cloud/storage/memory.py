"""Dict-backed key-value store."""

import structlog

from .exceptions import NotFoundError
from .interfaces import KeyValueStore, Storable

logger = structlog.get_logger(__name__)


class MemoryStore(KeyValueStore):
    """In-process store keeping serialized records in a dict."""

    def __init__(self) -> None:
        self._data: dict[bytes, bytes] = {}

    def get(self, record: Storable) -> None:
        key = record.key()
        data = self._data.get(key)
        if data is None:
            raise NotFoundError("No record stored under key", key=key)
        record.deserialize(data)

    def put(self, record: Storable) -> None:
        key = record.key()
        self._data[key] = record.serialize()
        logger.debug("storage.put", key=key.decode("utf-8", errors="replace"))

    def delete(self, record: Storable) -> bool:
        key = record.key()
        removed = self._data.pop(key, None) is not None
        if removed:
            logger.debug("storage.delete", key=key.decode("utf-8", errors="replace"))
        return removed

    def exists(self, record: Storable) -> bool:
        return record.key() in self._data

    def __len__(self) -> int:
        return len(self._data)
