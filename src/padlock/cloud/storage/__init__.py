"""
Key-value storage contract.

Records implement ``Storable`` (key/serialize/deserialize); stores implement
``KeyValueStore``. ``MemoryStore`` keeps everything in process.
"""

from .exceptions import DecodingError, EncodingError, NotFoundError, StorageError
from .interfaces import KeyValueStore, Storable
from .memory import MemoryStore

__all__ = [
    "Storable",
    "KeyValueStore",
    "MemoryStore",
    "StorageError",
    "EncodingError",
    "DecodingError",
    "NotFoundError",
]
