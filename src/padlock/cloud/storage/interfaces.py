"""Storage interfaces."""

from abc import ABC, abstractmethod


class Storable(ABC):
    """A record that can be kept in a key-value store."""

    @abstractmethod
    def key(self) -> bytes:
        """Return the key the record is stored under."""
        pass

    @abstractmethod
    def serialize(self) -> bytes:
        """Encode the full record."""
        pass

    @abstractmethod
    def deserialize(self, data: bytes) -> None:
        """Populate the record from bytes produced by ``serialize``."""
        pass


class KeyValueStore(ABC):
    """Abstract base class for key-value stores holding ``Storable`` records."""

    @abstractmethod
    def get(self, record: Storable) -> None:
        """Load the value stored under ``record.key()`` into ``record``."""
        pass

    @abstractmethod
    def put(self, record: Storable) -> None:
        """Store ``record`` under its key, replacing any previous value."""
        pass

    @abstractmethod
    def delete(self, record: Storable) -> bool:
        """Delete the value stored under ``record.key()``."""
        pass

    @abstractmethod
    def exists(self, record: Storable) -> bool:
        """Check if a value is stored under ``record.key()``."""
        pass
