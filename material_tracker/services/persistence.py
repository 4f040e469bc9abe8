# material_tracker/services/persistence.py
"""
Persistence bridge - load on init, save the whole collection on every change.

The collection is stored as one JSON string under a single namespaced key.
There is no schema versioning: anything that does not parse back into
requests degrades to an empty collection.
"""

import json
import logging
from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Sequence

from sqlmodel import Session

from ..models.request import Request
from ..models.storage import StoreEntry

logger = logging.getLogger(__name__)


def serialize_requests(requests: Sequence[Request]) -> str:
    # compact, fixed key order; values written here survive save(load()) byte for byte
    return json.dumps(
        [r.to_dict() for r in requests],
        separators=(",", ":"),
        ensure_ascii=False,
    )


def deserialize_requests(raw: Optional[str]) -> List[Request]:
    """Parse a stored value. Absent or malformed values give an empty list."""
    if not raw:
        return []
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        logger.warning("Stored requests are not valid JSON (%s); starting empty.", e)
        return []

    if not isinstance(data, list):
        logger.warning("Stored requests are not a list; starting empty.")
        return []

    try:
        return [Request.from_dict(d) for d in data]
    except (KeyError, TypeError, ValueError, AttributeError) as e:
        logger.warning("Stored requests have an unexpected shape (%r); starting empty.", e)
        return []


class PersistenceBridge(ABC):
    """Load/save collaborator used by the repository."""

    @abstractmethod
    def load(self) -> List[Request]:
        pass

    @abstractmethod
    def save(self, requests: Sequence[Request]) -> None:
        pass


class KeyValueBridge(PersistenceBridge):
    """
    Bridge over a raw string key-value store.
    Subclasses only provide read_raw/write_raw for their backend.
    """

    def __init__(self, key: str):
        self.key = key

    @abstractmethod
    def read_raw(self) -> Optional[str]:
        pass

    @abstractmethod
    def write_raw(self, value: str) -> None:
        pass

    def load(self) -> List[Request]:
        return deserialize_requests(self.read_raw())

    def save(self, requests: Sequence[Request]) -> None:
        self.write_raw(serialize_requests(requests))


class InMemoryKeyValueStore(KeyValueBridge):
    """Dict-backed store, useful for development and unit tests."""

    def __init__(self, key: str = "materialRequests", initial: Optional[Dict[str, str]] = None):
        super().__init__(key)
        self.values: Dict[str, str] = dict(initial or {})

    def read_raw(self) -> Optional[str]:
        return self.values.get(self.key)

    def write_raw(self, value: str) -> None:
        self.values[self.key] = value


class SQLModelKeyValueStore(KeyValueBridge):
    """Stores the collection as a single StoreEntry row."""

    def __init__(self, engine, key: str = "materialRequests"):
        super().__init__(key)
        self.engine = engine

    def read_raw(self) -> Optional[str]:
        with Session(self.engine) as session:
            entry = session.get(StoreEntry, self.key)
            return entry.value if entry else None

    def write_raw(self, value: str) -> None:
        with Session(self.engine) as session:
            entry = session.get(StoreEntry, self.key)
            if entry is None:
                entry = StoreEntry(key=self.key, value=value)
            else:
                entry.value = value
            session.add(entry)
            session.commit()
