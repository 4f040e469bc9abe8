# material_tracker/services/tracker.py
"""
Application state: one repository plus the staging areas feeding it.

FastAPI runs sync endpoints in a threadpool; handlers take ``lock`` around
their repository work so every operation still runs to completion before
the next one starts.
"""

import threading
from typing import Optional

from ..config import settings
from ..database import create_db_and_tables, engine
from .drafts import DeliveryInputs, DraftBuilder
from .persistence import PersistenceBridge, SQLModelKeyValueStore
from .repository import RequestRepository


class Tracker:
    def __init__(self, bridge: PersistenceBridge):
        self.repository = RequestRepository.from_bridge(bridge)
        self.drafts = DraftBuilder()
        self.deliveries = DeliveryInputs()
        self.lock = threading.RLock()


# Global tracker instance
_tracker: Optional[Tracker] = None


def init_tracker(bridge: Optional[PersistenceBridge] = None) -> Tracker:
    """
    Load requests from the bridge (the configured database by default).
    Called once at startup; can be called again to reload.
    """
    global _tracker
    if bridge is None:
        create_db_and_tables()
        bridge = SQLModelKeyValueStore(engine, settings.storage_key)
    _tracker = Tracker(bridge)
    return _tracker


def get_tracker() -> Tracker:
    """Get or create the global tracker."""
    if _tracker is None:
        return init_tracker()
    return _tracker
