from .request import Delivery, LineItem, Request, RequestDraft
from .storage import StoreEntry

__all__ = [
    "Delivery",
    "LineItem",
    "Request",
    "RequestDraft",
    "StoreEntry",
]
