# material_tracker/services/repository.py

import copy
import logging
from typing import Any, Iterator, List, Optional

from sqlalchemy.exc import SQLAlchemyError

from ..errors import AddressingError, ValidationError
from ..models.request import Delivery, Request, RequestDraft
from ..utils.helpers import is_blank, parse_int
from .identifiers import next_request_id
from .persistence import PersistenceBridge

logger = logging.getLogger(__name__)

MISSING_REQUEST_FIELDS = "Please fill all required fields and add at least one item."
MISSING_DELIVERY_FIELDS = "Please enter supply date and quantity"
MISSING_ITEM_FIELDS = "Please fill all item fields"
BAD_ITEM_QTY = "Requested quantity must be a whole number of zero or more"
NEW_REQUEST_WITH_DELIVERIES = "A new request cannot already have deliveries"


def validate_draft(draft: RequestDraft) -> None:
    if (
        is_blank(draft.date)
        or is_blank(draft.project_title)
        or is_blank(draft.warehouse)
        or not draft.items
    ):
        raise ValidationError(MISSING_REQUEST_FIELDS)

    for item in draft.items:
        if is_blank(item.material) or is_blank(item.unit):
            raise ValidationError(MISSING_ITEM_FIELDS)
        qty = item.requested_qty
        if isinstance(qty, bool) or not isinstance(qty, int) or qty < 0:
            raise ValidationError(BAD_ITEM_QTY)


def coerce_quantity(value: Any) -> int:
    """
    Delivery quantity policy: text that does not start with an integer is
    recorded as 0 instead of being rejected. Logged so the coercion is
    never silent.
    """
    qty = parse_int(value)
    if qty is None:
        logger.warning("Delivery quantity %r is not a number; recording 0.", value)
        return 0
    return qty


class RequestRepository:
    """
    Owns the request collection, newest first.

    Every mutating method mutates the in-memory list and then saves the
    whole collection through the bridge. Status is never stored here.
    """

    def __init__(self, bridge: PersistenceBridge, requests: Optional[List[Request]] = None):
        self.bridge = bridge
        self._requests: List[Request] = list(requests or [])

    @classmethod
    def from_bridge(cls, bridge: PersistenceBridge) -> "RequestRepository":
        repo = cls(bridge)
        repo.load()
        return repo

    # ---------- reads ----------

    def load(self) -> None:
        self._requests = self.bridge.load()
        logger.info("Loaded %d material request(s).", len(self._requests))

    def list(self) -> List[Request]:
        return list(self._requests)

    def get(self, request_id: str) -> Request:
        return self._requests[self._index_of(request_id)]

    def __len__(self) -> int:
        return len(self._requests)

    def __iter__(self) -> Iterator[Request]:
        return iter(list(self._requests))

    # ---------- mutations ----------

    def add(self, draft: RequestDraft) -> Request:
        validate_draft(draft)
        # deliveries are only ever appended to stored requests
        if any(item.supplied for item in draft.items):
            raise ValidationError(NEW_REQUEST_WITH_DELIVERIES)
        request = self._from_draft(next_request_id(self._requests), draft)
        self._requests.insert(0, request)
        self._persist()
        logger.info(
            "Created request %s (%s, %d item(s)).",
            request.id, request.project_title, len(request.items),
        )
        return request

    def update(self, request_id: str, draft: RequestDraft) -> Request:
        validate_draft(draft)
        idx = self._index_of(request_id)
        request = self._from_draft(request_id, draft)
        self._requests[idx] = request
        self._persist()
        logger.info("Updated request %s.", request_id)
        return request

    def remove(self, request_id: str) -> Request:
        idx = self._index_of(request_id)
        removed = self._requests.pop(idx)
        self._persist()
        logger.info("Deleted request %s.", request_id)
        return removed

    def add_delivery(self, request_id: str, item_index: int, date: Any, qty: Any) -> Delivery:
        """
        Append a delivery to one line item. Nothing else on the request
        changes; requested quantities are never touched.
        """
        if is_blank(date) or is_blank(qty):
            raise AddressingError(MISSING_DELIVERY_FIELDS, status_code=400)

        request = self.get(request_id)
        if not isinstance(item_index, int) or not 0 <= item_index < len(request.items):
            raise AddressingError(f"Request {request_id} has no item #{item_index}")

        delivery = Delivery(date=str(date), qty=coerce_quantity(qty))
        request.items[item_index].supplied.append(delivery)
        self._persist()
        logger.info(
            "Recorded delivery of %d on %s for request %s item %d.",
            delivery.qty, delivery.date, request_id, item_index,
        )
        return delivery

    # ---------- helpers ----------

    def _index_of(self, request_id: str) -> int:
        for i, r in enumerate(self._requests):
            if r.id == request_id:
                return i
        raise AddressingError(f"Request {request_id} not found")

    @staticmethod
    def _from_draft(request_id: str, draft: RequestDraft) -> Request:
        return Request(
            id=request_id,
            date=draft.date,
            project_title=draft.project_title,
            warehouse=draft.warehouse,
            notes=draft.notes or "",
            items=copy.deepcopy(draft.items),
        )

    def _persist(self) -> None:
        # in-memory state stays authoritative if the write fails
        try:
            self.bridge.save(self._requests)
        except (SQLAlchemyError, OSError):
            logger.exception("Saving %d request(s) failed; keeping in-memory state.", len(self._requests))
