# material_tracker/services/drafts.py
"""
Staging state that lives between user input and the repository:

  - DraftBuilder: the request being written or edited, item by item.
  - DeliveryInputs: the date/qty typed next to each line item row, keyed by
    (request_id, item_index) so ids can never collide with a separator.

Neither is persisted. Both reset after a successful submission.
"""

from typing import Any, Dict, Optional, Tuple

from ..errors import ValidationError
from ..models.request import Delivery, LineItem, Request, RequestDraft
from ..utils.helpers import is_blank, parse_int
from .repository import BAD_ITEM_QTY, MISSING_ITEM_FIELDS, RequestRepository

DeliveryKey = Tuple[str, int]


class DraftBuilder:
    """The single add/edit form of the tracker."""

    def __init__(self) -> None:
        self.draft = RequestDraft()
        self.editing_id: Optional[str] = None

    @property
    def is_editing(self) -> bool:
        return self.editing_id is not None

    def set_fields(
        self,
        date: Optional[str] = None,
        project_title: Optional[str] = None,
        warehouse: Optional[str] = None,
        notes: Optional[str] = None,
    ) -> RequestDraft:
        """Update header fields; None leaves a field as it is."""
        if date is not None:
            self.draft.date = date
        if project_title is not None:
            self.draft.project_title = project_title
        if warehouse is not None:
            self.draft.warehouse = warehouse
        if notes is not None:
            self.draft.notes = notes
        return self.draft

    def add_item(self, material: Any, unit: Any, requested_qty: Any) -> LineItem:
        if is_blank(material) or is_blank(unit) or is_blank(requested_qty):
            raise ValidationError(MISSING_ITEM_FIELDS)

        qty = parse_int(requested_qty)
        if qty is None or qty < 0:
            raise ValidationError(BAD_ITEM_QTY)

        item = LineItem(material=str(material), unit=str(unit), requested_qty=qty)
        self.draft.items.append(item)
        return item

    def remove_item(self, index: int) -> LineItem:
        if not 0 <= index < len(self.draft.items):
            raise ValidationError(f"Draft has no item #{index}")
        return self.draft.items.pop(index)

    def load_from(self, request: Request) -> RequestDraft:
        """Switch to edit mode for a stored request."""
        self.draft = RequestDraft.from_request(request)
        self.editing_id = request.id
        return self.draft

    def submit(self, repository: RequestRepository) -> Request:
        """
        Create or replace a request from the draft.
        On failure the draft is left untouched so the user can fix it.
        """
        if self.editing_id is not None:
            request = repository.update(self.editing_id, self.draft)
        else:
            request = repository.add(self.draft)
        self.reset()
        return request

    def reset(self) -> None:
        self.draft = RequestDraft()
        self.editing_id = None


class DeliveryInputs:
    """Pending delivery date/qty per line item row."""

    FIELDS = ("date", "qty")

    def __init__(self) -> None:
        self._inputs: Dict[DeliveryKey, Dict[str, Any]] = {}

    def set(self, key: DeliveryKey, field: str, value: Any) -> Dict[str, Any]:
        if field not in self.FIELDS:
            raise ValidationError(f"Unknown delivery field {field!r}")
        entry = self._inputs.setdefault(key, {"date": "", "qty": ""})
        entry[field] = value
        return dict(entry)

    def get(self, key: DeliveryKey) -> Dict[str, Any]:
        return dict(self._inputs.get(key) or {"date": "", "qty": ""})

    def submit(self, repository: RequestRepository, request_id: str, item_index: int) -> Delivery:
        key = (request_id, item_index)
        entry = self.get(key)
        delivery = repository.add_delivery(request_id, item_index, entry["date"], entry["qty"])
        self._inputs[key] = {"date": "", "qty": ""}
        return delivery

    def discard(self, request_id: str) -> int:
        """Drop every pending input of a request; item indices may no longer line up."""
        stale = [key for key in self._inputs if key[0] == request_id]
        for key in stale:
            del self._inputs[key]
        return len(stale)

    def __len__(self) -> int:
        return len(self._inputs)
